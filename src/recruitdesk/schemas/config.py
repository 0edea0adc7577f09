"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..adapters.upload import CandidateFactoryConfig


class ShortlistingSettings(BaseModel):
    ratio: float = Field(default=0.2, ge=0.0, le=1.0)

    model_config = ConfigDict(extra="forbid")


class CandidateSettings(BaseModel):
    experience_min_years: int | None = Field(default=None, ge=0)
    experience_max_years: int | None = Field(default=None, ge=0)
    skills: str | None = None
    qualifications: str | None = None
    seed: int | None = None

    model_config = ConfigDict(extra="forbid")

    @model_validator(mode="after")
    def _check_bounds(self) -> "CandidateSettings":
        # an unset bound falls back to the factory default
        defaults = CandidateFactoryConfig()
        low = self.experience_min_years
        high = self.experience_max_years
        if low is None:
            low = defaults.experience_min_years
        if high is None:
            high = defaults.experience_max_years
        if low > high:
            raise ValueError("experience_min_years must not exceed experience_max_years")
        return self


class AppConfig(BaseModel):
    shortlisting: ShortlistingSettings | None = None
    candidates: CandidateSettings | None = None

    model_config = ConfigDict(extra="forbid")

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {}
        if self.shortlisting is not None:
            settings["shortlisting"] = self.shortlisting.model_dump(exclude_none=True)
        if self.candidates is not None:
            candidate_settings = self.candidates.model_dump(exclude_none=True)
            if candidate_settings:
                settings["candidates"] = candidate_settings
        return settings


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    return AppConfig.model_validate(raw)
