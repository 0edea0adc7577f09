from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .candidate import Candidate


class Vacancy(BaseModel):
    """Job opening with an ordered candidate list."""

    id: int
    title: str = ""
    description: str = ""
    closing_date: str = ""
    contact: str = ""
    candidates: list[Candidate] = Field(default_factory=list)
    is_closed: bool = False

    model_config = ConfigDict(extra="forbid", validate_assignment=True)


class RegistrySnapshot(BaseModel):
    """Serializable state of a vacancy registry."""

    vacancies: list[Vacancy] = Field(default_factory=list)
    pool: list[Candidate] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")
