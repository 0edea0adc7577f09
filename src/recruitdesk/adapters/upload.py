"""Candidate factory for uploaded CV file references."""

from __future__ import annotations

import random
import re
from dataclasses import dataclass
from typing import Iterable

from ..schemas import Candidate, CandidateStatus

# A dot followed by one or more characters that are neither dots nor slashes.
_EXTENSION_PATTERN = re.compile(r"\.[^/.]+$")


@dataclass
class CandidateFactoryConfig:
    """Placeholder attributes assigned to uploaded candidates."""

    experience_min_years: int = 1
    experience_max_years: int = 10
    skills: str = "Communication, Teamwork, Problem-Solving"
    qualifications: str = "Bachelor's Degree"
    seed: int | None = None


class UploadCandidateFactory:
    """Build pending candidates from uploaded file names."""

    def __init__(
        self,
        *,
        config: CandidateFactoryConfig | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._config = config or CandidateFactoryConfig()
        self._rng = rng or random.Random(self._config.seed)

    def from_upload(self, file_name: str) -> Candidate:
        years = self._rng.randint(
            self._config.experience_min_years,
            self._config.experience_max_years,
        )
        return Candidate(
            name=display_name(file_name),
            experience=f"{years} years",
            skills=self._config.skills,
            qualifications=self._config.qualifications,
            status=CandidateStatus.PENDING_REVIEW,
        )

    def from_uploads(self, file_names: Iterable[str]) -> list[Candidate]:
        return [self.from_upload(name) for name in file_names]


def display_name(file_name: str) -> str:
    """Return the base name of ``file_name`` without its last extension.

    ``"cv/resume.final.pdf"`` becomes ``"resume.final"``; a name without an
    extension is returned as-is.
    """

    base = file_name.rsplit("/", 1)[-1]
    return _EXTENSION_PATTERN.sub("", base)
