"""Pydantic schema definitions for vacancies and candidates."""

from __future__ import annotations

from .candidate import Candidate, CandidateStatus
from .vacancy import RegistrySnapshot, Vacancy

__all__ = [
    "Candidate",
    "CandidateStatus",
    "RegistrySnapshot",
    "Vacancy",
]
