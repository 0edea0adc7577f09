from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class CandidateStatus(str, Enum):
    """Review outcome of a candidate."""

    PENDING_REVIEW = "Pending Review"
    SHORTLISTED = "Shortlisted"
    REJECTED = "Rejected"


class Candidate(BaseModel):
    """One applicant record built from an uploaded file reference."""

    name: str
    experience: str
    skills: str
    qualifications: str
    status: CandidateStatus = CandidateStatus.PENDING_REVIEW

    model_config = ConfigDict(extra="forbid", validate_assignment=True)
