"""Adapters turning uploaded file references into candidates."""

from __future__ import annotations

from typing import Iterable, Protocol, runtime_checkable

from ..schemas import Candidate
from .upload import CandidateFactoryConfig, UploadCandidateFactory


@runtime_checkable
class CandidateSource(Protocol):
    """Candidate factory contract.

    Implementations build ``Candidate`` records from file references. Only the
    reference string is consulted; file contents are never read.
    """

    def from_upload(self, file_name: str) -> Candidate:
        """Return a pending candidate for a single uploaded file."""

    def from_uploads(self, file_names: Iterable[str]) -> list[Candidate]:
        """Return pending candidates for a batch, preserving order."""


__all__ = ["CandidateSource", "CandidateFactoryConfig", "UploadCandidateFactory"]
