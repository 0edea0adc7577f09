"""Positional shortlisting of candidate batches."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import MutableSequence

from ..schemas import Candidate, CandidateStatus


@dataclass
class ShortlistingConfig:
    """Share of each batch, from the front, that gets shortlisted."""

    ratio: float = 0.2


@dataclass(slots=True)
class ShortlistResult:
    """Outcome of one shortlisting run."""

    candidates: list[Candidate]
    threshold: int
    shortlisted_count: int
    rejected_count: int

    @property
    def shortlisted(self) -> list[Candidate]:
        return self.candidates[: self.threshold]

    @property
    def rejected(self) -> list[Candidate]:
        return self.candidates[self.threshold :]


class ShortlistingEngine:
    """Rewrite candidate statuses by position.

    The first ``floor(n * ratio)`` candidates of a batch are shortlisted and
    the rest rejected. Nothing about the candidates themselves is consulted, so
    batches of fewer than five candidates have no shortlisted entries at the
    default ratio.
    """

    def __init__(self, *, config: ShortlistingConfig | None = None) -> None:
        self._config = config or ShortlistingConfig()

    def threshold(self, size: int) -> int:
        return math.floor(size * self._config.ratio)

    def shortlist(self, candidates: MutableSequence[Candidate]) -> ShortlistResult:
        """Rewrite ``status`` on every candidate in place, keeping order."""
        threshold = self.threshold(len(candidates))
        for index, candidate in enumerate(candidates):
            candidate.status = (
                CandidateStatus.SHORTLISTED
                if index < threshold
                else CandidateStatus.REJECTED
            )
        return ShortlistResult(
            candidates=list(candidates),
            threshold=threshold,
            shortlisted_count=threshold,
            rejected_count=len(candidates) - threshold,
        )
