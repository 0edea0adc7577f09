"""Core shortlisting and history components."""

from __future__ import annotations

from typing import MutableSequence, Protocol, runtime_checkable

# NOTE: keep imports explicit for export clarity.
from ..schemas import Candidate
from .history import HistoryAggregator, VacancySummary
from .shortlisting import ShortlistingConfig, ShortlistingEngine, ShortlistResult


@runtime_checkable
class SelectionRule(Protocol):
    """Contract for rewriting the statuses of a candidate batch."""

    def shortlist(self, candidates: MutableSequence[Candidate]) -> ShortlistResult:
        """Assign a final status to every candidate without reordering."""


__all__ = [
    "SelectionRule",
    "ShortlistingEngine",
    "ShortlistingConfig",
    "ShortlistResult",
    "HistoryAggregator",
    "VacancySummary",
]
