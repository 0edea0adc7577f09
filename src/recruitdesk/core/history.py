"""Summary statistics for vacancy outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from ..schemas import CandidateStatus, Vacancy


@dataclass(slots=True)
class VacancySummary:
    """Applicant counts for one vacancy."""

    vacancy_id: int
    title: str
    total_applicants: int
    accepted_count: int
    rejected_count: int
    pending_count: int


class HistoryAggregator:
    """Derive read-only counts from a vacancy's candidate list.

    Candidates still pending review count toward the total only. The vacancy
    does not have to be closed.
    """

    def summarize(self, vacancy: Vacancy) -> VacancySummary:
        counts = {status: 0 for status in CandidateStatus}
        for candidate in vacancy.candidates:
            counts[candidate.status] += 1
        return VacancySummary(
            vacancy_id=vacancy.id,
            title=vacancy.title,
            total_applicants=len(vacancy.candidates),
            accepted_count=counts[CandidateStatus.SHORTLISTED],
            rejected_count=counts[CandidateStatus.REJECTED],
            pending_count=counts[CandidateStatus.PENDING_REVIEW],
        )

    def summarize_many(self, vacancies: Iterable[Vacancy]) -> list[VacancySummary]:
        return [self.summarize(vacancy) for vacancy in vacancies]
