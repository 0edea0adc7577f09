"""Operator-facing recruitment service."""

from __future__ import annotations

from typing import Iterable

import structlog

from .adapters import CandidateSource
from .core import HistoryAggregator, SelectionRule, ShortlistResult, VacancySummary
from .registry import VacancyRegistry
from .schemas import Candidate, Vacancy
from .storage import AuditLogger

POOL_SCOPE = "pool"
VACANCY_SCOPE = "vacancy"


class RecruitmentService:
    """Coordinate the registry, candidate factory, shortlisting and history.

    Uploads and shortlisting runs go either to one vacancy or, when no
    vacancy id is given, to the registry's undifferentiated pool.
    """

    def __init__(
        self,
        *,
        registry: VacancyRegistry,
        factory: CandidateSource,
        engine: SelectionRule,
        aggregator: HistoryAggregator | None = None,
        audit_logger: AuditLogger | None = None,
    ) -> None:
        self._registry = registry
        self._factory = factory
        self._engine = engine
        self._aggregator = aggregator or HistoryAggregator()
        self._audit_logger = audit_logger
        self._logger = structlog.get_logger(__name__)

    @property
    def registry(self) -> VacancyRegistry:
        return self._registry

    def create_vacancy(
        self,
        title: str,
        description: str,
        closing_date: str,
        contact: str,
    ) -> int:
        vacancy = self._registry.create_vacancy(title, description, closing_date, contact)
        self._logger.info("vacancy.created", vacancy_id=vacancy.id, title=vacancy.title)
        return vacancy.id

    def list_open(self) -> list[Vacancy]:
        return self._registry.list_open()

    def list_closed(self) -> list[Vacancy]:
        return self._registry.list_closed()

    def upload(
        self,
        file_names: Iterable[str],
        vacancy_id: int | None = None,
    ) -> list[Candidate]:
        candidates = self._factory.from_uploads(file_names)
        with self._registry.lock:
            if vacancy_id is None:
                self._registry.add_to_pool(candidates)
            elif self._registry.get(vacancy_id) is None:
                self._logger.warning(
                    "candidates.attach_skipped",
                    vacancy_id=vacancy_id,
                    candidate_count=len(candidates),
                )
                return candidates
            else:
                self._registry.attach(vacancy_id, candidates)
        self._logger.info(
            "candidates.uploaded",
            scope=POOL_SCOPE if vacancy_id is None else VACANCY_SCOPE,
            vacancy_id=vacancy_id,
            candidate_count=len(candidates),
        )
        return candidates

    def shortlist(self, vacancy_id: int | None = None) -> ShortlistResult | None:
        with self._registry.lock:
            if vacancy_id is None:
                batch = self._registry.pool
            else:
                batch = self._registry.candidates_of(vacancy_id)
                if batch is None:
                    self._logger.warning("shortlist.skipped", vacancy_id=vacancy_id)
                    return None
            result = self._engine.shortlist(batch)

        scope = POOL_SCOPE if vacancy_id is None else VACANCY_SCOPE
        if self._audit_logger:
            self._audit_logger.append(
                {
                    "scope": scope,
                    "vacancy_id": vacancy_id,
                    "threshold": result.threshold,
                    "shortlisted_count": result.shortlisted_count,
                    "rejected_count": result.rejected_count,
                    "statuses": [
                        {"name": candidate.name, "status": candidate.status.value}
                        for candidate in result.candidates
                    ],
                }
            )
        self._logger.info(
            "shortlist.completed",
            scope=scope,
            vacancy_id=vacancy_id,
            threshold=result.threshold,
            shortlisted_count=result.shortlisted_count,
            rejected_count=result.rejected_count,
        )
        return result

    def close(self, vacancy_id: int) -> None:
        with self._registry.lock:
            known = self._registry.get(vacancy_id) is not None
            self._registry.close(vacancy_id)
        if not known:
            self._logger.warning("vacancy.close_skipped", vacancy_id=vacancy_id)
            return
        self._logger.info("vacancy.closed", vacancy_id=vacancy_id)

    def summarize(self, vacancy_id: int) -> VacancySummary | None:
        with self._registry.lock:
            vacancy = self._registry.get(vacancy_id)
            if vacancy is None:
                return None
            return self._aggregator.summarize(vacancy)

    def history(self) -> list[VacancySummary]:
        with self._registry.lock:
            return self._aggregator.summarize_many(self._registry.list_closed())
