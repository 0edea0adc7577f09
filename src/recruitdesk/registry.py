"""In-memory vacancy registry and candidate pool."""

from __future__ import annotations

import threading
from typing import Iterable

from .schemas import Candidate, RegistrySnapshot, Vacancy


class VacancyRegistry:
    """Own the vacancies of one session and the undifferentiated candidate pool.

    Ids are assigned as one more than the number of vacancies held, and
    vacancies are never removed, so ids are never reused. Operations against
    an unknown id are no-ops; callers check membership via ``get`` or the
    list methods. Every mutation happens under ``lock``.
    """

    def __init__(
        self,
        vacancies: Iterable[Vacancy] | None = None,
        pool: Iterable[Candidate] | None = None,
    ) -> None:
        self._vacancies: list[Vacancy] = list(vacancies or [])
        self._pool: list[Candidate] = list(pool or [])
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    @property
    def pool(self) -> list[Candidate]:
        return self._pool

    def __len__(self) -> int:
        return len(self._vacancies)

    def create_vacancy(
        self,
        title: str,
        description: str,
        closing_date: str,
        contact: str,
    ) -> Vacancy:
        with self._lock:
            vacancy = Vacancy(
                id=len(self._vacancies) + 1,
                title=title,
                description=description,
                closing_date=closing_date,
                contact=contact,
            )
            self._vacancies.append(vacancy)
            return vacancy

    def get(self, vacancy_id: int) -> Vacancy | None:
        with self._lock:
            for vacancy in self._vacancies:
                if vacancy.id == vacancy_id:
                    return vacancy
        return None

    def all(self) -> list[Vacancy]:
        with self._lock:
            return list(self._vacancies)

    def list_open(self) -> list[Vacancy]:
        with self._lock:
            return [vacancy for vacancy in self._vacancies if not vacancy.is_closed]

    def list_closed(self) -> list[Vacancy]:
        with self._lock:
            return [vacancy for vacancy in self._vacancies if vacancy.is_closed]

    def close(self, vacancy_id: int) -> None:
        with self._lock:
            vacancy = self.get(vacancy_id)
            if vacancy is not None:
                vacancy.is_closed = True

    def candidates_of(self, vacancy_id: int) -> list[Candidate] | None:
        vacancy = self.get(vacancy_id)
        return vacancy.candidates if vacancy is not None else None

    def attach(self, vacancy_id: int, candidates: Iterable[Candidate]) -> None:
        with self._lock:
            vacancy = self.get(vacancy_id)
            if vacancy is not None:
                vacancy.candidates.extend(candidates)

    def add_to_pool(self, candidates: Iterable[Candidate]) -> None:
        with self._lock:
            self._pool.extend(candidates)

    def snapshot(self) -> RegistrySnapshot:
        with self._lock:
            return RegistrySnapshot.model_validate(
                {
                    "vacancies": [v.model_dump(mode="python") for v in self._vacancies],
                    "pool": [c.model_dump(mode="python") for c in self._pool],
                }
            )

    @classmethod
    def from_snapshot(cls, snapshot: RegistrySnapshot) -> "VacancyRegistry":
        return cls(vacancies=snapshot.vacancies, pool=snapshot.pool)
