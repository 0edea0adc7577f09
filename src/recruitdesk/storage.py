"""JSON snapshot persistence and audit logging for the CLI layer."""

from __future__ import annotations

import json
from pathlib import Path

import pendulum
import structlog
from pydantic import ValidationError

from . import __version__
from .registry import VacancyRegistry
from .schemas import RegistrySnapshot


class SnapshotError(ValueError):
    """Raised when a registry snapshot cannot be read."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Invalid snapshot {path}: {reason}")
        self.path = path
        self.reason = reason


class SnapshotStore:
    """Load and save registry state as a JSON document."""

    def __init__(self, path: Path):
        self._path = path
        self._logger = structlog.get_logger(__name__)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> VacancyRegistry:
        if not self._path.exists():
            return VacancyRegistry()
        with self._path.open("r", encoding="utf-8") as handle:
            try:
                data = json.load(handle)
            except json.JSONDecodeError as exc:
                raise SnapshotError(self._path, f"invalid JSON ({exc})") from exc
            except UnicodeDecodeError as exc:
                raise SnapshotError(self._path, f"invalid UTF-8 ({exc})") from exc
        if not isinstance(data, dict):
            raise SnapshotError(self._path, "document must be a JSON object")
        if "state" not in data:
            raise SnapshotError(self._path, "missing 'state' section")
        try:
            snapshot = RegistrySnapshot.model_validate(data["state"])
        except ValidationError as exc:
            raise SnapshotError(self._path, str(exc)) from exc
        self._logger.debug(
            "snapshot.loaded",
            path=str(self._path),
            vacancy_count=len(snapshot.vacancies),
            pool_size=len(snapshot.pool),
        )
        return VacancyRegistry.from_snapshot(snapshot)

    def save(self, registry: VacancyRegistry) -> None:
        snapshot = registry.snapshot()
        payload = {
            "metadata": {
                "saved_at": pendulum.now("UTC").to_iso8601_string(),
                "app_version": __version__,
            },
            "state": snapshot.model_dump(mode="json"),
        }
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(
            json.dumps(payload, ensure_ascii=False, indent=2),
            encoding="utf-8",
        )
        self._logger.debug(
            "snapshot.saved",
            path=str(self._path),
            vacancy_count=len(snapshot.vacancies),
        )


class AuditLogger:
    """Append-only audit logger writing JSON lines."""

    def __init__(self, path: Path):
        self._path = path
        self._path.parent.mkdir(parents=True, exist_ok=True)

    def append(self, record: dict) -> None:
        entry = {"timestamp": pendulum.now("UTC").to_iso8601_string(), **record}
        with self._path.open("a", encoding="utf-8") as handle:
            handle.write(json.dumps(entry, ensure_ascii=False))
            handle.write("\n")
