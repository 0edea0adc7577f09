"""Typer CLI entrypoint for vacancy tracking and shortlisting."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterator, List, Optional

import typer
import yaml
from pydantic import ValidationError

from .container import create_container
from .logging import configure_logging
from .schemas import Candidate, Vacancy
from .schemas.config import load_config
from .service import RecruitmentService
from .storage import AuditLogger, SnapshotError, SnapshotStore

app = typer.Typer(help="Vacancy tracking and candidate shortlisting CLI.")

DEFAULT_STATE_PATH = Path("recruitdesk-state.json")


@dataclass
class CliState:
    store: SnapshotStore
    settings: dict[str, Any] = field(default_factory=dict)


@app.callback()
def configure(
    ctx: typer.Context,
    state: Path = typer.Option(DEFAULT_STATE_PATH, dir_okay=False, help="Registry state file (JSON)."),
    config: Optional[Path] = typer.Option(None, exists=True, readable=True, dir_okay=False, help="YAML config path."),
    log_level: str = typer.Option("WARNING", help="Log level for structured logging."),
    seed: Optional[int] = typer.Option(None, help="Seed for placeholder experience years."),
) -> None:
    """Manage vacancies, candidates and shortlisting runs."""
    settings = _load_settings(config)
    if seed is not None:
        settings.setdefault("candidates", {})["seed"] = seed

    configure_logging(log_level)
    ctx.obj = CliState(store=SnapshotStore(state), settings=settings)


@app.command()
def create(
    ctx: typer.Context,
    title: str = typer.Option(..., help="Vacancy title."),
    description: str = typer.Option(..., help="Vacancy description."),
    closing_date: str = typer.Option(..., help="Closing date, stored as given."),
    contact: str = typer.Option(..., help="Contact details."),
) -> None:
    """Create a vacancy and print its id."""
    with _session(ctx) as service:
        vacancy_id = service.create_vacancy(title, description, closing_date, contact)
    typer.echo(f"Created vacancy {vacancy_id}.")


@app.command("list")
def list_vacancies(
    ctx: typer.Context,
    closed: bool = typer.Option(False, "--closed", help="List closed vacancies instead of open ones."),
) -> None:
    """List open (or closed) vacancies in creation order."""
    with _session(ctx, persist=False) as service:
        vacancies = service.list_closed() if closed else service.list_open()
    if not vacancies:
        typer.echo("No closed vacancies." if closed else "No open vacancies.")
        return
    for vacancy in vacancies:
        typer.echo(_format_vacancy(vacancy))


@app.command()
def upload(
    ctx: typer.Context,
    files: List[str] = typer.Argument(..., help="Uploaded CV file names. Contents are not read."),
    vacancy: Optional[int] = typer.Option(None, help="Vacancy id; candidates go to the pool when omitted."),
) -> None:
    """Create pending candidates from file names."""
    with _session(ctx) as service:
        if vacancy is not None and service.registry.get(vacancy) is None:
            typer.echo(f"Vacancy {vacancy} not found; no candidates attached.")
            return
        candidates = service.upload(files, vacancy_id=vacancy)
    target = "the pool" if vacancy is None else f"vacancy {vacancy}"
    typer.echo(f"Added {len(candidates)} candidates to {target}.")


@app.command()
def shortlist(
    ctx: typer.Context,
    vacancy: Optional[int] = typer.Option(None, help="Vacancy id; shortlists the pool when omitted."),
    audit_log: Optional[Path] = typer.Option(None, dir_okay=False, help="Audit log output (JSONL)."),
) -> None:
    """Shortlist the leading share of a vacancy's candidates (or the pool)."""
    with _session(ctx, audit_log=audit_log) as service:
        result = service.shortlist(vacancy_id=vacancy)
    if result is None:
        typer.echo(f"Vacancy {vacancy} not found; nothing shortlisted.")
        return
    target = "the pool" if vacancy is None else f"vacancy {vacancy}"
    typer.echo(
        f"Shortlisted {result.shortlisted_count} of {len(result.candidates)} candidates in {target}."
    )


@app.command()
def close(
    ctx: typer.Context,
    vacancy_id: int = typer.Argument(..., help="Vacancy id."),
) -> None:
    """Close a vacancy."""
    with _session(ctx) as service:
        known = service.registry.get(vacancy_id) is not None
        service.close(vacancy_id)
    if not known:
        typer.echo(f"Vacancy {vacancy_id} not found; nothing closed.")
        return
    typer.echo(f"Closed vacancy {vacancy_id}.")


@app.command()
def show(
    ctx: typer.Context,
    vacancy_id: int = typer.Argument(..., help="Vacancy id."),
) -> None:
    """Show a vacancy's candidates and counts."""
    with _session(ctx, persist=False) as service:
        vacancy = service.registry.get(vacancy_id)
        summary = service.summarize(vacancy_id)
    if vacancy is None or summary is None:
        typer.echo(f"Vacancy {vacancy_id} not found.", err=True)
        raise typer.Exit(code=1)
    typer.echo(_format_vacancy(vacancy))
    for candidate in vacancy.candidates:
        typer.echo(_format_candidate(candidate))
    typer.echo(
        f"Total applicants: {summary.total_applicants}, "
        f"accepted: {summary.accepted_count}, rejected: {summary.rejected_count}"
    )


@app.command()
def pool(ctx: typer.Context) -> None:
    """Show candidates held in the pool."""
    with _session(ctx, persist=False) as service:
        candidates = list(service.registry.pool)
    if not candidates:
        typer.echo("The pool is empty.")
        return
    for candidate in candidates:
        typer.echo(_format_candidate(candidate))


@app.command()
def history(ctx: typer.Context) -> None:
    """Summarize closed vacancies."""
    with _session(ctx, persist=False) as service:
        summaries = service.history()
    if not summaries:
        typer.echo("No closed vacancies.")
        return
    for summary in summaries:
        typer.echo(
            f"{summary.vacancy_id}\t{summary.title}\t"
            f"applicants={summary.total_applicants}\t"
            f"accepted={summary.accepted_count}\t"
            f"rejected={summary.rejected_count}"
        )


@contextmanager
def _session(
    ctx: typer.Context,
    *,
    audit_log: Path | None = None,
    persist: bool = True,
) -> Iterator[RecruitmentService]:
    state: CliState = ctx.obj
    try:
        registry = state.store.load()
    except SnapshotError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=1) from exc

    container = create_container(
        settings=state.settings,
        registry=registry,
        audit_logger=AuditLogger(audit_log) if audit_log else None,
    )
    yield container.service()
    if persist:
        state.store.save(registry)


def _load_settings(config: Path | None) -> dict[str, Any]:
    if not config:
        return {}
    with config.open("r", encoding="utf-8") as handle:
        loaded = yaml.safe_load(handle) or {}
    if not isinstance(loaded, dict):
        raise typer.BadParameter("Config file must be a YAML object", param_hint="--config")
    try:
        return load_config(loaded).to_settings()
    except ValidationError as exc:
        raise typer.BadParameter(f"Invalid config: {exc}", param_hint="--config") from exc


def _format_vacancy(vacancy: Vacancy) -> str:
    return (
        f"{vacancy.id}\t{vacancy.title}\tcloses {vacancy.closing_date}\t"
        f"contact {vacancy.contact}\t{len(vacancy.candidates)} candidates"
    )


def _format_candidate(candidate: Candidate) -> str:
    return (
        f"  {candidate.name}\t{candidate.experience}\t{candidate.skills}\t"
        f"{candidate.qualifications}\t{candidate.status.value}"
    )


def main() -> None:
    app()


if __name__ == "__main__":
    main()
