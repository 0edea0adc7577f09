"""Dependency injection container for the recruitment service."""

from __future__ import annotations

from dependency_injector import containers, providers

from .adapters import CandidateFactoryConfig, UploadCandidateFactory
from .core import HistoryAggregator, ShortlistingConfig, ShortlistingEngine
from .registry import VacancyRegistry
from .service import RecruitmentService
from .storage import AuditLogger


class RecruitmentContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    registry = providers.Singleton(VacancyRegistry)

    candidate_factory = providers.Singleton(UploadCandidateFactory)
    shortlisting_engine = providers.Singleton(ShortlistingEngine)
    history_aggregator = providers.Singleton(HistoryAggregator)

    audit_logger = providers.Object(None)

    service = providers.Factory(
        RecruitmentService,
        registry=registry,
        factory=candidate_factory,
        engine=shortlisting_engine,
        aggregator=history_aggregator,
        audit_logger=audit_logger,
    )


def create_container(
    *,
    settings: dict | None = None,
    registry: VacancyRegistry | None = None,
    audit_logger: AuditLogger | None = None,
) -> RecruitmentContainer:
    """Instantiate container with optional overrides."""

    container = RecruitmentContainer()

    if registry is not None:
        container.registry.override(providers.Object(registry))

    if audit_logger is not None:
        container.audit_logger.override(providers.Object(audit_logger))

    if not settings:
        return container

    if "shortlisting" in settings:
        shortlisting_config = ShortlistingConfig(**settings["shortlisting"])
        container.shortlisting_engine.override(
            providers.Singleton(ShortlistingEngine, config=shortlisting_config)
        )

    if "candidates" in settings:
        factory_config = CandidateFactoryConfig(**settings["candidates"])
        container.candidate_factory.override(
            providers.Singleton(UploadCandidateFactory, config=factory_config)
        )

    return container
