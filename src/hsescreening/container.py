"""Dependency injection container for the screening system."""

from __future__ import annotations

from typing import Any

from dependency_injector import containers, providers

from .core import CandidateEvaluator, get_policy
from .extraction import GeminiExtractionProvider, StaticExtractionProvider
from .pipeline import CandidateRoster, ResumeTextLoader, ScreeningPipeline
from .schemas import DEFAULT_JOB_REQUIREMENTS, JobRequirements
from .schemas.config import AppConfig


def _job_requirements(raw: dict[str, Any] | None) -> JobRequirements:
    if not raw:
        return DEFAULT_JOB_REQUIREMENTS
    return JobRequirements.model_validate(raw)


class ScreeningContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    config = providers.Configuration()

    job_requirements = providers.Singleton(_job_requirements, config.job)

    scoring_policy = providers.Singleton(
        get_policy,
        config.core.policy,
        gate_certifications=config.core.gate_certifications,
    )

    evaluator = providers.Singleton(
        CandidateEvaluator,
        policy=scoring_policy,
        allow_not_qualified_sentinel=config.core.allow_not_qualified_sentinel,
    )

    gemini_provider = providers.Singleton(
        GeminiExtractionProvider,
        api_key=config.extraction.api_key,
        model=config.extraction.model,
    )
    static_provider = providers.Singleton(
        StaticExtractionProvider.from_jsonl,
        config.extraction.fixtures,
    )

    extraction_provider = providers.Selector(
        config.extraction["provider"],
        gemini=gemini_provider,
        static=static_provider,
    )

    text_loader = providers.Singleton(ResumeTextLoader)
    roster = providers.Singleton(CandidateRoster)

    pipeline = providers.Factory(
        ScreeningPipeline,
        evaluator=evaluator,
        provider=extraction_provider,
        text_loader=text_loader,
        roster=roster,
    )


def create_container(*, settings: dict[str, Any] | None = None) -> ScreeningContainer:
    """Instantiate container with settings validated through ``AppConfig``."""

    app_config = AppConfig.model_validate(settings or {})
    container = ScreeningContainer()
    container.config.from_dict(app_config.to_settings())
    return container
