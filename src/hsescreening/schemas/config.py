"""Pydantic configuration schema for CLI YAML input."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .job import JobRequirements


class CoreConfig(BaseModel):
    policy: str = "graduated"
    allow_not_qualified_sentinel: bool = True
    gate_certifications: bool = True

    model_config = ConfigDict(extra="forbid")


class ExtractionConfig(BaseModel):
    provider: Literal["gemini", "static"] = "gemini"
    model: str = "gemini-2.5-flash"
    api_key: str | None = None
    fixtures: str | None = None

    model_config = ConfigDict(extra="forbid")


class AppConfig(BaseModel):
    core: CoreConfig = Field(default_factory=CoreConfig)
    extraction: ExtractionConfig = Field(default_factory=ExtractionConfig)
    job: JobRequirements | None = None

    def to_settings(self) -> dict[str, Any]:
        settings: dict[str, Any] = {
            "core": self.core.model_dump(),
            "extraction": self.extraction.model_dump(),
        }
        if self.job is not None:
            settings["job"] = self.job.model_dump(by_alias=True)
        return settings


def load_config(raw: Any) -> AppConfig:
    if raw is None:
        return AppConfig()
    if not isinstance(raw, dict):
        raise ValidationError.from_exception_data(
            "AppConfig",
            [{"type": "dict_type", "loc": ("config",), "input": raw}],
        )
    return AppConfig.model_validate(raw)
