"""Input validation for the candidate evaluator."""

from __future__ import annotations

import math
from collections.abc import Mapping
from numbers import Real
from typing import Any, TypeVar

from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from ..schemas import ExtractionResult, JobRequirements

ModelT = TypeVar("ModelT", bound=BaseModel)


class ValidationError(ValueError):
    """Raised when evaluator input is malformed.

    ``field`` carries the wire name of the offending field, e.g.
    ``yearsOfExperience`` or ``natureOfExperienceFound``.
    """

    def __init__(self, field: str, message: str):
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message

    @classmethod
    def from_pydantic(cls, exc: PydanticValidationError) -> "ValidationError":
        errors = exc.errors()
        if not errors:
            return cls("<root>", str(exc))
        first = errors[0]
        field = ".".join(str(part) for part in first["loc"]) or "<root>"
        return cls(field, first["msg"])


def require_years(value: Any) -> float:
    """Return ``value`` as a finite float or raise ``ValidationError``."""
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError("yearsOfExperience", f"expected a number, got {type(value).__name__}")
    years = float(value)
    if not math.isfinite(years):
        raise ValidationError("yearsOfExperience", "must be a finite number")
    return years


def coerce_extraction(payload: Any) -> ExtractionResult:
    return _coerce(payload, ExtractionResult, "extraction")


def coerce_job_requirements(payload: Any) -> JobRequirements:
    return _coerce(payload, JobRequirements, "jobRequirements")


def _coerce(payload: Any, model: type[ModelT], name: str) -> ModelT:
    if isinstance(payload, model):
        return payload
    if not isinstance(payload, Mapping):
        raise ValidationError(name, f"expected a mapping, got {type(payload).__name__}")
    try:
        return model.model_validate(dict(payload))
    except PydanticValidationError as exc:
        raise ValidationError.from_pydantic(exc) from exc
