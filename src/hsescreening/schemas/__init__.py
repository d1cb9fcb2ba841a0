"""Pydantic schema definitions shared by the evaluator and the pipeline."""

from __future__ import annotations

from .candidate import (
    CandidateResult,
    CandidateStatus,
    Designation,
    ExtractionResult,
)
from .job import (
    DEFAULT_JOB_REQUIREMENTS,
    CertificationRequirements,
    JobRequirements,
)

__all__ = [
    "CandidateResult",
    "CandidateStatus",
    "CertificationRequirements",
    "DEFAULT_JOB_REQUIREMENTS",
    "Designation",
    "ExtractionResult",
    "JobRequirements",
]
