"""Extraction provider contract."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from ..schemas import JobRequirements


class ExtractionError(RuntimeError):
    """Raised when a provider cannot produce an extraction payload."""


@runtime_checkable
class ExtractionProvider(Protocol):
    """Extraction provider contract.

    Implementations return the raw extraction payload as a mapping using the
    wire field names (``fullName``, ``yearsOfExperience``, ...). Validation is
    left to the evaluator so a malformed payload fails only its own candidate.
    """

    name: str

    def extract(self, text: str, *, job: JobRequirements, file_name: str) -> dict[str, Any]:
        """Return extracted fields for one resume."""
