"""Contract shared by the sub-score evaluators."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class Evaluator(Protocol):
    """Sub-score evaluator contract."""

    method: str

    def evaluate(self, candidate: dict[str, Any], context: dict[str, Any]) -> dict[str, Any]:
        """Return ``{"method", "scores", "metadata"}`` for a candidate under the given context."""
