"""Years-of-experience sufficiency sub-score."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import ExtractionResult


@dataclass(frozen=True)
class ExperienceConfig:
    """Sufficiency threshold and how shortfalls are scored."""

    max_points: float = 20.0
    sufficient_years: float = 5.0
    linear: bool = True


class ExperienceEvaluator:
    """Full points at the sufficiency threshold, partial or none below it."""

    method = "experience"

    def __init__(self, *, config: ExperienceConfig | None = None) -> None:
        self._config = config or ExperienceConfig()

    def evaluate(self, candidate: dict[str, Any], context: dict[str, Any]) -> dict[str, Any]:
        extraction = ExtractionResult.model_validate(candidate)
        years = extraction.years_of_experience
        sufficient = years >= self._config.sufficient_years

        if sufficient:
            points = self._config.max_points
        elif self._config.linear and self._config.sufficient_years > 0:
            points = years / self._config.sufficient_years * self._config.max_points
        else:
            points = 0.0

        return {
            "method": self.method,
            "scores": {"points": points},
            "metadata": {
                "years": years,
                "sufficient": sufficient,
                "sufficient_years": self._config.sufficient_years,
                "linear": self._config.linear,
            },
        }
