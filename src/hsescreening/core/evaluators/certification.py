"""Certification coverage sub-score."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ...schemas import ExtractionResult, JobRequirements

# certification key -> candidate flag attribute
CERTIFICATION_FLAGS: dict[str, str] = {
    "nebosh": "has_nebosh",
    "level6": "has_level6",
    "adosh": "has_adosh",
}


@dataclass(frozen=True)
class CertificationConfig:
    """Points awarded per held certification."""

    points_each: float = 15.0
    gate_on_requirements: bool = True


class CertificationEvaluator:
    """Award points for each NEBOSH / Level 6 / ADOSH certification held."""

    method = "certification"

    def __init__(self, *, config: CertificationConfig | None = None) -> None:
        self._config = config or CertificationConfig()

    def evaluate(self, candidate: dict[str, Any], context: dict[str, Any]) -> dict[str, Any]:
        extraction = ExtractionResult.model_validate(candidate)
        job = JobRequirements.model_validate(context["job"])
        required = job.certifications.model_dump()

        held: list[str] = []
        counted: list[str] = []
        for key, attribute in CERTIFICATION_FLAGS.items():
            if not getattr(extraction, attribute):
                continue
            held.append(key)
            if self._config.gate_on_requirements and not required[key]:
                continue
            counted.append(key)

        points = self._config.points_each * len(counted)
        return {
            "method": self.method,
            "scores": {"points": points},
            "metadata": {
                "held": held,
                "counted": counted,
                "not_required": [key for key in held if key not in counted],
                "points_each": self._config.points_each,
                "gated": self._config.gate_on_requirements,
            },
        }
