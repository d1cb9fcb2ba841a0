"""Required-skill coverage sub-score."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from rapidfuzz import fuzz

from ...schemas import ExtractionResult, JobRequirements


@dataclass(frozen=True)
class SkillsConfig:
    """Configuration for required-skill matching."""

    max_points: float = 20.0
    min_similarity: float = 80.0


class SkillsEvaluator:
    """Evaluate coverage of the job's required skills by extracted skills.

    A required skill is covered when it appears inside one of the candidate's
    skills or is close enough to one by token-set similarity. A job with no
    required skills gives full points.
    """

    method = "skills"

    def __init__(self, *, config: SkillsConfig | None = None) -> None:
        self._config = config or SkillsConfig()

    def evaluate(self, candidate: dict[str, Any], context: dict[str, Any]) -> dict[str, Any]:
        extraction = ExtractionResult.model_validate(candidate)
        job = JobRequirements.model_validate(context["job"])
        required = list(dict.fromkeys(skill.strip() for skill in job.required_skills if skill.strip()))
        held = [skill.lower() for skill in extraction.technical_skills if skill]

        matched = [skill for skill in required if self._is_covered(skill.lower(), held)]
        coverage = len(matched) / len(required) if required else 1.0
        return {
            "method": self.method,
            "scores": {"points": self._config.max_points * coverage},
            "metadata": {
                "required": required,
                "matched": matched,
                "coverage": coverage,
                "min_similarity": self._config.min_similarity,
            },
        }

    def _is_covered(self, skill: str, held: Sequence[str]) -> bool:
        return any(
            skill in text or fuzz.token_set_ratio(skill, text) >= self._config.min_similarity
            for text in held
        )
