"""Experience-domain relevance sub-score."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from ...schemas import ExtractionResult, JobRequirements


@dataclass(frozen=True)
class DomainConfig:
    """Points per matching domain tag and the sub-score ceiling."""

    points_per_match: float = 17.5
    max_points: float = 35.0
    require_vocabulary_match: bool = True


class DomainEvaluator:
    """Score how many detected domain tags fall inside the job's vocabulary."""

    method = "domain"

    def __init__(self, *, config: DomainConfig | None = None) -> None:
        self._config = config or DomainConfig()

    def evaluate(self, candidate: dict[str, Any], context: dict[str, Any]) -> dict[str, Any]:
        extraction = ExtractionResult.model_validate(candidate)
        job = JobRequirements.model_validate(context["job"])
        found = extraction.nature_of_experience_found

        if self._config.require_vocabulary_match:
            matched = match_domains(found, job.nature_of_experience)
        else:
            matched = list(found)

        points = min(
            self._config.max_points,
            len(matched) * self._config.points_per_match,
        )
        return {
            "method": self.method,
            "scores": {"points": points},
            "metadata": {
                "found": list(found),
                "matched": matched,
                "match_count": len(matched),
                "vocabulary": list(job.nature_of_experience),
            },
        }


def match_domains(found: Sequence[str], vocabulary: Sequence[str]) -> list[str]:
    """Return the found tags containing any vocabulary tag, case-insensitively."""
    needles = [tag.strip().lower() for tag in vocabulary if tag and tag.strip()]
    if not needles:
        return []
    matched: list[str] = []
    for tag in found:
        haystack = tag.lower()
        if any(needle in haystack for needle in needles):
            matched.append(tag)
    return matched
