"""Match score policies and aggregation."""

from __future__ import annotations

import dataclasses
import math
from dataclasses import dataclass, field
from typing import Any, Iterable

from ..schemas import ExtractionResult, JobRequirements
from .evaluators import (
    CertificationConfig,
    CertificationEvaluator,
    DomainConfig,
    DomainEvaluator,
    Evaluator,
    ExperienceConfig,
    ExperienceEvaluator,
    SkillsConfig,
    SkillsEvaluator,
)
from .validation import coerce_extraction, coerce_job_requirements


@dataclass(frozen=True)
class ScoringPolicy:
    """Named, versioned weighting of the match score sub-scores.

    ``score_version`` is stored with every result so that scores produced
    under different policies are never compared blindly.
    """

    name: str
    version: int
    certification: CertificationConfig
    domain: DomainConfig
    experience: ExperienceConfig
    skills: SkillsConfig | None = None
    cap: float | None = None

    @property
    def score_version(self) -> str:
        return f"{self.name}.v{self.version}"

    def build_evaluators(self) -> list[Evaluator]:
        evaluators: list[Evaluator] = [
            CertificationEvaluator(config=self.certification),
            DomainEvaluator(config=self.domain),
            ExperienceEvaluator(config=self.experience),
        ]
        if self.skills is not None:
            evaluators.append(SkillsEvaluator(config=self.skills))
        return evaluators

    def with_gating(self, gate_on_requirements: bool) -> "ScoringPolicy":
        certification = dataclasses.replace(
            self.certification, gate_on_requirements=gate_on_requirements
        )
        return dataclasses.replace(self, certification=certification)


GRADUATED = ScoringPolicy(
    name="graduated",
    version=1,
    certification=CertificationConfig(points_each=15.0),
    domain=DomainConfig(points_per_match=17.5, max_points=35.0),
    experience=ExperienceConfig(max_points=20.0, sufficient_years=5.0, linear=True),
)

FLAT = ScoringPolicy(
    name="flat",
    version=1,
    certification=CertificationConfig(points_each=20.0),
    domain=DomainConfig(points_per_match=20.0, max_points=20.0, require_vocabulary_match=False),
    experience=ExperienceConfig(max_points=20.0, sufficient_years=5.0, linear=False),
    cap=100.0,
)

GRADUATED_SKILLS = ScoringPolicy(
    name="graduated_skills",
    version=1,
    certification=CertificationConfig(points_each=12.0),
    domain=DomainConfig(points_per_match=14.0, max_points=28.0),
    experience=ExperienceConfig(max_points=16.0, sufficient_years=5.0, linear=True),
    skills=SkillsConfig(max_points=20.0),
)

POLICIES: dict[str, ScoringPolicy] = {
    policy.name: policy for policy in (GRADUATED, FLAT, GRADUATED_SKILLS)
}

DEFAULT_POLICY = GRADUATED


def get_policy(name: str | None = None, *, gate_certifications: bool | None = None) -> ScoringPolicy:
    """Look up a policy by name, optionally overriding certification gating."""
    if name is None:
        policy = DEFAULT_POLICY
    else:
        try:
            policy = POLICIES[name]
        except KeyError as exc:
            raise ValueError(
                f"Unknown scoring policy {name!r}; expected one of {sorted(POLICIES)}"
            ) from exc
    if gate_certifications is not None:
        policy = policy.with_gating(gate_certifications)
    return policy


@dataclass(slots=True)
class EvaluationResult:
    """Normalized sub-score evaluator output."""

    method: str
    scores: dict[str, float]
    metadata: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class ScoreBreakdown:
    """Sub-scores behind a match score."""

    score_version: str
    sub_scores: dict[str, float]
    raw_total: float
    match_score: int
    evaluations: list[EvaluationResult]


class MatchScorer:
    """Runs sub-score evaluators and folds them into a 0-100 match score."""

    def __init__(
        self,
        evaluators: Iterable[Evaluator] | None = None,
        *,
        policy: ScoringPolicy | None = None,
    ) -> None:
        self._policy = policy or DEFAULT_POLICY
        self._evaluators = (
            list(evaluators) if evaluators is not None else self._policy.build_evaluators()
        )

    @property
    def policy(self) -> ScoringPolicy:
        return self._policy

    def score(
        self,
        extraction: ExtractionResult | dict[str, Any],
        job_requirements: JobRequirements | dict[str, Any],
    ) -> ScoreBreakdown:
        record = coerce_extraction(extraction)
        job = coerce_job_requirements(job_requirements)

        serialized_candidate = record.model_dump(mode="python")
        context = {"job": job.model_dump(mode="python")}

        evaluations: list[EvaluationResult] = []
        sub_scores: dict[str, float] = {}
        for evaluator in self._evaluators:
            normalized = self._normalize_evaluation_result(
                evaluator.evaluate(serialized_candidate, context)
            )
            evaluations.append(normalized)
            # Negative inputs never pull the total below the other sub-scores.
            points = max(0.0, normalized.scores.get("points", 0.0))
            sub_scores[normalized.method] = sub_scores.get(normalized.method, 0.0) + points

        raw_total = sum(sub_scores.values())
        match_score = _round_half_up(raw_total)
        if self._policy.cap is not None:
            match_score = min(int(self._policy.cap), match_score)

        return ScoreBreakdown(
            score_version=self._policy.score_version,
            sub_scores=sub_scores,
            raw_total=raw_total,
            match_score=match_score,
            evaluations=evaluations,
        )

    @staticmethod
    def _normalize_evaluation_result(payload: dict[str, Any]) -> EvaluationResult:
        method = payload.get("method")
        scores = payload.get("scores") or {}
        metadata = payload.get("metadata") or {}
        if method is None:
            raise ValueError("Evaluator result must include 'method'.")
        if not isinstance(scores, dict):
            raise ValueError("Evaluator result 'scores' must be a mapping.")
        return EvaluationResult(
            method=str(method),
            scores={k: float(v) for k, v in scores.items()},
            metadata=dict(metadata),
        )


def compute_match_score(
    extraction: ExtractionResult | dict[str, Any],
    job_requirements: JobRequirements | dict[str, Any],
    *,
    policy: ScoringPolicy | None = None,
) -> int:
    """Return the integer match score for one extraction record."""
    return MatchScorer(policy=policy).score(extraction, job_requirements).match_score


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))
