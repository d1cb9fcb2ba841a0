"""Candidate evaluator: designation tier plus match score."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..schemas import Designation, ExtractionResult, JobRequirements
from .designation import classify_designation
from .scoring import MatchScorer, ScoreBreakdown, ScoringPolicy
from .validation import coerce_extraction


@dataclass(slots=True)
class Evaluation:
    """Evaluator output attached to a candidate record."""

    designation: Designation
    match_score: int
    score_version: str
    breakdown: ScoreBreakdown


class CandidateEvaluator:
    """Stateless evaluator; safe to share between candidates and threads."""

    def __init__(
        self,
        *,
        policy: ScoringPolicy | None = None,
        allow_not_qualified_sentinel: bool | None = None,
    ) -> None:
        self._scorer = MatchScorer(policy=policy)
        self._allow_not_qualified_sentinel = (
            True if allow_not_qualified_sentinel is None else allow_not_qualified_sentinel
        )

    @property
    def policy(self) -> ScoringPolicy:
        return self._scorer.policy

    @property
    def allow_not_qualified_sentinel(self) -> bool:
        return self._allow_not_qualified_sentinel

    def evaluate(
        self,
        extraction: ExtractionResult | dict[str, Any],
        job_requirements: JobRequirements | dict[str, Any],
    ) -> Evaluation:
        record = coerce_extraction(extraction)
        breakdown = self._scorer.score(record, job_requirements)
        designation = classify_designation(
            record.years_of_experience,
            allow_not_qualified_sentinel=self._allow_not_qualified_sentinel,
        )
        return Evaluation(
            designation=designation,
            match_score=breakdown.match_score,
            score_version=breakdown.score_version,
            breakdown=breakdown,
        )
