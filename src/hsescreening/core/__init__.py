"""Core candidate evaluation components."""

from __future__ import annotations

# NOTE: keep imports explicit for export clarity.
from .designation import DESIGNATION_THRESHOLDS, classify_designation
from .evaluator import CandidateEvaluator, Evaluation
from .evaluators import Evaluator
from .scoring import (
    DEFAULT_POLICY,
    FLAT,
    GRADUATED,
    GRADUATED_SKILLS,
    POLICIES,
    EvaluationResult,
    MatchScorer,
    ScoreBreakdown,
    ScoringPolicy,
    compute_match_score,
    get_policy,
)
from .validation import ValidationError


__all__ = [
    "CandidateEvaluator",
    "DEFAULT_POLICY",
    "DESIGNATION_THRESHOLDS",
    "Evaluation",
    "EvaluationResult",
    "Evaluator",
    "FLAT",
    "GRADUATED",
    "GRADUATED_SKILLS",
    "MatchScorer",
    "POLICIES",
    "ScoreBreakdown",
    "ScoringPolicy",
    "ValidationError",
    "classify_designation",
    "compute_match_score",
    "get_policy",
]
