"""Sub-score evaluators combined by the match scorer."""

from .base import Evaluator
from .certification import CertificationConfig, CertificationEvaluator
from .domain import DomainConfig, DomainEvaluator, match_domains
from .experience import ExperienceConfig, ExperienceEvaluator
from .skills import SkillsConfig, SkillsEvaluator

__all__ = [
    "CertificationConfig",
    "CertificationEvaluator",
    "DomainConfig",
    "DomainEvaluator",
    "Evaluator",
    "ExperienceConfig",
    "ExperienceEvaluator",
    "SkillsConfig",
    "SkillsEvaluator",
    "match_domains",
]
