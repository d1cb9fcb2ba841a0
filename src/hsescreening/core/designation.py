"""Designation tiers derived from years of experience."""

from __future__ import annotations

from ..schemas import Designation
from .validation import require_years

# Highest threshold first; the first tier whose floor is met wins.
DESIGNATION_THRESHOLDS: tuple[tuple[float, Designation], ...] = (
    (15.0, Designation.MANAGER),
    (10.0, Designation.ENGINEER),
    (5.0, Designation.OFFICER),
    (0.0, Designation.INSPECTOR),
)


def classify_designation(
    years_of_experience: float,
    *,
    allow_not_qualified_sentinel: bool = True,
) -> Designation:
    """Map years of experience to a designation tier.

    Negative years return ``Designation.NOT_QUALIFIED`` when the sentinel is
    allowed and are clamped to ``Designation.INSPECTOR`` otherwise.
    """
    years = require_years(years_of_experience)
    for floor, designation in DESIGNATION_THRESHOLDS:
        if years >= floor:
            return designation
    if allow_not_qualified_sentinel:
        return Designation.NOT_QUALIFIED
    return Designation.INSPECTOR
