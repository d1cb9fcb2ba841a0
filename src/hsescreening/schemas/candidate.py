from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

CandidateStatus = Literal["processing", "completed", "failed"]


class Designation(str, Enum):
    """Designation tiers assigned from years of experience."""

    INSPECTOR = "HSE/Safety Inspector"
    OFFICER = "HSE/Safety Officer"
    ENGINEER = "HSE/Safety Engineer"
    MANAGER = "HSE/Safety Manager"
    NOT_QUALIFIED = "Not Qualified"


class ExtractionResult(BaseModel):
    """Structured fields extracted from a single resume."""

    full_name: str = ""
    email: str = ""
    phone: str = ""
    technical_skills: list[str] = Field(default_factory=list)
    years_of_experience: float = Field(allow_inf_nan=False)
    highest_degree: str = ""
    has_nebosh: bool = False
    # NVQ level 6, OTHM level 6 or the NEBOSH International Diploma.
    has_level6: bool = False
    has_adosh: bool = False
    nature_of_experience_found: list[str]
    summary: str = ""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @field_validator("years_of_experience", mode="before")
    @classmethod
    def _require_numeric_years(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("must be a number, not a boolean")
        if isinstance(value, (str, bytes)):
            raise ValueError("must be a number, not a string")
        return value

    @field_validator("full_name", "email", "phone", "highest_degree", "summary", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class CandidateResult(ExtractionResult):
    """Evaluated candidate as held in the session roster."""

    id: str
    file_name: str
    match_score: int = Field(ge=0, le=100)
    designation: Designation
    score_version: str
    timestamp: datetime
    status: CandidateStatus = "completed"
    error: str | None = None

    model_config = ConfigDict(frozen=True)
