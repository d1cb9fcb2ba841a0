"""Job requirement schema used as the scoring vocabulary."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CertificationRequirements(BaseModel):
    """Which HSE certifications the job asks for."""

    nebosh: bool = True
    level6: bool = True
    adosh: bool = True

    model_config = ConfigDict(extra="forbid", frozen=True)


class JobRequirements(BaseModel):
    """Job-side configuration, fixed for a screening session."""

    min_experience: int = 0
    required_skills: list[str] = Field(default_factory=list)
    certifications: CertificationRequirements = Field(
        default_factory=CertificationRequirements
    )
    nature_of_experience: list[str]

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="forbid",
        frozen=True,
    )


DEFAULT_JOB_REQUIREMENTS = JobRequirements(
    min_experience=5,
    required_skills=["Safety Management", "Risk Assessment", "HSE Auditing"],
    certifications=CertificationRequirements(),
    nature_of_experience=[
        "Rail",
        "Infrastructure",
        "Bridges",
        "Villa",
        "Building",
        "Offshore",
        "Onshore",
        "Facility Management",
    ],
)
