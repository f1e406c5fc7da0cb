"""Pydantic contracts shared by the extractor, scorers and API layer."""

from models.schemas.applicant import Applicant, Degree, Education, WorkExperience
from models.schemas.job_requirement import JobRequirement, RequirementType
from models.schemas.scored_applicant import (
    ApplicantScore,
    RequirementScore,
    ScoreBreakdown,
    ScoredApplicant,
)

__all__ = [
    "Applicant",
    "Degree",
    "Education",
    "WorkExperience",
    "JobRequirement",
    "RequirementType",
    "ApplicantScore",
    "RequirementScore",
    "ScoreBreakdown",
    "ScoredApplicant",
]
