"""Scorer outputs: per-applicant scores and the ranked unit."""

from pydantic import BaseModel

from models.schemas.applicant import Applicant
from models.schemas.job_requirement import JobRequirement


class ScoreBreakdown(BaseModel):
    """Manual-mode components; their sum is the total. Not bounded above."""
    education: float = 0.0
    experience: float = 0.0
    skills: float = 0.0


class ApplicantScore(BaseModel):
    total: float = 0.0
    breakdown: ScoreBreakdown = ScoreBreakdown()


class RequirementScore(BaseModel):
    score: float = 0.0  # 0-100, one decimal
    matched_requirements: list[JobRequirement] = []


class ScoredApplicant(BaseModel):
    """Output unit of both scoring modes."""
    applicant: Applicant
    score: float
    breakdown: ScoreBreakdown | None = None  # manual mode
    matched_requirements: list[JobRequirement] | None = None  # requirement mode
