from pydantic import BaseModel

from models.schemas.applicant import Applicant
from models.schemas.job_requirement import JobRequirement
from models.schemas.scored_applicant import ScoredApplicant


class HealthResponse(BaseModel):
    status: str = "ok"
    applicants_loaded: int = 0
    source: str = ""


class ApplicantListResponse(BaseModel):
    applicants: list[Applicant] = []


class SkillsResponse(BaseModel):
    skills: list[str] = []


class RolesResponse(BaseModel):
    roles: list[str] = []


class RequirementSummary(BaseModel):
    requirement: JobRequirement
    matching_applicants: int = 0


class RequirementsResponse(BaseModel):
    requirements: list[JobRequirement] = []


class ManualRankingResponse(BaseModel):
    job_type: str
    required_skills: list[str] = []
    applicants: list[ScoredApplicant] = []


class JobDescriptionRankingResponse(BaseModel):
    requirements: list[RequirementSummary] = []
    applicants: list[ScoredApplicant] = []


class ApplicantRankResponse(BaseModel):
    rank: int
    out_of: int
    applicant: ScoredApplicant
