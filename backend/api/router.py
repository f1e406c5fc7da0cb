from fastapi import APIRouter, Depends, HTTPException, Query, Request
from slowapi import Limiter
from slowapi.util import get_remote_address

from api.dependencies import get_roster
from config import settings
from models.requests import JobDescriptionRequest, ManualRankRequest
from models.responses import (
    ApplicantListResponse,
    ApplicantRankResponse,
    HealthResponse,
    JobDescriptionRankingResponse,
    ManualRankingResponse,
    RequirementsResponse,
    RequirementSummary,
    RolesResponse,
    SkillsResponse,
)
from models.schemas.applicant import Applicant
from services.applicant_catalog import (
    ApplicantRoster,
    count_requirement_matches,
    find_rank,
    find_scored,
    suggest_skills,
)
from services.applicant_scorer import get_top_applicants
from services.requirement_extractor import extract_requirements
from services.requirement_matcher import rank_by_requirements

router = APIRouter()
limiter = Limiter(key_func=get_remote_address)


def _validated_description(job_description: str) -> str:
    if not job_description.strip():
        raise HTTPException(status_code=400, detail="Job description is empty")
    if len(job_description) > settings.max_job_description_length:
        raise HTTPException(
            status_code=400,
            detail=f"Job description too long (max {settings.max_job_description_length} chars)",
        )
    return job_description


@router.get("/health", response_model=HealthResponse)
async def health(roster: ApplicantRoster = Depends(get_roster)):
    return HealthResponse(status="ok", applicants_loaded=len(roster), source=roster.source)


@router.get("/applicants", response_model=ApplicantListResponse)
async def list_applicants(roster: ApplicantRoster = Depends(get_roster)):
    return ApplicantListResponse(applicants=list(roster.applicants))


@router.get("/applicants/skills", response_model=SkillsResponse)
async def list_skills(
    query: str = "",
    exclude: list[str] = Query([]),
    roster: ApplicantRoster = Depends(get_roster),
):
    return SkillsResponse(skills=suggest_skills(roster.skills, query, exclude))


@router.get("/applicants/roles", response_model=RolesResponse)
async def list_roles(roster: ApplicantRoster = Depends(get_roster)):
    return RolesResponse(roles=list(roster.roles))


@router.get("/applicants/{email}", response_model=Applicant)
async def get_applicant(email: str, roster: ApplicantRoster = Depends(get_roster)):
    applicant = roster.get(email)
    if applicant is None:
        raise HTTPException(status_code=404, detail=f"No applicant with email {email}")
    return applicant


@router.post("/rank/manual", response_model=ManualRankingResponse)
@limiter.limit(settings.rate_limit)
async def rank_manual(
    request: Request,
    body: ManualRankRequest,
    roster: ApplicantRoster = Depends(get_roster),
):
    applicants = list(roster.applicants)
    count = body.count if body.count is not None else len(applicants)
    ranked = get_top_applicants(applicants, body.job_type, body.required_skills, count=count)
    return ManualRankingResponse(
        job_type=body.job_type,
        required_skills=body.required_skills,
        applicants=ranked,
    )


@router.post("/rank/job-description", response_model=JobDescriptionRankingResponse)
@limiter.limit(settings.rate_limit)
async def rank_by_job_description(
    request: Request,
    body: JobDescriptionRequest,
    roster: ApplicantRoster = Depends(get_roster),
):
    description = _validated_description(body.job_description)
    requirements = extract_requirements(description)
    ranked = rank_by_requirements(list(roster.applicants), requirements)
    summaries = [
        RequirementSummary(requirement=c.requirement, matching_applicants=c.matching_applicants)
        for c in count_requirement_matches(requirements, ranked)
    ]
    return JobDescriptionRankingResponse(requirements=summaries, applicants=ranked)


@router.post("/requirements/extract", response_model=RequirementsResponse)
@limiter.limit(settings.rate_limit)
async def extract(request: Request, body: JobDescriptionRequest):
    description = _validated_description(body.job_description)
    return RequirementsResponse(requirements=extract_requirements(description))


@router.post("/applicants/{email}/rank", response_model=ApplicantRankResponse)
@limiter.limit(settings.rate_limit)
async def rank_applicant(
    request: Request,
    email: str,
    body: JobDescriptionRequest,
    roster: ApplicantRoster = Depends(get_roster),
):
    """Where one applicant places when the roster is ranked against a job description."""
    description = _validated_description(body.job_description)
    ranked = rank_by_requirements(list(roster.applicants), extract_requirements(description))
    scored = find_scored(ranked, email)
    if scored is None:
        raise HTTPException(status_code=404, detail=f"No applicant with email {email}")
    return ApplicantRankResponse(rank=find_rank(ranked, email), out_of=len(ranked), applicant=scored)
