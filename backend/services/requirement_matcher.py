"""Requirement-matching scoring against a job description.

Each requirement contributes its full importance when matched and nothing
when unmatched; the score is the matched share of total importance, scaled
to 0-100.
"""

import logging
import re
from decimal import ROUND_HALF_UP, Decimal

from models.schemas.applicant import Applicant
from models.schemas.job_requirement import JobRequirement, RequirementType
from models.schemas.scored_applicant import RequirementScore, ScoredApplicant
from services.applicant_scorer import estimate_years_of_experience, has_skill
from services.requirement_extractor import extract_requirements

logger = logging.getLogger(__name__)

# Required level -> higher levels that also satisfy it. Ph.D. and J.D. are
# siblings: neither satisfies the other.
OVERQUALIFIED_LEVELS: dict[str, frozenset[str]] = {
    "Bachelor's Degree": frozenset({"Master's Degree", "Ph.D.", "Juris Doctor (J.D)"}),
    "Master's Degree": frozenset({"Ph.D.", "Juris Doctor (J.D)"}),
}

_LEADING_INT_RE = re.compile(r"\s*([+-]?\d+)")


def _round_score(value: float) -> float:
    """Round half-up to one decimal on the exact binary value."""
    return float(Decimal(value).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _parse_required_years(value: str) -> int | None:
    m = _LEADING_INT_RE.match(value)
    return int(m.group(1)) if m else None


def _matches_education(applicant: Applicant, required_level: str) -> bool:
    level = applicant.education.highest_level
    if level == required_level:
        return True
    return level in OVERQUALIFIED_LEVELS.get(required_level, frozenset())


def _matches_experience(applicant: Applicant, value: str) -> bool:
    if "years" in value:
        required_years = _parse_required_years(value)
        if required_years is None:
            return False
        return estimate_years_of_experience(applicant.work_experiences) >= required_years

    needle = value.lower()
    return any(needle in we.role_name.lower() for we in applicant.work_experiences)


def requirement_matches(applicant: Applicant, requirement: JobRequirement) -> bool:
    if requirement.type == RequirementType.SKILL:
        return has_skill(applicant.skills, requirement.value)
    if requirement.type == RequirementType.EDUCATION:
        return _matches_education(applicant, requirement.value)
    if requirement.type == RequirementType.EXPERIENCE:
        return _matches_experience(applicant, requirement.value)
    return False


def score_applicant_by_requirements(
    applicant: Applicant, requirements: list[JobRequirement]
) -> RequirementScore:
    """Score 0-100 plus the requirements the applicant satisfies (input order)."""
    total_weight = 0
    matched_weight = 0
    matched: list[JobRequirement] = []

    for req in requirements:
        total_weight += req.importance
        if requirement_matches(applicant, req):
            matched_weight += req.importance
            matched.append(req)

    if total_weight <= 0:
        return RequirementScore(score=0.0, matched_requirements=matched)

    score = _round_score(matched_weight / total_weight * 100)
    return RequirementScore(score=score, matched_requirements=matched)


def rank_by_requirements(
    applicants: list[Applicant], requirements: list[JobRequirement]
) -> list[ScoredApplicant]:
    """Score every applicant against ``requirements``, highest first; ties keep input order."""
    scored = []
    for applicant in applicants:
        result = score_applicant_by_requirements(applicant, requirements)
        scored.append(ScoredApplicant(
            applicant=applicant,
            score=result.score,
            matched_requirements=result.matched_requirements,
        ))
    return sorted(scored, key=lambda s: s.score, reverse=True)


def get_top_applicants_by_job_description(
    applicants: list[Applicant], job_description: str
) -> list[ScoredApplicant]:
    requirements = extract_requirements(job_description)
    ranked = rank_by_requirements(applicants, requirements)
    logger.debug(
        "Ranked %d applicants against %d extracted requirements",
        len(applicants), len(requirements),
    )
    return ranked
