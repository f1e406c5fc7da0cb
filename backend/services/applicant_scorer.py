"""Manual-criteria scoring: job type + required skills.

An applicant's total is the plain sum of three components (education,
experience, skills). Totals are not normalised or clamped, so they are only
comparable within one ranking run.
"""

import logging
import re

from models.schemas.applicant import Applicant, Education, WorkExperience
from models.schemas.scored_applicant import ApplicantScore, ScoreBreakdown, ScoredApplicant

logger = logging.getLogger(__name__)

# Points per highest education level; unknown levels score 0
EDUCATION_LEVEL_POINTS: dict[str, int] = {
    "Ph.D.": 25,
    "Master's Degree": 20,
    "Juris Doctor (J.D)": 20,
    "Bachelor's Degree": 15,
    "Associate's Degree": 10,
    "High School Diploma": 5,
}
TOP50_SCHOOL_BONUS = 10
TOP25_SCHOOL_BONUS = 15
HIGH_GPA_BONUS = 5
HIGH_GPA_THRESHOLD = 3.5

YEARS_FACTOR = 5
RELEVANT_ROLE_BONUS = 10
YEARS_PER_POSITION = 1.5

SKILL_MATCH_POINTS = 8

RELEVANT_ROLE_KEYWORDS: dict[str, tuple[str, ...]] = {
    "tech": (
        "developer", "engineer", "software", "full stack", "front end",
        "back end", "devops", "system",
    ),
    "legal": ("legal", "attorney", "lawyer", "counsel", "partner"),
}

DEFAULT_TOP_COUNT = 3

_GPA_RANGE_RE = re.compile(r"(\d\.\d)-(\d\.\d)")


def parse_gpa(gpa: str) -> float:
    """Upper bound of a "X.X-Y.Y" GPA band; 0.0 when no band is present."""
    m = _GPA_RANGE_RE.search(gpa or "")
    if m:
        return float(m.group(2))
    return 0.0


def estimate_years_of_experience(work_experiences: list[WorkExperience]) -> float:
    # No reliable dates in the source data: assume a fixed tenure per position
    return len(work_experiences) * YEARS_PER_POSITION


def skill_matches(applicant_skill: str, required_skill: str) -> bool:
    """Bidirectional, case-insensitive substring match."""
    a = applicant_skill.lower()
    r = required_skill.lower()
    return a in r or r in a


def has_skill(skills: list[str], required_skill: str) -> bool:
    return any(skill_matches(s, required_skill) for s in skills)


def is_relevant_role(role_name: str, job_type: str) -> bool:
    role = role_name.lower()
    return any(kw in role for kw in RELEVANT_ROLE_KEYWORDS.get(job_type, ()))


def score_education(education: Education) -> float:
    score = EDUCATION_LEVEL_POINTS.get(education.highest_level, 0)

    for degree in education.degrees:
        if degree.is_top50:
            score += TOP50_SCHOOL_BONUS
        if degree.is_top25:
            score += TOP25_SCHOOL_BONUS
        if parse_gpa(degree.gpa) >= HIGH_GPA_THRESHOLD:
            score += HIGH_GPA_BONUS

    return float(score)


def score_experience(work_experiences: list[WorkExperience], job_type: str) -> float:
    years = estimate_years_of_experience(work_experiences)
    relevant = sum(1 for we in work_experiences if is_relevant_role(we.role_name, job_type))
    return years * YEARS_FACTOR + relevant * RELEVANT_ROLE_BONUS


def score_skills(skills: list[str], required_skills: list[str]) -> float:
    """Points for each required skill covered by at least one applicant skill."""
    if not skills:
        return 0.0
    matched = sum(1 for req in required_skills if has_skill(skills, req))
    return float(matched * SKILL_MATCH_POINTS)


def score_applicant(
    applicant: Applicant, job_type: str, required_skills: list[str]
) -> ApplicantScore:
    breakdown = ScoreBreakdown(
        education=score_education(applicant.education),
        experience=score_experience(applicant.work_experiences, job_type),
        skills=score_skills(applicant.skills, required_skills),
    )
    total = breakdown.education + breakdown.experience + breakdown.skills
    return ApplicantScore(total=total, breakdown=breakdown)


def get_top_applicants(
    applicants: list[Applicant],
    job_type: str,
    required_skills: list[str],
    count: int = DEFAULT_TOP_COUNT,
) -> list[ScoredApplicant]:
    """Rank applicants by total score, highest first, and keep the top ``count``.

    Ties keep input order.
    """
    scored = []
    for applicant in applicants:
        result = score_applicant(applicant, job_type, required_skills)
        scored.append(ScoredApplicant(
            applicant=applicant, score=result.total, breakdown=result.breakdown,
        ))

    ranked = sorted(scored, key=lambda s: s.score, reverse=True)
    logger.debug(
        "Ranked %d applicants for job_type=%s with %d required skills",
        len(applicants), job_type, len(required_skills),
    )
    return ranked[:max(count, 0)]
