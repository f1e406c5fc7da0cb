"""Requirement extraction from free-text job descriptions.

Five independent passes over the lower-cased text, each driven by a fixed
lookup table:
    1. skill vocabulary (importance from repetition + "required" context)
    2. education terms -> canonical level labels
    3. generic experience-level terms ("senior", "lead", ...)
    4. explicit "N+ years of experience" mentions
    5. generic role keywords ("developer", "attorney", ...)

Output order follows the pass order. Within a pass, table order is kept,
except for explicit years which follow text order.
"""

import logging
import re
from typing import NamedTuple

from models.schemas.job_requirement import JobRequirement, RequirementType

logger = logging.getLogger(__name__)


class EducationTerm(NamedTuple):
    term: str
    level: str
    importance: int


class ExperienceTerm(NamedTuple):
    term: str
    years: int  # nominal years for the level
    importance: int


class RoleKeyword(NamedTuple):
    term: str
    importance: int


# ---------------------------------------------------------------------------
# Skill vocabulary: display labels, matched case-insensitively by substring
# ---------------------------------------------------------------------------
SKILL_VOCABULARY: tuple[str, ...] = (
    # Languages & frameworks
    "JavaScript", "TypeScript", "React", "Angular", "Vue", "Node", "Express",
    "Python", "Java", "C#", ".NET", "PHP", "Ruby", "SQL", "MongoDB", "PostgreSQL",
    # Cloud & delivery
    "AWS", "Azure", "DevOps", "Docker", "Kubernetes", "CI/CD", "Git", "Redux",
    "REST", "API", "GraphQL", "HTML", "CSS", "Sass", "LESS", "Webpack", "Babel",
    "Jest", "Testing", "Agile", "Scrum", "Project Management", "UI/UX", "Design",
    "Responsive", "Mobile", "Analytics", "SEO", "Performance", "Security",
    "Microservices", "Architecture", "Cloud", "Serverless", "Next.js", "Laravel",
    "Django", "Flask", "Spring", "Bootstrap", "Tailwind", "Material UI",
    # Soft skills
    "Communication", "Leadership", "Problem Solving", "Critical Thinking",
    # Data & emerging
    "Data Analysis", "Machine Learning", "AI", "Big Data", "Blockchain", "Cryptocurrency",
)

EDUCATION_TERMS: tuple[EducationTerm, ...] = (
    EducationTerm("bachelor", "Bachelor's Degree", 6),
    EducationTerm("master", "Master's Degree", 8),
    EducationTerm("phd", "Ph.D.", 10),
    EducationTerm("associate", "Associate's Degree", 4),
    EducationTerm("juris doctor", "Juris Doctor (J.D)", 9),
    EducationTerm("j.d.", "Juris Doctor (J.D)", 9),
    EducationTerm("law degree", "Juris Doctor (J.D)", 9),
    EducationTerm("mba", "Master's Degree", 8),
    EducationTerm("high school", "High School Diploma", 2),
)

EXPERIENCE_TERMS: tuple[ExperienceTerm, ...] = (
    ExperienceTerm("entry level", 0, 3),
    ExperienceTerm("junior", 1, 4),
    ExperienceTerm("mid level", 3, 6),
    ExperienceTerm("senior", 5, 8),
    ExperienceTerm("lead", 7, 9),
    ExperienceTerm("manager", 5, 7),
    ExperienceTerm("director", 8, 9),
    ExperienceTerm("executive", 10, 10),
)

ROLE_KEYWORDS: tuple[RoleKeyword, ...] = (
    RoleKeyword("developer", 7),
    RoleKeyword("engineer", 7),
    RoleKeyword("designer", 7),
    RoleKeyword("manager", 7),
    RoleKeyword("analyst", 6),
    RoleKeyword("consultant", 6),
    RoleKeyword("specialist", 5),
    RoleKeyword("administrator", 5),
    RoleKeyword("architect", 8),
    RoleKeyword("scientist", 8),
    RoleKeyword("attorney", 9),
    RoleKeyword("lawyer", 9),
    RoleKeyword("legal", 8),
)

MAX_IMPORTANCE = 10
DEFAULT_SKILL_IMPORTANCE = 5
REQUIRED_CONTEXT_WINDOW = 50

_REQUIRED_CONTEXT_RE = re.compile(r"required|must have|essential")

# "5+ years experience", "3 yrs of experience", "10 yr experience"
_YEARS_EXPERIENCE_RE = re.compile(
    r"(\d+)\+?\s*(?:years|yrs|yr)(?:\s+of\s+|\s+)experience"
)


def _skill_importance(text: str, skill: str) -> int:
    """Weight a skill by how often it is mentioned and whether it is demanded.

    ``text`` and ``skill`` must already be lower-cased.
    """
    # Literal matches: "." in ".net" or "next.js" is not a wildcard
    occurrences = text.count(skill)
    first = text.find(skill)
    preceding = text[max(0, first - REQUIRED_CONTEXT_WINDOW):first]
    has_required = bool(_REQUIRED_CONTEXT_RE.search(preceding))

    importance = min(MAX_IMPORTANCE, occurrences * 2 + (2 if has_required else 0))
    return importance if importance > 0 else DEFAULT_SKILL_IMPORTANCE


def _extract_skills(text: str) -> list[JobRequirement]:
    requirements: list[JobRequirement] = []
    for skill in SKILL_VOCABULARY:
        skill_lower = skill.lower()
        if skill_lower in text:
            requirements.append(JobRequirement(
                type=RequirementType.SKILL,
                value=skill,
                importance=_skill_importance(text, skill_lower),
            ))
    return requirements


def _extract_education(text: str) -> list[JobRequirement]:
    return [
        JobRequirement(type=RequirementType.EDUCATION, value=row.level, importance=row.importance)
        for row in EDUCATION_TERMS
        if row.term in text
    ]


def _extract_experience_terms(text: str) -> list[JobRequirement]:
    return [
        JobRequirement(type=RequirementType.EXPERIENCE, value=row.term, importance=row.importance)
        for row in EXPERIENCE_TERMS
        if row.term in text
    ]


def _extract_years(text: str) -> list[JobRequirement]:
    """One requirement per explicit years-of-experience mention, in text order."""
    requirements: list[JobRequirement] = []
    for m in _YEARS_EXPERIENCE_RE.finditer(text):
        years = int(m.group(1))
        requirements.append(JobRequirement(
            type=RequirementType.EXPERIENCE,
            value=f"{years}+ years of experience",
            importance=min(MAX_IMPORTANCE, years + 2),
        ))
    return requirements


def _extract_roles(text: str) -> list[JobRequirement]:
    return [
        JobRequirement(type=RequirementType.EXPERIENCE, value=row.term, importance=row.importance)
        for row in ROLE_KEYWORDS
        if row.term in text
    ]


def extract_requirements(job_description: str) -> list[JobRequirement]:
    """Extract typed, weighted requirements from a job description.

    Pure and deterministic; matching is case-insensitive. Distinct terms are
    never merged, so several education levels or role keywords may all appear.
    """
    text = job_description.lower()

    requirements = (
        _extract_skills(text)
        + _extract_education(text)
        + _extract_experience_terms(text)
        + _extract_years(text)
        + _extract_roles(text)
    )
    logger.debug(
        "Extracted %d requirements from %d-char description",
        len(requirements), len(job_description),
    )
    return requirements
