"""Roster-level aggregation consumed by the API layer.

Derived lists (all skills, all roles) are computed once per data load and
carried on an ``ApplicantRoster`` instead of living in module-level caches.
"""

from dataclasses import dataclass, field

from models.schemas.applicant import Applicant
from models.schemas.job_requirement import JobRequirement
from models.schemas.scored_applicant import ScoredApplicant


@dataclass(frozen=True)
class RequirementMatchCount:
    requirement: JobRequirement
    matching_applicants: int


@dataclass(frozen=True)
class ApplicantRoster:
    """A validated roster plus values derived from it at load time."""
    applicants: tuple[Applicant, ...]
    skills: tuple[str, ...] = ()
    roles: tuple[str, ...] = ()
    source: str = ""
    _by_email: dict[str, Applicant] = field(default_factory=dict, repr=False, compare=False)

    def get(self, email: str) -> Applicant | None:
        return self._by_email.get(email)

    def __len__(self) -> int:
        return len(self.applicants)


def extract_all_skills(applicants: list[Applicant]) -> list[str]:
    """Unique skill labels across the roster, sorted."""
    return sorted({skill for a in applicants for skill in a.skills})


def extract_all_roles(applicants: list[Applicant]) -> list[str]:
    """Unique role names across the roster, sorted."""
    return sorted({we.role_name for a in applicants for we in a.work_experiences})


def build_roster(applicants: list[Applicant], source: str = "") -> ApplicantRoster:
    return ApplicantRoster(
        applicants=tuple(applicants),
        skills=tuple(extract_all_skills(applicants)),
        roles=tuple(extract_all_roles(applicants)),
        source=source,
        _by_email={a.email: a for a in applicants},
    )


def suggest_skills(
    all_skills: list[str] | tuple[str, ...],
    query: str = "",
    exclude: list[str] | tuple[str, ...] = (),
) -> list[str]:
    """Skills containing ``query`` (case-insensitive) that are not already chosen."""
    needle = query.lower()
    excluded = set(exclude)
    return [s for s in all_skills if needle in s.lower() and s not in excluded]


def count_requirement_matches(
    requirements: list[JobRequirement], scored: list[ScoredApplicant]
) -> list[RequirementMatchCount]:
    """How many scored applicants matched each requirement's exact (type, value) pair."""
    matched_keys = [
        {(r.type, r.value) for r in (s.matched_requirements or [])}
        for s in scored
    ]
    return [
        RequirementMatchCount(
            requirement=req,
            matching_applicants=sum(1 for keys in matched_keys if (req.type, req.value) in keys),
        )
        for req in requirements
    ]


def find_scored(scored: list[ScoredApplicant], email: str) -> ScoredApplicant | None:
    return next((s for s in scored if s.applicant.email == email), None)


def find_rank(scored: list[ScoredApplicant], email: str) -> int:
    """1-based rank of ``email`` in a ranked list; 0 if absent."""
    for i, s in enumerate(scored, start=1):
        if s.applicant.email == email:
            return i
    return 0
