"""Shared test configuration, pytest markers and sample applicants."""

import pytest

from models.schemas.applicant import Applicant, Degree, Education, WorkExperience


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "fixture_data: reads the bundled applicants.json roster"
    )


def make_applicant(
    email: str,
    *,
    highest_level: str = "",
    degrees: list[Degree] | None = None,
    roles: list[str] | None = None,
    skills: list[str] | None = None,
) -> Applicant:
    return Applicant(
        name=email.split("@")[0],
        email=email,
        education=Education(highest_level=highest_level, degrees=degrees or []),
        work_experiences=[
            WorkExperience(company=f"Company {i}", role_name=r)
            for i, r in enumerate(roles or [])
        ],
        skills=skills or [],
    )


@pytest.fixture
def frontend_dev() -> Applicant:
    return make_applicant(
        "frontend@example.com",
        highest_level="Bachelor's Degree",
        degrees=[Degree(degree="Bachelor's Degree", gpa="GPA 3.5-3.9")],
        roles=["Frontend Developer", "Software Engineer", "Barista"],
        skills=["React", "Redux"],
    )


@pytest.fixture
def attorney() -> Applicant:
    return make_applicant(
        "attorney@example.com",
        highest_level="Juris Doctor (J.D)",
        degrees=[
            Degree(degree="Juris Doctor (J.D)", gpa="GPA 3.0-3.4", is_top50=True, is_top25=True),
        ],
        roles=["Associate Attorney", "Legal Counsel"],
        skills=["Litigation", "Contract Drafting"],
    )


@pytest.fixture
def phd_scientist() -> Applicant:
    return make_applicant(
        "scientist@example.com",
        highest_level="Ph.D.",
        degrees=[Degree(degree="Ph.D.", gpa="3.8")],
        roles=["Research Scientist"],
        skills=["Python", "Machine Learning"],
    )


@pytest.fixture
def blank_applicant() -> Applicant:
    return make_applicant("blank@example.com")


@pytest.fixture
def raw_roster() -> list[dict]:
    """Applicant records in the source's camelCase wire format."""
    return [
        {
            "name": "Clever Monkey",
            "email": "clever-monkey@example.com",
            "phone": "5582981474204",
            "location": "Maceió",
            "submitted_at": "2025-01-28 09:02:16.000000",
            "work_availability": ["full-time", "part-time"],
            "annual_salary_expectation": {"full-time": "$117548"},
            "work_experiences": [
                {"company": "StarLab Digital Ventures", "roleName": "Full Stack Developer"},
                {"company": "OrbitalLife", "roleName": "Project Manager"},
            ],
            "education": {
                "highest_level": "Bachelor's Degree",
                "degrees": [
                    {
                        "degree": "Bachelor's Degree",
                        "subject": "Computer Science",
                        "school": "International Institutions",
                        "gpa": "GPA 3.0-3.4",
                        "startDate": "2023",
                        "endDate": "2027",
                        "originalSchool": "Faculdade Descomplica",
                        "isTop50": False,
                    }
                ],
            },
            "skills": ["Data Analysis", "Docker", "Microservices"],
        },
        {
            "name": "Noble Antelope",
            "email": "noble-antelope@example.com",
            "work_experiences": [{"company": "BJIT Group", "roleName": "Software Engineer"}],
            "education": {"highest_level": "Bachelor's Degree", "degrees": None},
            "skills": None,
        },
    ]


@pytest.fixture
def applicant_factory():
    return make_applicant
