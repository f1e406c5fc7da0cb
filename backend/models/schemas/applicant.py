"""Applicant records as supplied by the roster source.

The wire format uses the source's camelCase keys (``roleName``, ``isTop50``,
...); Python code reads the snake_case attribute names. Models are frozen:
scoring never mutates an applicant.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator

_FROZEN = ConfigDict(frozen=True, populate_by_name=True)


class WorkExperience(BaseModel):
    """A single (company, role) entry. List order is source order, not chronology."""
    model_config = _FROZEN

    company: str = ""
    role_name: str = Field("", alias="roleName")


class Degree(BaseModel):
    model_config = _FROZEN

    degree: str = ""
    subject: str = ""
    school: str = ""
    gpa: str = ""  # band string, e.g. "GPA 3.5-3.9"
    start_date: str = Field("", alias="startDate")
    end_date: str = Field("", alias="endDate")
    original_school: str = Field("", alias="originalSchool")
    is_top50: bool = Field(False, alias="isTop50")
    is_top25: bool = Field(False, alias="isTop25")

    @field_validator(
        "degree", "subject", "school", "gpa", "start_date", "end_date",
        "original_school", mode="before",
    )
    @classmethod
    def none_to_blank(cls, v):
        return "" if v is None else v

    @field_validator("is_top50", "is_top25", mode="before")
    @classmethod
    def none_to_false(cls, v):
        return False if v is None else v


class Education(BaseModel):
    model_config = _FROZEN

    highest_level: str = ""
    degrees: list[Degree] = []

    @field_validator("degrees", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return [] if v is None else v


class Applicant(BaseModel):
    """An applicant; ``email`` is the identity key within a roster."""
    model_config = _FROZEN

    name: str = ""
    email: str
    phone: str = ""
    location: str = ""
    submitted_at: str = ""
    work_availability: list[str] = []
    annual_salary_expectation: dict[str, str] = {}
    work_experiences: list[WorkExperience] = []
    education: Education = Education()
    skills: list[str] = []

    @field_validator(
        "work_availability", "work_experiences", "skills", mode="before"
    )
    @classmethod
    def none_to_empty_list(cls, v):
        return [] if v is None else v

    @field_validator("annual_salary_expectation", mode="before")
    @classmethod
    def none_to_empty_dict(cls, v):
        return {} if v is None else v

    @field_validator("education", mode="before")
    @classmethod
    def none_to_empty_education(cls, v):
        return Education() if v is None else v
