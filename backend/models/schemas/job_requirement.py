"""Typed, weighted criteria extracted from a job description."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RequirementType(str, Enum):
    SKILL = "skill"
    EDUCATION = "education"
    EXPERIENCE = "experience"


class JobRequirement(BaseModel):
    """A single requirement.

    ``value`` is a skill label, an education level label, an experience term
    or role keyword, or a synthesized ``"N+ years of experience"`` phrase.
    Frozen so requirements can be compared and hashed by (type, value, importance).
    """
    model_config = ConfigDict(frozen=True)

    type: RequirementType
    value: str
    importance: int = Field(..., ge=1)  # nominally 1-10
