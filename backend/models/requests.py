from pydantic import BaseModel, Field, field_validator


class ManualRankRequest(BaseModel):
    job_type: str = Field("tech", max_length=50, description="tech, legal, or any other category")
    required_skills: list[str] = Field(default_factory=list, max_length=100)
    count: int | None = Field(None, ge=1, description="Keep only the top N; omit for the full roster")

    @field_validator("required_skills")
    @classmethod
    def dedupe_skills(cls, v: list[str]) -> list[str]:
        # A skill listed twice would be scored twice
        seen: set[str] = set()
        skills = []
        for s in (s.strip() for s in v):
            if s and s not in seen:
                seen.add(s)
                skills.append(s)
        return skills


class JobDescriptionRequest(BaseModel):
    job_description: str = Field(..., description="Free-text job description")
