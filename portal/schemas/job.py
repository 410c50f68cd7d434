from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator
from datetime import datetime


def _split_csv(value):
    # The posting form sends skills as one comma-separated string
    if isinstance(value, str):
        return [s.strip() for s in value.split(",") if s.strip()]
    return value


class JobBase(BaseModel):
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    skills: List[str] = Field(default_factory=list)
    location: Optional[str] = None
    salary: Optional[str] = None
    experience: Optional[str] = None

    @field_validator("skills", mode="before")
    @classmethod
    def split_skills(cls, value):
        return _split_csv(value)

class JobCreate(JobBase):
    pass

class JobUpdate(BaseModel):
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    skills: Optional[List[str]] = None
    location: Optional[str] = None
    salary: Optional[str] = None
    experience: Optional[str] = None

    @field_validator("title", "description", "skills", mode="before")
    @classmethod
    def reject_null(cls, value):
        # Omit a field to leave it unchanged; these columns cannot be cleared
        if value is None:
            raise ValueError("Field cannot be null")
        return value

    @field_validator("skills", mode="before")
    @classmethod
    def split_skills(cls, value):
        return _split_csv(value)

class JobResponse(JobBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    posted_by: int
    posted_at: Optional[datetime] = None
