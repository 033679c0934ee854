# app/profile/schemas.py
from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from app.users.schemas import UserPublic


class _Payload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # "" cuenta como ausente (el front manda inputs vacíos)
    @field_validator("*", mode="before")
    @classmethod
    def _empty_to_none(cls, v):
        if v == "":
            return None
        return v


class ProfileIn(_Payload):
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    status: Optional[str] = None
    githubusername: Optional[str] = None
    skills: Optional[str] = None  # "js, node, go"

    youtube: Optional[str] = None
    facebook: Optional[str] = None
    twitter: Optional[str] = None
    instagram: Optional[str] = None
    linkedin: Optional[str] = None


class ExperienceIn(_Payload):
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    from_: Optional[date] = Field(None, alias="from")
    to: Optional[date] = None
    current: Optional[bool] = None
    description: Optional[str] = None


class EducationIn(_Payload):
    school: Optional[str] = None
    degree: Optional[str] = None
    from_: Optional[date] = Field(None, alias="from")
    to: Optional[date] = None
    current: Optional[bool] = None
    description: Optional[str] = None


# (campo, mensaje) obligatorios por payload
PROFILE_REQUIRED = [
    ("status", "Status is required"),
    ("skills", "Skills is required"),
]
EXPERIENCE_REQUIRED = [
    ("title", "Title is required"),
    ("company", "Company is required"),
    ("from", "From date is required"),
]
EDUCATION_REQUIRED = [
    ("school", "School is required"),
    ("degree", "Degree is required"),
    ("from", "From date is required"),
]


def missing_fields(payload: BaseModel, required: list[tuple[str, str]]) -> list[dict]:
    data = payload.model_dump(by_alias=True)
    return [
        {"field": name, "message": message}
        for name, message in required
        if data.get(name) is None
    ]


def entry_fields(payload: BaseModel) -> dict:
    """Dict listo para guardar en la columna JSON (fechas en ISO)."""
    return payload.model_dump(mode="json", by_alias=True, exclude_none=True)


class ExperienceOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: Optional[str] = None
    company: Optional[str] = None
    location: Optional[str] = None
    from_: Optional[date] = Field(None, alias="from")
    to: Optional[date] = None
    current: Optional[bool] = None
    description: Optional[str] = None


class EducationOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    school: Optional[str] = None
    degree: Optional[str] = None
    from_: Optional[date] = Field(None, alias="from")
    to: Optional[date] = None
    current: Optional[bool] = None
    description: Optional[str] = None


class ProfileOut(BaseModel):
    id: int
    user: Optional[UserPublic] = None
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    status: Optional[str] = None
    githubusername: Optional[str] = None
    skills: list[str] = []
    social: dict[str, str] = {}
    experience: list[ExperienceOut] = []
    education: list[EducationOut] = []
    created_at: Optional[datetime] = None
