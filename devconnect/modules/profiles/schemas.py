from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional, List, Dict
from datetime import date, datetime

SOCIAL_NETWORKS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


def split_skills(skills: str) -> List[str]:
    """'node, react , css' -> ['node', 'react', 'css']"""
    return [skill.strip() for skill in skills.split(",") if skill.strip()]


class ProfileUpsert(BaseModel):
    status: str = Field(min_length=1)
    skills: str = Field(min_length=1)  # comma separated, e.g. "python, fastapi"
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None

    @field_validator("skills")
    @classmethod
    def skills_not_blank(cls, value: str) -> str:
        if not split_skills(value):
            raise ValueError("no skills listed")
        return value


class ExperienceCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(min_length=1)
    company: str = Field(min_length=1)
    location: Optional[str] = None
    from_date: date = Field(alias="from")
    to_date: Optional[date] = Field(default=None, alias="to")
    current: bool = False
    description: Optional[str] = None


class Experience(ExperienceCreate):
    id: str


class EducationCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    school: str = Field(min_length=1)
    degree: str = Field(min_length=1)
    field_of_study: str = Field(min_length=1, alias="fieldOfStudy")
    from_date: date = Field(alias="from")
    to_date: Optional[date] = Field(default=None, alias="to")
    current: bool = False
    description: Optional[str] = None


class Education(EducationCreate):
    id: str


class ProfileOwner(BaseModel):
    id: str
    name: str
    avatar: Optional[str] = None


class ProfileResponse(BaseModel):
    id: str
    user: Optional[ProfileOwner] = None  # None once the owning user is gone
    status: Optional[str] = None
    skills: List[str] = []
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    social: Dict[str, str] = {}
    experience: List[Experience] = []
    education: List[Education] = []
    date: Optional[datetime] = None


class MessageResponse(BaseModel):
    msg: str
