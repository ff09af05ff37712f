"""
Profiles module data models.

A profile belongs to exactly one user. Experience and education entries
are embedded lists kept newest-first.
"""

import uuid
from datetime import date, datetime
from typing import Annotated, Optional
from pydantic import BaseModel, ConfigDict, Field

from shared.validation import RuleModel, comma_list, empty_as_none, required

SOCIAL_NETWORKS = ("youtube", "twitter", "facebook", "linkedin", "instagram")


def new_entry_id() -> str:
    return str(uuid.uuid4())


class SocialLinks(BaseModel):
    """Links to the user's social network pages."""

    youtube: Optional[str] = None
    twitter: Optional[str] = None
    facebook: Optional[str] = None
    linkedin: Optional[str] = None
    instagram: Optional[str] = None


class Experience(BaseModel):
    """A job held by the user."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_entry_id)
    title: str
    company: str
    location: Optional[str] = None
    from_date: date = Field(..., alias="from")
    to: Annotated[Optional[date], empty_as_none()] = None
    current: bool = False
    description: Optional[str] = None


class Education(BaseModel):
    """A school attended by the user."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(default_factory=new_entry_id)
    school: str
    degree: str
    fieldofstudy: str
    from_date: date = Field(..., alias="from")
    to: Annotated[Optional[date], empty_as_none()] = None
    current: bool = False
    description: Optional[str] = None


class ProfileOwner(BaseModel):
    """The public part of the user a profile belongs to."""

    id: str
    name: str
    avatar: Optional[str] = None


class Profile(BaseModel):
    """A developer profile."""

    id: str = Field(..., description="Profile ID (UUID)")
    user: ProfileOwner = Field(..., description="Owning user")
    company: Optional[str] = None
    website: Optional[str] = None
    location: Optional[str] = None
    status: str = Field(..., description="Professional status, e.g. 'Developer'")
    skills: list[str] = Field(default_factory=list)
    bio: Optional[str] = None
    githubusername: Optional[str] = None
    social: SocialLinks = Field(default_factory=SocialLinks)
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    date: Optional[datetime] = None


class ProfileRequest(RuleModel):
    """
    Create-or-update request for the caller's profile.

    ``skills`` is a comma-separated list. Empty optional fields are left
    untouched on update.
    """

    status: Annotated[str, required("Status is required")] = ""
    skills: Annotated[str, comma_list("Skills are required")] = ""
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

    def skill_list(self) -> list[str]:
        return [skill.strip() for skill in self.skills.split(",") if skill.strip()]

    def social_links(self) -> dict[str, str]:
        links = {}
        for network in SOCIAL_NETWORKS:
            value = getattr(self, network)
            if value:
                links[network] = value
        return links


class ExperienceRequest(RuleModel):
    """Request to add an experience entry."""

    title: Annotated[str, required("Title is required")] = ""
    company: Annotated[str, required("Company is required")] = ""
    from_date: Annotated[date, required("From date is required")] = Field(None, alias="from")
    location: Optional[str] = None
    to: Annotated[Optional[date], empty_as_none()] = None
    current: bool = False
    description: Optional[str] = None

    def to_entry(self) -> Experience:
        return Experience(**self.model_dump())


class EducationRequest(RuleModel):
    """Request to add an education entry."""

    school: Annotated[str, required("School is required")] = ""
    degree: Annotated[str, required("Degree is required")] = ""
    fieldofstudy: Annotated[str, required("Field of study is required")] = ""
    from_date: Annotated[date, required("From date is required")] = Field(None, alias="from")
    to: Annotated[Optional[date], empty_as_none()] = None
    current: bool = False
    description: Optional[str] = None

    def to_entry(self) -> Education:
        return Education(**self.model_dump())


class GitHubRepository(BaseModel):
    """A public repository as listed by the GitHub API."""

    model_config = ConfigDict(extra="ignore")

    id: int
    name: str
    full_name: Optional[str] = None
    html_url: str
    description: Optional[str] = None
    language: Optional[str] = None
    stargazers_count: int = 0
    watchers_count: int = 0
    forks_count: int = 0
