"""
Profiles module.

Handles developer profiles: status, skills, social links, experience and
education entries, and the GitHub repository listing.

Public API:
- IProfileService: Interface for profile operations
- Profile: Full profile with owner, experience and education
- ProfileRequest, ExperienceRequest, EducationRequest: Request bodies
"""

from .interfaces import IProfileService
from .models import (
    Education,
    EducationRequest,
    Experience,
    ExperienceRequest,
    GitHubRepository,
    Profile,
    ProfileOwner,
    ProfileRequest,
    SocialLinks,
)
from .exceptions import (
    ProfileNotFoundError,
    ExperienceNotFoundError,
    EducationNotFoundError,
    GitHubUserNotFoundError,
)

__all__ = [
    # Interface
    "IProfileService",
    # Models
    "Education",
    "EducationRequest",
    "Experience",
    "ExperienceRequest",
    "GitHubRepository",
    "Profile",
    "ProfileOwner",
    "ProfileRequest",
    "SocialLinks",
    # Exceptions
    "ProfileNotFoundError",
    "ExperienceNotFoundError",
    "EducationNotFoundError",
    "GitHubUserNotFoundError",
]
