"""
Profiles module exceptions.
"""

from shared.exceptions import NotFoundError


class ProfileNotFoundError(NotFoundError):
    """
    Raised when a user has no profile.

    Reported as 400, like the rest of the profile lookups clients already
    handle.
    """

    status_code = 400

    def __init__(self, user_id: str, message: str = "Profile not found"):
        super().__init__(
            message,
            code="PROFILE_NOT_FOUND",
            details={"user_id": user_id},
        )


class ExperienceNotFoundError(NotFoundError):
    """Raised when an experience entry does not exist on the profile."""

    def __init__(self, experience_id: str):
        super().__init__(
            "Experience not found",
            code="EXPERIENCE_NOT_FOUND",
            details={"experience_id": experience_id},
        )


class EducationNotFoundError(NotFoundError):
    """Raised when an education entry does not exist on the profile."""

    def __init__(self, education_id: str):
        super().__init__(
            "Education not found",
            code="EDUCATION_NOT_FOUND",
            details={"education_id": education_id},
        )


class GitHubUserNotFoundError(NotFoundError):
    """Raised when GitHub has no user with the given name."""

    def __init__(self, username: str):
        super().__init__(
            "No Github profile found",
            code="GITHUB_USER_NOT_FOUND",
            details={"username": username},
        )
