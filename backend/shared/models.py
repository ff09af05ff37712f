"""
Shared data models used across modules.

These models are shared infrastructure, not business logic.
Module-specific models should stay in their respective module directories.
"""

from pydantic import BaseModel, Field


class AuthenticatedUser(BaseModel):
    """
    Represents an authenticated caller.

    Populated from a verified session token and made available to route
    handlers via dependency injection. The token carries only the subject,
    so anything beyond the user ID has to be fetched from the store.
    """

    id: str = Field(..., description="User ID (token subject)")

    model_config = {
        "frozen": True,
        "extra": "ignore",
    }


class MessageResponse(BaseModel):
    """Plain acknowledgement returned by delete endpoints."""

    msg: str
