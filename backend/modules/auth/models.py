"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from typing import Annotated, Optional
from pydantic import BaseModel, Field

from shared.validation import RuleModel, min_length, present, required, valid_email


class TokenSettings(BaseModel):
    """
    Signing configuration shared by the token issuer and verifier.

    Built once from ``Settings`` at startup; frozen so no request can
    change it.
    """

    secret: str = Field(..., repr=False, description="HMAC signing secret")
    algorithm: str = Field(default="HS256", description="JWT signing algorithm")
    expires_in: int = Field(default=3600, gt=0, description="Session TTL in seconds")

    model_config = {"frozen": True}


class TokenPayload(BaseModel):
    """Decoded session token claims."""

    sub: str = Field(..., description="Subject (user ID)")
    iat: int = Field(..., description="Issued at timestamp")
    exp: int = Field(..., description="Expiration timestamp")
    jti: Optional[str] = Field(None, description="Unique token ID")


class UserRecord(BaseModel):
    """
    A stored user, including the password hash.

    Never returned by an endpoint; use ``to_public()``.
    """

    id: str
    name: str
    email: str
    password_hash: str = Field(..., repr=False)
    avatar: Optional[str] = None
    date: Optional[datetime] = None

    def to_public(self) -> "User":
        return User(
            id=self.id,
            name=self.name,
            email=self.email,
            avatar=self.avatar,
            date=self.date,
        )


class User(BaseModel):
    """A user as exposed by the API (no password)."""

    id: str = Field(..., description="User ID (UUID)")
    name: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address")
    avatar: Optional[str] = Field(None, description="Gravatar URL")
    date: Optional[datetime] = Field(None, description="Registration time")


class RegisterRequest(RuleModel):
    """Request to create a new account."""

    name: Annotated[str, required("Name is required")] = ""
    email: Annotated[str, valid_email("Please include a valid email")] = ""
    password: Annotated[
        str,
        min_length(6, "Please enter a password with 6 or more characters"),
    ] = ""


class LoginRequest(RuleModel):
    """Request to authenticate with email and password."""

    email: Annotated[str, valid_email("Please include a valid email")] = ""
    password: Annotated[str, present("Password is required")] = ""


class TokenResponse(BaseModel):
    """Session token returned by register and login."""

    token: str
