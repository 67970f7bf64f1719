"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field


class SignUpCredentials(BaseModel):
    """Sign-up request fields.

    Everything is optional at the schema level: password checks raise
    ``BadParamsError`` in the service, and a missing email is rejected by the
    store's NOT NULL constraint.
    """

    email: EmailStr | None = None
    password: str | None = None
    password_confirmation: str | None = None
    name: str | None = Field(None, max_length=255)
    location: str | None = Field(None, max_length=255)
    biography: str | None = None


class SignUpRequest(BaseModel):
    credentials: SignUpCredentials | None = None


class SignInCredentials(BaseModel):
    """User login request. The email is normalized the same way as on sign-up."""

    email: str | None = None
    password: str | None = None


class SignInRequest(BaseModel):
    credentials: SignInCredentials | None = None


class PasswordChange(BaseModel):
    """Old and new password for an authenticated user."""

    old: str | None = None
    new: str | None = None


class PasswordChangeRequest(BaseModel):
    passwords: PasswordChange | None = None


class UserResponse(BaseModel):
    """Public user representation. Never carries the password hash or token."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    email: str
    name: str
    location: str
    biography: str
    artwork: list
    created_at: datetime
    updated_at: datetime


class SignedInUserResponse(UserResponse):
    """User representation returned by sign-in, including the new bearer token."""

    token: str


class UserEnvelope(BaseModel):
    user: UserResponse


class SignedInUserEnvelope(BaseModel):
    user: SignedInUserResponse
