"""Pydantic schemas for API requests and responses."""

from src.schemas.artist import (
    ArtistEnvelope,
    ArtistListResponse,
    ProfileUpdate,
    ProfileUpdateRequest,
)
from src.schemas.auth import (
    PasswordChange,
    PasswordChangeRequest,
    SignedInUserEnvelope,
    SignedInUserResponse,
    SignInCredentials,
    SignInRequest,
    SignUpCredentials,
    SignUpRequest,
    UserEnvelope,
    UserResponse,
)

__all__ = [
    "SignUpCredentials",
    "SignUpRequest",
    "SignInCredentials",
    "SignInRequest",
    "PasswordChange",
    "PasswordChangeRequest",
    "UserResponse",
    "UserEnvelope",
    "SignedInUserResponse",
    "SignedInUserEnvelope",
    "ProfileUpdate",
    "ProfileUpdateRequest",
    "ArtistEnvelope",
    "ArtistListResponse",
]
