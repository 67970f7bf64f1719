"""Artist profile schemas."""

from pydantic import BaseModel, Field

from src.schemas.auth import UserResponse


class ProfileUpdate(BaseModel):
    """Profile fields. Omitted or empty fields are reset to their defaults."""

    name: str | None = Field(None, max_length=255)
    location: str | None = Field(None, max_length=255)
    biography: str | None = None


class ProfileUpdateRequest(BaseModel):
    credentials: ProfileUpdate = Field(default_factory=ProfileUpdate)


class ArtistEnvelope(BaseModel):
    artist: UserResponse


class ArtistListResponse(BaseModel):
    artists: list[UserResponse]
