"""Artist profile API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_user
from src.database import get_db
from src.models.user import User
from src.schemas.artist import ArtistEnvelope, ArtistListResponse, ProfileUpdateRequest
from src.schemas.auth import UserResponse
from src.services import artists as artist_service

router = APIRouter(tags=["artists"])


@router.get("/view-artists", response_model=ArtistListResponse)
def view_artists(db: Annotated[Session, Depends(get_db)]):
    """List every registered artist."""
    users = artist_service.list_artists(db)
    return ArtistListResponse(artists=[UserResponse.model_validate(user) for user in users])


@router.get("/artists/{artist_id}", response_model=ArtistEnvelope)
def get_artist(artist_id: str, db: Annotated[Session, Depends(get_db)]):
    """Get a single artist by id."""
    user = artist_service.get_artist(db, artist_id)
    return ArtistEnvelope(artist=UserResponse.model_validate(user))


@router.patch("/update-artist", status_code=status.HTTP_204_NO_CONTENT)
def update_artist(
    body: ProfileUpdateRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Update the current user's profile fields."""
    profile = body.credentials
    artist_service.update_profile(
        db,
        current_user,
        name=profile.name,
        location=profile.location,
        biography=profile.biography,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)
