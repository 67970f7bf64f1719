"""Authentication API endpoints.

Endpoints that hash or compare passwords are plain ``def`` so FastAPI runs
them in its threadpool rather than on the event loop.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from src.api.dependencies import get_current_user
from src.database import get_db
from src.models.user import User
from src.schemas.auth import (
    PasswordChangeRequest,
    SignedInUserEnvelope,
    SignedInUserResponse,
    SignInRequest,
    SignUpRequest,
    UserEnvelope,
    UserResponse,
)
from src.services import auth as auth_service

router = APIRouter(tags=["auth"])


@router.post("/sign-up", response_model=UserEnvelope, status_code=status.HTTP_201_CREATED)
def sign_up(
    body: SignUpRequest,
    db: Annotated[Session, Depends(get_db)],
):
    """Register a new user."""
    user = auth_service.sign_up(db, body.credentials)
    return UserEnvelope(user=UserResponse.model_validate(user))


@router.post("/sign-in", response_model=SignedInUserEnvelope, status_code=status.HTTP_201_CREATED)
def sign_in(
    body: SignInRequest,
    db: Annotated[Session, Depends(get_db)],
):
    """Sign in with email and password and receive a fresh bearer token."""
    credentials = body.credentials
    user = auth_service.sign_in(
        db,
        credentials.email if credentials else None,
        credentials.password if credentials else None,
    )
    return SignedInUserEnvelope(user=SignedInUserResponse.model_validate(user))


@router.patch("/change-password", status_code=status.HTTP_204_NO_CONTENT)
def change_password(
    body: PasswordChangeRequest,
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Change the current user's password."""
    passwords = body.passwords
    auth_service.change_password(
        db,
        current_user,
        passwords.old if passwords else None,
        passwords.new if passwords else None,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/sign-out", status_code=status.HTTP_204_NO_CONTENT)
def sign_out(
    current_user: Annotated[User, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
):
    """Sign out by invalidating the current bearer token."""
    auth_service.sign_out(db, current_user)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
