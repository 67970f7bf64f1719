"""FastAPI dependencies for authentication."""

from typing import Annotated

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from src.database import get_db
from src.errors import UnauthorizedError
from src.models.user import User
from src.services.auth import get_user_by_token

security = HTTPBearer(auto_error=False)


def get_current_user(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> User:
    """Get the user holding the presented bearer token."""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError()

    user = get_user_by_token(db, credentials.credentials)
    if user is None:
        raise UnauthorizedError()

    return user
