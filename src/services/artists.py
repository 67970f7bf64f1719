"""Artist profile reads and updates."""

import logging

from sqlalchemy.orm import Session

from src.errors import DocumentNotFoundError
from src.models.user import DEFAULT_BIOGRAPHY, DEFAULT_LOCATION, DEFAULT_NAME, User
from src.services.auth import save_user

logger = logging.getLogger(__name__)


def list_artists(db: Session) -> list[User]:
    """Every registered artist, oldest first."""
    return db.query(User).order_by(User.created_at, User.id).all()


def get_artist(db: Session, artist_id: str) -> User:
    """Get an artist by id or raise ``DocumentNotFoundError``."""
    user = db.get(User, artist_id)
    if user is None:
        raise DocumentNotFoundError()
    return user


def update_profile(
    db: Session,
    user: User,
    name: str | None = None,
    location: str | None = None,
    biography: str | None = None,
) -> User:
    """Overwrite all three profile fields.

    Omitted or empty fields are reset to their defaults rather than kept.
    """
    user.name = name or DEFAULT_NAME
    user.location = location or DEFAULT_LOCATION
    user.biography = biography or DEFAULT_BIOGRAPHY
    save_user(db, user)
    logger.info(f"Updated profile for user {user.id}")
    return user
