"""Artist account model."""

import uuid

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from src.database import Base
from src.models.mixins import TimestampMixin

DEFAULT_NAME = "Anonymous"
DEFAULT_LOCATION = "No Location Given"
DEFAULT_BIOGRAPHY = "No Biography Found"


def generate_user_id() -> str:
    """Opaque identifier assigned once at creation."""
    return uuid.uuid4().hex


class User(Base, TimestampMixin):
    """A registered artist: identity, profile fields and the current session token."""

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=generate_user_id)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    # Single active session: overwritten on sign-in, rotated on sign-out
    token: Mapped[str | None] = mapped_column(String(255), unique=True, nullable=True, index=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False, default=DEFAULT_NAME)
    location: Mapped[str] = mapped_column(String(255), nullable=False, default=DEFAULT_LOCATION)
    biography: Mapped[str] = mapped_column(String, nullable=False, default=DEFAULT_BIOGRAPHY)
    artwork: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
