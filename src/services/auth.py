"""Authentication service for password hashing, bearer tokens and sessions."""

import logging
import secrets

from passlib.context import CryptContext
from pydantic.networks import validate_email
from pydantic_core import PydanticCustomError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.config import get_settings
from src.errors import BadCredentialsError, BadParamsError
from src.models.user import DEFAULT_BIOGRAPHY, DEFAULT_LOCATION, DEFAULT_NAME, User
from src.schemas.auth import SignUpCredentials

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing context
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
    bcrypt__rounds=settings.bcrypt_rounds,
)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a password against its hash (constant-time)."""
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash a password with a fresh salt."""
    return pwd_context.hash(password)


def generate_token() -> str:
    """Create an unguessable bearer token, lowercase hex encoded."""
    return secrets.token_hex(settings.token_bytes)


def save_user(db: Session, user: User) -> User:
    """Commit pending changes to a user, rolling the session back if the store rejects them."""
    db.add(user)
    try:
        db.commit()
    except SQLAlchemyError:
        db.rollback()
        raise
    db.refresh(user)
    return user


def get_user_by_email(db: Session, email: str) -> User | None:
    """Get a user by email."""
    return db.query(User).filter(User.email == email).first()


def get_user_by_token(db: Session, token: str) -> User | None:
    """Resolve a bearer token to the user currently holding it."""
    return db.query(User).filter(User.token == token).first()


def sign_up(db: Session, credentials: SignUpCredentials | None) -> User:
    """Create a new user from sign-up credentials.

    Raises ``BadParamsError`` before touching the store when the password is
    missing, empty or does not match its confirmation. Store rejections such as
    a duplicate email propagate unchanged.
    """
    if (
        credentials is None
        or not credentials.password
        or credentials.password != credentials.password_confirmation
    ):
        raise BadParamsError()

    user = User(
        name=credentials.name or DEFAULT_NAME,
        email=credentials.email,
        hashed_password=get_password_hash(credentials.password),
        location=credentials.location or DEFAULT_LOCATION,
        biography=credentials.biography or DEFAULT_BIOGRAPHY,
        artwork=[],
    )
    save_user(db, user)
    logger.info(f"Created user {user.id}")
    return user


def normalize_email(email: str) -> str | None:
    """Normalize an email exactly as ``EmailStr`` does on sign-up, or None if invalid."""
    try:
        _, normalized = validate_email(email)
    except PydanticCustomError:
        return None
    return normalized


def sign_in(db: Session, email: str | None, password: str | None) -> User:
    """Authenticate by email and password and issue a new bearer token.

    Unknown email and wrong password raise the same ``BadCredentialsError``
    after the same amount of hashing work. Any previously issued token is
    overwritten.
    """
    normalized = normalize_email(email) if email else None
    user = get_user_by_email(db, normalized) if normalized else None
    if user is not None and password:
        correct_password = verify_password(password, user.hashed_password)
    else:
        # Spend the same hashing time as a real comparison
        pwd_context.dummy_verify()
        correct_password = False

    if not correct_password:
        logger.info(f"Rejected sign-in attempt for {email}")
        raise BadCredentialsError()

    user.token = generate_token()
    save_user(db, user)
    logger.info(f"User {user.id} signed in")
    return user


def change_password(db: Session, user: User, old: str | None, new: str | None) -> None:
    """Replace a user's password after checking the old one.

    A missing new password and a wrong old password are reported identically.
    """
    correct_password = bool(old) and verify_password(old, user.hashed_password)
    if not new or not correct_password:
        raise BadParamsError()

    user.hashed_password = get_password_hash(new)
    save_user(db, user)
    logger.info(f"User {user.id} changed password")


def sign_out(db: Session, user: User) -> None:
    """Invalidate the current session by rotating the stored token."""
    user.token = generate_token()
    save_user(db, user)
    logger.info(f"User {user.id} signed out")
