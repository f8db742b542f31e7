# app/core/auth.py

import logging
from typing import Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.crud.user import create_user, get_user_by_email
from app.models.user import User
from .config import settings
from .exceptions import ConflictError, InvalidCredentialsError, InvalidTokenError, ValidationError
from .security import create_access_token, decode_access_token, get_password_hash, verify_password

logger = logging.getLogger(__name__)

MIN_PASSWORD_LENGTH = 6


def normalize_email(email: str) -> str:
    return email.strip().lower()


async def register(
    name: str,
    email: Optional[str],
    password: Optional[str],
    db: AsyncSession,
) -> User:
    """
    Sign a new user up.

    With AUTH_ENABLED both email and password are mandatory; otherwise they are
    optional but still validated when given.
    """
    if not name:
        raise ValidationError("Field 'name' is required")
    if settings.AUTH_ENABLED and not email:
        raise ValidationError("Field 'email' is required")
    if (settings.AUTH_ENABLED or password is not None) and (
        not password or len(password) < MIN_PASSWORD_LENGTH
    ):
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")

    normalized_email = normalize_email(email) if email else None
    if normalized_email and await get_user_by_email(normalized_email, db):
        raise ConflictError("User with this email already exists")

    password_hash = get_password_hash(password) if password else None
    user = await create_user(name, normalized_email, password_hash, db)
    logger.info(f"User {user.id} has registered")
    return user


async def login(email: str, password: str, db: AsyncSession) -> Tuple[str, User]:
    """
    Check the credentials and issue a bearer token.

    The same error is raised for an unknown email and for a wrong password.
    """
    user = await get_user_by_email(normalize_email(email), db)
    if user is None or not user.password_hash or not verify_password(password, user.password_hash):
        logger.warning("Failed login attempt")
        raise InvalidCredentialsError()

    token = create_access_token(str(user.id))
    logger.info(f"User {user.id} logged in")
    return token, user


def verify_token(token: str) -> int:
    """Return the user id embedded in a valid, unexpired token."""
    subject = decode_access_token(token)
    try:
        return int(subject)
    except (TypeError, ValueError):
        raise InvalidTokenError("Invalid user ID format in token")
