# app/api/deps.py
import logging
from typing import Optional

from fastapi import Request

from app.core.auth import verify_token
from app.core.config import settings
from app.core.exceptions import AuthError, AuthorizationRequiredError, InvalidTokenError

logger = logging.getLogger(__name__)


def get_bearer_token(request: Request) -> str:
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        raise AuthorizationRequiredError()

    scheme, _, token = auth_header.partition(" ")
    token = token.strip()
    if scheme != "Bearer" or not token:
        raise InvalidTokenError("Authorization header must be in the format: Bearer <token>.")
    return token


async def require_auth(request: Request) -> Optional[int]:
    """
    Gate for protected routers.

    Verifies the bearer token and stores the authenticated user id on
    ``request.state.user_id``. A no-op when AUTH_ENABLED is off.
    """
    if not settings.AUTH_ENABLED:
        request.state.user_id = None
        return None

    try:
        user_id = verify_token(get_bearer_token(request))
    except AuthError as e:
        logger.warning(f"Rejected request to {request.url.path}: {e.error_code}")
        raise

    request.state.user_id = user_id
    return user_id


async def get_current_user_id(request: Request) -> Optional[int]:
    return getattr(request.state, "user_id", None)
