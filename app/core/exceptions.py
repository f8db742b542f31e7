# app/core/exceptions.py
"""
Application error taxonomy.

Every error carries the HTTP status it maps to; the handlers registered in
``app.main`` turn them into JSON responses of the form ``{"message": ...}``
(auth failures add an ``"error"`` code).
"""
from typing import Any, Dict, Optional


class AppError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"message": self.message}


class ValidationError(AppError):
    """Malformed, missing or wrong-typed input."""
    status_code = 400
    default_message = "Invalid request"


class NotFoundError(AppError):
    """The primary entity of the request does not exist."""
    status_code = 404
    default_message = "Not found"


class ReferentialError(AppError):
    """A referenced (foreign) entity does not exist or blocks the operation."""
    status_code = 400
    default_message = "Referenced entity does not exist"


class ConflictError(AppError):
    """Uniqueness violation."""
    status_code = 400
    default_message = "Resource already exists"


class AuthError(AppError):
    status_code = 401
    default_message = "Not authenticated"
    error_code: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        if self.error_code is None:
            return {"message": self.message}
        return {"error": self.error_code, "message": self.message}


class AuthorizationRequiredError(AuthError):
    error_code = "authorization_required"
    default_message = "Request does not contain an access token."


class InvalidTokenError(AuthError):
    error_code = "invalid_token"
    default_message = "Signature verification failed."


class TokenExpiredError(AuthError):
    error_code = "token_expired"
    default_message = "The token has expired."


class InvalidCredentialsError(AuthError):
    default_message = "Invalid email or password"


class InternalError(AppError):
    """Unexpected store failure; the detail is logged, never returned."""
