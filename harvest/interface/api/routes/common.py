"""Helpers shared by the API routes."""

import logfire
from fastapi import HTTPException, status

from harvest.domain.error import (
    DomainError,
    InvalidParentCommentError,
    NotAuthorizedError,
    NotFoundError,
    OrderRejectedError,
    ValidationError,
)
from harvest.domain.service import JWTService
from harvest.interface.error import AuthenticationRequiredError


def require_user_id(
    jwt_service: JWTService, auth_token: str | None, action: str
) -> str:
    """Return the acting user's ID from the ``auth_token`` cookie.

    Args:
        jwt_service: JWT service for token verification
        auth_token: JWT token from cookie
        action: What the caller is trying to do, for the error message

    Raises:
        AuthenticationRequiredError: If the token is missing or invalid
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise AuthenticationRequiredError(f"Authentication required to {action}")
    return user_id


def to_http_error(error: Exception, action: str) -> HTTPException:
    """Translate an error raised below the routes into an HTTP response.

    Args:
        error: Exception raised by a use case
        action: Short description of the failed operation, for logging

    Returns:
        HTTPException to raise from the route
    """
    if isinstance(error, AuthenticationRequiredError):
        return HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED, detail=str(error)
        )
    if isinstance(error, NotFoundError):
        logfire.warn(f"{action} failed - not found", error=str(error))
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, NotAuthorizedError):
        logfire.warn(f"{action} failed - not authorized", error=str(error))
        return HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=str(error))
    if isinstance(
        error,
        (ValidationError, InvalidParentCommentError, OrderRejectedError, ValueError),
    ):
        # pydantic.ValidationError is a ValueError, as is a malformed UUID
        logfire.warn(f"{action} failed - invalid request", error=str(error))
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, DomainError):
        logfire.warn(f"{action} failed", error=str(error))
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))

    logfire.error(f"{action} failed - unexpected error", error=str(error))
    return HTTPException(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        detail=f"{action} failed",
    )
