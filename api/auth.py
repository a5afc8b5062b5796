"""Authentication guard for the bookshelf API."""

from typing import Annotated

from fastapi import Depends, HTTPException, Request, status
from sqlmodel import Session

from api.dependencies import (
    get_auth_service,
    get_catalog_client,
    get_db,
    get_settings,
)
from api.models.auth import AuthError
from catalog.google_books import GoogleBooksClient
from core.config import Settings
from core.exceptions import UnauthorizedError
from core.log import get_logger
from core.models.domain.context import RequestContext
from core.services import AuthService
from core.utils import parse_bearer_token

logger = get_logger(__name__)


def auth_error(settings: Settings, detail: str, error: str) -> HTTPException:
    """Build a 401 response carrying an AuthError body."""
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=AuthError(
            detail=detail,
            error=error,
            environment=settings.environment.value,
        ).model_dump(),
        headers={"WWW-Authenticate": "Bearer"},
    )


def get_bearer_token(
    request: Request,
    settings: Annotated[Settings, Depends(get_settings)],
) -> str:
    """Get the bearer token from the Authorization header."""
    token = parse_bearer_token(request.headers.get("Authorization"))
    if token is None:
        logger.warning(f"Missing bearer token on {request.url.path}")
        raise auth_error(settings, "Authentication required", "missing_auth_header")
    return token


def get_current_user_id(
    token: Annotated[str, Depends(get_bearer_token)],
    settings: Annotated[Settings, Depends(get_settings)],
    auth_service: Annotated[AuthService, Depends(get_auth_service)],
) -> int:
    """Resolve the access token to the ID of the user it was issued for."""
    try:
        return auth_service.authenticate(token)
    except UnauthorizedError as e:
        logger.info(f"Rejected access token: {e}")
        raise auth_error(settings, str(e), "invalid_token")


def get_request_context(
    user_id: Annotated[int, Depends(get_current_user_id)],
    db_session: Annotated[Session, Depends(get_db)],
    catalog: Annotated[GoogleBooksClient, Depends(get_catalog_client)],
) -> RequestContext:
    """Build the per-request context for an authenticated caller."""
    return RequestContext(user_id=user_id, session=db_session, catalog=catalog)
