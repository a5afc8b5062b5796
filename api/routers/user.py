"""User sign-up, sign-in and session refresh router."""

from fastapi import APIRouter, Depends, Request, status
from sqlmodel import Session

from api.auth import auth_error
from api.dependencies import get_auth_service, get_db, get_settings
from api.utils.error_handler import handle_api_operation
from core.config import Settings
from core.models import (
    RefreshResponse,
    SignInRequest,
    SignInResponse,
    SignUpRequest,
    SignUpResponse,
)
from core.services import AuthService
from core.utils import parse_bearer_token

router = APIRouter(prefix="/user", tags=["user"])


@router.post(
    "/signin",
    response_model=SignInResponse,
    status_code=status.HTTP_201_CREATED,
)
def signin(
    body: SignInRequest,
    db_session: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
) -> SignInResponse:
    """Sign in with email and password.

    Returns:
        The user with a fresh access/refresh token pair

    Raises:
        HTTPException: 401 if the credentials are invalid
    """

    def signin_operation() -> SignInResponse:
        return auth_service.sign_in(db_session, body.email, body.password)

    return handle_api_operation(signin_operation, error_message="Failed to sign in")


@router.post(
    "/signup",
    response_model=SignUpResponse,
    status_code=status.HTTP_201_CREATED,
)
def signup(
    body: SignUpRequest,
    db_session: Session = Depends(get_db),
    auth_service: AuthService = Depends(get_auth_service),
) -> SignUpResponse:
    """Create an account.

    Raises:
        HTTPException: 400 if the email is already registered
    """

    def signup_operation() -> SignUpResponse:
        return auth_service.sign_up(db_session, body.name, body.email, body.password)

    return handle_api_operation(signup_operation, error_message="Failed to sign up")


@router.post(
    "/refresh",
    response_model=RefreshResponse,
    status_code=status.HTTP_201_CREATED,
)
def refresh(
    request: Request,
    db_session: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    auth_service: AuthService = Depends(get_auth_service),
) -> RefreshResponse:
    """Exchange the bearer refresh token for a new token pair.

    Raises:
        HTTPException: 401 if the refresh token is missing or invalid
    """
    token = parse_bearer_token(request.headers.get("Authorization"))
    if token is None:
        raise auth_error(settings, "Cannot refresh session", "missing_auth_header")

    def refresh_operation() -> RefreshResponse:
        return auth_service.refresh(db_session, token)

    return handle_api_operation(
        refresh_operation, error_message="Failed to refresh session"
    )
