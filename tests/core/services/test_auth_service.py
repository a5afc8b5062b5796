"""Tests for the auth service."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from sqlmodel import Session

from core.config import Settings
from core.database.repository import UserRepository
from core.exceptions import AlreadyExistsError, UnauthorizedError
from core.services import AuthService
from core.types import Environment

from tests.utils.test_helpers import TEST_PASSWORD


def decode(token: str, settings: Settings) -> dict:
    return jwt.decode(token, settings.jwt_secret, algorithms=[settings.jwt_algorithm])


def test_sign_up_creates_user(
    auth_service: AuthService, mock_db_session: Session
) -> None:
    """Test sign-up stores a user with a hashed password."""
    response = auth_service.sign_up(
        mock_db_session, "Ada", "ada@example.com", "pa55word"
    )

    assert response.user.email == "ada@example.com"
    assert response.user.name == "Ada"

    user = UserRepository(mock_db_session).get_by_email("ada@example.com")
    assert user is not None
    assert user.password_hash != "pa55word"


def test_sign_up_duplicate_email(
    auth_service: AuthService, mock_db_session: Session
) -> None:
    """Test signing up twice with the same email fails."""
    auth_service.sign_up(mock_db_session, None, "ada@example.com", "one")

    with pytest.raises(AlreadyExistsError, match="User already exists"):
        auth_service.sign_up(mock_db_session, None, "ada@example.com", "two")


def test_sign_in_issues_scoped_tokens(
    auth_service: AuthService,
    mock_db_session: Session,
    saved_user,
    test_settings: Settings,
) -> None:
    """Test sign-in returns an access and a refresh token."""
    response = auth_service.sign_in(mock_db_session, saved_user.email, TEST_PASSWORD)

    assert response.user.id == saved_user.user_id
    access = decode(response.access_token, test_settings)
    refresh = decode(response.refresh_token, test_settings)

    assert access["userId"] == saved_user.user_id
    assert access["sub"] == str(saved_user.user_id)
    assert access["scope"] == ["accessToken"]
    assert refresh["scope"] == ["refreshToken"]
    assert access["exp"] - access["iat"] == 3600
    assert refresh["exp"] - refresh["iat"] == 3 * 3600


def test_sign_in_wrong_password(
    auth_service: AuthService, mock_db_session: Session, saved_user
) -> None:
    """Test a wrong password is rejected."""
    with pytest.raises(UnauthorizedError, match="Invalid credentials"):
        auth_service.sign_in(mock_db_session, saved_user.email, "wrong")


def test_sign_in_unknown_email(
    auth_service: AuthService, mock_db_session: Session
) -> None:
    """Test an unknown email gets the same error as a wrong password."""
    with pytest.raises(UnauthorizedError, match="Invalid credentials"):
        auth_service.sign_in(mock_db_session, "ghost@example.com", TEST_PASSWORD)


def test_authenticate_access_token(auth_service: AuthService) -> None:
    """Test an access token resolves to its user."""
    access_token, _ = auth_service.issue_tokens(7)
    assert auth_service.authenticate(access_token) == 7


def test_authenticate_rejects_refresh_token(auth_service: AuthService) -> None:
    """Test a refresh token cannot be used as an access token."""
    _, refresh_token = auth_service.issue_tokens(7)

    with pytest.raises(UnauthorizedError):
        auth_service.authenticate(refresh_token)


def test_authenticate_rejects_foreign_signature(auth_service: AuthService) -> None:
    """Test tokens signed with another secret are rejected."""
    other = AuthService(Settings(jwt_secret="another-secret"))
    access_token, _ = other.issue_tokens(7)

    with pytest.raises(UnauthorizedError, match="Invalid token"):
        auth_service.authenticate(access_token)


def test_authenticate_rejects_expired_token(
    auth_service: AuthService, test_settings: Settings
) -> None:
    """Test expired tokens are rejected."""
    issued = datetime.now(UTC) - timedelta(hours=2)
    token = jwt.encode(
        {
            "sub": "7",
            "userId": 7,
            "scope": ["accessToken"],
            "iat": issued,
            "exp": issued + timedelta(hours=1),
        },
        test_settings.jwt_secret,
        algorithm=test_settings.jwt_algorithm,
    )

    with pytest.raises(UnauthorizedError, match="Token has expired"):
        auth_service.authenticate(token)


def test_authenticate_rejects_garbage(auth_service: AuthService) -> None:
    """Test malformed tokens are rejected."""
    with pytest.raises(UnauthorizedError):
        auth_service.authenticate("not-a-jwt")


def test_refresh_issues_new_pair(
    auth_service: AuthService,
    mock_db_session: Session,
    saved_user,
    test_settings: Settings,
) -> None:
    """Test refresh uses the sign-in lifetimes."""
    _, refresh_token = auth_service.issue_tokens(saved_user.user_id)

    response = auth_service.refresh(mock_db_session, refresh_token)

    access = decode(response.access_token, test_settings)
    refresh = decode(response.refresh_token, test_settings)
    assert auth_service.authenticate(response.access_token) == saved_user.user_id
    assert access["exp"] - access["iat"] == 3600
    assert refresh["exp"] - refresh["iat"] == 3 * 3600


def test_refresh_rejects_access_token(
    auth_service: AuthService, mock_db_session: Session, saved_user
) -> None:
    """Test an access token cannot refresh a session."""
    access_token, _ = auth_service.issue_tokens(saved_user.user_id)

    with pytest.raises(UnauthorizedError, match="Cannot refresh session"):
        auth_service.refresh(mock_db_session, access_token)


def test_refresh_rejects_unknown_user(
    auth_service: AuthService, mock_db_session: Session
) -> None:
    """Test a refresh token for a missing user is rejected."""
    _, refresh_token = auth_service.issue_tokens(999)

    with pytest.raises(UnauthorizedError, match="Cannot refresh session"):
        auth_service.refresh(mock_db_session, refresh_token)


def test_custom_lifetimes() -> None:
    """Test configured lifetimes are applied."""
    settings = Settings(
        environment=Environment.TESTING,
        jwt_secret="x",
        access_token_expires_seconds=60,
        refresh_token_expires_seconds=600,
    )
    service = AuthService(settings)
    access_token, refresh_token = service.issue_tokens(1)

    access = decode(access_token, settings)
    refresh = decode(refresh_token, settings)
    assert access["exp"] - access["iat"] == 60
    assert refresh["exp"] - refresh["iat"] == 600
