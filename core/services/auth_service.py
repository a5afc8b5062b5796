"""Service for sign-up, sign-in and token handling."""

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from sqlalchemy.exc import IntegrityError
from sqlmodel import Session
from werkzeug.security import check_password_hash, generate_password_hash

from core.config import Settings
from core.database.repository import UserRepository
from core.exceptions import AlreadyExistsError, UnauthorizedError
from core.log import get_logger
from core.models import (
    RefreshResponse,
    SignInResponse,
    SignUpResponse,
    UserResponse,
)
from core.types import TokenScope

logger = get_logger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"
CANNOT_REFRESH = "Cannot refresh session"


class AuthService:
    """Issues and verifies the access/refresh token pair.

    Tokens are signed JWTs whose payload carries the user ID (as ``sub`` and
    ``userId``) and a single-element ``scope`` list naming the token kind.
    """

    def __init__(self, settings: Settings) -> None:
        self.secret = settings.jwt_secret
        self.algorithm = settings.jwt_algorithm
        self.access_token_expires = timedelta(
            seconds=settings.access_token_expires_seconds
        )
        self.refresh_token_expires = timedelta(
            seconds=settings.refresh_token_expires_seconds
        )

    def _encode(self, user_id: int, scope: TokenScope, expires_in: timedelta) -> str:
        now = datetime.now(UTC)
        payload: dict[str, Any] = {
            "sub": str(user_id),
            "userId": user_id,
            "scope": [scope.value],
            "iat": now,
            "exp": now + expires_in,
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def _decode(self, token: str, scope: TokenScope) -> int:
        """Verify a token and return its user ID.

        Raises:
            UnauthorizedError: If the signature, expiry or scope is invalid
        """
        try:
            payload = jwt.decode(
                token,
                self.secret,
                algorithms=[self.algorithm],
                options={"require": ["exp", "sub"]},
            )
        except jwt.ExpiredSignatureError:
            raise UnauthorizedError("Token has expired")
        except jwt.InvalidTokenError as e:
            logger.debug(f"Rejected token: {e}")
            raise UnauthorizedError("Invalid token")

        scopes = payload.get("scope")
        if not isinstance(scopes, list) or scope.value not in scopes:
            raise UnauthorizedError(f"Token lacks {scope.value} scope")

        try:
            return int(payload["sub"])
        except (TypeError, ValueError):
            raise UnauthorizedError("Invalid token subject")

    def issue_tokens(self, user_id: int) -> tuple[str, str]:
        """Issue an (access, refresh) token pair for a user."""
        access_token = self._encode(
            user_id, TokenScope.ACCESS, self.access_token_expires
        )
        refresh_token = self._encode(
            user_id, TokenScope.REFRESH, self.refresh_token_expires
        )
        return access_token, refresh_token

    def authenticate(self, access_token: str) -> int:
        """Resolve an access token to the user ID it was issued for.

        Raises:
            UnauthorizedError: If the token is not a valid access token
        """
        return self._decode(access_token, TokenScope.ACCESS)

    def sign_up(
        self,
        session: Session,
        name: str | None,
        email: str,
        password: str,
    ) -> SignUpResponse:
        """Register a user with a salted password hash.

        Raises:
            AlreadyExistsError: If the email is already registered
        """
        user_repo = UserRepository(session)
        if user_repo.get_by_email(email):
            raise AlreadyExistsError("User already exists")

        try:
            user = user_repo.create_user(
                name=name,
                email=email,
                password_hash=generate_password_hash(password),
            )
        except IntegrityError:
            # Lost a race with a concurrent sign-up for the same email
            raise AlreadyExistsError("User already exists")

        logger.info(f"Signed up user {user.user_id}")
        return SignUpResponse(user=UserResponse.from_row(user))

    def sign_in(self, session: Session, email: str, password: str) -> SignInResponse:
        """Verify credentials and issue a token pair.

        Raises:
            UnauthorizedError: If the email is unknown or the password is wrong
        """
        user = UserRepository(session).get_by_email(email)
        if user is None or user.user_id is None:
            raise UnauthorizedError(INVALID_CREDENTIALS)

        if not check_password_hash(user.password_hash, password):
            logger.info(f"Failed sign-in for user {user.user_id}")
            raise UnauthorizedError(INVALID_CREDENTIALS)

        access_token, refresh_token = self.issue_tokens(user.user_id)
        logger.info(f"Signed in user {user.user_id}")
        return SignInResponse(
            user=UserResponse.from_row(user),
            access_token=access_token,
            refresh_token=refresh_token,
        )

    def refresh(self, session: Session, refresh_token: str) -> RefreshResponse:
        """Exchange a refresh token for a new token pair.

        The new pair uses the same lifetimes as sign-in.

        Raises:
            UnauthorizedError: If the token is invalid, lacks refresh scope or
                its user no longer exists
        """
        try:
            user_id = self._decode(refresh_token, TokenScope.REFRESH)
        except UnauthorizedError as e:
            logger.info(f"Refresh rejected: {e}")
            raise UnauthorizedError(CANNOT_REFRESH)

        if UserRepository(session).get_by_id(user_id) is None:
            logger.info(f"Refresh rejected: user {user_id} no longer exists")
            raise UnauthorizedError(CANNOT_REFRESH)

        access_token, new_refresh_token = self.issue_tokens(user_id)
        return RefreshResponse(
            access_token=access_token,
            refresh_token=new_refresh_token,
        )
