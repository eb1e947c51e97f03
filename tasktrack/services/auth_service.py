from __future__ import annotations

import logging
from typing import Tuple

from sqlmodel import Session

from tasktrack.core.exceptions import (
    ConflictError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from tasktrack.core.security import hash_password, verify_password
from tasktrack.core.tokens import TokenClaim, TokenPair, TokenService
from tasktrack.db.repository import DUPLICATE_EMAIL_MESSAGE, UserRepository
from tasktrack.models.user import User
from tasktrack.schemas.auth import LoginRequest, RefreshTokenRequest, RegisterRequest

log = logging.getLogger(__name__)

USER_NOT_FOUND_MESSAGE = "User not found"


class AuthService:
    """Registration, login, token refresh and profile lookup."""

    def __init__(self, db: Session, tokens: TokenService):
        self._users = UserRepository(db)
        self._tokens = tokens

    def _issue(self, user: User) -> TokenPair:
        return self._tokens.issue_token_pair(TokenClaim(user_id=user.id, email=user.email))

    def register(self, body: RegisterRequest) -> User:
        if not body.email or not body.password:
            raise ValidationError("Email and password are required")

        # fast path only; the unique index still decides concurrent races
        if self._users.get_by_email(body.email) is not None:
            raise ConflictError(DUPLICATE_EMAIL_MESSAGE)

        user = self._users.create(
            email=body.email,
            password_hash=hash_password(body.password),
            name=body.name or None,
        )
        log.info("Registered user %s", user.id)
        return user

    def login(self, body: LoginRequest) -> Tuple[User, TokenPair]:
        """
        Verify credentials and issue an access/refresh pair.
        Unknown email and wrong password raise the same error.
        """
        if not body.email or not body.password:
            raise ValidationError("Email and password are required")

        user = self._users.get_by_email(body.email)
        if user is None or not verify_password(body.password, user.password_hash):
            log.warning("Failed login attempt")
            raise InvalidCredentialsError()

        pair = self._issue(user)
        log.info("User logged in: %s", user.id)
        return user, pair

    def refresh(self, body: RefreshTokenRequest) -> TokenPair:
        """
        Exchange a refresh token for a fresh pair.
        The presented token is not revoked; it stays valid until its own expiry.
        """
        if not body.refresh_token:
            raise ValidationError("Refresh token is required")

        claim = self._tokens.verify_refresh_token(body.refresh_token)

        user = self._users.get(claim.user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND_MESSAGE)

        log.info("Tokens refreshed for user %s", user.id)
        return self._issue(user)

    def get_profile(self, user_id: str) -> User:
        user = self._users.get(user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND_MESSAGE)
        return user

    def delete_user(self, user_id: str) -> None:
        user = self._users.get(user_id)
        if user is None:
            raise NotFoundError(USER_NOT_FOUND_MESSAGE)
        self._users.delete(user)
        log.info("Deleted user %s and owned tasks", user_id)
