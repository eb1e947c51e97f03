from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Any, Dict

from jose import jwt
from jose.exceptions import ExpiredSignatureError, JWTError

from tasktrack.core.config import Settings
from tasktrack.core.exceptions import ConfigError, ExpiredTokenError, InvalidTokenError

log = logging.getLogger(__name__)

ACCESS = "access"
REFRESH = "refresh"


@dataclass(frozen=True)
class TokenClaim:
    """Identity carried inside a signed token."""

    user_id: str
    email: str


@dataclass(frozen=True)
class TokenPair:
    access_token: str
    refresh_token: str


# ---- 공통 ----
def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class TokenService:
    """
    Issues and verifies access/refresh JWTs.

    Access and refresh tokens use independent secrets and expiries, and
    carry a ``typ`` claim, so neither kind can pass for the other.
    """

    def __init__(
        self,
        access_secret: str | None,
        refresh_secret: str | None,
        algorithm: str = "HS256",
        access_expires: timedelta = timedelta(minutes=60),
        refresh_expires: timedelta = timedelta(days=7),
    ):
        self._access_secret = access_secret or None
        self._refresh_secret = refresh_secret or None
        self._algorithm = algorithm
        self._access_expires = access_expires
        self._refresh_expires = refresh_expires

        if self._access_secret and self._access_secret == self._refresh_secret:
            log.warning("JWT_SECRET and JWT_REFRESH_SECRET are identical; configure distinct secrets")

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            access_secret=settings.jwt_secret,
            refresh_secret=settings.jwt_refresh_secret,
            algorithm=settings.jwt_algorithm,
            access_expires=settings.access_token_expires,
            refresh_expires=settings.refresh_token_expires,
        )

    # ---- 내부 ----
    def _secret(self, kind: str) -> str:
        secret = self._access_secret if kind == ACCESS else self._refresh_secret
        if not secret:
            raise ConfigError()
        return secret

    def _sign(self, claim: TokenClaim, kind: str, expires: timedelta) -> str:
        secret = self._secret(kind)
        now = _utcnow()
        payload: Dict[str, Any] = {
            "sub": claim.user_id,
            "email": claim.email,
            "typ": kind,
            "iat": int(now.timestamp()),
            "exp": int((now + expires).timestamp()),
        }
        return jwt.encode(payload, secret, algorithm=self._algorithm)

    def _verify(self, token: str, kind: str) -> TokenClaim:
        secret = self._secret(kind)
        try:
            payload = jwt.decode(token, secret, algorithms=[self._algorithm])
        except ExpiredSignatureError:
            raise ExpiredTokenError()
        except JWTError:
            raise InvalidTokenError()

        if payload.get("typ") != kind:
            raise InvalidTokenError()
        user_id = payload.get("sub")
        email = payload.get("email")
        if not user_id or email is None:
            raise InvalidTokenError()
        return TokenClaim(user_id=user_id, email=email)

    # ---- Access Token ----
    def issue_access_token(self, claim: TokenClaim, expires_delta: timedelta | None = None) -> str:
        return self._sign(claim, ACCESS, expires_delta or self._access_expires)

    def verify_access_token(self, token: str) -> TokenClaim:
        return self._verify(token, ACCESS)

    # ---- Refresh Token ----
    def issue_refresh_token(self, claim: TokenClaim, expires_delta: timedelta | None = None) -> str:
        return self._sign(claim, REFRESH, expires_delta or self._refresh_expires)

    def verify_refresh_token(self, token: str) -> TokenClaim:
        return self._verify(token, REFRESH)

    def issue_token_pair(self, claim: TokenClaim) -> TokenPair:
        return TokenPair(
            access_token=self.issue_access_token(claim),
            refresh_token=self.issue_refresh_token(claim),
        )
