from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from tasktrack.schemas.common import CamelModel


# ── requests ─────────────────────────────────────────────────────────────
# Fields are optional at the schema level so that "missing" and "empty"
# both reach the service and get the same ValidationError message.
class RegisterRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None


class LoginRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None


class RefreshTokenRequest(CamelModel):
    refresh_token: Optional[str] = None


# ── responses ────────────────────────────────────────────────────────────
class UserRead(CamelModel):
    id: str
    email: str
    name: Optional[str] = None
    created_at: datetime


class TokenPairRead(CamelModel):
    access_token: str
    refresh_token: str


class LoginRead(CamelModel):
    user: UserRead
    access_token: str
    refresh_token: str
