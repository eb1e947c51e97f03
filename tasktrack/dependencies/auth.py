from fastapi import Depends, Request
from fastapi.security import HTTPBearer
from pydantic import BaseModel
from sqlmodel import Session

from tasktrack.core.exceptions import MissingTokenError
from tasktrack.core.tokens import TokenService
from tasktrack.db.session import get_session
from tasktrack.services.auth_service import AuthService
from tasktrack.services.task_service import TaskService

# documents the Bearer scheme in OpenAPI; header parsing is done below
bearer_scheme = HTTPBearer(auto_error=False)


class CurrentUser(BaseModel):
    """Identity resolved from a verified access token."""

    user_id: str
    email: str

    model_config = {"frozen": True}


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def _extract_bearer(request: Request) -> str:
    header = request.headers.get("Authorization")
    if header is not None and header.strip() == "Bearer":
        raise MissingTokenError("Authentication token missing")
    if not header or not header.startswith("Bearer "):
        raise MissingTokenError()
    token = header[len("Bearer "):].strip()
    if not token:
        raise MissingTokenError("Authentication token missing")
    return token


def get_current_user(
    request: Request,
    tokens: TokenService = Depends(get_token_service),
    _creds=Depends(bearer_scheme),
) -> CurrentUser:
    """Strict auth dependency; raises when no/invalid/expired token."""
    claim = tokens.verify_access_token(_extract_bearer(request))
    user = CurrentUser(user_id=claim.user_id, email=claim.email)
    request.state.user = user
    return user


def get_auth_service(
    db: Session = Depends(get_session),
    tokens: TokenService = Depends(get_token_service),
) -> AuthService:
    return AuthService(db, tokens)


def get_task_service(db: Session = Depends(get_session)) -> TaskService:
    return TaskService(db)
