from fastapi import APIRouter, Depends, status

from tasktrack.dependencies.auth import CurrentUser, get_auth_service, get_current_user
from tasktrack.schemas.auth import (
    LoginRead,
    LoginRequest,
    RefreshTokenRequest,
    RegisterRequest,
    TokenPairRead,
    UserRead,
)
from tasktrack.schemas.common import success_response
from tasktrack.services.auth_service import AuthService

auth_router = APIRouter(prefix="/api/auth", tags=["auth"])


@auth_router.post("/register", status_code=status.HTTP_201_CREATED)
def register(body: RegisterRequest, service: AuthService = Depends(get_auth_service)):
    user = service.register(body)
    return success_response(UserRead.model_validate(user), "User registered successfully")


@auth_router.post("/login")
def login(body: LoginRequest, service: AuthService = Depends(get_auth_service)):
    user, pair = service.login(body)
    data = LoginRead(
        user=UserRead.model_validate(user),
        access_token=pair.access_token,
        refresh_token=pair.refresh_token,
    )
    return success_response(data, "User logged in successfully")


@auth_router.post("/refresh-token")
def refresh_token(body: RefreshTokenRequest, service: AuthService = Depends(get_auth_service)):
    """Issue a new access/refresh pair. The presented refresh token is not revoked."""
    pair = service.refresh(body)
    data = TokenPairRead(access_token=pair.access_token, refresh_token=pair.refresh_token)
    return success_response(data, "Tokens refreshed successfully")


@auth_router.get("/profile")
def profile(
    user: CurrentUser = Depends(get_current_user),
    service: AuthService = Depends(get_auth_service),
):
    return success_response(UserRead.model_validate(service.get_profile(user.user_id)))
