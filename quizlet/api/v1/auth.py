from typing import Annotated
from fastapi import APIRouter, Depends
from slowapi import Limiter
from quizlet.services.auth_service import AuthService
from quizlet.api.deps import get_auth_service
from quizlet.schemas.token import LoginRequest, LoginResponse, RefreshResponse, TokenRefreshRequest, TokenRevokeRequest
from slowapi.util import get_remote_address
from starlette.requests import Request
from fastapi import status

router = APIRouter()

auth_service = Annotated[AuthService, Depends(get_auth_service)]


limiter = Limiter(key_func=get_remote_address)

@router.post("/login", response_model=LoginResponse)
@limiter.limit("5/minute")
async def login(request: Request, body: LoginRequest, service: auth_service) -> LoginResponse:
    return await service.login(
        body.email,
        body.password,
        ip_address=request.client.host if request.client else None,
        user_agent=request.headers.get("user-agent"),
    )

@router.post('/refresh', response_model=RefreshResponse)
@limiter.limit("10/minute")
async def refresh_token(request: Request, body: TokenRefreshRequest, service: auth_service) -> RefreshResponse:
    return await service.refresh_access_token(body.refresh_token)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
@limiter.limit("10/minute")
async def logout(request: Request, body: TokenRevokeRequest, service: auth_service):
    await service.logout(body.refresh_token)
