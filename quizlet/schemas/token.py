from pydantic import BaseModel, EmailStr, Field
from quizlet.schemas.user import UserResponse


class AccessTokenClaims(BaseModel):
    user_id: int
    iat: int
    nbf: int
    exp: int


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class LoginResponse(BaseModel):
    user: UserResponse
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    expires_in: int


class RefreshResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    expires_in: int


class TokenRefreshRequest(BaseModel):
    refresh_token: str = Field(min_length=1)

class TokenRevokeRequest(BaseModel):
    refresh_token: str = Field(min_length=1)
