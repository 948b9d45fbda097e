from quizlet.core.exceptions import InvalidCredentialsError
from quizlet.core.security import AccessTokenIssuer, PasswordHasher
from quizlet.repositories.user_repo import UserRepository
from quizlet.schemas.token import LoginResponse, RefreshResponse
from quizlet.schemas.user import UserResponse
from quizlet.services.refresh_token_store import RefreshTokenStore
import logging

logger = logging.getLogger(__name__)



class AuthService:
    def __init__(
        self,
        user_repo: UserRepository,
        token_store: RefreshTokenStore,
        hasher: PasswordHasher,
        issuer: AccessTokenIssuer,
    ):
        self.user_repo = user_repo
        self.token_store = token_store
        self.hasher = hasher
        self.issuer = issuer


    async def login(self, email: str, password: str, ip_address: str | None = None, user_agent: str | None = None) -> LoginResponse:
        user = await self.user_repo.get_by_email(email)
        if not user:
            self.hasher.dummy_verify()
            logger.warning("Login failed: user not found for email=%s", email)
            raise InvalidCredentialsError()
        if not self.hasher.verify(password, user.password_hash):
            logger.warning("Login failed: invalid password for user_id=%s", user.id)
            raise InvalidCredentialsError()

        access_token = self.issuer.issue(user.id)
        issued = await self.token_store.issue(user.id, ip_address=ip_address, user_agent=user_agent)
        logger.info("User logged in successfully: user_id=%s", user.id)
        return LoginResponse(
            user=UserResponse.model_validate(user),
            access_token=access_token,
            refresh_token=issued.secret,
            token_type="bearer",
            expires_in=self.issuer.lifetime_seconds,
        )


    async def refresh_access_token(self, refresh_token: str) -> RefreshResponse:
        stored = await self.token_store.validate(refresh_token)
        access_token = self.issuer.issue(stored.user_id)
        logger.info("Access token refreshed for user_id=%s", stored.user_id)
        return RefreshResponse(
            access_token=access_token,
            token_type="bearer",
            expires_in=self.issuer.lifetime_seconds,
        )

    async def logout(self, refresh_token: str) -> None:
        await self.token_store.revoke(refresh_token)
        logger.info("User logged out, refresh token revoked")
