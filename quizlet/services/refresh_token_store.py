import logging
from datetime import timedelta, timezone
from typing import NamedTuple

from quizlet.core.exceptions import ExpiredTokenError, TokenNotFoundError
from quizlet.core.security import Clock, generate_token_secret, hash_token, utcnow
from quizlet.models.token import RefreshToken
from quizlet.repositories.token_repo import TokenRepository

logger = logging.getLogger(__name__)


class IssuedRefreshToken(NamedTuple):
    secret: str
    record: RefreshToken


class RefreshTokenStore:
    """
    Server-side store of long-lived, revocable refresh tokens.

    A token is usable while it is not revoked and ``expires_at`` is in the
    future. Only a digest of the secret is persisted.
    """

    def __init__(self, token_repo: TokenRepository, lifetime: timedelta = timedelta(days=30), clock: Clock = utcnow):
        self.token_repo = token_repo
        self.lifetime = lifetime
        self._clock = clock

    async def issue(self, user_id: int, ip_address: str | None = None, user_agent: str | None = None) -> IssuedRefreshToken:
        secret = generate_token_secret()
        record = RefreshToken(
            token_hash=hash_token(secret),
            user_id=user_id,
            expires_at=self._clock() + self.lifetime,
            revoked=False,
            ip_address=ip_address,
            user_agent=user_agent,
        )
        record = await self.token_repo.create(record)
        logger.info("Refresh token issued for user_id=%s", user_id)
        return IssuedRefreshToken(secret=secret, record=record)

    async def validate(self, secret: str) -> RefreshToken:
        if not secret:
            raise TokenNotFoundError()
        stored = await self.token_repo.get_active_by_token(secret)
        if stored is None:
            logger.warning("Refresh token not found or revoked")
            raise TokenNotFoundError()

        expires_at = stored.expires_at
        if expires_at.tzinfo is None:
            expires_at = expires_at.replace(tzinfo=timezone.utc)
        if expires_at <= self._clock():
            logger.warning("Refresh token expired for user_id=%s", stored.user_id)
            raise ExpiredTokenError(detail="Refresh token expired")
        return stored

    async def revoke(self, secret: str) -> None:
        if not secret:
            return
        await self.token_repo.revoke_token(secret)
        logger.info("Refresh token revoked")

    async def revoke_all(self, user_id: int) -> None:
        await self.token_repo.revoke_all_for_user(user_id)
        logger.info("All refresh tokens revoked for user_id=%s", user_id)

    async def prune_expired(self) -> int:
        deleted = await self.token_repo.delete_expired(self._clock())
        logger.info("Cleaned up %d expired/revoked refresh tokens", deleted)
        return deleted
