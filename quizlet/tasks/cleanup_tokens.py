import asyncio
from datetime import timedelta
from sqlalchemy.ext.asyncio import AsyncSession
from quizlet.core.config import get_settings
from quizlet.core.database import AsyncSessionLocal
from quizlet.repositories.token_repo import TokenRepository
from quizlet.services.refresh_token_store import RefreshTokenStore
import logging

logger = logging.getLogger(__name__)

# One sweep at a time per process
_cleanup_lock = asyncio.Lock()


async def _prune(session: AsyncSession) -> int:
    lifetime = timedelta(days=get_settings().REFRESH_TOKEN_EXPIRE_DAYS)
    store = RefreshTokenStore(TokenRepository(session), lifetime=lifetime)
    return await store.prune_expired()


async def cleanup_expired_tokens(session: AsyncSession | None = None) -> int:
    """
    Delete refresh tokens that are expired or revoked.

    When no session is given a new one is opened and committed here.
    Returns the number of deleted rows, or 0 if a sweep is already running.
    """
    if _cleanup_lock.locked():
        logger.info("Token cleanup already in progress, skipping")
        return 0

    async with _cleanup_lock:
        if session is not None:
            return await _prune(session)

        async with AsyncSessionLocal() as own_session:
            deleted = await _prune(own_session)
            await own_session.commit()
            return deleted


async def periodic_cleanup(interval_seconds: int) -> None:
    while True:
        await asyncio.sleep(interval_seconds)
        try:
            await cleanup_expired_tokens()
        except Exception:
            logger.exception("Token cleanup failed")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    asyncio.run(cleanup_expired_tokens())
