from datetime import datetime
from sqlalchemy import delete, or_, select, update
from quizlet.core.security import hash_token
from quizlet.models.token import RefreshToken
from quizlet.repositories.base import persistence_guard
from sqlalchemy.ext.asyncio import AsyncSession

class TokenRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, token: RefreshToken) -> RefreshToken:
        # A token_hash collision fails the unique index instead of overwriting
        with persistence_guard("create refresh token"):
            self.db.add(token)
            await self.db.flush()
            await self.db.refresh(token)
        return token

    async def get_active_by_token(self, token: str) -> RefreshToken | None:
        query = select(RefreshToken).where(
            RefreshToken.token_hash == hash_token(token),
            RefreshToken.revoked == False,
        )
        with persistence_guard("load refresh token"):
            result = await self.db.execute(query)
            return result.scalar_one_or_none()

    async def revoke_token(self, token: str) -> None:
        stmt = (
            update(RefreshToken)
            .where(RefreshToken.token_hash == hash_token(token))
            .values(revoked=True)
            .execution_options(synchronize_session=False)
        )
        with persistence_guard("revoke refresh token"):
            await self.db.execute(stmt)
            await self.db.flush()

    async def revoke_all_for_user(self, user_id: int) -> None:
        stmt = (
            update(RefreshToken)
            .where(
                RefreshToken.user_id == user_id,
                RefreshToken.revoked == False,
            )
            .values(revoked=True)
            .execution_options(synchronize_session=False)
        )
        with persistence_guard("revoke user refresh tokens"):
            await self.db.execute(stmt)
            await self.db.flush()

    async def delete_expired(self, now: datetime) -> int:
        stmt = (
            delete(RefreshToken)
            .where(
                or_(
                    RefreshToken.expires_at <= now,
                    RefreshToken.revoked == True,
                )
            )
            .execution_options(synchronize_session=False)
        )
        with persistence_guard("delete expired refresh tokens"):
            result = await self.db.execute(stmt)
            await self.db.flush()
        return result.rowcount
