from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quizlet.models.quiz_attempt import QuizAttempt
from quizlet.repositories.base import BaseRepository


class QuizAttemptRepository(BaseRepository[QuizAttempt]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, QuizAttempt)

    async def list_for_suite(self, quiz_suite_id: int, user_id: int) -> list[QuizAttempt]:
        query = (
            select(QuizAttempt)
            .where(
                QuizAttempt.quiz_suite_id == quiz_suite_id,
                QuizAttempt.user_id == user_id,
            )
            .order_by(QuizAttempt.id)
        )
        result = await self.db.execute(query)
        return list(result.scalars().all())
