from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from quizlet.models.quiz import Quiz, QuizSelection
from quizlet.repositories.base import BaseRepository


class QuizRepository(BaseRepository[Quiz]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, Quiz)

    async def get_selection(self, quiz_id: int, selection_id: int) -> QuizSelection | None:
        query = select(QuizSelection).where(
            QuizSelection.id == selection_id,
            QuizSelection.quiz_id == quiz_id,
        )
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def add_selection(self, quiz: Quiz, selection: QuizSelection) -> Quiz:
        selection.quiz_id = quiz.id
        self.db.add(selection)
        await self.db.flush()
        await self.db.refresh(quiz, attribute_names=["selections"])
        return quiz

    async def remove_selection(self, quiz: Quiz, selection: QuizSelection) -> Quiz:
        await self.db.delete(selection)
        await self.db.flush()
        await self.db.refresh(quiz, attribute_names=["selections"])
        return quiz
