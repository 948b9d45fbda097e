from sqlalchemy.ext.asyncio import AsyncSession

from quizlet.models.quiz_suite import QuizSuite
from quizlet.repositories.base import BaseRepository


class QuizSuiteRepository(BaseRepository[QuizSuite]):
    def __init__(self, db: AsyncSession):
        super().__init__(db, QuizSuite)
