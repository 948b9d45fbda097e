from datetime import datetime, timezone

from quizlet.core.exceptions import ForbiddenException, NotFoundException
from quizlet.models.quiz_attempt import QuizAttempt
from quizlet.models.user import User
from quizlet.repositories.quiz_attempt_repo import QuizAttemptRepository
from quizlet.repositories.quiz_suite_repo import QuizSuiteRepository
from quizlet.schemas.quiz_attempt import QuizAttemptCreate, QuizAttemptUpdate
import logging

logger = logging.getLogger(__name__)


class QuizAttemptService:
    def __init__(self, attempt_repo: QuizAttemptRepository, suite_repo: QuizSuiteRepository):
        self.attempt_repo = attempt_repo
        self.suite_repo = suite_repo

    async def _ensure_suite(self, suite_id: int) -> None:
        if not await self.suite_repo.get_by_id(suite_id):
            raise NotFoundException(detail="Quiz suite not found")

    async def list_attempts(self, user: User, suite_id: int) -> list[QuizAttempt]:
        await self._ensure_suite(suite_id)
        return await self.attempt_repo.list_for_suite(suite_id, user.id)

    async def create_attempt(self, user: User, suite_id: int, attempt_in: QuizAttemptCreate) -> QuizAttempt:
        await self._ensure_suite(suite_id)
        now = datetime.now(timezone.utc)
        attempt = QuizAttempt(
            user_id=user.id,
            quiz_suite_id=suite_id,
            score=attempt_in.score,
            completed=attempt_in.completed,
            started_at=now,
            completed_at=now if attempt_in.completed else None,
        )
        created = await self.attempt_repo.create(attempt)
        logger.info("Quiz attempt created: attempt_id=%s quiz_suite_id=%s user_id=%s", created.id, suite_id, user.id)
        return created

    async def get_attempt(self, user: User, suite_id: int, attempt_id: int) -> QuizAttempt:
        attempt = await self.attempt_repo.get_by_id(attempt_id)
        if not attempt or attempt.quiz_suite_id != suite_id:
            raise NotFoundException(detail="Quiz attempt not found")
        if attempt.user_id != user.id:
            raise ForbiddenException(detail="You do not own this quiz attempt")
        return attempt

    async def update_attempt(self, user: User, suite_id: int, attempt_id: int, attempt_in: QuizAttemptUpdate) -> QuizAttempt:
        attempt = await self.get_attempt(user, suite_id, attempt_id)
        if attempt_in.score is not None:
            attempt.score = attempt_in.score
        if attempt_in.completed is not None:
            attempt.completed = attempt_in.completed
            if attempt_in.completed and attempt.completed_at is None:
                attempt.completed_at = datetime.now(timezone.utc)
        return await self.attempt_repo.update(attempt)

    async def delete_attempt(self, user: User, suite_id: int, attempt_id: int) -> None:
        attempt = await self.get_attempt(user, suite_id, attempt_id)
        await self.attempt_repo.delete(attempt)
        logger.info("Quiz attempt deleted: attempt_id=%s", attempt_id)
