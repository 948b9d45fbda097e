from quizlet.core.exceptions import ForbiddenException, NotFoundException
from quizlet.models.quiz import Quiz, QuizSelection
from quizlet.models.user import User
from quizlet.repositories.quiz_repo import QuizRepository
from quizlet.schemas.pagination import PaginatedResponse, PaginationParams
from quizlet.schemas.quiz import QuizCreate, QuizResponse, QuizSelectionCreate, QuizUpdate
import logging

logger = logging.getLogger(__name__)


class QuizService:
    def __init__(self, quiz_repo: QuizRepository):
        self.quiz_repo = quiz_repo

    async def create_quiz(self, owner: User, quiz_in: QuizCreate) -> Quiz:
        quiz = Quiz(
            question=quiz_in.question,
            quiz_type=quiz_in.quiz_type.value,
            created_by_id=owner.id,
            selections=[QuizSelection(**s.model_dump()) for s in quiz_in.selections],
        )
        created = await self.quiz_repo.create(quiz)
        logger.info("Quiz created: quiz_id=%s user_id=%s", created.id, owner.id)
        return created

    async def get_quiz(self, quiz_id: int) -> Quiz:
        quiz = await self.quiz_repo.get_by_id(quiz_id)
        if not quiz:
            raise NotFoundException(detail="Quiz not found")
        return quiz

    async def get_owned_quiz(self, owner: User, quiz_id: int) -> Quiz:
        quiz = await self.get_quiz(quiz_id)
        if quiz.created_by_id != owner.id:
            logger.warning("User %s attempted to modify quiz_id=%s owned by %s", owner.id, quiz_id, quiz.created_by_id)
            raise ForbiddenException(detail="You do not own this quiz")
        return quiz

    async def list_quizzes(self, owner: User, params: PaginationParams) -> PaginatedResponse[QuizResponse]:
        quizzes = await self.quiz_repo.get_all(limit=params.size, offset=params.offset, created_by_id=owner.id)
        total = await self.quiz_repo.count(created_by_id=owner.id)
        items = [QuizResponse.model_validate(quiz) for quiz in quizzes]
        return PaginatedResponse[QuizResponse].from_page(items=items, total=total, params=params)

    async def update_quiz(self, owner: User, quiz_id: int, quiz_in: QuizUpdate) -> Quiz:
        quiz = await self.get_owned_quiz(owner, quiz_id)
        update_data = quiz_in.model_dump(exclude_unset=True, exclude_none=True)
        if "quiz_type" in update_data:
            update_data["quiz_type"] = update_data["quiz_type"].value
        for field, value in update_data.items():
            setattr(quiz, field, value)
        updated = await self.quiz_repo.update(quiz)
        logger.info("Quiz updated: quiz_id=%s", quiz_id)
        return updated

    async def delete_quiz(self, owner: User, quiz_id: int) -> None:
        quiz = await self.get_owned_quiz(owner, quiz_id)
        await self.quiz_repo.delete(quiz)
        logger.info("Quiz deleted: quiz_id=%s", quiz_id)

    async def add_selection(self, owner: User, quiz_id: int, selection_in: QuizSelectionCreate) -> Quiz:
        quiz = await self.get_owned_quiz(owner, quiz_id)
        return await self.quiz_repo.add_selection(quiz, QuizSelection(**selection_in.model_dump()))

    async def remove_selection(self, owner: User, quiz_id: int, selection_id: int) -> Quiz:
        quiz = await self.get_owned_quiz(owner, quiz_id)
        selection = await self.quiz_repo.get_selection(quiz_id, selection_id)
        if not selection:
            raise NotFoundException(detail="Selection not found")
        return await self.quiz_repo.remove_selection(quiz, selection)
