from quizlet.core.exceptions import ForbiddenException, NotFoundException
from quizlet.models.quiz_suite import QuizSuite
from quizlet.models.user import User
from quizlet.repositories.quiz_suite_repo import QuizSuiteRepository
from quizlet.schemas.pagination import PaginatedResponse, PaginationParams
from quizlet.schemas.quiz_suite import QuizSuiteCreate, QuizSuiteResponse, QuizSuiteUpdate
import logging

logger = logging.getLogger(__name__)


class QuizSuiteService:
    def __init__(self, suite_repo: QuizSuiteRepository):
        self.suite_repo = suite_repo

    async def create_suite(self, owner: User, suite_in: QuizSuiteCreate) -> QuizSuite:
        suite = await self.suite_repo.create(QuizSuite(**suite_in.model_dump(), created_by_id=owner.id))
        logger.info("Quiz suite created: quiz_suite_id=%s user_id=%s", suite.id, owner.id)
        return suite

    async def get_suite(self, suite_id: int) -> QuizSuite:
        suite = await self.suite_repo.get_by_id(suite_id)
        if not suite:
            raise NotFoundException(detail="Quiz suite not found")
        return suite

    async def get_owned_suite(self, owner: User, suite_id: int) -> QuizSuite:
        suite = await self.get_suite(suite_id)
        if suite.created_by_id != owner.id:
            raise ForbiddenException(detail="You do not own this quiz suite")
        return suite

    async def list_suites(self, owner: User, params: PaginationParams) -> PaginatedResponse[QuizSuiteResponse]:
        suites = await self.suite_repo.get_all(limit=params.size, offset=params.offset, created_by_id=owner.id)
        total = await self.suite_repo.count(created_by_id=owner.id)
        items = [QuizSuiteResponse.model_validate(suite) for suite in suites]
        return PaginatedResponse[QuizSuiteResponse].from_page(items=items, total=total, params=params)

    async def update_suite(self, owner: User, suite_id: int, suite_in: QuizSuiteUpdate) -> QuizSuite:
        suite = await self.get_owned_suite(owner, suite_id)
        for field, value in suite_in.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(suite, field, value)
        updated = await self.suite_repo.update(suite)
        logger.info("Quiz suite updated: quiz_suite_id=%s", suite_id)
        return updated

    async def delete_suite(self, owner: User, suite_id: int) -> None:
        suite = await self.get_owned_suite(owner, suite_id)
        await self.suite_repo.delete(suite)
        logger.info("Quiz suite deleted: quiz_suite_id=%s", suite_id)
