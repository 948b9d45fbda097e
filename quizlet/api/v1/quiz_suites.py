from typing import Annotated
from fastapi import APIRouter, Depends, Query, status
from quizlet.api.deps import current_user_dependency, get_quiz_attempt_service, get_quiz_suite_service
from quizlet.schemas.pagination import PaginatedResponse, PaginationParams
from quizlet.schemas.quiz_attempt import QuizAttemptCreate, QuizAttemptResponse, QuizAttemptUpdate
from quizlet.schemas.quiz_suite import QuizSuiteCreate, QuizSuiteResponse, QuizSuiteUpdate
from quizlet.services.quiz_attempt_service import QuizAttemptService
from quizlet.services.quiz_suite_service import QuizSuiteService

router = APIRouter()

suite_service = Annotated[QuizSuiteService, Depends(get_quiz_suite_service)]
attempt_service = Annotated[QuizAttemptService, Depends(get_quiz_attempt_service)]


@router.post("/", response_model=QuizSuiteResponse, status_code=status.HTTP_201_CREATED)
async def create_suite(suite_in: QuizSuiteCreate, current_user: current_user_dependency, service: suite_service):
    return await service.create_suite(current_user, suite_in)


@router.get("/", response_model=PaginatedResponse[QuizSuiteResponse])
async def list_suites(
    current_user: current_user_dependency,
    service: suite_service,
    params: Annotated[PaginationParams, Query()],
):
    return await service.list_suites(current_user, params)


@router.get("/{suite_id}", response_model=QuizSuiteResponse)
async def get_suite(suite_id: int, current_user: current_user_dependency, service: suite_service):
    return await service.get_suite(suite_id)


@router.put("/{suite_id}", response_model=QuizSuiteResponse)
async def update_suite(
    suite_id: int,
    suite_in: QuizSuiteUpdate,
    current_user: current_user_dependency,
    service: suite_service,
):
    return await service.update_suite(current_user, suite_id, suite_in)


@router.delete("/{suite_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_suite(suite_id: int, current_user: current_user_dependency, service: suite_service):
    await service.delete_suite(current_user, suite_id)


# ── Attempts ──────────────────────────────────

@router.get("/{suite_id}/attempts", response_model=list[QuizAttemptResponse])
async def list_attempts(suite_id: int, current_user: current_user_dependency, service: attempt_service):
    return await service.list_attempts(current_user, suite_id)


@router.post("/{suite_id}/attempts", response_model=QuizAttemptResponse, status_code=status.HTTP_201_CREATED)
async def create_attempt(
    suite_id: int,
    attempt_in: QuizAttemptCreate,
    current_user: current_user_dependency,
    service: attempt_service,
):
    return await service.create_attempt(current_user, suite_id, attempt_in)


@router.get("/{suite_id}/attempts/{attempt_id}", response_model=QuizAttemptResponse)
async def get_attempt(suite_id: int, attempt_id: int, current_user: current_user_dependency, service: attempt_service):
    return await service.get_attempt(current_user, suite_id, attempt_id)


@router.put("/{suite_id}/attempts/{attempt_id}", response_model=QuizAttemptResponse)
async def update_attempt(
    suite_id: int,
    attempt_id: int,
    attempt_in: QuizAttemptUpdate,
    current_user: current_user_dependency,
    service: attempt_service,
):
    return await service.update_attempt(current_user, suite_id, attempt_id, attempt_in)


@router.delete("/{suite_id}/attempts/{attempt_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_attempt(suite_id: int, attempt_id: int, current_user: current_user_dependency, service: attempt_service):
    await service.delete_attempt(current_user, suite_id, attempt_id)
