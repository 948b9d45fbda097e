from typing import Annotated
from fastapi import APIRouter, Depends, Query, status
from quizlet.api.deps import current_user_dependency, get_quiz_service
from quizlet.schemas.pagination import PaginatedResponse, PaginationParams
from quizlet.schemas.quiz import QuizCreate, QuizResponse, QuizSelectionCreate, QuizUpdate
from quizlet.services.quiz_service import QuizService

router = APIRouter()

quiz_service = Annotated[QuizService, Depends(get_quiz_service)]


@router.post("/", response_model=QuizResponse, status_code=status.HTTP_201_CREATED)
async def create_quiz(quiz_in: QuizCreate, current_user: current_user_dependency, service: quiz_service):
    return await service.create_quiz(current_user, quiz_in)


@router.get("/", response_model=PaginatedResponse[QuizResponse])
async def list_quizzes(
    current_user: current_user_dependency,
    service: quiz_service,
    params: Annotated[PaginationParams, Query()],
):
    return await service.list_quizzes(current_user, params)


@router.get("/{quiz_id}", response_model=QuizResponse)
async def get_quiz(quiz_id: int, current_user: current_user_dependency, service: quiz_service):
    return await service.get_quiz(quiz_id)


@router.put("/{quiz_id}", response_model=QuizResponse)
async def update_quiz(quiz_id: int, quiz_in: QuizUpdate, current_user: current_user_dependency, service: quiz_service):
    return await service.update_quiz(current_user, quiz_id, quiz_in)


@router.delete("/{quiz_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_quiz(quiz_id: int, current_user: current_user_dependency, service: quiz_service):
    await service.delete_quiz(current_user, quiz_id)


@router.post("/{quiz_id}/selections", response_model=QuizResponse, status_code=status.HTTP_201_CREATED)
async def add_selection(
    quiz_id: int,
    selection_in: QuizSelectionCreate,
    current_user: current_user_dependency,
    service: quiz_service,
):
    return await service.add_selection(current_user, quiz_id, selection_in)


@router.delete("/{quiz_id}/selections/{selection_id}", response_model=QuizResponse)
async def remove_selection(quiz_id: int, selection_id: int, current_user: current_user_dependency, service: quiz_service):
    return await service.remove_selection(current_user, quiz_id, selection_id)
