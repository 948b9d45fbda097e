from typing import Annotated
from fastapi import APIRouter, Depends, status
from quizlet.services.user_service import UserService
from quizlet.api.deps import current_user_dependency, get_user_service
from quizlet.schemas.user import PasswordChange, UserCreate, UserResponse, UserUpdate

router = APIRouter()

user_service = Annotated[UserService, Depends(get_user_service)]

@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(user_in: UserCreate, service: user_service) -> UserResponse:
    return await service.create_user(user_in)

@router.get("/me", response_model=UserResponse)
async def details(current_user: current_user_dependency):
    return current_user

@router.patch("/me", response_model=UserResponse)
async def update_me(
    user_in: UserUpdate,
    current_user: current_user_dependency,
    service: user_service,
):
    return await service.update_user(current_user, user_in)

@router.put("/me/password", status_code=status.HTTP_204_NO_CONTENT)
async def change_password(
    body: PasswordChange,
    current_user: current_user_dependency,
    service: user_service,
):
    await service.change_password(current_user, body)

@router.delete("/me", status_code=status.HTTP_204_NO_CONTENT)
async def delete_me(
    current_user: current_user_dependency,
    service: user_service,
):
    await service.delete_user(current_user)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: int, current_user: current_user_dependency, service: user_service):
    return await service.get_user(user_id)
