from quizlet.schemas.user import PasswordChange, UserCreate, UserUpdate
from quizlet.core.exceptions import ConflictException, InvalidCredentialsError, NotFoundException
from quizlet.core.security import PasswordHasher
from quizlet.models.user import User
from quizlet.repositories.user_repo import UserRepository
from quizlet.services.refresh_token_store import RefreshTokenStore
from sqlalchemy.exc import IntegrityError
import logging

logger = logging.getLogger(__name__)

class UserService:
    def __init__(self, user_repo: UserRepository, token_store: RefreshTokenStore, hasher: PasswordHasher):
        self.user_repo = user_repo
        self.token_store = token_store
        self.hasher = hasher

    async def create_user(self, user_in: UserCreate) -> User:

        if await self.user_repo.get_by_email(user_in.email):
            logger.warning("Attempt to create user with existing email: %s", user_in.email)
            raise ConflictException(detail="Email already registered")

        if await self.user_repo.get_by_username(user_in.username):
            logger.warning("Attempt to create user with existing username: %s", user_in.username)
            raise ConflictException(detail="Username already taken")

        hashed_password = self.hasher.hash(user_in.password)
        user_data = user_in.model_dump(exclude={"password"})
        user_model = User(**user_data, password_hash = hashed_password)
        try:
            created_user = await self.user_repo.create(user_model)
            logger.info("User created successfully: user_id=%s", created_user.id)
            return created_user
        except IntegrityError:
            logger.error("IntegrityError during user creation for email=%s or username=%s", user_in.email, user_in.username)
            raise ConflictException(detail="Email or Username already taken (Race Condition detected)")

    async def get_user(self, user_id: int) -> User:
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise NotFoundException(detail="User not found")
        return user

    async def update_user(self, user:User, user_in: UserUpdate) -> User:
        update_data = user_in.model_dump(exclude_unset=True, exclude_none=True)

        if "email" in update_data and update_data["email"] != user.email:
            if await self.user_repo.get_by_email(update_data["email"]):
                raise ConflictException(detail="Email already registered")

        if "username" in update_data and update_data["username"] != user.username:
            if await self.user_repo.get_by_username(update_data["username"]):
                raise ConflictException(detail="Username already taken")

        for field, value in update_data.items():
            setattr(user, field, value)

        try:
            updated_user = await self.user_repo.update(user)
            logger.info("User updated: user_id=%s", updated_user.id)
            return updated_user
        except IntegrityError:
            logger.error("IntegrityError during user update for user_id=%s", user.id)
            raise ConflictException(detail="Email or Username already taken (Race Condition detected)")

    async def change_password(self, user: User, body: PasswordChange) -> None:
        """
        Replace the user's password after checking the current one.
        Revokes all existing refresh tokens to force re-login elsewhere.
        """
        if not self.hasher.verify(body.current_password, user.password_hash):
            logger.warning("Password change rejected: wrong current password for user_id=%s", user.id)
            raise InvalidCredentialsError(detail="Current password is incorrect")

        user.password_hash = self.hasher.hash(body.new_password)
        await self.user_repo.update(user)
        await self.token_store.revoke_all(user.id)
        logger.info("Password changed for user_id=%s", user.id)

    async def delete_user(self, user: User) -> None:
        await self.user_repo.delete(user)
        logger.info("User deleted: user_id=%s", user.id)
