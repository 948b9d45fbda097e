from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from quizlet.models.user import User
from quizlet.repositories.base import persistence_guard
from sqlalchemy.ext.asyncio import AsyncSession

class UserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    # IntegrityError passes through: UserService reports duplicates as 409
    async def create(self , user: User) -> User:
        with persistence_guard("create user", passthrough=(IntegrityError,)):
            self.db.add(user)
            await self.db.flush()
            await self.db.refresh(user)
        return user

    async def update(self, user: User) -> User:
        with persistence_guard("update user", passthrough=(IntegrityError,)):
            await self.db.flush()
            await self.db.refresh(user)
        return user

    async def delete(self, user: User) -> None:
        with persistence_guard("delete user"):
            await self.db.delete(user)
            await self.db.flush()

    async def get_by_email(self, email: str) -> User | None:
        query = select(User).where(User.email == email)
        with persistence_guard("load user by email"):
            result = await self.db.execute(query)
            return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> User | None:
        query = select(User).where(User.username == username)
        with persistence_guard("load user by username"):
            result = await self.db.execute(query)
            return result.scalar_one_or_none()

    async def get_by_id(self, id: int) -> User | None:
        query = select(User).where(User.id == int(id))
        with persistence_guard("load user by id"):
            result = await self.db.execute(query)
            return result.scalar_one_or_none()
