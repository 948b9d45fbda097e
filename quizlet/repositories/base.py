import logging
from contextlib import contextmanager
from typing import Generic, TypeVar, Type, Optional, List

from sqlalchemy import select, func
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from quizlet.core.database import Base
from quizlet.core.exceptions import PersistenceError

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)


@contextmanager
def persistence_guard(operation: str, passthrough: tuple[type[SQLAlchemyError], ...] = ()):
    """
    Translate driver and ORM errors into ``PersistenceError``.

    Errors listed in ``passthrough`` are re-raised unchanged for callers
    that map them themselves (e.g. ``IntegrityError`` to 409).

    Usage:
        with persistence_guard("create refresh token"):
            self.db.add(token)
            await self.db.flush()
    """
    try:
        yield
    except passthrough:
        raise
    except SQLAlchemyError as exc:
        logger.error("Storage failure during %s: %s", operation, type(exc).__name__)
        raise PersistenceError() from exc


class BaseRepository(Generic[ModelType]):
    """
    Base repository providing common CRUD operations.

    Usage:
        class QuizRepository(BaseRepository[Quiz]):
            def __init__(self, db: AsyncSession):
                super().__init__(db, Quiz)

            # Add custom methods here
            async def get_by_question(self, question: str):
                ...
    """

    def __init__(self, db: AsyncSession, model: Type[ModelType]):
        """
        Initialize repository.

        Args:
            db: Async database session
            model: SQLAlchemy model class
        """
        self.db = db
        self.model = model

    async def create(self, entity: ModelType) -> ModelType:
        """Create a new entity."""
        self.db.add(entity)
        await self.db.flush()
        await self.db.refresh(entity)
        return entity

    async def update(self, entity: ModelType) -> ModelType:
        """Update an existing entity."""
        await self.db.flush()
        await self.db.refresh(entity)
        return entity

    async def delete(self, entity: ModelType) -> None:
        """Hard delete an entity (permanent)."""
        await self.db.delete(entity)
        await self.db.flush()

    async def get_by_id(self, entity_id: int) -> Optional[ModelType]:
        """
        Get entity by ID.

        Returns:
            Entity if found, None otherwise
        """
        query = select(self.model).where(self.model.id == entity_id)
        result = await self.db.execute(query)
        return result.scalar_one_or_none()

    async def get_all(
        self,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        **filters
    ) -> List[ModelType]:
        """
        Get all entities matching filters, oldest first.

        Args:
            limit: Maximum number of results
            offset: Number of results to skip
            **filters: Field filters (e.g., created_by_id=1)

        Returns:
            List of entities

        Example:
            quizzes = await repo.get_all(created_by_id=user_id, limit=10)
        """
        query = select(self.model).order_by(self.model.id)

        # Apply custom filters
        for field, value in filters.items():
            if hasattr(self.model, field):
                query = query.where(getattr(self.model, field) == value)

        # Apply pagination
        if limit is not None:
            query = query.limit(limit)
        if offset is not None:
            query = query.offset(offset)

        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def count(self, **filters) -> int:
        """
        Count entities matching filters.

        Args:
            **filters: Field filters

        Returns:
            Count of matching entities
        """
        query = select(func.count()).select_from(self.model)

        for field, value in filters.items():
            if hasattr(self.model, field):
                query = query.where(getattr(self.model, field) == value)

        result = await self.db.execute(query)
        return result.scalar()
