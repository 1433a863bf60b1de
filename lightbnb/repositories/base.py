"""
Base repository class with common operations using async SQLAlchemy.
Every public operation runs on its own session and reports failures through a Result,
which is collapsed to None unless the repository was built with ``raise_errors=True``.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select
from pydantic import BaseModel
from lightbnb.database import Base, Database
from lightbnb.utils.exceptions import RepositoryError
from lightbnb.utils.result import Result
from typing import TypeVar, Generic, Optional, Dict, Any, Type, Union, Callable, Awaitable
import logging

logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=Base)
SchemaType = TypeVar("SchemaType", bound=BaseModel)
T = TypeVar("T")


class BaseRepository(Generic[ModelType]):
    """
    Base repository class providing common lookups and inserts.
    Uses async SQLAlchemy for all database operations with uniform error handling.
    """

    def __init__(self, model: Type[ModelType], db: Database, raise_errors: bool = False):
        """
        Initialize repository with model class and database handle.

        Args:
            model: SQLAlchemy model class
            db: Connected database handle
            raise_errors: Raise RepositoryError instead of returning None on failure
        """
        self.model = model
        self.db = db
        self.raise_errors = raise_errors

    @property
    def default_limit(self) -> int:
        return self.db.settings.default_page_size

    async def run(self, operation: str, action: Callable[[AsyncSession], Awaitable[T]]) -> Result[T]:
        """
        Execute ``action`` on a fresh session and capture its outcome.

        Args:
            operation: Operation name used in logs and errors
            action: Coroutine function receiving the session

        Returns:
            Result holding the action's value or the wrapped error
        """
        try:
            async with self.db.session() as session:
                value = await action(session)
            return Result.success(value)
        except Exception as e:
            error = RepositoryError.from_exception(operation, e)
            logger.error(f"{operation} failed on {self.model.__name__} [{error.error_code}]: {e}")
            return Result.failure(error)

    def resolve(self, result: Result[T]) -> Optional[T]:
        """Turn a Result into the public return value."""
        if self.raise_errors:
            return result.unwrap()
        return result.value_or_none()

    @staticmethod
    def parse(schema: Type[SchemaType], data: Union[SchemaType, Dict[str, Any]]) -> SchemaType:
        """Validate raw input against a schema; instances pass through untouched."""
        if isinstance(data, schema):
            return data
        if isinstance(data, BaseModel):
            data = data.model_dump()
        return schema.model_validate(data)

    async def get_by_field(self, session: AsyncSession, field: str, value: Any) -> Optional[ModelType]:
        """
        Get the first record whose ``field`` equals ``value``.

        Args:
            session: Active session
            field: Column name to match
            value: Value to match exactly

        Returns:
            Model instance if found, None otherwise
        """
        if not hasattr(self.model, field):
            raise ValueError(f"Field '{field}' does not exist on {self.model.__name__}")

        query = select(self.model).where(getattr(self.model, field) == value).limit(1)
        result = await session.execute(query)
        obj = result.scalars().first()

        if obj:
            logger.debug(f"Retrieved {self.model.__name__} by {field}: {value}")
        else:
            logger.debug(f"{self.model.__name__} with {field}={value} not found")

        return obj

    async def create(self, session: AsyncSession, obj_in: Dict[str, Any]) -> ModelType:
        """
        Insert a new record and commit it.

        Args:
            session: Active session
            obj_in: Dictionary of column values

        Returns:
            Persisted model instance with its generated id
        """
        db_obj = self.model(**obj_in)
        session.add(db_obj)
        await session.commit()
        await session.refresh(db_obj)

        logger.debug(f"Created {self.model.__name__} with id: {db_obj.id}")
        return db_obj
