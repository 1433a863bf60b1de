"""
Database connection and session management.
Wraps an async SQLAlchemy engine and session factory in an explicitly managed handle
that repositories receive instead of reaching for a module-level pool.
"""

from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy import Integer, event, text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.pool import StaticPool

from lightbnb.config import Settings, get_settings, normalize_database_url
import logging

logger = logging.getLogger(__name__)


class Base(DeclarativeBase):
    """
    Base class for all database models.
    Every LightBnB table uses a serial integer primary key.
    """

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    def __repr__(self) -> str:
        """String representation of the model."""
        return f"<{self.__class__.__name__}(id={self.id})>"

    def column_values(self) -> dict:
        """Map every mapped column to its current value, like a ``SELECT table.*`` row."""
        return {attr.key: getattr(self, attr.key) for attr in self.__mapper__.column_attrs}


def _configure_sqlite(dbapi_connection, connection_record):
    """Make SQLite enforce foreign keys and treat LIKE case-sensitively, as PostgreSQL does."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys = ON")
    cursor.execute("PRAGMA case_sensitive_like = ON")
    cursor.close()


class Database:
    """
    Handle over the connection pool.

    The engine is created by ``connect()`` and released by ``dispose()``; the handle can
    also be used as an async context manager. Each call to ``session()`` checks out its
    own connection, so concurrent operations never share a session.
    """

    def __init__(self, url: Optional[str] = None, settings: Optional[Settings] = None, echo: Optional[bool] = None):
        self.settings = settings or get_settings()
        self.url = normalize_database_url(url or self.settings.database_url)
        self.echo = self.settings.debug if echo is None else echo
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker[AsyncSession]] = None

    @property
    def is_sqlite(self) -> bool:
        return self.url.startswith("sqlite")

    @property
    def is_connected(self) -> bool:
        return self._engine is not None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not connected. Call connect() first.")
        return self._engine

    def _engine_options(self) -> dict:
        if self.is_sqlite:
            # A single shared connection keeps in-memory databases alive across sessions
            return {
                "poolclass": StaticPool,
                "connect_args": {"check_same_thread": False},
            }
        return {
            "pool_size": self.settings.db_pool_size,
            "max_overflow": self.settings.db_max_overflow,
            "pool_pre_ping": True,
            "pool_recycle": self.settings.db_pool_recycle,
            "pool_timeout": self.settings.db_pool_timeout,
            "connect_args": {
                "server_settings": {
                    "application_name": "lightbnb",
                }
            },
        }

    def connect(self) -> "Database":
        """Create the engine and session factory. Calling it twice is a no-op."""
        if self._engine is not None:
            return self

        self._engine = create_async_engine(self.url, echo=self.echo, **self._engine_options())
        if self.is_sqlite:
            event.listen(self._engine.sync_engine, "connect", _configure_sqlite)

        self._session_factory = async_sessionmaker(
            self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        logger.info(f"Database pool created for {self._engine.url.render_as_string(hide_password=True)}")
        return self

    async def dispose(self) -> None:
        """Close every pooled connection and forget the engine."""
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._session_factory = None
        logger.info("Database connections closed")

    async def __aenter__(self) -> "Database":
        return self.connect()

    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.dispose()

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        """
        Yield a session bound to a pooled connection.
        Rolls back on error and always returns the connection to the pool.
        """
        if self._session_factory is None:
            raise RuntimeError("Database is not connected. Call connect() first.")

        async with self._session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def ping(self) -> bool:
        """
        Test database connectivity.
        Returns True if connection is successful, False otherwise.
        """
        try:
            async with self.session() as session:
                result = await session.execute(text("SELECT 1"))
                result.scalar()
            logger.info("Database connection successful")
            return True
        except Exception as e:
            logger.error(f"Database connection failed: {e}")
            return False

    async def create_tables(self) -> None:
        """Create all database tables."""
        # Imported for its side effect of registering every model on Base.metadata
        import lightbnb.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Database tables created successfully")

    async def drop_tables(self) -> None:
        """
        Drop all database tables.
        This should only be used in testing or development.
        """
        if self.settings.is_production:
            raise RuntimeError("Cannot drop tables in production environment")

        import lightbnb.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.drop_all)
        logger.info("Database tables dropped successfully")

    async def get_database_info(self) -> dict:
        """
        Get database connection information for monitoring.
        Returns connection pool status and database version.
        """
        try:
            async with self.session() as session:
                if self.is_sqlite:
                    version_result = await session.execute(text("SELECT sqlite_version()"))
                else:
                    version_result = await session.execute(text("SELECT version()"))
                version = version_result.scalar()

            return {
                "database_version": version,
                "pool_status": self.engine.pool.status(),
            }
        except Exception as e:
            logger.error(f"Failed to get database info: {e}")
            return {"error": str(e)}
