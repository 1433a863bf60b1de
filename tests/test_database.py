"""
Tests for the Database handle lifecycle and the schema management script.
"""

import pytest
from sqlalchemy import text

from lightbnb.config import Settings
from lightbnb.database import Database
from lightbnb.migrate import main as migrate_main
from lightbnb.models.user import User


class TestDatabaseLifecycle:

    @pytest.mark.asyncio
    async def test_session_requires_connect(self, test_settings: Settings):
        database = Database(settings=test_settings)

        assert not database.is_connected
        with pytest.raises(RuntimeError, match="not connected"):
            async with database.session():
                pass
        with pytest.raises(RuntimeError, match="not connected"):
            database.engine

    @pytest.mark.asyncio
    async def test_connect_is_idempotent(self, test_settings: Settings):
        database = Database(settings=test_settings)

        database.connect()
        engine = database.engine
        database.connect()

        assert database.engine is engine
        await database.dispose()
        assert not database.is_connected

    @pytest.mark.asyncio
    async def test_context_manager_disposes(self, test_settings: Settings):
        async with Database(settings=test_settings) as database:
            assert database.is_connected
            assert await database.ping()

        assert not database.is_connected
        # Disposing twice is harmless
        await database.dispose()

    @pytest.mark.asyncio
    async def test_ping_fails_when_disconnected(self, test_settings: Settings):
        assert await Database(settings=test_settings).ping() is False

    @pytest.mark.asyncio
    async def test_url_is_normalised(self, test_settings: Settings):
        database = Database(url="sqlite:///:memory:", settings=test_settings)
        assert database.url == "sqlite+aiosqlite:///:memory:"
        assert database.is_sqlite

    @pytest.mark.asyncio
    async def test_tables_created(self, db: Database):
        async with db.session() as session:
            for table in ["users", "properties", "reservations", "property_reviews"]:
                result = await session.execute(text(f"SELECT COUNT(*) FROM {table}"))
                assert result.scalar() == 0

    @pytest.mark.asyncio
    async def test_session_rolls_back_on_error(self, db: Database):
        with pytest.raises(ValueError):
            async with db.session() as session:
                session.add(User(name="Rolled Back", email="rb@example.com", password="x"))
                await session.flush()
                raise ValueError("abort")

        async with db.session() as session:
            result = await session.execute(text("SELECT COUNT(*) FROM users"))
            assert result.scalar() == 0

    @pytest.mark.asyncio
    async def test_like_is_case_sensitive(self, db: Database):
        async with db.session() as session:
            result = await session.execute(text("SELECT 'Vancouver' LIKE '%vancouver%'"))
            assert not result.scalar()

    @pytest.mark.asyncio
    async def test_get_database_info(self, db: Database):
        info = await db.get_database_info()

        assert info["database_version"]
        assert "pool_status" in info

    @pytest.mark.asyncio
    async def test_drop_tables_refused_in_production(self):
        production = Settings(environment="production", database_url="sqlite+aiosqlite:///:memory:")

        async with Database(settings=production) as database:
            with pytest.raises(RuntimeError, match="production"):
                await database.drop_tables()


class TestMigrate:
    """Schema management commands against a SQLite file."""

    def test_create_and_check(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'lightbnb.db'}"

        assert migrate_main(["--database-url", url, "create"]) == 0
        assert migrate_main(["--database-url", url, "check"]) == 0
        assert (tmp_path / "lightbnb.db").exists()

    def test_reset_requires_confirm(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'lightbnb.db'}"
        assert migrate_main(["--database-url", url, "reset"]) == 1

    def test_reset_with_confirm(self, tmp_path):
        url = f"sqlite:///{tmp_path / 'lightbnb.db'}"
        assert migrate_main(["--database-url", url, "create"]) == 0
        assert migrate_main(["--database-url", url, "reset", "--confirm"]) == 0

    def test_no_command_prints_help(self, capsys):
        assert migrate_main([]) == 0
        assert "usage" in capsys.readouterr().out.lower()
