#!/usr/bin/env python3
"""
Database schema management.
Creates, drops and checks the LightBnB tables through the same Database handle
the repositories use.

Usage:
    python -m lightbnb.migrate create
    python -m lightbnb.migrate reset --confirm
    python -m lightbnb.migrate check --database-url sqlite:///lightbnb.db
"""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

from lightbnb.config import get_settings
from lightbnb.database import Database
from lightbnb.utils.logger import configure_logging

logger = logging.getLogger(__name__)


class MigrationManager:
    """Manages the schema of one database."""

    def __init__(self, db: Database):
        self.db = db

    async def create(self) -> None:
        """Create every table that does not exist yet."""
        logger.info("Creating database tables")
        await self.db.create_tables()

    async def drop(self) -> None:
        """Drop every table (refused in production)."""
        logger.warning("Dropping database tables - all data will be lost!")
        await self.db.drop_tables()

    async def reset(self) -> None:
        """Reset the database by dropping and recreating all tables."""
        if not self.db.settings.is_development and not self.db.settings.is_testing:
            raise RuntimeError("Database reset is only allowed in development or test mode")

        await self.drop()
        await self.create()
        logger.info("Database reset completed")

    async def check(self) -> bool:
        """Ping the database and log pool information."""
        if not await self.db.ping():
            return False

        info = await self.db.get_database_info()
        for key, value in info.items():
            logger.info(f"{key}: {value}")
        return True


async def run(command: str, database_url: Optional[str] = None) -> bool:
    """Run one command against a freshly connected database handle."""
    async with Database(url=database_url) as db:
        manager = MigrationManager(db)

        if command == "create":
            await manager.create()
        elif command == "drop":
            await manager.drop()
        elif command == "reset":
            await manager.reset()
        elif command == "check":
            return await manager.check()
        else:
            raise ValueError(f"Unknown command: {command}")

    return True


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="LightBnB database schema management")
    parser.add_argument("--database-url", help="Override the configured database URL")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("create", help="Create all tables")
    subparsers.add_parser("drop", help="Drop all tables (not allowed in production)")

    reset_parser = subparsers.add_parser("reset", help="Drop and recreate all tables (development only)")
    reset_parser.add_argument("--confirm", action="store_true", help="Confirm database reset")

    subparsers.add_parser("check", help="Check connectivity and show pool information")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI interface for schema management."""
    configure_logging(get_settings())

    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 0

    if args.command == "reset" and not args.confirm:
        print("Database reset requires --confirm flag")
        return 1

    try:
        succeeded = asyncio.run(run(args.command, args.database_url))
    except Exception as e:
        logger.error(f"Command failed: {e}")
        return 1

    return 0 if succeeded else 1


if __name__ == "__main__":
    sys.exit(main())
