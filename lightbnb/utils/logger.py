"""
Logging configuration.
Modules obtain loggers with ``logging.getLogger(__name__)``; entry points call
``configure_logging()`` once.
"""

import logging
from typing import Optional

from lightbnb.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(settings: Optional[Settings] = None) -> None:
    """Configure the root logger from settings."""
    settings = settings or get_settings()
    logging.basicConfig(level=settings.log_level, format=LOG_FORMAT)

    # SQL echo is controlled by Database(echo=...), keep the engine logger quiet otherwise
    if not settings.debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
