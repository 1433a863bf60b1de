"""
Utility modules for error handling, result wrapping and logging setup.
"""

from .exceptions import RepositoryError, ValidationError
from .result import Result
from .logger import configure_logging

__all__ = [
    "RepositoryError",
    "ValidationError",
    "Result",
    "configure_logging",
]
