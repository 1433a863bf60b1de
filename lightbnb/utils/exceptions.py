"""
Custom exception classes for the LightBnB data-access layer.
Repositories never let these escape unless they were built with ``raise_errors=True``.
"""

from typing import Optional


class RepositoryError(Exception):
    """Base data-access exception carrying the failed operation's name."""

    error_code = "REPOSITORY_ERROR"

    def __init__(self, operation: str, detail: Optional[str] = None):
        self.operation = operation
        self.detail = detail or "operation failed"
        super().__init__(f"{operation}: {self.detail}")

    @classmethod
    def from_exception(cls, operation: str, exc: BaseException) -> "RepositoryError":
        """
        Wrap an underlying exception.

        Args:
            operation: Name of the repository operation that failed
            exc: Original exception, kept as ``__cause__``

        Returns:
            The most specific RepositoryError subclass for ``exc``
        """
        # Imported here so the exception module stays importable without the ORM
        from pydantic import ValidationError as PydanticValidationError
        from sqlalchemy.exc import IntegrityError, OperationalError, InterfaceError

        if isinstance(exc, PydanticValidationError):
            error_cls = ValidationError
        elif isinstance(exc, IntegrityError):
            error_cls = ConstraintViolationError
        elif isinstance(exc, (OperationalError, InterfaceError, ConnectionError, OSError)):
            error_cls = DatabaseUnavailableError
        else:
            error_cls = cls

        error = error_cls(operation, str(exc).splitlines()[0] if str(exc) else type(exc).__name__)
        error.__cause__ = exc
        return error


class ValidationError(RepositoryError):
    """Operation input failed schema validation."""

    error_code = "VALIDATION_ERROR"


class ConstraintViolationError(RepositoryError):
    """Unique, foreign key or check constraint rejected the statement."""

    error_code = "CONSTRAINT_VIOLATION"


class DatabaseUnavailableError(RepositoryError):
    """Connection to the database could not be used."""

    error_code = "DATABASE_UNAVAILABLE"
