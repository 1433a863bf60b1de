"""
Result wrapper for repository operations.
Carries either a value or the error that prevented producing one.
"""

from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from lightbnb.utils.exceptions import RepositoryError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[RepositoryError] = None

    @classmethod
    def success(cls, value: Optional[T]) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: RepositoryError) -> "Result[T]":
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Optional[T]:
        """Return the value, raising the carried error if there is one."""
        if self.error is not None:
            raise self.error
        return self.value

    def value_or_none(self) -> Optional[T]:
        """Collapse failures to None."""
        return self.value if self.error is None else None
