# archloom:domain=model
"""Result type returned by ``try_*`` operations."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar, Union

from archloom.errors import ErrorCode, ValidationError

__all__ = [
    "Err",
    "ErrorCode",
    "Ok",
    "Result",
    "ValidationError",
    "fail",
    "is_blank",
]

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying the created value."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying the validation error that was not raised."""

    error: ValidationError

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        """Raise the carried error."""
        raise self.error


Result = Union[Ok[T], Err]


def fail(code: ErrorCode, message: str) -> Err:
    """Shorthand for ``Err(ValidationError(code, message))``."""
    return Err(ValidationError(code, message))


def is_blank(value: str | None) -> bool:
    """Return True for ``None``, empty, or whitespace-only strings."""
    return value is None or not value.strip()
