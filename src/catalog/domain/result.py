"""Success-or-failure container returned by the domain factories.

Factories such as ``Price.of`` and ``Product.create`` hand back a Result so
callers can branch on invalid input without try/except. ``unwrap()`` turns a
failure back into the ValidationError when raising is what the caller wants.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, TypeVar

from catalog.domain.exceptions import ValidationError

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):

    value: T | None = None
    error: ValidationError | None = None

    @staticmethod
    def success(value: T) -> Result[T]:
        return Result(value=value)

    @staticmethod
    def failure(error: ValidationError | str) -> Result[T]:
        if isinstance(error, str):
            error = ValidationError(error)
        return Result(error=error)

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    def unwrap(self) -> T:
        """Return the value, or raise the carried ValidationError."""
        if self.error is not None:
            raise self.error
        return self.value  # type: ignore[return-value]
