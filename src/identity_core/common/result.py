"""Success/failure container returned by validating factories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from identity_core.common.exceptions import ValidationError


@dataclass(frozen=True)
class Result[T]:
    """
    Outcome of a validating operation.

    A result is either a success carrying a value or a failure carrying a
    ``ValidationError``. Factories return a result instead of raising, so
    callers branch on ``is_success``:

        ```python
        result = Identity.create(alias="user-001", ...)
        if result.is_failure:
            print(result.error_message)
        else:
            identity = result.value
        ```
    """

    _value: T | None = None
    error: ValidationError | None = None

    @classmethod
    def success(cls, value: T) -> Result[T]:
        return cls(_value=value)

    @classmethod
    def fail(
        cls,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> Result[T]:
        return cls(error=ValidationError(message, code=code, details=details, cause=cause))

    @property
    def is_success(self) -> bool:
        return self.error is None

    @property
    def is_failure(self) -> bool:
        return self.error is not None

    @property
    def value(self) -> T:
        """The wrapped value. Raises the carried error on a failed result."""
        if self.error is not None:
            raise self.error
        return self._value  # type: ignore[return-value]

    @property
    def error_message(self) -> str | None:
        return self.error.message if self.error is not None else None

    def unwrap_or(self, default: T) -> T:
        """Return the value, or ``default`` when the result failed."""
        if self.error is not None:
            return default
        return self._value  # type: ignore[return-value]
