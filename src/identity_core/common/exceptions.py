"""Exception hierarchy for identity-core."""

from __future__ import annotations

from typing import Any


class IdentityCoreError(Exception):
    """
    Base exception for all identity-core errors.

    ``details["field"]``, when present, names the input field (by its
    snapshot name, e.g. ``createdAt``) the error is about.
    """

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.__class__.__name__
        self.details = details or {}
        self.cause = cause

    @property
    def field(self) -> str | None:
        return self.details.get("field")

    def __str__(self) -> str:
        text = f"[{self.code}] {self.message}"
        if self.field is not None:
            text += f" (field: {self.field})"
        context = {k: v for k, v in self.details.items() if k != "field"}
        if context:
            text += f" - Details: {context}"
        return text

    def to_dict(self) -> dict[str, Any]:
        """Error payload for callers that report failures over the wire."""
        return {
            "error": {
                "type": self.__class__.__name__,
                "code": self.code,
                "message": self.message,
                "field": self.field,
                "details": self.details,
            }
        }


class ValidationError(IdentityCoreError):
    """Input failed validation while constructing a value object."""


class ConfigurationError(IdentityCoreError):
    """Settings could not be applied."""
