"""Base class for immutable value objects."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


def freeze(value: Any) -> Any:
    """Return a read-only copy: mappings become mapping proxies, lists become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({key: freeze(item) for key, item in value.items()})
    if isinstance(value, list | tuple):
        return tuple(freeze(item) for item in value)
    return value


def thaw(value: Any) -> Any:
    """Inverse of ``freeze``: plain dicts and lists, safe to hand to callers."""
    if isinstance(value, Mapping):
        return {key: thaw(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [thaw(item) for item in value]
    return value


class ValueObject(BaseModel):
    """
    Value without identity: equality by fields.

    Instances are frozen, so every attribute is read-only once built.
    Fields are declared in snake_case and exchanged in camelCase; both
    spellings are accepted on input.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def equals(self, other: Any) -> bool:
        """Value equality; ``False`` for objects of another type."""
        if not isinstance(other, type(self)):
            return False
        return self == other
