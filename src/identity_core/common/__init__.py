"""Common types, errors, and base classes."""

from identity_core.common.exceptions import (
    ConfigurationError,
    IdentityCoreError,
    ValidationError,
)
from identity_core.common.result import Result
from identity_core.common.types import (
    DID,
    JSON,
    KeyDescriptor,
    KeyID,
    KeyType,
    ProviderType,
    ServiceEndpoint,
    UnitSchema,
)
from identity_core.common.value_object import ValueObject

__all__ = [
    "DID",
    "JSON",
    "KeyID",
    "KeyType",
    "KeyDescriptor",
    "ProviderType",
    "ServiceEndpoint",
    "UnitSchema",
    "ValueObject",
    "Result",
    "IdentityCoreError",
    "ValidationError",
    "ConfigurationError",
]
