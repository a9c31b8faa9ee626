"""Core type definitions for decentralized identities."""

from __future__ import annotations

from enum import StrEnum
from typing import Any, NewType

from pydantic import Field

from identity_core.common.value_object import ValueObject

# Primitive Types
DID = NewType("DID", str)
KeyID = NewType("KeyID", str)
JSON = dict[str, Any] | list[Any] | str | int | float | bool | None


class ProviderType(StrEnum):
    """DID methods an identity can be issued under."""

    DID_KEY = "did:key"
    DID_WEB = "did:web"


class KeyType(StrEnum):
    """Key algorithms a key descriptor can reference."""

    ED25519 = "Ed25519"
    SECP256K1 = "Secp256k1"
    SECP256R1 = "Secp256r1"
    X25519 = "X25519"


class KeyDescriptor(ValueObject):
    """A key held by a key manager, referenced from an identity by ``kid``."""

    kid: KeyID
    type: KeyType
    public_key_hex: str
    private_key_hex: str | None = None
    kms: str | None = None  # Name of the key management system holding the key
    meta: dict[str, Any] = Field(default_factory=dict)


class ServiceEndpoint(ValueObject):
    """A service entry of a DID document."""

    id: str
    type: str
    service_endpoint: str
    description: str | None = None


class UnitSchema(ValueObject):
    """Self-description of a unit: what it is and what it can do."""

    name: str
    description: str = ""
    version: str = "1.0.0"
    capabilities: list[str] = Field(default_factory=list)
    children: list[UnitSchema] = Field(default_factory=list)
