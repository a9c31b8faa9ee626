"""Identity value object: a DID bound to a key and a verifiable credential."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from datetime import UTC, datetime
from typing import Any

import structlog
from pydantic import Field, field_serializer, field_validator
from pydantic import ValidationError as PydanticValidationError
from pydantic_core import PydanticCustomError, PydanticSerializationError

from identity_core.common.result import Result
from identity_core.common.types import UnitSchema
from identity_core.common.value_object import ValueObject, freeze, thaw

logger = structlog.get_logger()

ALIAS_PATTERN = re.compile(r"[A-Za-z0-9_-]+")
ALIAS_MIN_LENGTH = 2
ALIAS_MAX_LENGTH = 32
DEFAULT_VERSION = "1.0.0"

UNIT_NAME = "Identity Unit"
UNIT_DESCRIPTION = "I can create and manage decentralized identities."
UNIT_CAPABILITIES = ("create", "update", "delete")


def _utcnow() -> datetime:
    return datetime.now(UTC)


class Identity(ValueObject):
    """
    A decentralized identity bound to a cryptographic key and a credential.

    Identities are only built through ``Identity.create``, which validates the
    alias and fills in defaults. Once built an identity never changes; use
    ``update`` to derive a new one.

    Example:
        ```python
        result = Identity.create(
            alias="user-001",
            did="did:key:z6Mk...",
            kid="key-1",
            publicKeyHex="0xabc",
            provider="did:key",
            credential=credential,
        )
        if result.is_success:
            identity = result.value
            payload = identity.to_json()
        ```
    """

    # Declaration order is validation order: alias errors are reported first.
    alias: str
    did: str
    kid: str
    public_key_hex: str
    private_key_hex: str | None = Field(default=None, repr=False)
    provider: str  # did:key | did:web
    credential: Any  # Opaque; structure owned by the credential issuer
    metadata: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)
    created_at: datetime = Field(default_factory=_utcnow)
    version: str = DEFAULT_VERSION

    # Credential and metadata may hold unhashable values; identities are compared, never hashed.
    __hash__ = None  # type: ignore[assignment]

    @field_validator("alias", mode="before")
    @classmethod
    def validate_alias(cls, v: Any) -> str:
        if not v:
            raise PydanticCustomError("alias_empty", "alias empty")
        if not isinstance(v, str) or ALIAS_PATTERN.fullmatch(v) is None:
            raise PydanticCustomError("alias_invalid_characters", "invalid alias characters")
        if not ALIAS_MIN_LENGTH <= len(v) <= ALIAS_MAX_LENGTH:
            raise PydanticCustomError("alias_length", "alias length out of bounds")
        return v

    @field_validator("metadata", mode="before")
    @classmethod
    def default_metadata(cls, v: Any) -> Any:
        return {} if v is None else v

    @field_validator("metadata")
    @classmethod
    def freeze_metadata(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        return freeze(v)

    @field_validator("created_at", mode="before")
    @classmethod
    def default_created_at(cls, v: Any) -> Any:
        return _utcnow() if v is None else v

    @field_validator("version", mode="before")
    @classmethod
    def default_version(cls, v: Any) -> Any:
        return v or DEFAULT_VERSION

    @field_serializer("metadata")
    def serialize_metadata(self, v: Mapping[str, Any]) -> dict[str, Any]:
        return thaw(v)

    @classmethod
    def create(
        cls,
        props: Mapping[str, Any] | None = None,
        /,
        **fields: Any,
    ) -> Result[Identity]:
        """
        Validate input and build an identity.

        Args:
            props: Identity attributes, keyed by snapshot name (``publicKeyHex``)
                or attribute name (``public_key_hex``)
            **fields: Attributes given as keywords; they override ``props``

        Returns:
            A successful result holding the identity, or a failed result whose
            ``error_message`` describes the first problem found
        """
        data = cls._by_alias({**(props or {}), **fields})
        data.setdefault("alias", None)

        try:
            identity = cls.model_validate(data)
        except PydanticValidationError as e:
            error = e.errors()[0]
            field = ".".join(str(part) for part in error["loc"])
            if error["type"].startswith("alias_"):
                message = error["msg"]
            else:
                message = f"{field}: {error['msg']}"
            logger.debug("identity_validation_failed", field=field, reason=error["type"])
            return Result.fail(message, code=error["type"], details={"field": field}, cause=e)

        # Snapshots must always be producible for a successfully built identity.
        for field in ("credential", "metadata"):
            try:
                identity.model_dump(mode="json", include={field})
            except PydanticSerializationError as e:
                logger.debug("identity_validation_failed", field=field, reason="not_serializable")
                return Result.fail(
                    f"{field}: not serializable",
                    code="not_serializable",
                    details={"field": field},
                    cause=e,
                )

        logger.debug(
            "identity_created",
            alias=identity.alias,
            did=identity.did,
            provider=identity.provider,
            has_private_key=identity.has_private_key,
        )
        return Result.success(identity)

    @classmethod
    def from_string(cls, text: str | bytes) -> Result[Identity]:
        """Rebuild an identity from the output of ``to_string``."""
        try:
            data = json.loads(text)
        except ValueError as e:  # JSONDecodeError, UnicodeDecodeError
            return Result.fail("malformed identity json", code="invalid_json", cause=e)
        if not isinstance(data, dict):
            return Result.fail("identity json must be an object", code="invalid_json")
        return cls.create(data)

    @classmethod
    def _by_alias(cls, data: Mapping[str, Any]) -> dict[str, Any]:
        # Attribute names fold into snapshot names; later keys win.
        normalized: dict[str, Any] = {}
        for key, value in data.items():
            info = cls.model_fields.get(key)
            normalized[info.alias if info is not None and info.alias else key] = value
        return normalized

    def update(self, **changes: Any) -> Result[Identity]:
        """Derive a new identity with ``changes`` applied, re-running validation."""
        return type(self).create(self.to_domain(), **changes)

    @property
    def has_private_key(self) -> bool:
        return self.private_key_hex is not None

    @property
    def whoami(self) -> str:
        return UNIT_NAME

    @property
    def dna(self) -> UnitSchema:
        return UnitSchema(
            name=UNIT_NAME,
            description=UNIT_DESCRIPTION,
            version=self.version,
            capabilities=list(UNIT_CAPABILITIES),
        )

    def to_json(self) -> dict[str, Any]:
        """Structural snapshot with JSON-ready values (ISO-8601 timestamps)."""
        return self.model_dump(mode="json", by_alias=True)

    def to_domain(self) -> dict[str, Any]:
        """Structural snapshot with native values; the credential is passed through as-is."""
        return {
            "alias": self.alias,
            "did": self.did,
            "kid": self.kid,
            "publicKeyHex": self.public_key_hex,
            "privateKeyHex": self.private_key_hex,
            "provider": self.provider,
            "credential": self.credential,
            "metadata": thaw(self.metadata),
            "createdAt": self.created_at,
            "version": self.version,
        }

    def to_string(self) -> str:
        return json.dumps(self.to_json(), sort_keys=True, separators=(",", ":"))

    def __str__(self) -> str:
        return self.to_string()
