"""Decentralized identity value objects."""

from identity_core.identity.credentials import CredentialSubject, VerifiableCredential
from identity_core.identity.identity import (
    ALIAS_MAX_LENGTH,
    ALIAS_MIN_LENGTH,
    DEFAULT_VERSION,
    Identity,
)

__all__ = [
    "Identity",
    "CredentialSubject",
    "VerifiableCredential",
    "ALIAS_MIN_LENGTH",
    "ALIAS_MAX_LENGTH",
    "DEFAULT_VERSION",
]
