"""Verifiable Credential shapes carried by identities."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import ConfigDict, Field

from identity_core.common.value_object import ValueObject

W3C_CREDENTIALS_CONTEXT = "https://www.w3.org/2018/credentials/v1"


class CredentialSubject(ValueObject):
    """
    Subject of a credential.

    Claims are carried as extra fields next to ``id``; their structure is
    owned by whoever issues the credential.
    """

    model_config = ConfigDict(extra="allow")

    id: str | None = None


class VerifiableCredential(ValueObject):
    """
    W3C Verifiable Credential.

    This is the document shape only. Issuing, signing and verifying
    credentials happen in the services that consume this package; an
    identity stores its credential without inspecting it.
    """

    model_config = ConfigDict(extra="allow")

    context: list[str | dict[str, Any]] = Field(
        default_factory=lambda: [W3C_CREDENTIALS_CONTEXT],
        alias="@context",
    )
    id: str
    type: list[str] = Field(default_factory=lambda: ["VerifiableCredential"])

    # Issuer
    issuer: str | dict[str, Any]  # DID or {"id": DID, ...}
    issuance_date: datetime
    expiration_date: datetime | None = None

    credential_subject: CredentialSubject

    # Proof
    proof: dict[str, Any] | None = None
