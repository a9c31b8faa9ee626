"""
Example: Building and Exchanging Identities

Demonstrates:
1. Creating an identity with a verifiable credential
2. Handling validation failures
3. Serializing and rebuilding an identity
4. Deriving a changed identity
"""

from datetime import UTC, datetime

from identity_core import Identity, ProviderType
from identity_core.identity.credentials import CredentialSubject, VerifiableCredential
from identity_core.observability.logging import configure_logging


def create_example() -> Identity:
    """Demonstrate identity creation."""
    print("=" * 60)
    print("Create Example")
    print("=" * 60)

    did = "did:key:z6MkhaXgBZDvotDkL5257faiztiGiC2QtKLGpbnnEGta2doK"
    credential = VerifiableCredential(
        id="urn:uuid:3978344f-8596-4c3a-a978-8fcaba3903c5",
        type=["VerifiableCredential", "IdentityCredential"],
        issuer=did,
        issuance_date=datetime.now(UTC),
        credential_subject=CredentialSubject(id=did, holder="user-001"),
    )

    result = Identity.create(
        alias="user-001",
        did=did,
        kid="key-1",
        publicKeyHex="d75a980182b10ab7d54bfed3c964073a0ee172f3daa62325af021a68f707511a",
        provider=ProviderType.DID_KEY,
        credential=credential,
        metadata={"label": "personal"},
    )
    identity = result.value

    print(f"Alias:    {identity.alias}")
    print(f"DID:      {identity.did}")
    print(f"Version:  {identity.version}")
    print(f"Unit:     {identity.whoami} {identity.dna.capabilities}")
    print()
    return identity


def validation_example() -> None:
    """Demonstrate failed results."""
    print("=" * 60)
    print("Validation Example")
    print("=" * 60)

    for alias in ["", "u", "bad alias!"]:
        result = Identity.create(
            alias=alias,
            did="did:web:example.com",
            kid="key-1",
            publicKeyHex="0xabc",
            provider=ProviderType.DID_WEB,
            credential=None,
        )
        print(f"{alias!r:14} -> {result.error_message}")
    print()


def serialization_example(identity: Identity) -> None:
    """Demonstrate snapshot round trips and updates."""
    print("=" * 60)
    print("Serialization Example")
    print("=" * 60)

    text = identity.to_string()
    print(f"Encoded: {text[:72]}...")

    rebuilt = Identity.from_string(text).value
    print(f"Snapshots match: {rebuilt.to_json() == identity.to_json()}")

    renamed = identity.update(alias="user-001-work").value
    print(f"Renamed: {renamed.alias} (original still {identity.alias})")
    print()


def main() -> None:
    """Run all examples."""
    configure_logging()

    print("\n" + "=" * 60)
    print("identity-core - Identity Demo")
    print("=" * 60)
    print()

    identity = create_example()
    validation_example()
    serialization_example(identity)

    print("=" * 60)
    print("Demo completed!")
    print("=" * 60)


if __name__ == "__main__":
    main()
