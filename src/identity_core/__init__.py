"""
identity-core

Shared data-model types for decentralized identities: identifiers, key
descriptors, service endpoints, and the validated ``Identity`` value object.
"""

__version__ = "0.1.0"
__all__ = [
    "Identity",
    "Result",
    "ValidationError",
    "VerifiableCredential",
    "KeyDescriptor",
    "ServiceEndpoint",
    "ProviderType",
    "KeyType",
]

from identity_core.common.exceptions import ValidationError
from identity_core.common.result import Result
from identity_core.common.types import KeyDescriptor, KeyType, ProviderType, ServiceEndpoint
from identity_core.identity.credentials import VerifiableCredential
from identity_core.identity.identity import Identity
