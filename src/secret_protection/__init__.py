"""Cryptographic secret protection: opaque tokens, public ids, secret vault, CBU checks."""

from secret_protection.bootstrap import SecretServices, build_services
from secret_protection.domain import (
    KeyDomain,
    OpaqueTokenCodec,
    ProtectedCbu,
    PublicIdCodec,
    PublicIdPayload,
    PublicIdType,
    SecretVault,
    digest,
    hash_cbu,
    is_valid_cbu,
    protect_cbu,
    validate_cbu,
)
from secret_protection.exceptions import (
    AuthenticationFailure,
    ConfigurationError,
    DecodeFailure,
    EncryptionError,
    SecretProtectionError,
    ValidationError,
)
from secret_protection.infrastructure.key_provider import KeyProvider

__version__ = "0.1.0"

__all__ = [
    "SecretServices",
    "build_services",
    "KeyDomain",
    "KeyProvider",
    "OpaqueTokenCodec",
    "PublicIdCodec",
    "PublicIdPayload",
    "PublicIdType",
    "SecretVault",
    "ProtectedCbu",
    "protect_cbu",
    "digest",
    "hash_cbu",
    "is_valid_cbu",
    "validate_cbu",
    "SecretProtectionError",
    "ConfigurationError",
    "DecodeFailure",
    "ValidationError",
    "AuthenticationFailure",
    "EncryptionError",
]
