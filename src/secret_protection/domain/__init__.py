"""Secret protection domain layer.

This package contains the key domains, the AEAD primitives, the opaque
token codec and its specializations, and the CBU checksum rules.
"""

from secret_protection.domain.bank_account import ProtectedCbu, protect_cbu
from secret_protection.domain.cbu import (
    BLOCK_A_WEIGHTS,
    BLOCK_B_WEIGHTS,
    cbu_last4,
    compute_check_digit,
    is_valid_cbu,
    mask_cbu,
    normalize_cbu,
    validate_cbu,
)
from secret_protection.domain.encryption import EncryptedData, decrypt_with_key, encrypt_with_key
from secret_protection.domain.hashing import digest, hash_cbu
from secret_protection.domain.keys import KEY_SIZE, IKeyProvider, KeyDomain, coerce_domain, derive_key
from secret_protection.domain.opaque_token import TOKEN_VERSION, OpaqueToken, OpaqueTokenCodec
from secret_protection.domain.public_id import PublicIdCodec, PublicIdPayload, PublicIdType
from secret_protection.domain.vault import SecretVault

__all__ = [
    # Keys
    "KEY_SIZE",
    "KeyDomain",
    "IKeyProvider",
    "coerce_domain",
    "derive_key",
    # Encryption
    "EncryptedData",
    "encrypt_with_key",
    "decrypt_with_key",
    # Tokens
    "TOKEN_VERSION",
    "OpaqueToken",
    "OpaqueTokenCodec",
    "PublicIdType",
    "PublicIdPayload",
    "PublicIdCodec",
    "SecretVault",
    # Hashing
    "digest",
    "hash_cbu",
    # CBU
    "BLOCK_A_WEIGHTS",
    "BLOCK_B_WEIGHTS",
    "compute_check_digit",
    "is_valid_cbu",
    "normalize_cbu",
    "validate_cbu",
    "cbu_last4",
    "mask_cbu",
    "ProtectedCbu",
    "protect_cbu",
]
