"""AES-256-GCM primitives for the secret protection layer.

AES-GCM provides both confidentiality and authenticity (AEAD), so a
tampered ciphertext, nonce or tag is rejected before any plaintext is
released.
"""

import os
from typing import NamedTuple

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from secret_protection.domain.keys import KEY_SIZE
from secret_protection.exceptions import AuthenticationFailure, EncryptionError, ValidationError
from secret_protection.logging_config import get_logger

logger = get_logger(__name__)

NONCE_SIZE = 12  # 96 bits, recommended for GCM
TAG_SIZE = 16  # 128-bit authentication tag


class EncryptedData(NamedTuple):
    """Container for the three parts of an AES-GCM output."""

    nonce: bytes
    ciphertext: bytes
    tag: bytes


def encrypt_with_key(plaintext: bytes, key: bytes) -> EncryptedData:
    """Encrypt data using AES-256-GCM with a fresh random nonce.

    Args:
        plaintext: Data to encrypt (may be empty)
        key: 32-byte AES-256 encryption key

    Returns:
        EncryptedData with nonce, ciphertext and detached tag

    Raises:
        ValueError: If key is not 32 bytes
        EncryptionError: If encryption fails

    Security notes:
        - Nonce comes from os.urandom for every call, never from content
        - No associated data is bound
    """
    if len(key) != KEY_SIZE:
        raise ValueError(f"Encryption key must be {KEY_SIZE} bytes, got {len(key)}")

    nonce = os.urandom(NONCE_SIZE)
    try:
        sealed = AESGCM(key).encrypt(nonce, plaintext, associated_data=None)
    except Exception as e:
        logger.error("encryption_failed", error_type=type(e).__name__)
        raise EncryptionError("Failed to encrypt data") from e

    # AESGCM appends the tag to the ciphertext
    return EncryptedData(nonce=nonce, ciphertext=sealed[:-TAG_SIZE], tag=sealed[-TAG_SIZE:])


def decrypt_with_key(encrypted_data: EncryptedData, key: bytes) -> bytes:
    """Decrypt and authenticate AES-256-GCM data.

    Args:
        encrypted_data: EncryptedData with nonce, ciphertext and tag
        key: 32-byte AES-256 key (same as encryption key)

    Returns:
        Decrypted plaintext bytes

    Raises:
        ValueError: If key is not 32 bytes
        ValidationError: If nonce or tag have the wrong length
        AuthenticationFailure: If the tag does not verify
    """
    if len(key) != KEY_SIZE:
        raise ValueError(f"Decryption key must be {KEY_SIZE} bytes, got {len(key)}")

    if len(encrypted_data.nonce) != NONCE_SIZE:
        raise ValidationError()

    if len(encrypted_data.tag) != TAG_SIZE:
        raise ValidationError()

    try:
        return AESGCM(key).decrypt(
            encrypted_data.nonce,
            encrypted_data.ciphertext + encrypted_data.tag,
            associated_data=None,
        )
    except InvalidTag as e:
        # Don't expose detailed error messages for security
        raise AuthenticationFailure() from e
