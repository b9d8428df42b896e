"""Versioned opaque token codec.

Wire format (ASCII, URL- and cookie-safe)::

    v1.<nonce>.<ciphertext>.<tag>

Each of the last three segments is base64url without padding. The
version literal pins the algorithm: AES-256-GCM, 96-bit random nonce,
128-bit tag. A new algorithm gets a new literal; unknown literals are
rejected, never guessed at.
"""

import base64
import binascii
import re
from dataclasses import dataclass

from secret_protection.domain.encryption import (
    EncryptedData,
    decrypt_with_key,
    encrypt_with_key,
)
from secret_protection.domain.keys import IKeyProvider, KeyDomain
from secret_protection.exceptions import DecodeFailure, ValidationError
from secret_protection.logging_config import get_logger

logger = get_logger(__name__)

TOKEN_VERSION = "v1"
SEGMENT_SEPARATOR = "."

_BASE64URL_RE = re.compile(r"[A-Za-z0-9_-]*")


def b64url_encode(data: bytes) -> str:
    """Encode bytes as base64url without padding."""
    return base64.urlsafe_b64encode(data).rstrip(b"=").decode("ascii")


def b64url_decode(value: str) -> bytes:
    """Decode unpadded base64url.

    Raises:
        ValidationError: If value contains characters outside the
            base64url alphabet or has an impossible length
    """
    if not _BASE64URL_RE.fullmatch(value):
        raise ValidationError()
    try:
        return base64.urlsafe_b64decode(value + "=" * (-len(value) % 4))
    except (binascii.Error, ValueError) as e:
        raise ValidationError() from e


@dataclass(frozen=True)
class OpaqueToken:
    """Parsed form of a serialized token.

    Attributes:
        version: Format literal (only TOKEN_VERSION is accepted)
        nonce: 12-byte AES-GCM nonce
        ciphertext: Encrypted payload
        tag: 16-byte authentication tag
    """

    version: str
    nonce: bytes
    ciphertext: bytes
    tag: bytes

    def serialize(self) -> str:
        """Render the token as dot-separated text."""
        return SEGMENT_SEPARATOR.join(
            [
                self.version,
                b64url_encode(self.nonce),
                b64url_encode(self.ciphertext),
                b64url_encode(self.tag),
            ]
        )

    @classmethod
    def parse(cls, text: str) -> "OpaqueToken":
        """Parse serialized token text.

        Args:
            text: Token string

        Returns:
            OpaqueToken with decoded segments

        Raises:
            ValidationError: On wrong segment count, unknown version or
                bad base64url content
        """
        if not isinstance(text, str) or not text:
            raise ValidationError()

        parts = text.split(SEGMENT_SEPARATOR)
        if len(parts) != 4 or parts[0] != TOKEN_VERSION:
            raise ValidationError()

        return cls(
            version=parts[0],
            nonce=b64url_decode(parts[1]),
            ciphertext=b64url_decode(parts[2]),
            tag=b64url_decode(parts[3]),
        )

    def to_encrypted_data(self) -> EncryptedData:
        return EncryptedData(nonce=self.nonce, ciphertext=self.ciphertext, tag=self.tag)


class OpaqueTokenCodec:
    """Seals arbitrary bytes into opaque tokens under a key domain.

    Decoding fails closed: malformed input, unknown versions and
    authentication failures are indistinguishable to the caller.
    """

    def __init__(self, key_provider: IKeyProvider) -> None:
        self._keys = key_provider

    def encode(self, domain: KeyDomain | str, payload: bytes) -> str:
        """Encrypt a payload into a token string.

        Args:
            domain: Key domain whose key seals the payload
            payload: Bytes to protect

        Returns:
            Serialized token

        Raises:
            ConfigurationError: If the domain has no configured secret
            EncryptionError: If encryption fails
        """
        key = self._keys.resolve(domain)
        encrypted = encrypt_with_key(payload, key)
        token = OpaqueToken(
            version=TOKEN_VERSION,
            nonce=encrypted.nonce,
            ciphertext=encrypted.ciphertext,
            tag=encrypted.tag,
        )
        return token.serialize()

    def decode_or_raise(self, domain: KeyDomain | str, token: str) -> bytes:
        """Decrypt a token, raising on any decode failure.

        Raises:
            ConfigurationError: If the domain has no configured secret
            DecodeFailure: If the token is malformed, has an unknown
                version, or fails authentication
        """
        # Resolve first so a missing secret is never masked as bad input
        key = self._keys.resolve(domain)
        try:
            parsed = OpaqueToken.parse(token)
            return decrypt_with_key(parsed.to_encrypted_data(), key)
        except DecodeFailure as e:
            logger.debug(
                "token_decode_failed",
                key_domain=KeyDomain(domain).value,
                reason=type(e).__name__,
            )
            raise

    def decode(self, domain: KeyDomain | str, token: str) -> bytes | None:
        """Decrypt a token, returning None on any decode failure.

        Raises:
            ConfigurationError: If the domain has no configured secret
        """
        try:
            return self.decode_or_raise(domain, token)
        except DecodeFailure:
            return None
