"""Secret vault for credentials stored at rest.

Bank account codes, tax authority passwords and certificate or private
key material are stored as opaque tokens, each category under its own
key domain so a leaked key in one domain cannot open the other.

Operational limitation: each domain has exactly one active key.
Rotating it means re-encrypting every stored value; there is no
fallback to a previous key on decrypt.
"""

from secret_protection.domain.keys import KeyDomain
from secret_protection.domain.opaque_token import OpaqueTokenCodec
from secret_protection.exceptions import ValidationError


class SecretVault:
    """Encrypts and decrypts sensitive strings per key domain."""

    def __init__(self, codec: OpaqueTokenCodec) -> None:
        self._codec = codec

    def encrypt(self, domain: KeyDomain | str, plaintext: str) -> str:
        """Encrypt a string for storage.

        Args:
            domain: Key domain (billing-secret, tax-authority-secret, ...)
            plaintext: Sensitive value; any string, including empty

        Returns:
            Token string for a text column

        Raises:
            ConfigurationError: If the domain has no configured secret
        """
        return self._codec.encode(domain, plaintext.encode("utf-8"))

    def decrypt_or_raise(self, domain: KeyDomain | str, token: str) -> str:
        """Decrypt a stored token back to the exact original string.

        Raises:
            ConfigurationError: If the domain has no configured secret
            DecodeFailure: If the token is malformed or fails authentication
        """
        data = self._codec.decode_or_raise(domain, token)
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise ValidationError() from e

    def decrypt(self, domain: KeyDomain | str, token: str) -> str | None:
        """Decrypt a stored token, returning None if it cannot be opened.

        Raises:
            ConfigurationError: If the domain has no configured secret
        """
        data = self._codec.decode(domain, token)
        if data is None:
            return None
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError:
            return None
