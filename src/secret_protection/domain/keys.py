"""Key domains and key derivation.

A key domain is a named namespace that isolates one category of secret
from another. Each domain has its own 32-byte AES-256 key, derived from
an operator-supplied secret string.
"""

import hashlib
from abc import ABC, abstractmethod
from enum import Enum

from secret_protection.exceptions import ConfigurationError

KEY_SIZE = 32


class KeyDomain(str, Enum):
    """Closed set of key domains."""

    PUBLIC_ID = "public-id"
    BILLING_SECRET = "billing-secret"
    TAX_AUTHORITY_SECRET = "tax-authority-secret"


def derive_key(secret: str) -> bytes:
    """Derive a 32-byte key from a configured secret string.

    SHA-256 over the UTF-8 bytes of the secret, so any non-empty string
    yields a valid AES-256 key regardless of its length or encoding.

    Args:
        secret: Operator-supplied secret string

    Returns:
        32-byte key

    Raises:
        ValueError: If secret is empty
    """
    if not secret:
        raise ValueError("secret cannot be empty")
    return hashlib.sha256(secret.encode("utf-8")).digest()


def coerce_domain(domain: KeyDomain | str) -> KeyDomain:
    """Resolve a domain given by enum member or string value.

    Raises:
        ConfigurationError: If domain is not one of the known key domains
    """
    try:
        return KeyDomain(domain)
    except ValueError:
        raise ConfigurationError(f"Unknown key domain: {domain!r}") from None


class IKeyProvider(ABC):
    """Interface for resolving key material per key domain."""

    @abstractmethod
    def resolve(self, domain: KeyDomain | str) -> bytes:
        """Return the 32-byte key for a domain.

        Raises:
            ConfigurationError: If the domain has no usable secret
        """
