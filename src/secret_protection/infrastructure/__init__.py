"""Infrastructure layer exports."""

from secret_protection.infrastructure.key_provider import DOMAIN_ENV_NAMES, KeyProvider
from secret_protection.infrastructure.types import EncryptedText

__all__ = [
    "DOMAIN_ENV_NAMES",
    "KeyProvider",
    "EncryptedText",
]
