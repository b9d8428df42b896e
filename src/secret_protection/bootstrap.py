"""Construction of the secret protection services.

Services are built explicitly from a Settings instance and passed to
their callers; there is no module-level key cache.
"""

from dataclasses import dataclass

from secret_protection.config import Settings
from secret_protection.domain.opaque_token import OpaqueTokenCodec
from secret_protection.domain.public_id import PublicIdCodec
from secret_protection.domain.vault import SecretVault
from secret_protection.infrastructure.key_provider import KeyProvider
from secret_protection.logging_config import configure_from_settings


@dataclass(frozen=True)
class SecretServices:
    """Wired set of services sharing one key provider."""

    keys: KeyProvider
    tokens: OpaqueTokenCodec
    public_ids: PublicIdCodec
    vault: SecretVault


def build_services(settings: Settings, validate: bool = False) -> SecretServices:
    """Build the service set from settings.

    Args:
        settings: Application settings with key domain secrets
        validate: If True, resolve every key domain now so a missing
            secret fails at startup rather than on first request

    Raises:
        ConfigurationError: If validate is True and a secret is missing
    """
    keys = KeyProvider.from_settings(settings)
    if validate:
        keys.validate()

    tokens = OpaqueTokenCodec(keys)
    return SecretServices(
        keys=keys,
        tokens=tokens,
        public_ids=PublicIdCodec(tokens),
        vault=SecretVault(tokens),
    )


def startup(settings: Settings) -> SecretServices:
    """Application startup: configure logging and build validated services.

    Raises:
        ConfigurationError: If any key domain secret is missing
    """
    configure_from_settings(settings)
    return build_services(settings, validate=True)
