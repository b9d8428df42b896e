"""Key provider backed by configured secrets.

Keys are derived once per domain and cached for the life of the
instance. The cache is a plain dict: derivation is a pure function of
the configured secret, so two threads racing on first access store the
same bytes and no lock is needed.

Security requirements:
- Key bytes are never logged, serialized or exposed outside resolve()
- A missing secret is a fatal ConfigurationError, never a default key
"""

from collections.abc import Iterable, Mapping

from secret_protection.config import Settings
from secret_protection.domain.keys import KeyDomain, IKeyProvider, coerce_domain, derive_key
from secret_protection.exceptions import ConfigurationError
from secret_protection.logging_config import get_logger

logger = get_logger(__name__)

# Environment variables read for each domain, in lookup order
DOMAIN_ENV_NAMES: dict[KeyDomain, tuple[str, ...]] = {
    KeyDomain.PUBLIC_ID: ("PUBLIC_ID_SECRET", "JWT_SECRET"),
    KeyDomain.BILLING_SECRET: ("BILLING_SECRETS_KEY", "BILLING_SECRETS_KEY_B64"),
    KeyDomain.TAX_AUTHORITY_SECRET: ("ARCA_SECRETS_KEY", "AFIP_SECRET_KEY"),
}


class KeyProvider(IKeyProvider):
    """Resolves and caches per-domain keys from configured secrets."""

    def __init__(
        self,
        secrets: Mapping[KeyDomain | str, str | None],
        env_names: Mapping[KeyDomain, tuple[str, ...]] | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            secrets: Secret string per key domain. Missing or blank entries
                are reported when the domain is first resolved.
            env_names: Variable names shown in ConfigurationError messages.
                Defaults to DOMAIN_ENV_NAMES.
        """
        self._secrets = {coerce_domain(domain): secret for domain, secret in secrets.items()}
        self._env_names = dict(env_names if env_names is not None else DOMAIN_ENV_NAMES)
        self._cache: dict[KeyDomain, bytes] = {}

    @classmethod
    def from_settings(cls, settings: Settings) -> "KeyProvider":
        """Build a provider from application settings."""
        return cls(
            {
                KeyDomain.PUBLIC_ID: settings.public_id_secret,
                KeyDomain.BILLING_SECRET: settings.billing_secrets_key,
                KeyDomain.TAX_AUTHORITY_SECRET: settings.tax_authority_secrets_key,
            }
        )

    def resolve(self, domain: KeyDomain | str) -> bytes:
        """Return the 32-byte key for a domain, deriving it on first use.

        Args:
            domain: Key domain or its string value

        Returns:
            32-byte AES-256 key

        Raises:
            ConfigurationError: If the domain is unknown or its secret is
                missing or blank
        """
        key_domain = coerce_domain(domain)

        key = self._cache.get(key_domain)
        if key is not None:
            return key

        secret = self._secrets.get(key_domain)
        if not secret or not secret.strip():
            names = " or ".join(self._env_names.get(key_domain, ())) or "a secret"
            logger.error("key_secret_missing", key_domain=key_domain.value, env=names)
            raise ConfigurationError(
                f"No secret configured for key domain '{key_domain.value}'. Set {names}."
            )

        key = derive_key(secret)
        self._cache[key_domain] = key
        logger.debug("key_derived", key_domain=key_domain.value)
        return key

    def validate(self, domains: Iterable[KeyDomain | str] | None = None) -> None:
        """Resolve each domain, failing fast on the first gap.

        Intended for application startup so that a misconfigured
        deployment fails before serving requests.

        Args:
            domains: Domains to check. Defaults to every KeyDomain.

        Raises:
            ConfigurationError: If any domain lacks a usable secret
        """
        for domain in domains if domains is not None else KeyDomain:
            self.resolve(domain)

    def cached_domains(self) -> frozenset[KeyDomain]:
        """Domains whose keys have already been derived."""
        return frozenset(self._cache)
