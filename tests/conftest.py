"""Pytest configuration and shared fixtures for all tests.

Each test gets its own secrets, so keys never leak between tests and
key-isolation checks use genuinely different keys.
"""

import uuid

import pytest

from secret_protection.domain.keys import KeyDomain
from secret_protection.domain.opaque_token import OpaqueTokenCodec
from secret_protection.domain.public_id import PublicIdCodec
from secret_protection.domain.vault import SecretVault
from secret_protection.infrastructure.key_provider import DOMAIN_ENV_NAMES, KeyProvider

# A valid CBU: block A "2850590" + check 9, block B "1234567890123" + check 3
VALID_CBU = "2850590912345678901233"


@pytest.fixture(autouse=True)
def scrub_secret_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Remove key domain variables so tests never see a developer's real secrets."""
    for names in DOMAIN_ENV_NAMES.values():
        for name in names:
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def domain_secrets() -> dict[KeyDomain, str]:
    """Distinct random secret per key domain."""
    return {domain: f"test-{domain.value}-{uuid.uuid4()}" for domain in KeyDomain}


@pytest.fixture
def key_provider(domain_secrets: dict[KeyDomain, str]) -> KeyProvider:
    return KeyProvider(domain_secrets)


@pytest.fixture
def token_codec(key_provider: KeyProvider) -> OpaqueTokenCodec:
    return OpaqueTokenCodec(key_provider)


@pytest.fixture
def public_id_codec(token_codec: OpaqueTokenCodec) -> PublicIdCodec:
    return PublicIdCodec(token_codec)


@pytest.fixture
def vault(token_codec: OpaqueTokenCodec) -> SecretVault:
    return SecretVault(token_codec)


@pytest.fixture
def valid_cbu() -> str:
    return VALID_CBU
