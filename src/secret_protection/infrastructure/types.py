"""SQLAlchemy column type for vault-encrypted text.

Only the token ever reaches the database; the ORM attribute holds the
plaintext. A stored value that fails to decrypt raises DecodeFailure on
load instead of reading as None.
"""

from typing import Any

from sqlalchemy import Text
from sqlalchemy.engine import Dialect
from sqlalchemy.types import TypeDecorator

from secret_protection.domain.keys import KeyDomain, coerce_domain
from secret_protection.domain.vault import SecretVault


class EncryptedText(TypeDecorator):
    """Text column whose values are sealed by a SecretVault.

    Example:
        cbu_encrypted: Mapped[str] = mapped_column(
            EncryptedText(vault, KeyDomain.BILLING_SECRET), nullable=False
        )
    """

    impl = Text
    cache_ok = True

    def __init__(self, vault: SecretVault, domain: KeyDomain | str, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.vault = vault
        self.domain = coerce_domain(domain)

    def process_bind_param(self, value: str | None, dialect: Dialect) -> str | None:
        if value is None:
            return None
        return self.vault.encrypt(self.domain, value)

    def process_result_value(self, value: str | None, dialect: Dialect) -> str | None:
        if value is None:
            return None
        return self.vault.decrypt_or_raise(self.domain, value)
