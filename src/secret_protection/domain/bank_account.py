"""Storage form of a bank account code.

A CBU is persisted as three values: the vault token (for the few flows
that need the real number, e.g. building a direct debit file), the
last four digits (for display), and a digest (for duplicate detection
without decrypting).
"""

from dataclasses import dataclass

from secret_protection.domain.cbu import cbu_last4, mask_cbu, validate_cbu
from secret_protection.domain.hashing import hash_cbu
from secret_protection.domain.keys import KeyDomain
from secret_protection.domain.vault import SecretVault


@dataclass(frozen=True)
class ProtectedCbu:
    """Non-reversible and encrypted views of a validated CBU.

    Attributes:
        encrypted: Vault token under the billing-secret domain
        last4: Last four digits
        hash: SHA-256 hex digest of the normalized CBU
    """

    encrypted: str
    last4: str
    hash: str

    @property
    def masked(self) -> str:
        return mask_cbu(self.last4)

    def to_dict(self) -> dict[str, str]:
        """Column values for persistence."""
        return {
            "cbu_encrypted": self.encrypted,
            "cbu_last4": self.last4,
            "cbu_hash": self.hash,
        }


def protect_cbu(vault: SecretVault, value: str) -> ProtectedCbu:
    """Validate a CBU and build its storage form.

    Args:
        vault: Vault used to encrypt the normalized CBU
        value: User-entered CBU

    Returns:
        ProtectedCbu ready for persistence

    Raises:
        ValidationError: If the CBU is invalid
        ConfigurationError: If the billing-secret key is not configured
    """
    cbu = validate_cbu(value)
    return ProtectedCbu(
        encrypted=vault.encrypt(KeyDomain.BILLING_SECRET, cbu),
        last4=cbu_last4(cbu),
        hash=hash_cbu(cbu),
    )
