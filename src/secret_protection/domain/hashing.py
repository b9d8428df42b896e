"""Deterministic fingerprints of sensitive values.

The digest is unkeyed and unsalted: it only has to give the same answer
for the same input in every process, for equality lookups and
deduplication. Confidentiality is the vault's job.
"""

import hashlib

from secret_protection.domain.cbu import normalize_cbu


def digest(value: str) -> str:
    """SHA-256 of the UTF-8 bytes of value, as 64 lowercase hex characters."""
    return hashlib.sha256(value.encode("utf-8")).hexdigest()


def hash_cbu(value: str) -> str:
    """Digest of a CBU after stripping formatting characters."""
    return digest(normalize_cbu(value))
