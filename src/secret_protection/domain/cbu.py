"""CBU (Argentine interbank account code) checksum validation.

A CBU is 22 digits in two blocks, each ending in a check digit:

- block A: 7 payload digits + check digit (positions 0-7)
- block B: 13 payload digits + check digit (positions 8-21)

check digit = (10 - weighted_sum % 10) % 10. Only the checksum is
verified; the banking meaning of the digits is not interpreted.
"""

import re
from collections.abc import Sequence

from secret_protection.exceptions import ValidationError

CBU_LENGTH = 22
BLOCK_A_WEIGHTS = (7, 1, 3, 9, 7, 1, 3)
BLOCK_B_WEIGHTS = (3, 9, 7, 1, 3, 9, 7, 1, 3, 9, 7, 1, 3)

_CBU_RE = re.compile(r"^[0-9]{22}$")
_NON_DIGIT_RE = re.compile(r"[^0-9]")


def compute_check_digit(digits: str, weights: Sequence[int]) -> int:
    """Compute the check digit for a block of payload digits.

    Args:
        digits: ASCII digit string, same length as weights
        weights: Weight per position

    Returns:
        Check digit in 0..9

    Raises:
        ValueError: If digits and weights differ in length
    """
    if len(digits) != len(weights):
        raise ValueError(f"Expected {len(weights)} digits, got {len(digits)}")

    weighted_sum = sum(int(digit) * weight for digit, weight in zip(digits, weights))
    return (10 - weighted_sum % 10) % 10


def is_valid_cbu(code: str) -> bool:
    """Check that code is exactly 22 ASCII digits with both check digits correct.

    No normalization is applied; use normalize_cbu or validate_cbu for
    user-entered values with spaces or dashes.
    """
    if not isinstance(code, str) or not _CBU_RE.match(code):
        return False

    block_a, block_b = code[:8], code[8:]
    if compute_check_digit(block_a[:7], BLOCK_A_WEIGHTS) != int(block_a[7]):
        return False

    return compute_check_digit(block_b[:13], BLOCK_B_WEIGHTS) == int(block_b[13])


def normalize_cbu(value: str) -> str:
    """Strip every non-digit character."""
    return _NON_DIGIT_RE.sub("", value or "")


def validate_cbu(value: str) -> str:
    """Normalize a user-entered CBU and verify its checksums.

    Args:
        value: CBU possibly containing spaces or dashes

    Returns:
        The 22-digit normalized CBU

    Raises:
        ValidationError: If the normalized value is not a valid CBU
    """
    cbu = normalize_cbu(value)
    if not is_valid_cbu(cbu):
        raise ValidationError("Invalid CBU")
    return cbu


def cbu_last4(value: str) -> str:
    """Last four digits of the normalized CBU."""
    return normalize_cbu(value)[-4:]


def mask_cbu(value: str) -> str:
    """Display form that reveals only the last four digits."""
    return f"****{cbu_last4(value)}"
