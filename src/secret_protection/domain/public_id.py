"""Opaque public identifiers.

Public ids let the system expose records in URLs and APIs without
revealing agency-scoped sequence numbers or allowing cross-agency
enumeration. A public id decodes server-side to the exact
{type, agency id, local id} triple.
"""

import json
from dataclasses import dataclass
from enum import Enum

from secret_protection.domain.keys import KeyDomain
from secret_protection.domain.opaque_token import OpaqueTokenCodec
from secret_protection.logging_config import get_logger

logger = get_logger(__name__)


class PublicIdType(str, Enum):
    """Closed set of record kinds that can be given a public id."""

    BOOKING = "booking"
    QUOTE = "quote"
    RECEIPT = "receipt"
    INVOICE = "invoice"
    CREDIT_NOTE = "credit_note"
    RESOURCE = "resource"
    FILE = "file"


def _is_int(value: object) -> bool:
    # bool is an int subclass; JSON true/false must not pass as ids
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class PublicIdPayload:
    """Logical content of a public id.

    Attributes:
        type: Record kind
        agency_id: Owning agency
        local_id: Agency-scoped record number
    """

    type: PublicIdType
    agency_id: int
    local_id: int

    def __post_init__(self):
        """Validate payload fields."""
        if not isinstance(self.type, PublicIdType):
            raise ValueError(f"type must be a PublicIdType, got {self.type!r}")

        if not _is_int(self.agency_id) or self.agency_id < 0:
            raise ValueError("agency_id must be a non-negative integer")

        if not _is_int(self.local_id) or self.local_id < 0:
            raise ValueError("local_id must be a non-negative integer")

    def to_bytes(self) -> bytes:
        """Serialize to compact JSON with short keys: {"t", "a", "i"}."""
        return json.dumps(
            {"t": self.type.value, "a": self.agency_id, "i": self.local_id},
            separators=(",", ":"),
        ).encode("utf-8")

    @classmethod
    def from_bytes(cls, data: bytes) -> "PublicIdPayload":
        """Deserialize the compact JSON form.

        Raises:
            ValueError: If the data is not a well-formed payload
        """
        try:
            parsed = json.loads(data.decode("utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError) as e:
            raise ValueError(f"Invalid public id payload: {e}") from e

        if not isinstance(parsed, dict):
            raise ValueError("Public id payload must be an object")

        type_value, agency_id, local_id = parsed.get("t"), parsed.get("a"), parsed.get("i")
        if not isinstance(type_value, str) or not _is_int(agency_id) or not _is_int(local_id):
            raise ValueError("Public id payload has missing or mistyped fields")

        return cls(type=PublicIdType(type_value), agency_id=agency_id, local_id=local_id)


class PublicIdCodec:
    """Encodes PublicIdPayload values as opaque tokens under the public-id key."""

    def __init__(self, codec: OpaqueTokenCodec) -> None:
        self._codec = codec

    def encode(self, payload: PublicIdPayload) -> str:
        """Encode a payload into a public id.

        Raises:
            ConfigurationError: If the public-id secret is not configured
        """
        return self._codec.encode(KeyDomain.PUBLIC_ID, payload.to_bytes())

    def decode(
        self,
        token: str,
        expected_type: PublicIdType | None = None,
    ) -> PublicIdPayload | None:
        """Decode a public id.

        Every failure collapses to None so HTTP callers can answer with a
        plain "not found": bad token, tampering, bad JSON, wrong shape,
        unknown type, or a type other than expected_type.

        Args:
            token: Public id from a path or query parameter
            expected_type: If given, reject ids of any other type

        Returns:
            The decoded payload, or None

        Raises:
            ConfigurationError: If the public-id secret is not configured
        """
        if not token:
            return None

        data = self._codec.decode(KeyDomain.PUBLIC_ID, token)
        if data is None:
            return None

        try:
            payload = PublicIdPayload.from_bytes(data)
        except ValueError:
            logger.debug("public_id_payload_rejected")
            return None

        if expected_type is not None and payload.type != expected_type:
            logger.debug("public_id_type_mismatch", expected=expected_type.value)
            return None

        return payload
