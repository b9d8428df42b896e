"""Unit tests for public identifier encoding."""

import json

import pytest

from secret_protection.domain.keys import KeyDomain
from secret_protection.domain.opaque_token import OpaqueTokenCodec
from secret_protection.domain.public_id import PublicIdCodec, PublicIdPayload, PublicIdType


class TestPublicIdPayload:
    """Tests for payload validation and serialization."""

    def test_to_bytes_uses_short_keys(self) -> None:
        """Test that the payload serializes to compact JSON."""
        payload = PublicIdPayload(type=PublicIdType.BOOKING, agency_id=7, local_id=1234)

        assert payload.to_bytes() == b'{"t":"booking","a":7,"i":1234}'

    def test_from_bytes_parses_compact_json(self) -> None:
        """Test that compact JSON parses into a payload."""
        payload = PublicIdPayload.from_bytes(b'{"t":"credit_note","a":3,"i":99}')

        assert payload == PublicIdPayload(type=PublicIdType.CREDIT_NOTE, agency_id=3, local_id=99)

    @pytest.mark.parametrize(
        "data",
        [
            b"not json",
            b"\xff\xfe",
            b"[1, 2, 3]",
            b'{"t":"booking","a":1}',
            b'{"t":"booking","a":"1","i":2}',
            b'{"t":"booking","a":1.5,"i":2}',
            b'{"t":"booking","a":true,"i":2}',
            b'{"t":"payroll","a":1,"i":2}',
            b'{"t":"booking","a":-1,"i":2}',
            b'{"t":7,"a":1,"i":2}',
        ],
    )
    def test_from_bytes_rejects_bad_shapes(self, data: bytes) -> None:
        """Test that malformed payloads raise ValueError."""
        with pytest.raises(ValueError):
            PublicIdPayload.from_bytes(data)

    def test_type_must_be_enum(self) -> None:
        """Test that a plain string type is rejected."""
        with pytest.raises(ValueError, match="type must be a PublicIdType"):
            PublicIdPayload(type="booking", agency_id=1, local_id=1)  # type: ignore[arg-type]

    def test_ids_must_be_non_negative_integers(self) -> None:
        """Test that negative or boolean ids are rejected."""
        with pytest.raises(ValueError, match="agency_id"):
            PublicIdPayload(type=PublicIdType.FILE, agency_id=-1, local_id=1)
        with pytest.raises(ValueError, match="local_id"):
            PublicIdPayload(type=PublicIdType.FILE, agency_id=1, local_id=True)


class TestPublicIdCodec:
    """Tests for encoding and decoding public ids."""

    @pytest.mark.parametrize("id_type", list(PublicIdType))
    def test_roundtrip_every_type(self, public_id_codec: PublicIdCodec, id_type: PublicIdType) -> None:
        """Test that every record kind round-trips exactly."""
        payload = PublicIdPayload(type=id_type, agency_id=12, local_id=345)

        assert public_id_codec.decode(public_id_codec.encode(payload)) == payload

    def test_roundtrip_large_ids(self, public_id_codec: PublicIdCodec) -> None:
        """Test that large integers survive encoding."""
        payload = PublicIdPayload(type=PublicIdType.INVOICE, agency_id=2**40, local_id=2**53 + 1)

        assert public_id_codec.decode(public_id_codec.encode(payload)) == payload

    def test_token_hides_ids(self, public_id_codec: PublicIdCodec) -> None:
        """Test that the ids and type are not visible in the token."""
        token = public_id_codec.encode(
            PublicIdPayload(type=PublicIdType.RECEIPT, agency_id=424242, local_id=777777)
        )

        assert "424242" not in token
        assert "777777" not in token
        assert "receipt" not in token

    def test_expected_type_match(self, public_id_codec: PublicIdCodec) -> None:
        """Test that a matching expected type decodes."""
        payload = PublicIdPayload(type=PublicIdType.FILE, agency_id=1, local_id=2)
        token = public_id_codec.encode(payload)

        assert public_id_codec.decode(token, expected_type=PublicIdType.FILE) == payload

    def test_expected_type_mismatch_returns_none(self, public_id_codec: PublicIdCodec) -> None:
        """Test that a valid id of the wrong kind decodes to None."""
        token = public_id_codec.encode(PublicIdPayload(type=PublicIdType.FILE, agency_id=1, local_id=2))

        assert public_id_codec.decode(token, expected_type=PublicIdType.INVOICE) is None

    @pytest.mark.parametrize("token", ["", "abc", "v1.x.y.z", "v2.AAAA.AAAA.AAAA"])
    def test_bad_tokens_return_none(self, public_id_codec: PublicIdCodec, token: str) -> None:
        """Test that invalid tokens never raise."""
        assert public_id_codec.decode(token) is None

    def test_authentic_token_with_unknown_type_returns_none(
        self, public_id_codec: PublicIdCodec, token_codec: OpaqueTokenCodec
    ) -> None:
        """Test that a genuine token with an unknown type is rejected."""
        token = token_codec.encode(
            KeyDomain.PUBLIC_ID, json.dumps({"t": "payroll", "a": 1, "i": 2}).encode("utf-8")
        )

        assert public_id_codec.decode(token) is None

    def test_authentic_token_with_wrong_shape_returns_none(
        self, public_id_codec: PublicIdCodec, token_codec: OpaqueTokenCodec
    ) -> None:
        """Test that a genuine token with a non-payload body is rejected."""
        token = token_codec.encode(KeyDomain.PUBLIC_ID, b'{"t":"booking","a":"x","i":2}')

        assert public_id_codec.decode(token) is None

    def test_token_from_another_domain_returns_none(
        self, public_id_codec: PublicIdCodec, token_codec: OpaqueTokenCodec
    ) -> None:
        """Test that a billing token with a valid-looking body is rejected."""
        payload = PublicIdPayload(type=PublicIdType.BOOKING, agency_id=1, local_id=2)
        token = token_codec.encode(KeyDomain.BILLING_SECRET, payload.to_bytes())

        assert public_id_codec.decode(token) is None
