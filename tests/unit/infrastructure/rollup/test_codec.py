"""Tests for hex/JSON payload encoding."""

import pytest

from course_dapp.infrastructure.common.schemas.response_wrappers import (
    ActionResponse,
    ErrorResponse,
)
from course_dapp.infrastructure.identity.schemas.user_schemas import UserResponse
from course_dapp.infrastructure.rollup.codec import (
    decode_json_payload,
    encode_payload,
    hex_to_str,
    str_to_hex,
    to_jsonable,
)


class TestHexCodec:
    """Test suite for hex conversions."""

    def test_str_to_hex(self) -> None:
        assert str_to_hex("hi") == "0x6869"

    def test_hex_to_str(self) -> None:
        assert hex_to_str("0x6869") == "hi"

    def test_hex_to_str_without_prefix(self) -> None:
        assert hex_to_str("6869") == "hi"

    def test_utf8(self) -> None:
        assert hex_to_str(str_to_hex("café ✓")) == "café ✓"

    @pytest.mark.parametrize("value", ["0xzz", "0x123", "0xff"])
    def test_invalid_hex_raises(self, value: str) -> None:
        with pytest.raises(ValueError):
            hex_to_str(value)


class TestJsonPayloads:
    """Test suite for JSON payload encoding."""

    def test_encode_is_compact(self) -> None:
        assert hex_to_str(encode_payload({"a": [1, 2]})) == '{"a":[1,2]}'

    def test_encode_model_uses_aliases(self) -> None:
        response = ActionResponse[UserResponse](
            message="User retrieved!",
            data=UserResponse(id="u1", address="0xabc", created_at=1700000000000),
        )

        assert decode_json_payload(encode_payload(response)) == {
            "success": True,
            "message": "User retrieved!",
            "data": {"id": "u1", "address": "0xabc", "createdAt": 1700000000000},
        }

    def test_encode_drops_empty_fields(self) -> None:
        assert to_jsonable(ErrorResponse(error="boom")) == {"error": "boom"}
        assert to_jsonable(ActionResponse[None](message="ok")) == {
            "success": True,
            "message": "ok",
        }

    def test_encode_nested_models(self) -> None:
        assert to_jsonable({"errors": [ErrorResponse(error="a")]}) == {"errors": [{"error": "a"}]}

    def test_decode_invalid_json_raises(self) -> None:
        with pytest.raises(ValueError):
            decode_json_payload(str_to_hex("{not json"))
