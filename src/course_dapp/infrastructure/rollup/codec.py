"""Hex/JSON encoding of rollup payloads."""

import json
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

HEX_PREFIX = "0x"


def hex_to_str(value: str) -> str:
    """
    Decode a 0x-prefixed hex string into UTF-8 text.

    Raises:
        ValueError: If value is not valid hex or not valid UTF-8
    """
    digits = value[2:] if value[:2].lower() == HEX_PREFIX else value
    return bytes.fromhex(digits).decode("utf-8")


def str_to_hex(text: str) -> str:
    """Encode UTF-8 text as a 0x-prefixed hex string."""
    return HEX_PREFIX + text.encode("utf-8").hex()


def to_jsonable(value: Any) -> Any:
    """Convert schemas (and containers of schemas) into plain JSON values."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_none=True)
    if isinstance(value, Mapping):
        return {str(key): to_jsonable(item) for key, item in value.items()}
    if isinstance(value, list | tuple):
        return [to_jsonable(item) for item in value]
    return value


def encode_payload(value: Any) -> str:
    """Serialize a value to compact JSON and hex encode it."""
    return str_to_hex(json.dumps(to_jsonable(value), separators=(",", ":"), ensure_ascii=False))


def decode_json_payload(value: str) -> Any:
    """
    Decode a hex encoded JSON payload.

    Raises:
        ValueError: If the payload is not hex, UTF-8 or JSON
    """
    return json.loads(hex_to_str(value))
