"""
Value transforms between the string and binary forms of a component.

Each value kind has a pair of functions:

- `*_to_bytes(str) -> bytes` parses the string segment.
- `*_to_display(bytes) -> str | int` renders stored bytes.

Both raise `ValueError` on malformed input. The registry wraps these
failures into `InvalidValueError` together with the protocol name.
"""

from __future__ import annotations

import ipaddress

from .base58 import b58decode, b58encode
from .constants import MAX_PORT
from .varint import VarintError, decode_varint


def _expect_length(data: bytes, length: int) -> None:
    if len(data) != length:
        raise ValueError(f"expected {length} bytes, got {len(data)}")


def ip4_to_bytes(value: str) -> bytes:
    """Parse a dotted-quad IPv4 literal into its 4 packed bytes."""
    return ipaddress.IPv4Address(value).packed


def ip4_to_display(data: bytes) -> str:
    """Render 4 packed bytes as a dotted quad."""
    _expect_length(data, 4)
    return str(ipaddress.IPv4Address(data))


def ip6_to_bytes(value: str) -> bytes:
    """Parse a colon-hex IPv6 literal into its 16 packed bytes."""
    # Zones travel in their own ip6zone component.
    if "%" in value:
        raise ValueError("scoped literal not allowed, use /ip6zone")
    return ipaddress.IPv6Address(value).packed


def ip6_to_display(data: bytes) -> str:
    """Render 16 packed bytes in compressed colon-hex form."""
    _expect_length(data, 16)
    return ipaddress.IPv6Address(data).compressed


def port_to_bytes(value: str) -> bytes:
    """Parse a decimal port number into 2 big-endian bytes."""
    if not (value.isascii() and value.isdigit()):
        raise ValueError("port must be a decimal integer")
    port = int(value)
    if port > MAX_PORT:
        raise ValueError(f"port out of range [0, {MAX_PORT}]")
    return port.to_bytes(2, "big")


def port_to_display(data: bytes) -> int:
    """Render 2 big-endian bytes as a port number."""
    _expect_length(data, 2)
    return int.from_bytes(data, "big")


def _check_text(value: str) -> None:
    if not value:
        raise ValueError("empty value")


def text_to_bytes(value: str) -> bytes:
    """Encode a single-segment text value (domain name, zone) as UTF-8."""
    _check_text(value)
    if "/" in value:
        raise ValueError("value may not contain '/'")
    return value.encode("utf-8")


def text_to_display(data: bytes) -> str:
    """Decode a single-segment UTF-8 text value."""
    value = data.decode("utf-8")
    _check_text(value)
    if "/" in value:
        raise ValueError("value may not contain '/'")
    return value


def _check_path(value: str) -> None:
    _check_text(value)
    if not value.startswith("/"):
        raise ValueError("path must be absolute")
    if value.endswith("/"):
        raise ValueError("path may not end with '/'")


def path_to_bytes(value: str) -> bytes:
    """Encode an absolute filesystem path."""
    _check_path(value)
    return value.encode("utf-8")


def path_to_display(data: bytes) -> str:
    """Decode an absolute filesystem path."""
    value = data.decode("utf-8")
    _check_path(value)
    return value


def _check_multihash(data: bytes) -> None:
    """Require `data` to be exactly one `code length digest` multihash."""
    try:
        _, code_width = decode_varint(data)
        length, length_width = decode_varint(data, code_width)
    except VarintError as exc:
        raise ValueError(f"malformed multihash header: {exc}") from exc

    if len(data) - code_width - length_width != length:
        raise ValueError(f"multihash digest length mismatch (declared {length})")


def p2p_to_bytes(value: str) -> bytes:
    """Decode a Base58 peer id into its multihash bytes."""
    data = b58decode(value)
    _check_multihash(data)
    return data


def p2p_to_display(data: bytes) -> str:
    """Render multihash bytes as a Base58 peer id."""
    _check_multihash(data)
    return b58encode(data)
