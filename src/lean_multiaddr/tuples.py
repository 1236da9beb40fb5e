"""
Tuple views over the binary form.

A tuple is `(code, value)`: the protocol code and the raw value bytes with
any length prefix stripped. Flags carry `b""`. Order is significant:
reordering tuples changes the address.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TypeAlias

from .codec import encode_component, iter_tuples
from .exceptions import InvalidValueError
from .protocols import by_code

Tuple: TypeAlias = tuple[int, bytes]
"""One component: protocol code and raw value bytes."""

StringTuple: TypeAlias = tuple[int, str | int | None]
"""One component with its value rendered (None for flags)."""


def to_tuples(data: bytes) -> list[Tuple]:
    """
    Decompose canonical bytes into ordered `(code, value)` tuples.

    Raises:
        InvalidAddressError: If the bytes are structurally invalid.
    """
    return [(proto.code, value) for proto, value in iter_tuples(data)]


def to_string_tuples(tuples: Iterable[Tuple]) -> list[StringTuple]:
    """
    Render each tuple's value.

    Ports become `int`, other values `str`, flags `None`.

    Raises:
        UnknownProtocolError: If a tuple's code is not in the registry.
        InvalidValueError: If a value cannot be rendered.
    """
    result: list[StringTuple] = []
    for code, value in tuples:
        proto = by_code(code)
        result.append((code, proto.to_display(value) if proto.has_value else None))
    return result


def from_tuples(tuples: Iterable[Tuple]) -> bytes:
    """
    Recompose tuples into canonical bytes.

    Inverse of `to_tuples`: `from_tuples(to_tuples(a)) == a` for every valid
    address `a`.

    Raises:
        UnknownProtocolError: If a tuple's code is not in the registry.
        InvalidValueError: If a value's length does not fit its protocol.
    """
    out = bytearray()
    for code, value in tuples:
        proto = by_code(code)
        value = bytes(value)

        if not proto.has_value and value:
            raise InvalidValueError(proto.name, value, "protocol takes no value")
        if proto.byte_size and len(value) != proto.byte_size:
            raise InvalidValueError(
                proto.name, value, f"expected {proto.byte_size} bytes, got {len(value)}"
            )

        out += encode_component(proto, value)

    return bytes(out)
