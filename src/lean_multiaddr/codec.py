"""
Conversion between the string and binary forms of a multiaddr.

Binary form: a concatenation of components, each laid out as::

    [varint code][varint length]?[value]

The length prefix is present only for variable-size protocols. Fixed-size
values take exactly the protocol's byte width, flags take nothing.

String form: `/name/value` per component, `/name` for flags. Path
protocols (e.g. unix) take everything after their name as the value.
"""

from __future__ import annotations

from collections.abc import Iterator

from .constants import SEPARATOR
from .exceptions import (
    InvalidAddressError,
    InvalidFormatError,
    UnknownProtocolError,
)
from .protocols import ProtocolDescriptor, by_code, by_name
from .varint import VarintError, decode_varint, encode_varint

__all__ = [
    "buffer_to_string",
    "encode_component",
    "from_buffer",
    "from_string",
    "iter_tuples",
    "size_for_addr",
]


def encode_component(proto: ProtocolDescriptor, value: bytes) -> bytes:
    """
    Lay out one component in canonical binary form.

    The caller guarantees `value` already has the protocol's fixed width,
    or is empty for flags.
    """
    if proto.is_variable:
        return proto.vcode + encode_varint(len(value)) + value
    return proto.vcode + value


def from_string(string: str) -> bytes:
    """
    Parse a multiaddr string into canonical bytes.

    Args:
        string: A string such as "/ip4/127.0.0.1/tcp/4001". The empty string
            is the empty address.

    Returns:
        Canonical binary form.

    Raises:
        InvalidFormatError: Missing leading '/', empty protocol segment, or
            a protocol missing its value.
        UnknownProtocolError: A protocol name is not in the registry.
        InvalidValueError: A value segment is malformed for its protocol.
    """
    if not string:
        return b""
    if not string.startswith(SEPARATOR):
        raise InvalidFormatError(string, "must begin with '/'")

    # Split "/ip4/1.2.3.4/tcp/80" into ["ip4", "1.2.3.4", "tcp", "80"].
    #
    # A single trailing slash is allowed and dropped.
    body = string[1:]
    if body.endswith(SEPARATOR):
        body = body[:-1]
    parts = body.split(SEPARATOR) if body else []

    out = bytearray()
    i = 0
    while i < len(parts):
        name = parts[i]
        i += 1
        if not name:
            raise InvalidFormatError(string, "empty protocol name")

        proto = by_name(name)

        if not proto.has_value:
            out += encode_component(proto, b"")
            continue

        if i >= len(parts):
            raise InvalidFormatError(string, f"protocol {name!r} is missing its value")

        # Path values keep their slashes, so they take the rest of the string.
        if proto.path:
            value = SEPARATOR + SEPARATOR.join(parts[i:])
            i = len(parts)
        else:
            value = parts[i]
            i += 1

        out += encode_component(proto, proto.to_bytes(value))

    return bytes(out)


def size_for_addr(proto: ProtocolDescriptor, remaining: bytes) -> int:
    """
    Number of bytes a component's value occupies after its code.

    Args:
        proto: Protocol of the component.
        remaining: Bytes following the protocol code.

    Returns:
        For fixed-size protocols, the value width. For flags, 0. For
        variable-size protocols, the length-prefix width plus the payload
        length, so the walker can skip both at once.

    Raises:
        InvalidAddressError: Malformed length prefix, or a declared length
            longer than the remaining bytes.
    """
    if not proto.is_variable:
        return proto.byte_size

    try:
        length, prefix_width = decode_varint(remaining)
    except VarintError as exc:
        raise InvalidAddressError(f"bad length prefix for {proto.name}: {exc}") from exc

    size = prefix_width + length
    if size > len(remaining):
        raise InvalidAddressError(
            f"{proto.name} declares {length} bytes, only {len(remaining) - prefix_width} remain"
        )
    return size


def iter_tuples(data: bytes) -> Iterator[tuple[ProtocolDescriptor, bytes]]:
    """
    Walk the binary form, yielding each component's protocol and raw value.

    Raises:
        InvalidAddressError: Unknown code, malformed varint, or a value that
            runs past the end of the input.
    """
    offset = 0
    while offset < len(data):
        try:
            code, code_width = decode_varint(data, offset)
        except VarintError as exc:
            raise InvalidAddressError(f"bad protocol code: {exc}", offset=offset) from exc

        try:
            proto = by_code(code)
        except UnknownProtocolError as exc:
            raise InvalidAddressError(exc.message, offset=offset) from exc

        start = offset + code_width
        try:
            size = size_for_addr(proto, data[start:])
        except InvalidAddressError as exc:
            raise InvalidAddressError(exc.detail, offset=start) from exc

        end = start + size
        if end > len(data):
            raise InvalidAddressError(
                f"{proto.name} needs {size} bytes, only {len(data) - start} remain",
                offset=start,
            )

        # Strip the length prefix so callers always see the bare value.
        value = data[start:end]
        if proto.is_variable:
            _, prefix_width = decode_varint(value)
            value = value[prefix_width:]

        yield proto, value
        offset = end


def from_buffer(data: bytes | bytearray | memoryview) -> bytes:
    """
    Validate binary input and return an owned, immutable copy.

    Raises:
        TypeError: If `data` is not a bytes-like object.
        InvalidAddressError: If the bytes do not form whole, known components.
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeError(f"expected bytes-like object, got {type(data).__name__}")

    owned = bytes(data)
    for _ in iter_tuples(owned):
        pass
    return owned


def buffer_to_string(data: bytes) -> str:
    """
    Render canonical bytes as a multiaddr string.

    Raises:
        InvalidAddressError: If the bytes are structurally invalid.
        InvalidValueError: If a stored value cannot be rendered.
    """
    parts: list[str] = []
    for proto, value in iter_tuples(data):
        parts.append(proto.name)
        if proto.has_value:
            rendered = str(proto.to_display(value))
            # Path values carry their own leading slash.
            parts.append(rendered[1:] if proto.path else rendered)

    return "".join(SEPARATOR + part for part in parts)
