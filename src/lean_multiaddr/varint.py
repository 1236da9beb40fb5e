"""
Unsigned varint encoding and decoding (multiformats flavour).

WHERE VARINTS APPEAR
--------------------
Every multiaddr component starts with a varint protocol code. Components
whose values have no fixed width (domain names, paths, peer ids) add a
second varint holding the value's byte length::

    /ip4/127.0.0.1/tcp/4001

    04 7f000001 06 0fa1
    ^^ code     ^^ code
       ^^^^^^^^    ^^^^ value (fixed width, no length prefix)

    /dns4/example.com

    36 0b 6578616d706c652e636f6d
    ^^ code
       ^^ length (11)
          ^^^^^^^^^^^^^^^^^^^^^^ value

Peer ids are multihashes, which use the same varints for their own
hash-function code and digest length.


ENCODING
--------
Values are split into 7-bit groups, least significant group first. Each
group fills one byte; the high bit (0x80) is set on every byte except the
last::

    300 = 0b1_0010_1100

    [1|0101100] [0|0000010]  ->  0xAC 0x02


CANONICAL FORM
--------------
The multiformats rules are stricter than plain LEB128:

- At most 9 bytes (63 payload bits).
- Minimal encoding only. A trailing 0x00 group (e.g. 0x80 0x00 for zero)
  is rejected, so each integer has exactly one valid encoding.

Without the second rule two different byte strings could decode to the
same address, breaking byte-level equality.

References:
    https://github.com/multiformats/unsigned-varint
"""

from __future__ import annotations

from .constants import MAX_VARINT_BYTES


class VarintError(Exception):
    """Raised when varint encoding or decoding fails."""


def encode_varint(value: int) -> bytes:
    """
    Encode an unsigned integer as a minimal varint.

    Args:
        value: Non-negative integer below 2^63.

    Returns:
        Varint-encoded bytes (1 to 9 bytes).

    Raises:
        ValueError: If value is negative or needs more than 9 bytes.
    """
    if value < 0:
        raise ValueError("Varint must be non-negative")
    if value >= 1 << (7 * MAX_VARINT_BYTES):
        raise ValueError(f"Varint exceeds {MAX_VARINT_BYTES} bytes: {value}")

    result = bytearray()

    # Emit low 7-bit groups with the continuation bit set.
    while value >= 0x80:
        result.append((value & 0x7F) | 0x80)
        value >>= 7

    # Final group: continuation bit clear.
    result.append(value)

    return bytes(result)


def decode_varint(data: bytes, offset: int = 0) -> tuple[int, int]:
    """
    Decode a varint from bytes at the given offset.

    Args:
        data: Input bytes containing the varint.
        offset: Starting position in data. Defaults to 0.

    Returns:
        Tuple of (decoded_value, bytes_consumed).

    Raises:
        VarintError: If the input is truncated, longer than 9 bytes, or
            not minimally encoded.
    """
    result = 0
    shift = 0
    pos = offset

    while True:
        if pos >= len(data):
            raise VarintError("Truncated varint")

        byte = data[pos]
        pos += 1

        result |= (byte & 0x7F) << shift
        shift += 7

        if not (byte & 0x80):
            break

        if pos - offset >= MAX_VARINT_BYTES:
            raise VarintError("Varint too long")

    # A zero final group after the first byte adds nothing: non-minimal.
    if byte == 0 and pos - offset > 1:
        raise VarintError("Varint not minimally encoded")

    return result, pos - offset
