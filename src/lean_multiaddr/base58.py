"""Base58 (Bitcoin alphabet) for rendering peer identifiers."""

from __future__ import annotations

from typing import Final

ALPHABET: Final = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
"""Base58 alphabet (excludes 0, O, I, l)."""

_INDEX: Final = {char: index for index, char in enumerate(ALPHABET)}


def b58encode(data: bytes) -> str:
    """
    Encode bytes as a Base58 string.

    Leading zero bytes become leading '1' characters.
    """
    leading_zeros = len(data) - len(data.lstrip(b"\x00"))

    num = int.from_bytes(data, "big")
    result: list[str] = []
    while num > 0:
        num, remainder = divmod(num, 58)
        result.append(ALPHABET[remainder])

    result.extend([ALPHABET[0]] * leading_zeros)
    return "".join(reversed(result))


def b58decode(s: str) -> bytes:
    """
    Decode a Base58 string to bytes.

    Leading '1' characters become leading zero bytes.

    Raises:
        ValueError: If the string contains a character outside the alphabet.
    """
    leading_ones = len(s) - len(s.lstrip(ALPHABET[0]))

    num = 0
    for char in s:
        index = _INDEX.get(char)
        if index is None:
            raise ValueError(f"Invalid Base58 character: {char!r}")
        num = num * 58 + index

    body = num.to_bytes((num.bit_length() + 7) // 8, "big") if num else b""
    return b"\x00" * leading_ones + body
