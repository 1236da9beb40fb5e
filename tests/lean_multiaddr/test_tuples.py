"""Tests for tuple views over the binary form."""

from __future__ import annotations

import pytest

from lean_multiaddr import constants as c
from lean_multiaddr.codec import from_string
from lean_multiaddr.exceptions import (
    InvalidAddressError,
    InvalidValueError,
    UnknownProtocolError,
)
from lean_multiaddr.tuples import from_tuples, to_string_tuples, to_tuples


class TestToTuples:
    """Decomposition into (code, value) pairs."""

    def test_thin_waist(self) -> None:
        """Fixed-size values come back raw."""
        assert to_tuples(from_string("/ip4/127.0.0.1/tcp/4001")) == [
            (c.P_IP4, b"\x7f\x00\x00\x01"),
            (c.P_TCP, b"\x0f\xa1"),
        ]

    def test_variable_and_flag(self) -> None:
        """Length prefixes are stripped, flags carry empty bytes."""
        assert to_tuples(from_string("/dns6/example.com/udp/443/quic-v1")) == [
            (c.P_DNS6, b"example.com"),
            (c.P_UDP, b"\x01\xbb"),
            (c.P_QUIC_V1, b""),
        ]

    def test_empty(self) -> None:
        """The empty address has no tuples."""
        assert to_tuples(b"") == []

    def test_invalid(self) -> None:
        """Structurally invalid bytes raise."""
        with pytest.raises(InvalidAddressError):
            to_tuples(b"\x04\x7f")


class TestToStringTuples:
    """Rendering tuple values."""

    def test_render(self) -> None:
        """Ports are ints, other values strings, flags None."""
        data = from_string("/ip6/::1/tcp/443/wss")
        assert to_string_tuples(to_tuples(data)) == [
            (c.P_IP6, "::1"),
            (c.P_TCP, 443),
            (c.P_WSS, None),
        ]

    def test_unknown_code(self) -> None:
        """Codes outside the registry raise."""
        with pytest.raises(UnknownProtocolError):
            to_string_tuples([(0x7E, b"")])

    def test_bad_value(self) -> None:
        """Values that cannot be rendered raise."""
        with pytest.raises(InvalidValueError):
            to_string_tuples([(c.P_IP4, b"\x01\x02")])


class TestFromTuples:
    """Recomposition into canonical bytes."""

    @pytest.mark.parametrize(
        "string",
        [
            "",
            "/ip4/127.0.0.1/tcp/4001",
            "/dns4/example.com/tcp/443/wss",
            "/unix/var/run/daemon.sock",
            "/ip4/8.8.8.8/tcp/1080/p2p-circuit/ip4/127.0.0.1/tcp/4001",
        ],
    )
    def test_inverse_of_to_tuples(self, string: str) -> None:
        """from_tuples(to_tuples(a)) == a."""
        data = from_string(string)
        assert from_tuples(to_tuples(data)) == data

    def test_adds_length_prefix(self) -> None:
        """Variable-size values gain their varint length."""
        assert from_tuples([(c.P_DNS, b"a" * 200)]) == b"\x35\xc8\x01" + b"a" * 200

    def test_accepts_iterables(self) -> None:
        """Any iterable of pairs works, including bytearray values."""
        pairs = iter([(c.P_IP4, bytearray(b"\x01\x02\x03\x04")), (c.P_WS, b"")])
        assert from_tuples(pairs) == b"\x04\x01\x02\x03\x04\xdd\x03"

    def test_unknown_code(self) -> None:
        """Codes outside the registry raise."""
        with pytest.raises(UnknownProtocolError):
            from_tuples([(0x7E, b"")])

    def test_fixed_width_mismatch(self) -> None:
        """Fixed-size values must have the exact width."""
        with pytest.raises(InvalidValueError, match="expected 4 bytes, got 3"):
            from_tuples([(c.P_IP4, b"\x01\x02\x03")])

    def test_flag_with_value(self) -> None:
        """Flags cannot carry a value."""
        with pytest.raises(InvalidValueError, match="takes no value"):
            from_tuples([(c.P_WS, b"\x01")])

    def test_order_is_preserved(self) -> None:
        """Reordering tuples changes the address."""
        forward = from_tuples([(c.P_TCP, b"\x00\x50"), (c.P_UDP, b"\x00\x50")])
        backward = from_tuples([(c.P_UDP, b"\x00\x50"), (c.P_TCP, b"\x00\x50")])
        assert forward != backward
