"""
The fixed multiaddr protocol registry.

Each protocol is described once, at import time, by a `ProtocolDescriptor`.
The registry is two read-only mappings (code -> descriptor, name ->
descriptor) over the same table, so lookups are safe from any thread
without locking.

Size policy, stored in bits as in the multicodec table::

    size > 0    fixed width value, size // 8 bytes, no length prefix
    size == 0   flag protocol, no value at all
    size == -1  value preceded by its varint byte length

References:
    https://github.com/multiformats/multiaddr/blob/master/protocols.csv
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Final

from . import constants as c
from . import transforms
from .exceptions import InvalidValueError, UnknownProtocolError
from .varint import encode_varint

__all__ = [
    "ProtocolDescriptor",
    "PROTOCOLS",
    "by_code",
    "by_name",
]

Encoder = Callable[[str], bytes]
"""Parses a string segment into value bytes."""

Decoder = Callable[[bytes], str | int]
"""Renders value bytes for display."""


@dataclass(frozen=True, slots=True)
class ProtocolDescriptor:
    """
    Immutable description of one multiaddr protocol.

    Attributes:
        code: Multicodec code, written as a varint before the value.
        name: Name used in the string form.
        size: Value size in bits, or one of the size policy sentinels.
        path: Whether the value swallows the rest of the string form.
        encoder: Parses a string segment into value bytes.
        decoder: Renders value bytes for display.
    """

    code: int
    """Multicodec code."""

    name: str
    """Protocol name in the string form."""

    size: int
    """Value size in bits, `SIZE_NONE` or `SIZE_VARIABLE`."""

    path: bool = False
    """Value is the remainder of the string, slashes included."""

    encoder: Encoder | None = field(default=None, repr=False, compare=False)
    """String to bytes transform. None for flag protocols."""

    decoder: Decoder | None = field(default=None, repr=False, compare=False)
    """Bytes to display transform. None for flag protocols."""

    @property
    def has_value(self) -> bool:
        """Whether components of this protocol carry a value."""
        return self.size != c.SIZE_NONE

    @property
    def is_variable(self) -> bool:
        """Whether the value is length-prefixed."""
        return self.size == c.SIZE_VARIABLE

    @property
    def byte_size(self) -> int:
        """Exact value width in bytes for fixed-size protocols (0 otherwise)."""
        return self.size // 8 if self.size > 0 else 0

    @property
    def vcode(self) -> bytes:
        """The protocol code as it appears on the wire."""
        return encode_varint(self.code)

    def to_bytes(self, value: str) -> bytes:
        """
        Convert a string segment into this protocol's value bytes.

        Raises:
            InvalidValueError: If the segment is malformed for this protocol.
        """
        if self.encoder is None:
            raise InvalidValueError(self.name, value, "protocol takes no value")
        try:
            return self.encoder(value)
        except ValueError as exc:
            raise InvalidValueError(self.name, value, str(exc)) from exc

    def to_display(self, data: bytes) -> str | int:
        """
        Render stored value bytes.

        Ports render as `int`, everything else as `str`.

        Raises:
            InvalidValueError: If the stored bytes are malformed for this protocol.
        """
        if self.decoder is None:
            raise InvalidValueError(self.name, data, "protocol takes no value")
        try:
            return self.decoder(data)
        except ValueError as exc:
            raise InvalidValueError(self.name, data, str(exc)) from exc


def _fixed(
    code: int, name: str, bits: int, encoder: Encoder, decoder: Decoder
) -> ProtocolDescriptor:
    return ProtocolDescriptor(code, name, bits, encoder=encoder, decoder=decoder)


def _variable(
    code: int, name: str, encoder: Encoder, decoder: Decoder, *, path: bool = False
) -> ProtocolDescriptor:
    return ProtocolDescriptor(
        code, name, c.SIZE_VARIABLE, path=path, encoder=encoder, decoder=decoder
    )


def _flag(code: int, name: str) -> ProtocolDescriptor:
    return ProtocolDescriptor(code, name, c.SIZE_NONE)


_PORT = (transforms.port_to_bytes, transforms.port_to_display)
_TEXT = (transforms.text_to_bytes, transforms.text_to_display)

PROTOCOLS: Final[tuple[ProtocolDescriptor, ...]] = (
    _fixed(c.P_IP4, "ip4", 32, transforms.ip4_to_bytes, transforms.ip4_to_display),
    _fixed(c.P_TCP, "tcp", 16, *_PORT),
    _fixed(c.P_DCCP, "dccp", 16, *_PORT),
    _fixed(c.P_IP6, "ip6", 128, transforms.ip6_to_bytes, transforms.ip6_to_display),
    _variable(c.P_IP6ZONE, "ip6zone", *_TEXT),
    _variable(c.P_DNS, "dns", *_TEXT),
    _variable(c.P_DNS4, "dns4", *_TEXT),
    _variable(c.P_DNS6, "dns6", *_TEXT),
    _variable(c.P_DNSADDR, "dnsaddr", *_TEXT),
    _fixed(c.P_SCTP, "sctp", 16, *_PORT),
    _fixed(c.P_UDP, "udp", 16, *_PORT),
    _flag(c.P_P2P_CIRCUIT, "p2p-circuit"),
    _flag(c.P_UDT, "udt"),
    _flag(c.P_UTP, "utp"),
    _variable(
        c.P_UNIX, "unix", transforms.path_to_bytes, transforms.path_to_display, path=True
    ),
    _variable(c.P_P2P, "p2p", transforms.p2p_to_bytes, transforms.p2p_to_display),
    _flag(c.P_HTTPS, "https"),
    _flag(c.P_TLS, "tls"),
    _variable(c.P_SNI, "sni", *_TEXT),
    _flag(c.P_NOISE, "noise"),
    _flag(c.P_QUIC, "quic"),
    _flag(c.P_QUIC_V1, "quic-v1"),
    _flag(c.P_WEBTRANSPORT, "webtransport"),
    _flag(c.P_WS, "ws"),
    _flag(c.P_WSS, "wss"),
    _flag(c.P_HTTP, "http"),
)
"""Every supported protocol, in multicodec table order."""

_BY_CODE: Final[Mapping[int, ProtocolDescriptor]] = MappingProxyType(
    {proto.code: proto for proto in PROTOCOLS}
)

_BY_NAME: Final[Mapping[str, ProtocolDescriptor]] = MappingProxyType(
    {proto.name: proto for proto in PROTOCOLS}
)


def by_code(code: int) -> ProtocolDescriptor:
    """
    Find a protocol by its code.

    Raises:
        UnknownProtocolError: No protocol has this code.
    """
    try:
        return _BY_CODE[code]
    except KeyError:
        raise UnknownProtocolError(code) from None


def by_name(name: str) -> ProtocolDescriptor:
    """
    Find a protocol by its name.

    Raises:
        UnknownProtocolError: No protocol has this name.
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownProtocolError(name) from None
