"""
The `Multiaddr` value type.

Wraps the canonical binary form and exposes the codec, tuple, composition
and thin-waist views as methods::

    >>> ma = Multiaddr("/ip4/127.0.0.1/tcp/4001")
    >>> ma.hex()
    '047f000001060fa1'
    >>> ma.proto_names()
    ['ip4', 'tcp']
    >>> str(ma.encapsulate("/p2p-circuit"))
    '/ip4/127.0.0.1/tcp/4001/p2p-circuit'

Instances are immutable and hashable. Equality compares canonical bytes, so
an address built from its string and one built from its bytes are equal.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any, TypeAlias

from . import codec, composition, thin_waist, tuples
from .exceptions import MultiaddrError
from .protocols import ProtocolDescriptor, by_code, by_name
from .thin_waist import ConnectionOptions, NodeAddress
from .tuples import StringTuple, Tuple

logger = logging.getLogger(__name__)

AddrLike: TypeAlias = "str | bytes | bytearray | memoryview | Multiaddr"
"""Anything `Multiaddr` can be built from."""


class Multiaddr:
    """
    A composable, self-describing network address.

    Args:
        addr: A multiaddr string, its binary form, or another `Multiaddr`.
            Defaults to the empty address.

    Raises:
        TypeError: If `addr` is none of the accepted types.
        MultiaddrError: If `addr` does not parse or validate.
    """

    __slots__ = ("_bytes",)

    _bytes: bytes

    def __init__(self, addr: AddrLike = "") -> None:
        if isinstance(addr, Multiaddr):
            # Validated and copied like any other buffer.
            data = codec.from_buffer(addr._bytes)
        elif isinstance(addr, str):
            data = codec.from_string(addr)
        elif isinstance(addr, (bytes, bytearray, memoryview)):
            data = codec.from_buffer(addr)
        else:
            raise TypeError(
                f"addr must be a string, bytes, or another Multiaddr, got {type(addr).__name__}"
            )
        object.__setattr__(self, "_bytes", data)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[Multiaddr], tuple[bytes]]:
        return type(self), (self._bytes,)

    # -------------------------------------------------------------------------
    # Representations
    # -------------------------------------------------------------------------

    def __str__(self) -> str:
        """Return the canonical string form."""
        return codec.buffer_to_string(self._bytes)

    def __repr__(self) -> str:
        """Return hex and string forms, e.g. `<Multiaddr 047f000001060fa1 - /ip4/...>`."""
        return f"<Multiaddr {self._bytes.hex()} - {self}>"

    def __bytes__(self) -> bytes:
        return self._bytes

    def to_bytes(self) -> bytes:
        """Return the canonical binary form."""
        return self._bytes

    def hex(self) -> str:
        """Return the canonical binary form as lowercase hex."""
        return self._bytes.hex()

    # -------------------------------------------------------------------------
    # Equality
    # -------------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Multiaddr):
            return NotImplemented
        return self._bytes == other._bytes

    def __hash__(self) -> int:
        return hash(self._bytes)

    # -------------------------------------------------------------------------
    # Component views
    # -------------------------------------------------------------------------

    def __len__(self) -> int:
        """Number of components."""
        return sum(1 for _ in codec.iter_tuples(self._bytes))

    def __iter__(self) -> Iterator[StringTuple]:
        """Iterate over `(code, rendered value)` pairs."""
        return iter(self.string_tuples())

    def protocols(self) -> list[ProtocolDescriptor]:
        """Protocol descriptors, one per component, in order."""
        return [proto for proto, _ in codec.iter_tuples(self._bytes)]

    def proto_codes(self) -> list[int]:
        """Protocol codes, one per component, in order."""
        return [proto.code for proto in self.protocols()]

    def proto_names(self) -> list[str]:
        """Protocol names, one per component, in order."""
        return [proto.name for proto in self.protocols()]

    def tuples(self) -> list[Tuple]:
        """`(code, raw value bytes)` per component."""
        return tuples.to_tuples(self._bytes)

    def string_tuples(self) -> list[StringTuple]:
        """`(code, rendered value)` per component. Ports are `int`, flags `None`."""
        return tuples.to_string_tuples(self.tuples())

    def value_for_protocol(self, proto: int | str) -> str | int | None:
        """
        Rendered value of the first component with the given protocol.

        Returns:
            The value, `""` for a flag protocol that is present, or `None`
            if no component uses the protocol.

        Raises:
            UnknownProtocolError: If `proto` is not a known code or name.
        """
        descriptor = by_code(proto) if isinstance(proto, int) else by_name(proto)
        for component, value in codec.iter_tuples(self._bytes):
            if component.code == descriptor.code:
                return component.to_display(value) if component.has_value else ""
        return None

    # -------------------------------------------------------------------------
    # Composition
    # -------------------------------------------------------------------------

    def encapsulate(self, other: AddrLike) -> Multiaddr:
        """Return a new address with `other`'s components appended."""
        return Multiaddr(composition.encapsulate(self._bytes, Multiaddr(other)._bytes))

    def decapsulate(self, other: AddrLike) -> Multiaddr:
        """
        Return the part before the last textual occurrence of `other`.

        Raises:
            NotContainedError: If `other`'s string does not occur in this address.
        """
        return Multiaddr(composition.decapsulate(self._bytes, Multiaddr(other)._bytes))

    def decapsulate_code(self, code: int) -> Multiaddr:
        """Return the part before the last component with protocol `code`."""
        return Multiaddr(composition.decapsulate_code(self._bytes, code))

    # -------------------------------------------------------------------------
    # Thin-waist views
    # -------------------------------------------------------------------------

    def is_thin_waist(self) -> bool:
        """Whether this is exactly {ip4, ip6} followed by {tcp, udp}."""
        return thin_waist.is_thin_waist(self._bytes)

    def to_options(self) -> ConnectionOptions:
        """
        Connection options, e.g. `{family: "ipv4", host: ..., transport: "tcp", port: "4001"}`.

        Raises:
            NotThinWaistError: If this is not a thin-waist address.
        """
        return thin_waist.to_options(self._bytes)

    def node_address(self) -> NodeAddress:
        """
        Socket-level address.

        Raises:
            NotThinWaistError: If this is not a thin-waist address.
        """
        return thin_waist.to_node_address(self._bytes)

    @classmethod
    def from_node_address(cls, addr: NodeAddress, transport: str) -> Multiaddr:
        """Build `/ip4|ip6/<address>/<transport>/<port>` from a socket-level address."""
        return cls(thin_waist.from_node_address(addr, transport))


def is_multiaddr(obj: object) -> bool:
    """Whether `obj` is a `Multiaddr` instance."""
    return isinstance(obj, Multiaddr)


def parse_or_none(addr: AddrLike) -> Multiaddr | None:
    """
    Build a `Multiaddr`, returning None instead of raising on invalid input.

    Useful when filtering address lists received from peers, where one bad
    entry must not discard the rest.
    """
    try:
        return Multiaddr(addr)
    except (MultiaddrError, TypeError) as exc:
        logger.debug("Ignoring invalid multiaddr %r: %s", addr, exc)
        return None
