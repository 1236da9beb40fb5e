"""Composable, self-describing network addresses (multiaddr).

A multiaddr stacks addressing components, each naming its own protocol::

    /ip4/127.0.0.1/tcp/4001/p2p/QmNnooDu7bfjPFoTZYxMNLWUQJyrVwtbZg5gBMjTezGAJN

Usage::

    from lean_multiaddr import Multiaddr

    ma = Multiaddr("/ip4/127.0.0.1/tcp/4001")
    ma.to_bytes()                        # b"\\x04\\x7f\\x00\\x00\\x01\\x06\\x0f\\xa1"
    ma.encapsulate("/ws").proto_names()  # ["ip4", "tcp", "ws"]

The format is described at https://github.com/multiformats/multiaddr
"""

from __future__ import annotations

from .codec import buffer_to_string, from_buffer, from_string, size_for_addr
from .composition import decapsulate, decapsulate_code, encapsulate
from .exceptions import (
    InvalidAddressError,
    InvalidFormatError,
    InvalidValueError,
    MultiaddrError,
    NotContainedError,
    NotThinWaistError,
    UnknownProtocolError,
)
from .multiaddr import Multiaddr, is_multiaddr, parse_or_none
from .protocols import PROTOCOLS, ProtocolDescriptor, by_code, by_name
from .thin_waist import ConnectionOptions, NodeAddress
from .tuples import from_tuples, to_string_tuples, to_tuples

__all__ = [
    # Value type
    "Multiaddr",
    "is_multiaddr",
    "parse_or_none",
    # Registry
    "PROTOCOLS",
    "ProtocolDescriptor",
    "by_code",
    "by_name",
    # Codec
    "from_string",
    "from_buffer",
    "size_for_addr",
    "buffer_to_string",
    # Tuples
    "to_tuples",
    "to_string_tuples",
    "from_tuples",
    # Composition
    "encapsulate",
    "decapsulate",
    "decapsulate_code",
    # Thin-waist views
    "ConnectionOptions",
    "NodeAddress",
    # Exceptions
    "MultiaddrError",
    "UnknownProtocolError",
    "InvalidFormatError",
    "InvalidValueError",
    "InvalidAddressError",
    "NotContainedError",
    "NotThinWaistError",
]
