"""
Thin-waist views.

A thin-waist address is exactly one IP layer followed by exactly one
port-based transport::

    /ip4/127.0.0.1/tcp/4001
    /ip6/::1/udp/9000

These are the addresses a socket API can dial directly, so they convert to
and from the shapes sockets work with.
"""

from __future__ import annotations

import ipaddress
from typing import Literal

from pydantic import Field

from .base import StrictBaseModel
from .codec import buffer_to_string, from_string, iter_tuples
from .constants import MAX_PORT, P_IP4, P_IP6, P_TCP, P_UDP
from .exceptions import NotThinWaistError

_IP_CODES = (P_IP4, P_IP6)
_TRANSPORT_CODES = (P_TCP, P_UDP)


class ConnectionOptions(StrictBaseModel):
    """Options for opening a connection to a thin-waist address."""

    family: Literal["ipv4", "ipv6"]
    """Address family."""

    host: str
    """IP literal."""

    transport: Literal["tcp", "udp"]
    """Transport protocol name."""

    port: str
    """Port number, in decimal."""


class NodeAddress(StrictBaseModel):
    """A socket-level address: family, IP literal and port."""

    family: Literal["IPv4", "IPv6"]
    """Address family, spelled as in socket address info."""

    address: str
    """IP literal."""

    port: int = Field(ge=0, le=MAX_PORT)
    """Port number."""

    def to_sockaddr(self) -> tuple[str, int]:
        """Return the `(host, port)` pair accepted by `socket` and `asyncio`."""
        return self.address, self.port

    @classmethod
    def from_sockaddr(cls, sockaddr: tuple) -> NodeAddress:
        """
        Build from a socket address such as `writer.get_extra_info("peername")`.

        IPv6 socket addresses carry extra flow and scope fields; only host and
        port are used.

        Raises:
            ValueError: If the host is not an IP literal, or is a scoped IPv6
                literal such as "fe80::1%eth0".
        """
        host, port = sockaddr[0], sockaddr[1]
        ip = ipaddress.ip_address(host)
        # Zones have no place in a thin-waist address.
        if isinstance(ip, ipaddress.IPv6Address) and ip.scope_id is not None:
            raise ValueError(f"scoped IPv6 address not supported: {host}")
        version = ip.version
        return cls(family="IPv6" if version == 6 else "IPv4", address=host, port=port)


def is_thin_waist(data: bytes) -> bool:
    """Whether the address is one of {ip4, ip6} followed by one of {tcp, udp}."""
    codes = [proto.code for proto, _ in iter_tuples(data)]
    return len(codes) == 2 and codes[0] in _IP_CODES and codes[1] in _TRANSPORT_CODES


def _thin_waist_parts(data: bytes) -> tuple[int, str, str, str]:
    """Return `(ip code, host, transport name, port)` or raise."""
    if not is_thin_waist(data):
        raise NotThinWaistError(buffer_to_string(data))

    (ip_proto, ip_value), (transport_proto, port_value) = iter_tuples(data)
    host = str(ip_proto.to_display(ip_value))
    port = str(transport_proto.to_display(port_value))
    return ip_proto.code, host, transport_proto.name, port


def to_options(data: bytes) -> ConnectionOptions:
    """
    Connection options for a thin-waist address.

    Raises:
        NotThinWaistError: If the address has any other shape.
    """
    ip_code, host, transport, port = _thin_waist_parts(data)
    return ConnectionOptions(
        family="ipv6" if ip_code == P_IP6 else "ipv4",
        host=host,
        transport=transport,
        port=port,
    )


def to_node_address(data: bytes) -> NodeAddress:
    """
    Socket-level address for a thin-waist address.

    Raises:
        NotThinWaistError: If the address has any other shape.
    """
    ip_code, host, _, port = _thin_waist_parts(data)
    return NodeAddress(
        family="IPv6" if ip_code == P_IP6 else "IPv4",
        address=host,
        port=int(port),
    )


def from_node_address(addr: NodeAddress, transport: str) -> bytes:
    """
    Build an address from a socket-level address and a transport name.

    Raises:
        ValueError: If `transport` is empty.
        UnknownProtocolError: If `transport` is not a known protocol.
        InvalidValueError: If the host or port is malformed.
    """
    if not transport:
        raise ValueError("requires transport protocol")

    ip = "ip6" if addr.family == "IPv6" else "ip4"
    return from_string(f"/{ip}/{addr.address}/{transport}/{addr.port}")
