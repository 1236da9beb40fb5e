"""
Constants for the multiaddr format.

Reference: https://github.com/multiformats/multicodec/blob/master/table.csv
"""

from __future__ import annotations

from typing import Final

# ===========================================================================
# Protocol Codes
# ===========================================================================
#
# Every component of a multiaddr starts with its protocol code, encoded as an
# unsigned varint. Codes below 0x80 take a single byte on the wire.

P_IP4: Final = 0x04
"""IPv4 address (4 bytes)."""

P_TCP: Final = 0x06
"""TCP port (2 bytes, big-endian)."""

P_DCCP: Final = 0x21
"""DCCP port (2 bytes, big-endian)."""

P_IP6: Final = 0x29
"""IPv6 address (16 bytes)."""

P_IP6ZONE: Final = 0x2A
"""IPv6 zone identifier (length-prefixed text)."""

P_DNS: Final = 0x35
"""Domain name resolving to any address family."""

P_DNS4: Final = 0x36
"""Domain name resolving to IPv4 only."""

P_DNS6: Final = 0x37
"""Domain name resolving to IPv6 only."""

P_DNSADDR: Final = 0x38
"""Domain name whose TXT records hold further multiaddrs."""

P_SCTP: Final = 0x84
"""SCTP port (2 bytes, big-endian)."""

P_UDP: Final = 0x0111
"""UDP port (2 bytes, big-endian)."""

P_P2P_CIRCUIT: Final = 0x0122
"""Relayed connection marker."""

P_UDT: Final = 0x012D
"""UDT over UDP."""

P_UTP: Final = 0x012E
"""uTP over UDP."""

P_UNIX: Final = 0x0190
"""Unix domain socket path."""

P_P2P: Final = 0x01A5
"""Peer identifier (multihash, rendered as Base58)."""

P_HTTPS: Final = 0x01BB
"""HTTP over TLS."""

P_TLS: Final = 0x01C0
"""TLS session layer."""

P_SNI: Final = 0x01C1
"""TLS server name indication."""

P_NOISE: Final = 0x01C6
"""Noise security handshake."""

P_QUIC: Final = 0x01CC
"""QUIC draft-29."""

P_QUIC_V1: Final = 0x01CD
"""QUIC version 1 (RFC 9000)."""

P_WEBTRANSPORT: Final = 0x01D1
"""WebTransport over QUIC."""

P_WS: Final = 0x01DD
"""WebSocket."""

P_WSS: Final = 0x01DE
"""WebSocket over TLS."""

P_HTTP: Final = 0x01E0
"""Plain HTTP."""

# ===========================================================================
# Value Size Policies
# ===========================================================================
#
# The registry stores a size in bits. Two sentinel values cover the
# protocols that do not carry a fixed-width value.

SIZE_NONE: Final = 0
"""Flag protocol: no value segment at all."""

SIZE_VARIABLE: Final = -1
"""Value is preceded by its own varint byte length."""

# ===========================================================================
# Limits
# ===========================================================================

MAX_VARINT_BYTES: Final = 9
"""Longest accepted varint (63 payload bits), per the multiformats unsigned-varint rules."""

MAX_PORT: Final = 0xFFFF
"""Largest transport port number."""

SEPARATOR: Final = "/"
"""Delimiter between string components."""
