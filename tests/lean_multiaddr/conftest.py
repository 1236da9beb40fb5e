"""
Shared pytest fixtures for multiaddr tests.

Provides well-known addresses and peer ids.
"""

from __future__ import annotations

import pytest

from lean_multiaddr import Multiaddr

PEER_ID = "QmNnooDu7bfjPFoTZYxMNLWUQJyrVwtbZg5gBMjTezGAJN"
"""A sha2-256 multihash peer id (libp2p bootstrap node)."""


@pytest.fixture
def peer_id() -> str:
    """Base58 peer id string."""
    return PEER_ID


@pytest.fixture
def local_tcp() -> Multiaddr:
    """/ip4/127.0.0.1/tcp/4001"""
    return Multiaddr("/ip4/127.0.0.1/tcp/4001")


@pytest.fixture
def relay_tcp() -> Multiaddr:
    """/ip4/8.8.8.8/tcp/1080"""
    return Multiaddr("/ip4/8.8.8.8/tcp/1080")
