"""Tests for the inspector command line tool."""

from __future__ import annotations

import json
import logging

import pytest

from lean_multiaddr.__main__ import describe, main, parse_argument, render
from lean_multiaddr.multiaddr import Multiaddr


@pytest.fixture(autouse=True)
def restore_root_logger():
    """main() installs a handler on the root logger; remove it afterwards."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


class TestParseArgument:
    """Argument interpretation."""

    def test_string(self) -> None:
        """Plain arguments are multiaddr strings."""
        assert parse_argument("/ip4/127.0.0.1/tcp/4001", as_hex=False) == Multiaddr(
            "/ip4/127.0.0.1/tcp/4001"
        )

    @pytest.mark.parametrize("value", ["047f000001060fa1", "0x047f000001060fa1"])
    def test_hex(self, value: str) -> None:
        """Hex arguments may carry a 0x prefix."""
        assert str(parse_argument(value, as_hex=True)) == "/ip4/127.0.0.1/tcp/4001"

    def test_bad_hex(self) -> None:
        """Non-hex input raises ValueError."""
        with pytest.raises(ValueError):
            parse_argument("zz", as_hex=True)


class TestDescribe:
    """Summary construction and rendering."""

    def test_thin_waist(self, local_tcp: Multiaddr) -> None:
        """Thin-waist addresses include their options."""
        summary = describe(local_tcp)
        assert summary == {
            "string": "/ip4/127.0.0.1/tcp/4001",
            "hex": "047f000001060fa1",
            "components": [
                {"code": 0x04, "name": "ip4", "value": "127.0.0.1"},
                {"code": 0x06, "name": "tcp", "value": 4001},
            ],
            "options": {
                "family": "ipv4",
                "host": "127.0.0.1",
                "transport": "tcp",
                "port": "4001",
            },
        }

    def test_render(self, local_tcp: Multiaddr) -> None:
        """One header line, one line per component, then options."""
        assert render(describe(local_tcp)).splitlines() == [
            "<Multiaddr 047f000001060fa1 - /ip4/127.0.0.1/tcp/4001>",
            "  ip4 (0x4) 127.0.0.1",
            "  tcp (0x6) 4001",
            "  options: family=ipv4 host=127.0.0.1 transport=tcp port=4001",
        ]

    def test_render_flag(self) -> None:
        """Flags render without a value and non thin-waist addresses without options."""
        lines = render(describe(Multiaddr("/dns4/example.com/tcp/443/wss"))).splitlines()
        assert lines[1:] == [
            "  dns4 (0x36) example.com",
            "  tcp (0x6) 443",
            "  wss (0x1de)",
        ]


class TestMain:
    """End to end runs."""

    def test_text_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Successful runs exit with status 0."""
        assert main(["/ip6/::1/udp/9000"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("<Multiaddr 29")
        assert "options: family=ipv6 host=::1 transport=udp port=9000" in out

    def test_json_output(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--json prints one object per line."""
        assert main(["--json", "/ip4/127.0.0.1/tcp/4001", "/ws"]) == 0
        lines = capsys.readouterr().out.splitlines()
        assert [json.loads(line)["string"] for line in lines] == [
            "/ip4/127.0.0.1/tcp/4001",
            "/ws",
        ]

    def test_hex_input(self, capsys: pytest.CaptureFixture[str]) -> None:
        """--hex decodes binary arguments."""
        assert main(["--json", "--hex", "0408080808060438"]) == 0
        assert json.loads(capsys.readouterr().out)["string"] == "/ip4/8.8.8.8/tcp/1080"

    def test_errors(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Bad arguments are reported and the status is 1, good ones still print."""
        assert main(["/ip4/999.0.0.1", "/ip4/1.2.3.4"]) == 1
        captured = capsys.readouterr()
        assert "error: /ip4/999.0.0.1:" in captured.err
        assert "/ip4/1.2.3.4" in captured.out

    def test_undisplayable_bytes(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Structurally valid bytes with a bad value are reported, not raised."""
        assert main(["--hex", "3602fffe"]) == 1
        assert "error: 3602fffe:" in capsys.readouterr().err

    def test_requires_address(self) -> None:
        """At least one address is required."""
        with pytest.raises(SystemExit):
            main([])
