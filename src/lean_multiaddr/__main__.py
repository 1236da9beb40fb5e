"""
Multiaddr inspector CLI entry point.

Parse addresses and print their binary form, components and, for thin-waist
addresses, the connection options.

Usage::

    python -m lean_multiaddr /ip4/127.0.0.1/tcp/4001
    python -m lean_multiaddr --hex 047f000001060fa1
    python -m lean_multiaddr --json /dns4/example.com/tcp/443/wss

Options:
    --hex      Treat arguments as hex-encoded binary multiaddrs
    --json     Print one JSON object per address
    -v         Enable debug logging
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from collections.abc import Sequence
from typing import Any

from lean_multiaddr import config
from lean_multiaddr.exceptions import MultiaddrError
from lean_multiaddr.multiaddr import Multiaddr

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False) -> None:
    """Configure logging to stderr."""
    level = logging.DEBUG if verbose else getattr(logging, config.LOG_LEVEL)

    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def parse_argument(value: str, as_hex: bool) -> Multiaddr:
    """
    Build a Multiaddr from one command line argument.

    Raises:
        ValueError: If `as_hex` is set and the argument is not valid hex.
        MultiaddrError: If the address does not parse.
    """
    if as_hex:
        return Multiaddr(bytes.fromhex(value.removeprefix("0x")))
    return Multiaddr(value)


def describe(ma: Multiaddr) -> dict[str, Any]:
    """Collect the views of an address into a JSON-serializable dict."""
    summary: dict[str, Any] = {
        "string": str(ma),
        "hex": ma.hex(),
        "components": [
            {"code": code, "name": name, "value": value}
            for name, (code, value) in zip(ma.proto_names(), ma.string_tuples(), strict=True)
        ],
    }
    if ma.is_thin_waist():
        summary["options"] = ma.to_options().model_dump()
    return summary


def render(summary: dict[str, Any]) -> str:
    """Human-readable rendering of `describe` output."""
    lines = [f"<Multiaddr {summary['hex']} - {summary['string']}>"]
    for component in summary["components"]:
        value = "" if component["value"] is None else f" {component['value']}"
        lines.append(f"  {component['name']} (0x{component['code']:x}){value}")
    if "options" in summary:
        options = summary["options"]
        lines.append(
            f"  options: family={options['family']} host={options['host']} "
            f"transport={options['transport']} port={options['port']}"
        )
    return "\n".join(lines)


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point. Returns the process exit status."""
    parser = argparse.ArgumentParser(
        description="Inspect multiaddrs",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "addresses",
        nargs="+",
        metavar="ADDRESS",
        help="Multiaddr string (or hex bytes with --hex)",
    )
    parser.add_argument(
        "--hex",
        action="store_true",
        help="Treat arguments as hex-encoded binary multiaddrs",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print one JSON object per address",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    status = 0
    for value in args.addresses:
        try:
            summary = describe(parse_argument(value, args.hex))
        except (MultiaddrError, ValueError) as e:
            logger.debug("Rejected %r", value, exc_info=True)
            print(f"error: {value}: {e}", file=sys.stderr)
            status = 1
            continue

        print(json.dumps(summary) if args.json else render(summary))

    return status


if __name__ == "__main__":
    sys.exit(main())
