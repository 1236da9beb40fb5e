"""Exception hierarchy for multiaddr parsing, validation and composition."""

from __future__ import annotations

from typing import Any


class MultiaddrError(Exception):
    """
    Base exception for all multiaddr errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class UnknownProtocolError(MultiaddrError):
    """
    Raised when a protocol name or code is not in the registry.

    Attributes:
        protocol: The name or code that failed to resolve.
    """

    def __init__(self, protocol: str | int) -> None:
        self.protocol = protocol

        if isinstance(protocol, int):
            msg = f"Unknown protocol code: {protocol} (0x{protocol:x})"
        else:
            msg = f"Unknown protocol name: {protocol!r}"

        super().__init__(msg)


class InvalidFormatError(MultiaddrError):
    """
    Raised when a multiaddr string is syntactically malformed.

    Attributes:
        string: The input string.
        detail: What is wrong with it.
    """

    def __init__(self, string: str, detail: str) -> None:
        self.string = string
        self.detail = detail

        super().__init__(f"Invalid multiaddr string {string!r}: {detail}")


class InvalidValueError(MultiaddrError):
    """
    Raised when a component value fails protocol-specific parsing or rendering.

    Attributes:
        protocol: Name of the protocol owning the value.
        value: The offending value (string or stored bytes).
        detail: Description of what went wrong.
    """

    def __init__(self, protocol: str, value: Any, detail: str) -> None:
        self.protocol = protocol
        self.value = value
        self.detail = detail

        value_repr = repr(value)
        if len(value_repr) > 50:
            value_repr = value_repr[:47] + "..."

        super().__init__(f"Invalid {protocol} value {value_repr}: {detail}")


class InvalidAddressError(MultiaddrError):
    """
    Raised when binary multiaddr bytes fail structural validation.

    Attributes:
        detail: Description of what went wrong.
        offset: The byte offset where the error occurred (if known).
    """

    def __init__(self, detail: str, *, offset: int | None = None) -> None:
        self.detail = detail
        self.offset = offset

        msg = f"Invalid multiaddr bytes: {detail}"
        if offset is not None:
            msg = f"{msg} (at byte offset {offset})"

        super().__init__(msg)


class NotContainedError(MultiaddrError):
    """
    Raised when decapsulating a suffix the address does not contain.

    Attributes:
        address: Canonical string of the address.
        suffix: Canonical string of the requested suffix.
    """

    def __init__(self, address: str, suffix: str) -> None:
        self.address = address
        self.suffix = suffix

        super().__init__(f"Address {address} does not contain subaddress: {suffix}")


class NotThinWaistError(MultiaddrError):
    """
    Raised when a thin-waist view is requested for any other address shape.

    Attributes:
        address: Canonical string of the address.
    """

    def __init__(self, address: str) -> None:
        self.address = address

        super().__init__(
            f"Multiaddr must be a thin waist address (/ip4|ip6/<host>/tcp|udp/<port>): {address}"
        )
