"""
Composing and decomposing multiaddrs.

Encapsulation appends one address after another, e.g. a relay address
followed by the relayed peer::

    /ip4/8.8.8.8/tcp/1080 + /ip4/127.0.0.1/tcp/4001
        = /ip4/8.8.8.8/tcp/1080/ip4/127.0.0.1/tcp/4001

The two strings are joined and parsed again. When the outer address ends
in a path protocol (unix), the path swallows the inner string::

    /unix/a + /tcp/80 = /unix/a/tcp/80   (one unix component, path "/a/tcp/80")

so the result is not the concatenation of the binary forms, and
`decapsulate_code` finds no tcp component in it.

Decapsulation works on the rendered strings: it cuts the address at the
last textual occurrence of the suffix. The match is not aligned to
component boundaries, so a suffix such as "/tcp/80" also matches inside
"/tcp/8080". Callers that need a structural cut use `decapsulate_code`.
"""

from __future__ import annotations

from .codec import buffer_to_string, encode_component, from_string, iter_tuples
from .exceptions import NotContainedError


def encapsulate(outer: bytes, inner: bytes) -> bytes:
    """
    Append `inner`'s components after `outer`'s.

    The joined string is parsed again, so the result is fully validated. A
    trailing path component in `outer` absorbs all of `inner`.
    """
    return from_string(buffer_to_string(outer) + buffer_to_string(inner))


def decapsulate(address: bytes, suffix: bytes) -> bytes:
    """
    Remove the last occurrence of `suffix` and everything after it.

    Raises:
        NotContainedError: If `suffix`'s string does not occur in `address`'s string.
    """
    address_str = buffer_to_string(address)
    suffix_str = buffer_to_string(suffix)

    index = address_str.rfind(suffix_str)
    if index < 0:
        raise NotContainedError(address_str, suffix_str)

    return from_string(address_str[:index])


def decapsulate_code(address: bytes, code: int) -> bytes:
    """
    Remove the last component with protocol `code` and everything after it.

    Structural counterpart of `decapsulate`. Returns `address` unchanged if
    no component has this code.
    """
    components = list(iter_tuples(address))

    for i in range(len(components) - 1, -1, -1):
        if components[i][0].code == code:
            return b"".join(encode_component(proto, value) for proto, value in components[:i])

    return address
