# File: robots_scout/parser/escape.py
"""robots_scout.parser.escape: Canonical form of Allow/Disallow patterns.

Two normalizations are applied, byte by byte over the UTF-8 encoding:

* hex digits of existing percent-escapes are uppercased (``%aa`` -> ``%AA``);
* every non-ASCII byte is percent-escaped (``/SanJoséSellers`` ->
  ``/SanJos%C3%A9Sellers``).

All other ASCII bytes, ``*`` and ``$`` included, are copied as is.
"""

from __future__ import annotations

from typing import Final, Union

__all__ = ("HEX_DIGITS", "maybe_escape_pattern")

HEX_DIGITS: Final[bytes] = b"0123456789ABCDEF"
_HEX_CHARS: Final[frozenset[int]] = frozenset(b"0123456789abcdefABCDEF")
_PERCENT: Final[int] = ord("%")
_HIGH_BIT: Final[int] = 0x80


def maybe_escape_pattern(src: Union[str, bytes]) -> str:
    """Return the canonical percent-encoded form of *src*.

    The result is a fixed point: escaping it again returns it unchanged.
    """
    raw = src.encode("utf-8", errors="surrogateescape") if isinstance(src, str) else bytes(src)
    if not raw:
        return ""

    out = bytearray()
    i = 0
    size = len(raw)
    while i < size:
        byte = raw[i]
        if byte == _PERCENT and i + 2 < size and _is_hex(raw[i + 1]) and _is_hex(raw[i + 2]):
            out.append(_PERCENT)
            out += bytes(raw[i + 1:i + 3]).upper()
            i += 3
        elif byte & _HIGH_BIT:
            out.append(_PERCENT)
            out.append(HEX_DIGITS[byte >> 4])
            out.append(HEX_DIGITS[byte & 0x0F])
            i += 1
        else:
            out.append(byte)
            i += 1
    return out.decode("ascii")


def _is_hex(byte: int) -> bool:
    return byte in _HEX_CHARS
