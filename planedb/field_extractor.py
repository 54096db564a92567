"""Readers for fixed-column fields in FAA flat-file records"""

from typing import Optional

MAX_HEX_DIGITS = 8
MAX_DECIMAL_DIGITS = 10

_HEX_DIGITS = "0123456789abcdefABCDEF"
_DECIMAL_DIGITS = "0123456789"

# Source files are decoded one byte per character so column offsets are byte offsets
SOURCE_ENCODING = "latin-1"

# UTF-8 byte order mark as read through latin-1, and as decoded text
_BOMS = ("\xef\xbb\xbf", "\ufeff")


def strip_bom(line: str) -> str:
    """Remove a leading byte order mark from the first line of a file"""
    for bom in _BOMS:
        if line.startswith(bom):
            return line[len(bom):]
    return line


def parse_hex(line: str, offset: int = 0) -> int:
    """Read up to 8 hex digits starting at offset

    Stops at the first non-hex character or at the end of the line.
    Garbage input yields a partial value, or 0 when no digit was read.

    Args:
        line: Raw record text
        offset: Position of the first digit

    Returns:
        Integer value of the digits consumed
    """
    value = 0
    for c in line[offset:offset + MAX_HEX_DIGITS]:
        if c not in _HEX_DIGITS:
            break
        value = (value << 4) + int(c, 16)
    return value


def parse_int(line: str, offset: int = 0) -> int:
    """Read up to 10 decimal digits starting at offset

    Same policy as parse_hex: never raises, returns 0 when no digit was read.
    """
    value = 0
    for c in line[offset:offset + MAX_DECIMAL_DIGITS]:
        # str.isdigit() also accepts non-ASCII digits
        if c not in _DECIMAL_DIGITS:
            break
        value = value * 10 + (ord(c) - ord("0"))
    return value


def extract_trimmed(line: str, start: int, end: int) -> str:
    """Return line[start:end] with trailing whitespace removed

    The end position is clamped to the line length, so a short line gives
    back whatever part of the span it has (possibly an empty string).
    """
    end = min(end, len(line))
    if start >= end:
        return ""
    return line[start:end].rstrip()


def extract_optional(line: str, start: int, end: int) -> Optional[str]:
    """Like extract_trimmed, but a blank span means the field is absent"""
    return extract_trimmed(line, start, end) or None
