"""
Size parsing and formatting. Every numeric field read from the host goes
through these helpers, so malformed text degrades to 0 instead of raising.
"""
import re
from typing import Optional

KIB = 1024
MIB = 1024 * 1024
GIB = 1024 * 1024 * 1024

_LEADING_DIGITS = re.compile(r"[0-9]+")
_SUFFIX_MULTIPLIERS = {"K": KIB, "M": MIB, "G": GIB}


def parse_uint(text: Optional[str]) -> int:
    """Parse a whole, trimmed string of decimal digits; anything else is 0."""
    if text is None:
        return 0
    text = text.strip()
    if not text or not text.isascii() or not text.isdigit():
        return 0
    return int(text)


def parse_size_with_unit(token: Optional[str]) -> int:
    """
    Parse sizes such as "32K", "1M" or "512" into bytes.

    The leading run of digits is the value; a trailing K, M or G scales it
    by the matching power of 1024. No leading digits means 0.
    """
    if not token:
        return 0
    token = token.strip()
    match = _LEADING_DIGITS.match(token)
    if not match:
        return 0
    return int(match.group(0)) * _SUFFIX_MULTIPLIERS.get(token[-1], 1)


def format_size(size: int) -> str:
    if size == 0:
        return "Not detected"
    if size < KIB:
        return f"{size} B"
    if size < MIB:
        return f"{size / KIB:.2f} KB"
    if size < GIB:
        return f"{size / MIB:.2f} MB"
    return f"{size / GIB:.2f} GB"
