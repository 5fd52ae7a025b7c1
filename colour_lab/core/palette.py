"""Hex colour parsing and formatting, and preset swatches.

Hex strings are the external serialized form of RGB. Six-digit hex
round-trips losslessly; three-digit shorthand duplicates each digit.
"""

import math
import re
from collections.abc import Sequence

from colour_lab.core.types import RGB

_HEX_RE = re.compile(r'#([0-9a-fA-F]{6}|[0-9a-fA-F]{3})')

# Swatches offered by the wheel lab as starting points
PRESETS: tuple[str, ...] = (
    '#c95a4a', '#e39a57', '#f0c35a', '#6fae8c', '#6fb7b2', '#5e8fbf', '#8a7bb8',
    '#9fc3d8', '#bfd7e6', '#f2d6a8',
    '#d87c6a', '#e7a092', '#f3d56b', '#5a78a8', '#9a8ec1', '#6e8f7b',
    '#e8cfaf', '#e3b38a', '#8fa9b5',
    '#f7e6c9', '#cbb8a3', '#a9bfd0', '#7c96a8',
)  # fmt: skip


class InvalidFormat(ValueError):
    """Raised when a string is not a `#rrggbb` or `#rgb` hex colour."""


def round_half_up(x: float) -> int:
    """Round to the nearest integer, with halves going up (2.5 -> 3)."""
    return int(math.floor(x + 0.5))


def clamp_channel(x: float) -> int:
    """Round then clamp a channel value into [0, 255]."""
    return max(0, min(255, round_half_up(x)))


def is_hex(s: str) -> bool:
    return isinstance(s, str) and _HEX_RE.fullmatch(s) is not None


def parse_hex(s: str) -> RGB:
    """Parse `#rrggbb` (or `#rgb`) into RGB. Case-insensitive.

    Raises InvalidFormat for anything else, including a missing `#`.
    """
    if not isinstance(s, str):
        raise InvalidFormat(f'Not a hex colour: {s!r}')
    m = _HEX_RE.fullmatch(s.strip())
    if not m:
        raise InvalidFormat(f'Not a hex colour: {s!r}')
    digits = m.group(1)
    if len(digits) == 3:
        digits = ''.join(c * 2 for c in digits)
    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def format_hex(rgb: Sequence[float], upper: bool = False) -> str:
    """Format an RGB triple as `#rrggbb`. Channels are rounded and clamped."""
    r, g, b = (clamp_channel(c) for c in rgb)
    text = f'#{r:02x}{g:02x}{b:02x}'
    return text.upper() if upper else text


def normalize_hex(s: str, upper: bool = False) -> str:
    """Canonical 6-digit form of a hex colour (expands shorthand)."""
    return format_hex(parse_hex(s), upper=upper)


def as_rgb(colour: str | Sequence[float]) -> RGB:
    """Accept a hex string or an RGB-like triple; return clamped RGB."""
    if isinstance(colour, str):
        return parse_hex(colour)
    r, g, b = colour
    return RGB(clamp_channel(r), clamp_channel(g), clamp_channel(b))

