"""RGB <-> HSL and RGB <-> HSV conversions.

All conversions work on channels normalised to [0, 1] and only produce or
consume 0-255 integers at the boundary. Out-of-range inputs are clamped,
never rejected. Hue is always returned normalised into [0, 360).
"""

import math

from colour_lab.core.palette import clamp_channel, format_hex
from colour_lab.core.types import HSL, HSV, RGB


def clamp01(x: float) -> float:
    return max(0.0, min(1.0, x))


def normalize_hue(h: float) -> float:
    """Wrap any hue into [0, 360), including negative offsets."""
    h = ((h % 360) + 360) % 360
    # float modulo can land exactly on 360 for tiny negative inputs
    return 0.0 if h >= 360 else h


def _hue(r: float, g: float, b: float, mx: float, d: float) -> float:
    if mx == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif mx == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return normalize_hue(h * 60)


def rgb_to_hsl(r: float, g: float, b: float) -> HSL:
    r, g, b = (clamp_channel(c) / 255 for c in (r, g, b))
    mx = max(r, g, b)
    mn = min(r, g, b)
    lightness = (mx + mn) / 2

    if mx == mn:
        return HSL(0.0, 0.0, lightness)

    d = mx - mn
    s = d / (2 - mx - mn) if lightness > 0.5 else d / (mx + mn)
    return HSL(_hue(r, g, b, mx, d), s, lightness)


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h: float, s: float, l: float) -> RGB:  # noqa: E741
    h = normalize_hue(h) / 360
    s = clamp01(s)
    l = clamp01(l)  # noqa: E741

    if s == 0:
        grey = clamp_channel(l * 255)
        return RGB(grey, grey, grey)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return RGB(
        clamp_channel(_hue_to_channel(p, q, h + 1 / 3) * 255),
        clamp_channel(_hue_to_channel(p, q, h) * 255),
        clamp_channel(_hue_to_channel(p, q, h - 1 / 3) * 255),
    )


def rgb_to_hsv(r: float, g: float, b: float) -> HSV:
    r, g, b = (clamp_channel(c) / 255 for c in (r, g, b))
    mx = max(r, g, b)
    mn = min(r, g, b)
    d = mx - mn
    s = 0.0 if mx == 0 else d / mx
    h = 0.0 if d == 0 else _hue(r, g, b, mx, d)
    return HSV(h, s, mx)


def hsv_to_rgb(h: float, s: float, v: float) -> RGB:
    h = normalize_hue(h) / 60
    s = clamp01(s)
    v = clamp01(v)

    i = int(math.floor(h)) % 6
    f = h - math.floor(h)
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)
    r, g, b = [
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    ][i]
    return RGB(clamp_channel(r * 255), clamp_channel(g * 255), clamp_channel(b * 255))


def colour_from_hue(h: float, s: float, l: float) -> str:  # noqa: E741
    """Hex colour for a hue at the given saturation and lightness."""
    return format_hex(hsl_to_rgb(h, s, l))
