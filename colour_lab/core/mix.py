"""Two-colour blending.

mix_additive is plain linear interpolation in RGB (light on screens).

mix_subtractive is a rough paint-style approximation: interpolate the
normalised channels, then raise to a fixed gamma, which darkens mid-tones
the way pigment mixes tend to. It is not a physical model, has no
inverse, and only guarantees monotonicity in the weight.
"""

from collections.abc import Sequence

from colour_lab.core.convert import clamp01
from colour_lab.core.palette import as_rgb, clamp_channel
from colour_lab.core.types import RGB

SUBTRACTIVE_GAMMA = 1.2

Colour = str | Sequence[int]


def mix_additive(c1: Colour, c2: Colour, w: float) -> RGB:
    """round(c1*w + c2*(1-w)) per channel. w=1 gives c1, w=0 gives c2."""
    a = as_rgb(c1)
    b = as_rgb(c2)
    w1 = clamp01(w)
    w2 = 1 - w1
    return RGB(*(clamp_channel(x * w1 + y * w2) for x, y in zip(a, b)))


def mix_subtractive(c1: Colour, c2: Colour, w: float, gamma: float = SUBTRACTIVE_GAMMA) -> RGB:
    a = as_rgb(c1)
    b = as_rgb(c2)
    w1 = clamp01(w)
    w2 = 1 - w1
    return RGB(*(clamp_channel(255 * ((x / 255) * w1 + (y / 255) * w2) ** gamma) for x, y in zip(a, b)))
