"""Hue-rotation harmonies: wheel relationships, harmony rings, wheel picking.

Every derived colour shares the base colour's saturation and lightness
after a ClampPolicy is applied. The wheel uses a plain clamp into [0, 1].
The rings view floors saturation at 0.5 and holds lightness in
[0.45, 0.65] so every ring segment stays legible. Both policies are tuned
by eye, not derived.

Everything here is a pure function of (base colour, offset table, policy).
"""

import math
from collections.abc import Sequence
from types import MappingProxyType

import numpy as np

from colour_lab.core.convert import clamp01, colour_from_hue, hsl_to_rgb, normalize_hue, rgb_to_hsl
from colour_lab.core.palette import as_rgb, format_hex
from colour_lab.core.types import HSL, ClampPolicy, ColorStop, HarmonyResult, HarmonyRing, HarmonySwatch

WHEEL_POLICY = ClampPolicy()
RING_POLICY = ClampPolicy(s_floor=0.5, l_min=0.45, l_max=0.65)

# role -> (hue offset in degrees, tag)
HARMONY_OFFSETS = MappingProxyType(
    {
        'base': (0, 'Base'),
        'comp': (180, 'Complement'),
        'ana1': (-30, 'Analogous -30°'),
        'ana2': (30, 'Analogous +30°'),
        'tri1': (120, 'Triadic +120°'),
        'tri2': (-120, 'Triadic -120°'),
        'split1': (150, 'Split +150°'),
        'split2': (-150, 'Split -150°'),
    }
)

# ring name -> hue offsets, innermost ring first
RING_OFFSETS: tuple[tuple[str, tuple[int, ...]], ...] = (
    ('Base', (0,)),
    ('Complement', (0, 180)),
    ('Triadic', (0, 120, 240)),
    ('Tetradic', (0, 90, 180, 270)),
    ('Analogous', (0, -30, 30)),
    ('Split', (0, 150, 210)),
)

# Wheel pick defaults when saturation/lightness are not kept
PICK_SATURATION = 0.55
PICK_LIGHTNESS = 0.58

WHEEL_RANDOM_S = (0.55, 0.70)
WHEEL_RANDOM_L = (0.54, 0.66)
RING_RANDOM_S = (0.5, 0.8)
RING_RANDOM_L = (0.5, 0.65)


def apply_policy(hsl: HSL, policy: ClampPolicy) -> HSL:
    s = max(policy.s_floor, clamp01(hsl.s))
    lightness = max(policy.l_min, min(policy.l_max, clamp01(hsl.l)))
    return HSL(hsl.h, s, lightness)


def base_hsl(base: str | Sequence[int], policy: ClampPolicy = WHEEL_POLICY) -> HSL:
    """HSL of the base colour with the policy applied."""
    return apply_policy(rgb_to_hsl(*as_rgb(base)), policy)


def rotate(h: float, offset: float) -> float:
    return normalize_hue(h + offset)


def derive_harmonies(base: str | Sequence[int], policy: ClampPolicy = WHEEL_POLICY) -> HarmonyResult:
    """Derive the eight wheel swatches (base, complement, analogous, triadic, split)."""
    h, s, lightness = base_hsl(base, policy)
    swatches = {}
    for role, (offset, tag) in HARMONY_OFFSETS.items():
        hue = rotate(h, offset)
        swatches[role] = HarmonySwatch(hex=format_hex(hsl_to_rgb(hue, s, lightness)), h=hue, tag=tag)
    return HarmonyResult(**swatches)


def derive_rings(base: str | Sequence[int], policy: ClampPolicy = RING_POLICY) -> tuple[HarmonyRing, ...]:
    """Derive the six concentric harmony rings, innermost first."""
    h, s, lightness = base_hsl(base, policy)
    rings = []
    for name, offsets in RING_OFFSETS:
        hues = tuple(rotate(h, o) for o in offsets)
        colors = tuple(colour_from_hue(hue, s, lightness) for hue in hues)
        rings.append(HarmonyRing(name=name, hues=hues, colors=colors))
    return tuple(rings)


def ring_stops(ring: HarmonyRing) -> list[ColorStop]:
    """Hard-edged conic stops: one equal segment per ring colour."""
    n = len(ring.colors)
    stops = []
    for i, colour in enumerate(ring.colors):
        stops.append(ColorStop(id=f'{ring.name.lower()}-{i}a', color=colour, position=i * 100 / n))
        stops.append(ColorStop(id=f'{ring.name.lower()}-{i}b', color=colour, position=(i + 1) * 100 / n))
    return stops


def hue_at(dx: float, dy: float) -> float:
    """Wheel hue for a point offset (dx, dy) from the centre.

    Screen coordinates (y grows downwards); 0° sits at the top of the wheel.
    """
    return normalize_hue(math.degrees(math.atan2(dy, dx)) + 90)


def pick_base(hue: float, current: str | Sequence[int] | None = None) -> str:
    """Colour for a wheel pick. Keeps `current`'s saturation/lightness if given."""
    if current is None:
        s, lightness = PICK_SATURATION, PICK_LIGHTNESS
    else:
        _h, s, lightness = rgb_to_hsl(*as_rgb(current))
    return colour_from_hue(hue, clamp01(s), clamp01(lightness))


def random_base(
    rng: np.random.Generator,
    s_range: tuple[float, float] = WHEEL_RANDOM_S,
    l_range: tuple[float, float] = WHEEL_RANDOM_L,
) -> str:
    """Random base colour. Hue is uniform over the wheel."""
    h = float(rng.uniform(0, 360))
    s = float(rng.uniform(*s_range))
    lightness = float(rng.uniform(*l_range))
    return colour_from_hue(h, s, lightness)
