"""colour_lab.core: Colour-science engine.

Contains the value types, hex codec, colour-space conversions, WCAG
metrics, harmony generator, mixers and gradient serializer, plus the
.env loader and report formatter used by the CLI.
This module has NO dependencies on colour_lab.tools or colour_lab.registry.
Apart from report/env, everything here is pure: no I/O, no printing.
"""

from colour_lab.core.convert import hsl_to_rgb, hsv_to_rgb, rgb_to_hsl, rgb_to_hsv
from colour_lab.core.gradient import serialize_gradient
from colour_lab.core.harmony import derive_harmonies, derive_rings
from colour_lab.core.metrics import contrast_ratio, relative_luminance
from colour_lab.core.mix import mix_additive, mix_subtractive
from colour_lab.core.palette import InvalidFormat, format_hex, parse_hex
from colour_lab.core.types import HSL, HSV, RGB, ColorStop, HarmonyResult, Palette

__all__ = [
    'HSL',
    'HSV',
    'RGB',
    'ColorStop',
    'HarmonyResult',
    'InvalidFormat',
    'Palette',
    'contrast_ratio',
    'derive_harmonies',
    'derive_rings',
    'format_hex',
    'hsl_to_rgb',
    'hsv_to_rgb',
    'mix_additive',
    'mix_subtractive',
    'parse_hex',
    'relative_luminance',
    'rgb_to_hsl',
    'rgb_to_hsv',
    'serialize_gradient',
]
