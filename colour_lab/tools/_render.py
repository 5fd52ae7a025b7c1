"""PNG previews for tools: swatch strips and rasterised gradients.

Gradients are sampled the way CSS lays them out:
  linear  0deg points up, 90deg points right; the gradient line spans the
          box corner to corner along the angle.
  radial  circle centred in the box, 100% at the farthest corner.
  conic   0deg at the top, clockwise, starting at `from <angle>deg`.

Stop positions that go backwards are clamped to the previous position,
as browsers do.
"""

import os
from collections.abc import Sequence

import numpy as np
from PIL import Image

from colour_lab.core.palette import parse_hex
from colour_lab.core.types import ColorStop


def save_swatches(colors: Sequence[str], path: str, size: int = 64) -> str:
    """Save a horizontal strip of square swatches."""
    arr = np.zeros((size, size * max(len(colors), 1), 3), dtype=np.uint8)
    for i, hx in enumerate(colors):
        arr[:, i * size : (i + 1) * size] = parse_hex(hx)
    _ensure_dir(path)
    Image.fromarray(arr).save(path)
    return path


def gradient_field(kind: str, angle: float, width: int, height: int) -> np.ndarray:
    """Per-pixel gradient parameter t (0 at the first stop, 1 at 100%)."""
    ys, xs = np.mgrid[0:height, 0:width].astype(float)
    x = xs + 0.5 - width / 2
    y = ys + 0.5 - height / 2

    if kind == 'linear':
        a = np.radians(angle)
        length = abs(width * np.sin(a)) + abs(height * np.cos(a))
        return (x * np.sin(a) - y * np.cos(a)) / length + 0.5
    if kind == 'radial':
        return np.hypot(x, y) / np.hypot(width / 2, height / 2)
    if kind == 'conic':
        deg = np.degrees(np.arctan2(x, -y))
        return ((deg - angle) % 360) / 360
    raise ValueError(f'Unknown gradient kind: {kind!r}')


def sample_stops(stops: Sequence[ColorStop], t: np.ndarray) -> np.ndarray:
    """Interpolate stop colours at every t. Returns uint8 RGB with t's shape + (3,)."""
    positions = np.maximum.accumulate(np.array([s.position for s in stops], dtype=float)) / 100
    colours = np.array([parse_hex(s.color) for s in stops], dtype=float)
    channels = [np.interp(t, positions, colours[:, i]) for i in range(3)]
    out = np.floor(np.stack(channels, axis=-1) + 0.5)
    return np.clip(out, 0, 255).astype(np.uint8)


def render_gradient(
    stops: Sequence[ColorStop], kind: str = 'linear', angle: float = 135, width: int = 320, height: int = 160
) -> Image.Image:
    return Image.fromarray(sample_stops(stops, gradient_field(kind, angle, width, height)))


def save_gradient(
    stops: Sequence[ColorStop],
    path: str,
    kind: str = 'linear',
    angle: float = 135,
    width: int = 320,
    height: int = 160,
) -> str:
    _ensure_dir(path)
    render_gradient(stops, kind, angle, width, height).save(path)
    return path


def _ensure_dir(path: str) -> None:
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)
