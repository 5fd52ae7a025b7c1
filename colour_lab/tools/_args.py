"""argparse value types shared by tools."""

import argparse

import numpy as np

from colour_lab.core.gradient import new_stop
from colour_lab.core.harmony import WHEEL_RANDOM_L, WHEEL_RANDOM_S, random_base
from colour_lab.core.palette import InvalidFormat, normalize_hex
from colour_lab.core.types import ColorStop


def hex_colour(text: str) -> str:
    """`#rrggbb` / `#rgb` -> canonical lowercase `#rrggbb`. A missing # is tolerated."""
    candidate = text if text.startswith('#') else f'#{text}'
    try:
        return normalize_hex(candidate)
    except InvalidFormat as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def point(text: str) -> tuple[float, float]:
    """'DX,DY' -> (dx, dy)."""
    parts = text.split(',')
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f'Expected DX,DY, got {text!r}')
    try:
        return float(parts[0]), float(parts[1])
    except ValueError as e:
        raise argparse.ArgumentTypeError(f'Expected DX,DY, got {text!r}') from e


def colour_stop(text: str) -> ColorStop:
    """'HEX@POS' -> ColorStop. POS is a percentage; a trailing % is allowed."""
    colour, sep, pos = text.partition('@')
    if not sep:
        raise argparse.ArgumentTypeError(f'Expected HEX@POS, got {text!r}')
    try:
        position = float(pos.rstrip('%'))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f'Bad stop position in {text!r}') from e
    return new_stop(hex_colour(colour), max(0.0, min(100.0, position)))


def resolve_base(
    args: argparse.Namespace,
    s_range: tuple[float, float] = WHEEL_RANDOM_S,
    l_range: tuple[float, float] = WHEEL_RANDOM_L,
) -> str:
    """Base colour from --base, or a random one when --random is set."""
    if getattr(args, 'random', False):
        rng = np.random.default_rng(getattr(args, 'seed', None))
        return random_base(rng, s_range, l_range)
    return args.base
