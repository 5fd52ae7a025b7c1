"""Harmony rings: six concentric rings of hue relationships around a base.

Rings, innermost first: Base, Complement, Triadic, Tetradic, Analogous,
Split. Each ring is an equal-segment conic gradient of its colours.

Saturation is floored at 50% and lightness held within 45-65% so every
segment stays readable whatever the base colour.

--random draws a base with S 50-80% and L 50-65%. --out-dir saves one
PNG per ring (ring_<name>.png) rendered from its conic gradient.

Example:
    colour-lab rings --base '#5e8fbf'
    colour-lab rings --random --seed 3 --out-dir ./tmp
"""

import os

from colour_lab.core.gradient import serialize_gradient
from colour_lab.core.harmony import RING_POLICY, RING_RANDOM_L, RING_RANDOM_S, base_hsl, derive_rings, ring_stops
from colour_lab.core.types import Report, Tool
from colour_lab.tools._args import hex_colour, resolve_base
from colour_lab.tools._render import save_gradient

tool = Tool(
    name='rings',
    help='Concentric harmony rings (complement, triadic, tetradic, analogous, split).',
)

DEFAULT_BASE = '#5e8fbf'


@tool.arguments
def arguments(parser) -> None:
    parser.add_argument(
        '-b', '--base', type=hex_colour, default=DEFAULT_BASE, help=f'Base colour (default {DEFAULT_BASE})'
    )
    parser.add_argument('--random', action='store_true', help='Random base colour')
    parser.add_argument('--seed', type=int, default=None, help='Seed for --random')


@tool.run
def run(report: Report, args) -> None:
    base = resolve_base(args, RING_RANDOM_S, RING_RANDOM_L)
    _h, s, lightness = base_hsl(base, RING_POLICY)
    rings = derive_rings(base)

    out_dir = getattr(args, 'out_dir', None)
    ring_data = []
    for ring in rings:
        stops = ring_stops(ring)
        ring_data.append(
            {
                'name': ring.name,
                'hues': list(ring.hues),
                'colors': list(ring.colors),
                'css': serialize_gradient(stops, 'conic', 0),
            }
        )
        if out_dir:
            path = os.path.join(out_dir, f'ring_{ring.name.lower()}.png')
            report.add_preview(save_gradient(stops, path, kind='conic', angle=0, width=160, height=160))

    report.add('rings', {'base': base, 's': s, 'l': lightness, 'rings': ring_data})
