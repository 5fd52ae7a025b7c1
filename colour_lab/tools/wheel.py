"""Colour-wheel analysis: HSL/HSV readout and the eight harmony swatches.

Derives Base, Complement, Analogous ±30°, Triadic ±120° and Split ±150°
from the base colour. Every swatch keeps the base saturation and
lightness (clamped into [0, 1]).

--pick DX,DY sets the base hue from a point on the wheel, measured from
its centre in screen coordinates (0° at the top). The picked colour uses
S 55% / L 58% unless --keep is given, which keeps the base's own.

--random draws a base with S 55-70% and L 54-66%; --seed makes it
repeatable. --out-dir saves wheel.png (the swatch strip).

Example:
    colour-lab wheel --base '#5e8fbf'
    colour-lab wheel --base '#5e8fbf' --pick 0,-100 --keep
    colour-lab wheel --random --seed 7 --json
"""

import os

from colour_lab.core.convert import rgb_to_hsl, rgb_to_hsv
from colour_lab.core.harmony import derive_harmonies, hue_at, pick_base
from colour_lab.core.palette import PRESETS, parse_hex
from colour_lab.core.types import Report, Tool
from colour_lab.tools._args import hex_colour, point, resolve_base
from colour_lab.tools._render import save_swatches

tool = Tool(
    name='wheel',
    help='HSL/HSV readout and harmony swatches (complement, analogous, triadic, split).',
)

DEFAULT_BASE = '#5e8fbf'


@tool.arguments
def arguments(parser) -> None:
    parser.add_argument(
        '-b', '--base', type=hex_colour, default=DEFAULT_BASE, help=f'Base colour (default {DEFAULT_BASE})'
    )
    parser.add_argument('--pick', type=point, metavar='DX,DY', help='Set the base hue from a wheel offset')
    parser.add_argument('--keep', action='store_true', help='With --pick, keep base saturation/lightness')
    parser.add_argument('--random', action='store_true', help='Random base colour')
    parser.add_argument('--seed', type=int, default=None, help='Seed for --random')
    parser.add_argument('--presets', action='store_true', help='Also list the preset swatches')


@tool.run
def run(report: Report, args) -> None:
    base = resolve_base(args)
    pick = getattr(args, 'pick', None)
    if pick is not None:
        base = pick_base(hue_at(*pick), current=base if getattr(args, 'keep', False) else None)

    rgb = parse_hex(base)
    hsl = rgb_to_hsl(*rgb)
    hsv = rgb_to_hsv(*rgb)
    harmonies = derive_harmonies(rgb)

    data = {
        'base': base,
        'rgb': list(rgb),
        'hsl': hsl._asdict(),
        'hsv': hsv._asdict(),
        'harmonies': [{'role': role, 'tag': sw.tag, 'hex': sw.hex, 'h': sw.h} for role, sw in harmonies.roles()],
    }
    if getattr(args, 'presets', False):
        data['presets'] = list(PRESETS)
    report.add('wheel', data)

    out_dir = getattr(args, 'out_dir', None)
    if out_dir:
        colours = [sw.hex for _role, sw in harmonies.roles()]
        report.add_preview(save_swatches(colours, os.path.join(out_dir, 'wheel.png')))
