"""Blend two colours, additively (light) and subtractively (paint).

--weight is the share of --c1 in the mix: 1 gives c1, 0 gives c2,
0.5 the even blend. Additive mixing interpolates RGB linearly.
Subtractive mixing interpolates, then applies a gamma (default 1.2) to
approximate how pigments darken when mixed. It is a visual
approximation, not a pigment model.

--out-dir saves mix.png: c1, additive, subtractive, c2.

Example:
    colour-lab mix --c1 '#c95a4a' --c2 '#5e8fbf'
    colour-lab mix --c1 '#c95a4a' --c2 '#5e8fbf' --weight 0.25 --json
"""

import os

from colour_lab.core.convert import clamp01
from colour_lab.core.mix import SUBTRACTIVE_GAMMA, mix_additive, mix_subtractive
from colour_lab.core.palette import format_hex
from colour_lab.core.types import Report, Tool
from colour_lab.tools._args import hex_colour
from colour_lab.tools._render import save_swatches

tool = Tool(
    name='mix',
    help='Additive and subtractive (pigment-style) mix of two colours.',
)


@tool.arguments
def arguments(parser) -> None:
    parser.add_argument('--c1', type=hex_colour, default='#c95a4a', help='First colour (default #c95a4a)')
    parser.add_argument('--c2', type=hex_colour, default='#5e8fbf', help='Second colour (default #5e8fbf)')
    parser.add_argument('-w', '--weight', type=float, default=0.5, help='Share of c1, 0..1 (default 0.5)')
    parser.add_argument(
        '--gamma',
        type=float,
        default=SUBTRACTIVE_GAMMA,
        help=f'Subtractive gamma (default {SUBTRACTIVE_GAMMA})',
    )


@tool.run
def run(report: Report, args) -> None:
    weight = clamp01(args.weight)
    gamma = getattr(args, 'gamma', SUBTRACTIVE_GAMMA)
    additive = format_hex(mix_additive(args.c1, args.c2, weight))
    subtractive = format_hex(mix_subtractive(args.c1, args.c2, weight, gamma=gamma))

    report.add(
        'mix',
        {
            'c1': args.c1,
            'c2': args.c2,
            'weight': weight,
            'gamma': gamma,
            'additive': additive,
            'subtractive': subtractive,
        },
    )

    out_dir = getattr(args, 'out_dir', None)
    if out_dir:
        colours = [args.c1, additive, subtractive, args.c2]
        report.add_preview(save_swatches(colours, os.path.join(out_dir, 'mix.png')))
