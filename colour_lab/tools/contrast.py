"""WCAG contrast check between a text colour and a background.

Reports the contrast ratio (1-21), a one-word rating, and pass/fail for
the four WCAG rows:

    AA Normal  ≥ 4.5    AA Large  ≥ 3
    AAA Normal ≥ 7      AAA Large ≥ 4.5

--swap exchanges foreground and background (the ratio is symmetric, so
only the preview changes). --fail-under N exits 1 when the ratio is
below N, for CI gating. --out-dir saves contrast.png (bg then fg).

Example:
    colour-lab contrast --fg '#000000' --bg '#ffffff'
    colour-lab contrast --fg '#767676' --bg '#ffffff' --fail-under 4.5
"""

import os

from colour_lab.core.metrics import contrast_ratio, rating, wcag_checks, wcag_level
from colour_lab.core.types import Report, Tool
from colour_lab.tools._args import hex_colour
from colour_lab.tools._render import save_swatches

tool = Tool(
    name='contrast',
    help='WCAG contrast ratio between foreground and background, with AA/AAA verdicts.',
)


@tool.arguments
def arguments(parser) -> None:
    parser.add_argument('-f', '--fg', type=hex_colour, default='#000000', help='Text colour (default #000000)')
    parser.add_argument('-b', '--bg', type=hex_colour, default='#ffffff', help='Background colour (default #ffffff)')
    parser.add_argument('--swap', action='store_true', help='Swap foreground and background')
    parser.add_argument(
        '--fail-under',
        type=float,
        default=None,
        metavar='N',
        help='Exit 1 if the contrast ratio is below N (CI gating)',
    )


@tool.run
def run(report: Report, args) -> None:
    fg, bg = args.fg, args.bg
    if getattr(args, 'swap', False):
        fg, bg = bg, fg

    ratio = contrast_ratio(fg, bg)
    checks = wcag_checks(ratio)
    for check in checks:
        if check.passed:
            report.record_pass()
        else:
            report.record_fail()

    report.add(
        'contrast',
        {
            'fg': fg,
            'bg': bg,
            'ratio': ratio,
            'rating': rating(ratio),
            'level': wcag_level(ratio),
            'checks': [
                {'title': c.title, 'minimum': c.minimum, 'pass': c.passed, 'desc': c.desc} for c in checks
            ],
        },
    )

    out_dir = getattr(args, 'out_dir', None)
    if out_dir:
        report.add_preview(save_swatches([bg, fg], os.path.join(out_dir, 'contrast.png')))
