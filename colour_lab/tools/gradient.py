"""Build a CSS gradient from colour stops.

Stops are given as HEX@POS (position in percent) and kept sorted by
position. Without --stop the three-stop teal/amber/violet default is
used. Kinds: linear and conic use --angle, radial ignores it.

Prints the ready-to-paste `background: ...;` declaration.
--out-dir saves gradient.png rendered the way a browser lays it out.

Example:
    colour-lab gradient --stop '#ff0000@0' --stop '#0000ff@100' --angle 90
    colour-lab gradient --kind conic --angle 45 --out-dir ./tmp
"""

import os

from colour_lab.core.gradient import KINDS, add_stop, css_declaration, new_stop, serialize_gradient
from colour_lab.core.types import Report, Tool
from colour_lab.tools._args import colour_stop
from colour_lab.tools._render import save_gradient

tool = Tool(
    name='gradient',
    help='Format colour stops as a linear, radial or conic CSS gradient.',
)

DEFAULT_STOPS = (('#6fb7b2', 0), ('#e39a57', 50), ('#8a7bb8', 100))


@tool.arguments
def arguments(parser) -> None:
    parser.add_argument(
        '-s',
        '--stop',
        type=colour_stop,
        action='append',
        metavar='HEX@POS',
        help='Colour stop, e.g. #ff0000@0 (repeatable; at least two)',
    )
    parser.add_argument('-k', '--kind', choices=KINDS, default='linear', help='Gradient kind (default linear)')
    parser.add_argument('-a', '--angle', type=float, default=135, help='Angle in degrees (default 135)')


@tool.run
def run(report: Report, args) -> None:
    given = getattr(args, 'stop', None) or [new_stop(c, p) for c, p in DEFAULT_STOPS]
    stops = []
    for stop in given:
        stops = add_stop(stops, stop)
    if len(stops) < 2:
        report.add('gradient', {'error': 'at least two --stop values are required'})
        return

    kind = getattr(args, 'kind', 'linear')
    angle = getattr(args, 'angle', 135)
    report.add(
        'gradient',
        {
            'kind': kind,
            'angle': angle,
            'stops': [{'id': s.id, 'color': s.color, 'position': s.position} for s in stops],
            'gradient': serialize_gradient(stops, kind, angle),
            'css': css_declaration(stops, kind, angle),
        },
    )

    out_dir = getattr(args, 'out_dir', None)
    if out_dir:
        path = os.path.join(out_dir, 'gradient.png')
        report.add_preview(save_gradient(stops, path, kind=kind, angle=angle))
