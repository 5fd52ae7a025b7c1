"""CSS gradient descriptors and colour-stop list editing.

serialize_gradient formats stops exactly in the order given. It does not
sort or validate positions; keeping stops ordered is the caller's job
(add_stop does this for you).
"""

import uuid
from collections.abc import Sequence
from dataclasses import replace
from typing import Literal

from colour_lab.core.types import ColorStop

GradientKind = Literal['linear', 'radial', 'conic']
KINDS: tuple[str, ...] = ('linear', 'radial', 'conic')

MIN_STOPS = 2


def _num(x: float) -> str:
    """Compact fixed-point text: 90.0 -> '90', 33.3333 -> '33.33', never exponent form."""
    text = f'{float(x):.2f}'.rstrip('0').rstrip('.')
    return '0' if text == '-0' else text


def stop_text(stop: ColorStop) -> str:
    return f'{stop.color.lower()} {_num(stop.position)}%'


def serialize_gradient(stops: Sequence[ColorStop], kind: GradientKind = 'linear', angle: float = 135) -> str:
    """Format stops as a CSS gradient. `angle` is ignored for radial gradients."""
    body = ', '.join(stop_text(s) for s in stops)
    if kind == 'linear':
        return f'linear-gradient({_num(angle)}deg, {body})'
    if kind == 'radial':
        return f'radial-gradient(circle, {body})'
    if kind == 'conic':
        return f'conic-gradient(from {_num(angle)}deg, {body})'
    raise ValueError(f'Unknown gradient kind: {kind!r}. Expected one of {", ".join(KINDS)}')


def css_declaration(stops: Sequence[ColorStop], kind: GradientKind = 'linear', angle: float = 135) -> str:
    """The `background: ...;` line offered for copying."""
    return f'background: {serialize_gradient(stops, kind, angle)};'


def new_stop(color: str, position: float) -> ColorStop:
    return ColorStop(id=uuid.uuid4().hex[:9], color=color, position=position)


def add_stop(stops: Sequence[ColorStop], stop: ColorStop) -> list[ColorStop]:
    """Insert a stop and return the list sorted by position."""
    return sorted([*stops, stop], key=lambda s: s.position)


def remove_stop(stops: Sequence[ColorStop], stop_id: str) -> list[ColorStop]:
    """Remove a stop by id. A gradient never drops below two stops."""
    if len(stops) <= MIN_STOPS:
        return list(stops)
    return [s for s in stops if s.id != stop_id]


def update_stop(stops: Sequence[ColorStop], stop_id: str, **changes) -> list[ColorStop]:
    """Replace fields (color and/or position) of the stop with `stop_id`."""
    return [replace(s, **changes) if s.id == stop_id else s for s in stops]
