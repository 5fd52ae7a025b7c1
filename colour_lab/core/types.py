"""Shared types for colour-lab: colour values, stops, harmonies, Tool, Report."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from typing import Any, NamedTuple


class RGB(NamedTuple):
    """8-bit additive colour. Channels are integers in [0, 255]."""

    r: int
    g: int
    b: int


class HSL(NamedTuple):
    h: float  # degrees, [0, 360)
    s: float  # [0, 1]
    l: float  # noqa: E741  [0, 1]


class HSV(NamedTuple):
    h: float  # degrees, [0, 360)
    s: float  # [0, 1]
    v: float  # [0, 1]


@dataclass(frozen=True)
class ColorStop:
    """A (colour, position) pair on a gradient. `id` is only used for editing."""

    id: str
    color: str  # hex string
    position: float  # percentage, [0, 100]


@dataclass(frozen=True)
class HarmonySwatch:
    hex: str
    h: float
    tag: str


@dataclass(frozen=True)
class HarmonyResult:
    """Base colour plus its seven derived harmony swatches."""

    base: HarmonySwatch
    comp: HarmonySwatch
    ana1: HarmonySwatch
    ana2: HarmonySwatch
    tri1: HarmonySwatch
    tri2: HarmonySwatch
    split1: HarmonySwatch
    split2: HarmonySwatch

    def roles(self) -> Iterator[tuple[str, HarmonySwatch]]:
        """Yield (role, swatch) in display order."""
        for role in ('base', 'ana1', 'ana2', 'comp', 'split1', 'split2', 'tri1', 'tri2'):
            yield role, getattr(self, role)


@dataclass(frozen=True)
class HarmonyRing:
    """One concentric ring of the harmony-rings view."""

    name: str
    hues: tuple[float, ...]
    colors: tuple[str, ...]


@dataclass(frozen=True)
class ClampPolicy:
    """Saturation floor and lightness band applied before deriving harmonies."""

    s_floor: float = 0.0
    l_min: float = 0.0
    l_max: float = 1.0


@dataclass(frozen=True)
class Palette:
    """AI-generated palette record. Only displayed, never computed here."""

    name: str
    description: str
    colors: tuple[str, ...]


@dataclass(frozen=True)
class WcagCheck:
    title: str
    minimum: float
    passed: bool
    desc: str = ''


class Tool:
    """A self-registering colour-lab subcommand.

    Usage in a tool module:

        tool = Tool(name='mix', help='Blend two colours')

        @tool.arguments
        def arguments(parser):
            parser.add_argument('--c1', ...)

        @tool.run
        def run(report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._args_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the argparse hook for tool-specific options."""
        self._args_fn = fn
        return fn

    def add_arguments(self, parser: Any) -> None:
        if self._args_fn is not None:
            self._args_fn(parser)

    def execute(self, report: Report, args: Any) -> None:
        """Execute the tool's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Tool {self.name} has no run function')
        self._run_fn(report, args)


@dataclass
class Report:
    """Accumulates results from tools for text/JSON output."""

    sections: dict[str, dict[str, Any]] = field(default_factory=dict)
    previews: list[str] = field(default_factory=list)
    pass_count: int = 0
    fail_count: int = 0

    def add(self, tool_name: str, data: dict[str, Any]) -> None:
        """Add (or extend) the results section for a tool."""
        self.sections.setdefault(tool_name, {}).update(data)

    def add_preview(self, path: str) -> None:
        self.previews.append(path)

    def record_pass(self) -> None:
        self.pass_count += 1

    def record_fail(self) -> None:
        self.fail_count += 1
