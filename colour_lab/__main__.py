"""colour-lab: a colour-theory toolkit for wheel, harmony rings, contrast, mixing and gradients.

Usage: colour-lab <tool> [options]

Tools are auto-discovered from colour_lab/tools/.
Each tool module's docstring is its documentation.
Run `colour-lab help <tool>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, colour-lab looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import sys

from colour_lab import registry
from colour_lab.core.env import load_env
from colour_lab.core.report import format_json, format_text
from colour_lab.core.types import Report


def _load_tool_module(name: str) -> object:
    """Load the raw module for a tool (for docstring access)."""
    return importlib.import_module(f'colour_lab.tools.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_tool_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    tools = registry.all_tools()

    epilog = (
        'Examples:\n'
        "  colour-lab wheel --base '#5e8fbf'\n"
        '  colour-lab rings --random --seed 3 --out-dir ./tmp\n'
        "  colour-lab contrast --fg '#767676' --bg '#ffffff' --fail-under 4.5\n"
        "  colour-lab mix --c1 '#c95a4a' --c2 '#5e8fbf' --weight 0.25\n"
        "  colour-lab gradient --stop '#ff0000@0' --stop '#0000ff@100' --angle 90\n"
        "  colour-lab palettes --keyword 'autumn harbour' --json\n"
        '  colour-lab help gradient\n'
        '\n'
        'Provider env vars for palettes (set in .env or environment):\n'
        '  GEMINI_API_KEY  (default provider, OpenAI-compatible endpoint built in)\n'
        '  OPENAI_API_KEY, GROQ_API_KEY, MISTRAL_API_KEY\n'
        '  Any OpenAI-compatible: NAME_API_KEY + NAME_API_URL + NAME_MODEL\n'
    )
    parser = argparse.ArgumentParser(
        prog='colour-lab',
        description='Colour-theory toolkit: wheel, harmony rings, contrast, mixing, gradients.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    sub = parser.add_subparsers(dest='tool', help='Tool to run')

    for name, tool in sorted(tools.items()):
        p = sub.add_parser(name, help=_short_help(name, tool.help))
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        p.add_argument('-o', '--out-dir', metavar='DIR', default=None, help='Write PNG previews into DIR')
        tool.add_arguments(p)

    # `help` subcommand prints full module docstring for a tool
    help_parser = sub.add_parser('help', help='Print full docs for a tool')
    help_parser.add_argument('command', nargs='?', help='Tool name')

    return parser


def _print_help(command: str | None) -> None:
    """Print full module docstring for a tool."""
    tools = registry.all_tools()

    if command is None:
        print('Available tools:\n')
        for name, tool in sorted(tools.items()):
            print(f'  {name:<10} {_short_help(name, tool.help)}')
        print('\nRun: colour-lab help <tool> for full docs.')
        return

    if command not in tools:
        print(f'Unknown tool: {command}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(tools))}', file=sys.stderr)
        sys.exit(1)

    doc = (_load_tool_module(command).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {command!r})')
        return
    print(doc)


def _check_fail_under(report: Report, threshold: float) -> bool:
    """Return True if the contrast ratio is below threshold."""
    ratio = report.sections.get('contrast', {}).get('ratio')
    if ratio is not None and ratio < threshold:
        print(f'\nFAIL: contrast {ratio:.2f}:1 is below {threshold}:1')
        return True
    return False


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=getattr(args, 'env_file', None))
    if env_path:
        print(f'colour-lab: loaded {env_path}', file=sys.stderr)

    if not args.tool:
        parser.print_help()
        sys.exit(1)

    if args.tool == 'help':
        _print_help(getattr(args, 'command', None))
        return

    report = Report()
    tool = registry.get(args.tool)
    tool.execute(report, args)

    if args.json:
        print(format_json(report))
    else:
        print(format_text(report))

    if any('error' in section for section in report.sections.values()):
        sys.exit(1)

    # CI gate, after output so the report is visible even on failure
    threshold = getattr(args, 'fail_under', None)
    if threshold is not None and _check_fail_under(report, threshold):
        sys.exit(1)


if __name__ == '__main__':
    main()
