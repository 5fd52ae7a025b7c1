"""Report builder: text and JSON output for colour-lab results."""

import json
from typing import Any

from colour_lab.core.types import Report


def _wheel_lines(data: dict[str, Any]) -> list[str]:
    hsl = data['hsl']
    hsv = data['hsv']
    r, g, b = data['rgb']
    lines = [
        f'  base: {data["base"]}  rgb({r}, {g}, {b})',
        f'  H {round(hsl["h"])}° S {round(hsl["s"] * 100)}% L {round(hsl["l"] * 100)}%'
        f'   (HSV S {round(hsv["s"] * 100)}% V {round(hsv["v"] * 100)}%)',
    ]
    for sw in data.get('harmonies', []):
        lines.append(f'  {sw["tag"]:<16} {sw["hex"]}  h={round(sw["h"])}°')
    if data.get('presets'):
        lines.append(f'  presets: {" ".join(data["presets"])}')
    return lines


def _rings_lines(data: dict[str, Any]) -> list[str]:
    lines = [f'  base: {data["base"]}  S {round(data["s"] * 100)}% L {round(data["l"] * 100)}%']
    for ring in data.get('rings', []):
        lines.append(f'  {ring["name"]:<11} {" ".join(ring["colors"])}')
    return lines


def _contrast_lines(data: dict[str, Any]) -> list[str]:
    lines = [
        f'  fg {data["fg"]} on bg {data["bg"]}',
        f'  ratio: {data["ratio"]:.2f}:1  {data["rating"]}',
    ]
    for check in data.get('checks', []):
        mark = '✓' if check['pass'] else '✗'
        lines.append(f'  {check["title"]:<16} ≥{check["minimum"]:<4} {mark}  {check["desc"]}')
    return lines


def _mix_lines(data: dict[str, Any]) -> list[str]:
    return [
        f'  {data["c1"]} × {round(data["weight"] * 100)}%  +  {data["c2"]}',
        f'  additive:    {data["additive"]}',
        f'  subtractive: {data["subtractive"]}  (gamma {data["gamma"]})',
    ]


def _gradient_lines(data: dict[str, Any]) -> list[str]:
    return [f'  {data["css"]}']


def _palettes_lines(data: dict[str, Any]) -> list[str]:
    palettes = data.get('palettes', [])
    if not palettes:
        return [f'  no palettes for {data.get("keyword", "")!r}']
    lines = []
    for p in palettes:
        lines.append(f'  {p["name"]}: {" ".join(p["colors"])}')
        lines.append(f'    {p["description"]}')
    return lines


_FORMATTERS = {
    'wheel': _wheel_lines,
    'rings': _rings_lines,
    'contrast': _contrast_lines,
    'mix': _mix_lines,
    'gradient': _gradient_lines,
    'palettes': _palettes_lines,
}


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    for tool_name, data in report.sections.items():
        lines.append(f'── {tool_name}')
        formatter = _FORMATTERS.get(tool_name)
        if 'error' in data:
            lines.append(f'  error: {data["error"]}')
        elif formatter:
            lines.extend(formatter(data))
        else:
            for k, v in data.items():
                lines.append(f'  {tool_name}.{k}: {v}')
        lines.append('')

    for path in report.previews:
        lines.append(f'preview: {path}')

    total = report.pass_count + report.fail_count
    if total > 0:
        lines.append(f'PASS {report.pass_count}/{total} checks  FAIL {report.fail_count}/{total} checks')
    return '\n'.join(lines).rstrip('\n')


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = dict(report.sections)
    if report.previews:
        obj['previews'] = list(report.previews)
    total = report.pass_count + report.fail_count
    if total > 0:
        obj['summary'] = {'total': total, 'pass': report.pass_count, 'fail': report.fail_count}
    return json.dumps(obj, indent=2, ensure_ascii=False)
