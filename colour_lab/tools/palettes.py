"""Generate themed palettes from a keyword with an LLM.

Asks an OpenAI-compatible chat endpoint for distinct palettes, each with
a creative name, a one-sentence mood description and exactly five hex
colours. Records that do not have five valid hex colours are dropped.

Never fails loudly: a missing key, a missing `openai` package, a network
error or an unparseable reply all yield zero palettes and a message on
stderr.

## Provider configuration

    {PROVIDER}_API_KEY   required (or COLOUR_LAB_API_KEY)
    {PROVIDER}_API_URL   optional for built-in providers
    {PROVIDER}_MODEL     optional, overrides the default model

Built-in providers: gemini (default, gemini-2.5-flash), openai, groq,
mistral. Requires the `ai` extra: pip install 'colour-lab[ai]'.

Example:
    GEMINI_API_KEY=... colour-lab palettes --keyword 'autumn harbour'
    GROQ_API_KEY=...   colour-lab palettes --keyword neon --provider groq --json
"""

import json
import re
import sys
from typing import Any

from colour_lab.core.env import ProviderConfig, provider_config
from colour_lab.core.palette import is_hex, normalize_hex
from colour_lab.core.types import Palette, Report, Tool

tool = Tool(
    name='palettes',
    help='Ask an LLM for themed five-colour palettes from a keyword.',
)

PALETTE_SIZE = 5
DEFAULT_COUNT = 4

PROMPT = (
    'Generate {count} distinct, harmonious color palettes based on the theme or keyword: "{keyword}". '
    'Each palette should have a creative name, a brief 1-sentence description explaining the mood, '
    'and exactly 5 hex color codes. '
    'Reply with JSON only, shaped as '
    '{{"palettes": [{{"name": "...", "description": "...", "colors": ["#rrggbb", ...]}}]}}.'
)

_FENCE_RE = re.compile(r'^```(?:json)?\s*|\s*```$')


def parse_palettes(text: str) -> list[Palette]:
    """Palette records from an LLM reply. Malformed input gives an empty list."""
    try:
        payload = json.loads(_FENCE_RE.sub('', text.strip()))
    except (json.JSONDecodeError, AttributeError):
        return []

    if isinstance(payload, dict):
        payload = payload.get('palettes', [])
    if not isinstance(payload, list):
        return []

    palettes = []
    for item in payload:
        if not isinstance(item, dict):
            continue
        colors = item.get('colors')
        if not isinstance(colors, list) or len(colors) != PALETTE_SIZE or not all(is_hex(c) for c in colors):
            continue
        palettes.append(
            Palette(
                name=str(item.get('name', '')).strip() or 'Untitled',
                description=str(item.get('description', '')).strip(),
                colors=tuple(normalize_hex(c) for c in colors),
            )
        )
    return palettes


def _call_llm(config: ProviderConfig, prompt: str) -> str:
    """Send the prompt, return the reply text. Raises on any failure."""
    import openai  # type: ignore[import-untyped]

    client = openai.OpenAI(api_key=config.api_key, base_url=config.api_url)
    response = client.chat.completions.create(
        model=config.model,
        messages=[{'role': 'user', 'content': prompt}],
        response_format={'type': 'json_object'},
    )
    return response.choices[0].message.content or ''


def generate_palettes(keyword: str, config: ProviderConfig, count: int = DEFAULT_COUNT) -> list[Palette]:
    """Palettes for a keyword. Every failure is reported on stderr and yields []."""
    keyword = keyword.strip()
    if not keyword:
        return []

    missing = config.missing()
    if missing:
        print(f'palettes: set {", ".join(missing)}', file=sys.stderr)
        return []

    try:
        text = _call_llm(config, PROMPT.format(count=count, keyword=keyword))
    except ImportError:
        print("palettes: pip install 'colour-lab[ai]' (needs the openai package)", file=sys.stderr)
        return []
    except Exception as e:
        print(f'palettes: request failed: {e}', file=sys.stderr)
        return []

    palettes = parse_palettes(text)
    if not palettes:
        print('palettes: reply contained no usable palettes', file=sys.stderr)
    return palettes


@tool.arguments
def arguments(parser) -> None:
    parser.add_argument('-q', '--keyword', required=True, help='Theme or keyword, e.g. "autumn harbour"')
    parser.add_argument('-p', '--provider', default='gemini', help='LLM provider name (default: gemini)')
    parser.add_argument('-k', '--api-key', help='API key (overrides env var)')
    parser.add_argument(
        '-n', '--count', type=int, default=DEFAULT_COUNT, help=f'Palettes to ask for (default {DEFAULT_COUNT})'
    )


@tool.run
def run(report: Report, args) -> None:
    config = provider_config(getattr(args, 'provider', 'gemini'), getattr(args, 'api_key', None))
    print(f'palettes: provider={config.name}  model={config.model}  url={config.api_url}', file=sys.stderr)

    palettes = generate_palettes(args.keyword, config, getattr(args, 'count', DEFAULT_COUNT))
    data: dict[str, Any] = {
        'keyword': args.keyword,
        'palettes': [{'name': p.name, 'description': p.description, 'colors': list(p.colors)} for p in palettes],
    }
    report.add('palettes', data)
