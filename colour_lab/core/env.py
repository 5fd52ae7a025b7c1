"""Environment and provider configuration for colour-lab.

Load order (first wins):
  1. Existing OS environment variables, never overwritten.
  2. .env file at --env-file path (if explicitly provided).
  3. .env file found walking up from cwd, stopping at a .git boundary.

Provider settings for the palettes tool are then read from the environment:

    {PROVIDER}_API_KEY   (falls back to COLOUR_LAB_API_KEY)
    {PROVIDER}_API_URL   (falls back to the built-in default below)
    {PROVIDER}_MODEL     (falls back to the built-in default below)

Any OpenAI-compatible endpoint works as a provider.
"""

import os
from dataclasses import dataclass
from pathlib import Path

FALLBACK_KEY_VAR = 'COLOUR_LAB_API_KEY'

DEFAULT_URLS: dict[str, str] = {
    'gemini': 'https://generativelanguage.googleapis.com/v1beta/openai/',
    'openai': 'https://api.openai.com/v1',
    'groq': 'https://api.groq.com/openai/v1',
    'mistral': 'https://api.mistral.ai/v1',
}

DEFAULT_MODELS: dict[str, str] = {
    'gemini': 'gemini-2.5-flash',
    'openai': 'gpt-4o-mini',
    'groq': 'llama-3.3-70b-versatile',
    'mistral': 'mistral-medium-2505',
}


@dataclass(frozen=True)
class ProviderConfig:
    name: str
    api_key: str
    api_url: str
    model: str

    def missing(self) -> list[str]:
        """Names of the env vars that still need setting."""
        prefix = self.name.upper()
        out = []
        if not self.api_key:
            out.append(f'{prefix}_API_KEY')
        if not self.api_url:
            out.append(f'{prefix}_API_URL')
        if not self.model:
            out.append(f'{prefix}_MODEL')
        return out


def find_env_file(start: Path) -> Path | None:
    """Nearest .env at or above `start`; never looks past a .git (dir or file)."""
    current = start.resolve()
    while True:
        candidate = current / '.env'
        if candidate.is_file():
            return candidate
        if (current / '.git').exists():
            return None
        if current.parent == current:
            return None
        current = current.parent


def read_env_file(path: Path) -> dict[str, str]:
    """KEY=value pairs from a .env file. Quotes around values are dropped."""
    values: dict[str, str] = {}
    for raw in path.read_text(encoding='utf-8').splitlines():
        line = raw.strip()
        if line.startswith('export '):
            line = line[len('export ') :].lstrip()
        if not line or line.startswith('#') or '=' not in line:
            continue
        key, _, value = line.partition('=')
        key = key.strip()
        if key:
            values[key] = value.strip().strip('"').strip("'")
    return values


def load_env(env_file: str | None = None) -> Path | None:
    """Copy .env values into os.environ for keys not already set.

    Returns the file that was loaded, or None.
    """
    if env_file:
        path: Path | None = Path(env_file)
        if not path.is_file():
            return None
    else:
        path = find_env_file(Path.cwd())
        if path is None:
            return None

    for key, value in read_env_file(path).items():
        os.environ.setdefault(key, value)
    return path


def provider_config(provider: str, explicit_key: str | None = None) -> ProviderConfig:
    """Resolve key, URL and model for a provider from args and environment."""
    name = provider.lower()
    prefix = name.upper()
    return ProviderConfig(
        name=name,
        api_key=explicit_key or os.environ.get(f'{prefix}_API_KEY') or os.environ.get(FALLBACK_KEY_VAR) or '',
        api_url=os.environ.get(f'{prefix}_API_URL') or DEFAULT_URLS.get(name, ''),
        model=os.environ.get(f'{prefix}_MODEL') or DEFAULT_MODELS.get(name, ''),
    )
