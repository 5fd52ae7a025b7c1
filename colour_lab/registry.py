"""Tool auto-discovery and registration.

Scans colour_lab/tools/ for modules that define a `tool` object of type
Tool and collects them into a dict keyed by name. Modules whose name
starts with an underscore are helpers, not tools.

When pkgutil finds nothing (frozen binaries), falls back to the tool
modules that colour_lab.tools imports eagerly.
"""

import importlib
import pkgutil
import sys

from colour_lab.core.types import Tool

_registry: dict[str, Tool] = {}


def _imported_tool_modules(package: str) -> list[str]:
    prefix = f'{package}.'
    names = (name[len(prefix) :] for name in sys.modules if name.startswith(prefix))
    return sorted(n for n in names if '.' not in n and not n.startswith('_'))


def discover() -> dict[str, Tool]:
    """Import all tool modules and return the registry."""
    if _registry:
        return _registry

    import colour_lab.tools as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]
    if not found_modules:
        found_modules = _imported_tool_modules(pkg.__name__)

    for modname in found_modules:
        module = importlib.import_module(f'colour_lab.tools.{modname}')
        tool = getattr(module, 'tool', None)
        if isinstance(tool, Tool):
            _registry[tool.name] = tool

    return _registry


def get(name: str) -> Tool:
    """Get a tool by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown tool: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_tools() -> dict[str, Tool]:
    """Return all registered tools."""
    return discover()
