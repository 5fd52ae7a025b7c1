"""Auto-discovery of tool modules.

Every .py file in this package that defines a `tool` object is
auto-registered by colour_lab.registry.discover().

The explicit imports below ensure PyInstaller includes these modules
in the frozen binary.
"""

# PyInstaller hidden imports; also the registry's tool list when pkgutil sees no files
import colour_lab.tools.contrast as _contrast  # noqa: F401
import colour_lab.tools.gradient as _gradient  # noqa: F401
import colour_lab.tools.mix as _mix  # noqa: F401
import colour_lab.tools.palettes as _palettes  # noqa: F401
import colour_lab.tools.rings as _rings  # noqa: F401
import colour_lab.tools.wheel as _wheel  # noqa: F401
