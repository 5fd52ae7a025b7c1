"""colour-lab: colour-science engine and command-line colour-theory tools."""

__version__ = '0.1.0'
