"""
pagesvg package.

Converts a single page of a PDF document into SVG markup. The command-line
entry point lives in `pagesvg.cli`; an HTTP front-end over the same core is
available in `pagesvg.webapi`.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
