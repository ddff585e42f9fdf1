"""
Floor plan text parsing and the services built around it.

The parser API is re-exported here; the store and export modules are
imported from their own modules.
"""

from .layout_parser import parse_layout, parse_prompt, render_layout

__all__ = ["parse_layout", "parse_prompt", "render_layout"]
