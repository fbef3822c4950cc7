"""Quad catalog and style code parsing."""
from .style_codes import (
    StyleCodes,
    parse_style_codes,
    try_parse_style_codes,
    format_style_reference,
)
from .library import Quad, QuadLibrary, AS_ATTRIBUTES, attributes_for_styles
from .default_catalog import build_default_quads, load_quad_library

__all__ = [
    "StyleCodes",
    "parse_style_codes",
    "try_parse_style_codes",
    "format_style_reference",
    "Quad",
    "QuadLibrary",
    "AS_ATTRIBUTES",
    "attributes_for_styles",
    "build_default_quads",
    "load_quad_library",
]
