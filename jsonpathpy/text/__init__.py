"""Offsets and ranges into path expression text."""

from jsonpathpy.text.text import ZERO, TextRange, TextSize, slice_text_range

__all__ = [
    "ZERO",
    "TextRange",
    "TextSize",
    "slice_text_range",
]
