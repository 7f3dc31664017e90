#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the bibi converters.

Each parser and renderer has its own frozen Options dataclass.
"""

from __future__ import annotations

from bibi.options.base import BaseParserOptions, BaseRendererOptions, CloneFrozenMixin
from bibi.options.bbcode import BBCodeParserOptions, BBCodeRendererOptions
from bibi.options.markdown import MarkdownParserOptions

__all__ = [
    "CloneFrozenMixin",
    "BaseParserOptions",
    "BaseRendererOptions",
    "BBCodeParserOptions",
    "BBCodeRendererOptions",
    "MarkdownParserOptions",
]
