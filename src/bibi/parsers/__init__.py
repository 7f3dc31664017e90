#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Parsers for BBCode and Markdown input."""

from bibi.parsers.base import BaseParser, ParserInput
from bibi.parsers.bbcode import BBCodeParser, bbcode_to_markdown
from bibi.parsers.code_spans import CodeKind, CodeSpan, CodeSpanScanner, PlainText, scan_code_spans
from bibi.parsers.list_head import ListHead, Ordered, Unordered, parse_list_head
from bibi.parsers.markdown import MarkdownEventParser, markdown_to_events
from bibi.parsers.numbering import NumberingGenerator, NumberingStyle

__all__ = [
    "BaseParser",
    "ParserInput",
    "BBCodeParser",
    "bbcode_to_markdown",
    "CodeKind",
    "CodeSpan",
    "CodeSpanScanner",
    "PlainText",
    "scan_code_spans",
    "ListHead",
    "Ordered",
    "Unordered",
    "parse_list_head",
    "MarkdownEventParser",
    "markdown_to_events",
    "NumberingGenerator",
    "NumberingStyle",
]
