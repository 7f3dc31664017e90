#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bibi/parsers/bbcode.py
"""BBCode to Markdown converter.

This module converts forum BBCode into Markdown. The conversion has no notion
of paragraphs: text outside tags is copied unchanged, and no line breaks are
added around the output.

Supported BBCode:

- ``[b]P[/b]`` -> ``**P**``
- ``[i]P[/i]`` and ``[cur]P[/cur]`` -> ``*P*``
- ``[del]P[/del]`` -> ``~~P~~``
- ``[big]P[/big]`` on a line of its own -> ``# P``
- ``[url]P[/url]`` -> ``[](P)`` and ``[url="P"]Q[/url]`` -> ``[Q](P)``
- ``[img]P[/img]`` -> ``![](P)``
- ``[quote]P[/quote]`` -> ``> P`` on every line
- ``[list][*]P[/list]`` -> ``- P``
- ``[list type="a|A|i|I|1" start="N"][*]P[/list]`` -> ``a. P`` etc.
- ``[c="lang"]P[/c]`` -> ```` `P` ```` and ``[code="lang"]P[/code]`` -> fenced block

Text inside code spans is copied verbatim.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from typing import Optional

from bibi.constants import BULLET_MARKER
from bibi.exceptions import ListHeadError
from bibi.options.bbcode import BBCodeParserOptions
from bibi.parsers.base import BaseParser, ParserInput
from bibi.parsers.code_spans import CodeKind, CodeSpan, CodeSpanScanner, PlainText
from bibi.parsers.list_head import Ordered, parse_list_head
from bibi.parsers.numbering import NumberingGenerator

logger = logging.getLogger(__name__)

Replacement = Callable[[re.Match], str]

# Bullet marker plus the whitespace after it
BULLET_PATTERN = re.compile(re.escape(BULLET_MARKER) + r"\s*")


def _quote_lines(text: str) -> list[str]:
    """Split ``text`` into lines, dropping ``\\r`` endings and a trailing empty line."""
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def to_markdown_quote(text: str) -> str:
    """Prefix every line of ``text`` with ``"> "``."""
    return "\n".join(f"> {line}" for line in _quote_lines(text))


def _bullet_replacement(label: str) -> Replacement:
    """Build a replacement putting ``label`` where a bullet marker was.

    A bullet that does not start a line is moved onto a new one.
    """

    def replace(match: re.Match) -> str:
        start = match.start()
        if start > 0 and match.string[start - 1] != "\n":
            return "\n" + label
        return label

    return replace


def to_markdown_list(head: str, body: str) -> Optional[str]:
    """Convert the body of a ``[list...]`` block.

    Parameters
    ----------
    head : str
        Attribute text between ``[list`` and ``]``
    body : str
        Text between the opening tag and ``[/list]``

    Returns
    -------
    str or None
        Markdown list, or None if the attributes are malformed

    """
    try:
        list_head = parse_list_head(head)
    except ListHeadError as e:
        logger.debug("Leaving list block unconverted: %s", e.message)
        return None

    if not isinstance(list_head.kind, Ordered):
        return BULLET_PATTERN.sub(_bullet_replacement("- "), body)

    # One label per bullet; stop as soon as no bullet is left
    current = body
    for label in NumberingGenerator(list_head.kind.style, list_head.start):
        current, replaced = BULLET_PATTERN.subn(_bullet_replacement(label), current, count=1)
        if not replaced:
            break
    return current


def _replace_list(match: re.Match) -> str:
    converted = to_markdown_list(match.group(1), match.group(2))
    return match.group(0) if converted is None else converted


# Order matters: each rule sees the output of the previous ones. [cur] runs
# before [b] and the generic [i]/[cur] rule runs after it.
SUBSTITUTION_RULES: tuple[tuple[re.Pattern, Replacement], ...] = (
    (
        re.compile(r'\[url="?(.+?)"?\](.+?)\[/url\]', re.IGNORECASE),
        lambda m: f"[{m.group(2)}]({m.group(1)})",
    ),
    (
        re.compile(r"\[url\](.+?)\[/url\]", re.IGNORECASE),
        lambda m: f"[]({m.group(1)})",
    ),
    (
        re.compile(r"^[ \t]*\[big\](.+?)\[/big\][ \t]*$", re.IGNORECASE | re.MULTILINE),
        lambda m: f"# {m.group(1)}",
    ),
    (
        re.compile(r"\[cur\](.+?)\[/cur\]", re.IGNORECASE),
        lambda m: f"*{m.group(1)}*",
    ),
    (
        re.compile(r"\[b\](.+?)\[/b\]", re.IGNORECASE),
        lambda m: f"**{m.group(1)}**",
    ),
    (
        re.compile(r"\[(?:i|cur)\](.+?)\[/(?:i|cur)\]", re.IGNORECASE),
        lambda m: f"*{m.group(1)}*",
    ),
    (
        re.compile(r"\[del\](.+?)\[/del\]", re.IGNORECASE),
        lambda m: f"~~{m.group(1)}~~",
    ),
    (
        re.compile(r"\[img\](.+?)\[/img\]", re.IGNORECASE),
        lambda m: f"![]({m.group(1)})",
    ),
    (
        re.compile(r"\[quote\](.+?)\[/quote\]", re.IGNORECASE | re.DOTALL),
        lambda m: to_markdown_quote(m.group(1)),
    ),
    (
        re.compile(r"\[list(.*?)\](.+?)\[/list\]", re.IGNORECASE | re.DOTALL),
        _replace_list,
    ),
)


def apply_substitutions(text: str) -> str:
    """Run every rewrite rule over ``text``, in order."""
    for pattern, replacement in SUBSTITUTION_RULES:
        text = pattern.sub(replacement, text)
    return text


def render_code_span(span: CodeSpan) -> str:
    """Render a code span as Markdown inline code or a fenced block."""
    if span.kind is CodeKind.INLINE:
        return f"`{span.body}`"
    return f"```{span.language or ''}\n{span.body}\n```\n"


class BBCodeParser(BaseParser):
    """Convert BBCode markup to Markdown text.

    The source is split into plain text and code spans; the rewrite rules run
    on the plain text only and code spans become Markdown code.

    Parameters
    ----------
    options : BBCodeParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> BBCodeParser().convert("[b]Hello[/b] [del]everybody[/del]")
        '**Hello** ~~everybody~~'

    """

    def __init__(self, options: BBCodeParserOptions | None = None):
        """Initialize the BBCode parser with options."""
        BaseParser._validate_options_type(options, BBCodeParserOptions, "bbcode")
        options = options or BBCodeParserOptions()
        super().__init__(options)
        self.options: BBCodeParserOptions = options
        self._scanner = CodeSpanScanner(options.inline_code_label, options.code_block_label)

    def parse(self, input_data: ParserInput) -> str:
        """Load BBCode from a string, UTF-8 bytes or a stream and convert it.

        Raises
        ------
        EncodingError
            If byte input is not valid UTF-8

        """
        return self.convert(self._load_text_content(input_data))

    def convert(self, bbcode: str) -> str:
        """Convert a BBCode string to Markdown.

        Never raises on malformed markup; unrecognized constructs are copied.
        """
        parts = []
        for chunk in self._scanner.scan(bbcode):
            if isinstance(chunk, PlainText):
                parts.append(apply_substitutions(chunk.text))
            else:
                parts.append(render_code_span(chunk))
        return "".join(parts)


def bbcode_to_markdown(bbcode: str, options: BBCodeParserOptions | None = None) -> str:
    """Convert a BBCode string to Markdown in one step."""
    return BBCodeParser(options).convert(bbcode)
