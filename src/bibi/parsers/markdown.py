#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bibi/parsers/markdown.py
"""Markdown to markup events.

This module runs the mistune parser over Markdown text and walks the
resulting token tree depth-first, turning it into the flat sequence of
``bibi.ast`` markup events consumed by the BBCode renderer.

"""

from __future__ import annotations

import html
import logging
from collections.abc import Iterator
from typing import Any

from bibi.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Emphasis,
    End,
    HardBreak,
    Heading,
    Html,
    Image,
    Item,
    Link,
    List,
    MarkupEvent,
    Paragraph,
    Rule,
    SoftBreak,
    Start,
    Strikethrough,
    Strong,
    Tag,
    Text,
)
from bibi.options.markdown import MarkdownParserOptions
from bibi.parsers.base import BaseParser, ParserInput

logger = logging.getLogger(__name__)

# Container tokens whose children are wrapped in a Start/End pair
_SIMPLE_CONTAINERS: dict[str, type] = {
    "paragraph": Paragraph,
    "block_quote": BlockQuote,
    "list_item": Item,
    "emphasis": Emphasis,
    "strong": Strong,
    "strikethrough": Strikethrough,
}

_SKIPPED_TOKENS = frozenset({"blank_line"})


def _attrs(token: dict[str, Any]) -> dict[str, Any]:
    attrs = token.get("attrs", {})
    return attrs if isinstance(attrs, dict) else {}


def _children(token: dict[str, Any]) -> list[dict[str, Any]]:
    children = token.get("children", [])
    return children if isinstance(children, list) else []


def _decode_text_run(tokens: list[dict[str, Any]]) -> str:
    """Join adjacent mistune text tokens and decode their character references.

    mistune keeps references such as ``&amp;`` for its HTML renderer and may
    split one across tokens. Text still marked as backslash-escaped
    (``_emphasis`` False) is kept literally.
    """
    parts: list[str] = []
    pending = ""
    for token in tokens:
        raw = token.get("raw", "")
        if token.get("_emphasis", True) is False:
            parts.append(html.unescape(pending))
            parts.append(raw)
            pending = ""
        else:
            pending += raw
    parts.append(html.unescape(pending))
    return "".join(parts)


class MarkdownEventParser(BaseParser):
    r"""Convert Markdown to a sequence of markup events.

    Parameters
    ----------
    options : MarkdownParserOptions or None, default = None
        Parser configuration options

    Examples
    --------
        >>> list(MarkdownEventParser().events("**Hi**"))
        [Start(tag=Paragraph()), Start(tag=Strong()), Text(text='Hi'), End(tag=Strong()), End(tag=Paragraph())]

    """

    def __init__(self, options: MarkdownParserOptions | None = None):
        """Initialize the Markdown parser with options."""
        BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
        options = options or MarkdownParserOptions()
        super().__init__(options)
        self.options: MarkdownParserOptions = options

    def parse(self, input_data: ParserInput) -> list[MarkupEvent]:
        """Parse Markdown input into a list of markup events.

        Parameters
        ----------
        input_data : str, bytes, IO[bytes] or IO[str]
            Markdown input; bytes must be UTF-8

        Returns
        -------
        list of MarkupEvent
            Events in document order

        Raises
        ------
        EncodingError
            If byte input is not valid UTF-8

        """
        return list(self.iter_events(input_data))

    def iter_events(self, input_data: ParserInput) -> Iterator[MarkupEvent]:
        """Load Markdown input eagerly and return a lazy iterator over its events."""
        return self.events(self._load_text_content(input_data))

    def events(self, markdown_text: str) -> Iterator[MarkupEvent]:
        """Yield the markup events of ``markdown_text`` in document order."""
        import mistune

        plugins = []
        if self.options.parse_strikethrough:
            plugins.append("strikethrough")

        markdown = mistune.create_markdown(plugins=plugins, renderer=None)
        tokens, _state = markdown.parse(markdown_text)

        if isinstance(tokens, list):
            yield from self._walk_tokens(tokens)

    def _walk_tokens(self, tokens: list[dict[str, Any]]) -> Iterator[MarkupEvent]:
        run: list[dict[str, Any]] = []
        for token in tokens:
            if not isinstance(token, dict):
                continue
            if token.get("type") == "text":
                run.append(token)
                continue
            if run:
                yield Text(_decode_text_run(run))
                run = []
            yield from self._walk_token(token)
        if run:
            yield Text(_decode_text_run(run))

    def _walk_token(self, token: dict[str, Any]) -> Iterator[MarkupEvent]:
        """Yield the events for a single mistune token and its children."""
        token_type = token.get("type", "")

        if token_type in _SIMPLE_CONTAINERS:
            yield from self._wrap(_SIMPLE_CONTAINERS[token_type](), _children(token))
        elif token_type == "text":
            yield Text(_decode_text_run([token]))
        elif token_type == "block_text":
            # Tight list items carry no paragraph
            yield from self._walk_tokens(_children(token))
        elif token_type == "heading":
            yield from self._wrap(Heading(level=_attrs(token).get("level", 1)), _children(token))
        elif token_type == "block_code":
            tag = CodeBlock(info=_attrs(token).get("info") or "")
            yield Start(tag)
            yield Text(token.get("raw", ""))
            yield End(tag)
        elif token_type == "list":
            yield from self._wrap(self._list_tag(token), _children(token))
        elif token_type == "link":
            yield from self._wrap(Link(dest=_attrs(token).get("url", "")), _children(token))
        elif token_type == "image":
            # [img] has no room for alt text
            tag = Image(dest=_attrs(token).get("url", ""))
            yield Start(tag)
            yield End(tag)
        elif token_type == "codespan":
            yield Code(token.get("raw", ""))
        elif token_type == "softbreak":
            yield SoftBreak()
        elif token_type == "linebreak":
            yield SoftBreak() if _attrs(token).get("soft", False) else HardBreak()
        elif token_type == "thematic_break":
            yield Rule()
        elif token_type in ("block_html", "inline_html"):
            yield Html(token.get("raw", ""))
        elif token_type not in _SKIPPED_TOKENS:
            logger.debug("Skipping unsupported Markdown token: %s", token_type)

    def _wrap(self, tag: Tag, children: list[dict[str, Any]]) -> Iterator[MarkupEvent]:
        yield Start(tag)
        yield from self._walk_tokens(children)
        yield End(tag)

    @staticmethod
    def _list_tag(token: dict[str, Any]) -> List:
        attrs = _attrs(token)
        if not attrs.get("ordered", False):
            return List(start=None)
        return List(start=attrs.get("start", 1))


def markdown_to_events(markdown_text: str, options: MarkdownParserOptions | None = None) -> list[MarkupEvent]:
    """Parse a Markdown string into a list of markup events."""
    return list(MarkdownEventParser(options).events(markdown_text))
