#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bibi/renderers/bbcode.py
"""BBCode rendering from markup events.

This module provides the BBCodeRenderer class which writes forum BBCode from
the markup events produced by the Markdown parser. Output is written one
fragment at a time; the only state kept between fragments is whether the
output currently sits at the start of a line.

"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from bibi.ast import (
    BlockQuote,
    Code,
    CodeBlock,
    Emphasis,
    End,
    HardBreak,
    Heading,
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
from bibi.exceptions import EncodingError, OutputWriteError
from bibi.options.bbcode import BBCodeRendererOptions
from bibi.renderers.base import BaseRenderer
from bibi.utils.io_utils import OutputTarget, TextWriter, open_writer

logger = logging.getLogger(__name__)

# Inline tags whose start and end are fixed strings
_INLINE_TAGS: dict[type, tuple[str, str]] = {
    Emphasis: ("[cur]", "[/cur]"),
    Strong: ("[b]", "[/b]"),
    Strikethrough: ("[del]", "[/del]"),
}


class BBCodeRenderer(BaseRenderer):
    r"""Render markup events to BBCode.

    Parameters
    ----------
    options : BBCodeRendererOptions or None, default = None
        BBCode rendering options

    Examples
    --------
        >>> from bibi.parsers.markdown import markdown_to_events
        >>> BBCodeRenderer().render_to_string(markdown_to_events("- one\n- two"))
        '[list]\n[*]one\n[*]two\n[/list]\n'

    """

    def __init__(self, options: BBCodeRendererOptions | None = None):
        """Initialize the BBCode renderer with options."""
        BaseRenderer._validate_options_type(options, BBCodeRendererOptions, "bbcode")
        options = options or BBCodeRendererOptions()
        BaseRenderer.__init__(self, options)
        self.options: BBCodeRendererOptions = options
        self.at_line_start: bool = True
        self._write: TextWriter | None = None
        self._output_path: str | None = None

    def render(self, events: Iterable[MarkupEvent], output: OutputTarget) -> None:
        """Render events as BBCode to a path or a file-like object.

        Parameters
        ----------
        events : iterable of MarkupEvent
            Events in document order; consumed once
        output : str, Path, IO[bytes] or IO[str]
            Output destination

        Raises
        ------
        OutputWriteError
            If the output cannot be opened or written
        EncodingError
            If a fragment cannot be encoded as UTF-8

        """
        self.at_line_start = True
        self._output_path = str(output) if isinstance(output, str) or hasattr(output, "__fspath__") else None
        try:
            with open_writer(output) as write:
                self._write = write
                for event in events:
                    self._render_event(event)
        except OSError as e:
            raise OutputWriteError(
                f"Failed to open BBCode output: {e}", file_path=self._output_path, direction="bbcode", original_error=e
            ) from e
        finally:
            self._write = None

    def _emit(self, fragment: str) -> None:
        """Write a fragment and update the line-start state.

        Line breaks in ``fragment`` are written with the configured line
        ending. Empty fragments leave the state unchanged.
        """
        if not fragment:
            return
        if self.options.line_ending != "\n":
            fragment = fragment.replace("\n", self.options.line_ending)
        self._write_raw(fragment)

    def _write_raw(self, fragment: str) -> None:
        if not fragment or self._write is None:
            return
        try:
            self._write(fragment)
        except UnicodeEncodeError as e:
            raise EncodingError(
                f"Rendered BBCode is not valid UTF-8 text: {e}", direction="bbcode", original_error=e
            ) from e
        except (OSError, ValueError, TypeError) as e:
            raise OutputWriteError(
                f"Failed to write BBCode output: {e}", file_path=self._output_path, direction="bbcode", original_error=e
            ) from e
        self.at_line_start = fragment.endswith("\n")

    def _ensure_newline(self) -> None:
        if not self.at_line_start:
            self._emit("\n")

    def _render_event(self, event: MarkupEvent) -> None:
        if isinstance(event, Start):
            self._start_tag(event.tag)
        elif isinstance(event, End):
            self._end_tag(event.tag)
        elif isinstance(event, Text):
            self._write_raw(event.text)
        elif isinstance(event, Code):
            self._emit(f"[c={self.options.inline_code_label}]")
            self._write_raw(event.text)
            self._emit("[/c]")
        elif isinstance(event, SoftBreak):
            self._emit("\n")
        elif isinstance(event, HardBreak):
            self._emit("\n\n")
        elif isinstance(event, Rule):
            self._emit("[hr]\n")
        else:
            logger.debug("Ignoring event without BBCode form: %s", type(event).__name__)

    def _start_tag(self, tag: Tag) -> None:
        if type(tag) in _INLINE_TAGS:
            self._emit(_INLINE_TAGS[type(tag)][0])
        elif isinstance(tag, Heading):
            self._emit("[big]")
        elif isinstance(tag, BlockQuote):
            self._emit("[quote]\n")
        elif isinstance(tag, CodeBlock):
            self._emit(f"[code={self._code_language(tag.info)}]\n")
        elif isinstance(tag, List):
            self._emit(self._list_open(tag.start))
        elif isinstance(tag, Item):
            self._ensure_newline()
            self._emit("[*]")
        elif isinstance(tag, Link):
            self._emit(f"[url={tag.dest}]")
        elif isinstance(tag, Image):
            self._emit(f"[img]{tag.dest}[/img]")

    def _end_tag(self, tag: Tag) -> None:
        if type(tag) in _INLINE_TAGS:
            self._emit(_INLINE_TAGS[type(tag)][1])
        elif isinstance(tag, Paragraph):
            self._emit("\n\n")
        elif isinstance(tag, Heading):
            self._emit("[/big]\n\n")
        elif isinstance(tag, BlockQuote):
            self._emit("[/quote]\n")
        elif isinstance(tag, CodeBlock):
            self._ensure_newline()
            self._emit("[/code]\n")
        elif isinstance(tag, List):
            self._ensure_newline()
            self._emit("[/list]\n")
        elif isinstance(tag, Link):
            self._emit("[/url]")

    def _code_language(self, info: str) -> str:
        parts = info.split()
        return parts[0] if parts else self.options.code_block_label

    @staticmethod
    def _list_open(start: int | None) -> str:
        if start is None:
            return "[list]\n"
        if start == 1:
            return '[list type="1"]\n'
        return f'[list start="{start}"]\n'


def events_to_bbcode(events: Iterable[MarkupEvent], options: BBCodeRendererOptions | None = None) -> str:
    """Render a sequence of markup events to a BBCode string."""
    return BBCodeRenderer(options).render_to_string(events)
