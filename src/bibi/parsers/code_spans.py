#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bibi/parsers/code_spans.py
"""Split BBCode text into plain-text and code-span chunks.

Code spans come in two kinds::

    [c="python"]x = 1[/c]            inline, may not contain a line break
    [code="python"]
    def f(): ...
    [/code]                          multiline

Everything outside a code span is returned as ``PlainText`` so the rewrite
rules can run on it; code-span bodies are never rewritten. Malformed or
unterminated code tags are not errors: the start sequence is kept as literal
text and scanning resumes right after it.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from bibi.constants import (
    CODE_TAG_PROBE,
    DEFAULT_CODE_BLOCK_LABEL,
    DEFAULT_INLINE_CODE_LABEL,
    INLINE_CODE_END,
    INLINE_CODE_START,
    MULTILINE_CODE_END,
    MULTILINE_CODE_START,
)

logger = logging.getLogger(__name__)

# Label right after the start sequence: optional quotes, closing bracket
LANGUAGE_LABEL_PATTERN = re.compile(r'\s*"?([^"]+?)"?\s*\]')

_LINE_BREAKS = ("\r", "\n")


class CodeKind(Enum):
    """The two code-span kinds with their delimiters."""

    INLINE = (INLINE_CODE_START, INLINE_CODE_END)
    MULTILINE = (MULTILINE_CODE_START, MULTILINE_CODE_END)

    @property
    def start_seq(self) -> str:
        return self.value[0]

    @property
    def end_seq(self) -> str:
        return self.value[1]


@dataclass(frozen=True)
class PlainText:
    """Text outside any code span."""

    text: str


@dataclass(frozen=True)
class CodeSpan:
    """A recognized code span.

    Parameters
    ----------
    kind : CodeKind
        Inline or multiline
    language : str or None
        Language label, or None when the label was the kind's default label
    body : str
        Verbatim text between the label's ``]`` and the end sequence

    """

    kind: CodeKind
    language: Optional[str]
    body: str


TextChunk = Union[PlainText, CodeSpan]


class CodeSpanScanner:
    """Tokenizer isolating code spans from BBCode text.

    Parameters
    ----------
    inline_default : str, default "inline"
        Inline label recorded as "no explicit language"
    multiline_default : str, default "code"
        Multiline label recorded as "no explicit language"

    Examples
    --------
        >>> CodeSpanScanner().scan('a [c="sh"]ls[/c] b')
        [PlainText(text='a '), CodeSpan(kind=<CodeKind.INLINE: ...>, language='sh', body='ls'), PlainText(text=' b')]

    """

    def __init__(
        self, inline_default: str = DEFAULT_INLINE_CODE_LABEL, multiline_default: str = DEFAULT_CODE_BLOCK_LABEL
    ):
        self._defaults = {CodeKind.INLINE: inline_default, CodeKind.MULTILINE: multiline_default}

    def scan(self, text: str) -> list[TextChunk]:
        """Split ``text`` into an ordered list of chunks.

        Never raises; the concatenated source of the chunks equals ``text``.
        """
        chunks: list[TextChunk] = []
        pos = 0

        while True:
            found = self._next_code_start(text, pos)
            if found is None:
                break
            at, kind = found

            chunks.append(PlainText(text[pos:at]))

            span_end = self._find_code_end(text, at, kind)
            span = self._read_span(text, at, span_end, kind) if span_end is not None else None

            if span is None:
                logger.debug("Treating unterminated or malformed %s at offset %d as text", kind.start_seq, at)
                pos = at + len(kind.start_seq)
                chunks.append(PlainText(text[at:pos]))
            else:
                chunks.append(span)
                pos = span_end  # type: ignore[assignment]

        chunks.append(PlainText(text[pos:]))
        return compact_chunks(chunks)

    @staticmethod
    def _next_code_start(text: str, pos: int) -> tuple[int, CodeKind] | None:
        """Find the next full start sequence, skipping near-miss ``[c`` prefixes."""
        while True:
            at = text.find(CODE_TAG_PROBE, pos)
            if at == -1:
                return None
            for kind in CodeKind:
                if text.startswith(kind.start_seq, at):
                    return at, kind
            pos = at + len(CODE_TAG_PROBE)

    @staticmethod
    def _find_code_end(text: str, at: int, kind: CodeKind) -> int | None:
        """Return the offset just past the first end sequence, if any."""
        body_from = at + len(kind.start_seq)
        end = text.find(kind.end_seq, body_from)
        if end == -1:
            return None

        if kind is CodeKind.INLINE:
            window = text[body_from:end]
            if any(brk in window for brk in _LINE_BREAKS):
                return None

        return end + len(kind.end_seq)

    def _read_span(self, text: str, at: int, span_end: int, kind: CodeKind) -> CodeSpan | None:
        """Extract label and body of the span ``text[at:span_end]``."""
        label_from = at + len(kind.start_seq)
        body_to = span_end - len(kind.end_seq)

        match = LANGUAGE_LABEL_PATTERN.match(text, label_from, body_to)
        if match is None:
            return None

        language = match.group(1)
        body_from = text.index("]", label_from) + 1
        if body_from > body_to:
            return None

        return CodeSpan(
            kind=kind,
            language=None if language == self._defaults[kind] else language,
            body=text[body_from:body_to],
        )


def compact_chunks(chunks: list[TextChunk]) -> list[TextChunk]:
    """Merge adjacent plain-text chunks and drop empty ones."""
    compacted: list[TextChunk] = []
    pending: list[str] = []

    for chunk in chunks:
        if isinstance(chunk, PlainText):
            pending.append(chunk.text)
            continue
        if pending:
            merged = "".join(pending)
            if merged:
                compacted.append(PlainText(merged))
            pending = []
        compacted.append(chunk)

    merged = "".join(pending)
    if merged:
        compacted.append(PlainText(merged))

    return compacted


def scan_code_spans(
    text: str, inline_default: str = DEFAULT_INLINE_CODE_LABEL, multiline_default: str = DEFAULT_CODE_BLOCK_LABEL
) -> list[TextChunk]:
    """Split ``text`` into plain-text and code-span chunks."""
    return CodeSpanScanner(inline_default, multiline_default).scan(text)
