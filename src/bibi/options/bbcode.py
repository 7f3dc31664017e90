#  Copyright (c) 2025 Tom Villani, Ph.D.

# bibi/options/bbcode.py
"""Configuration options for reading and writing BBCode.

This module defines the options for the BBCode-to-Markdown parser and for
the renderer that writes BBCode from Markdown events.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bibi.constants import DEFAULT_LINE_ENDING, LINE_ENDING_NAMES, LINE_ENDINGS, LineEnding
from bibi.options.base import BaseParserOptions, BaseRendererOptions, CodeLabelOptionsMixin


@dataclass(frozen=True)
class BBCodeParserOptions(BaseParserOptions, CodeLabelOptionsMixin):
    """Configuration options for BBCode-to-Markdown conversion.

    Parameters
    ----------
    inline_code_label : str, default "inline"
        ``[c=...]`` label that means "no language".
    code_block_label : str, default "code"
        ``[code=...]`` label that means "no language"; such blocks get a fence
        without an info string.

    Examples
    --------
        >>> from bibi.parsers.bbcode import BBCodeParser
        >>> parser = BBCodeParser(BBCodeParserOptions(code_block_label="text"))
        >>> parser.convert('[code="text"]x[/code]')
        '```\\nx\\n```\\n'

    """

    def __post_init__(self) -> None:
        """Validate the code labels."""
        super().__post_init__()
        self._validate_labels()


@dataclass(frozen=True)
class BBCodeRendererOptions(BaseRendererOptions, CodeLabelOptionsMixin):
    """Configuration options for writing BBCode from Markdown events.

    Parameters
    ----------
    line_ending : {"\\n", "\\r\\n"}, default "\\n"
        Line break written after block tags, for soft and hard breaks and
        whenever a list item or closing tag moves onto a fresh line. Text
        content is copied unchanged.
    inline_code_label : str, default "inline"
        Label written for inline code (``[c=inline]``).
    code_block_label : str, default "code"
        Label written for code blocks without a language (``[code=code]``).

    """

    line_ending: LineEnding = field(
        default=DEFAULT_LINE_ENDING,
        metadata={
            "help": "Line ending used for line breaks written by the renderer",
            "choices": list(LINE_ENDINGS),
            "cli_choices": LINE_ENDING_NAMES,
        },
    )

    def __post_init__(self) -> None:
        """Validate the line ending and the code labels."""
        super().__post_init__()
        if self.line_ending not in LINE_ENDINGS:
            raise ValueError(f"line_ending must be one of {LINE_ENDINGS!r}, got {self.line_ending!r}")
        self._validate_labels()
