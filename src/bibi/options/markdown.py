#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for Markdown parsing."""
# src/bibi/options/markdown.py

from __future__ import annotations

from dataclasses import dataclass, field

from bibi.constants import DEFAULT_PARSE_STRIKETHROUGH
from bibi.options.base import BaseParserOptions


@dataclass(frozen=True)
class MarkdownParserOptions(BaseParserOptions):
    """Configuration options for turning Markdown into markup events.

    Parameters
    ----------
    parse_strikethrough : bool, default True
        Whether to recognize ``~~text~~`` as strikethrough.

    """

    parse_strikethrough: bool = field(
        default=DEFAULT_PARSE_STRIKETHROUGH,
        metadata={
            "help": "Parse strikethrough syntax (~~text~~)",
            "cli_name": "no-strikethrough",
            "importance": "core",
        },
    )
