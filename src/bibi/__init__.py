"""bibi - conversion between forum BBCode and Markdown.

bibi converts the bracket-tag markup of discussion forums ("BBCode") to
standard Markdown and back. BBCode is read with an ordered cascade of
pattern rewrites that never touches code spans; Markdown is parsed with
mistune and written out as BBCode one fragment at a time.

Malformed markup is never an error: unterminated code tags and unreadable
list attributes are copied through unchanged. Only I/O and encoding
failures raise, as ``ConversionError`` subclasses.

Examples
--------
BBCode to Markdown:

    >>> from bibi import to_markdown
    >>> to_markdown("[b]Hello[/b] [del]everybody[/del]")
    '**Hello** ~~everybody~~'

Markdown to BBCode:

    >>> from bibi import to_bbcode
    >>> to_bbcode("- one\\n- two")
    '[list]\\n[*]one\\n[*]two\\n[/list]\\n'

Writing straight to a file or stream:

    >>> from bibi import dump_bbcode
    >>> with open("post.bbcode", "w", encoding="utf-8") as out:
    ...     dump_bbcode(out, "# Title")

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

__version__ = "1.0.0"

from bibi.api import dump_bbcode, dump_markdown, to_bbcode, to_markdown
from bibi.exceptions import (
    BibiError,
    ConversionError,
    EncodingError,
    InvalidOptionsError,
    OutputWriteError,
    ValidationError,
)
from bibi.options import (
    BaseParserOptions,
    BaseRendererOptions,
    BBCodeParserOptions,
    BBCodeRendererOptions,
    MarkdownParserOptions,
)

__all__ = [
    "__version__",
    "to_markdown",
    "to_bbcode",
    "dump_markdown",
    "dump_bbcode",
    "BibiError",
    "ConversionError",
    "EncodingError",
    "InvalidOptionsError",
    "OutputWriteError",
    "ValidationError",
    "BaseParserOptions",
    "BaseRendererOptions",
    "BBCodeParserOptions",
    "BBCodeRendererOptions",
    "MarkdownParserOptions",
]
