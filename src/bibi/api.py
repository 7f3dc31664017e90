"""The major exported API functions for BBCode and Markdown conversion."""

#  Copyright (c) 2025 Tom Villani, Ph.D.
# src/bibi/api.py
import logging
from dataclasses import fields
from typing import IO, Any, Optional, TypeVar, Union

from bibi.exceptions import EncodingError, OutputWriteError
from bibi.options.base import BaseParserOptions, BaseRendererOptions
from bibi.options.bbcode import BBCodeParserOptions, BBCodeRendererOptions
from bibi.options.markdown import MarkdownParserOptions
from bibi.parsers.base import BaseParser
from bibi.parsers.bbcode import BBCodeParser
from bibi.parsers.markdown import MarkdownEventParser
from bibi.renderers.base import BaseRenderer
from bibi.renderers.bbcode import BBCodeRenderer
from bibi.utils.decorators import debug_timer
from bibi.utils.io_utils import OutputTarget, write_content

logger = logging.getLogger(__name__)

Source = Union[str, bytes, IO[bytes], IO[str]]

OptionsT = TypeVar("OptionsT", BaseParserOptions, BaseRendererOptions)


def _apply_kwargs(options: OptionsT, kwargs: dict[str, Any]) -> OptionsT:
    """Return ``options`` updated with the kwargs naming one of its fields.

    Matching keys are removed from ``kwargs``.
    """
    names = {field.name for field in fields(options)}
    updates = {key: kwargs.pop(key) for key in list(kwargs) if key in names}
    return options.create_updated(**updates) if updates else options


def _warn_unused(kwargs: dict[str, Any]) -> None:
    if kwargs:
        logger.debug(f"Skipping unknown options: {sorted(kwargs)}")


def _ensure_utf8(text: str, direction: str) -> str:
    """Raise EncodingError if ``text`` cannot be encoded as UTF-8."""
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError(
            f"Converted {direction} is not valid UTF-8 text: {e}", direction=direction, original_error=e
        ) from e
    return text


def _markdown_options(options: Optional[BBCodeParserOptions], kwargs: dict[str, Any]) -> BBCodeParserOptions:
    BaseParser._validate_options_type(options, BBCodeParserOptions, "bbcode")
    options = _apply_kwargs(options or BBCodeParserOptions(), kwargs)
    _warn_unused(kwargs)
    return options


def _bbcode_options(
    options: Optional[MarkdownParserOptions],
    renderer_options: Optional[BBCodeRendererOptions],
    kwargs: dict[str, Any],
) -> tuple[MarkdownParserOptions, BBCodeRendererOptions]:
    BaseParser._validate_options_type(options, MarkdownParserOptions, "markdown")
    BaseRenderer._validate_options_type(renderer_options, BBCodeRendererOptions, "bbcode")
    parser_options = _apply_kwargs(options or MarkdownParserOptions(), kwargs)
    renderer_options = _apply_kwargs(renderer_options or BBCodeRendererOptions(), kwargs)
    _warn_unused(kwargs)
    return parser_options, renderer_options


def to_markdown(source: Source, options: Optional[BBCodeParserOptions] = None, **kwargs: Any) -> str:
    """Convert BBCode to Markdown.

    Parameters
    ----------
    source : str, bytes, IO[bytes] or IO[str]
        BBCode markup. Strings are always markup, never file paths; bytes
        must be UTF-8.
    options : BBCodeParserOptions, optional
        Parser options
    kwargs : Any
        Individual option fields overriding those in ``options``
        (e.g. ``code_block_label="text"``)

    Returns
    -------
    str
        Markdown text

    Raises
    ------
    EncodingError
        If byte input is not UTF-8, or the result cannot be encoded as UTF-8
    InvalidOptionsError
        If ``options`` is not a BBCodeParserOptions

    Examples
    --------
        >>> to_markdown("[b]Hello[/b] [del]everybody[/del]")
        '**Hello** ~~everybody~~'

    """
    parser = BBCodeParser(_markdown_options(options, dict(kwargs)))
    with debug_timer(logger, "BBCode -> Markdown"):
        result = parser.parse(source)
    return _ensure_utf8(result, "markdown")


def to_bbcode(
    source: Source,
    options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[BBCodeRendererOptions] = None,
    **kwargs: Any,
) -> str:
    """Convert Markdown to BBCode.

    Parameters
    ----------
    source : str, bytes, IO[bytes] or IO[str]
        Markdown text. Strings are always markup, never file paths; bytes
        must be UTF-8.
    options : MarkdownParserOptions, optional
        Markdown parser options
    renderer_options : BBCodeRendererOptions, optional
        BBCode rendering options
    kwargs : Any
        Individual option fields, routed to whichever options class defines
        them (e.g. ``parse_strikethrough=False``, ``line_ending="\\r\\n"``)

    Returns
    -------
    str
        BBCode markup

    Raises
    ------
    EncodingError
        If byte input is not UTF-8, or the result cannot be encoded as UTF-8
    InvalidOptionsError
        If an options object has the wrong class

    Examples
    --------
        >>> to_bbcode("![](http://x/y.png)")
        '[img]http://x/y.png[/img]\\n\\n'

    """
    parser_options, rendering_options = _bbcode_options(options, renderer_options, dict(kwargs))
    parser, renderer = MarkdownEventParser(parser_options), BBCodeRenderer(rendering_options)

    with debug_timer(logger, "Markdown -> BBCode"):
        result = renderer.render_to_string(parser.iter_events(source))
    return _ensure_utf8(result, "bbcode")


def dump_markdown(
    output: OutputTarget, source: Source, options: Optional[BBCodeParserOptions] = None, **kwargs: Any
) -> None:
    """Convert BBCode to Markdown and write the result to ``output``.

    Parameters
    ----------
    output : str, Path, IO[bytes] or IO[str]
        File path or file-like object; binary streams receive UTF-8
    source : str, bytes, IO[bytes] or IO[str]
        BBCode markup
    options : BBCodeParserOptions, optional
        Parser options

    Raises
    ------
    OutputWriteError
        If writing to ``output`` fails
    EncodingError
        If the input or the result is not valid UTF-8

    """
    markdown = to_markdown(source, options, **kwargs)
    try:
        write_content(markdown, output)
    except (OSError, ValueError, TypeError) as e:
        file_path = str(output) if isinstance(output, str) or hasattr(output, "__fspath__") else None
        raise OutputWriteError(
            f"Failed to write Markdown output: {e}", file_path=file_path, direction="markdown", original_error=e
        ) from e


def dump_bbcode(
    output: OutputTarget,
    source: Source,
    options: Optional[MarkdownParserOptions] = None,
    renderer_options: Optional[BBCodeRendererOptions] = None,
    **kwargs: Any,
) -> None:
    """Convert Markdown to BBCode, writing each fragment to ``output`` as it is produced.

    A write failure aborts the conversion; whatever was written before the
    failure stays in ``output``.

    Raises
    ------
    OutputWriteError
        If writing to ``output`` fails
    EncodingError
        If the input is not valid UTF-8 or a fragment cannot be encoded

    """
    parser_options, rendering_options = _bbcode_options(options, renderer_options, dict(kwargs))
    parser, renderer = MarkdownEventParser(parser_options), BBCodeRenderer(rendering_options)

    with debug_timer(logger, "Markdown -> BBCode"):
        renderer.render(parser.iter_events(source), output)


__all__ = ["to_markdown", "to_bbcode", "dump_markdown", "dump_bbcode"]
