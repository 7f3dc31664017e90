#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bibi/cli/processors.py
"""Conversion processing for the bibi CLI.

This module turns parsed arguments and loaded configuration into option
objects, selects the conversion direction, reads the input and writes the
converted text.
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union, cast

from bibi.api import dump_bbcode, dump_markdown, to_markdown
from bibi.cli.builder import (
    CLI_METADATA_CHOICES,
    EXIT_SUCCESS,
    DynamicCLIBuilder,
    get_exit_code_for_exception,
)
from bibi.cli.output import render_rich_markdown, should_use_rich_output
from bibi.constants import DEFAULT_DIRECTION_BY_EXTENSION, DEFAULT_FALLBACK_DIRECTION, ConversionDirection
from bibi.exceptions import BibiError, FileAccessError, FileNotFoundError, ValidationError
from bibi.options.bbcode import BBCodeParserOptions, BBCodeRendererOptions
from bibi.options.markdown import MarkdownParserOptions
from bibi.utils.decorators import debug_timer

logger = logging.getLogger(__name__)

DIRECTIONS: tuple[ConversionDirection, ...] = ("markdown", "bbcode")
STDIN_MARKER = "-"


@dataclass(frozen=True)
class ConversionOptions:
    """Options for both conversion directions, resolved from config and flags."""

    bbcode_parser: BBCodeParserOptions
    markdown_parser: MarkdownParserOptions
    bbcode_renderer: BBCodeRendererOptions


def resolve_option_values(
    parsed_args: argparse.Namespace, config: Mapping[str, Any], builder: Optional[DynamicCLIBuilder] = None
) -> dict[str, Any]:
    """Collect option field values, command-line flags overriding config values.

    Values named in a field's ``cli_choices`` metadata (``"crlf"``) are
    translated to the option value (``"\\r\\n"``).

    Raises
    ------
    ValidationError
        If a config value for a boolean option is not a boolean

    """
    builder = builder or DynamicCLIBuilder()
    cli_values = vars(parsed_args)
    values: dict[str, Any] = {}

    for field in builder.iter_option_fields():
        choices = field.metadata.get(CLI_METADATA_CHOICES) or {}
        for source in (config, cli_values):
            value = source.get(field.name)
            if value is None:
                continue
            if isinstance(field.default, bool) and not isinstance(value, bool):
                raise ValidationError(
                    f"Option '{field.name}' must be true or false, got {value!r}",
                    parameter_name=field.name,
                    parameter_value=value,
                )
            if isinstance(value, str) and value in choices:
                value = choices[value]
            values[field.name] = value

    return values


def build_conversion_options(values: Mapping[str, Any]) -> ConversionOptions:
    """Create the option objects for both directions from flat values.

    Raises
    ------
    ValidationError
        If an option value is rejected by its options class

    """
    try:
        return ConversionOptions(
            bbcode_parser=BBCodeParserOptions.from_mapping(values),
            markdown_parser=MarkdownParserOptions.from_mapping(values),
            bbcode_renderer=BBCodeRendererOptions.from_mapping(values),
        )
    except (TypeError, ValueError) as e:
        raise ValidationError(f"Invalid option value: {e}", original_error=e) from e


def _check_direction(value: Any, source: str) -> ConversionDirection:
    if value not in DIRECTIONS:
        raise ValidationError(
            f"Invalid direction {value!r} in {source}; expected 'markdown' or 'bbcode'",
            parameter_name=source,
            parameter_value=value,
        )
    return cast(ConversionDirection, value)


def _normalize_extension(ext: str) -> str:
    ext = ext.strip().lower()
    return ext if ext.startswith(".") else f".{ext}"


def direction_map(config: Mapping[str, Any]) -> dict[str, ConversionDirection]:
    """Return the extension-to-direction mapping, config entries overriding defaults."""
    mapping = dict(DEFAULT_DIRECTION_BY_EXTENSION)
    overrides = config.get("directions") or {}
    if not isinstance(overrides, Mapping):
        raise ValidationError(
            f"'directions' must be a table of extension = direction, got {type(overrides).__name__}",
            parameter_name="directions",
            parameter_value=overrides,
        )
    for ext, direction in overrides.items():
        mapping[_normalize_extension(str(ext))] = _check_direction(direction, "directions")
    return mapping


def detect_direction(
    input_path: str, explicit: Optional[str] = None, config: Optional[Mapping[str, Any]] = None
) -> ConversionDirection:
    """Choose the target format for ``input_path``.

    Priority: the explicit ``--to`` value, then the extension mapping, then
    the config ``to`` value, then Markdown. Standard input has no extension,
    so it needs ``--to`` or a config ``to`` value.

    Raises
    ------
    ValidationError
        If no direction can be chosen for stdin, or a configured direction
        is invalid

    Examples
    --------
        >>> detect_direction("post.md")
        'bbcode'
        >>> detect_direction("post.txt")
        'markdown'

    """
    if explicit:
        return _check_direction(explicit, "--to")

    config = config or {}
    fallback = config.get("to")
    if fallback is not None:
        fallback = _check_direction(fallback, "to")

    if input_path == STDIN_MARKER:
        if fallback is None:
            raise ValidationError(
                "Cannot detect the conversion direction for standard input; use --to markdown or --to bbcode",
                parameter_name="--to",
            )
        return fallback

    ext = Path(input_path).suffix.lower()
    return direction_map(config).get(ext, fallback or DEFAULT_FALLBACK_DIRECTION)


def read_input(input_path: str) -> Union[str, bytes]:
    """Read the input file, or standard input for ``-``.

    Raises
    ------
    FileNotFoundError
        If the file does not exist
    FileAccessError
        If the path is not a readable file

    """
    if input_path == STDIN_MARKER:
        buffer = getattr(sys.stdin, "buffer", None)
        return buffer.read() if buffer is not None else sys.stdin.read()

    path = Path(input_path)
    if not path.exists():
        raise FileNotFoundError(input_path)
    if not path.is_file():
        raise FileAccessError(input_path, message=f"Not a file: {input_path}")
    try:
        return path.read_bytes()
    except OSError as e:
        raise FileAccessError(input_path, original_error=e) from e


def convert_input(parsed_args: argparse.Namespace, direction: ConversionDirection, options: ConversionOptions) -> None:
    """Convert the input named in ``parsed_args`` and write the result."""
    source = read_input(parsed_args.input)
    logger.info(f"Converting {parsed_args.input} to {direction}")

    with debug_timer(logger, f"Conversion to {direction}"):
        if direction == "bbcode":
            dump_bbcode(
                parsed_args.out or sys.stdout,
                source,
                options=options.markdown_parser,
                renderer_options=options.bbcode_renderer,
            )
        elif parsed_args.out:
            dump_markdown(parsed_args.out, source, options=options.bbcode_parser)
        else:
            markdown = to_markdown(source, options=options.bbcode_parser)
            if should_use_rich_output(parsed_args):
                markdown, _ = render_rich_markdown(markdown)
            sys.stdout.write(markdown)

    if parsed_args.out:
        logger.info(f"Wrote {parsed_args.out}")


def process_conversion(parsed_args: argparse.Namespace, config: Mapping[str, Any]) -> int:
    """Run a single conversion, returning the process exit code."""
    try:
        options = build_conversion_options(resolve_option_values(parsed_args, config))
        direction = detect_direction(parsed_args.input, parsed_args.to, config)
        convert_input(parsed_args, direction, options)
    except BibiError as e:
        logger.debug("Conversion failed", exc_info=True)
        print(f"Error: {e.message}", file=sys.stderr)
        return get_exit_code_for_exception(e)

    return EXIT_SUCCESS
