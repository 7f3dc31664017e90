#  Copyright (c) 2025 Tom Villani, Ph.D.
"""CLI argument builder for bibi.

This module builds the argument parser. Conversion option flags are
generated from the option dataclasses using their field metadata, so a new
option field shows up on the command line without touching this module.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import MISSING, Field, fields
from typing import Any, Iterable, Optional

from bibi import __version__
from bibi.exceptions import ConversionError, FileError, ParsingError, ValidationError
from bibi.options.base import CloneFrozenMixin
from bibi.options.bbcode import BBCodeParserOptions, BBCodeRendererOptions
from bibi.options.markdown import MarkdownParserOptions

logger = logging.getLogger(__name__)

# Option classes whose fields become CLI flags, in help order
OPTION_CLASSES: tuple[type[CloneFrozenMixin], ...] = (
    MarkdownParserOptions,
    BBCodeRendererOptions,
    BBCodeParserOptions,
)

CLI_METADATA_NAME = "cli_name"
CLI_METADATA_CHOICES = "cli_choices"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_CONVERSION_ERROR = 7


class DynamicCLIBuilder:
    """Builds CLI arguments from option dataclasses.

    Every field becomes one flag whose destination is the field name and
    whose default is None, so callers can tell flags the user gave apart
    from flags left unset. Fields shared by several option classes (such
    as the code labels) produce a single flag.

    Flag shape by field type:

    - bool defaulting to True: ``--no-<name>`` (or the ``cli_name`` metadata)
    - field with ``cli_choices`` metadata: ``--<name> {choice,...}``
    - anything else: ``--<name> VALUE``

    """

    def __init__(self, option_classes: Iterable[type[CloneFrozenMixin]] = OPTION_CLASSES):
        self.option_classes = tuple(option_classes)

    def iter_option_fields(self) -> list[Field]:
        """Return the option fields, first occurrence of each name only."""
        seen: set[str] = set()
        unique: list[Field] = []
        for options_class in self.option_classes:
            for field in fields(options_class):
                if field.name not in seen:
                    seen.add(field.name)
                    unique.append(field)
        return unique

    def add_option_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Add one flag per option field to ``parser``."""
        group = parser.add_argument_group("conversion options")
        for field in self.iter_option_fields():
            self._add_field_argument(group, field)

    @staticmethod
    def _add_field_argument(group: Any, field: Field) -> None:
        metadata = field.metadata
        help_text = metadata.get("help", "")
        default = field.default if field.default is not MISSING else None

        if isinstance(default, bool):
            flag_name = metadata.get(CLI_METADATA_NAME) or (f"no-{field.name}" if default else field.name)
            group.add_argument(
                f"--{flag_name.replace('_', '-')}",
                dest=field.name,
                action="store_const",
                const=not default,
                default=None,
                help=f"{help_text} ({'disable' if default else 'enable'})",
            )
            return

        flag = f"--{(metadata.get(CLI_METADATA_NAME) or field.name).replace('_', '-')}"
        choices = metadata.get(CLI_METADATA_CHOICES)
        if choices:
            group.add_argument(flag, dest=field.name, choices=list(choices), default=None, help=help_text)
        else:
            group.add_argument(flag, dest=field.name, type=str, default=None, metavar="VALUE", help=help_text)

    def build_parser(self) -> argparse.ArgumentParser:
        """Create the complete argument parser."""
        parser = argparse.ArgumentParser(
            prog="bibi",
            description="Convert between forum BBCode and Markdown.",
            formatter_class=argparse.RawDescriptionHelpFormatter,
            epilog="""
Examples:
  # Markdown files become BBCode, anything else becomes Markdown
  bibi post.md
  bibi post.bbcode --out post.md

  # Explicit direction, reading from stdin
  cat post.txt | bibi - --to markdown

  # Windows line endings in the generated BBCode
  bibi post.md --line-ending crlf

  # Using options from a config file
  bibi post.md --config .bibi.toml
        """,
        )

        parser.add_argument("input", help="Input file to convert (use '-' for stdin)")
        parser.add_argument("--out", "-o", help="Output file path (default: print to stdout)")
        parser.add_argument(
            "--to",
            choices=["markdown", "bbcode"],
            default=None,
            help="Target format. Default: chosen from the input file extension "
            "(.md, .markdown, .mdown, .mkd -> bbcode, anything else -> markdown)",
        )
        parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

        self.add_option_arguments(parser)

        parser.add_argument(
            "--config",
            help="Path to configuration file (JSON, TOML, YAML or pyproject.toml). "
            "If not specified, uses BIBI_CONFIG, then searches for .bibi.toml, .bibi.yaml, "
            ".bibi.yml or .bibi.json from the current directory upwards, then in the home directory.",
        )
        parser.add_argument("--no-config", action="store_true", help="Ignore configuration files")

        parser.add_argument(
            "--rich",
            action="store_true",
            help="Enable rich terminal output for Markdown (automatically disabled when output is piped)",
        )
        parser.add_argument(
            "--force-rich", action="store_true", help="Use rich output even when stdout is not a terminal"
        )

        parser.add_argument(
            "--verbose",
            "-v",
            action="store_true",
            help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
        )
        parser.add_argument(
            "--log-level",
            choices=["DEBUG", "INFO", "WARNING", "ERROR"],
            default="WARNING",
            help="Set logging level for debugging (default: WARNING). Overrides --verbose if both are specified.",
        )
        parser.add_argument(
            "--log-file",
            type=str,
            metavar="PATH",
            help="Write log messages to specified file in addition to console output",
        )
        parser.add_argument(
            "--trace",
            action="store_true",
            help="Enable trace mode with timestamped logging and conversion timing",
        )

        return parser


def create_parser(builder: Optional[DynamicCLIBuilder] = None) -> argparse.ArgumentParser:
    """Create and configure the argument parser."""
    return (builder or DynamicCLIBuilder()).build_parser()


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to an appropriate CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map to an exit code

    Returns
    -------
    int
        The appropriate exit code for the exception type

    """
    if isinstance(exception, (ValidationError, argparse.ArgumentTypeError)):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, (ConversionError, ParsingError)):
        return EXIT_CONVERSION_ERROR

    return EXIT_ERROR
