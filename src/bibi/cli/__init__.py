"""Command-line interface for the bibi BBCode/Markdown converter.

This module provides a small CLI tool converting one file between forum
BBCode and Markdown. The direction is taken from ``--to`` or, when omitted,
from the input file extension.

Configuration
-------------
Option defaults can be stored in a configuration file (``.bibi.toml``,
``.bibi.yaml``, ``.bibi.yml``, ``.bibi.json`` or ``[tool.bibi]`` in
pyproject.toml). The file named by ``--config`` wins over the BIBI_CONFIG
environment variable, which wins over auto-discovery. Command-line flags
always override configuration values.

Examples
--------
Convert a Markdown post to BBCode::

    $ bibi post.md

Convert BBCode to Markdown, writing a file::

    $ bibi post.bbcode --out post.md

Read from stdin::

    $ cat post.txt | bibi - --to markdown

Use rich formatting::

    $ bibi post.bbcode --rich

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

import argparse
import logging
import os
import sys

from bibi.cli.builder import EXIT_ERROR, EXIT_VALIDATION_ERROR, DynamicCLIBuilder, create_parser
from bibi.cli.config import load_config_with_priority
from bibi.cli.processors import detect_direction, process_conversion
from bibi.constants import CONFIG_ENV_VAR
from bibi.logging_utils import configure_logging

logger = logging.getLogger(__name__)

__all__ = [
    "main",
    "DynamicCLIBuilder",
    "create_parser",
    "detect_direction",
]


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    """Set up logging level based on command-line arguments.

    Parameters
    ----------
    parsed_args : argparse.Namespace
        Parsed command-line arguments

    """
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def main(args: list[str] | None = None) -> int:
    """Execute the CLI and return the process exit code."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    config: dict = {}
    if not parsed_args.no_config:
        try:
            config = load_config_with_priority(parsed_args.config, os.environ.get(CONFIG_ENV_VAR))
        except argparse.ArgumentTypeError as e:
            print(f"Error loading configuration file: {e}", file=sys.stderr)
            return EXIT_VALIDATION_ERROR

    try:
        return process_conversion(parsed_args, config)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Unexpected error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
