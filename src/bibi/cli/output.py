"""Utility functions for cli output."""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# src/bibi/cli/output.py
import argparse
import sys
from typing import IO, Optional


def should_use_rich_output(args: argparse.Namespace, stream: Optional[IO[str]] = None) -> bool:
    """Determine if Rich output should be used based on TTY and args.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command line arguments
    stream : optional, default None
        Uses sys.stdout unless otherwise specified.

    Returns
    -------
    bool
        True if Rich output should be used

    Notes
    -----
    Rich output is used when:
    - The --rich flag is set
    - AND either --force-rich is set OR the stream is a TTY

    A missing Rich installation is reported when rendering, not here.

    """
    if not args.rich:
        return False

    if getattr(args, "force_rich", False):
        return True

    target = stream or sys.stdout
    isatty = getattr(target, "isatty", None)
    if callable(isatty):
        try:
            return bool(isatty())
        except (OSError, ValueError):
            return False

    return False


def render_rich_markdown(markdown_content: str) -> tuple[str, bool]:
    """Format Markdown for the terminal with Rich.

    Returns
    -------
    tuple[str, bool]
        Tuple of (formatted_content, is_rich_formatted); the plain Markdown
        and False if Rich is not installed

    """
    try:
        from rich.console import Console
        from rich.markdown import Markdown
    except ImportError:
        print("Warning: Rich library not installed. Install with: pip install bibi[rich]", file=sys.stderr)
        return markdown_content, False

    console = Console()
    with console.capture() as capture:
        console.print(Markdown(markdown_content))
    return capture.get(), True
