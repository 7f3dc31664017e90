#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and default values for the bibi library.

This module centralizes the hardcoded values and default configuration
constants used across bibi.

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. BBCode Tag Vocabulary - Delimiters and default labels
3. Conversion Behavior - Defaults for the option classes
4. File Extensions and Direction Detection - CLI direction selection
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Type Definitions - All Literal Types and Type Aliases
# =============================================================================

ConversionDirection = Literal["markdown", "bbcode"]
LineEnding = Literal["\n", "\r\n"]

# =============================================================================
# BBCode Tag Vocabulary
# =============================================================================

# Shared prefix of every code start tag ("[c=" and "[code=")
CODE_TAG_PROBE = "[c"

INLINE_CODE_START = "[c="
INLINE_CODE_END = "[/c]"
MULTILINE_CODE_START = "[code="
MULTILINE_CODE_END = "[/code]"

# Labels written when no language is known; reading them back means "no language"
DEFAULT_INLINE_CODE_LABEL = "inline"
DEFAULT_CODE_BLOCK_LABEL = "code"

BULLET_MARKER = "[*]"
ORDINAL_SUFFIX = ". "

# Signed 16-bit range accepted for list start="N" attributes
LIST_START_MIN = -32768
LIST_START_MAX = 32767

# =============================================================================
# Conversion Behavior
# =============================================================================

DEFAULT_LINE_ENDING: LineEnding = "\n"
LINE_ENDINGS: tuple[str, ...] = ("\n", "\r\n")

# Names accepted by the CLI and config files
LINE_ENDING_NAMES: dict[str, LineEnding] = {"lf": "\n", "crlf": "\r\n"}
DEFAULT_PARSE_STRIKETHROUGH = True

# =============================================================================
# File Extensions and Direction Detection
# =============================================================================

MARKDOWN_EXTENSIONS = [".md", ".markdown", ".mdown", ".mkd"]

# Files with a Markdown extension are converted to BBCode, everything else to Markdown
DEFAULT_DIRECTION_BY_EXTENSION: dict[str, ConversionDirection] = {ext: "bbcode" for ext in MARKDOWN_EXTENSIONS}
DEFAULT_FALLBACK_DIRECTION: ConversionDirection = "markdown"

CONFIG_FILENAMES = [".bibi.toml", ".bibi.yaml", ".bibi.yml", ".bibi.json"]
CONFIG_ENV_VAR = "BIBI_CONFIG"
