#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bibi/parsers/base.py
"""Base classes for markup parsers.

This module defines the abstract base class shared by the BBCode parser and
the Markdown event parser.

"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import IO, Any, Union

from bibi.exceptions import EncodingError, InvalidOptionsError, ValidationError
from bibi.options.base import BaseParserOptions

logger = logging.getLogger(__name__)

ParserInput = Union[str, bytes, IO[bytes], IO[str]]


class BaseParser(ABC):
    """Abstract base class for all markup parsers.

    Parameters
    ----------
    options : BaseParserOptions or None, default = None
        Format-specific parsing options

    Notes
    -----
    The parse() method accepts markup text, UTF-8 encoded bytes, or a
    file-like object in text or binary mode. Strings are always treated as
    markup, never as file paths.

    """

    def __init__(self, options: BaseParserOptions | None = None):
        """Initialize the parser with optional configuration."""
        self.options: BaseParserOptions | None = options

    @staticmethod
    def _validate_options_type(options: BaseParserOptions | None, expected_type: type, parser_name: str) -> None:
        """Validate that options are of the correct type for this parser.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=parser_name,
                expected_type=expected_type,
                received_type=type(options),
            )

    @abstractmethod
    def parse(self, input_data: ParserInput) -> Any:
        """Parse the input markup.

        Parameters
        ----------
        input_data : str, bytes, IO[bytes] or IO[str]
            Markup to parse

        Returns
        -------
        Any
            The parser's output representation

        """
        pass

    @staticmethod
    def _load_text_content(input_data: ParserInput) -> str:
        """Load markup text from a string, UTF-8 bytes or a file-like object.

        Raises
        ------
        EncodingError
            If bytes are not valid UTF-8
        ValidationError
            If the input type is not supported

        """
        if isinstance(input_data, str):
            return input_data

        if hasattr(input_data, "read") and not isinstance(input_data, (bytes, bytearray)):
            input_data = input_data.read()  # type: ignore[union-attr]
            if isinstance(input_data, str):
                return input_data

        if isinstance(input_data, (bytes, bytearray)):
            try:
                return bytes(input_data).decode("utf-8-sig")
            except UnicodeDecodeError as e:
                raise EncodingError(f"Input is not valid UTF-8: {e}", original_error=e) from e

        raise ValidationError(
            f"Unsupported input type: {type(input_data).__name__}",
            parameter_name="input_data",
            parameter_value=input_data,
        )
