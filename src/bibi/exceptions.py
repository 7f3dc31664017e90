#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the bibi library.

This module defines specialized exception classes for the error conditions
that can occur while converting between BBCode and Markdown. Malformed markup
is never an error: the converters degrade to literal output instead. Only
I/O and encoding failures reach the caller.

Exception Hierarchy
-------------------
- BibiError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for parser or renderer)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)
    - FileAccessError (permissions, unreadable files)

  - ParsingError (markup that cannot be interpreted)
    - ListHeadError (malformed [list ...] attributes, always recovered)

  - ConversionError (conversion aborted)
    - OutputWriteError (sink write failures)
    - EncodingError (text that cannot be encoded or decoded as UTF-8)

"""

from typing import Any


class BibiError(Exception):
    """Base exception class for all bibi-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(BibiError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an incorrect options class is provided.

    Parameters
    ----------
    converter_name : str
        Name of the parser or renderer that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message

    """

    def __init__(
        self,
        converter_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{converter_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.converter_name = converter_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(BibiError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when an input file cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class FileAccessError(FileError):
    """Exception raised when a file exists but cannot be read."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file access error."""
        if message is None:
            message = f"Cannot access file: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(BibiError):
    """Exception raised when a piece of markup cannot be interpreted.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class ListHeadError(ParsingError):
    """Exception raised when a ``[list ...]`` attribute string is malformed.

    The BBCode reader catches this and leaves the list block unconverted.

    Parameters
    ----------
    attributes : str
        The full attribute text of the list tag
    remainder : str
        The unconsumed part of the attribute text

    """

    def __init__(self, attributes: str, remainder: str):
        """Initialize the list head error."""
        super().__init__(f"Unrecognized list attributes: {remainder.strip()!r}", parsing_stage="list_head")
        self.attributes = attributes
        self.remainder = remainder


class ConversionError(BibiError):
    """Exception raised when a conversion has to be aborted.

    Parameters
    ----------
    message : str
        Description of the conversion failure
    direction : str, optional
        Target format of the aborted conversion ("markdown" or "bbcode")
    original_error : Exception, optional
        The underlying exception

    """

    def __init__(self, message: str, direction: str | None = None, original_error: Exception | None = None):
        """Initialize the conversion error."""
        super().__init__(message, original_error)
        self.direction = direction


class OutputWriteError(ConversionError):
    """Exception raised when writing to the output sink fails.

    Parameters
    ----------
    message : str, optional
        Custom error message
    file_path : str, optional
        Path of the output file, when the sink is a file path

    """

    def __init__(
        self,
        message: str | None = None,
        file_path: str | None = None,
        direction: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the output write error."""
        if message is None:
            message = f"Failed to write output: {file_path}" if file_path else "Failed to write output"
        super().__init__(message, direction=direction, original_error=original_error)
        self.file_path = file_path


class EncodingError(ConversionError):
    """Exception raised when text cannot be encoded or decoded as UTF-8."""
