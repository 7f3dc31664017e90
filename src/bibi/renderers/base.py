#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bibi/renderers/base.py
"""Base classes for markup event renderers.

This module defines the abstract base class that event renderers inherit
from. A renderer consumes a sequence of ``bibi.ast`` markup events exactly
once and writes its output incrementally to a destination.

"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable
from io import StringIO

from bibi.ast import MarkupEvent
from bibi.exceptions import EncodingError, InvalidOptionsError
from bibi.options.base import BaseRendererOptions
from bibi.utils.io_utils import OutputTarget


class BaseRenderer(ABC):
    """Abstract base class for all markup event renderers.

    Parameters
    ----------
    options : BaseRendererOptions or None, default = None
        Format-specific rendering options

    Examples
    --------
    Creating a custom renderer:

        >>> class PlainTextRenderer(BaseRenderer):
        ...     def render(self, events, output):
        ...         ...

    """

    def __init__(self, options: BaseRendererOptions | None = None):
        """Initialize the renderer with optional configuration."""
        self.options = options

    @abstractmethod
    def render(self, events: Iterable[MarkupEvent], output: OutputTarget) -> None:
        """Render the events to the specified output.

        Parameters
        ----------
        events : iterable of MarkupEvent
            Events in document order; consumed once
        output : str, Path, IO[bytes] or IO[str]
            Output destination (file path or file-like object)

        Raises
        ------
        OutputWriteError
            If writing to the output fails
        EncodingError
            If the output cannot be encoded as UTF-8

        """
        pass

    def render_to_string(self, events: Iterable[MarkupEvent]) -> str:
        """Render the events to a string.

        Raises
        ------
        EncodingError
            If the rendered text cannot be encoded as UTF-8

        """
        buffer = StringIO()
        self.render(events, buffer)
        result = buffer.getvalue()
        self._check_encodable(result)
        return result

    @staticmethod
    def _check_encodable(text: str) -> None:
        """Raise EncodingError if ``text`` is not representable as UTF-8."""
        try:
            text.encode("utf-8")
        except UnicodeEncodeError as e:
            raise EncodingError(f"Rendered output is not valid UTF-8 text: {e}", original_error=e) from e

    @staticmethod
    def _validate_options_type(options: BaseRendererOptions | None, expected_type: type, renderer_name: str) -> None:
        """Validate that options are of the correct type for this renderer.

        Raises
        ------
        InvalidOptionsError
            If options are not None and not an instance of expected_type

        """
        if options is not None and not isinstance(options, expected_type):
            raise InvalidOptionsError(
                converter_name=renderer_name,
                expected_type=expected_type,
                received_type=type(options),
            )
