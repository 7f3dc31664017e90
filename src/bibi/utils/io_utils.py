#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/bibi/utils/io_utils.py
"""I/O utilities for handling output destinations.

This module provides centralized utilities for writing converted text to
output destinations: file paths, or file-like objects in text or binary mode.

"""

from __future__ import annotations

import io
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from io import BytesIO, StringIO
from pathlib import Path
from typing import IO, Union, cast

OutputTarget = Union[str, Path, IO[bytes], IO[str]]
TextWriter = Callable[[str], None]


def is_binary_stream(output: object) -> bool:
    """Detect whether a file-like object expects bytes.

    Parameters
    ----------
    output : object
        Object with a ``write`` method

    Returns
    -------
    bool
        True for binary streams, False for text streams (also the default
        when the mode cannot be determined)

    """
    # Concrete types first, then io base classes, then the mode attribute
    if isinstance(output, BytesIO):
        return True
    if isinstance(output, StringIO):
        return False
    if isinstance(output, io.TextIOBase):
        return False
    if isinstance(output, (io.BufferedIOBase, io.RawIOBase)):
        return True
    mode = getattr(output, "mode", "")
    return isinstance(mode, str) and "b" in mode


def stream_writer(output: Union[IO[bytes], IO[str]]) -> TextWriter:
    """Return a callable writing ``str`` fragments to a text or binary stream.

    Binary streams receive UTF-8; a fragment that cannot be encoded raises
    ``UnicodeEncodeError`` before anything is written.

    Raises
    ------
    TypeError
        If ``output`` has no ``write`` method

    """
    if not hasattr(output, "write"):
        raise TypeError(f"Unsupported output type: {type(output)}")

    if is_binary_stream(output):
        binary_output = cast(IO[bytes], output)

        def write_bytes(fragment: str) -> None:
            binary_output.write(fragment.encode("utf-8"))

        return write_bytes

    return cast(IO[str], output).write


@contextmanager
def open_writer(output: OutputTarget) -> Iterator[TextWriter]:
    """Yield a text writer for a path or a file-like object.

    Paths are opened as UTF-8 text without newline translation and closed on
    exit; file-like objects are left open.

    """
    if isinstance(output, (str, Path)):
        with open(output, "w", encoding="utf-8", newline="") as handle:
            yield handle.write
    else:
        yield stream_writer(output)


def write_content(content: Union[str, bytes], output: OutputTarget) -> None:
    """Write content to a file path or a file-like object.

    Parameters
    ----------
    content : str or bytes
        Content to write; bytes are decoded as UTF-8 for text destinations
    output : str, Path, IO[bytes] or IO[str]
        Output destination

    Raises
    ------
    TypeError
        If content or output has an unsupported type

    Examples
    --------
        >>> buffer = BytesIO()
        >>> write_content("café", buffer)
        >>> buffer.getvalue()
        b'caf\\xc3\\xa9'

    """
    if isinstance(content, bytes):
        content = content.decode("utf-8")
    elif not isinstance(content, str):
        raise TypeError(f"Content must be str or bytes, got {type(content)}")

    with open_writer(output) as write:
        write(content)


__all__ = ["OutputTarget", "TextWriter", "is_binary_stream", "open_writer", "stream_writer", "write_content"]
