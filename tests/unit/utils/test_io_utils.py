#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for utils/io_utils.py."""

from __future__ import annotations

import io
from io import BytesIO, StringIO

import pytest

from bibi.utils.io_utils import is_binary_stream, open_writer, stream_writer, write_content


class TestIsBinaryStream:
    """Test binary stream detection."""

    def test_bytesio(self) -> None:
        assert is_binary_stream(BytesIO()) is True

    def test_stringio(self) -> None:
        assert is_binary_stream(StringIO()) is False

    def test_text_wrapper(self) -> None:
        assert is_binary_stream(io.TextIOWrapper(BytesIO(), encoding="utf-8")) is False

    def test_buffered_writer(self) -> None:
        assert is_binary_stream(io.BufferedWriter(io.BytesIO())) is True

    def test_mode_attribute(self) -> None:
        class Sink:
            mode = "wb"

            def write(self, data):
                pass

        assert is_binary_stream(Sink()) is True

    def test_unknown_defaults_to_text(self) -> None:
        class Sink:
            def write(self, data):
                pass

        assert is_binary_stream(Sink()) is False


class TestWriters:
    """Test writer construction and content writing."""

    def test_stream_writer_encodes_for_binary(self) -> None:
        buffer = BytesIO()
        stream_writer(buffer)("é")
        assert buffer.getvalue() == b"\xc3\xa9"

    def test_stream_writer_rejects_non_streams(self) -> None:
        with pytest.raises(TypeError):
            stream_writer(42)  # type: ignore[arg-type]

    def test_open_writer_path_keeps_crlf(self, tmp_path) -> None:
        target = tmp_path / "out.txt"
        with open_writer(target) as write:
            write("a\r\nb\n")
        assert target.read_bytes() == b"a\r\nb\n"

    def test_open_writer_leaves_stream_open(self) -> None:
        buffer = StringIO()
        with open_writer(buffer) as write:
            write("x")
        assert not buffer.closed
        assert buffer.getvalue() == "x"

    def test_write_content_bytes_to_text(self) -> None:
        buffer = StringIO()
        write_content("é".encode("utf-8"), buffer)
        assert buffer.getvalue() == "é"

    def test_write_content_str_path(self, tmp_path) -> None:
        target = tmp_path / "out.md"
        write_content("**x**", str(target))
        assert target.read_text(encoding="utf-8") == "**x**"

    def test_write_content_rejects_other_types(self) -> None:
        with pytest.raises(TypeError):
            write_content(42, StringIO())  # type: ignore[arg-type]
