#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the option dataclasses."""

from dataclasses import FrozenInstanceError

import pytest

from bibi.options import BBCodeParserOptions, BBCodeRendererOptions, MarkdownParserOptions


@pytest.mark.unit
class TestOptionDefaults:
    """Test default option values."""

    def test_bbcode_parser_defaults(self) -> None:
        options = BBCodeParserOptions()
        assert options.inline_code_label == "inline"
        assert options.code_block_label == "code"

    def test_renderer_defaults(self) -> None:
        options = BBCodeRendererOptions()
        assert options.line_ending == "\n"
        assert (options.inline_code_label, options.code_block_label) == ("inline", "code")

    def test_markdown_parser_defaults(self) -> None:
        assert MarkdownParserOptions().parse_strikethrough is True


@pytest.mark.unit
class TestOptionValidation:
    """Test values rejected by the option classes."""

    @pytest.mark.parametrize("label", ["", " code", "code ", 'co"de', "co]de"])
    def test_bad_labels(self, label: str) -> None:
        with pytest.raises(ValueError):
            BBCodeParserOptions(code_block_label=label)
        with pytest.raises(ValueError):
            BBCodeRendererOptions(inline_code_label=label)

    @pytest.mark.parametrize("line_ending", ["\r", "\n\r", "crlf", ""])
    def test_bad_line_endings(self, line_ending: str) -> None:
        with pytest.raises(ValueError):
            BBCodeRendererOptions(line_ending=line_ending)  # type: ignore[arg-type]

    def test_crlf_accepted(self) -> None:
        assert BBCodeRendererOptions(line_ending="\r\n").line_ending == "\r\n"


@pytest.mark.unit
class TestCloneFrozen:
    """Test immutability and cloning helpers."""

    def test_frozen(self) -> None:
        options = BBCodeRendererOptions()
        with pytest.raises(FrozenInstanceError):
            options.line_ending = "\r\n"  # type: ignore[misc]

    def test_create_updated(self) -> None:
        original = BBCodeRendererOptions()
        updated = original.create_updated(line_ending="\r\n")
        assert updated.line_ending == "\r\n"
        assert original.line_ending == "\n"
        assert updated.code_block_label == original.code_block_label

    def test_create_updated_validates(self) -> None:
        with pytest.raises(ValueError):
            BBCodeParserOptions().create_updated(inline_code_label="")

    def test_from_mapping_ignores_other_keys(self) -> None:
        options = MarkdownParserOptions.from_mapping({"parse_strikethrough": False, "line_ending": "\r\n"})
        assert options == MarkdownParserOptions(parse_strikethrough=False)

    def test_from_empty_mapping(self) -> None:
        assert BBCodeRendererOptions.from_mapping({}) == BBCodeRendererOptions()
