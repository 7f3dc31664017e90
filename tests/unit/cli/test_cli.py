#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Unit tests for the bibi command-line entry point.

These tests drive ``main()`` end to end with real files in a temporary
directory and check stdout, written files and exit codes.
"""

import io
import logging
import sys

import pytest

from bibi.cli import main
from bibi.cli.builder import (
    EXIT_CONVERSION_ERROR,
    EXIT_FILE_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
)


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    """Run each test from an empty temporary directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


def _stdin(monkeypatch, data: bytes) -> None:
    monkeypatch.setattr(sys, "stdin", io.TextIOWrapper(io.BytesIO(data), encoding="utf-8"))


@pytest.mark.unit
@pytest.mark.cli
class TestConversion:
    """Test conversions driven from the command line."""

    def test_markdown_file_to_bbcode(self, workdir, capsys):
        (workdir / "post.md").write_text("- one\n- two\n", encoding="utf-8")

        assert main(["post.md"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "[list]\n[*]one\n[*]two\n[/list]\n"

    def test_bbcode_file_to_markdown(self, workdir, capsys):
        (workdir / "post.bbcode").write_text("[b]Hello[/b] [del]everybody[/del]", encoding="utf-8")

        assert main(["post.bbcode"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "**Hello** ~~everybody~~"

    def test_unknown_extension_defaults_to_markdown(self, workdir, capsys):
        (workdir / "post.txt").write_text("[i]x[/i]", encoding="utf-8")

        assert main(["post.txt"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "*x*"

    def test_uppercase_extension(self, workdir, capsys):
        (workdir / "POST.MD").write_text("# T", encoding="utf-8")

        assert main(["POST.MD"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "[big]T[/big]\n\n"

    def test_explicit_direction_overrides_extension(self, workdir, capsys):
        (workdir / "post.md").write_text("[b]x[/b]", encoding="utf-8")

        assert main(["post.md", "--to", "markdown"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "**x**"

    def test_out_writes_file(self, workdir, capsys):
        (workdir / "post.bbcode").write_text("[quote]a\nb[/quote]", encoding="utf-8")

        assert main(["post.bbcode", "--out", "post.md"]) == EXIT_SUCCESS
        assert (workdir / "post.md").read_text(encoding="utf-8") == "> a\n> b"
        assert capsys.readouterr().out == ""

    def test_line_ending_flag(self, workdir):
        (workdir / "post.md").write_text("# T", encoding="utf-8")

        assert main(["post.md", "-o", "post.bbcode", "--line-ending", "crlf"]) == EXIT_SUCCESS
        assert (workdir / "post.bbcode").read_bytes() == b"[big]T[/big]\r\n\r\n"

    def test_no_strikethrough_flag(self, workdir, capsys):
        (workdir / "post.md").write_text("~~x~~", encoding="utf-8")

        assert main(["post.md", "--no-strikethrough"]) == EXIT_SUCCESS
        assert "[del]" not in capsys.readouterr().out

    def test_code_block_label_flag(self, workdir, capsys):
        (workdir / "post.md").write_text("```\nx\n```\n", encoding="utf-8")

        assert main(["post.md", "--code-block-label", "text"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "[code=text]\nx\n[/code]\n"

    def test_stdin_with_direction(self, workdir, monkeypatch, capsys):
        _stdin(monkeypatch, b"[b]x[/b]")

        assert main(["-", "--to", "markdown"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "**x**"

    def test_stdin_to_bbcode(self, workdir, monkeypatch, capsys):
        _stdin(monkeypatch, b"**x**")

        assert main(["-", "--to", "bbcode"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "[b]x[/b]\n\n"

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert "bibi" in capsys.readouterr().out


@pytest.mark.unit
@pytest.mark.cli
class TestExitCodes:
    """Test error reporting and exit codes."""

    def test_missing_file(self, workdir, capsys):
        assert main(["missing.md"]) == EXIT_FILE_ERROR
        assert "Error: File not found" in capsys.readouterr().err

    def test_directory_input(self, workdir):
        (workdir / "folder.md").mkdir()

        assert main(["folder.md"]) == EXIT_FILE_ERROR

    def test_stdin_without_direction(self, workdir, monkeypatch, capsys):
        _stdin(monkeypatch, b"x")

        assert main(["-"]) == EXIT_VALIDATION_ERROR
        assert "--to" in capsys.readouterr().err

    def test_invalid_utf8_input(self, workdir):
        (workdir / "post.bbcode").write_bytes(b"[b]\xff[/b]")

        assert main(["post.bbcode"]) == EXIT_CONVERSION_ERROR

    def test_unwritable_output(self, workdir):
        (workdir / "post.md").write_text("x", encoding="utf-8")

        assert main(["post.md", "--out", "missing/post.bbcode"]) == EXIT_CONVERSION_ERROR

    def test_invalid_flag_choice(self, workdir):
        with pytest.raises(SystemExit) as exc_info:
            main(["post.md", "--line-ending", "cr"])
        assert exc_info.value.code == 2

    def test_invalid_label(self, workdir, capsys):
        (workdir / "post.md").write_text("`x`", encoding="utf-8")

        assert main(["post.md", "--inline-code-label", 'a"b']) == EXIT_VALIDATION_ERROR
        assert "Invalid option value" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.cli
class TestConfigFiles:
    """Test configuration files applied through main()."""

    def test_discovered_config(self, workdir):
        (workdir / ".bibi.toml").write_text('line_ending = "crlf"\n', encoding="utf-8")
        (workdir / "post.md").write_text("---", encoding="utf-8")

        assert main(["post.md", "-o", "out.bbcode"]) == EXIT_SUCCESS
        assert (workdir / "out.bbcode").read_bytes() == b"[hr]\r\n"

    def test_flag_overrides_config(self, workdir):
        (workdir / ".bibi.toml").write_text('line_ending = "crlf"\n', encoding="utf-8")
        (workdir / "post.md").write_text("---", encoding="utf-8")

        assert main(["post.md", "-o", "out.bbcode", "--line-ending", "lf"]) == EXIT_SUCCESS
        assert (workdir / "out.bbcode").read_bytes() == b"[hr]\n"

    def test_no_config_flag(self, workdir):
        (workdir / ".bibi.toml").write_text('line_ending = "crlf"\n', encoding="utf-8")
        (workdir / "post.md").write_text("---", encoding="utf-8")

        assert main(["post.md", "-o", "out.bbcode", "--no-config"]) == EXIT_SUCCESS
        assert (workdir / "out.bbcode").read_bytes() == b"[hr]\n"

    def test_explicit_config(self, workdir, capsys):
        (workdir / "settings.yaml").write_text("code_block_label: text\n", encoding="utf-8")
        (workdir / "post.bbcode").write_text("[code=text]x[/code]", encoding="utf-8")

        assert main(["post.bbcode", "--config", "settings.yaml"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "```\nx\n```\n"

    def test_env_var_config(self, workdir, monkeypatch, capsys):
        (workdir / "settings.json").write_text('{"parse_strikethrough": false}', encoding="utf-8")
        monkeypatch.setenv("BIBI_CONFIG", str(workdir / "settings.json"))
        (workdir / "post.md").write_text("~~x~~", encoding="utf-8")

        assert main(["post.md"]) == EXIT_SUCCESS
        assert "[del]" not in capsys.readouterr().out

    def test_config_direction_for_stdin(self, workdir, monkeypatch, capsys):
        (workdir / ".bibi.toml").write_text('to = "bbcode"\n', encoding="utf-8")
        _stdin(monkeypatch, b"*x*")

        assert main(["-"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "[cur]x[/cur]\n\n"

    def test_config_direction_map(self, workdir, capsys):
        (workdir / ".bibi.toml").write_text('[directions]\n".txt" = "bbcode"\n', encoding="utf-8")
        (workdir / "post.txt").write_text("**x**", encoding="utf-8")

        assert main(["post.txt"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "[b]x[/b]\n\n"

    def test_pyproject_section(self, workdir, capsys):
        (workdir / "pyproject.toml").write_text('[tool.bibi]\ninline_code_label = "plain"\n', encoding="utf-8")
        (workdir / "post.md").write_text("`x`", encoding="utf-8")

        assert main(["post.md"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "[c=plain]x[/c]\n\n"

    def test_invalid_config_file(self, workdir, capsys):
        (workdir / "bad.toml").write_text("line_ending = ", encoding="utf-8")

        assert main(["post.md", "--config", "bad.toml"]) == EXIT_VALIDATION_ERROR
        assert "Error loading configuration file" in capsys.readouterr().err

    def test_missing_config_file(self, workdir):
        assert main(["post.md", "--config", "nope.toml"]) == EXIT_VALIDATION_ERROR

    def test_invalid_config_value(self, workdir):
        (workdir / ".bibi.toml").write_text('parse_strikethrough = "yes"\n', encoding="utf-8")
        (workdir / "post.md").write_text("x", encoding="utf-8")

        assert main(["post.md"]) == EXIT_VALIDATION_ERROR

    def test_invalid_config_line_ending(self, workdir):
        (workdir / ".bibi.toml").write_text('line_ending = "cr"\n', encoding="utf-8")
        (workdir / "post.md").write_text("x", encoding="utf-8")

        assert main(["post.md"]) == EXIT_VALIDATION_ERROR

    def test_invalid_config_direction(self, workdir):
        (workdir / ".bibi.toml").write_text('to = "html"\n', encoding="utf-8")
        (workdir / "post.txt").write_text("x", encoding="utf-8")

        assert main(["post.txt"]) == EXIT_VALIDATION_ERROR

    def test_unknown_config_keys_ignored(self, workdir, capsys):
        (workdir / ".bibi.toml").write_text('colour = "blue"\n', encoding="utf-8")
        (workdir / "post.txt").write_text("[b]x[/b]", encoding="utf-8")

        assert main(["post.txt"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "**x**"


@pytest.mark.unit
@pytest.mark.cli
class TestLoggingFlags:
    """Test the logging options."""

    def test_log_file(self, workdir):
        (workdir / "post.md").write_text("x", encoding="utf-8")

        assert main(["post.md", "--log-level", "INFO", "--log-file", "bibi.log"]) == EXIT_SUCCESS
        logging.getLogger("bibi").handlers[-1].flush()
        assert "Converting post.md to bbcode" in (workdir / "bibi.log").read_text(encoding="utf-8")

    def test_verbose_sets_debug(self, workdir):
        (workdir / "post.md").write_text("x", encoding="utf-8")

        assert main(["post.md", "-v"]) == EXIT_SUCCESS
        assert logging.getLogger("bibi").level == logging.DEBUG

    def test_default_level_is_warning(self, workdir, capsys):
        (workdir / "post.md").write_text("x", encoding="utf-8")

        assert main(["post.md"]) == EXIT_SUCCESS
        assert logging.getLogger("bibi").level == logging.WARNING
        assert capsys.readouterr().err == ""

    def test_trace_logs_timing(self, workdir, capsys):
        (workdir / "post.md").write_text("x", encoding="utf-8")

        assert main(["post.md", "--trace"]) == EXIT_SUCCESS
        assert "completed in" in capsys.readouterr().err


@pytest.mark.unit
@pytest.mark.cli
class TestRichOutput:
    """Test --rich handling."""

    def test_rich_ignored_when_piped(self, workdir, capsys):
        (workdir / "post.bbcode").write_text("[b]x[/b]", encoding="utf-8")

        assert main(["post.bbcode", "--rich"]) == EXIT_SUCCESS
        assert capsys.readouterr().out == "**x**"

    def test_force_rich(self, workdir, capsys):
        pytest.importorskip("rich")
        (workdir / "post.bbcode").write_text("[b]bold[/b]", encoding="utf-8")

        assert main(["post.bbcode", "--rich", "--force-rich"]) == EXIT_SUCCESS
        out = capsys.readouterr().out
        assert "bold" in out
        assert "**" not in out
