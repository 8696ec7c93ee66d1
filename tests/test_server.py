"""
Tests for the delivery layers

CLI, text formatters, config helpers and the MCP server tool wrappers.
"""
import asyncio
import json
from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from lockwords import cli, config
from lockwords.formatters import (
    format_check_word,
    format_describe_lock,
    format_find_combinations,
)

AB_WHEELS = "3\n2\nab\nab\nab\n"


class TestCLI:
    """Test the lockwords console program."""

    def run(self, lock_files, capsys, wheels, words, *args):
        wheels_path, dictionary_path = lock_files(wheels, words)
        code = cli.main(["--wheels", str(wheels_path), "--dictionary", str(dictionary_path), *args])
        out, err = capsys.readouterr()
        return code, out, err

    def test_solve_prints_words_and_total(self, lock_files, capsys):
        """Test solve output."""
        code, out, _ = self.run(lock_files, capsys, AB_WHEELS, ["ab", "abc", "ba"], "solve")

        assert code == 0
        assert out.splitlines() == ["ab", "ba", "Found 4 words."]

    def test_solve_is_default_command(self, lock_files, capsys):
        """Test solve runs without a subcommand."""
        code, out, _ = self.run(lock_files, capsys, AB_WHEELS, ["ab"])

        assert code == 0
        assert out.splitlines() == ["ab", "Found 2 words."]

    def test_solve_skips_non_alpha(self, lock_files, capsys):
        """Test solve skips non-alphabetic words."""
        code, out, _ = self.run(lock_files, capsys, AB_WHEELS, ["abc123", "ba"], "solve")

        assert code == 0
        assert out.splitlines() == ["ba", "Found 2 words."]

    def test_invalid_wheel_count_aborts(self, lock_files, capsys):
        """Test a zero wheel count aborts."""
        code, out, err = self.run(lock_files, capsys, "0\n2\nab\n", ["ab"], "solve")

        assert code == 1
        assert out == ""
        assert "wheel count" in err

    def test_insufficient_letters_aborts(self, lock_files, capsys):
        """Test a short letter line aborts."""
        code, out, err = self.run(lock_files, capsys, "1\n3\nab\n", ["ab"], "solve")

        assert code == 1
        assert out == ""
        assert "insufficient letters" in err

    def test_strict_aborts_without_partial_output(self, lock_files, capsys):
        """Test strict abort prints no matches."""
        code, out, err = self.run(
            lock_files, capsys, AB_WHEELS, ["ab", "a" * 300], "solve", "--strict"
        )

        assert code == 1
        assert out == ""
        assert "maximum length" in err

    def test_missing_wheel_file(self, tmp_path, capsys):
        """Test a missing wheel file."""
        code = cli.main(["--wheels", str(tmp_path / "nope.txt"), "solve"])
        _, err = capsys.readouterr()

        assert code == 1
        assert "Unable to open wheel file" in err

    def test_check(self, lock_files, capsys):
        """Test the check command."""
        code, out, _ = self.run(lock_files, capsys, AB_WHEELS, [], "check", "AB")

        assert code == 0
        assert out.strip() == "ab | MATCH | 2 alignments @ 0,1"

    def test_check_invalid_word(self, lock_files, capsys):
        """Test check with an invalid word."""
        code, _, err = self.run(lock_files, capsys, AB_WHEELS, [], "check", "a-b")

        assert code == 1
        assert "invalid_word" in err

    def test_describe(self, lock_files, capsys):
        """Test the describe command."""
        code, out, _ = self.run(lock_files, capsys, "2\n2\nba\nDC\n", [], "describe")

        assert code == 0
        assert "LOCK 2 wheels x 2 letters" in out
        assert "0  ab" in out
        assert "1  cd" in out

    def test_list_tools(self, capsys):
        """Test list-tools output."""
        code = cli.main(["list-tools"])
        out, _ = capsys.readouterr()

        assert code == 0
        assert "Tool: find_combinations" in out
        assert "Tool: check_word" in out


class TestFormatters:
    """Test plain-text rendering of handler results."""

    RESULT = {
        "success": True,
        "combinations": [
            {"word": "ab", "count": 2, "offsets": [0, 1]},
            {"word": "ba", "count": 2, "offsets": [0, 1]},
        ],
        "combination_count": 3,
        "total": 5,
        "truncated": True,
        "words_read": 4,
        "skipped": {"invalid": 1, "too_long": 0, "longer_than_lock": 0},
        "lock": {"wheel_count": 3, "letters_per_wheel": 2},
    }

    def test_find_combinations(self):
        """Test combinations rendering."""
        text = format_find_combinations(self.RESULT)

        assert text.startswith("LOCK 3x2 | 3 COMBINATIONS | 5 ALIGNMENTS")
        assert "ab    2  @ 0,1" in text
        assert "... 1 more" in text
        assert "1 invalid" in text
        assert text.endswith("Found 5 words.")

    def test_error(self):
        """Test error rendering."""
        text = format_find_combinations({
            "success": False,
            "error": "Wheel 1 contained too many letters",
            "error_kind": "too_many_letters",
        })
        assert text == "ERROR: Wheel 1 contained too many letters [too_many_letters]"

    def test_check_word_single_alignment(self):
        """Test a single alignment."""
        text = format_check_word({
            "success": True, "matched": True, "word": "abc", "count": 1, "offsets": [0]
        })
        assert text == "abc | MATCH | 1 alignment @ 0"

    def test_check_word_no_match(self):
        """Test a non-matching word."""
        text = format_check_word({
            "success": True, "matched": False, "word": "xyz", "count": 0, "offsets": []
        })
        assert text == "xyz | NO MATCH"

    def test_describe_lock(self):
        """Test lock rendering."""
        text = format_describe_lock({
            "success": True,
            "wheel_count": 2,
            "letters_per_wheel": 1,
            "wheels": ["a", "b"],
            "source": "inline wheels",
        })
        assert text.splitlines()[0] == "LOCK 2 wheels x 1 letters (inline wheels)"
        assert text.splitlines()[2:] == ["0  a", "1  b"]


class TestConfig:
    """Test environment-driven configuration."""

    def test_defaults(self, monkeypatch):
        """Test default configuration."""
        monkeypatch.delenv("LOCKWORDS_WHEELS", raising=False)
        monkeypatch.delenv("LOCKWORDS_DICTIONARY", raising=False)
        monkeypatch.delenv("LOCKWORDS_STRICT", raising=False)
        monkeypatch.delenv("PORT", raising=False)

        assert str(config.get_wheels_path()) == "wheels.txt"
        assert str(config.get_dictionary_path()) == "dictionary.txt"
        assert config.get_strict() is False
        assert config.get_port() == 5003

    def test_env_overrides(self, monkeypatch):
        """Test environment overrides."""
        monkeypatch.setenv("LOCKWORDS_WHEELS", "/data/w.txt")
        monkeypatch.setenv("LOCKWORDS_STRICT", "yes")
        monkeypatch.setenv("PORT", "8080")

        assert str(config.get_wheels_path()) == "/data/w.txt"
        assert config.get_strict() is True
        assert config.get_port() == 8080

    def test_invalid_port(self, monkeypatch):
        """Test an invalid PORT."""
        monkeypatch.setenv("PORT", "eighty")
        with pytest.raises(ValueError, match="Invalid PORT value"):
            config.get_port()


class TestStdioServerTools:
    """Test the FastMCP tool wrappers delegate to the handlers."""

    def test_find_combinations(self):
        """Test find_combinations tool delegates."""
        from lockwords import server

        mock_handlers = MagicMock()
        mock_handlers.find_combinations = AsyncMock(return_value={"success": True, "total": 4})

        with patch.object(server, "handlers", mock_handlers):
            result = asyncio.run(server.find_combinations(wheels="1\n1\na", dictionary="a"))

        assert result["total"] == 4
        call_args = mock_handlers.find_combinations.call_args
        assert call_args.kwargs["wheels"] == "1\n1\na"
        assert call_args.kwargs["strict"] is None

    def test_check_word(self):
        """Test check_word tool delegates."""
        from lockwords import server

        mock_handlers = MagicMock()
        mock_handlers.check_word = AsyncMock(return_value={"success": True, "count": 2})

        with patch.object(server, "handlers", mock_handlers):
            result = asyncio.run(server.check_word("ab"))

        assert result["count"] == 2
        mock_handlers.check_word.assert_called_once_with(word="ab", wheels=None)


class TestHttpServer:
    """Test HTTP/SSE server dispatch and routes."""

    def test_list_tools(self):
        """Test HTTP tool listing."""
        from lockwords import server_http

        tools = asyncio.run(server_http.list_tools())
        assert {t.name for t in tools} == {"find_combinations", "check_word", "describe_lock"}

    def test_dispatch_describe_lock(self):
        """Test dispatching describe_lock."""
        from lockwords import server_http

        result = asyncio.run(server_http._dispatch_tool(
            "describe_lock", {"wheels": "1\n2\nab\n"}
        ))
        assert result["wheels"] == ["ab"]

    def test_dispatch_unknown_tool(self):
        """Test dispatching an unknown tool."""
        from lockwords import server_http

        with pytest.raises(ValueError, match="Unknown tool"):
            asyncio.run(server_http._dispatch_tool("fetch_filing", {}))

    def test_ping(self):
        """Test health check."""
        from lockwords import server_http

        response = asyncio.run(server_http.handle_ping(MagicMock()))
        assert json.loads(response.body) == {"status": "ok"}

    def test_dispatch_leaves_strict_to_server(self):
        """Test omitted strict argument is passed through as unset."""
        from lockwords import server_http

        mock_handlers = MagicMock()
        mock_handlers.find_combinations = AsyncMock(return_value={"success": True})

        with patch.object(server_http, "handlers", mock_handlers):
            asyncio.run(server_http._dispatch_tool("find_combinations", {}))

        assert mock_handlers.find_combinations.call_args.kwargs["strict"] is None
