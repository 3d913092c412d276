"""Tests for the command-line interface."""

from unittest.mock import patch

import pytest

from drillmap.cli import main


class TestCli:
    """Test CLI commands."""

    def test_match_command(self, capsys):
        main(["match", "WOB", " hook load ", "GAMMA_RAY"])
        out = capsys.readouterr().out
        lines = out.splitlines()
        assert lines[0].split("->")[1].strip() == "WOB"
        assert lines[1].split("->")[1].strip() == "HOOKLOAD"
        assert lines[2].split("->")[1].strip() == "(unmapped)"
        assert "1 of 3 headers have no matching alias." in out

    def test_steps_command(self, capsys):
        main(["steps", "--current", "2"])
        out = capsys.readouterr().out
        assert "[x] 1 Upload File" in out
        assert "[>] 2 Map Columns" in out

    def test_serve_command(self):
        with patch("drillmap.cli.uvicorn.run") as run:
            main(["serve", "--host", "0.0.0.0", "--port", "9001"])
        run.assert_called_once_with(
            "drillmap.api:create_app",
            host="0.0.0.0",
            port=9001,
            reload=False,
            factory=True,
        )

    def test_no_command_prints_help(self):
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 1
