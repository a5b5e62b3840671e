"""
Tests for CLI Commands
======================
Tests for namekit CLI interface in namekit/cli.py.
"""

import os
import pytest
import sys
import subprocess
from pathlib import Path

# Ensure repo root is on path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from namekit.cli import main, EXIT_OK, EXIT_USAGE


def run_cli(*args):
    env = dict(os.environ, PYTHONIOENCODING="utf-8")
    return subprocess.run(
        [sys.executable, "-m", "namekit", *args],
        capture_output=True,
        text=True,
        encoding="utf-8",
        cwd=str(ROOT),
        env=env,
    )


class TestCLIBasic:
    """Basic CLI tests."""

    def test_version_flag(self):
        """Test --version flag."""
        result = run_cli("--version")
        assert result.returncode == 0
        assert "namekit" in result.stdout.lower()

    def test_help_flag(self):
        """Test --help flag."""
        result = run_cli("--help")
        assert result.returncode == 0
        assert "generate" in result.stdout.lower()
        assert "scripts" in result.stdout.lower()

    def test_generate_help(self):
        """Test generate --help."""
        result = run_cli("generate", "--help")
        assert result.returncode == 0
        assert "--seed" in result.stdout
        assert "--all-scripts" in result.stdout

    def test_no_command_prints_help(self, capsys):
        assert main([]) == EXIT_OK
        assert "usage" in capsys.readouterr().out.lower()


class TestGenerateCommand:
    """Tests for the generate command."""

    def test_count(self, capsys):
        assert main(["generate", "-n", "5", "--seed", "demo"]) == EXIT_OK
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 5
        assert all(line[0].isupper() for line in lines)

    def test_seed_reproducible(self, capsys):
        main(["generate", "-n", "8", "--seed", "repeat", "--script", "hangul"])
        first = capsys.readouterr().out
        main(["generate", "-n", "8", "--seed", "repeat", "--script", "hangul"])
        assert capsys.readouterr().out == first

    def test_length_bounds(self, capsys):
        main(["generate", "-n", "20", "--min", "5", "--max", "5", "--script", "latin", "--seed", "x"])
        lines = capsys.readouterr().out.splitlines()
        assert len(lines) == 20
        # a coda n weighs two characters but prints as one letter
        assert all(3 <= len(line) <= 5 for line in lines)

    def test_alias(self, capsys):
        assert main(["g", "-n", "2", "--seed", "alias"]) == EXIT_OK
        assert len(capsys.readouterr().out.splitlines()) == 2

    def test_zero_count(self, capsys):
        assert main(["generate", "-n", "0"]) == EXIT_OK
        assert capsys.readouterr().out == ""

    @pytest.mark.parametrize("args", [
        ["--min", "0"],
        ["--min", "4", "--max", "0"],
        ["--min", "6", "--max", "3"],
        ["-n", "-1"],
        ["--script", "klingon"],
    ])
    def test_invalid_arguments(self, capsys, args):
        assert main(["generate", *args]) == EXIT_USAGE
        assert "Error:" in capsys.readouterr().err

    def test_invalid_via_subprocess(self):
        result = run_cli("generate", "--min", "0")
        assert result.returncode == 2
        assert "Minimum length" in result.stderr

    def test_all_scripts(self, capsys):
        assert main(["generate", "-n", "1", "--seed", "table", "--all-scripts"]) == EXIT_OK
        out = capsys.readouterr().out
        assert "orkhon" in out
        assert "hangul" in out


class TestRenderCommand:
    """Tests for the render command."""

    def test_render(self, capsys):
        assert main(["render", "ka-lin-mo", "--script", "hangul"]) == EXIT_OK
        assert capsys.readouterr().out == "가린모\n"

    def test_render_default_script(self, capsys):
        assert main(["r", "ka-lin-mo"]) == EXIT_OK
        assert capsys.readouterr().out == "Kalinmo\n"

    def test_render_bad_syllable(self, capsys):
        assert main(["render", "ka-xyz"]) == EXIT_USAGE
        assert "Not a syllable" in capsys.readouterr().err

    def test_render_unreachable(self, capsys):
        assert main(["render", "ti", "--script", "hangul"]) == EXIT_USAGE
        assert "unreachable" in capsys.readouterr().err

    def test_render_subprocess(self):
        result = run_cli("render", "a-pan-ti", "--script", "hebrew")
        assert result.returncode == 0
        assert result.stdout.strip() == "אָפָנטִ"


class TestScriptsCommand:
    """Tests for the scripts listing."""

    def test_lists_all_scripts(self, capsys):
        assert main(["scripts"]) == EXIT_OK
        out = capsys.readouterr().out
        for name in ("latin-title-case", "devanagari", "orkhon", "syllabics"):
            assert name in out

    def test_alias(self, capsys):
        assert main(["ls"]) == EXIT_OK
        assert "hangul" in capsys.readouterr().out
