# tests/unit/test_main.py - v1
"""Tests for main.py: CLI entry point."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from etagfiles.cache.fingerprint import fingerprint_bytes
from etagfiles.main import _build_parser, main

HELLO_FP = fingerprint_bytes(b"hello")


# ---------------------------------------------------------------------------
# Parser tests
# ---------------------------------------------------------------------------

class TestBuildParser:
    def test_version_flag(self):
        parser = _build_parser()
        with pytest.raises(SystemExit) as exc_info:
            parser.parse_args(["--version"])
        assert exc_info.value.code == 0

    def test_fingerprint_subcommand(self):
        args = _build_parser().parse_args(["fingerprint", "a.txt", "b.txt"])
        assert args.command == "fingerprint"
        assert args.files == [Path("a.txt"), Path("b.txt")]

    def test_check_subcommand(self):
        args = _build_parser().parse_args(["check", "a.txt", "--if-none-match", '"ABC"'])
        assert args.command == "check"
        assert args.file == Path("a.txt")
        assert args.if_none_match == '"ABC"'

    def test_serve_defaults(self):
        args = _build_parser().parse_args(["serve", "/srv"])
        assert args.root == Path("/srv")
        assert args.host is None
        assert args.port is None


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

class TestMain:
    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out.lower()

    def test_fingerprint(self, sample_file, capsys):
        assert main(["fingerprint", str(sample_file)]) == 0
        out = capsys.readouterr().out
        assert out.startswith(HELLO_FP)
        assert str(sample_file.resolve()) in out

    def test_fingerprint_missing_file(self, tmp_path):
        assert main(["fingerprint", str(tmp_path / "missing")]) == 1

    def test_check_changed(self, sample_file, capsys):
        assert main(["check", str(sample_file)]) == 0
        out = capsys.readouterr().out
        assert "changed" in out
        assert "200" in out
        assert f'ETag: "{HELLO_FP}"' in out
        assert "Content-Length: 5" in out

    def test_check_matched(self, sample_file, capsys):
        assert main(["check", str(sample_file), "--if-none-match", f'"{HELLO_FP}"']) == 0
        out = capsys.readouterr().out
        assert "matched" in out
        assert "304" in out

    def test_check_directory_fails(self, static_root):
        assert main(["check", str(static_root)]) == 1

    def test_serve_requires_directory(self, sample_file):
        assert main(["serve", str(sample_file)]) == 1

    def test_serve_runs_uvicorn(self, static_root):
        with patch("uvicorn.run") as mock_run:
            assert main(["serve", str(static_root), "--port", "9123"]) == 0
        _, kwargs = mock_run.call_args
        assert kwargs["port"] == 9123
        app = mock_run.call_args.args[0]
        assert app.state.file_endpoint.root == static_root.resolve()

    def test_serve_passes_log_level_to_uvicorn(self, static_root, monkeypatch):
        monkeypatch.setenv("ETAGFILES_LOG_LEVEL", "WARNING")
        with patch("uvicorn.run") as mock_run:
            assert main(["serve", str(static_root)]) == 0
        assert mock_run.call_args.kwargs["log_level"] == "warning"

    def test_serve_verbose_uses_debug_log_level(self, static_root, monkeypatch):
        monkeypatch.setenv("ETAGFILES_LOG_LEVEL", "WARNING")
        with patch("uvicorn.run") as mock_run:
            assert main(["-v", "serve", str(static_root)]) == 0
        assert mock_run.call_args.kwargs["log_level"] == "debug"
