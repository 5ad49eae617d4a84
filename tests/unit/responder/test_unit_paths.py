# tests/unit/responder/test_unit_paths.py - v1
"""Tests for responder/paths.py."""

from __future__ import annotations

import os

import pytest

from etagfiles.responder.errors import InvalidInput, IoError, NotFound
from etagfiles.responder.paths import canonicalize, require_regular_file


class TestCanonicalize:
    def test_absolute_result(self, sample_file, monkeypatch):
        monkeypatch.chdir(sample_file.parent)
        result = canonicalize("a.txt")
        assert result.is_absolute()
        assert result == sample_file.resolve()

    def test_dot_segments_removed(self, static_root):
        result = canonicalize(static_root / "assets" / ".." / "." / "a.txt")
        assert result == (static_root / "a.txt").resolve()
        assert ".." not in result.parts

    def test_symlink_resolved(self, static_root):
        link = static_root / "link.txt"
        try:
            os.symlink(static_root / "a.txt", link)
        except (OSError, NotImplementedError):
            pytest.skip("symlinks not supported")
        assert canonicalize(link) == (static_root / "a.txt").resolve()

    def test_missing_path(self, static_root):
        with pytest.raises(NotFound) as exc_info:
            canonicalize(static_root / "missing.txt")
        assert exc_info.value.kind == "not_found"
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    def test_dangling_symlink(self, static_root):
        link = static_root / "dangling"
        try:
            os.symlink(static_root / "gone", link)
        except (OSError, NotImplementedError):
            pytest.skip("symlinks not supported")
        with pytest.raises(NotFound):
            canonicalize(link)

    def test_file_used_as_directory(self, sample_file):
        with pytest.raises(NotFound):
            canonicalize(sample_file / "child")

    def test_symlink_loop(self, static_root):
        loop = static_root / "loop"
        try:
            os.symlink(loop, loop)
        except (OSError, NotImplementedError):
            pytest.skip("symlinks not supported")
        with pytest.raises(IoError):
            canonicalize(loop)

    def test_nul_byte_is_invalid_input(self, static_root):
        with pytest.raises(InvalidInput) as exc_info:
            canonicalize(str(static_root) + "/a\x00.txt")
        assert exc_info.value.kind == "invalid_input"
        assert isinstance(exc_info.value.__cause__, ValueError)


class TestRequireRegularFile:
    def test_regular_file(self, sample_file):
        assert require_regular_file(sample_file) == sample_file

    def test_directory_rejected(self, static_root):
        with pytest.raises(InvalidInput) as exc_info:
            require_regular_file(static_root / "assets")
        assert exc_info.value.kind == "invalid_input"
        assert exc_info.value.path == str(static_root / "assets")
