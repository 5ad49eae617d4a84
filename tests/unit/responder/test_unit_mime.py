# tests/unit/responder/test_unit_mime.py - v1
"""Tests for responder/mime.py."""

from __future__ import annotations

from pathlib import Path

import pytest

from etagfiles.responder.mime import CONTENT_TYPES, content_type_for


class TestContentTypeFor:
    @pytest.mark.parametrize("name,expected", [
        ("a.txt", "text/plain"),
        ("index.html", "text/html"),
        ("style.css", "text/css"),
        ("app.js", "text/javascript"),
        ("data.json", "application/json"),
        ("logo.png", "image/png"),
        ("photo.jpeg", "image/jpeg"),
        ("icon.svg", "image/svg+xml"),
        ("module.wasm", "application/wasm"),
        ("font.woff2", "font/woff2"),
        ("config.yaml", "application/yaml"),
        ("config.yml", "application/yaml"),
        ("page.xhtml", "application/xhtml+xml"),
        ("clip.mpeg", "video/mpeg"),
        ("doc.jsonld", "application/ld+json"),
        ("legacy.eot", "application/vnd.ms-fontobject"),
        ("anim.apng", "image/apng"),
        ("install.sh", "application/x-sh"),
        ("song.m4a", "audio/mp4"),
    ])
    def test_known_extensions(self, name, expected):
        assert content_type_for(name) == expected

    def test_case_insensitive(self):
        assert content_type_for("PAGE.HTML") == "text/html"
        assert content_type_for("Photo.JpG") == "image/jpeg"

    def test_unknown_extension(self):
        assert content_type_for("archive.unknownext") is None

    def test_no_extension(self):
        assert content_type_for("README") is None

    def test_dotfile_has_no_extension(self):
        assert content_type_for(".bashrc") is None

    def test_only_last_suffix_counts(self):
        assert content_type_for("bundle.tar.gz") == "application/gzip"

    def test_path_object(self):
        assert content_type_for(Path("/srv/a.txt")) == "text/plain"


class TestContentTypesTable:
    def test_table_is_immutable(self):
        with pytest.raises(TypeError):
            CONTENT_TYPES["txt"] = "application/x-evil"  # type: ignore[index]

    def test_builtin_types_included(self):
        assert content_type_for("archive.bcpio") == "application/x-bcpio"
        assert content_type_for("manual.texinfo") == "application/x-texinfo"

    def test_local_entries_override_builtin(self):
        assert CONTENT_TYPES["wav"] == "audio/wav"
        assert CONTENT_TYPES["js"] == "text/javascript"

    def test_keys_are_lowercase_without_dot(self):
        for key in CONTENT_TYPES:
            assert key == key.lower()
            assert not key.startswith(".")
