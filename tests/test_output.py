"""Tests for the output subsystem: path mapping and writes."""

import os
from pathlib import Path
from unittest.mock import patch

import pytest

from mdtranslator.output.writer import TranslationWriter, model_dir_name


# ---------------------------------------------------------------------------
# model_dir_name
# ---------------------------------------------------------------------------


class TestModelDirName:
    def test_plain_identifier_unchanged(self):
        assert model_dir_name("gemini-2.0-flash") == "gemini-2.0-flash"

    def test_slash_replaced(self):
        assert model_dir_name("models/gemini-pro") == "models_gemini-pro"

    def test_colon_replaced(self):
        assert model_dir_name("llama3:latest") == "llama3_latest"

    def test_dot_only_becomes_unnamed(self):
        assert model_dir_name("..") == "_unnamed"

    def test_empty_becomes_unnamed(self):
        assert model_dir_name("") == "_unnamed"


# ---------------------------------------------------------------------------
# TranslationWriter.output_path_for
# ---------------------------------------------------------------------------


class TestOutputPathFor:
    def test_mirrors_relative_path_under_model(self, tmp_path):
        src = tmp_path / "S"
        writer = TranslationWriter(src, tmp_path / "O", "gemini-2.0-flash")
        dest = writer.output_path_for(src / "a" / "b" / "doc.md")
        assert dest == tmp_path / "O" / "gemini-2.0-flash" / "a" / "b" / "doc.md"

    def test_top_level_file(self, tmp_path):
        writer = TranslationWriter(tmp_path / "S", tmp_path / "O", "m")
        assert writer.output_path_for(tmp_path / "S" / "x.md") == tmp_path / "O" / "m" / "x.md"

    def test_output_dir_attribute(self, tmp_path):
        writer = TranslationWriter(tmp_path / "S", tmp_path / "O", "llama3:8b")
        assert writer.output_dir == tmp_path / "O" / "llama3_8b"

    def test_relative_root_with_absolute_source(self, tmp_path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        writer = TranslationWriter("./S", "O", "m")
        dest = writer.output_path_for(tmp_path / "S" / "sub" / "doc.md")
        assert dest == Path("O") / "m" / "sub" / "doc.md"

    def test_source_outside_root_rejected(self, tmp_path):
        writer = TranslationWriter(tmp_path / "S", tmp_path / "O", "m")
        with pytest.raises(ValueError, match="not inside source root"):
            writer.output_path_for(tmp_path / "elsewhere" / "doc.md")

    def test_different_models_do_not_collide(self, tmp_path):
        src = tmp_path / "S" / "doc.md"
        a = TranslationWriter(tmp_path / "S", tmp_path / "O", "model-a")
        b = TranslationWriter(tmp_path / "S", tmp_path / "O", "model-b")
        assert a.output_path_for(src) != b.output_path_for(src)


# ---------------------------------------------------------------------------
# TranslationWriter.write
# ---------------------------------------------------------------------------


class TestWrite:
    def test_creates_intermediate_directories(self, tmp_path):
        src_root = tmp_path / "S"
        writer = TranslationWriter(src_root, tmp_path / "O", "m")
        dest = writer.write(src_root / "a" / "b" / "doc.md", "# こんにちは\n")
        assert dest.read_text(encoding="utf-8") == "# こんにちは\n"
        assert dest.parent.is_dir()

    def test_overwrites_existing_file(self, tmp_path):
        src_root = tmp_path / "S"
        writer = TranslationWriter(src_root, tmp_path / "O", "m")
        writer.write(src_root / "doc.md", "a much longer first version of the file")
        dest = writer.write(src_root / "doc.md", "short")
        assert dest.read_text(encoding="utf-8") == "short"

    def test_leaves_no_temp_files(self, tmp_path):
        src_root = tmp_path / "S"
        writer = TranslationWriter(src_root, tmp_path / "O", "m")
        dest = writer.write(src_root / "doc.md", "content")
        assert os.listdir(dest.parent) == ["doc.md"]

    def test_failed_replace_keeps_old_content_and_cleans_up(self, tmp_path):
        src_root = tmp_path / "S"
        writer = TranslationWriter(src_root, tmp_path / "O", "m")
        dest = writer.write(src_root / "doc.md", "old")

        with patch("mdtranslator.output.writer.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError, match="disk full"):
                writer.write(src_root / "doc.md", "new")

        assert dest.read_text(encoding="utf-8") == "old"
        assert os.listdir(dest.parent) == ["doc.md"]

    def test_written_file_is_newer_than_source(self, tmp_path):
        src_root = tmp_path / "S"
        src_root.mkdir()
        source = src_root / "doc.md"
        source.write_text("x")
        os.utime(source, (1000, 1000))
        writer = TranslationWriter(src_root, tmp_path / "O", "m")
        dest = writer.write(source, "y")
        assert dest.stat().st_mtime >= source.stat().st_mtime
