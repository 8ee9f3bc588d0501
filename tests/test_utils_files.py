"""Tests for file utility functions."""

from __future__ import annotations

from pathlib import Path

from fortune_kind.utils.files import iter_corpus_files, read_corpus_file


class TestIterCorpusFiles:
    """Test iter_corpus_files function."""

    def test_single_file(self, tmp_path: Path) -> None:
        """A file location yields itself."""
        fortunes = tmp_path / "fortunes"
        fortunes.write_text("quote")

        assert list(iter_corpus_files(fortunes)) == [fortunes]

    def test_directory_sorted(self, tmp_path: Path) -> None:
        """Directory files come back sorted by name."""
        (tmp_path / "b").write_text("b")
        (tmp_path / "a").write_text("a")
        (tmp_path / "c").write_text("c")

        names = [p.name for p in iter_corpus_files(tmp_path)]

        assert names == ["a", "b", "c"]

    def test_does_not_recurse(self, tmp_path: Path) -> None:
        """Subdirectories are skipped, not descended into."""
        subdir = tmp_path / "nested"
        subdir.mkdir()
        (subdir / "deep").write_text("deep")
        (tmp_path / "top").write_text("top")

        paths = list(iter_corpus_files(tmp_path))

        assert paths == [tmp_path / "top"]

    def test_empty_directory(self, tmp_path: Path) -> None:
        """Empty directory yields nothing."""
        assert list(iter_corpus_files(tmp_path)) == []


class TestReadCorpusFile:
    """Test read_corpus_file function."""

    def test_reads_utf8(self, tmp_path: Path) -> None:
        """Should decode UTF-8 text."""
        path = tmp_path / "quotes"
        path.write_text("Søren says hi\n%\n", encoding="utf-8")

        assert read_corpus_file(path) == "Søren says hi\n%\n"

    def test_replaces_invalid_bytes(self, tmp_path: Path) -> None:
        """Undecodable bytes are replaced rather than raising."""
        path = tmp_path / "binary"
        path.write_bytes(b"ok\xff\n")

        assert read_corpus_file(path) == "ok�\n"
