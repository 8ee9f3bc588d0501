"""Tests for corpus scanning."""

from __future__ import annotations

import os
import sys
from unittest.mock import patch
from pathlib import Path

import pytest

from fortune_kind.corpus.scanner import scan, scan_all
from fortune_kind.errors import CorpusNotFoundError, CorpusReadError
from fortune_kind.models import Candidate


class TestScan:
    """Test scan function."""

    def test_single_file(self, tmp_path: Path) -> None:
        """A single file is the sole candidate, sized in bytes."""
        path = tmp_path / "single"
        path.write_bytes(b"sole content")

        assert scan(path) == [Candidate(path=path, size=12)]

    def test_directory(self, tmp_path: Path) -> None:
        """Each regular file in the directory becomes a candidate."""
        (tmp_path / "small").write_bytes(b"small")
        (tmp_path / "large").write_bytes(b"a" * 500)
        (tmp_path / "nested").mkdir()

        candidates = scan(tmp_path)

        assert {(c.path.name, c.size) for c in candidates} == {("small", 5), ("large", 500)}

    def test_missing_location(self, tmp_path: Path) -> None:
        """Missing location raises CorpusNotFoundError."""
        missing = tmp_path / "nope"

        with pytest.raises(CorpusNotFoundError) as excinfo:
            scan(missing)

        assert excinfo.value.path == missing
        assert "does not exist" in str(excinfo.value)

    @pytest.mark.skipif(
        sys.platform == "win32" or (hasattr(os, "geteuid") and os.geteuid() == 0),
        reason="permissions are not enforced",
    )
    def test_unreadable_directory(self, tmp_path: Path) -> None:
        """Permission failures raise CorpusReadError."""
        locked = tmp_path / "locked"
        locked.mkdir()
        (locked / "quotes").write_text("x")
        locked.chmod(0)
        try:
            with pytest.raises(CorpusReadError):
                scan(locked)
        finally:
            locked.chmod(0o755)

    def test_unlistable_directory(self, tmp_path: Path) -> None:
        """A directory that cannot be listed raises CorpusReadError."""
        (tmp_path / "quotes").write_text("x")

        with patch.object(Path, "iterdir", side_effect=PermissionError(13, "Permission denied")):
            with pytest.raises(CorpusReadError) as excinfo:
                scan(tmp_path)

        assert excinfo.value.path == tmp_path
        assert "Permission denied" in str(excinfo.value)

    def test_unsearchable_location(self, tmp_path: Path) -> None:
        """A location that cannot be stat'ed is a read error, not a missing one."""
        location = tmp_path / "fortunes"

        with patch.object(
            Path, "stat", side_effect=PermissionError(13, "Permission denied", str(location))
        ):
            with pytest.raises(CorpusReadError) as excinfo:
                scan(location)

        assert not isinstance(excinfo.value, CorpusNotFoundError)
        assert excinfo.value.path == location


class TestScanAll:
    """Test scan_all function."""

    def test_concatenates_in_order(self, tmp_path: Path) -> None:
        """Candidates from each location appear in location order."""
        first = tmp_path / "first"
        second = tmp_path / "second"
        first.write_text("one")
        second.write_text("two!")

        candidates = scan_all([first, second])

        assert [c.path for c in candidates] == [first, second]

    def test_any_missing_location_fails(self, tmp_path: Path) -> None:
        """Every location must exist."""
        present = tmp_path / "present"
        present.write_text("here")

        with pytest.raises(CorpusNotFoundError):
            scan_all([present, tmp_path / "absent"])
