"""Tests pour le module filesystem."""

import os
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from linux_ini_utils.errors import IniIOError
from linux_ini_utils.filesystem import (
    AtomicFileReplacer,
    LinuxAtomicFileReplacer,
    LinuxFileManager,
    TempFile,
)
from linux_ini_utils.logging import Logger


@pytest.fixture
def mock_logger():
    return MagicMock(spec=Logger)


class TestLinuxFileManager:
    """Tests pour LinuxFileManager."""

    def test_read_text_keeps_crlf(self, tmp_path, mock_logger):
        """Les fins de ligne ne sont pas normalisées."""
        path = tmp_path / "a.conf"
        path.write_bytes(b"[a]\r\nX=1\r\n")

        assert LinuxFileManager(mock_logger).read_text(path) == "[a]\r\nX=1\r\n"

    def test_iter_lines(self, tmp_path, mock_logger):
        path = tmp_path / "a.conf"
        path.write_text("[a]\nX=1")

        lines = list(LinuxFileManager(mock_logger).iter_lines(path))

        assert lines == ["[a]\n", "X=1"]

    def test_iter_lines_keeps_lone_carriage_return(
        self, tmp_path, mock_logger
    ):
        """Seul '\\n' termine une ligne, comme dans read_text."""
        path = tmp_path / "a.conf"
        path.write_bytes(b"[a]\r[b]\r\nX=1\n")

        lines = list(LinuxFileManager(mock_logger).iter_lines(path))

        assert lines == ["[a]\r[b]\r\n", "X=1\n"]

    def test_iter_lines_across_chunks(self, tmp_path, mock_logger):
        """Une ligne coupée entre deux blocs est recollée."""
        path = tmp_path / "a.conf"
        path.write_text("[alpha]\nLONG_KEY=value\n\nZ")

        with patch("linux_ini_utils.filesystem.linux._CHUNK_SIZE", 3):
            lines = list(LinuxFileManager(mock_logger).iter_lines(path))

        assert lines == ["[alpha]\n", "LONG_KEY=value\n", "\n", "Z"]

    def test_non_utf8_file_raises(self, tmp_path, mock_logger):
        path = tmp_path / "a.conf"
        path.write_bytes(b"[dev]\nNAME=caf\xe9\n")
        manager = LinuxFileManager(mock_logger)

        with pytest.raises(IniIOError, match="Impossible de lire"):
            manager.read_text(path)
        with pytest.raises(IniIOError):
            list(manager.iter_lines(path))
        assert mock_logger.log_error.call_count == 2

    def test_read_missing_file_raises(self, tmp_path, mock_logger):
        with pytest.raises(IniIOError):
            LinuxFileManager(mock_logger).read_text(tmp_path / "absent.conf")
        mock_logger.log_error.assert_called_once()

    def test_ensure_file_creates_parents(self, tmp_path, mock_logger):
        """Le fichier et ses répertoires parents sont créés."""
        path = tmp_path / "a" / "b" / "c.conf"

        assert LinuxFileManager(mock_logger).ensure_file(path) is True
        assert path.is_file()

    def test_ensure_existing_file(self, tmp_path, mock_logger):
        path = tmp_path / "c.conf"
        path.write_text("X")

        assert LinuxFileManager(mock_logger).ensure_file(path) is False
        assert path.read_text() == "X"

    def test_file_exists_false_for_directory(self, tmp_path, mock_logger):
        assert LinuxFileManager(mock_logger).file_exists(tmp_path) is False


class TestLinuxAtomicFileReplacer:
    """Tests pour LinuxAtomicFileReplacer."""

    def test_replace_writes_content(self, tmp_path, mock_logger):
        target = tmp_path / "a.conf"
        target.write_text("old")

        LinuxAtomicFileReplacer(mock_logger).replace(target, "new\r\n")

        assert target.read_bytes() == b"new\r\n"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["a.conf"]

    def test_temp_file_created_next_to_target(self, tmp_path, mock_logger):
        """Le fichier temporaire est dans le répertoire de la cible."""
        target = tmp_path / "a.conf"
        replacer = LinuxAtomicFileReplacer(mock_logger)

        temp = replacer.create_temp(target, "content")
        try:
            assert temp.path.parent == tmp_path
            assert temp.path.name.startswith(".linux_ini_")
            assert temp.path.read_text() == "content"
            assert not target.exists()
        finally:
            replacer.discard(temp)
        assert not temp.path.exists()

    def test_new_file_honours_umask(self, tmp_path, mock_logger):
        """Un nouveau fichier reçoit 0o666 filtré par l'umask."""
        target = tmp_path / "new.conf"
        old_mask = os.umask(0o027)
        try:
            LinuxAtomicFileReplacer(mock_logger).replace(target, "x")
        finally:
            os.umask(old_mask)

        assert target.stat().st_mode & 0o777 == 0o640

    def test_commit_failure_discards_temp(self, tmp_path, mock_logger):
        """Le fichier temporaire est supprimé si le rename échoue."""
        target = tmp_path / "a.conf"
        target.write_text("old")

        with patch(
            "linux_ini_utils.filesystem.atomic.os.replace",
            side_effect=OSError("EXDEV"),
        ):
            with pytest.raises(IniIOError):
                LinuxAtomicFileReplacer(mock_logger).replace(target, "new")

        assert target.read_text() == "old"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["a.conf"]

    def test_create_temp_in_missing_directory_raises(
        self, tmp_path, mock_logger
    ):
        with pytest.raises(IniIOError):
            LinuxAtomicFileReplacer(mock_logger).create_temp(
                tmp_path / "absent" / "a.conf", "x"
            )


class TestAtomicFileReplacerContract:
    """Tests de replace() sur une implémentation minimale."""

    class FailingReplacer(AtomicFileReplacer):
        def __init__(self, error):
            self.error = error
            self.discarded = []

        def create_temp(self, target, content):
            return TempFile(path=Path("/tmp/unused"), target=Path(target))

        def commit(self, temp):
            raise self.error

        def discard(self, temp):
            self.discarded.append(temp)

    def test_os_error_is_wrapped(self):
        replacer = self.FailingReplacer(OSError("boom"))

        with pytest.raises(IniIOError, match="boom"):
            replacer.replace(Path("a.conf"), "x")
        assert len(replacer.discarded) == 1

    def test_other_errors_propagate(self):
        replacer = self.FailingReplacer(RuntimeError("boom"))

        with pytest.raises(RuntimeError):
            replacer.replace(Path("a.conf"), "x")
        assert len(replacer.discarded) == 1
