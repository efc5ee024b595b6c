"""Tests pour le module integrity."""

from dataclasses import dataclass

import pytest

from linux_ini_utils.dotconf import LinuxIniConfigManager, ValidatedSection
from linux_ini_utils.errors import IniFileNotFoundError, IniIntegrityError
from linux_ini_utils.integrity import (
    DuplicateEntryChecker,
    IniIssue,
    IniSectionIntegrityChecker,
    StoreSectionIntegrityChecker,
)
from linux_ini_utils.logging import FileLogger


@pytest.fixture
def logger(tmp_path):
    return FileLogger(str(tmp_path / "test.log"))


@dataclass(frozen=True)
class DatabaseSectionFixture(ValidatedSection):
    """Section de test pour une base de données."""

    HOST: str = "localhost"
    PORT: str = "5432"

    @staticmethod
    def section_name() -> str:
        return "database"


class TestDuplicateEntryChecker:
    """Tests pour DuplicateEntryChecker."""

    def test_clean_file(self, tmp_path, logger):
        path = tmp_path / "a.conf"
        path.write_text("[a]\nX=1\n[b]\nX=1\n")

        assert DuplicateEntryChecker(logger).check(path) == []

    def test_duplicate_section(self, tmp_path, logger):
        path = tmp_path / "a.conf"
        path.write_text("[a]\nX=1\n[b]\n[a]\nY=2\n")

        issues = DuplicateEntryChecker(logger).check(path)

        assert issues == [IniIssue(4, "duplicate_section", "a")]

    def test_duplicate_key(self, tmp_path, logger):
        path = tmp_path / "a.conf"
        path.write_text("[a]\nX=1\n# c\nX=2\n")

        issues = DuplicateEntryChecker(logger).check(path)

        assert issues == [IniIssue(4, "duplicate_key", "a.X")]

    def test_same_key_in_repeated_section_blocks(self, tmp_path, logger):
        """Seul l'en-tête répété est signalé, pas les clés du second bloc."""
        path = tmp_path / "a.conf"
        path.write_text("[a]\nX=1\n[a]\nX=2\n")

        issues = DuplicateEntryChecker(logger).check(path)

        assert [issue.kind for issue in issues] == ["duplicate_section"]

    def test_issues_are_logged(self, tmp_path, logger):
        path = tmp_path / "a.conf"
        path.write_text("[a]\n[a]\n")

        DuplicateEntryChecker(logger).check(path)

        content = (tmp_path / "test.log").read_text(encoding="utf-8")
        assert "duplicate_section a" in content

    def test_verify_raises(self, tmp_path, logger):
        path = tmp_path / "a.conf"
        path.write_text("[a]\nX=1\nX=2\n")

        with pytest.raises(IniIntegrityError) as exc_info:
            DuplicateEntryChecker(logger).verify(path)
        assert len(exc_info.value.issues) == 1

    def test_verify_clean_file(self, tmp_path, logger):
        path = tmp_path / "a.conf"
        path.write_text("[a]\nX=1\n")

        DuplicateEntryChecker(logger).verify(path)

    def test_missing_file(self, tmp_path, logger):
        with pytest.raises(IniFileNotFoundError):
            DuplicateEntryChecker(logger).check(tmp_path / "absent.conf")

    def test_issue_str(self):
        assert str(IniIssue(3, "duplicate_key", "a.X")) == (
            "ligne 3 : duplicate_key a.X"
        )


class TestStoreSectionIntegrityChecker:
    """Tests pour StoreSectionIntegrityChecker."""

    @pytest.fixture
    def checker(self, logger):
        return StoreSectionIntegrityChecker(
            LinuxIniConfigManager(logger), logger
        )

    def test_implements_interface(self, checker):
        assert isinstance(checker, IniSectionIntegrityChecker)

    def test_matching_section(self, tmp_path, logger, checker):
        path = tmp_path / "db.conf"
        LinuxIniConfigManager(logger).write_section(
            path, DatabaseSectionFixture()
        )

        assert checker.verify(path, DatabaseSectionFixture()) is True

    def test_extra_keys_in_file_ignored(self, tmp_path, checker):
        path = tmp_path / "db.conf"
        path.write_text("[database]\nHOST=localhost\nPORT=5432\nUSER=x\n")

        assert checker.verify(path, DatabaseSectionFixture()) is True

    def test_different_value(self, tmp_path, checker):
        path = tmp_path / "db.conf"
        path.write_text("[database]\nHOST=localhost\nPORT=5433\n")

        assert checker.verify(path, DatabaseSectionFixture()) is False

    def test_missing_key(self, tmp_path, checker):
        path = tmp_path / "db.conf"
        path.write_text("[database]\nHOST=localhost\n")

        assert checker.verify(path, DatabaseSectionFixture()) is False

    def test_missing_section(self, tmp_path, checker):
        path = tmp_path / "db.conf"
        path.write_text("[other]\n")

        assert checker.verify(path, DatabaseSectionFixture()) is False
