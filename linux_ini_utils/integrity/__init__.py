"""Module de vérification d'intégrité des fichiers INI."""

from linux_ini_utils.integrity.ini_checker import (
    DuplicateEntryChecker,
    IniIssue,
    IniSectionIntegrityChecker,
    StoreSectionIntegrityChecker,
)

__all__ = [
    "IniIssue",
    "DuplicateEntryChecker",
    "IniSectionIntegrityChecker",
    "StoreSectionIntegrityChecker",
]
