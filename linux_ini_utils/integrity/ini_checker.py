"""Vérification d'intégrité des fichiers INI.

Deux familles de contrôles :
- DuplicateEntryChecker signale les en-têtes de section répétés et les
  clés répétées dans un même bloc. Ces doublons sont tolérés à la
  lecture (le premier fait foi) mais masquent souvent une erreur
  d'édition manuelle.
- IniSectionIntegrityChecker compare un fichier à une section typée
  portant les valeurs attendues.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from linux_ini_utils.dotconf.base import IniConfigManager, IniSection, PathLike
from linux_ini_utils.dotconf.document import IniDocument
from linux_ini_utils.errors.exceptions import (
    IniFileNotFoundError,
    IniIntegrityError,
    SectionNotFoundError,
)
from linux_ini_utils.filesystem.base import FileManager
from linux_ini_utils.filesystem.linux import LinuxFileManager
from linux_ini_utils.logging.base import Logger


@dataclass(frozen=True)
class IniIssue:
    """Anomalie détectée dans un fichier INI.

    Attributes:
        line: Numéro de ligne (à partir de 1) de l'occurrence fautive.
        kind: "duplicate_section" ou "duplicate_key".
        name: Nom de la section, ou "section.clé" pour une clé.
    """

    line: int
    kind: str
    name: str

    def __str__(self) -> str:
        return f"ligne {self.line} : {self.kind} {self.name}"


class DuplicateEntryChecker:
    """Détecte les sections et les clés en double."""

    def __init__(
        self, logger: Logger, file_manager: Optional[FileManager] = None
    ) -> None:
        self.logger = logger
        self.file_manager = file_manager or LinuxFileManager(logger)

    def check(self, path: PathLike) -> list[IniIssue]:
        """Liste les doublons d'un fichier.

        Args:
            path: Chemin du fichier INI.

        Returns:
            Anomalies dans l'ordre du fichier (vide si aucune).

        Raises:
            IniFileNotFoundError: Si le fichier n'existe pas.
        """
        path = Path(path)
        if not self.file_manager.file_exists(path):
            raise IniFileNotFoundError(path)
        document = IniDocument.from_text(self.file_manager.read_text(path))

        issues: list[IniIssue] = []
        seen_sections: set[str] = set()
        for block in document.section_ranges():
            if block.name in seen_sections:
                issues.append(
                    IniIssue(block.start + 1, "duplicate_section", block.name)
                )
            seen_sections.add(block.name)

            seen_keys: set[str] = set()
            for index, line in document.entries(block):
                if line.name in seen_keys:
                    issues.append(IniIssue(
                        index + 1, "duplicate_key", f"{block.name}.{line.name}"
                    ))
                seen_keys.add(line.name)

        issues.sort(key=lambda issue: issue.line)
        for issue in issues:
            self.logger.log_warning(f"{path} : {issue}")
        return issues

    def verify(self, path: PathLike) -> None:
        """Comme check(), mais lève une exception en cas d'anomalie.

        Raises:
            IniIntegrityError: Si au moins un doublon est trouvé.
        """
        issues = self.check(path)
        if issues:
            raise IniIntegrityError(
                f"{len(issues)} doublon(s) dans {path}", issues
            )
        self.logger.log_info(f"Aucun doublon dans {path}.")


class IniSectionIntegrityChecker(ABC):
    """Vérifie qu'un fichier INI contient les valeurs d'une section attendue.

    On compare un fichier contre un modèle, non deux fichiers l'un
    contre l'autre.
    """

    @abstractmethod
    def verify(self, file_path: PathLike, section: IniSection) -> bool:
        """Vérifie qu'un fichier INI contient les valeurs attendues.

        Args:
            file_path: Chemin du fichier INI à vérifier.
            section: Section portant les valeurs attendues.

        Returns:
            True si toutes les valeurs correspondent, False sinon.
        """
        ...


class StoreSectionIntegrityChecker(IniSectionIntegrityChecker):
    """Compare une section typée au contenu lu par un IniConfigManager."""

    def __init__(self, manager: IniConfigManager, logger: Logger) -> None:
        self.manager = manager
        self.logger = logger

    def verify(self, file_path: PathLike, section: IniSection) -> bool:
        name = section.section_name()
        try:
            actual = self.manager.read_section(file_path, name)
        except SectionNotFoundError:
            self.logger.log_warning(f"Section [{name}] absente de {file_path}")
            return False

        mismatches = [
            key for key, expected in section.to_dict().items()
            if actual.get(key) != expected
        ]
        if mismatches:
            self.logger.log_warning(
                f"Valeurs différentes dans [{name}] de {file_path} : "
                f"{', '.join(mismatches)}"
            )
            return False
        return True
