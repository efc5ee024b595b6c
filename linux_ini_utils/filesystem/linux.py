"""Implémentation Linux de la gestion des fichiers."""

from pathlib import Path
from typing import Iterator

from linux_ini_utils.errors.exceptions import IniIOError
from linux_ini_utils.filesystem.base import FileManager
from linux_ini_utils.logging.base import Logger

_CHUNK_SIZE = 65536


class LinuxFileManager(FileManager):
    """
    Implémentation Linux de l'accès aux fichiers INI.

    Les fins de ligne sont conservées telles quelles (newline="")
    pour que les lignes non modifiées soient réécrites à l'identique.
    Un fichier qui n'est pas en UTF-8 lève IniIOError comme une erreur
    de lecture.
    """

    def __init__(self, logger: Logger) -> None:
        """
        Initialise le gestionnaire de fichiers.

        Args:
            logger: Instance de Logger pour le logging
        """
        self.logger = logger

    def file_exists(self, file_path: Path) -> bool:
        return Path(file_path).is_file()

    def read_text(self, file_path: Path) -> str:
        """
        Lit le contenu d'un fichier.

        Args:
            file_path: Chemin du fichier

        Returns:
            Contenu du fichier

        Raises:
            IniIOError: Si la lecture échoue
        """
        try:
            with open(file_path, 'r', encoding='utf-8', newline='') as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            self.logger.log_error(
                f"Erreur lors de la lecture du fichier {file_path}: {e}"
            )
            raise IniIOError(
                f"Impossible de lire {file_path} : {e}"
            ) from e

    def iter_lines(self, file_path: Path) -> Iterator[str]:
        """
        Parcourt les lignes d'un fichier par blocs, sans le charger.

        Seul '\\n' termine une ligne : un '\\r' isolé reste dans la ligne,
        comme pour le texte complet renvoyé par read_text.
        """
        try:
            with open(file_path, 'r', encoding='utf-8', newline='') as f:
                pending = ""
                for chunk in iter(lambda: f.read(_CHUNK_SIZE), ""):
                    *complete, pending = (pending + chunk).split("\n")
                    for line in complete:
                        yield line + "\n"
                if pending:
                    yield pending
        except (OSError, UnicodeDecodeError) as e:
            self.logger.log_error(
                f"Erreur lors de la lecture du fichier {file_path}: {e}"
            )
            raise IniIOError(
                f"Impossible de lire {file_path} : {e}"
            ) from e

    def ensure_file(self, file_path: Path) -> bool:
        """
        Crée le fichier et ses répertoires parents si nécessaire.

        Args:
            file_path: Chemin du fichier

        Returns:
            True si le fichier a été créé

        Raises:
            IniIOError: Si la création échoue
        """
        path = Path(file_path)
        if path.is_file():
            return False

        self.logger.log_info(
            f"Le fichier n'existe pas, création : {path}"
        )
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.touch(exist_ok=True)
        except OSError as e:
            self.logger.log_error(
                f"Impossible de créer le fichier {path}: {e}"
            )
            raise IniIOError(
                f"Impossible de créer le fichier {path} : {e}"
            ) from e

        self.logger.log_info(f"Fichier créé : {path}")
        return True
