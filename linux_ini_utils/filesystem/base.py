"""Interfaces abstraites pour la gestion des fichiers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator

from linux_ini_utils.errors.exceptions import IniIOError


class FileManager(ABC):
    """Interface pour l'accès aux fichiers INI."""

    @abstractmethod
    def file_exists(self, file_path: Path) -> bool:
        """
        Vérifie si un fichier existe.

        Args:
            file_path: Chemin du fichier

        Returns:
            True si le fichier existe, False sinon
        """
        pass

    @abstractmethod
    def read_text(self, file_path: Path) -> str:
        """
        Lit le contenu d'un fichier sans normaliser les fins de ligne.

        Args:
            file_path: Chemin du fichier

        Returns:
            Contenu du fichier

        Raises:
            IniIOError: Si la lecture échoue
        """
        pass

    @abstractmethod
    def iter_lines(self, file_path: Path) -> Iterator[str]:
        """
        Itère paresseusement sur les lignes brutes d'un fichier.

        Args:
            file_path: Chemin du fichier

        Yields:
            Lignes brutes, fin de ligne comprise
            (découpées sur "\\n" seulement, comme split_lines)

        Raises:
            IniIOError: Si la lecture échoue
        """
        pass

    @abstractmethod
    def ensure_file(self, file_path: Path) -> bool:
        """
        Crée le fichier (et ses répertoires parents) s'il n'existe pas.

        Args:
            file_path: Chemin du fichier

        Returns:
            True si le fichier a été créé, False s'il existait déjà

        Raises:
            IniIOError: Si la création échoue
        """
        pass


@dataclass(frozen=True)
class TempFile:
    """Fichier temporaire en attente de remplacement.

    Attributes:
        path: Chemin du fichier temporaire.
        target: Fichier qu'il doit remplacer.
    """

    path: Path
    target: Path


class AtomicFileReplacer(ABC):
    """Interface du remplacement atomique d'un fichier.

    Un fichier complet est d'abord écrit dans un emplacement temporaire
    puis substitué à la cible en une seule opération. Tant que commit()
    n'a pas réussi, la cible n'est jamais modifiée.
    """

    @abstractmethod
    def create_temp(self, target: Path, content: str) -> TempFile:
        """Crée un fichier temporaire unique contenant `content`.

        Args:
            target: Fichier destiné à être remplacé.
            content: Contenu complet du futur fichier.

        Returns:
            Handle du fichier temporaire.

        Raises:
            IniIOError: Si le fichier temporaire ne peut être créé.
        """
        pass

    @abstractmethod
    def commit(self, temp: TempFile) -> None:
        """Remplace atomiquement la cible par le fichier temporaire.

        Raises:
            IniIOError: Si le remplacement échoue.
        """
        pass

    @abstractmethod
    def discard(self, temp: TempFile) -> None:
        """Supprime un fichier temporaire non validé."""
        pass

    def replace(self, target: Path, content: str) -> None:
        """Écrit `content` dans `target` via create_temp puis commit.

        Le fichier temporaire est supprimé si le commit échoue ; la
        cible conserve alors son contenu d'origine.

        Args:
            target: Fichier à remplacer.
            content: Nouveau contenu complet.

        Raises:
            IniIOError: Si une étape échoue.
        """
        temp = self.create_temp(target, content)
        try:
            self.commit(temp)
        except OSError as e:
            self.discard(temp)
            raise IniIOError(
                f"Impossible de remplacer {target} : {e}"
            ) from e
        except Exception:
            self.discard(temp)
            raise
