"""Interfaces abstraites pour la gestion de fichiers de configuration INI.

Ce module définit les contrats (ABC) pour :
- IniSection : représentation typée d'une section de fichier INI
- IniConfigManager : opérations de lecture/écriture sur un fichier INI
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterator, Optional, Union

from linux_ini_utils.errors.exceptions import KeyNotFoundError

PathLike = Union[str, Path]


class IniSection(ABC):
    """Interface pour une section de fichier de configuration INI.

    Une section représente un bloc [nom_section] dans un fichier INI
    avec ses paires clé=valeur.
    """

    @staticmethod
    @abstractmethod
    def section_name() -> str:
        """Retourne le nom de la section tel qu'il apparaît dans le fichier INI.

        Returns:
            Nom de la section (ex: "dev", "uat").
        """
        pass

    @abstractmethod
    def to_dict(self) -> dict[str, str]:
        """Convertit la section en dictionnaire clé-valeur."""
        pass

    @classmethod
    @abstractmethod
    def from_dict(cls, data: dict[str, str]) -> "IniSection":
        """Crée une instance de section depuis un dictionnaire."""
        pass


class IniConfigManager(ABC):
    """Interface pour la gestion de fichiers de configuration INI.

    Chaque opération relit le fichier : aucun état n'est conservé entre
    deux appels. Les opérations de modification remplacent le fichier
    de manière atomique.
    """

    @abstractmethod
    def read(self, path: PathLike, section: str, key: str) -> str:
        """Lit la valeur d'une clé.

        Raises:
            IniFileNotFoundError: Si le fichier n'existe pas.
            NameValidationError: Si un nom est refusé par la politique.
            KeyNotFoundError: Si la section ou la clé est absente.
        """
        pass

    @abstractmethod
    def write(self, path: PathLike, section: str, key: str, value: str) -> bool:
        """Écrit (ou met à jour) une clé, en créant fichier et section.

        Returns:
            True si le fichier a été modifié.

        Raises:
            ValidationError: Si un nom ou la valeur est refusé.
            IniIOError: Si le fichier ne peut être remplacé.
        """
        pass

    @abstractmethod
    def remove_section(
        self, path: PathLike, section: str, dry_run: bool = False
    ) -> bool:
        """Supprime une section et son contenu.

        Returns:
            True si une section a été (ou serait, en dry_run) supprimée.
        """
        pass

    @abstractmethod
    def remove_key(
        self, path: PathLike, section: str, key: str, dry_run: bool = False
    ) -> bool:
        """Supprime une clé d'une section existante.

        Returns:
            True si une ligne a été (ou serait, en dry_run) supprimée.

        Raises:
            SectionNotFoundError: Si la section n'existe pas.
        """
        pass

    @abstractmethod
    def section_exists(self, path: PathLike, section: str) -> bool:
        pass

    @abstractmethod
    def iter_sections(self, path: PathLike) -> Iterator[str]:
        """Itère paresseusement sur les noms d'en-têtes du fichier."""
        pass

    def list_sections(self, path: PathLike) -> list[str]:
        """Liste les sections dans l'ordre du fichier, doublons compris."""
        return list(self.iter_sections(path))

    @abstractmethod
    def list_keys(self, path: PathLike, section: str) -> list[str]:
        """Liste les clés d'une section dans l'ordre, doublons compris."""
        pass

    @abstractmethod
    def read_section(self, path: PathLike, section: str) -> dict[str, str]:
        """Retourne les valeurs décodées d'une section.

        Raises:
            SectionNotFoundError: Si la section est absente.
        """
        pass

    @abstractmethod
    def set_array_value(
        self, path: PathLike, section: str, key: str, *values: str
    ) -> bool:
        """Écrit une liste de valeurs sous forme de chaîne séparée par des virgules."""
        pass

    def get(
        self,
        path: PathLike,
        section: str,
        key: str,
        default: Optional[str] = None,
    ) -> Optional[str]:
        """Comme read(), mais retourne `default` pour une clé absente."""
        try:
            return self.read(path, section, key)
        except KeyNotFoundError:
            return default
