"""Validateur d'accès en écriture à un fichier INI."""

import os
from pathlib import Path
from typing import Union

from linux_ini_utils.errors.exceptions import IniIOError
from linux_ini_utils.validation.base import Validator


class WritableFileChecker(Validator):
    """Vérifie qu'un fichier INI peut être remplacé.

    Le remplacement atomique crée un fichier temporaire à côté de la
    cible : le répertoire parent doit donc être accessible en écriture,
    tout comme le fichier lui-même s'il existe déjà.

    Un répertoire parent absent n'est pas une erreur : il sera créé
    lors de l'écriture.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        """Initialise le validateur.

        Args:
            path: Chemin du fichier INI.
        """
        self.path = Path(path)

    def validate(self) -> None:
        """Valide les permissions d'écriture.

        Raises:
            IniIOError: Si la cible est un répertoire ou si le fichier
                ou son répertoire parent n'est pas accessible en écriture.
        """
        if self.path.is_dir():
            raise IniIOError(f"Le chemin {self.path} est un répertoire.")

        if self.path.exists() and not os.access(self.path, os.W_OK):
            raise IniIOError(
                f"Le fichier {self.path} n'est pas accessible en écriture."
            )

        parent = self._existing_parent()
        if not os.access(parent, os.W_OK):
            raise IniIOError(
                f"Permissions insuffisantes pour écrire dans {parent}."
            )

    def _existing_parent(self) -> Path:
        """Retourne le premier ancêtre existant du fichier."""
        parent = self.path.resolve().parent
        while not parent.exists() and parent != parent.parent:
            parent = parent.parent
        return parent
