"""
    ConsoleErrorHandler (générique, configurable)
"""
import sys
from typing import TextIO

from linux_ini_utils.errors.base import ErrorHandler
from linux_ini_utils.errors.exceptions import (ApplicationError,
                                               ConfigurationError,
                                               EmptyValueRejectedError,
                                               IniFileNotFoundError,
                                               IniIntegrityError,
                                               IniIOError,
                                               KeyNotFoundError,
                                               SectionNotFoundError,
                                               ValidationError)


class ConsoleErrorHandler(ErrorHandler):
    """Handler pour afficher les erreurs dans la console.

    Distingue les erreurs connues (base_error_type) des erreurs
    inattendues, et affiche un message de solution adapté à la
    famille d'erreur INI.
    """

    def __init__(
        self,
        base_error_type: type[Exception] = ApplicationError,
        solutions: dict[type[Exception], str] | None = None,
        stream: TextIO | None = None,
    ) -> None:
        """Initialise le handler console.

        Args:
            base_error_type: Classe de base pour distinguer erreurs
                connues/inconnues (défaut: ApplicationError).
            solutions: Dictionnaire {TypeException: "message solution"}
                prioritaire sur les messages intégrés.
            stream: Flux de sortie (défaut: sys.stderr au moment de
                l'affichage).
        """
        self.base_error_type = base_error_type
        self.solutions = solutions or {}
        self.stream = stream

    def handle(self, error: Exception) -> None:
        """Affiche l'erreur dans la console avec des messages utilisateur.

        Args:
            error: L'exception à afficher.
        """
        if isinstance(error, self.base_error_type):
            self._handle_known_error(error)
        else:
            self._handle_unknown_error(error)

    def _print(self, message: str) -> None:
        print(message, file=self.stream or sys.stderr)

    def _solution_for(self, error: Exception) -> str:
        """Retourne la suggestion associée au type d'erreur."""
        for error_type, solution in self.solutions.items():
            if isinstance(error, error_type):
                return solution

        if isinstance(error, IniFileNotFoundError):
            return "Vérifiez le chemin du fichier INI."
        if isinstance(error, (SectionNotFoundError, KeyNotFoundError)):
            return "Listez les sections et les clés disponibles (list-sections, list-keys)."
        if isinstance(error, EmptyValueRejectedError):
            return "Fournissez une valeur ou activez allow_empty_values."
        if isinstance(error, ValidationError):
            return "Corrigez le nom ou désactivez le mode strict."
        if isinstance(error, IniIntegrityError):
            return "Supprimez les sections ou clés en double."
        if isinstance(error, IniIOError):
            return "Vérifiez les permissions et l'espace disque."
        if isinstance(error, ConfigurationError):
            return "Vérifiez votre fichier de configuration."
        return "Voir les suggestions ci-dessus."

    def _handle_known_error(self, error: Exception) -> None:
        """Gère les erreurs connues du projet.

        Args:
            error: L'exception métier à traiter.
        """
        self._print(f"\n🛑 {type(error).__name__}: {str(error)}")
        self._print(f"\n🔧 Solution : {self._solution_for(error)}")

    def _handle_unknown_error(self, error: Exception) -> None:
        """Gère les erreurs inattendues.

        Args:
            error: L'exception non prévue à afficher.
        """
        self._print(f"\n💥 Erreur inattendue: {str(error)}")
        self._print(f"Type: {type(error).__name__}")
        self._print(
            "\n📋 Cela peut être un bug. Veuillez ouvrir une issue avec ces informations."
        )
