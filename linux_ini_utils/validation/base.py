"""Interface abstraite pour la validation."""

from abc import ABC, abstractmethod


class Validator(ABC):
    """
    Interface abstraite pour les validateurs.

    Le sujet à valider est fourni au constructeur ; validate() ne
    retourne rien et lève une exception métier en cas d'échec.
    Permet l'injection de dépendance et la substitution par un mock.
    """

    @abstractmethod
    def validate(self) -> None:
        """
        Exécute la validation.

        Raises:
            ValidationError: Si le sujet est invalide
            IniIOError: Si un fichier n'est pas accessible
        """
        pass
