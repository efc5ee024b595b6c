"""Interface abstraite pour le logging."""

from abc import ABC, abstractmethod


class Logger(ABC):
    """Interface pour le système de logging.

    Injectée dans le gestionnaire INI, le remplaçant atomique et les
    vérificateurs d'intégrité.
    """

    @abstractmethod
    def log_debug(self, message: str) -> None:
        """Log un message de diagnostic (détail des parcours de fichier)."""
        pass

    @abstractmethod
    def log_info(self, message: str) -> None:
        """Log un message d'information."""
        pass

    @abstractmethod
    def log_warning(self, message: str) -> None:
        """Log un avertissement."""
        pass

    @abstractmethod
    def log_error(self, message: str) -> None:
        """Log une erreur."""
        pass
