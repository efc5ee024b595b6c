"""Logger console pour l'interface en ligne de commande."""

import logging
import sys
from typing import Optional, TextIO

from linux_ini_utils.logging.base import Logger


class ConsoleLogger(Logger):
    """Logger qui écrit sur stderr.

    Utilisé par la CLI : stdout reste réservé aux valeurs lues
    (read, list-keys, dump) afin de pouvoir les chaîner dans un shell.

    Attributes:
        logger: Logger standard sous-jacent.
    """

    def __init__(
        self,
        level: str = "WARNING",
        stream: Optional[TextIO] = None,
        name: str = "linux_ini_utils.console",
    ) -> None:
        """Initialise le logger console.

        Args:
            level: Niveau minimal ("DEBUG", "INFO", "WARNING", ...).
            stream: Flux de sortie (défaut: sys.stderr).
            name: Nom du logger standard.
        """
        log_level = getattr(logging, level.upper(), logging.WARNING)
        self.logger = logging.getLogger(name)
        self.logger.setLevel(log_level)
        self.logger.propagate = False

        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setLevel(log_level)
        handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))
        self.logger.addHandler(handler)

    def log_debug(self, message: str) -> None:
        self.logger.debug(message)

    def log_info(self, message: str) -> None:
        self.logger.info(message)

    def log_warning(self, message: str) -> None:
        self.logger.warning(message)

    def log_error(self, message: str) -> None:
        self.logger.error(message)
