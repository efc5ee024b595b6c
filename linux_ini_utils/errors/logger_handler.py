"""
    LoggerErrorHandler
"""
from linux_ini_utils.errors.base import ErrorHandler
from linux_ini_utils.errors.exceptions import (ApplicationError,
                                               KeyNotFoundError,
                                               SectionNotFoundError,
                                               ValidationError)
from linux_ini_utils.logging.base import Logger


class LoggerErrorHandler(ErrorHandler):
    """Handler pour logger les erreurs.

    Enregistre les erreurs via le Logger injecté au constructeur.
    Les erreurs métier sont tracées en warning ou en error selon
    leur gravité, les erreurs inattendues toujours en error.
    """

    def __init__(self,
                 logger: Logger,
                 base_error_type: type[Exception] = ApplicationError
                 ) -> None:
        """Initialise le handler avec un logger.

        Args:
            logger: Instance de Logger pour l'enregistrement des erreurs.
            base_error_type: Classe de base des erreurs connues.
        """
        self.logger = logger
        self.base_error_type = base_error_type

    def handle(self, error: Exception) -> None:
        """Log l'erreur avec différents niveaux selon la gravité.

        Args:
            error: L'exception à logger.
        """
        if isinstance(error, (ValidationError, SectionNotFoundError,
                              KeyNotFoundError)):
            self.logger.log_warning(f"{type(error).__name__}: {str(error)}")
        elif isinstance(error, self.base_error_type):
            self.logger.log_error(f"{type(error).__name__}: {str(error)}")
        else:
            self.logger.log_error(
                f"Erreur inattendue: {type(error).__name__}: {str(error)}"
            )
