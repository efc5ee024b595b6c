"""Module de gestion des erreurs."""

from linux_ini_utils.errors.base import ErrorHandler, ErrorHandlerChain
from linux_ini_utils.errors.exceptions import (ApplicationError,
                                               ConfigurationError,
                                               PolicyConfigurationError,
                                               ValidationError,
                                               NameValidationError,
                                               ValueValidationError,
                                               EmptyValueRejectedError,
                                               IniError,
                                               IniFileNotFoundError,
                                               SectionNotFoundError,
                                               KeyNotFoundError,
                                               IniIOError,
                                               IniIntegrityError)
from linux_ini_utils.errors.console_handler import ConsoleErrorHandler
from linux_ini_utils.errors.logger_handler import LoggerErrorHandler


__all__ = [
    "ApplicationError",
    "ConfigurationError",
    "PolicyConfigurationError",
    "ValidationError",
    "NameValidationError",
    "ValueValidationError",
    "EmptyValueRejectedError",
    "IniError",
    "IniFileNotFoundError",
    "SectionNotFoundError",
    "KeyNotFoundError",
    "IniIOError",
    "IniIntegrityError",
    "ErrorHandler",
    "ConsoleErrorHandler",
    "LoggerErrorHandler",
    "ErrorHandlerChain",
]
