"""Module de logging."""

from linux_ini_utils.logging.base import Logger
from linux_ini_utils.logging.console_logger import ConsoleLogger
from linux_ini_utils.logging.file_logger import FileLogger

__all__ = [
    "Logger",
    "FileLogger",
    "ConsoleLogger",
]
