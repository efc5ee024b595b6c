"""Module de validation."""

from linux_ini_utils.validation.base import Validator
from linux_ini_utils.validation.file_checker import WritableFileChecker
from linux_ini_utils.validation.names import (
    NameValidator,
    ValueValidator,
    validate_key_name,
    validate_section_name,
)

__all__ = [
    "Validator",
    "NameValidator",
    "ValueValidator",
    "WritableFileChecker",
    "validate_section_name",
    "validate_key_name",
]
