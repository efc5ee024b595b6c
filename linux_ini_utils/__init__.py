"""
Linux INI Utils - Lecture et édition de fichiers INI sous Linux.

Modules disponibles:
- dotconf: Gestionnaire de fichiers INI (LinuxIniConfigManager),
  modèle ligne à ligne et sections typées (ValidatedSection)
- config: Chargement de configuration (TOML, JSON) et politique
  de validation (IniPolicy)
- validation: Validation des noms, des valeurs et des permissions
- filesystem: Accès aux fichiers et remplacement atomique
- integrity: Détection des doublons et comparaison de sections
- logging: Gestion des logs (Logger, FileLogger, ConsoleLogger)
- errors: Exceptions et chaîne de handlers d'erreurs
- cli: Commande `linux-ini`
"""

__version__ = "1.0.0"

from linux_ini_utils.logging import Logger, FileLogger, ConsoleLogger
from linux_ini_utils.config import (
    ConfigLoader,
    FileConfigLoader,
    IniPolicy,
    IniPolicySettings,
    load_policy,
    policy_from_env,
)
from linux_ini_utils.filesystem import (
    FileManager,
    LinuxFileManager,
    AtomicFileReplacer,
    LinuxAtomicFileReplacer,
)
from linux_ini_utils.validation import (
    Validator,
    NameValidator,
    ValueValidator,
    WritableFileChecker,
)
from linux_ini_utils.dotconf import (
    IniSection,
    IniConfigManager,
    IniDocument,
    ValidatedSection,
    LinuxIniConfigManager,
    parse_validator,
    build_validators,
    encode_array,
    decode_array,
)
from linux_ini_utils.integrity import (
    IniIssue,
    DuplicateEntryChecker,
    IniSectionIntegrityChecker,
    StoreSectionIntegrityChecker,
)
from linux_ini_utils.errors import (
    ApplicationError,
    ValidationError,
    NameValidationError,
    EmptyValueRejectedError,
    IniError,
    IniFileNotFoundError,
    SectionNotFoundError,
    KeyNotFoundError,
    IniIOError,
    IniIntegrityError,
)

__all__ = [
    # Logging
    "Logger",
    "FileLogger",
    "ConsoleLogger",
    # Config
    "ConfigLoader",
    "FileConfigLoader",
    "IniPolicy",
    "IniPolicySettings",
    "load_policy",
    "policy_from_env",
    # Filesystem
    "FileManager",
    "LinuxFileManager",
    "AtomicFileReplacer",
    "LinuxAtomicFileReplacer",
    # Validation
    "Validator",
    "NameValidator",
    "ValueValidator",
    "WritableFileChecker",
    # DotConf - Interfaces
    "IniSection",
    "IniConfigManager",
    # DotConf - Implémentations
    "IniDocument",
    "ValidatedSection",
    "LinuxIniConfigManager",
    # DotConf - Utilitaires
    "parse_validator",
    "build_validators",
    "encode_array",
    "decode_array",
    # Integrity
    "IniIssue",
    "DuplicateEntryChecker",
    "IniSectionIntegrityChecker",
    "StoreSectionIntegrityChecker",
    # Errors
    "ApplicationError",
    "ValidationError",
    "NameValidationError",
    "EmptyValueRejectedError",
    "IniError",
    "IniFileNotFoundError",
    "SectionNotFoundError",
    "KeyNotFoundError",
    "IniIOError",
    "IniIntegrityError",
]
