"""
Module contenant les exceptions personnalisées pour linux_ini_utils.

Ce module suit le principe SRP en isolant la gestion des exceptions.
Toutes les erreurs métier héritent de ApplicationError pour s'intégrer
dans la chaîne d'error handlers (ConsoleErrorHandler, LoggerErrorHandler).
"""


class ApplicationError(Exception):
    """Exception de base pour toutes les applications."""
    pass


class ConfigurationError(ApplicationError):
    """Exception de base pour toutes les Configurations."""
    pass


class PolicyConfigurationError(ConfigurationError):
    """Levée quand la politique INI (fichier ou environnement) est invalide."""
    pass


class ValidationError(ApplicationError):
    """Exception de base pour toutes les validations."""
    pass


class NameValidationError(ValidationError):
    """Levée quand un nom de section ou de clé est refusé.

    Attributes:
        name: Nom fautif.
        kind: "section" ou "key".
        rule: Règle violée ("empty", "illegal_characters", "whitespace").
    """

    def __init__(self, name: str, kind: str, rule: str, message: str) -> None:
        super().__init__(message)
        self.name = name
        self.kind = kind
        self.rule = rule


class ValueValidationError(ValidationError):
    """Levée quand une valeur ne peut pas être stockée sur une ligne."""

    def __init__(self, value: str, rule: str, message: str) -> None:
        super().__init__(message)
        self.value = value
        self.rule = rule


class EmptyValueRejectedError(ValidationError):
    """Levée quand une valeur vide est écrite sans allow_empty_values."""
    pass


class IniError(ApplicationError):
    """Exception de base pour les opérations sur fichiers INI."""
    pass


class IniFileNotFoundError(IniError):
    """Levée quand le fichier INI ciblé par une lecture n'existe pas."""

    def __init__(self, path: object) -> None:
        super().__init__(f"Fichier non trouvé : {path}")
        self.path = path


class SectionNotFoundError(IniError):
    """Levée quand une opération exige une section absente."""

    def __init__(self, section: str, path: object) -> None:
        super().__init__(f"Section [{section}] absente de {path}")
        self.section = section
        self.path = path


class KeyNotFoundError(IniError):
    """Levée quand une clé est absente de la section demandée."""

    def __init__(self, section: str, key: str, path: object) -> None:
        super().__init__(
            f"Clé '{key}' absente de la section [{section}] dans {path}"
        )
        self.section = section
        self.key = key
        self.path = path


class IniIOError(IniError):
    """Levée sur un échec du système de fichiers (permission, disque plein)."""
    pass


class IniIntegrityError(IniError):
    """Levée quand un fichier INI contient des doublons ou des écarts."""

    def __init__(self, message: str, issues: list | None = None) -> None:
        super().__init__(message)
        self.issues = issues or []
