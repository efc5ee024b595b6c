"""Module DotConf pour la gestion de fichiers de configuration INI.

Ce module fournit des outils pour lire et modifier des fichiers de
configuration au format INI (.conf, .ini) sans perdre leur mise en
forme :
- Modèle ligne à ligne (commentaires et lignes vides préservés)
- Encodage des valeurs (guillemets, tableaux)
- Dataclasses immuables avec validation externe pour les sections
- Remplacement atomique des fichiers modifiés

Classes principales:
    - IniSection: Interface abstraite pour une section INI
    - IniConfigManager: Interface abstraite pour la gestion de fichiers
    - IniDocument: Document INI ligne à ligne
    - ValidatedSection: Dataclass de base avec validation externe
    - LinuxIniConfigManager: Implémentation du gestionnaire de fichiers

Fonctions utilitaires:
    - parse_validator: Convertit un validateur brut en motif/liste/fonction
    - build_validators: Construit un dictionnaire de validateurs
    - quote_value, unquote_value: Encodage d'une valeur scalaire
    - encode_array, decode_array: Encodage d'une liste de valeurs

Example:
    >>> from dataclasses import dataclass
    >>> from linux_ini_utils.dotconf import (
    ...     ValidatedSection, LinuxIniConfigManager
    ... )
    >>> from linux_ini_utils import FileLogger
    >>>
    >>> @dataclass(frozen=True)
    ... class TunnelSection(ValidatedSection):
    ...     SSH_SERVER_ADDR: str = "127.0.0.1"
    ...     SSH_SERVER_PORT: str = "2222"
    ...
    ...     @staticmethod
    ...     def section_name() -> str:
    ...         return "dev"
    >>>
    >>> TunnelSection.set_validators({"SSH_SERVER_PORT": "[0-9]{1,5}"})
    >>> section = TunnelSection(SSH_SERVER_PORT="2223")
    >>>
    >>> logger = FileLogger("/var/log/ini.log")
    >>> manager = LinuxIniConfigManager(logger)
    >>> manager.write_section("/etc/tunnel.conf", section)
    True
"""

from linux_ini_utils.dotconf.base import (
    IniConfigManager,
    IniSection,
    PathLike,
)
from linux_ini_utils.dotconf.document import (
    IniDocument,
    IniLine,
    LineKind,
    SectionRange,
    classify_line,
)
from linux_ini_utils.dotconf.manager import LinuxIniConfigManager
from linux_ini_utils.dotconf.section import (
    ValidatedSection,
    build_validators,
    parse_validator,
)
from linux_ini_utils.dotconf.values import (
    decode_array,
    encode_array,
    quote_value,
    unquote_value,
)

__all__ = [
    # Interfaces abstraites
    "IniSection",
    "IniConfigManager",
    "PathLike",
    # Modèle
    "IniDocument",
    "IniLine",
    "LineKind",
    "SectionRange",
    "classify_line",
    # Implémentations
    "ValidatedSection",
    "LinuxIniConfigManager",
    # Fonctions utilitaires
    "parse_validator",
    "build_validators",
    "quote_value",
    "unquote_value",
    "encode_array",
    "decode_array",
]
