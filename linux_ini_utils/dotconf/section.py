"""Implémentation de sections INI avec validation externe.

Ce module fournit ValidatedSection, une dataclass de base pour représenter
des sections de fichiers INI avec validation des valeurs depuis une source
externe (fichier TOML, dictionnaire, etc.).
"""

import re
from collections.abc import Callable
from dataclasses import dataclass, fields
from typing import Any, ClassVar

from linux_ini_utils.dotconf.base import IniSection
from linux_ini_utils.errors.exceptions import ValidationError

SectionValidator = list[str] | re.Pattern[str] | Callable[[str], bool]


def parse_validator(value: Any) -> SectionValidator:
    """Convertit une valeur de validateur en liste, motif ou fonction.

    Supporte trois formats :
    - Liste de valeurs autorisées : ["yes", "no"]
    - Expression régulière (doit correspondre à toute la valeur) : "[0-9]+"
    - Fonction Python (dictionnaire construit dans le code) : str.isdigit

    Args:
        value: Liste, motif ou callable.

    Returns:
        Validateur prêt à l'emploi.

    Raises:
        ValueError: Si le format du validateur est invalide.
    """
    if isinstance(value, list):
        return [str(item) for item in value]
    if isinstance(value, str):
        try:
            return re.compile(value)
        except re.error as e:
            raise ValueError(
                f"Format de validateur invalide : {value!r} ({e})"
            ) from e
    if callable(value):
        return value
    raise ValueError(f"Format de validateur invalide : {value!r}")


def build_validators(
    validators_dict: dict[str, Any],
) -> dict[str, SectionValidator]:
    """Construit un dictionnaire de validateurs depuis une configuration.

    Args:
        validators_dict: Dictionnaire brut des validateurs (depuis TOML).

    Returns:
        Dictionnaire des validateurs prêts à l'emploi.
    """
    return {key: parse_validator(value) for key, value in validators_dict.items()}


@dataclass(frozen=True)
class ValidatedSection(IniSection):
    """Classe de base pour une section INI avec validation externe.

    Les validators sont injectés via la méthode de classe `set_validators()`
    avant la création des instances.

    Example:
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
    """

    _validators: ClassVar[dict[str, SectionValidator]] = {}

    @classmethod
    def set_validators(cls, validators: dict[str, Any]) -> None:
        """Injecte les validateurs depuis une source externe.

        Args:
            validators: Dictionnaire des règles de validation.
        """
        cls._validators = build_validators(validators)

    @classmethod
    def clear_validators(cls) -> None:
        """Efface les validateurs (utile pour les tests)."""
        cls._validators = {}

    def __post_init__(self) -> None:
        """Valide tous les champs selon les validateurs injectés.

        Raises:
            ValidationError: Si une valeur ne passe pas la validation.
        """
        for f in fields(self):
            if f.name.startswith("_"):
                continue

            value = str(getattr(self, f.name))
            validator = self._validators.get(f.name)

            if validator is None:
                continue

            if isinstance(validator, list):
                if value not in validator:
                    raise ValidationError(
                        f"{f.name}={value!r} invalide. Valeurs autorisées : {validator}"
                    )
            elif isinstance(validator, re.Pattern):
                if not validator.fullmatch(value):
                    raise ValidationError(
                        f"{f.name}={value!r} ne correspond pas à {validator.pattern!r}."
                    )
            elif not validator(value):
                raise ValidationError(f"{f.name}={value!r} échoue la validation.")

    @staticmethod
    def section_name() -> str:
        """Doit être redéfini dans les classes dérivées.

        Raises:
            NotImplementedError: Si non redéfini.
        """
        raise NotImplementedError("section_name() doit être redéfini")

    def to_dict(self) -> dict[str, str]:
        """Convertit la section en dictionnaire clé-valeur.

        Exclut les champs privés (commençant par '_').
        """
        return {
            f.name: str(getattr(self, f.name))
            for f in fields(self)
            if not f.name.startswith("_")
        }

    @classmethod
    def from_dict(cls, data: dict[str, str]) -> "ValidatedSection":
        """Crée une instance depuis un dictionnaire.

        Les clés inconnues de la dataclass sont ignorées : un fichier
        édité à la main peut porter des clés supplémentaires.

        Raises:
            TypeError: Si des champs requis sont manquants.
            ValidationError: Si la validation échoue.
        """
        known = {f.name for f in fields(cls) if not f.name.startswith("_")}
        return cls(**{k: v for k, v in data.items() if k in known})
