"""Validateurs des noms de section, des noms de clé et des valeurs.

Les règles dépendent de l'IniPolicy active :

- un nom vide est toujours refusé ;
- en mode strict, '[', ']' et '=' sont interdits ;
- sans allow_spaces_in_names, tout caractère blanc est interdit ;
- quelle que soit la politique, un nom ne peut ni commencer ni finir
  par un blanc, et une clé ne peut pas commencer par '#', ';' ou '['
  ni contenir '=' : la ligne écrite ne serait jamais relue comme une
  entrée.
"""

import re

from linux_ini_utils.config.policy import IniPolicy
from linux_ini_utils.errors.exceptions import (EmptyValueRejectedError,
                                               NameValidationError,
                                               ValueValidationError)
from linux_ini_utils.validation.base import Validator

ILLEGAL_NAME_CHARACTERS = ("[", "]", "=")
_WHITESPACE = re.compile(r"\s")
KEY_FORBIDDEN_PREFIXES = ("#", ";", "[")
_KIND_LABELS = {"section": "de section", "key": "de clé"}


class NameValidator(Validator):
    """Valide un nom de section ou de clé selon la politique.

    Attributes:
        name: Nom à valider.
        kind: "section" ou "key".
        policy: Politique de validation.
    """

    def __init__(self, name: str, kind: str, policy: IniPolicy) -> None:
        if kind not in _KIND_LABELS:
            raise ValueError(f"Type de nom inconnu : {kind!r}")
        self.name = name
        self.kind = kind
        self.policy = policy

    def validate(self) -> None:
        """Applique les règles de nommage.

        Raises:
            NameValidationError: Avec la règle violée dans `rule`.
        """
        label = _KIND_LABELS[self.kind]

        if not self.name:
            raise NameValidationError(
                self.name, self.kind, "empty",
                f"Le nom {label} ne peut pas être vide"
            )

        if self.policy.strict and any(
            char in self.name for char in ILLEGAL_NAME_CHARACTERS
        ):
            raise NameValidationError(
                self.name, self.kind, "illegal_characters",
                f"Le nom {label} contient des caractères interdits : "
                f"{self.name}"
            )

        if self.name != self.name.strip():
            raise NameValidationError(
                self.name, self.kind, "surrounding_whitespace",
                f"Le nom {label} commence ou finit par un espace : "
                f"{self.name!r}"
            )

        if self.kind == "key" and (
            self.name.startswith(KEY_FORBIDDEN_PREFIXES) or "=" in self.name
        ):
            raise NameValidationError(
                self.name, self.kind, "key_syntax",
                "Une clé ne peut pas commencer par '#', ';' ou '[' "
                f"ni contenir '=' : {self.name}"
            )

        if not self.policy.allow_spaces_in_names and _WHITESPACE.search(
            self.name
        ):
            raise NameValidationError(
                self.name, self.kind, "whitespace",
                f"Le nom {label} contient des espaces : {self.name}"
            )


class ValueValidator(Validator):
    """Valide une valeur avant écriture.

    Une valeur doit tenir sur une seule ligne ; une valeur vide n'est
    acceptée que si la politique l'autorise.
    """

    def __init__(self, value: str, policy: IniPolicy) -> None:
        self.value = value
        self.policy = policy

    def validate(self) -> None:
        """Applique les règles sur la valeur.

        Raises:
            EmptyValueRejectedError: Valeur vide refusée par la politique.
            ValueValidationError: Valeur multi-ligne.
        """
        if self.value == "" and not self.policy.allow_empty_values:
            raise EmptyValueRejectedError(
                "Les valeurs vides ne sont pas autorisées"
            )

        if "\n" in self.value or "\r" in self.value:
            raise ValueValidationError(
                self.value, "multiline",
                "Les valeurs multi-lignes ne sont pas prises en charge"
            )


def validate_section_name(section: str, policy: IniPolicy) -> None:
    """Raccourci : valide un nom de section."""
    NameValidator(section, "section", policy).validate()


def validate_key_name(key: str, policy: IniPolicy) -> None:
    """Raccourci : valide un nom de clé."""
    NameValidator(key, "key", policy).validate()
