"""Politique de validation du gestionnaire INI.

Ce module définit IniPolicy, la configuration immuable passée au
constructeur de LinuxIniConfigManager, ainsi que ses deux sources :
un fichier TOML/JSON (table [ini]) et les variables d'environnement
SHELL_INI_* héritées de la bibliothèque shell.

Example:
    Chargement depuis un fichier :

        policy = load_policy("~/.config/linux-ini/policy.toml")
        manager = LinuxIniConfigManager(logger, policy=policy)
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError

from linux_ini_utils.config.loader import ConfigLoader, FileConfigLoader
from linux_ini_utils.errors.exceptions import PolicyConfigurationError

ENV_STRICT = "SHELL_INI_STRICT"
ENV_ALLOW_SPACES = "SHELL_INI_ALLOW_SPACES_IN_NAMES"
ENV_ALLOW_EMPTY = "SHELL_INI_ALLOW_EMPTY_VALUES"


@dataclass(frozen=True)
class IniPolicy:
    """Politique globale de validation des noms et des valeurs.

    Attributes:
        strict: Refuse les noms contenant '[', ']' ou '='.
        allow_spaces_in_names: Autorise les espaces dans les noms.
        allow_empty_values: Autorise l'écriture de valeurs vides.
    """

    strict: bool = False
    allow_spaces_in_names: bool = True
    allow_empty_values: bool = True


class IniPolicySettings(BaseModel):
    """Schéma pydantic de la table [ini] d'un fichier de politique."""

    model_config = ConfigDict(extra="forbid")

    strict: bool = False
    allow_spaces_in_names: bool = True
    allow_empty_values: bool = True

    def to_policy(self) -> IniPolicy:
        """Convertit les paramètres validés en IniPolicy."""
        return IniPolicy(
            strict=self.strict,
            allow_spaces_in_names=self.allow_spaces_in_names,
            allow_empty_values=self.allow_empty_values,
        )


def _settings_to_policy(data: Mapping[str, Any], source: str) -> IniPolicy:
    try:
        return IniPolicySettings.model_validate(dict(data)).to_policy()
    except PydanticValidationError as e:
        raise PolicyConfigurationError(
            f"Politique INI invalide ({source}) : {e}"
        ) from e


def load_policy(
    config_path: Union[str, Path],
    config_loader: Optional[ConfigLoader] = None,
    section: str = "ini",
) -> IniPolicy:
    """Charge la politique depuis la table [ini] d'un fichier TOML/JSON.

    Une table absente donne la politique par défaut.

    Args:
        config_path: Chemin du fichier (.toml ou .json).
        config_loader: Chargeur injectable (défaut: FileConfigLoader).
        section: Nom de la table portant la politique.

    Returns:
        Politique validée.

    Raises:
        PolicyConfigurationError: Si le fichier est absent, illisible
            ou si la table contient des valeurs invalides.
    """
    path = Path(config_path).expanduser()
    loader = config_loader or FileConfigLoader()
    try:
        raw_config = loader.load(path)
    except (FileNotFoundError, ValueError, OSError) as e:
        raise PolicyConfigurationError(
            f"Impossible de charger la politique {path} : {e}"
        ) from e

    table = raw_config.get(section, {})
    if not isinstance(table, dict):
        raise PolicyConfigurationError(
            f"La table [{section}] de {path} doit être un dictionnaire."
        )
    return _settings_to_policy(table, str(path))


def policy_from_env(
    environ: Optional[Mapping[str, str]] = None,
    base: Optional[IniPolicy] = None,
) -> IniPolicy:
    """Construit la politique depuis les variables SHELL_INI_*.

    Les variables absentes conservent la valeur de `base`.

    Args:
        environ: Environnement à lire (défaut: os.environ).
        base: Politique de départ (défaut: IniPolicy()).

    Returns:
        Politique résultante.

    Raises:
        PolicyConfigurationError: Si une variable n'est pas un booléen.
    """
    env = os.environ if environ is None else environ
    current = base or IniPolicy()
    data: dict[str, Any] = {
        "strict": current.strict,
        "allow_spaces_in_names": current.allow_spaces_in_names,
        "allow_empty_values": current.allow_empty_values,
    }
    for variable, field_name in (
        (ENV_STRICT, "strict"),
        (ENV_ALLOW_SPACES, "allow_spaces_in_names"),
        (ENV_ALLOW_EMPTY, "allow_empty_values"),
    ):
        raw = env.get(variable)
        if raw is not None and raw.strip() != "":
            data[field_name] = raw.strip()
    return _settings_to_policy(data, "environnement")
