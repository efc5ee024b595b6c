"""Module de configuration."""

from linux_ini_utils.config.loader import (
    ConfigLoader,
    FileConfigLoader,
    validate_with_schema,
)
from linux_ini_utils.config.policy import (
    IniPolicy,
    IniPolicySettings,
    load_policy,
    policy_from_env,
)

__all__ = [
    "ConfigLoader",
    "FileConfigLoader",
    "validate_with_schema",
    "IniPolicy",
    "IniPolicySettings",
    "load_policy",
    "policy_from_env",
]
