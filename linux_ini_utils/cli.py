"""Interface en ligne de commande `linux-ini`.

Expose les opérations de LinuxIniConfigManager pour les scripts shell :
les valeurs lues sont écrites sur stdout, les messages et les erreurs
sur stderr.

Example:
    $ linux-ini write profile.conf dev PORT 5432
    $ linux-ini read profile.conf dev PORT
    5432
    $ linux-ini --strict list-sections profile.conf
    dev
"""

import argparse
import json
import sys
from dataclasses import replace
from typing import Any, Callable, Optional

from linux_ini_utils import __version__
from linux_ini_utils.config.loader import FileConfigLoader
from linux_ini_utils.config.policy import IniPolicy, load_policy, policy_from_env
from linux_ini_utils.dotconf.manager import LinuxIniConfigManager
from linux_ini_utils.errors import (
    ApplicationError,
    ConsoleErrorHandler,
    ErrorHandlerChain,
    LoggerErrorHandler,
    PolicyConfigurationError,
)
from linux_ini_utils.integrity.ini_checker import DuplicateEntryChecker
from linux_ini_utils.logging import ConsoleLogger, FileLogger, Logger

Command = Callable[[LinuxIniConfigManager, argparse.Namespace], int]


def _print(value: str) -> None:
    print(value, file=sys.stdout)


# Commandes


def _cmd_read(manager: LinuxIniConfigManager, args: argparse.Namespace) -> int:
    _print(manager.read(args.file, args.section, args.key))
    return 0


def _cmd_write(manager: LinuxIniConfigManager, args: argparse.Namespace) -> int:
    manager.write(args.file, args.section, args.key, args.value)
    return 0


def _cmd_add_section(
    manager: LinuxIniConfigManager, args: argparse.Namespace
) -> int:
    manager.add_section(args.file, args.section)
    return 0


def _cmd_remove_section(
    manager: LinuxIniConfigManager, args: argparse.Namespace
) -> int:
    removed = manager.remove_section(
        args.file, args.section, dry_run=args.dry_run
    )
    if args.dry_run and removed:
        _print(f"[{args.section}] serait supprimée")
    return 0


def _cmd_remove_key(
    manager: LinuxIniConfigManager, args: argparse.Namespace
) -> int:
    removed = manager.remove_key(
        args.file, args.section, args.key, dry_run=args.dry_run
    )
    if args.dry_run and removed:
        _print(f"{args.key} serait supprimée de [{args.section}]")
    return 0


def _cmd_list_sections(
    manager: LinuxIniConfigManager, args: argparse.Namespace
) -> int:
    for name in manager.iter_sections(args.file):
        _print(name)
    return 0


def _cmd_list_keys(
    manager: LinuxIniConfigManager, args: argparse.Namespace
) -> int:
    for key in manager.list_keys(args.file, args.section):
        _print(key)
    return 0


def _cmd_section_exists(
    manager: LinuxIniConfigManager, args: argparse.Namespace
) -> int:
    return 0 if manager.section_exists(args.file, args.section) else 1


def _cmd_set_array(
    manager: LinuxIniConfigManager, args: argparse.Namespace
) -> int:
    manager.set_array_value(args.file, args.section, args.key, *args.values)
    return 0


def _cmd_get_array(
    manager: LinuxIniConfigManager, args: argparse.Namespace
) -> int:
    for item in manager.get_array_value(args.file, args.section, args.key):
        _print(item)
    return 0


def _cmd_dump(manager: LinuxIniConfigManager, args: argparse.Namespace) -> int:
    _print(json.dumps(
        manager.read_all(args.file), indent=args.indent, ensure_ascii=False
    ))
    return 0


def _cmd_check(manager: LinuxIniConfigManager, args: argparse.Namespace) -> int:
    checker = DuplicateEntryChecker(manager.logger, manager.file_manager)
    issues = checker.check(args.file)
    for issue in issues:
        _print(str(issue))
    return 1 if issues else 0


# Analyse des arguments


def _add_command(
    subparsers: Any, name: str, handler: Command, help_text: str,
    *arguments: str,
) -> argparse.ArgumentParser:
    parser = subparsers.add_parser(name, help=help_text)
    parser.add_argument("file", help="Fichier INI")
    for argument in arguments:
        parser.add_argument(argument)
    parser.set_defaults(handler=handler)
    return parser


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="linux-ini",
        description="Lit et modifie des fichiers INI en préservant "
                    "commentaires et mise en forme.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--policy", metavar="FILE", default=None,
        help="Fichier TOML/JSON contenant les tables [ini] et [logging]."
    )
    parser.add_argument(
        "--strict", action="store_true",
        help="Refuse '[', ']' et '=' dans les noms."
    )
    parser.add_argument(
        "--no-spaces", action="store_true",
        help="Refuse les espaces dans les noms."
    )
    parser.add_argument(
        "--no-empty-values", action="store_true",
        help="Refuse l'écriture de valeurs vides."
    )
    parser.add_argument(
        "--log-file", default=None,
        help="Journalise les opérations dans ce fichier."
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true",
        help="Affiche les messages d'information sur stderr."
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    _add_command(subparsers, "read", _cmd_read,
                 "Affiche la valeur d'une clé", "section", "key")
    _add_command(subparsers, "write", _cmd_write,
                 "Écrit une clé", "section", "key", "value")
    _add_command(subparsers, "add-section", _cmd_add_section,
                 "Ajoute une section vide", "section")

    remove_section = _add_command(
        subparsers, "remove-section", _cmd_remove_section,
        "Supprime une section", "section"
    )
    remove_section.add_argument(
        "-n", "--dry-run", action="store_true",
        help="Affiche la suppression sans modifier le fichier."
    )
    remove_key = _add_command(
        subparsers, "remove-key", _cmd_remove_key,
        "Supprime une clé", "section", "key"
    )
    remove_key.add_argument(
        "-n", "--dry-run", action="store_true",
        help="Affiche la suppression sans modifier le fichier."
    )

    _add_command(subparsers, "list-sections", _cmd_list_sections,
                 "Liste les sections")
    _add_command(subparsers, "list-keys", _cmd_list_keys,
                 "Liste les clés d'une section", "section")
    _add_command(subparsers, "section-exists", _cmd_section_exists,
                 "Code de sortie 0 si la section existe", "section")

    set_array = _add_command(
        subparsers, "set-array", _cmd_set_array,
        "Écrit une liste de valeurs", "section", "key"
    )
    set_array.add_argument("values", nargs="*")
    _add_command(subparsers, "get-array", _cmd_get_array,
                 "Affiche une liste de valeurs, une par ligne",
                 "section", "key")

    dump = _add_command(subparsers, "dump", _cmd_dump,
                        "Exporte le fichier en JSON")
    dump.add_argument("--indent", type=int, default=2)
    _add_command(subparsers, "check", _cmd_check,
                 "Signale les sections et clés en double")
    return parser


def _load_config(args: argparse.Namespace) -> Optional[dict[str, Any]]:
    """Charge le fichier de politique brut (pour la table [logging])."""
    if not args.policy:
        return None
    try:
        return FileConfigLoader().load(args.policy)
    except (FileNotFoundError, ValueError, OSError) as e:
        raise PolicyConfigurationError(
            f"Impossible de charger la politique {args.policy} : {e}"
        ) from e


def _build_policy(args: argparse.Namespace) -> IniPolicy:
    """Fichier, puis variables SHELL_INI_*, puis options de la commande."""
    base = load_policy(args.policy) if args.policy else IniPolicy()
    policy = policy_from_env(base=base)
    if args.strict:
        policy = replace(policy, strict=True)
    if args.no_spaces:
        policy = replace(policy, allow_spaces_in_names=False)
    if args.no_empty_values:
        policy = replace(policy, allow_empty_values=False)
    return policy


def _build_logger(
    args: argparse.Namespace, config: Optional[dict[str, Any]]
) -> Logger:
    if args.log_file:
        return FileLogger(args.log_file, config, console_output=args.verbose)
    return ConsoleLogger(level="INFO" if args.verbose else "WARNING")


def main(argv: Optional[list[str]] = None) -> int:
    """Point d'entrée de la commande `linux-ini`.

    Args:
        argv: Arguments (défaut: sys.argv[1:]).

    Returns:
        Code de sortie : 0 en cas de succès, 1 en cas d'erreur ou pour
        section-exists sur une section absente.
    """
    args = _build_arg_parser().parse_args(argv)
    error_chain = ErrorHandlerChain([ConsoleErrorHandler()])

    try:
        config = _load_config(args)
        logger = _build_logger(args, config)
        if args.log_file:
            error_chain.add_handler(LoggerErrorHandler(logger))
        manager = LinuxIniConfigManager(logger, policy=_build_policy(args))
        return args.handler(manager, args)
    except ApplicationError as e:
        error_chain.handle(e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
