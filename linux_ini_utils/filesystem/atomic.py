"""Remplacement atomique de fichiers sous Linux."""

import os
import stat
import tempfile
from pathlib import Path

from linux_ini_utils.errors.exceptions import IniIOError
from linux_ini_utils.filesystem.base import AtomicFileReplacer, TempFile
from linux_ini_utils.logging.base import Logger


class LinuxAtomicFileReplacer(AtomicFileReplacer):
    """
    Remplacement atomique par fichier temporaire et os.replace().

    Le fichier temporaire est créé dans le répertoire de la cible :
    rename(2) n'est atomique qu'au sein d'un même système de fichiers.
    Le contenu est synchronisé sur disque avant le renommage et le
    fichier final reprend les permissions de la cible existante.
    """

    def __init__(self, logger: Logger, prefix: str = ".linux_ini_") -> None:
        """
        Initialise le remplaçant.

        Args:
            logger: Instance de Logger pour le logging
            prefix: Préfixe des fichiers temporaires
        """
        self.logger = logger
        self.prefix = prefix

    def create_temp(self, target: Path, content: str) -> TempFile:
        target = Path(target)
        directory = target.parent if str(target.parent) else Path(".")
        try:
            fd, temp_name = tempfile.mkstemp(
                prefix=self.prefix, suffix=".tmp", dir=directory
            )
        except OSError as e:
            self.logger.log_error(
                f"Création du fichier temporaire impossible dans {directory}: {e}"
            )
            raise IniIOError(
                f"Impossible de créer un fichier temporaire pour {target} : {e}"
            ) from e

        temp = TempFile(path=Path(temp_name), target=target)
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
                f.flush()
                os.fsync(f.fileno())
        except OSError as e:
            self.discard(temp)
            self.logger.log_error(
                f"Écriture du fichier temporaire {temp.path} échouée: {e}"
            )
            raise IniIOError(
                f"Impossible d'écrire le fichier temporaire pour {target} : {e}"
            ) from e

        self.logger.log_debug(f"Fichier temporaire créé : {temp.path}")
        return temp

    def commit(self, temp: TempFile) -> None:
        if temp.target.exists():
            mode = stat.S_IMODE(temp.target.stat().st_mode)
        else:
            mode = 0o666 & ~_current_umask()
        os.chmod(temp.path, mode)
        os.replace(temp.path, temp.target)
        self.logger.log_debug(f"{temp.target} remplacé atomiquement.")

    def discard(self, temp: TempFile) -> None:
        try:
            temp.path.unlink(missing_ok=True)
        except OSError as e:
            self.logger.log_warning(
                f"Suppression du fichier temporaire {temp.path} impossible: {e}"
            )


def _current_umask() -> int:
    """Lit l'umask du processus sans la modifier durablement."""
    mask = os.umask(0)
    os.umask(mask)
    return mask
