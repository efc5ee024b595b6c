"""Module de gestion des fichiers."""

from linux_ini_utils.filesystem.atomic import LinuxAtomicFileReplacer
from linux_ini_utils.filesystem.base import (
    AtomicFileReplacer,
    FileManager,
    TempFile,
)
from linux_ini_utils.filesystem.linux import LinuxFileManager

__all__ = [
    "FileManager",
    "LinuxFileManager",
    "AtomicFileReplacer",
    "LinuxAtomicFileReplacer",
    "TempFile",
]
