"""Gestionnaire de fichiers de configuration INI.

Ce module fournit LinuxIniConfigManager, le moteur de lecture et
d'écriture des fichiers INI plats ([section] / clé=valeur).

Contrairement à configparser, le fichier n'est jamais reformaté : il
est lu ligne à ligne dans un IniDocument, seules les lignes concernées
sont modifiées, puis le contenu complet remplace l'original de manière
atomique (fichier temporaire + rename).
"""

from pathlib import Path
from typing import Iterator, Optional

from linux_ini_utils.config.policy import IniPolicy
from linux_ini_utils.dotconf.base import IniConfigManager, IniSection, PathLike
from linux_ini_utils.dotconf.document import (
    IniDocument,
    LineKind,
    classify_line,
)
from linux_ini_utils.dotconf.values import (
    decode_array,
    encode_array,
    quote_value,
    unquote_value,
)
from linux_ini_utils.errors.exceptions import (
    IniFileNotFoundError,
    KeyNotFoundError,
    SectionNotFoundError,
)
from linux_ini_utils.filesystem.atomic import LinuxAtomicFileReplacer
from linux_ini_utils.filesystem.base import AtomicFileReplacer, FileManager
from linux_ini_utils.filesystem.linux import LinuxFileManager
from linux_ini_utils.logging.base import Logger
from linux_ini_utils.validation.file_checker import WritableFileChecker
from linux_ini_utils.validation.names import (
    ValueValidator,
    validate_key_name,
    validate_section_name,
)


class LinuxIniConfigManager(IniConfigManager):
    """Gestionnaire de fichiers de configuration INI pour Linux.

    Attributes:
        logger: Instance de Logger pour tracer les opérations.
        policy: Politique de validation des noms et des valeurs.
        file_manager: Accès en lecture aux fichiers.
        replacer: Remplacement atomique des fichiers modifiés.

    Example:
        >>> from linux_ini_utils import FileLogger
        >>> logger = FileLogger("/var/log/ini.log")
        >>> manager = LinuxIniConfigManager(logger)
        >>> manager.write("profile.conf", "dev", "PORT", "5432")
        True
        >>> manager.read("profile.conf", "dev", "PORT")
        '5432'
    """

    def __init__(
        self,
        logger: Logger,
        policy: Optional[IniPolicy] = None,
        file_manager: Optional[FileManager] = None,
        replacer: Optional[AtomicFileReplacer] = None,
    ) -> None:
        """Initialise le gestionnaire.

        Args:
            logger: Instance de Logger pour les messages.
            policy: Politique de validation (défaut: IniPolicy()).
            file_manager: Accès aux fichiers (défaut: LinuxFileManager).
            replacer: Remplacement atomique (défaut:
                LinuxAtomicFileReplacer).
        """
        self.logger = logger
        self.policy = policy or IniPolicy()
        self.file_manager = file_manager or LinuxFileManager(logger)
        self.replacer = replacer or LinuxAtomicFileReplacer(logger)

    # Accès au fichier

    def _validate_names(self, section: str, key: Optional[str] = None) -> None:
        validate_section_name(section, self.policy)
        if key is not None:
            validate_key_name(key, self.policy)

    def _load(self, path: Path) -> IniDocument:
        """Charge un fichier existant.

        Raises:
            IniFileNotFoundError: Si le fichier n'existe pas.
        """
        if not self.file_manager.file_exists(path):
            self.logger.log_error(f"Fichier non trouvé : {path}")
            raise IniFileNotFoundError(path)
        return IniDocument.from_text(self.file_manager.read_text(path))

    def _load_for_write(self, path: Path) -> tuple[IniDocument, str]:
        """Charge un fichier en le créant si nécessaire.

        Returns:
            Le document et le texte d'origine.
        """
        WritableFileChecker(path).validate()
        self.file_manager.ensure_file(path)
        original = self.file_manager.read_text(path)
        return IniDocument.from_text(original), original

    def _commit(self, path: Path, document: IniDocument, original: str) -> bool:
        """Remplace le fichier si son contenu a changé.

        Returns:
            True si le fichier a été remplacé.
        """
        content = document.to_text()
        if content == original:
            self.logger.log_debug(f"{path} inchangé, aucun remplacement.")
            return False
        WritableFileChecker(path).validate()
        self.replacer.replace(path, content)
        return True

    # Lecture

    def read(self, path: PathLike, section: str, key: str) -> str:
        """Lit la valeur d'une clé dans une section.

        Seul le premier bloc portant le nom de la section est consulté
        et la première occurrence de la clé fait foi. Les guillemets
        ajoutés à l'écriture sont retirés.

        Args:
            path: Chemin du fichier INI.
            section: Nom de la section.
            key: Nom de la clé.

        Returns:
            Valeur décodée.

        Raises:
            IniFileNotFoundError: Si le fichier n'existe pas.
            NameValidationError: Si un nom est refusé par la politique.
            KeyNotFoundError: Si la section ou la clé est absente.
        """
        path = Path(path)
        self._validate_names(section, key)
        document = self._load(path)
        self.logger.log_info(
            f"Lecture de la clé '{key}' de la section [{section}] dans {path}"
        )

        raw_value = document.lookup(section, key)
        if raw_value is None:
            self.logger.log_info(
                f"Clé '{key}' absente de la section [{section}]"
            )
            raise KeyNotFoundError(section, key, path)
        return unquote_value(raw_value)

    def section_exists(self, path: PathLike, section: str) -> bool:
        """Indique si un en-tête [section] existe.

        Raises:
            IniFileNotFoundError: Si le fichier n'existe pas.
        """
        path = Path(path)
        self._validate_names(section)
        return self._load(path).has_section(section)

    def iter_sections(self, path: PathLike) -> Iterator[str]:
        """Itère sur les en-têtes en lisant le fichier au fil de l'eau.

        Chaque appel repart du début du fichier.

        Raises:
            IniFileNotFoundError: Si le fichier n'existe pas.
        """
        path = Path(path)
        if not self.file_manager.file_exists(path):
            raise IniFileNotFoundError(path)
        for raw in self.file_manager.iter_lines(path):
            line = classify_line(raw)
            if line.kind is LineKind.SECTION:
                yield line.name

    def list_keys(self, path: PathLike, section: str) -> list[str]:
        """Liste les clés du premier bloc de la section.

        Returns:
            Clés dans l'ordre du fichier, liste vide si la section
            est absente.
        """
        path = Path(path)
        self._validate_names(section)
        return self._load(path).keys(section)

    def read_section(self, path: PathLike, section: str) -> dict[str, str]:
        """Retourne les valeurs décodées du premier bloc de la section.

        Raises:
            SectionNotFoundError: Si la section est absente.
        """
        path = Path(path)
        self._validate_names(section)
        document = self._load(path)
        values = self._section_values(document, section)
        if values is None:
            raise SectionNotFoundError(section, path)
        return values

    def read_all(self, path: PathLike) -> dict[str, dict[str, str]]:
        """Lit toutes les sections dans un dictionnaire imbriqué.

        Destiné à l'affichage et à l'export (JSON) ; pour un nom de
        section répété, seul le premier bloc est repris.

        Returns:
            Dictionnaire {section: {clé: valeur}} dans l'ordre du fichier.
        """
        path = Path(path)
        document = self._load(path)
        result: dict[str, dict[str, str]] = {}
        for name in document.section_names():
            if name not in result:
                result[name] = self._section_values(document, name) or {}
        self.logger.log_info(f"Fichier {path} lu avec succès.")
        return result

    @staticmethod
    def _section_values(
        document: IniDocument, section: str
    ) -> Optional[dict[str, str]]:
        block = document.find_section(section)
        if block is None:
            return None
        values: dict[str, str] = {}
        for _, line in document.entries(block):
            values.setdefault(line.name, unquote_value(line.raw_value))
        return values

    def get_array_value(self, path: PathLike, section: str, key: str) -> list[str]:
        """Lit une valeur écrite par set_array_value().

        Raises:
            KeyNotFoundError: Si la clé est absente.
        """
        return decode_array(self.read(path, section, key))

    # Écriture

    def write(self, path: PathLike, section: str, key: str, value: str) -> bool:
        """Écrit ou met à jour une clé dans une section.

        Le fichier et la section sont créés si nécessaire. La valeur est
        mise entre guillemets si elle contient un blanc, un guillemet ou
        un caractère spécial du shell.

        Args:
            path: Chemin du fichier INI.
            section: Nom de la section.
            key: Nom de la clé.
            value: Valeur à écrire.

        Returns:
            True si le fichier a été modifié, False s'il contenait déjà
            cette valeur.

        Raises:
            NameValidationError: Si un nom est refusé par la politique.
            EmptyValueRejectedError: Valeur vide sans allow_empty_values.
            IniIOError: Si le fichier ne peut être remplacé.
        """
        path = Path(path)
        self._validate_names(section, key)
        ValueValidator(value, self.policy).validate()

        document, original = self._load_for_write(path)
        document.upsert(section, key, quote_value(value))
        changed = self._commit(path, document, original)

        if changed:
            self.logger.log_info(
                f"Clé '{key}' écrite dans la section [{section}] de {path}."
            )
        else:
            self.logger.log_info(
                f"Clé '{key}' de [{section}] déjà à jour dans {path}."
            )
        return changed

    def add_section(self, path: PathLike, section: str) -> bool:
        """Ajoute une section vide si elle n'existe pas.

        Returns:
            True si la section a été ajoutée.
        """
        path = Path(path)
        self._validate_names(section)

        document, original = self._load_for_write(path)
        if not document.add_section(section):
            self.logger.log_info(f"Section [{section}] déjà présente dans {path}.")
            return False
        self._commit(path, document, original)
        self.logger.log_info(f"Section [{section}] ajoutée à {path}.")
        return True

    def write_section(self, path: PathLike, section: IniSection) -> bool:
        """Écrit toutes les clés d'une section typée en un seul remplacement.

        Returns:
            True si le fichier a été modifié.
        """
        path = Path(path)
        name = section.section_name()
        values = section.to_dict()
        self._validate_names(name)
        for key, value in values.items():
            validate_key_name(key, self.policy)
            ValueValidator(value, self.policy).validate()

        document, original = self._load_for_write(path)
        document.add_section(name)
        for key, value in values.items():
            document.upsert(name, key, quote_value(value))
        changed = self._commit(path, document, original)

        if changed:
            self.logger.log_info(f"Section [{name}] écrite dans {path}.")
        else:
            self.logger.log_info(
                f"Fichier {path} déjà configuré avec les valeurs cibles."
            )
        return changed

    def set_array_value(
        self, path: PathLike, section: str, key: str, *values: str
    ) -> bool:
        """Écrit une liste de valeurs séparées par des virgules.

        Example:
            >>> manager.set_array_value(path, "dev", "HOSTS", "a", "b c")
            True
            >>> manager.get_array_value(path, "dev", "HOSTS")
            ['a', 'b c']
        """
        return self.write(path, section, key, encode_array(values))

    # Suppression

    def remove_section(
        self, path: PathLike, section: str, dry_run: bool = False
    ) -> bool:
        """Supprime une section, son en-tête et toutes ses lignes.

        Tous les blocs portant ce nom sont supprimés. Une section absente
        n'est pas une erreur.

        Args:
            path: Chemin du fichier INI.
            section: Nom de la section.
            dry_run: Calcule la suppression sans modifier le fichier.

        Returns:
            True si une section a été (ou serait) supprimée.

        Raises:
            IniFileNotFoundError: Si le fichier n'existe pas.
        """
        path = Path(path)
        self._validate_names(section)
        document = self._load(path)
        original = document.to_text()

        if not document.remove_section(section):
            self.logger.log_warning(
                f"Section [{section}] absente de {path}, rien à supprimer."
            )
            return False

        if dry_run:
            self.logger.log_info(
                f"[dry-run] La section [{section}] serait supprimée de {path}."
            )
            return True

        self._commit(path, document, original)
        self.logger.log_info(f"Section [{section}] supprimée de {path}.")
        return True

    def remove_key(
        self, path: PathLike, section: str, key: str, dry_run: bool = False
    ) -> bool:
        """Supprime une clé d'une section existante.

        Les autres lignes, lignes vides comprises, sont conservées.

        Args:
            path: Chemin du fichier INI.
            section: Nom de la section.
            key: Nom de la clé.
            dry_run: Calcule la suppression sans modifier le fichier.

        Returns:
            True si la clé a été (ou serait) supprimée, False si elle
            était absente.

        Raises:
            IniFileNotFoundError: Si le fichier n'existe pas.
            SectionNotFoundError: Si la section n'existe pas.
        """
        path = Path(path)
        self._validate_names(section, key)
        document = self._load(path)
        original = document.to_text()

        if not document.has_section(section):
            raise SectionNotFoundError(section, path)

        if not document.remove_key(section, key):
            self.logger.log_warning(
                f"Clé '{key}' absente de la section [{section}]."
            )
            return False

        if dry_run:
            self.logger.log_info(
                f"[dry-run] La clé '{key}' serait supprimée de [{section}]."
            )
            return True

        self._commit(path, document, original)
        self.logger.log_info(
            f"Clé '{key}' supprimée de la section [{section}] de {path}."
        )
        return True
