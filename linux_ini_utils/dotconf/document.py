"""Modèle ligne à ligne d'un fichier INI.

Un fichier est représenté comme une suite ordonnée de lignes classées
(commentaire, vide, en-tête de section, entrée clé=valeur, autre).
Les sections ne sont pas stockées : ce sont des vues (SectionRange)
calculées en parcourant les en-têtes. Chaque ligne conserve son texte
brut et sa fin de ligne, de sorte que seules les lignes effectivement
modifiées diffèrent après sérialisation.

Pour une section présente plusieurs fois, le premier bloc fait foi pour
la lecture et l'écriture.
"""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

_COMMENT_PATTERN = re.compile(r"^\s*[#;]")
_SECTION_PATTERN = re.compile(r"^\s*\[(.+)\]\s*$")
_COMMENTED_SECTION_PATTERN = re.compile(r"^\s*\[([^\]]+)\]\s*[#;]")
_LINE_PATTERN = re.compile(r"[^\n]*\n|[^\n]+$")


class LineKind(Enum):
    """Nature d'une ligne de fichier INI."""

    COMMENT = "comment"
    BLANK = "blank"
    SECTION = "section"
    ENTRY = "entry"
    OTHER = "other"


@dataclass(frozen=True)
class IniLine:
    """Ligne classée d'un fichier INI.

    Attributes:
        raw: Texte brut, fin de ligne comprise.
        kind: Nature de la ligne.
        name: Nom de section (SECTION) ou clé (ENTRY).
        raw_value: Texte suivant le premier '=' (ENTRY uniquement).
    """

    raw: str
    kind: LineKind
    name: Optional[str] = None
    raw_value: Optional[str] = None

    @property
    def text(self) -> str:
        """Texte de la ligne sans fin de ligne."""
        return self.raw.rstrip("\r\n")

    @property
    def ending(self) -> str:
        """Fin de ligne ('\\n', '\\r\\n' ou '' en fin de fichier)."""
        return self.raw[len(self.text):]


@dataclass(frozen=True)
class SectionRange:
    """Bloc d'une section : en-tête à `start`, fin exclusive à `end`."""

    name: str
    start: int
    end: int

    @property
    def body(self) -> range:
        """Indices des lignes du corps de la section."""
        return range(self.start + 1, self.end)


def classify_line(raw: str) -> IniLine:
    """Classe une ligne brute.

    Args:
        raw: Ligne avec ou sans fin de ligne.

    Returns:
        IniLine correspondante.
    """
    text = raw.rstrip("\r\n")

    if not text.strip():
        return IniLine(raw, LineKind.BLANK)
    if _COMMENT_PATTERN.match(text):
        return IniLine(raw, LineKind.COMMENT)

    # [name] suivi d'un commentaire en fin de ligne
    match = _COMMENTED_SECTION_PATTERN.match(text) or _SECTION_PATTERN.match(
        text
    )
    if match:
        return IniLine(raw, LineKind.SECTION, name=match.group(1))

    if "=" in text:
        key, _, raw_value = text.partition("=")
        key = key.strip()
        if key:
            return IniLine(raw, LineKind.ENTRY, name=key, raw_value=raw_value)

    return IniLine(raw, LineKind.OTHER)


def split_lines(text: str) -> list[str]:
    """Découpe un texte sur '\\n' en conservant les fins de ligne."""
    return _LINE_PATTERN.findall(text)


class IniDocument:
    """Document INI transitoire construit pour une seule opération.

    Attributes:
        newline: Fin de ligne utilisée pour les lignes ajoutées.
    """

    def __init__(
        self, lines: Optional[list[IniLine]] = None, newline: str = "\n"
    ) -> None:
        self._lines: list[IniLine] = list(lines or [])
        self.newline = newline

    @classmethod
    def from_text(cls, text: str) -> "IniDocument":
        """Construit un document depuis le contenu d'un fichier.

        La fin de ligne du document est celle de la première ligne.
        """
        lines = [classify_line(raw) for raw in split_lines(text)]
        newline = "\n"
        if lines and lines[0].ending == "\r\n":
            newline = "\r\n"
        return cls(lines, newline)

    def to_text(self) -> str:
        """Sérialise le document."""
        return "".join(line.raw for line in self._lines)

    @property
    def lines(self) -> tuple[IniLine, ...]:
        return tuple(self._lines)

    def __len__(self) -> int:
        return len(self._lines)

    # Requêtes

    def section_ranges(self, name: Optional[str] = None) -> list[SectionRange]:
        """Retourne les blocs de section dans l'ordre du fichier.

        Args:
            name: Si fourni, seuls les blocs portant ce nom.
        """
        headers = [
            (index, line.name)
            for index, line in enumerate(self._lines)
            if line.kind is LineKind.SECTION
        ]
        ranges = []
        for position, (start, header_name) in enumerate(headers):
            if position + 1 < len(headers):
                end = headers[position + 1][0]
            else:
                end = len(self._lines)
            if name is None or header_name == name:
                ranges.append(SectionRange(header_name, start, end))
        return ranges

    def find_section(self, name: str) -> Optional[SectionRange]:
        """Retourne le premier bloc nommé `name`, ou None."""
        for index, line in enumerate(self._lines):
            if line.kind is LineKind.SECTION and line.name == name:
                end = index + 1
                while (
                    end < len(self._lines)
                    and self._lines[end].kind is not LineKind.SECTION
                ):
                    end += 1
                return SectionRange(name, index, end)
        return None

    def has_section(self, name: str) -> bool:
        return self.find_section(name) is not None

    def section_names(self) -> list[str]:
        """Noms des en-têtes dans l'ordre, doublons compris."""
        return [
            line.name for line in self._lines if line.kind is LineKind.SECTION
        ]

    def entries(self, block: SectionRange) -> Iterator[tuple[int, IniLine]]:
        """Itère sur les entrées (index, ligne) d'un bloc."""
        for index in block.body:
            line = self._lines[index]
            if line.kind is LineKind.ENTRY:
                yield index, line

    def lookup(self, section: str, key: str) -> Optional[str]:
        """Valeur brute de la première entrée `key` du premier bloc."""
        block = self.find_section(section)
        if block is None:
            return None
        for _, line in self.entries(block):
            if line.name == key:
                return line.raw_value
        return None

    def keys(self, section: str) -> list[str]:
        """Clés du premier bloc `section`, doublons compris."""
        block = self.find_section(section)
        if block is None:
            return []
        return [line.name for _, line in self.entries(block)]

    # Mutations

    def _terminate_last_line(self) -> None:
        """Ajoute une fin de ligne à la dernière ligne si elle n'en a pas."""
        if self._lines and not self._lines[-1].ending:
            self._lines[-1] = classify_line(self._lines[-1].raw + self.newline)

    def add_section(self, name: str) -> bool:
        """Ajoute `[name]` en fin de document s'il est absent.

        Une ligne vide de séparation précède l'en-tête si le document
        n'est pas vide et ne se termine pas déjà par une ligne vide.

        Returns:
            True si la section a été ajoutée.
        """
        if self.has_section(name):
            return False
        self._terminate_last_line()
        if self._lines and self._lines[-1].kind is not LineKind.BLANK:
            self._lines.append(classify_line(self.newline))
        self._lines.append(classify_line(f"[{name}]{self.newline}"))
        return True

    def upsert(self, section: str, key: str, rendered_value: str) -> bool:
        """Écrit `key=rendered_value` dans le premier bloc `section`.

        La première occurrence de la clé est remplacée sur place et les
        suivantes du même bloc sont supprimées. Une clé absente est
        insérée après la dernière ligne non vide du bloc.

        Args:
            section: Nom de section (créée si absente).
            key: Nom de clé.
            rendered_value: Valeur déjà mise entre guillemets si besoin.

        Returns:
            True si le document a changé.
        """
        changed = self.add_section(section)
        block = self.find_section(section)
        matches = [index for index, line in self.entries(block)
                   if line.name == key]

        if matches:
            first, duplicates = matches[0], matches[1:]
            old = self._lines[first]
            replacement = classify_line(f"{key}={rendered_value}{old.ending}")
            if replacement.raw != old.raw:
                self._lines[first] = replacement
                changed = True
            for index in reversed(duplicates):
                del self._lines[index]
                changed = True
            return changed

        insert_at = block.end
        while (
            insert_at > block.start + 1
            and self._lines[insert_at - 1].kind is LineKind.BLANK
        ):
            insert_at -= 1
        if insert_at == len(self._lines):
            self._terminate_last_line()
        self._lines.insert(
            insert_at, classify_line(f"{key}={rendered_value}{self.newline}")
        )
        return True

    def remove_section(self, name: str) -> bool:
        """Supprime tous les blocs nommés `name`.

        Quand le bloc supprimé terminait le fichier, les lignes vides
        qui le précédaient sont retirées.

        Returns:
            True si au moins un bloc a été supprimé.
        """
        blocks = self.section_ranges(name)
        for block in reversed(blocks):
            at_end = block.end >= len(self._lines)
            del self._lines[block.start:block.end]
            if at_end:
                while self._lines and self._lines[-1].kind is LineKind.BLANK:
                    self._lines.pop()
        return bool(blocks)

    def remove_key(self, section: str, key: str) -> bool:
        """Supprime les entrées `key` de tous les blocs `section`.

        Returns:
            True si au moins une ligne a été supprimée.
        """
        doomed = [
            index
            for block in self.section_ranges(section)
            for index, line in self.entries(block)
            if line.name == key
        ]
        for index in reversed(doomed):
            del self._lines[index]
        return bool(doomed)
