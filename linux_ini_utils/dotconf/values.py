"""Encodage des valeurs INI : guillemets, échappement et tableaux.

Une valeur contenant un blanc, un guillemet ou un caractère spécial du
shell est écrite entre guillemets doubles, les guillemets internes étant
échappés en \\". La lecture applique l'opération inverse.

Les tableaux sont stockés comme une valeur scalaire : éléments séparés
par des virgules, chaque élément contenant un blanc, une virgule ou un
guillemet étant lui-même entre guillemets.
"""

import re
from typing import Iterable

_NEEDS_QUOTING = re.compile(r"""[\s"'`&|<>;$]""")
_ELEMENT_NEEDS_QUOTING = re.compile(r'[\s,"]')
_QUOTED = re.compile(r'"(.*)"', re.DOTALL)


def escape_quotes(value: str) -> str:
    return value.replace('"', '\\"')


def unescape_quotes(value: str) -> str:
    return value.replace('\\"', '"')


def needs_quoting(value: str) -> bool:
    """Indique si une valeur doit être écrite entre guillemets."""
    return bool(_NEEDS_QUOTING.search(value))


def quote_value(value: str) -> str:
    """Prépare une valeur pour l'écriture.

    Args:
        value: Valeur brute fournie par l'appelant.

    Returns:
        La valeur telle qu'elle sera écrite après le '='.

    Example:
        >>> quote_value("hello world")
        '"hello world"'
        >>> quote_value("5432")
        '5432'
    """
    if needs_quoting(value):
        return f'"{escape_quotes(value)}"'
    return value


def unquote_value(raw_value: str) -> str:
    """Décode la valeur brute lue après le '=' d'une entrée."""
    value = raw_value.strip()
    match = _QUOTED.fullmatch(value)
    if match:
        value = unescape_quotes(match.group(1))
    return value


def encode_array(values: Iterable[str]) -> str:
    """Encode une liste de valeurs en une chaîne séparée par des virgules.

    Example:
        >>> encode_array(["a", "b c", 'say "hi"'])
        'a,"b c","say \\\\"hi\\\\""'
    """
    formatted = []
    for value in values:
        element = escape_quotes(str(value))
        if _ELEMENT_NEEDS_QUOTING.search(element):
            element = f'"{element}"'
        formatted.append(element)
    return ",".join(formatted)


def decode_array(text: str) -> list[str]:
    """Découpe une chaîne produite par encode_array.

    Les virgules situées entre guillemets ne séparent pas les éléments
    et la séquence \\" désigne un guillemet littéral. Une chaîne vide
    donne une liste vide.
    """
    if text == "":
        return []

    items: list[str] = []
    buffer: list[str] = []
    in_quotes = False
    index = 0
    while index < len(text):
        char = text[index]
        if char == "\\" and text[index + 1:index + 2] == '"':
            buffer.append('"')
            index += 2
            continue
        if char == '"':
            in_quotes = not in_quotes
        elif char == "," and not in_quotes:
            items.append("".join(buffer))
            buffer = []
        else:
            buffer.append(char)
        index += 1
    items.append("".join(buffer))
    return items
