"""Case conversion helpers used by the inflector.

These are deliberately dumb string transforms: no pluralization happens
here.  ``snake`` and ``studly`` follow the Laravel/CakePHP conventions the
table-name helpers (tableize, classify) were designed around.
"""

import re

_WHITESPACE = re.compile(r"\s+")
_ALL_LOWER = re.compile(r"[a-z]+")
_BEFORE_UPPER = re.compile(r"(.)(?=[A-Z])")
_WORD_START = re.compile(r"(^|\s)(\S)")
_NON_PRINTABLE = re.compile(r"[^\x20-\x7E]")


def ucfirst(value):
    return value[:1].upper() + value[1:]


def lcfirst(value):
    return value[:1].lower() + value[1:]


def ucwords(value):
    """Upper-case the first character of every whitespace-separated word."""
    return _WORD_START.sub(lambda m: m.group(1) + m.group(2).upper(), value)


def studly(value):
    """``big_red-dog`` -> ``BigRedDog``."""
    words = _WHITESPACE.split(value.replace("-", " ").replace("_", " "))
    return "".join(ucfirst(w) for w in words)


pascal = studly


def camel(value):
    """``big_red_dog`` -> ``bigRedDog``."""
    return lcfirst(studly(value))


def snake(value, delimiter="_"):
    """``BigRedDog`` -> ``big_red_dog`` (or any other *delimiter*).

    Strings made only of lower-case ASCII letters are returned as they are.
    Spaces are removed after capitalising the word that follows them, so
    ``"big dog"`` becomes ``big_dog`` too.
    """
    if _ALL_LOWER.fullmatch(value):
        return value
    value = _WHITESPACE.sub("", ucwords(value))
    return _BEFORE_UPPER.sub(lambda m: m.group(1) + delimiter, value).lower()


def title(value):
    """Capitalise each whitespace-separated word, lower-casing the rest."""
    return re.sub(r"\S+", lambda m: ucfirst(m.group(0).lower()), value)


def to_ascii(value, table):
    """Fold *value* to printable ASCII.

    Characters found in *table* are replaced by their spelling there;
    anything still outside the printable ASCII range is dropped.
    """
    for char, replacement in table.items():
        value = value.replace(char, replacement)
    return _NON_PRINTABLE.sub("", value)


def slug(value, table, separator="-", dictionary=None):
    """URL-friendly slug: ``"Hello @ World"`` -> ``hello-at-world``."""
    if dictionary is None:
        dictionary = {"@": "at"}
    sep = re.escape(separator)
    flip = "_" if separator == "-" else "-"

    value = to_ascii(value, table)
    value = re.sub(f"[{re.escape(flip)}]+", separator, value)
    for key, word in dictionary.items():
        value = value.replace(key, f"{separator}{word}{separator}")
    value = re.sub(rf"[^{sep}\w\s]+", "", value.lower())
    value = re.sub(rf"[{sep}\s]+", separator, value)
    return value.strip(separator)
