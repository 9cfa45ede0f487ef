"""Noun inflection by irregular lookup, invariant check and rule cascade.

Pluralize and singularize run the same steps, mirrored:

1. irregular words, matched at the end of the input after a word boundary
   or underscore (so ``sales_person`` -> ``sales_people``),
2. invariant words, matched against the whole input,
3. the ordered regex cascade of the active language (first match wins),
4. the language's default suffix, if it has one.

Every result is memoised per (operation, language, word) and the whole
cache is dropped whenever a rule table or the active language changes.
"""

import copy
import logging
import re
import threading
from collections import OrderedDict
from collections.abc import Sized

from . import text
from .tables import RuleKind, RuleStore, uninflected_regex

logger = logging.getLogger(__name__)


def _preserve_case(form, replacement):
    """Carry the caller's first letter over to *replacement*.

    When the two words do not even share a first letter (``oeil`` ->
    ``yeux``) the replacement is used as written.
    """
    if not form or not replacement:
        return replacement
    if replacement[0].lower() != form[0].lower():
        return replacement
    return form[0] + replacement[1:]


class InflectionCache:
    """Memo table for computed strings.

    Unbounded unless *maxsize* is given, in which case the least recently
    used entry is evicted first.
    """

    def __init__(self, maxsize=None):
        self.maxsize = maxsize
        self._entries = OrderedDict()

    def __len__(self):
        return len(self._entries)

    def get(self, key):
        value = self._entries.get(key)
        if value is not None and self.maxsize is not None:
            self._entries.move_to_end(key)
        return value

    def put(self, key, value):
        self._entries[key] = value
        if self.maxsize is not None:
            while len(self._entries) > self.maxsize:
                self._entries.popitem(last=False)
        return value

    def clear(self):
        self._entries.clear()


class Inflector:
    """Pluralizes and singularizes nouns for a configurable language.

    Each instance owns its rule tables, its active language and its cache,
    and serializes access to them with a re-entrant lock.  ``reset()``
    brings all three back to how they were right after construction.
    """

    def __init__(self, rules_path=None, transliteration_path=None,
                 language=None, cache_size=None):
        self._store = RuleStore.from_yaml(rules_path, transliteration_path)
        self._language = language or self._store.default_language
        self._initial = (self._store.copy(), self._language)
        self._cache = InflectionCache(cache_size)
        self._patterns = {}
        self._lock = threading.RLock()

    # ── Rule tables (read-only copies) ──────────────────────────────────

    def default_table(self):
        """A copy of the baseline LanguageTable."""
        with self._lock:
            return copy.deepcopy(self._store.default_table())

    def table(self, language):
        """A copy of the override table registered for *language*."""
        with self._lock:
            return copy.deepcopy(self._store.table(language))

    def languages(self):
        with self._lock:
            return self._store.languages()

    # ── Language ────────────────────────────────────────────────────────

    def set_language(self, language):
        with self._lock:
            self._language = language
            self._invalidate()
            logger.debug("Active inflection language set to %r", language)

    def get_language(self):
        with self._lock:
            return self._language

    # ── Rule mutation ───────────────────────────────────────────────────

    def add_language_rules(self, language, kind, rules, reset=False):
        """Add rules for one language.

        *kind* is ``"plural"``, ``"singular"``, ``"irregular"`` or
        ``"uninflected"`` (or the matching RuleKind).  Without *reset*,
        the rules are merged into what the language already has.
        """
        with self._lock:
            self._store.merge(language, kind, rules, reset)
            self._invalidate()

    def rules(self, kind, rules, reset=False):
        """Add rules to the baseline tables.

        New plural/singular rules and irregular/transliteration entries are
        consulted before the existing ones::

            inflector.rules("plural", {r"^(inflect)or$": r"\\1ables"})
            inflector.rules("irregular", {"red": "redlings"})
            inflector.rules("uninflected", ["dontinflectme"])
            inflector.rules("transliteration", {"å": "aa"})
        """
        with self._lock:
            self._store.merge_default(kind, rules, reset)
            self._invalidate()

    def reset(self):
        """Restore the construction-time rule tables and language."""
        with self._lock:
            store, language = self._initial
            self._store = store.copy()
            self._language = language
            self._invalidate()

    def _invalidate(self):
        self._cache.clear()
        self._patterns.clear()
        logger.debug("Inflection cache cleared")

    # ── Inflection ──────────────────────────────────────────────────────

    def pluralize(self, word):
        """Return the plural of *word* in the active language."""
        with self._lock:
            return self._memoize(
                ("pluralize", self._language, word),
                lambda: self._inflect(word, RuleKind.PLURAL),
            )

    def singularize(self, word):
        """Return the singular of *word* in the active language."""
        with self._lock:
            return self._memoize(
                ("singularize", self._language, word),
                lambda: self._inflect(word, RuleKind.SINGULAR),
            )

    def plural(self, word, count=2, prepend_count=False):
        """Pluralize *word* only when *count* (a number or a collection) is 2+.

        >>> Inflector().plural("apple", 3, prepend_count=True)
        '3 apples'
        """
        if isinstance(count, Sized):
            count = len(count)
        if count < 2:
            return word
        prefix = f"{count} " if prepend_count else ""
        return prefix + self.pluralize(word)

    def _memoize(self, key, compute):
        with self._lock:
            value = self._cache.get(key)
            if value is None:
                value = self._cache.put(key, compute())
            return value

    def _inflect(self, word, kind):
        pattern, lookup = self._irregular_index(kind)
        if pattern is not None:
            match = pattern.search(word)
            if match:
                prefix, form = match.groups()
                replacement = lookup.get(form.lower())
                if replacement is not None:
                    return prefix + _preserve_case(form, replacement)

        uninflected = self._uninflected_pattern()
        if uninflected is not None and uninflected.match(word):
            return word

        for rule in self._store.resolve(kind, self._language):
            result = rule.apply(word)
            if result is not None:
                return result

        return self._fallback(word, kind)

    def _fallback(self, word, kind):
        table = self._store.table(self._language)
        suffix = table.default_suffix
        if not suffix:
            return word
        if kind is RuleKind.PLURAL:
            return word + suffix
        lowered = word.lower()
        if lowered.endswith(suffix.lower()) and lowered not in table.suffix_exceptions:
            return word[:-len(suffix)]
        return word

    def _irregular_index(self, kind):
        """Alternation regex over irregular forms and the lookup behind it.

        For pluralization the regex matches singular forms and the lookup
        yields plurals; for singularization it is the other way round.
        Built once per language.
        """
        key = ("irregular", kind, self._language)
        if key not in self._patterns:
            irregular = self._store.resolve(RuleKind.IRREGULAR, self._language)
            lookup = {}
            if kind is RuleKind.PLURAL:
                for singular, plural in irregular.items():
                    lookup[singular.lower()] = plural
            else:
                for singular, plural in irregular.items():
                    if plural.lower() in lookup:
                        logger.debug(
                            "Irregular plural %r is shared by %r and %r; using %r",
                            plural, lookup[plural.lower()], singular,
                            lookup[plural.lower()],
                        )
                        continue
                    lookup[plural.lower()] = singular
            pattern = None
            if lookup:
                forms = "|".join(re.escape(form) for form in lookup)
                pattern = re.compile(rf"(.*?(?:\b|_))({forms})$", re.IGNORECASE)
            self._patterns[key] = (pattern, lookup)
        return self._patterns[key]

    def _uninflected_pattern(self):
        key = ("uninflected", self._language)
        if key not in self._patterns:
            words = self._store.resolve(RuleKind.UNINFLECTED, self._language)
            self._patterns[key] = uninflected_regex(words)
        return self._patterns[key]

    # ── Case-derived operations ─────────────────────────────────────────

    def camelize(self, string, delimiter="_"):
        """``big_red_dog`` -> ``bigRedDog``."""
        return self._memoize(
            ("camelize", delimiter, string),
            lambda: text.camel(string.replace(delimiter, "_") if delimiter else string),
        )

    def pascalize(self, string):
        """``big_red_dog`` -> ``BigRedDog``."""
        return self._memoize(("pascalize", string), lambda: text.pascal(string))

    def underscore(self, string):
        """``BigRedDog`` -> ``big_red_dog``."""
        return self._memoize(("underscore", string), lambda: text.snake(string, "_"))

    def dasherize(self, string):
        """``BigRedDog`` -> ``big-red-dog``."""
        return self._memoize(
            ("dasherize", string), lambda: self.underscore(string).replace("_", "-")
        )

    def delimit(self, string, delimiter="_"):
        return self._memoize(
            ("delimit", delimiter, string), lambda: text.snake(string, delimiter)
        )

    def humanize(self, string, delimiter="_"):
        """``employee_salary`` -> ``Employee Salary``."""

        def compute():
            converted = string.replace(delimiter, "_") if delimiter else string
            return text.title(text.snake(converted).replace("_", " "))

        return self._memoize(("humanize", delimiter, string), compute)

    def tableize(self, class_name):
        """Table name for a model class: ``Person`` -> ``people``."""
        return self._memoize(
            ("tableize", class_name),
            lambda: self.pluralize(self.underscore(class_name)),
        )

    def classify(self, table_name):
        """Model class for a table name: ``people`` -> ``Person``."""
        return self._memoize(
            ("classify", table_name),
            lambda: self.pascalize(self.singularize(table_name)),
        )

    def variable(self, string):
        """``some_field`` -> ``someField``."""
        return self._memoize(
            ("variable", string), lambda: text.lcfirst(text.camel(string))
        )

    def transliterate(self, string):
        """Fold accented characters to ASCII using the transliteration map."""
        with self._lock:
            return text.to_ascii(string, self._store.transliteration)

    def slug(self, string, separator="-"):
        with self._lock:
            return text.slug(string, self._store.transliteration, separator)
