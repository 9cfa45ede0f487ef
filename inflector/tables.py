"""Rule tables for noun inflection.

A language table holds four collections: an ordered plural cascade, an
ordered singular cascade, an irregular word map and a list of invariant
(uninflected) word patterns.  The baseline table and the French table are
read from ``inflection_rules.yaml``; the transliteration map used for ASCII
folding comes from ``transliteration.yaml``.  Both files live next to this
module.
"""

import copy
import logging
import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

DEFAULT_LANGUAGE = "en"

_RULES_PATH = Path(__file__).with_name("inflection_rules.yaml")
_TRANSLITERATION_PATH = Path(__file__).with_name("transliteration.yaml")


# ── Errors ──────────────────────────────────────────────────────────────────


class InflectorError(Exception):
    """Base class for every error raised by the inflector."""


class InvalidRuleKindError(InflectorError, ValueError):
    """Raised when a rule mutation names a kind that does not exist."""


class RulePatternError(InflectorError, ValueError):
    """Raised when a custom rule does not compile.

    The offending rule set is rejected as a whole; the table it was meant
    for is left untouched.
    """


# ── Rule kinds ──────────────────────────────────────────────────────────────


class RuleKind(Enum):
    PLURAL = "plural"
    SINGULAR = "singular"
    IRREGULAR = "irregular"
    UNINFLECTED = "uninflected"
    TRANSLITERATION = "transliteration"

    @classmethod
    def coerce(cls, kind, allowed=None):
        """Return *kind* as a member of *allowed* (all kinds by default).

        Accepts either a member or its string value, e.g. ``"plural"``.
        """
        allowed = tuple(allowed or cls)
        member = kind
        if isinstance(kind, str):
            try:
                member = cls(kind.lower())
            except ValueError:
                member = None
        if member not in allowed:
            names = ", ".join(k.value for k in allowed)
            raise InvalidRuleKindError(
                f"Unknown inflection kind {kind!r}; expected one of: {names}"
            )
        return member


CASCADE_KINDS = (RuleKind.PLURAL, RuleKind.SINGULAR)
LANGUAGE_KINDS = CASCADE_KINDS + (RuleKind.IRREGULAR, RuleKind.UNINFLECTED)


# ── Rules and cascades ──────────────────────────────────────────────────────


def _check_template(pattern, replacement):
    """Expand *replacement* against an empty match with *pattern*'s groups.

    Surfaces bad group references and bad escapes at registration time
    rather than in the middle of a cascade.
    """
    names = {index: name for name, index in pattern.groupindex.items()}
    groups = "".join(
        f"(?P<{names[i]}>)" if i in names else "()"
        for i in range(1, pattern.groups + 1)
    )
    re.compile(groups).fullmatch("").expand(replacement)


_DELIMITED = re.compile(r"/(.+)/([A-Za-z]*)", re.DOTALL)
_DELIMITER_FLAGS = {
    "i": re.IGNORECASE,
    "m": re.MULTILINE,
    "s": re.DOTALL,
    "x": re.VERBOSE,
    "u": 0,
}


def _split_delimiters(pattern):
    """Return ``(body, flags)`` for a string pattern."""
    pattern = str(pattern)
    match = _DELIMITED.fullmatch(pattern)
    if match is None:
        return pattern, re.IGNORECASE
    body, modifiers = match.groups()
    flags = 0
    for modifier in modifiers:
        if modifier not in _DELIMITER_FLAGS:
            raise re.error(f"unknown pattern modifier {modifier!r}")
        flags |= _DELIMITER_FLAGS[modifier]
    return body, flags


@dataclass(frozen=True)
class Rule:
    """A compiled pattern and the ``\\1``-style template that replaces it."""

    pattern: re.Pattern
    replacement: str

    @classmethod
    def compile(cls, pattern, replacement):
        """Build a rule, compiling string patterns case-insensitively.

        A pattern that is already compiled keeps its own flags, which is how
        callers ask for a case-sensitive rule.  A string written with
        delimiters, ``/^foo$/i``, is compiled with exactly the flags after
        the closing slash.
        """
        try:
            if not isinstance(pattern, re.Pattern):
                pattern = re.compile(*_split_delimiters(pattern))
            _check_template(pattern, replacement)
        except (re.error, IndexError) as exc:
            raise RulePatternError(
                f"Invalid inflection rule {pattern!r} -> {replacement!r}: {exc}"
            ) from exc
        return cls(pattern, replacement)

    @property
    def key(self):
        return (self.pattern.pattern, self.pattern.flags)

    def apply(self, word):
        """Return the rewritten word, or None if the pattern does not match."""
        if self.pattern.search(word) is None:
            return None
        return self.pattern.sub(self.replacement, word)


class RuleList:
    """Ordered rule cascade.

    Order is what matters: the first matching rule wins.  Merges return a
    new list, so a cascade being iterated is never changed underneath.
    """

    def __init__(self, rules=()):
        self._rules = tuple(rules)

    def __iter__(self):
        return iter(self._rules)

    def __len__(self):
        return len(self._rules)

    def __eq__(self, other):
        if not isinstance(other, RuleList):
            return NotImplemented
        return [r.key for r in self] == [r.key for r in other]

    def __repr__(self):
        return f"RuleList({[r.pattern.pattern for r in self]!r})"

    def prepend(self, rules):
        """New rules first, followed by the old ones they do not redefine."""
        rules = list(rules)
        redefined = {r.key for r in rules}
        return RuleList(rules + [r for r in self._rules if r.key not in redefined])

    def extend(self, rules):
        """Old rules keep their place (taking any new replacement); new ones go last."""
        merged = {r.key: r for r in self._rules}
        for rule in rules:
            merged[rule.key] = rule
        return RuleList(merged.values())


def compile_rules(rules):
    """Turn ``{pattern: replacement}`` or an iterable of pairs into a RuleList.

    Duplicate patterns collapse onto the first position with the last
    replacement, as they would in a dict literal.
    """
    if isinstance(rules, Mapping):
        rules = rules.items()
    compiled = {}
    for item in rules:
        rule = item if isinstance(item, Rule) else Rule.compile(*item)
        compiled[rule.key] = rule
    return RuleList(compiled.values())


def uninflected_regex(patterns):
    """Compile invariant-word patterns into the one regex used for lookups.

    The alternation must match the whole word (a trailing newline aside).
    Returns None for an empty list.
    """
    patterns = list(patterns)
    if not patterns:
        return None
    joined = "(?:" + "|".join(patterns) + ")$"
    try:
        return re.compile(joined, re.IGNORECASE)
    except re.error as exc:
        raise RulePatternError(
            f"Invalid uninflected pattern(s) {patterns!r}: {exc}"
        ) from exc


def check_patterns(patterns):
    """Validate invariant-word patterns and return them as a list."""
    if isinstance(patterns, str):
        patterns = [patterns]
    checked = []
    for pattern in patterns:
        pattern = str(pattern)
        uninflected_regex([pattern])
        checked.append(pattern)
    return checked


def _word_map(words):
    return {str(k): str(v) for k, v in dict(words).items()}


def _normalize(kind, rules):
    if kind in CASCADE_KINDS:
        return compile_rules(rules)
    if kind is RuleKind.UNINFLECTED:
        return check_patterns(rules)
    return _word_map(rules)


# ── Language tables ─────────────────────────────────────────────────────────


@dataclass
class LanguageTable:
    plural: RuleList = field(default_factory=RuleList)
    singular: RuleList = field(default_factory=RuleList)
    irregular: dict = field(default_factory=dict)
    uninflected: list = field(default_factory=list)
    # Appended (plural) or stripped (singular) when no rule matches.
    default_suffix: str = ""
    suffix_exceptions: frozenset = frozenset()

    def get(self, kind):
        return getattr(self, kind.value)

    def set(self, kind, value):
        setattr(self, kind.value, value)

    @classmethod
    def from_dict(cls, raw):
        """Build a table from one ``languages:`` entry of the rules file."""
        raw = raw or {}
        return cls(
            plural=compile_rules(raw.get("plural") or ()),
            singular=compile_rules(raw.get("singular") or ()),
            irregular=_word_map(raw.get("irregular") or {}),
            uninflected=check_patterns(raw.get("uninflected") or ()),
            default_suffix=str(raw.get("default_suffix") or ""),
            suffix_exceptions=frozenset(
                str(w).lower() for w in raw.get("suffix_exceptions") or ()
            ),
        )


def _load_yaml(path):
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(
            f"Inflection data not found at {path}. "
            "Pass an existing YAML file or use the bundled defaults."
        )
    with open(path, encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


class RuleStore:
    """Baseline table, per-language overrides and the transliteration map."""

    def __init__(self, default=None, languages=None, transliteration=None,
                 default_language=DEFAULT_LANGUAGE):
        self.default_language = default_language
        self._default = default or LanguageTable()
        self._languages = dict(languages or {})
        self.transliteration = dict(transliteration or {})

    @classmethod
    def from_yaml(cls, rules_path=None, transliteration_path=None):
        """Load the rule tables from YAML.

        The language named by the file's ``default:`` key becomes the
        baseline table; every other entry becomes a language override.
        """
        rules_path = rules_path or _RULES_PATH
        raw = _load_yaml(rules_path)
        default_language = str(raw.get("default") or DEFAULT_LANGUAGE)
        languages = {
            str(code): LanguageTable.from_dict(entry)
            for code, entry in (raw.get("languages") or {}).items()
        }
        default = languages.pop(default_language, LanguageTable())
        transliteration = _word_map(
            _load_yaml(transliteration_path or _TRANSLITERATION_PATH)
        )
        logger.info(
            "Loaded inflection rules from %s (baseline %r, %d override(s))",
            rules_path, default_language, len(languages),
        )
        return cls(default, languages, transliteration, default_language)

    def default_table(self):
        return self._default

    def table(self, language):
        """The override table for *language*; empty if none was registered."""
        return self._languages.get(language) or LanguageTable()

    def languages(self):
        return sorted(self._languages)

    def copy(self):
        return copy.deepcopy(self)

    # ── Mutation ────────────────────────────────────────────────────────

    def merge(self, language, kind, rules, reset=False):
        """Add *rules* to the *language* override table.

        Without *reset*, cascade rules that redefine an existing pattern
        replace it in place and new ones are appended; irregular words
        overwrite by key; uninflected patterns are appended.
        """
        kind = RuleKind.coerce(kind, LANGUAGE_KINDS)
        incoming = _normalize(kind, rules)
        current = self.table(language).get(kind)
        if reset:
            merged = incoming
        elif kind in CASCADE_KINDS:
            merged = current.extend(incoming)
        elif kind is RuleKind.IRREGULAR:
            merged = {**current, **incoming}
        else:
            merged = current + incoming
        if kind is RuleKind.UNINFLECTED:
            uninflected_regex(
                self._combine(kind, language, merged, self._default.uninflected)
            )
        table = self._languages.setdefault(language, LanguageTable())
        table.set(kind, merged)
        logger.debug("Merged %d %s rule(s) into %r (reset=%s)",
                     len(incoming), kind.value, language, reset)

    def merge_default(self, kind, rules, reset=False):
        """Add *rules* to the baseline table (or the transliteration map).

        New cascade rules and map entries are placed ahead of the existing
        ones, so custom rules win.  Uninflected patterns are always
        prepended, even when *reset* is set.
        """
        kind = RuleKind.coerce(kind)
        incoming = _normalize(kind, rules)
        if kind is RuleKind.TRANSLITERATION:
            current = self.transliteration
        else:
            current = self._default.get(kind)

        if kind is RuleKind.UNINFLECTED:
            merged = incoming + current
            for language in [self.default_language, *self._languages]:
                local = self.table(language).uninflected
                uninflected_regex(self._combine(kind, language, local, merged))
        elif reset:
            merged = incoming
        elif kind in CASCADE_KINDS:
            merged = current.prepend(incoming)
        else:
            merged = dict(incoming)
            for key, value in current.items():
                merged.setdefault(key, value)

        if kind is RuleKind.TRANSLITERATION:
            self.transliteration = merged
        else:
            self._default.set(kind, merged)
        logger.debug("Merged %d default %s rule(s) (reset=%s)",
                     len(incoming), kind.value, reset)

    # ── Resolution ──────────────────────────────────────────────────────

    def resolve(self, kind, language):
        """Effective collection of *kind* for *language*.

        Cascades are exclusive: a non-empty language cascade replaces the
        baseline.  Irregular and uninflected lists are additive: any
        language other than the baseline one sees the baseline entries
        extended by its own.
        """
        kind = RuleKind.coerce(kind, LANGUAGE_KINDS)
        return self._combine(
            kind, language, self.table(language).get(kind), self._default.get(kind)
        )

    def _combine(self, kind, language, local, baseline):
        if kind in CASCADE_KINDS:
            return local if len(local) else baseline

        if language != self.default_language and baseline:
            if kind is RuleKind.IRREGULAR:
                return {**baseline, **local}
            return baseline + local

        chosen = local if local else baseline
        return dict(chosen) if kind is RuleKind.IRREGULAR else list(chosen)
