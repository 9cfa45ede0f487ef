"""Rule-cascade noun inflection (plural/singular) with per-language rules.

Usage:
    >>> from inflector import pluralize, singularize, tableize
    >>> pluralize("person"), singularize("children"), tableize("UserProfile")
    ('people', 'child', 'user_profiles')

The module-level functions share one process-wide :class:`Inflector`.  Code
that needs isolated rule tables (tests, multi-tenant services) should create
its own ``Inflector()`` instead.
"""

from .inflection import InflectionCache, Inflector
from .tables import (
    DEFAULT_LANGUAGE,
    InflectorError,
    InvalidRuleKindError,
    LanguageTable,
    Rule,
    RuleKind,
    RuleList,
    RulePatternError,
    RuleStore,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "InflectionCache",
    "Inflector",
    "InflectorError",
    "InvalidRuleKindError",
    "LanguageTable",
    "Rule",
    "RuleKind",
    "RuleList",
    "RulePatternError",
    "RuleStore",
    "add_language_rules",
    "camelize",
    "classify",
    "dasherize",
    "delimit",
    "get_language",
    "humanize",
    "pascalize",
    "plural",
    "pluralize",
    "reset",
    "rules",
    "set_language",
    "singularize",
    "slug",
    "tableize",
    "transliterate",
    "underscore",
    "variable",
]

# ── Process-wide default inflector ──────────────────────────────────────────

default_inflector = Inflector()

set_language = default_inflector.set_language
get_language = default_inflector.get_language
add_language_rules = default_inflector.add_language_rules
rules = default_inflector.rules
reset = default_inflector.reset

pluralize = default_inflector.pluralize
singularize = default_inflector.singularize
plural = default_inflector.plural

camelize = default_inflector.camelize
pascalize = default_inflector.pascalize
underscore = default_inflector.underscore
dasherize = default_inflector.dasherize
delimit = default_inflector.delimit
humanize = default_inflector.humanize
tableize = default_inflector.tableize
classify = default_inflector.classify
variable = default_inflector.variable
transliterate = default_inflector.transliterate
slug = default_inflector.slug
