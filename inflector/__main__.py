"""Command line front end for the inflector.

Usage:
    python -m inflector pluralize person child octopus
    python -m inflector --lang fr singularize chevaux
    echo UserProfile | python -m inflector tableize

With no words on the command line, words are read from stdin, one per line.
"""

import argparse
import logging
import sys

from .inflection import Inflector

OPERATIONS = (
    "pluralize",
    "singularize",
    "camelize",
    "pascalize",
    "underscore",
    "dasherize",
    "humanize",
    "delimit",
    "tableize",
    "classify",
    "variable",
    "transliterate",
    "slug",
)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        prog="inflector",
        description="Pluralize, singularize and case-convert words.",
    )
    parser.add_argument("operation", choices=OPERATIONS)
    parser.add_argument("words", nargs="*", help="Words to convert (default: stdin)")
    parser.add_argument("--lang", help="Language code to inflect in (default: en)")
    parser.add_argument("--rules", help="Alternative inflection rules YAML file")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log rule loading and cache activity"
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        inflector = Inflector(rules_path=args.rules, language=args.lang)
    except FileNotFoundError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(1)

    operation = getattr(inflector, args.operation)
    words = args.words or [line.strip() for line in sys.stdin if line.strip()]
    for word in words:
        print(operation(word))


if __name__ == "__main__":
    main()
