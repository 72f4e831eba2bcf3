#!/bin/env python3

"""Usage examples for listphrase."""

import logging
import sys
import tempfile
from pathlib import Path

from listphrase import JinjaPhrase, ListPhrase, PhraseError, ResourceStore, from_resources

USAGE = """
USAGE: examples.py <test_id> [<extra1>, [...]]")

E.g.:
    examples.py 01
    examples.py 03 one two three four
"""

ENGLISH = ListPhrase("{a} and {b}", "{a}, {b}", "{a}, and {b}")


def example_01() -> None:
    """Show lists of different sizes joined with the english patterns."""
    items = ["apples", "pears", "figs", "plums"]
    for size in range(len(items) + 1):
        print(repr(ENGLISH.format(items[:size])))


def example_02() -> None:
    """Use the same pattern for all the positions."""
    phrase = ListPhrase.from_pattern("{a} / {b}")
    print(phrase.format(["home", "user", "docs"]))


def example_03(*items: str) -> None:
    """Join the items given in the command line."""
    print(ENGLISH.format(items))


def example_04() -> None:
    """Convert the items with a formatter."""
    print(ENGLISH.format([1, 2, 3], lambda n: f"0x{n:02x}"))
    print(ENGLISH.format([None, "b", None]))
    print(ENGLISH.format([None, "b", None], lambda x: x or "nothing"))


def example_05() -> None:
    """Get an error for an invalid pattern."""
    ListPhrase("{a} and {b}", "{a}, {b}", "{one}{two}")


def example_06() -> None:
    """Load the patterns from a string table."""
    with tempfile.TemporaryDirectory() as tmpdir:
        filepath = Path(tmpdir) / "es.json"
        filepath.write_text(
            '{"locale": "es", "strings": {"dos": "{a} y {b}", "coma": "{a}, {b}"}}'
        )
        store = ResourceStore.from_file(filepath)
    phrase = from_resources(store, "dos", "coma", "dos")
    print(phrase.format(["uno", "dos", "tres"]))


def example_07() -> None:
    """Use Jinja patterns, with filters."""
    phrase = ListPhrase(
        JinjaPhrase("{{ a }} and {{ b | upper }}"),
        JinjaPhrase("{{ a }}, {{ b }}"),
        JinjaPhrase("{{ a }}, and {{ b | upper }}"),
    )
    print(phrase.format(["one", "two", "three"]))


# -- end of test cases

if len(sys.argv) < 2:  # noqa: PLR2004, magic value
    print(USAGE)
    sys.exit()

name = f"example_{int(sys.argv[1]):02d}"
func = globals().get(name)
if func is None:
    print(f"ERROR: function {name!r} not found")
    sys.exit()

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
try:
    func(*sys.argv[2:])
except PhraseError as err:
    print(f"ERROR: {err}", file=sys.stderr)
    if err.details:
        print(f"Details: {err.details}", file=sys.stderr)
    if err.resolution:
        print(f"Recommended resolution: {err.resolution}", file=sys.stderr)
    sys.exit(1)
