# Copyright 2026 Canonical Ltd.
#
# This program is free software; you can redistribute it and/or
# modify it under the terms of the GNU Lesser General Public
# License version 3 as published by the Free Software Foundation.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the GNU
# Lesser General Public License for more details.
#
# You should have received a copy of the GNU Lesser General Public License
# along with this program; if not, write to the Free Software Foundation,
# Inc., 51 Franklin Street, Fifth Floor, Boston, MA  02110-1301, USA.

"""Format a list in a size-dependent way.

List patterns are templates that define how to join two elements of the list, denoted
by ``{a}`` and ``{b}``. Three different patterns are used:

- for lists with exactly 2 elements (e.g. "first **and** second")
- for lists with more than 2 elements, between all but the last element (e.g.
  "first**,** second**,** ...")
- for lists with more than 2 elements, between the second-last and last element (e.g.
  "second-last**, and** last")

E.g.::

    >>> phrase = ListPhrase("{a} and {b}", "{a}, {b}", "{a}, and {b}")
    >>> phrase.format([])
    ''
    >>> phrase.format(["one"])
    'one'
    >>> phrase.format(["one", "two"])
    'one and two'
    >>> phrase.format(["one", "two", "three"])
    'one, two, and three'

The patterns don't have to be different::

    >>> ListPhrase.from_pattern("{a}, {b}").format(["one", "two", "three"])
    'one, two, three'
"""

from __future__ import annotations

__all__ = [
    "Formatter",
    "ListPhrase",
    "list_phrase",
    "validate_list_pattern",
]

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import TypeVar

from typing_extensions import Self

from listphrase.errors import InvalidPatternError, TemplateKeyError
from listphrase.phrase import Template, compile_template

logger = logging.getLogger(__name__)

T = TypeVar("T")

Formatter = Callable[[T], object]
"""Convert a list item into its text; called for every item, ``None`` included."""


def validate_list_pattern(name: str, pattern: Template) -> Template:
    """Verify that the pattern contains exactly the keys ``{a}`` and ``{b}``.

    :param name: the position of the pattern in the list phrase, used in the error message.
    :return: the same pattern.
    :raises InvalidPatternError: if the pattern has other keys, or lacks any of them.
    """
    try:
        pattern.bind("a", "").bind("b", "").render()
    except TemplateKeyError as exc:
        raise InvalidPatternError(
            f"{name} list pattern should only contain keys {{a}} and {{b}}",
            details=exc.message,
            resolution="Fix the pattern so it uses both keys and no other.",
        ) from exc

    logger.debug("Validated %s list pattern %r", name, pattern)
    return pattern


def _stringify(item: T, formatter: Formatter[T] | None) -> str:
    if formatter is None:
        return "" if item is None else str(item)
    return str(formatter(item))


def _render_pair(pattern: Template, first: str, second: str) -> str:
    """Bind both keys and render, as one uninterrupted cycle on the template."""
    return pattern.bind("a", first).bind("b", second).render()


class ListPhrase:
    """Join list items with patterns that depend on the list size and item position.

    Each pattern is either the pattern text, compiled here as a
    :class:`~listphrase.phrase.Phrase`, or an already compiled template. All of them are
    validated when the object is created.

    A ``ListPhrase`` never changes after creation, but its templates hold the values
    being bound while formatting, so the same instance is not safe for concurrent use
    from several threads.

    :param two_element_pattern: separator for 2-element lists
    :param non_final_element_pattern: separator for non-final elements of lists with 3 or
        more elements
    :param final_element_pattern: separator for the final element in lists with 3 or
        more elements
    :raises InvalidPatternError: if any pattern does not contain exactly ``{a}`` and ``{b}``.
    :raises PatternSyntaxError: if any pattern text cannot be compiled.
    """

    __slots__ = ("_final", "_non_final", "_two_element")

    def __init__(
        self,
        two_element_pattern: str | Template,
        non_final_element_pattern: str | Template,
        final_element_pattern: str | Template,
    ) -> None:
        two_element = validate_list_pattern("two-element", compile_template(two_element_pattern))
        non_final = validate_list_pattern("non-final", compile_template(non_final_element_pattern))
        final = validate_list_pattern("final", compile_template(final_element_pattern))
        object.__setattr__(self, "_two_element", two_element)
        object.__setattr__(self, "_non_final", non_final)
        object.__setattr__(self, "_final", final)

    @classmethod
    def from_pattern(cls, pattern: str | Template) -> Self:
        """Use the same separator for all elements.

        Pattern texts are compiled once per position, so the positions don't share state.
        """
        if isinstance(pattern, Template):
            return cls(pattern, pattern, pattern)
        return cls(compile_template(pattern), compile_template(pattern), compile_template(pattern))

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{self.__class__.__name__} objects are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{self.__class__.__name__} objects are immutable")

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self._two_element!r}, "
            f"{self._non_final!r}, {self._final!r})"
        )

    @property
    def two_element_pattern(self) -> Template:
        """The separator for 2-element lists."""
        return self._two_element

    @property
    def non_final_element_pattern(self) -> Template:
        """The separator for non-final elements of lists with 3 or more elements."""
        return self._non_final

    @property
    def final_element_pattern(self) -> Template:
        """The separator for the final element of lists with 3 or more elements."""
        return self._final

    def format(self, items: Iterable[T], formatter: Formatter[T] | None = None) -> str:
        """Join the items into a single text.

        :param items: any finite iterable; it's consumed once, in its own iteration order.
        :param formatter: converts each item into text; if not given, ``None`` items become
            an empty string and the rest are converted with ``str``.
        """
        return self._format_list(list(items), formatter)

    def format_items(self, *items: T, formatter: Formatter[T] | None = None) -> str:
        """Join the given items into a single text; see :meth:`format`."""
        return self._format_list(items, formatter)

    def _format_list(self, items: Sequence[T], formatter: Formatter[T] | None) -> str:
        size = len(items)
        if size == 0:
            return ""
        if size == 1:
            return _stringify(items[0], formatter)
        if size == 2:  # noqa: PLR2004 (no magic values)
            return _render_pair(
                self._two_element, _stringify(items[0], formatter), _stringify(items[1], formatter)
            )

        # fold over the list
        result = _stringify(items[0], formatter)
        last = size - 1
        for pos in range(1, size):
            pattern = self._final if pos == last else self._non_final
            result = _render_pair(pattern, result, _stringify(items[pos], formatter))
        return result


def list_phrase(
    two_element_pattern: str | Template,
    non_final_element_pattern: str | Template | None = None,
    final_element_pattern: str | Template | None = None,
) -> ListPhrase:
    """Entry point into this API.

    Give one pattern to use it as the separator for all elements, or all three patterns
    (see :class:`ListPhrase`).

    :raises TypeError: if only two patterns are given.
    """
    if non_final_element_pattern is None and final_element_pattern is None:
        return ListPhrase.from_pattern(two_element_pattern)
    if non_final_element_pattern is None or final_element_pattern is None:
        raise TypeError("list_phrase() needs either one pattern or three patterns")
    return ListPhrase(two_element_pattern, non_final_element_pattern, final_element_pattern)
