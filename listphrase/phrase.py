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

"""Single-pair templates: compile a pattern, bind its keys, render the text.

Two engines are provided:

- :class:`Phrase`, for patterns like ``"{a} and {b}"``
- :class:`JinjaPhrase`, for patterns like ``"{{ a }} and {{ b }}"``

Both follow the same contract: ``render()`` only succeeds when the keys bound since the
last render are exactly the keys present in the pattern.
"""

from __future__ import annotations

__all__ = [
    "JinjaPhrase",
    "Phrase",
    "Template",
    "compile_template",
]

from abc import ABC, abstractmethod
from typing import NamedTuple

import jinja2
import jinja2.meta
from overrides import override
from typing_extensions import Self

from listphrase.errors import PatternSyntaxError, TemplateKeyError


class Template(ABC):
    """A compiled pattern with named keys.

    Binding is stateful: ``bind`` stores the value in this very instance and returns it,
    so the same template must not be used in two bind/render cycles at the same time.
    """

    def __init__(self) -> None:
        self._bindings: dict[str, str] = {}

    @property
    @abstractmethod
    def keys(self) -> frozenset[str]:
        """The names of all the keys present in the pattern."""
        ...

    @abstractmethod
    def _substitute(self, bindings: dict[str, str]) -> str:
        """Produce the text, with all keys replaced by the given values."""
        ...

    def bind(self, key: str, value: object) -> Self:
        """Set the value for a key; the value is converted to text."""
        if key not in self.keys:
            raise TemplateKeyError(f"Invalid key: {key}")
        if value is None:
            raise TemplateKeyError(f"Null value for {key!r}")
        self._bindings[key] = str(value)
        return self

    def bind_optional(self, key: str, value: object) -> Self:
        """Set the value for a key only if the pattern contains it."""
        if key in self.keys:
            self.bind(key, value)
        return self

    def render(self) -> str:
        """Return the text with all keys replaced, and clear the bindings.

        :raises TemplateKeyError: if any key in the pattern was not bound.
        """
        missing = self.keys - self._bindings.keys()
        if missing:
            raise TemplateKeyError(f"Missing keys: {sorted(missing)}")
        bindings, self._bindings = self._bindings, {}
        return self._substitute(bindings)


class _Token(NamedTuple):
    """A piece of a compiled pattern: literal text, or a key to substitute."""

    text: str
    is_key: bool


def _is_key_start(char: str) -> bool:
    return "a" <= char <= "z"


def _is_key_char(char: str) -> bool:
    return "a" <= char <= "z" or char == "_"


def _tokenize(pattern: str) -> list[_Token]:
    """Split the pattern into literal and key tokens.

    Keys are enclosed in braces, start with a lowercase letter and continue with lowercase
    letters or underscores; a double opening brace is a literal ``{``.
    """
    tokens: list[_Token] = []
    literal: list[str] = []
    pos = 0
    size = len(pattern)
    while pos < size:
        char = pattern[pos]
        if char != "{":
            literal.append(char)
            pos += 1
            continue

        # escaped brace
        if pattern.startswith("{{", pos):
            literal.append("{")
            pos += 2
            continue

        start = pos
        pos += 1
        if pos >= size:
            raise PatternSyntaxError("Missing closing brace: }", index=pos, details=pattern)
        if pattern[pos] == "}":
            raise PatternSyntaxError("Empty key: {}", index=start, details=pattern)
        if not _is_key_start(pattern[pos]):
            raise PatternSyntaxError(
                f"Unexpected character {pattern[pos]!r}; expected key.", index=pos, details=pattern
            )
        while pos < size and _is_key_char(pattern[pos]):
            pos += 1
        if pos >= size:
            raise PatternSyntaxError("Missing closing brace: }", index=pos, details=pattern)
        if pattern[pos] != "}":
            raise PatternSyntaxError(
                f"Unexpected character {pattern[pos]!r}; expected '}}'.",
                index=pos,
                details=pattern,
            )

        if literal:
            tokens.append(_Token("".join(literal), is_key=False))
            literal = []
        tokens.append(_Token(pattern[start + 1 : pos], is_key=True))
        pos += 1

    if literal:
        tokens.append(_Token("".join(literal), is_key=False))
    return tokens


class Phrase(Template):
    """A pattern with keys enclosed in single braces, like ``"{a} and {b}"``.

    E.g.::

        >>> Phrase("{a} and {b}").bind("a", "one").bind("b", "two").render()
        'one and two'

    :raises PatternSyntaxError: if the pattern is not well formed.
    """

    def __init__(self, pattern: str) -> None:
        super().__init__()
        self.pattern = pattern
        self._tokens = _tokenize(pattern)
        self._keys = frozenset(token.text for token in self._tokens if token.is_key)

    @classmethod
    def from_pattern(cls, pattern: str) -> Self:
        """Compile the given pattern."""
        return cls(pattern)

    @property
    @override
    def keys(self) -> frozenset[str]:
        return self._keys

    @override
    def _substitute(self, bindings: dict[str, str]) -> str:
        return "".join(
            bindings[token.text] if token.is_key else token.text for token in self._tokens
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.pattern!r})"


class JinjaPhrase(Template):
    """A pattern in Jinja syntax, like ``"{{ a }} and {{ b }}"``.

    The keys are the undeclared variables of the template; rendering is strict, so any
    variable left unbound is an error, and no autoescaping happens.

    :raises PatternSyntaxError: if Jinja cannot parse the pattern.
    """

    _environment = jinja2.Environment(
        undefined=jinja2.StrictUndefined,
        autoescape=False,
        keep_trailing_newline=True,
    )

    def __init__(self, pattern: str) -> None:
        super().__init__()
        self.pattern = pattern
        try:
            parsed = self._environment.parse(pattern)
        except jinja2.TemplateSyntaxError as exc:
            raise PatternSyntaxError(
                f"Invalid Jinja pattern: {pattern!r}",
                details=f"{exc.message} (line {exc.lineno})",
            ) from exc
        self._keys = frozenset(jinja2.meta.find_undeclared_variables(parsed))
        self._template = self._environment.from_string(parsed)

    @classmethod
    def from_pattern(cls, pattern: str) -> Self:
        """Compile the given pattern."""
        return cls(pattern)

    @property
    @override
    def keys(self) -> frozenset[str]:
        return self._keys

    @override
    def _substitute(self, bindings: dict[str, str]) -> str:
        try:
            return self._template.render(bindings)
        except jinja2.UndefinedError as exc:
            raise TemplateKeyError(
                f"Undefined value while rendering {self.pattern!r}", details=str(exc)
            ) from exc

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.pattern!r})"


def compile_template(pattern: str | Template) -> Template:
    """Provide a template for the given pattern text; templates are returned as they are."""
    if isinstance(pattern, Template):
        return pattern
    return Phrase(pattern)
