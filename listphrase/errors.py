#
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

"""Error classes."""

__all__ = [
    "InvalidPatternError",
    "PatternSyntaxError",
    "PhraseError",
    "ResourceFileError",
    "ResourceNotFoundError",
    "TemplateKeyError",
]

from typing import Any


class PhraseError(Exception):
    """Signal a problem building or rendering a phrase."""

    message: str
    """The main message, describing what went wrong."""

    details: str | None
    """Extra information about the error, like the offending pattern or the message of
      an underlying library."""

    resolution: str | None
    """An extra line indicating how the error may be fixed."""

    def __init__(
        self,
        message: str,
        *,
        details: str | None = None,
        resolution: str | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details = details
        self.resolution = resolution

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PhraseError):
            return all(
                [
                    type(self) is type(other),
                    self.args == other.args,
                    self.details == other.details,
                    self.resolution == other.resolution,
                ]
            )
        return NotImplemented

    __hash__ = Exception.__hash__


class PatternSyntaxError(PhraseError):
    """A pattern text could not be compiled.

    The ``index`` attribute holds the position in the pattern where the problem was
    found, when the templating engine can tell.
    """

    def __init__(self, message: str, *, index: int | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.index = index

    def __eq__(self, other: object) -> bool:
        if isinstance(other, PatternSyntaxError):
            return self.index == other.index and super().__eq__(other)
        return NotImplemented

    __hash__ = PhraseError.__hash__


class TemplateKeyError(PhraseError):
    """The keys bound to a template do not match the keys in its pattern."""


class InvalidPatternError(PhraseError):
    """A list pattern does not reference exactly the ``{a}`` and ``{b}`` keys."""


class ResourceNotFoundError(PhraseError):
    """A resource identifier is not present in the string table."""


class ResourceFileError(PhraseError):
    """A string table file could not be read or is not valid."""
