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

"""Build list phrases from patterns stored in an application's string tables.

A string table is a JSON file mapping resource identifiers to texts, per locale::

    {
        "locale": "en",
        "strings": {
            "list_two": "{a} and {b}",
            "list_middle": "{a}, {b}",
            "list_end": "{a}, and {b}"
        }
    }
"""

from __future__ import annotations

__all__ = [
    "ResourceStore",
    "StringTable",
    "from_resources",
    "get_strings_dirpath",
]

import logging
import pathlib
from collections.abc import Callable, Mapping

import platformdirs
import pydantic
from typing_extensions import Self

from listphrase.errors import ResourceFileError, ResourceNotFoundError
from listphrase.listphrase import ListPhrase
from listphrase.phrase import Phrase, Template

logger = logging.getLogger(__name__)

# the directory, inside the application's data dir, holding the string tables
STRINGS_DIRNAME = "strings"


class StringTable(pydantic.BaseModel):
    """The texts of an application for one locale."""

    model_config = pydantic.ConfigDict(extra="forbid", frozen=True)

    locale: str = "en"
    strings: dict[str, str]

    @pydantic.field_validator("strings")
    @classmethod
    def _identifiers_not_empty(cls, value: dict[str, str]) -> dict[str, str]:
        if any(not identifier for identifier in value):
            raise ValueError("resource identifiers cannot be empty")
        return value


def get_strings_dirpath(appname: str) -> pathlib.Path:
    """Provide the directory where the string tables of the application are located."""
    return pathlib.Path(platformdirs.user_data_dir(appname)) / STRINGS_DIRNAME


class ResourceStore:
    """Look up texts by identifier in a string table."""

    def __init__(self, strings: Mapping[str, str], locale: str = "en") -> None:
        try:
            self.table = StringTable(locale=locale, strings=dict(strings))
        except pydantic.ValidationError as exc:
            raise ResourceFileError(
                f"Invalid string table for locale {locale!r}", details=str(exc)
            ) from exc

    @classmethod
    def from_file(cls, filepath: pathlib.Path) -> Self:
        """Load the string table from a JSON file."""
        logger.debug("Loading string table from %s", filepath)
        try:
            content = filepath.read_text(encoding="utf8")
        except OSError as exc:
            raise ResourceFileError(
                f"Cannot read string table {str(filepath)!r}", details=str(exc)
            ) from exc

        try:
            table = StringTable.model_validate_json(content)
        except pydantic.ValidationError as exc:
            raise ResourceFileError(
                f"Invalid string table {str(filepath)!r}",
                details=str(exc),
                resolution="The file must hold an object with a 'strings' mapping.",
            ) from exc
        return cls(table.strings, locale=table.locale)

    @classmethod
    def for_app(cls, appname: str, locale: str = "en") -> Self:
        """Load the string table of the application for the given locale."""
        return cls.from_file(get_strings_dirpath(appname) / f"{locale}.json")

    @property
    def locale(self) -> str:
        """The locale of the texts in this store."""
        return self.table.locale

    def get_text(self, identifier: str) -> str:
        """Return the text for the identifier.

        :raises ResourceNotFoundError: if the identifier is not in the string table.
        """
        try:
            text = self.table.strings[identifier]
        except KeyError:
            raise ResourceNotFoundError(
                f"Resource {identifier!r} not found for locale {self.locale!r}"
            ) from None
        logger.debug("Resolved resource %r for locale %r", identifier, self.locale)
        return text

    def get_template(
        self, identifier: str, engine: Callable[[str], Template] = Phrase
    ) -> Template:
        """Return the text for the identifier, compiled with the given templating engine."""
        return engine(self.get_text(identifier))


def from_resources(
    store: ResourceStore,
    two_element_pattern: str,
    non_final_element_pattern: str | None = None,
    final_element_pattern: str | None = None,
    *,
    engine: Callable[[str], Template] = Phrase,
) -> ListPhrase:
    """Build a list phrase from patterns found in the store.

    Give one identifier to use that resource as the separator for all elements, or three
    identifiers (see :class:`~listphrase.listphrase.ListPhrase`).

    :raises TypeError: if only two identifiers are given.
    """
    if non_final_element_pattern is None and final_element_pattern is None:
        non_final_element_pattern = final_element_pattern = two_element_pattern
    elif non_final_element_pattern is None or final_element_pattern is None:
        raise TypeError("from_resources() needs either one identifier or three identifiers")

    return ListPhrase(
        store.get_template(two_element_pattern, engine),
        store.get_template(non_final_element_pattern, engine),
        store.get_template(final_element_pattern, engine),
    )
