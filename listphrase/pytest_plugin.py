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

"""Different fixtures for easier testability of list phrases in applications."""

from __future__ import annotations

import json
import pathlib
from typing import TYPE_CHECKING
from unittest.mock import call

import platformdirs
import pytest
from overrides import override
from typing_extensions import Self

from listphrase.phrase import Template, compile_template
from listphrase.resources import STRINGS_DIRNAME

if TYPE_CHECKING:
    from collections.abc import Callable, Mapping
    from unittest.mock import _Call


class RecordingTemplate(Template):
    """A template that records how it is bound and rendered.

    This class is NOT meant to be used directly, please use the ``recording_template``
    fixture instead.
    """

    def __init__(self, wrapped: Template) -> None:
        super().__init__()
        self.wrapped = wrapped
        self.interactions: list[_Call] = []

    @property
    @override
    def keys(self) -> frozenset[str]:
        return self.wrapped.keys

    @override
    def bind(self, key: str, value: object) -> Self:
        """Record the binding and then really do it."""
        self.interactions.append(call("bind", key, value))
        return super().bind(key, value)

    @override
    def render(self) -> str:
        """Record the rendering and then really do it."""
        self.interactions.append(call("render"))
        return super().render()

    @override
    def _substitute(self, bindings: dict[str, str]) -> str:
        for key, value in bindings.items():
            self.wrapped.bind(key, value)
        return self.wrapped.render()

    def assert_interactions(self, expected_call_list: list[_Call] | None) -> None:
        """Check that the expected call list happen at some point between all stored calls.

        If None is passed, asserts that the template was not used at all.
        """
        if expected_call_list is None:
            if self.interactions:
                show_interactions = "\n".join(map(str, self.interactions))
                raise AssertionError("Expected no call but really got:\n" + show_interactions)
            return

        for _pos, stored_call in enumerate(self.interactions):
            if stored_call == expected_call_list[0]:
                pos = _pos
                break
        else:
            pos = 0

        end_pos = pos + len(expected_call_list)
        stored = self.interactions[pos:end_pos]
        assert stored == expected_call_list

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.wrapped!r})"


@pytest.fixture
def recording_template() -> Callable[[str | Template], RecordingTemplate]:
    """Provide a factory of templates that record all their bindings and renders."""

    def factory(pattern: str | Template) -> RecordingTemplate:
        return RecordingTemplate(compile_template(pattern))

    return factory


class StringTables:
    """Write string tables where the applications look for them.

    This class is NOT meant to be used directly, please use the ``string_tables`` fixture
    instead which provides an instance of this class with the data directory set up.
    """

    def __init__(self, dirpath: pathlib.Path) -> None:
        self.dirpath = dirpath

    def write(
        self, appname: str, strings: Mapping[str, str], locale: str = "en"
    ) -> pathlib.Path:
        """Store the texts for the application and locale, returning the file path."""
        strings_dir = self.dirpath / appname / STRINGS_DIRNAME
        strings_dir.mkdir(parents=True, exist_ok=True)
        filepath = strings_dir / f"{locale}.json"
        filepath.write_text(
            json.dumps({"locale": locale, "strings": dict(strings)}), encoding="utf8"
        )
        return filepath


@pytest.fixture
def string_tables(tmp_path, monkeypatch) -> StringTables:
    """Provide a helper to write string tables, also fixing platformdirs to use a temp dir."""
    dirpath = tmp_path / "testdatadir"
    dirpath.mkdir()
    monkeypatch.setattr(platformdirs, "user_data_dir", lambda appname: dirpath / appname)
    return StringTables(dirpath)
