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

"""Tests for errors."""

import pytest

from listphrase.errors import (
    InvalidPatternError,
    PatternSyntaxError,
    PhraseError,
    ResourceNotFoundError,
    TemplateKeyError,
)


def test_phraseerror_is_comparable():
    error1 = PhraseError("foo")
    error2 = PhraseError("foo")

    assert error1 == error2


def test_phraseerror_is_different():
    error1 = PhraseError("foo")
    error2 = PhraseError("bar")

    assert error1 != error2


def test_phraseerror_does_not_compare_to_other_exception():
    error1 = PhraseError("foo")
    error2 = ValueError("foo")

    assert error1 != error2


def test_phraseerror_different_subclasses():
    error1 = TemplateKeyError("foo")
    error2 = ResourceNotFoundError("foo")

    assert error1 != error2


def test_phraseerror_message_attribute():
    error = InvalidPatternError("final list pattern is wrong", details="Invalid key: c")

    assert error.message == "final list pattern is wrong"
    assert str(error) == "final list pattern is wrong"
    assert error.details == "Invalid key: c"
    assert error.resolution is None


@pytest.mark.parametrize("argument_name", ["details", "resolution"])
def test_compare_phraseerror_with_different_attribute_values(argument_name):
    error1 = PhraseError("message")
    error2 = PhraseError("message")
    setattr(error1, argument_name, "foo")
    setattr(error2, argument_name, "bar")

    assert error1 != error2


@pytest.mark.parametrize("argument_name", ["details", "resolution"])
def test_compare_phraseerror_with_identical_attribute_values(argument_name):
    error1 = PhraseError("message")
    error2 = PhraseError("message")
    setattr(error1, argument_name, "foo")
    setattr(error2, argument_name, "foo")

    assert error1 == error2


def test_phraseerror_is_hashable():
    error = PhraseError("message")

    assert error in {error}


@pytest.mark.parametrize(
    ("index1", "index2", "expected"),
    [
        (None, None, True),
        (3, 3, True),
        (None, 3, False),
        (2, 3, False),
    ],
)
def test_compare_pattern_syntax_error(index1, index2, expected):
    err1 = PatternSyntaxError("message", index=index1)
    err2 = PatternSyntaxError("message", index=index2)

    eq = err1 == err2
    assert eq == expected


@pytest.mark.parametrize(
    "error_class",
    [InvalidPatternError, PatternSyntaxError, ResourceNotFoundError, TemplateKeyError],
)
def test_all_errors_are_phrase_errors(error_class):
    assert issubclass(error_class, PhraseError)
