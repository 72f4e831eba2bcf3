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

"""Generic fixtures for the whole test suite."""

import pytest

from listphrase import ListPhrase

TWO_ELEMENT_PATTERN = "{a} and {b}"
NON_FINAL_ELEMENT_PATTERN = "{a}, {b}"
FINAL_ELEMENT_PATTERN = "{a}, and {b}"


@pytest.fixture
def patterns():
    """Provide the texts of the english list patterns, with Oxford comma."""
    return TWO_ELEMENT_PATTERN, NON_FINAL_ELEMENT_PATTERN, FINAL_ELEMENT_PATTERN


@pytest.fixture
def english(patterns):
    """Provide a list phrase built from the english list patterns."""
    return ListPhrase(*patterns)
