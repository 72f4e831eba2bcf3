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

"""Join lists into human-readable text with localizable separators."""

try:
    from ._version import __version__
except ImportError:  # pragma: no cover
    from importlib.metadata import version, PackageNotFoundError

    try:
        __version__ = version("listphrase")
    except PackageNotFoundError:
        __version__ = "dev"


# names included here only to be exposed as external API; the particular order of imports
# is to break cyclic dependencies
from .errors import (  # isort:skip
    InvalidPatternError,
    PatternSyntaxError,
    PhraseError,
    ResourceFileError,
    ResourceNotFoundError,
    TemplateKeyError,
)
from .phrase import JinjaPhrase, Phrase, Template, compile_template
from .listphrase import Formatter, ListPhrase, list_phrase
from .resources import ResourceStore, from_resources

__all__ = [
    "Formatter",
    "InvalidPatternError",
    "JinjaPhrase",
    "ListPhrase",
    "PatternSyntaxError",
    "Phrase",
    "PhraseError",
    "ResourceFileError",
    "ResourceNotFoundError",
    "ResourceStore",
    "Template",
    "TemplateKeyError",
    "compile_template",
    "from_resources",
    "list_phrase",
]
