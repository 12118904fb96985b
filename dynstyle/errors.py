# -*- coding: utf-8 -*-
#
# This file is part of the dynstyle Python package.
#
# Copyright © 2019-2020 by Wilbert Berendsen <info@wilbertberendsen.nl>
#
# This module is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This module is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <https://www.gnu.org/licenses/>.


"""
The exceptions raised by dynstyle.

All exceptions inherit from :class:`StyleError` and from the builtin exception
that describes the problem best, so you can catch e.g. a ``ValueError`` as well.

"""


class StyleError(Exception):
    """Base class for all dynstyle errors."""


class InvalidSelectorError(StyleError, ValueError):
    """Raised when a selector is not a non-empty string."""


class InvalidPropertyError(StyleError, ValueError):
    """Raised when a property name or value can't be used."""


class UnsupportedColorFormatError(StyleError, ValueError):
    """Raised when a color value can't be understood."""


class InvalidMediaQueryError(StyleError, ValueError):
    """Raised when a media query is empty."""


class InvalidStyleSheetArgumentError(StyleError, TypeError):
    """Raised when an object that is not a StyleSheet is combined."""


class DivisionByZeroError(StyleError, ZeroDivisionError):
    """Raised when a Color is divided by zero."""

