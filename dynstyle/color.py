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
The Color value type.

A :class:`Color` holds red, green and blue channels and an opacity, and
renders itself to a CSS ``rgba()`` function call. Colors can be created
directly, or parsed from a hexadecimal or ``rgb()`` notation::

    >>> from dynstyle.color import Color
    >>> Color.from_hex("#f80").to_rgba()
    'rgba(255,136,0,1)'

Arithmetic is done in place with :meth:`Color.operate`, which applies the
operation to the r, g and b channels, but not to the alpha value. The result
is not clamped; call :meth:`Color.clamp` before using the color::

    >>> Color(100, 100, 100).operate('+', 200).clamp()
    Color(r=255, g=255, b=255, a=1)

"""


import re

from . import util
from .errors import DivisionByZeroError, UnsupportedColorFormatError


_hex_re = re.compile(r'#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})')
_rgb_re = re.compile(
    r'rgba?\(\s*(\d+)\s*,\s*(\d+)\s*,\s*(\d+)\s*(?:,\s*(\d*\.?\d+)\s*)?\)')


class Color:
    """A color with r, g, b values in the range 0..255 and opacity a in 0..1.

    The values are not checked or bounded; use :meth:`clamp` for that.

    """
    __slots__ = ('r', 'g', 'b', 'a')

    def __init__(self, r, g, b, a=1):
        self.r = r
        self.g = g
        self.b = b
        self.a = a

    def __repr__(self):
        return '{}(r={}, g={}, b={}, a={})'.format(self.__class__.__name__,
            *map(util.format_number, self))

    def __str__(self):
        return "rgba({}, {}, {}, {})".format(*map(util.format_number, self))

    def __iter__(self):
        yield self.r
        yield self.g
        yield self.b
        yield self.a

    def __eq__(self, other):
        if isinstance(other, Color):
            return tuple(self) == tuple(other)
        return NotImplemented

    __hash__ = None

    @classmethod
    def from_hex(cls, text):
        """Return a new Color from a hexadecimal string like "#FA0042" or "#f00".

        The hash is optional. Raises UnsupportedColorFormatError if the text
        is not a 3- or 6-digit hexadecimal color.

        """
        m = _hex_re.fullmatch(text.strip()) if isinstance(text, str) else None
        if not m:
            raise UnsupportedColorFormatError(
                "not a hexadecimal color: {}".format(repr(text)))
        digits = m.group(1)
        c = int(digits, 16)
        if len(digits) == 3:
            # 17F -> 1177FF
            r = (c // 256 & 15) * 17
            g = (c // 16 & 15) * 17
            b = (c & 15) * 17
        else:
            r = c // 65536 & 255
            g = c // 256 & 255
            b = c & 255
        return cls(r, g, b)

    @classmethod
    def from_rgb(cls, text):
        """Return a new Color from a ``rgb(r, g, b)`` or ``rgba(r, g, b, a)`` string.

        Raises UnsupportedColorFormatError if the text can't be parsed.

        """
        m = _rgb_re.fullmatch(text.strip()) if isinstance(text, str) else None
        if not m:
            raise UnsupportedColorFormatError(
                "not a rgb() color: {}".format(repr(text)))
        r, g, b = (int(v) for v in m.group(1, 2, 3))
        a = 1
        if m.group(4):
            a = float(m.group(4))
            if a.is_integer():
                a = int(a)
        return cls(r, g, b, a)

    @classmethod
    def parse(cls, text):
        """Return a new Color from either a hexadecimal or rgb()/rgba() string."""
        if isinstance(text, str) and text.lstrip().startswith("rgb"):
            return cls.from_rgb(text)
        return cls.from_hex(text)

    @util.Dispatcher
    def _operator(self, operation, operand):
        raise ValueError("unknown color operation: {}".format(repr(operation)))

    @_operator('+')
    def _add(self, operand):
        self.r += operand
        self.g += operand
        self.b += operand

    @_operator('-')
    def _subtract(self, operand):
        self.r -= operand
        self.g -= operand
        self.b -= operand

    @_operator('*')
    def _multiply(self, operand):
        self.r *= operand
        self.g *= operand
        self.b *= operand

    @_operator('/')
    def _divide(self, operand):
        if operand == 0:
            raise DivisionByZeroError("can't divide a color by zero")
        self.r /= operand
        self.g /= operand
        self.b /= operand

    @_operator('%')
    def _modulo(self, operand):
        if operand == 0:
            raise DivisionByZeroError("can't take a color modulo zero")
        self.r %= operand
        self.g %= operand
        self.b %= operand

    def operate(self, operation, operand):
        """Apply operation ("+", "-", "*", "/" or "%") with operand to r, g and b.

        The color is modified in place and returned. The alpha value is left
        alone, and the result is not clamped.

        """
        self._operator(operation, operand)
        return self

    def clamp(self):
        """Round r, g, b and bound them to 0..255, and bound a to 0..1.

        Returns the color itself.

        """
        self.r = max(0, min(255, round(self.r)))
        self.g = max(0, min(255, round(self.g)))
        self.b = max(0, min(255, round(self.b)))
        self.a = max(0, min(1, self.a))
        return self

    def to_rgba(self):
        """Return the CSS ``rgba(r,g,b,a)`` notation, without spaces."""
        return "rgba({},{},{},{})".format(*map(util.format_number, self))

    def to_hex(self):
        """Return a hexadecimal string with '#' prepended.

        The color should be clamped. When the color is not fully opaque, the
        alpha value is appended as a fourth byte.

        """
        r, g, b, a = self
        x = "#{:06x}".format(int(r) * 65536 + int(g) * 256 + int(b))
        if a < 1:
            x += format(int(a * 255), '02x')
        return x

