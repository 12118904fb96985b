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
Test the Color value type.
"""

import sys

import pytest

sys.path.insert(0, ".")

from dynstyle.color import Color
from dynstyle.errors import DivisionByZeroError, UnsupportedColorFormatError


def test_main():
    c = Color.from_hex('#ff0000')
    assert c.to_rgba() == 'rgba(255,0,0,1)'
    assert str(c) == 'rgba(255, 0, 0, 1)'
    assert repr(Color(1, 2, 3)) == 'Color(r=1, g=2, b=3, a=1)'

    assert tuple(Color.from_hex('f80')) == (255, 136, 0, 1)
    assert Color.from_hex('#1A2b3C') == Color(26, 43, 60)

    assert Color.from_rgb('rgb(10, 20,30)') == Color(10, 20, 30)
    assert Color.from_rgb('rgba(10,20,30,0.5)') == Color(10, 20, 30, 0.5)
    assert Color.parse('rgb(1,2,3)') == Color(1, 2, 3)
    assert Color.parse('#000') == Color(0, 0, 0)

    for text in ('#12', '#gggggg', '', 42):
        with pytest.raises(UnsupportedColorFormatError):
            Color.from_hex(text)
    with pytest.raises(UnsupportedColorFormatError):
        Color.from_rgb('hsl(1, 2%, 3%)')


def test_operate():
    c = Color(100, 100, 100).operate('+', 10).clamp()
    assert tuple(c) == (110, 110, 110, 1)

    # not clamped until clamp() is called
    c = Color(200, 10, 10).operate('+', 100)
    assert (c.r, c.g, c.b) == (300, 110, 110)
    assert c.clamp() == Color(255, 110, 110)

    c = Color(100, 50, 25).operate('/', 3).clamp()
    assert tuple(c) == (33, 17, 8, 1)

    c = Color(10, 20, 30, 0.5).operate('*', 2)
    assert tuple(c) == (20, 40, 60, 0.5)

    assert tuple(Color(10, 20, 30).operate('-', 20).clamp()) == (0, 0, 10, 1)
    assert tuple(Color(10, 20, 30).operate('%', 7)) == (3, 6, 2, 1)

    with pytest.raises(DivisionByZeroError):
        Color(1, 2, 3).operate('/', 0)
    with pytest.raises(ZeroDivisionError):
        Color(1, 2, 3).operate('%', 0)
    with pytest.raises(ValueError):
        Color(1, 2, 3).operate('^', 2)


def test_clamp_alpha():
    assert Color(0, 0, 0, 2).clamp().a == 1
    assert Color(0, 0, 0, -1).clamp().a == 0
    assert Color(-5, 300, 127.6).clamp() == Color(0, 255, 128)


def test_to_hex():
    assert Color(255, 136, 0).to_hex() == '#ff8800'
    assert Color(0, 0, 0, 0.5).to_hex() == '#0000007f'


if __name__ == "__main__":
    test_main()
    test_operate()
    test_clamp_alpha()
    test_to_hex()
