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
The dynstyle Python module.

dynstyle builds CSS stylesheets from Python objects. You create a
:class:`StyleSheet`, add rules to it, and compile it to CSS text::

    from dynstyle import Color, StyleSheet

    sheet = StyleSheet()
    sheet.rule('body').set(fontFamily='sans-serif', margin=0)
    sheet.rule('button') \\
        .set_color(Color.from_hex('#336699'), 'backgroundColor') \\
        .hover(backgroundColor='navy')
    sheet.rule('body').media('(max-width: 600px)').set(fontSize='14px')

    css = sheet.compile()

The main module provides the listed classes; the exceptions are in the
:mod:`~dynstyle.errors` module, and the helpers for structured property values
in the :mod:`~dynstyle.values` module.

.. py:data:: version

   The version as a three-tuple(major, minor, patch). See :mod:`~dynstyle.pkginfo`.

.. py:data:: version_string

   The version as a string.

"""

# imported when using from dynstyle import *
__all__ = (
    'Color',
    'PropertyMap',
    'Rule',
    'StyleSheet',
)

from .color import Color
from .properties import PropertyMap
from .rule import Rule
from .stylesheet import StyleSheet
from .pkginfo import version, version_string

