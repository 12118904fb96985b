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
The PropertyMap, holding the CSS properties of a Rule.

Property names may be given in camelCase or in kebab-case; they are converted
to kebab-case when rendering::

    >>> p = PropertyMap()
    >>> p.update({'backgroundColor': 'red', 'fontSize': '16px'})
    >>> p.render()
    'background-color: red; font-size: 16px;'

A value can also be a dictionary, which is used for the steps of a
``@keyframes`` rule::

    >>> p = PropertyMap()
    >>> p.update({'0%': {'opacity': 0}, '100%': {'opacity': 1}})
    >>> p.render()
    '0% { opacity: 0; } 100% { opacity: 1; }'

"""


import collections.abc
import logging
import reprlib

from . import util
from .errors import InvalidPropertyError


logger = logging.getLogger(__name__)


def check_property(key, value):
    """Raise InvalidPropertyError if key and value can't be used as a property.

    A value that is a mapping (a keyframe step) may only contain properties
    with a string or number value.

    """
    if not isinstance(key, str) or not key.strip():
        raise InvalidPropertyError(
            "invalid property name: {}: {}".format(repr(key), repr(value)))
    if isinstance(value, collections.abc.Mapping):
        for k, v in value.items():
            if isinstance(v, collections.abc.Mapping):
                raise InvalidPropertyError(
                    "nested mapping not allowed in {}: {}".format(key, repr(k)))
            check_property(k, v)
    elif not isinstance(value, str) and not util.is_number(value):
        raise InvalidPropertyError(
            "invalid property value: {}: {}".format(key, repr(value)))


def render_value(value):
    """Return the CSS text for a scalar property value."""
    if util.is_number(value):
        return util.format_number(value)
    return value


def render_declarations(properties):
    """Yield ``name: value;`` for every item of the properties mapping."""
    for key, value in properties.items():
        yield "{}: {};".format(util.camel_to_kebab(key), render_value(value))


class PropertyMap(collections.abc.Mapping):
    """An ordered mapping of CSS property names to values.

    Setting a property that is already present overwrites the value, but
    keeps the original position. Values are either a string, a number or a
    mapping (a keyframe step).

    """
    def __init__(self, properties=None):
        self._properties = {}
        if properties:
            self.update(properties)

    def __repr__(self):
        return '<{} {}>'.format(self.__class__.__name__,
                                reprlib.repr(self._properties))

    def __getitem__(self, key):
        return self._properties[key]

    def __iter__(self):
        return iter(self._properties)

    def __len__(self):
        return len(self._properties)

    def set_property(self, key, value):
        """Set a single property; raises InvalidPropertyError on a bad value."""
        check_property(key, value)
        self._set(key, value)

    def update(self, properties):
        """Set all the properties from the mapping, or none at all.

        All items are checked first; if one of them is invalid,
        InvalidPropertyError is raised and none of the properties is set.

        """
        items = list(properties.items())
        for key, value in items:
            check_property(key, value)
        for key, value in items:
            self._set(key, value)

    def _set(self, key, value):
        if key in self._properties:
            logger.debug("overwriting property %s: %r -> %r",
                         key, self._properties[key], value)
        self._properties[key] = value

    def render(self):
        """Return the properties as a single line of CSS declarations."""
        def gen():
            for key, value in self._properties.items():
                if isinstance(value, collections.abc.Mapping):
                    yield "{} {{ {} }}".format(key,
                        " ".join(render_declarations(value)))
                else:
                    yield "{}: {};".format(util.camel_to_kebab(key),
                                           render_value(value))
        return " ".join(gen())

