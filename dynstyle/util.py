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
Various utility classes and functions.

This module only depends on the Python standard library.

"""

import functools
import re


#: The vendor prefixes used by :func:`add_prefixes`.
VENDOR_PREFIXES = ("webkit", "moz", "ms", "o")

_camel_re = re.compile(r'([a-z0-9])([A-Z])')


class Dispatcher:
    """Dispatches calls via an instance to methods based on the first argument.

    A Dispatcher is used as a decorator when defining a class, and then called
    via an instance to select a method based on the first argument (which
    must be hashable).

    Usage::

        class MyClass:
            dispatch = Dispatcher()

            @dispatch('+')
            def add(self, value):
                print("Add", value)

        >>> MyClass().dispatch('+', 3)
        Add 3

    Keys that are not handled are silently ignored, unless you specify a
    default function, which is then called with the key and the other
    arguments::

        class MyClass:
            @Dispatcher
            def dispatch(self, key, value):
                raise ValueError(key)

    """
    def __init__(self, default_func=None):
        self._table = {}
        self._default_func = default_func

    def __call__(self, *keys):
        def decorator(func):
            for key in keys:
                self._table[key] = func
            return func
        return decorator

    def __get__(self, instance, owner):
        if instance is None:
            return self
        return functools.partial(self._dispatch, instance)

    def _dispatch(self, instance, key, *args, **kwargs):
        f = self._table.get(key)
        if f:
            return f(instance, *args, **kwargs)
        if self._default_func:
            return self._default_func(instance, key, *args, **kwargs)

    def keys(self):
        """Return the keys that are handled."""
        return self._table.keys()


def camel_to_kebab(name):
    """Return the CSS (kebab-case) spelling of a camelCase property name.

    A hyphen is inserted before every uppercase letter that follows a
    lowercase letter or digit, and then everything is lowercased. Names that
    already are in kebab-case are returned unchanged::

        >>> camel_to_kebab("backgroundColor")
        'background-color'

    """
    return _camel_re.sub(r'\1-\2', name).lower()


def format_number(num):
    """Return the number as a CSS token; integral floats lose their ``.0``."""
    if isinstance(num, float) and num.is_integer():
        num = int(num)
    return str(num)


def is_number(value):
    """Return True if value is a real number (but not a bool)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def quote_string(s):
    """Double-quote the string for CSS, escaping backslashes and double quotes."""
    return '"' + re.sub(r'[\\"]', r'\\\g<0>', s) + '"'


def add_prefixes(properties, prefixes=VENDOR_PREFIXES):
    """Return a new dict with vendor-prefixed copies of every property.

    The original properties come first, followed by the prefixed ones, per
    prefix in the order of ``prefixes``::

        >>> add_prefixes({'userSelect': 'none'}, ('webkit',))
        {'userSelect': 'none', '-webkit-user-select': 'none'}

    """
    result = dict(properties)
    for prefix in prefixes:
        for key, value in properties.items():
            result["-{}-{}".format(prefix, camel_to_kebab(key))] = value
    return result

