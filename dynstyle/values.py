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
Helper functions that translate structured values to CSS property values.

Most setters of :class:`~dynstyle.rule.Rule` accept either a ready-made CSS
string, which is used verbatim, or a dictionary, which is translated by the
functions in this module. For example::

    >>> transform_value({'rotate': '45deg', 'scale': 1.5})
    'rotate(45deg) scale(1.5)'
    >>> transition_value({'backgroundColor': '0.5s', 'width': '0.3s'})
    'background-color 0.5s, width 0.3s'

The layout helpers only know a fixed set of keys, listed in the
``FLEX_PROPERTIES``, ``FLEX_ITEM_PROPERTIES`` and ``GRID_PROPERTIES``
dictionaries. Other keys are ignored, and a warning is logged.

"""


import collections.abc
import logging

from . import util
from .errors import InvalidPropertyError
from .properties import check_property, render_declarations, render_value


logger = logging.getLogger(__name__)


#: The order in which the parts of the animation shorthand are written.
ANIMATION_KEYS = (
    'name',
    'duration',
    'timingFunction',
    'delay',
    'iterationCount',
    'direction',
    'fillMode',
    'playState',
)

#: Keys understood by :func:`flex_layout`.
FLEX_PROPERTIES = {
    'display':      'display',
    'direction':    'flex-direction',
    'justify':      'justify-content',
    'align':        'align-items',
    'wrap':         'flex-wrap',
    'alignContent': 'align-content',
    'flexGrow':     'flex-grow',
    'flexShrink':   'flex-shrink',
    'flexBasis':    'flex-basis',
    'order':        'order',
}

#: Keys understood by :func:`flex_item`.
FLEX_ITEM_PROPERTIES = {
    'flex':         'flex',
    'grow':         'flex-grow',
    'flexGrow':     'flex-grow',
    'shrink':       'flex-shrink',
    'flexShrink':   'flex-shrink',
    'basis':        'flex-basis',
    'flexBasis':    'flex-basis',
    'order':        'order',
    'alignSelf':    'align-self',
}

#: Keys understood by :func:`grid`.
GRID_PROPERTIES = {
    'display':      'display',
    'columns':      'grid-template-columns',
    'rows':         'grid-template-rows',
    'areas':        'grid-template-areas',
    'gap':          'gap',
    'rowGap':       'row-gap',
    'columnGap':    'column-gap',
    'autoFlow':     'grid-auto-flow',
    'autoColumns':  'grid-auto-columns',
    'autoRows':     'grid-auto-rows',
    'justifyItems': 'justify-items',
    'alignItems':   'align-items',
    'placeItems':   'place-items',
}

#: Short alignment names and the CSS values they stand for.
ALIGNMENT_SHORTCUTS = {
    'start':    'flex-start',
    'end':      'flex-end',
    'between':  'space-between',
    'around':   'space-around',
    'evenly':   'space-evenly',
}

# flex properties that accept the alignment shortcuts
_aligning = ('justify-content', 'align-items', 'align-content', 'align-self')


def scalar(name, value):
    """Return the CSS text for a string or number, or raise InvalidPropertyError."""
    if isinstance(value, str) or util.is_number(value):
        return render_value(value)
    raise InvalidPropertyError(
        "invalid value for {}: {}".format(name, repr(value)))


def is_sequence(value):
    """Return True for a list or tuple (not for a string)."""
    return isinstance(value, (list, tuple))


def check_structured(name, spec):
    """Raise InvalidPropertyError if spec is neither a string nor a mapping."""
    if not isinstance(spec, (str, collections.abc.Mapping)):
        raise InvalidPropertyError(
            "{} must be a string or a mapping, not {}".format(name, repr(spec)))


def transition_value(spec):
    """Return the value for the ``transition`` property.

    A mapping maps property names to their timing, a list contains complete
    single transitions.

    """
    if is_sequence(spec):
        return ", ".join(scalar('transition', v) for v in spec)
    check_structured('transition', spec)
    if isinstance(spec, str):
        return spec
    return ", ".join("{} {}".format(util.camel_to_kebab(prop),
                                    scalar('transition', timing))
                     for prop, timing in spec.items())


def animation_value(spec):
    """Return a two-tuple(value, keyframes) for the ``animation`` property.

    The ``keyframes`` is None, or a mapping of keyframe steps when the
    ``keyframes`` key was present in the mapping.

    """
    check_structured('animation', spec)
    if isinstance(spec, str):
        return spec, None
    for key in spec:
        if key not in ANIMATION_KEYS and key != 'keyframes':
            logger.warning("ignoring unknown animation key: %r", key)
    keyframes = spec.get('keyframes')
    if keyframes is not None:
        name = spec.get('name')
        if not isinstance(name, str) or not name.strip():
            raise InvalidPropertyError(
                "animation keyframes need a name, not {}".format(repr(name)))
        if not isinstance(keyframes, collections.abc.Mapping):
            raise InvalidPropertyError(
                "animation keyframes must be a mapping, not {}".format(repr(keyframes)))
        for step, properties in keyframes.items():
            if not isinstance(properties, collections.abc.Mapping):
                raise InvalidPropertyError(
                    "keyframe step {} must be a mapping, not {}".format(
                        repr(step), repr(properties)))
            check_property(step, properties)
    value = " ".join(scalar(key, spec[key]) for key in ANIMATION_KEYS if key in spec)
    return value, keyframes


def css_functions(name, spec, kebab=False):
    """Return a space-separated list of CSS function calls from a mapping.

    Each key is a function name, and the value its argument; a list or tuple
    value is used as a comma-separated argument list. If ``kebab`` is True,
    the function names are converted to kebab-case.

    """
    check_structured(name, spec)
    if isinstance(spec, str):
        return spec
    def gen():
        for func, args in spec.items():
            if kebab:
                func = util.camel_to_kebab(func)
            if is_sequence(args):
                args = ", ".join(scalar(name, arg) for arg in args)
            else:
                args = scalar(name, args)
            yield "{}({})".format(func, args)
    return " ".join(gen())


def transform_value(spec):
    """Return the value for the ``transform`` property."""
    return css_functions('transform', spec)


def filter_value(spec):
    """Return the value for the ``filter`` property."""
    return css_functions('filter', spec, kebab=True)


def translate(params, table, what):
    """Return a dict with CSS property names from the params using table.

    Keys that are not in the table are ignored, and a warning is logged.

    """
    result = {}
    for key, value in params.items():
        try:
            prop = table[key]
        except KeyError:
            logger.warning("ignoring unknown %s key: %r", what, key)
            continue
        if prop in _aligning and isinstance(value, str) and value in ALIGNMENT_SHORTCUTS:
            value = ALIGNMENT_SHORTCUTS[value]
        result[prop] = value
    return result


def flex_layout(params):
    """Return the properties for a flex container; ``display`` defaults to flex."""
    result = {'display': 'flex'}
    result.update(translate(params, FLEX_PROPERTIES, 'flex layout'))
    return result


def flex_item(params):
    """Return the properties for an item in a flex container."""
    return translate(params, FLEX_ITEM_PROPERTIES, 'flex item')


def grid(spec):
    """Return the properties for a grid container.

    A string is used for the ``grid`` shorthand property. In a mapping,
    ``display`` defaults to grid, and ``areas`` may be given as a list of row
    strings, which are quoted.

    """
    check_structured('grid', spec)
    if isinstance(spec, str):
        return {'grid': spec}
    params = dict(spec)
    if is_sequence(params.get('areas')):
        params['areas'] = " ".join(util.quote_string(row) for row in params['areas'])
    result = {'display': 'grid'}
    result.update(translate(params, GRID_PROPERTIES, 'grid'))
    return result


def render_keyframes(selector, frames):
    """Return a multi-line ``@keyframes`` block.

    The ``selector`` is the complete at-rule prelude, e.g. ``"@keyframes
    fade"``; ``frames`` maps the steps (``"0%"``, ``"to"``, ...) to the
    properties for each step. Items that are not a mapping can't be a step;
    they are skipped with a warning.

    """
    lines = [selector + " {"]
    for step, properties in frames.items():
        if not isinstance(properties, collections.abc.Mapping):
            logger.warning("%s: skipping %s, not a keyframe step", selector, step)
            continue
        lines.append(step + " {")
        lines.extend("    " + d for d in render_declarations(properties))
        lines.append("}")
    lines.append("}")
    return "\n".join(lines)

