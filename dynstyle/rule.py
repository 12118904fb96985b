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
The Rule, a CSS selector with properties, nested rules and media variants.

Rules are normally created by :meth:`StyleSheet.rule()
<dynstyle.stylesheet.StyleSheet.rule>`. All setters return the Rule itself,
so calls can be chained. :meth:`Rule.nested`, :meth:`Rule.media` and
:meth:`Rule.otherwise` return a *new* Rule; to add more to the parent, keep a
reference to it::

    >>> from dynstyle import StyleSheet
    >>> sheet = StyleSheet()
    >>> nav = sheet.rule('nav').set(display='flex')
    >>> nav.nested('a').set(color='white').hover(color='yellow')
    <Rule nav a>
    >>> nav.media('(max-width: 600px)').set(flexDirection='column')
    <Rule nav>
    >>> print(sheet.compile())
    nav { display: flex; }
    @media (max-width: 600px) {
      nav { flex-direction: column; }
    }
    nav a { color: white; }
    nav a:hover { color: yellow; }
    <BLANKLINE>

A Rule can be made conditional with :meth:`Rule.when`. The condition is
checked when the rule is serialized, and a false condition excludes the rule
with all its nested rules and media variants. During one serialization pass,
every condition function is called exactly once.

"""


import collections.abc
import logging
import weakref

from . import util, values
from .color import Color
from .compiler import Fragment, Media, Result, render_rule
from .errors import (
    InvalidMediaQueryError,
    InvalidPropertyError,
    InvalidSelectorError,
    UnsupportedColorFormatError,
)
from .properties import PropertyMap


logger = logging.getLogger(__name__)


def check_selectors(selectors):
    """Return a list of stripped selectors.

    A single list or tuple argument is used as the list of selectors.
    Raises InvalidSelectorError if a selector is not a non-empty string.

    """
    if len(selectors) == 1 and isinstance(selectors[0], (list, tuple)):
        selectors = selectors[0]
    for s in selectors:
        if not isinstance(s, str) or not s.strip():
            raise InvalidSelectorError("invalid selector: {}".format(repr(s)))
    return [s.strip() for s in selectors]


def compose(selector, token):
    """Combine a parent selector with a nested selector token.

    A pseudo-element (``::before``) is appended directly, an at-rule
    (``@keyframes x``) can't be nested and is returned as is, and all other
    tokens are joined with a space (the descendant combinator).

    """
    if token.startswith("@"):
        return token
    elif token.startswith("::"):
        return selector + token
    return selector + " " + token


def combine_queries(outer, inner):
    """Return the media query for a media rule nested inside another.

    Both queries may be comma-separated lists; every part of the outer query
    is combined with every part of the inner one::

        >>> combine_queries("screen, print", "(min-width: 800px)")
        'screen and (min-width: 800px), print and (min-width: 800px)'

    """
    return ", ".join(o.strip() + " and " + i.strip()
                     for o in outer.split(",") for i in inner.split(","))


def color_value(color):
    """Return the CSS text for a Color, a hexadecimal string or a color name."""
    if isinstance(color, Color):
        return color.to_rgba()
    elif isinstance(color, str) and color.strip():
        color = color.strip()
        if color.startswith("#"):
            return Color.from_hex(color).to_rgba()
        return color
    raise UnsupportedColorFormatError("unsupported color: {}".format(repr(color)))


class Rule:
    """A CSS rule: one or more selectors with properties.

    A Rule also has a list of nested ``children`` rules, and a list of
    ``media_queries``, containing (query, Rule) tuples. The ``keyframes``
    dictionary holds the keyframes attached by :meth:`set_animation`.

    """
    def __init__(self, *selectors):
        self.selectors = check_selectors(selectors)
        self.properties = PropertyMap()
        self.children = []
        self.media_queries = []
        self.keyframes = {}
        self.parent = None
        self._condition = None
        self._otherwise = None

    def __repr__(self):
        return '<{} {}>'.format(self.__class__.__name__, ", ".join(self.selectors))

    @property
    def parent(self):
        """The parent Rule (or None; uses a weak reference)."""
        return self._parent()

    @parent.setter
    def parent(self, parent):
        """Set the parent (to a Rule or None)."""
        self._parent = weakref.ref(parent) if parent is not None else lambda: None

    def _child(self, selectors):
        """Return a new Rule with the selectors, and with us as parent."""
        rule = type(self)(selectors)
        rule.parent = self
        return rule

    ## structure
    def nested(self, *selectors):
        """Return a new child Rule for the selectors, nested in our selectors.

        Every selector is combined with each of our own selectors, so
        ``rule('ul', 'ol').nested('li')`` yields ``ul li, ol li``. Selectors
        starting with ``::`` are appended without a space.

        """
        if not selectors:
            raise InvalidSelectorError("nested() needs at least one selector")
        tokens = check_selectors(selectors)
        composed = [compose(s, t) for t in tokens for s in self.selectors]
        child = self._child(list(dict.fromkeys(composed)))
        self.children.append(child)
        return child

    def media(self, *queries):
        """Return a new Rule with our selectors, active under the media query.

        More than one query may be given; they are combined into one
        comma-separated media query list.

        """
        if not queries:
            raise InvalidMediaQueryError("media() needs a query")
        for q in queries:
            if not isinstance(q, str) or not q.strip():
                raise InvalidMediaQueryError("invalid media query: {}".format(repr(q)))
        rule = self._child(list(self.selectors))
        self.media_queries.append((", ".join(q.strip() for q in queries), rule))
        return rule

    def set_pseudo(self, pseudo, properties=None, **kwargs):
        """Add a child rule for the pseudo-class, with the properties.

        Returns ourselves, not the new child.

        """
        if not isinstance(pseudo, str) or not pseudo.strip(" :"):
            raise InvalidSelectorError("invalid pseudo-class: {}".format(repr(pseudo)))
        pseudo = pseudo.strip()
        if not pseudo.startswith(":"):
            pseudo = ":" + pseudo
        child = self._child([s + pseudo for s in self.selectors])
        child.set(properties, **kwargs)
        self.children.append(child)
        return self

    def hover(self, properties=None, **kwargs):
        """Add a child rule for the ``:hover`` state. Returns ourselves."""
        return self.set_pseudo(":hover", properties, **kwargs)

    def active(self, properties=None, **kwargs):
        """Add a child rule for the ``:active`` state. Returns ourselves."""
        return self.set_pseudo(":active", properties, **kwargs)

    def focus(self, properties=None, **kwargs):
        """Add a child rule for the ``:focus`` state. Returns ourselves."""
        return self.set_pseudo(":focus", properties, **kwargs)

    ## conditions
    def when(self, condition):
        """Only output this rule if the condition is met.

        The condition is a bool or a function that is called without
        arguments when the rule is serialized.

        """
        if isinstance(condition, bool):
            self._condition = lambda: condition
        elif callable(condition):
            self._condition = condition
        else:
            raise TypeError("condition must be a bool or callable, not {}".format(
                type(condition).__name__))
        return self

    def otherwise(self):
        """Return a Rule with our selectors that is output when our condition is not met.

        The alternative rule has the same parent, so a false condition of an
        ancestor still excludes both.

        """
        if self._otherwise is None:
            rule = type(self)(list(self.selectors))
            rule.parent = self.parent
            rule._condition = lambda: not self._condition_met()
            self._otherwise = rule
        return self._otherwise

    def _condition_met(self):
        """Return True if our own condition (not the ancestors') is met."""
        return self._condition is None or bool(self._condition())

    def is_included(self):
        """Return True if the conditions of this rule and all its ancestors are met."""
        rule = self
        while rule is not None:
            if not rule._condition_met():
                return False
            rule = rule.parent
        return True

    def _select(self):
        """Return the Rule to output in our place: ourselves, the otherwise rule or None.

        Only our own condition is called; the ancestors must have been
        checked already.

        """
        if self._condition_met():
            return self
        return self._otherwise

    ## properties
    def set(self, properties=None, **kwargs):
        """Set properties from a mapping and/or keyword arguments.

        Either all properties are set, or, when one of them is invalid,
        none, and InvalidPropertyError is raised.

        """
        if properties is not None and not isinstance(properties, collections.abc.Mapping):
            raise InvalidPropertyError(
                "properties must be a mapping, not {}".format(repr(properties)))
        props = dict(properties or ())
        props.update(kwargs)
        self.properties.update(props)
        return self

    def set_color(self, color, prop, *more):
        """Set one or more colors: ``set_color(color, prop, color2, prop2, ...)``.

        A color can be a :class:`~dynstyle.color.Color`, a hexadecimal string,
        which is converted to ``rgba()``, or any other CSS color text, which
        is used as is.

        """
        if len(more) % 2:
            raise TypeError("set_color() needs (color, property) pairs")
        args = (color, prop) + more
        return self.set({p: color_value(c) for c, p in zip(args[::2], args[1::2])})

    def set_text(self, text):
        """Set the ``content`` property to the quoted text, for ::before and ::after."""
        if not isinstance(text, str):
            raise InvalidPropertyError("text must be a string, not {}".format(repr(text)))
        return self.set(content=util.quote_string(text))

    def set_transition(self, spec):
        """Set the ``transition``; a string, a list, or a mapping property -> timing."""
        return self.set(transition=values.transition_value(spec))

    def set_animation(self, spec):
        """Set the ``animation``, from a string or a mapping.

        The mapping may have the keys ``name``, ``duration``,
        ``timingFunction``, ``delay``, ``iterationCount``, ``direction``,
        ``fillMode`` and ``playState``. If it also has ``keyframes``, a
        ``@keyframes`` block with that name is output with this rule.

        """
        value, keyframes = values.animation_value(spec)
        if value:
            self.set(animation=value)
        if keyframes is not None:
            self.keyframes[spec['name']] = dict(keyframes)
        return self

    def set_transform(self, spec):
        """Set the ``transform``; a string or a mapping function -> argument(s)."""
        return self.set(transform=values.transform_value(spec))

    def set_filter(self, spec):
        """Set the ``filter``; a string or a mapping function -> argument(s)."""
        return self.set(filter=values.filter_value(spec))

    def flex_layout(self, params=None, **kwargs):
        """Make this a flex container, see :func:`~dynstyle.values.flex_layout`."""
        return self.set(values.flex_layout(dict(params or (), **kwargs)))

    def flex_item(self, params=None, **kwargs):
        """Set flex item properties, see :func:`~dynstyle.values.flex_item`."""
        return self.set(values.flex_item(dict(params or (), **kwargs)))

    def set_grid(self, spec=None, **kwargs):
        """Make this a grid container, see :func:`~dynstyle.values.grid`."""
        if spec is None or (kwargs and isinstance(spec, collections.abc.Mapping)):
            spec = dict(spec or (), **kwargs)
        return self.set(values.grid(spec))

    def set_variables(self, variables=None, **kwargs):
        """Set CSS custom properties; the ``--`` prefix is added when missing."""
        variables = dict(variables or (), **kwargs)
        return self.set({"--" + name if isinstance(name, str) and not name.startswith("--")
                         else name: value for name, value in variables.items()})

    def set_prefixed(self, properties=None, **kwargs):
        """Set the properties and also their vendor-prefixed variants."""
        return self.set(util.add_prefixes(dict(properties or (), **kwargs)))

    ## output
    def combine_selectors(self, parent_selector=""):
        """Return our selectors combined with the parent selector, as a string.

        Our selectors that start with ``@``, or that already contain the
        parent selector (or one of its comma-separated parts), are used as is.

        """
        if not parent_selector:
            return ", ".join(self.selectors)
        parts = [p.strip() for p in parent_selector.split(",")]
        def gen():
            for s in self.selectors:
                if s.startswith("@") or parent_selector in s or any(p and p in s for p in parts):
                    yield s
                else:
                    yield parent_selector + " " + s
        return ", ".join(gen())

    def to_css(self, parent_selector=""):
        """Return a :class:`~dynstyle.compiler.Fragment`, or None if excluded.

        The conditions of the ancestors are checked first. If our own
        condition is not met, the otherwise rule (if any) is output instead.

        """
        parent = self.parent
        if parent is not None and not parent.is_included():
            return None
        rule = self._select()
        if rule is not None:
            return rule._serialize(parent_selector)

    def _serialize(self, parent_selector):
        """Return our Fragment, not looking at our own condition."""
        combined = self.combine_selectors(parent_selector)
        if not combined.strip():
            logger.warning("rule %r has no selector, skipped", self)
            return None

        properties = self.properties.render()
        result = Result(combined, properties) if properties else None

        children = []
        media = []
        nested_media = []
        keyframes = [values.render_keyframes("@keyframes " + name, frames)
                     for name, frames in self.keyframes.items()]

        for child in self.children:
            rule = child._select()
            fragment = rule._serialize(combined) if rule else None
            if fragment is None:
                continue
            if fragment.result:
                if fragment.result.selector.startswith("@keyframes"):
                    children.append(values.render_keyframes(
                        fragment.result.selector, rule.properties))
                else:
                    children.append(render_rule(fragment.result))
            if fragment.children:
                children.append(fragment.children)
            nested_media.extend(fragment.media)
            keyframes.extend(fragment.keyframes)

        for query, rule in self.media_queries:
            rule = rule._select()
            fragment = rule._serialize(combined) if rule else None
            if fragment is None:
                continue
            lines = []
            if fragment.result:
                lines.append(render_rule(fragment.result))
            if fragment.children:
                lines.append(fragment.children)
            body = "\n".join(lines).replace("\n", "\n  ")
            if body:
                media.append(Media(query, body))
            nested_media.extend(Media(combine_queries(query, m.query), m.css)
                                for m in fragment.media)
            keyframes.extend(fragment.keyframes)

        return Fragment(result, "\n".join(children), tuple(media + nested_media),
                        tuple(keyframes))

