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
Merges the serialized fragments of Rules into CSS text.

:meth:`Rule.to_css() <dynstyle.rule.Rule.to_css>` returns a :class:`Fragment`
tuple, and the :class:`Compiler` folds a list of those into one string:

1. The properties of all fragments with the same selector are combined
   into one ``selector { ... }`` block, in the order the selectors were first
   seen.

2. The bodies of all media entries with the same query are combined into one
   ``@media query { ... }`` block.

3. The pre-rendered children text of every fragment is appended as is.

4. The ``@keyframes`` blocks that were attached to rules are appended.

Because the children text is already rendered, a selector that appears as a
top-level rule and also as the nested child of another rule is not merged.

"""


import collections


#: The own block of a Rule.
Result = collections.namedtuple("Result", "selector properties")
Result.selector.__doc__ = "The combined selector string."
Result.properties.__doc__ = "The rendered properties, on a single line."

#: A rule body under a media query.
Media = collections.namedtuple("Media", "query css")
Media.query.__doc__ = "The media query, e.g. ``(max-width: 600px)``."
Media.css.__doc__ = "The rendered rule(s) to put inside the @media block."

#: Everything a Rule produces when serialized.
Fragment = collections.namedtuple("Fragment", "result children media keyframes")
Fragment.result.__doc__ = "The :class:`Result` of the rule itself, or None."
Fragment.children.__doc__ = "The rendered text of the nested rules (may be empty)."
Fragment.media.__doc__ = "A tuple of :class:`Media` entries."
Fragment.keyframes.__doc__ = "A tuple of rendered ``@keyframes`` blocks."


def render_rule(result):
    """Return the ``selector { properties }`` text for a Result."""
    return "{} {{ {} }}".format(result.selector, result.properties)


def _accumulate(d, key, text):
    """Append text to the value of key in d, separated by a space."""
    d[key] = d[key] + " " + text if key in d else text


class Compiler:
    """Collects Fragments and renders them to CSS text.

    Use :meth:`add` for every fragment and then :meth:`css` to get the text.

    """
    def __init__(self):
        self._rules = {}
        self._media = {}
        self._children = []
        self._keyframes = []

    def add(self, fragment):
        """Add a Fragment. None is allowed and ignored (an excluded rule)."""
        if fragment is None:
            return
        result = fragment.result
        if result and result.selector and result.properties:
            _accumulate(self._rules, result.selector, result.properties)
        for media in fragment.media:
            if media.query and media.css:
                _accumulate(self._media, media.query, media.css)
        if fragment.children:
            self._children.append(fragment.children)
        self._keyframes.extend(fragment.keyframes)

    def css(self):
        """Return the CSS text."""
        def gen():
            for selector, properties in self._rules.items():
                yield "{} {{ {} }}\n".format(selector, properties)
            for query, body in self._media.items():
                yield "@media {} {{\n  {}\n}}\n".format(query, body)
            for children in self._children:
                yield children + "\n"
            # the same animation may be attached to more than one rule
            for keyframes in dict.fromkeys(self._keyframes):
                yield keyframes + "\n"
        return "".join(gen())


def merge(fragments):
    """Return the CSS text for an iterable of Fragments (or None values)."""
    c = Compiler()
    for fragment in fragments:
        c.add(fragment)
    return c.css()

