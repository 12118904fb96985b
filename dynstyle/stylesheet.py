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
This module provides the StyleSheet, a list of Rules that compiles to CSS.

Workflow:

1. Create a StyleSheet, and add rules using :meth:`StyleSheet.rule`. Each
   call returns a :class:`~dynstyle.rule.Rule`, on which you can set
   properties, nest other rules, add media variants, etc.

2. If needed, combine multiple StyleSheets using :meth:`StyleSheet.combine`
   or the + operator.

3. Call :meth:`StyleSheet.compile` to get the CSS text. Writing it to a file
   is up to you.

Example::

    >>> from dynstyle import StyleSheet
    >>> sheet = StyleSheet()
    >>> sheet.rule('.container').set(padding='10px').nested('h1').set(color='blue')
    <Rule .container h1>
    >>> sheet.generate_classes('m', 2, lambda i: {'margin': '{}px'.format(10 * i)})
    <StyleSheet (3 rules)>
    >>> print(sheet.compile(), end='')
    .container { padding: 10px; }
    .m-1 { margin: 10px; }
    .m-2 { margin: 20px; }
    .container h1 { color: blue; }

"""


from . import compiler
from .errors import InvalidStyleSheetArgumentError
from .rule import Rule


class StyleSheet:
    """Represents an ordered list of top-level rules.

    Rules shared with another StyleSheet via :meth:`combine` are the same
    objects; modifying such a rule changes the output of both sheets.

    """
    rule_type = Rule    #: the Rule class that :meth:`rule` instantiates

    def __init__(self, rules=None):
        """Initialize a StyleSheet, empty or with the supplied rules."""
        self.rules = [] if rules is None else rules

    def __repr__(self):
        return '<{} ({} rules)>'.format(self.__class__.__name__, len(self.rules))

    def __add__(self, other):
        """Create a new StyleSheet with our rules followed by the other's rules."""
        if not isinstance(getattr(other, "rules", None), list):
            return NotImplemented
        return type(self)(self.rules + other.rules)

    def rule(self, *selectors):
        """Add and return a new Rule for the selectors."""
        rule = self.rule_type(*selectors)
        self.rules.append(rule)
        return rule

    def keyframes(self, name, frames):
        """Add and return a ``@keyframes`` rule.

        The ``frames`` mapping maps the steps (``"0%"``, ``"100%"``, ...) to
        a mapping of properties.

        """
        return self.rule("@keyframes " + name).set(frames)

    def generate_classes(self, prefix, count, properties):
        """Add rules ``.prefix-1`` up to and including ``.prefix-<count>``.

        The ``properties`` is a mapping that is set on every rule, or a
        function that is called with the number and returns the mapping.

        """
        for i in range(1, count + 1):
            props = properties(i) if callable(properties) else properties
            self.rule(".{}-{}".format(prefix, i)).set(props)
        return self

    def combine(self, *stylesheets):
        """Append the rules of the other stylesheets to ours.

        Any object with a ``rules`` list is accepted. The rules are not
        copied.

        """
        for sheet in stylesheets:
            rules = getattr(sheet, "rules", None)
            if not isinstance(rules, list):
                raise InvalidStyleSheetArgumentError(
                    "can't combine with {}: not a StyleSheet".format(repr(sheet)))
        for sheet in stylesheets:
            self.rules.extend(sheet.rules)
        return self

    def compile(self):
        """Return the CSS text for all rules."""
        return compiler.merge(rule.to_css() for rule in self.rules)

