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
Test compiling StyleSheets.
"""

import sys

import pytest

sys.path.insert(0, ".")

from dynstyle import Color, StyleSheet
from dynstyle.compiler import Compiler, Fragment, Media, Result, merge
from dynstyle.errors import InvalidStyleSheetArgumentError, StyleError


def test_main():
    sheet = StyleSheet()
    c = sheet.rule('.container').set(padding='10px')
    c.media('(max-width: 768px)').set(width='100%')
    c.nested('h1').set(color='blue')
    assert sheet.compile() == (
        '.container { padding: 10px; }\n'
        '@media (max-width: 768px) {\n'
        '  .container { width: 100%; }\n'
        '}\n'
        '.container h1 { color: blue; }\n'
    )
    # compiling does not change anything
    assert sheet.compile() == sheet.compile()

    assert StyleSheet().compile() == ''
    assert repr(sheet) == '<StyleSheet (1 rules)>'


def test_merge_same_selector():
    sheet = StyleSheet()
    sheet.rule('.a').set(color='red')
    sheet.rule('.b').set(color='blue')
    sheet.rule('.a').set(margin=0)
    assert sheet.compile() == (
        '.a { color: red; margin: 0; }\n'
        '.b { color: blue; }\n'
    )

    sheet = StyleSheet()
    sheet.rule('.box').media('(max-width: 600px)').set(width='10px')
    sheet.rule('.box').media('(max-width: 600px)').set(height='5px')
    assert sheet.compile() == (
        '@media (max-width: 600px) {\n'
        '  .box { width: 10px; } .box { height: 5px; }\n'
        '}\n'
    )


def test_nested_not_merged():
    # a nested rule is already rendered and isn't merged with a top-level rule
    sheet = StyleSheet()
    sheet.rule('.a').nested('b').set(color='red')
    sheet.rule('.a b').set(margin=0)
    assert sheet.compile() == (
        '.a b { margin: 0; }\n'
        '.a b { color: red; }\n'
    )


def test_conditions():
    sheet = StyleSheet()
    sheet.rule('.debug').set(outline='1px solid red').when(False)
    sheet.rule('body').set(margin=0)
    assert sheet.compile() == 'body { margin: 0; }\n'

    env = {'mode': 'dark'}
    sheet = StyleSheet()
    sheet.rule('body').when(lambda: env['mode'] == 'dark') \
        .set(background='black').otherwise().set(background='white')
    assert sheet.compile() == 'body { background: black; }\n'
    env['mode'] = 'light'
    assert sheet.compile() == 'body { background: white; }\n'


def test_combine():
    base = StyleSheet()
    shared = base.rule('body').set(margin=0)
    theme = StyleSheet()
    theme.rule('a').set_color(Color(0, 0, 255), 'color')

    sheet = StyleSheet()
    assert sheet.combine(base, theme) is sheet
    assert len(sheet.rules) == 2
    assert sheet.rules[0] is shared
    shared.set(padding=0)
    assert sheet.compile() == (
        'body { margin: 0; padding: 0; }\n'
        'a { color: rgba(0,0,255,1); }\n'
    )

    class Duck:
        rules = []
    sheet.combine(Duck())
    assert len(sheet.rules) == 2

    for bad in (None, 'sheet', {'rules': []}, object()):
        with pytest.raises(InvalidStyleSheetArgumentError):
            sheet.combine(bad)
    # nothing is added when one of the arguments is invalid
    with pytest.raises(InvalidStyleSheetArgumentError):
        sheet.combine(base, None)
    assert len(sheet.rules) == 2
    with pytest.raises(StyleError):
        sheet.combine(42)
    with pytest.raises(TypeError):
        sheet.combine(42)

    total = base + theme
    assert isinstance(total, StyleSheet)
    assert total.rules == base.rules + theme.rules
    assert total.rules is not base.rules
    with pytest.raises(TypeError):
        base + 42
    with pytest.raises(TypeError):
        base + {'rules': []}

    # a supplied list is used, even when empty
    rules = []
    sheet = StyleSheet(rules)
    sheet.rule('p')
    assert len(rules) == 1
    assert sheet.rules is rules


def test_generate_classes():
    sheet = StyleSheet().generate_classes('p', 3, {'padding': '4px'})
    assert [r.selectors for r in sheet.rules] == [['.p-1'], ['.p-2'], ['.p-3']]
    assert sheet.compile().splitlines()[2] == '.p-3 { padding: 4px; }'

    sheet = StyleSheet().generate_classes('w', 0, {'width': 0})
    assert sheet.rules == []


def test_keyframes():
    sheet = StyleSheet()
    sheet.keyframes('fade', {'0%': {'opacity': 0}, '100%': {'opacity': 1}})
    assert sheet.compile() == '@keyframes fade { 0% { opacity: 0; } 100% { opacity: 1; } }\n'

    # the same animation on two rules is output once
    spin = {
        'name': 'spin',
        'duration': '2s',
        'keyframes': {'to': {'transform': 'rotate(360deg)'}},
    }
    sheet = StyleSheet()
    sheet.rule('.a').set_animation(spin)
    sheet.rule('.b').set_animation(spin)
    assert sheet.compile() == (
        '.a { animation: spin 2s; }\n'
        '.b { animation: spin 2s; }\n'
        '@keyframes spin {\n'
        'to {\n'
        '    transform: rotate(360deg);\n'
        '}\n'
        '}\n'
    )


def test_compiler():
    c = Compiler()
    c.add(None)
    c.add(Fragment(Result('.x', 'color: red;'), '', (), ()))
    c.add(Fragment(None, '.x y { margin: 0; }', (Media('print', '.x { color: black; }'),), ()))
    c.add(Fragment(Result('.x', ''), '', (Media('print', ''),), ()))
    assert c.css() == (
        '.x { color: red; }\n'
        '@media print {\n'
        '  .x { color: black; }\n'
        '}\n'
        '.x y { margin: 0; }\n'
    )
    assert merge([]) == ''


if __name__ == "__main__":
    test_main()
    test_merge_same_selector()
    test_nested_not_merged()
    test_conditions()
    test_combine()
    test_generate_classes()
    test_keyframes()
    test_compiler()
