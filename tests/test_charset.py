"""Tests for ptree.renderers.charset: glyph sets and indent prefixes."""

import pytest

from ptree.renderers.charset import Indent, IndentChars
from ptree.types import CharSetName


class TestIndentChars:
    def test_ascii_tick_is_ascii(self):
        assert IndentChars.from_name("ascii-tick") == IndentChars.ascii()
        assert IndentChars.from_name("ascii") == IndentChars.ascii()

    def test_every_name_resolves(self):
        for cs in CharSetName:
            assert IndentChars.for_charset(cs) == IndentChars.from_name(cs.value)

    def test_name_lookup_ignores_case(self):
        assert IndentChars.from_name(" UTF ") == IndentChars.utf()

    def test_unknown_name(self):
        with pytest.raises(ValueError, match="Unknown character set"):
            IndentChars.from_name("fancy")

    def test_ascii_sets_are_ascii_only(self):
        for chars in (IndentChars.ascii(), IndentChars.ascii_plus()):
            for glyph in (chars.down_and_right, chars.down, chars.turn_right, chars.right, chars.ellipsis):
                assert glyph.isascii()


class TestIndent:
    def test_from_characters_utf(self):
        indent = Indent.from_characters(4, IndentChars.utf())
        assert indent.regular == "├── "
        assert indent.last_regular == "└── "
        assert indent.child == "│   "
        assert indent.last_child == "    "

    def test_from_characters_ascii_wide(self):
        indent = Indent.from_characters(6, IndentChars.ascii())
        assert indent.regular == "|---- "
        assert indent.last_regular == "`---- "
        assert indent.child == "|     "
        assert indent.last_child == "      "

    def test_narrow_indent(self):
        indent = Indent.from_characters(3, IndentChars.utf())
        assert indent.regular == "├─ "
        assert indent.last_child == "   "

    def test_indent_below_two_has_no_padding(self):
        indent = Indent.from_characters(1, IndentChars.ascii_plus())
        assert indent.regular == "+ "
        assert indent.child == "| "

    def test_branch_and_continuation(self):
        indent = Indent.from_characters(4, IndentChars.ascii())
        assert indent.branch(is_last=False) == "|-- "
        assert indent.branch(is_last=True) == "`-- "
        assert indent.continuation(is_last=False) == "|   "
        assert indent.continuation(is_last=True) == "    "
