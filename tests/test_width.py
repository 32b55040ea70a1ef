"""Tests for character display widths."""

import pytest

from linepad.width import UnicodeWidthTable, WidthTable, column_for_offset, display_width


@pytest.mark.parametrize("char,width", [
    ("a", 1),
    (" ", 1),
    ("\t", 4),
    ("漢", 2),
    ("か", 2),
    ("Ａ", 2),  # Fullwidth Latin A
    ("\u0301", 0),  # Combining acute accent
    ("\x01", 1),  # Control characters have no width of their own
    ("\x7f", 1),
])
def test_unicode_width_table(char, width):
    assert UnicodeWidthTable().width_of(char) == width


def test_tab_width_is_configurable():
    assert UnicodeWidthTable(tab_width=8).width_of("\t") == 8


def test_display_width_sums_characters():
    table = UnicodeWidthTable()
    assert display_width("", table) == 0
    assert display_width("ab", table) == 2
    assert display_width("\tab", table) == 6
    assert display_width("漢a", table) == 3


def test_column_for_offset_inverts_prefix_width():
    table = UnicodeWidthTable()
    line = "\tx漢y"
    for col in range(len(line) + 1):
        assert column_for_offset(line, display_width(line[:col], table), table) == col


def test_column_for_offset_inside_wide_character_stops_before_it():
    table = UnicodeWidthTable()
    # Offsets 1..3 fall inside the tab's cells
    assert column_for_offset("\tx", 1, table) == 0
    assert column_for_offset("\tx", 3, table) == 0
    assert column_for_offset("\tx", 4, table) == 1
    assert column_for_offset("a漢b", 2, table) == 1


def test_column_for_offset_past_end_is_line_length():
    table = UnicodeWidthTable()
    assert column_for_offset("abc", 10, table) == 3
    assert column_for_offset("", 5, table) == 0


def test_custom_width_table():
    class EverythingIsTwo(WidthTable):
        def width_of(self, char):
            return 2

    table = EverythingIsTwo()
    assert display_width("abc", table) == 6
    assert column_for_offset("abc", 3, table) == 1
