"""Tests for the line buffer."""

import pytest

from linepad.document import Document, split_lines


def test_empty_input_has_one_empty_line():
    doc = Document.from_text("")
    assert doc.lines == [""]
    assert doc.line_count() == 1
    assert doc.line_length(0) == 0


def test_default_document_has_one_empty_line():
    assert Document().lines == [""]
    assert Document([]).lines == [""]


@pytest.mark.parametrize("text,expected", [
    ("abc", ["abc"]),
    ("a\nb", ["a", "b"]),
    ("a\nb\n", ["a", "b"]),
    ("\n", [""]),
    ("a\n\nb", ["a", "", "b"]),
    ("a\n\n", ["a", ""]),
    ("a\r\nb\r\n", ["a", "b"]),
])
def test_split_lines(text, expected):
    assert split_lines(text) == expected


def test_only_line_feed_splits_lines():
    """Other Unicode separators stay inside a line."""
    assert split_lines("a\x0bb c") == ["a\x0bb c"]


def without_final_newline(text):
    return text[:-1] if text.endswith("\n") else text


@pytest.mark.parametrize("text", [
    "", "abc", "one\ntwo", "one\ntwo\n", "\tindent\n  spaces", "漢字\nかな\n", "\n\n",
    "abc\r", "one\r\ntwo\r",
])
def test_serialize_round_trip_ignores_trailing_newline(text):
    doc = Document.from_text(text)
    if "\r\n" not in text:
        assert doc.text() == without_final_newline(text)
    saved = doc.text()
    assert Document.from_text(saved).text() == without_final_newline(saved)


def test_bare_carriage_return_at_end_is_kept():
    assert split_lines("abc\r") == ["abc\r"]
    assert Document.from_text("abc\r").text() == "abc\r"


def test_carriage_return_inside_line_is_kept():
    assert split_lines("a\rb\r\nc") == ["a\rb", "c"]


def test_text_has_no_trailing_newline():
    assert Document(["a", "b", ""]).text() == "a\nb\n"
    assert Document(["a", "b"]).text() == "a\nb"


def test_insert_at_start_middle_end():
    doc = Document(["ac"])
    doc.insert(0, 1, "b")
    assert doc.lines == ["abc"]
    doc.insert(0, 0, ">")
    doc.insert(0, 4, "<")
    assert doc.lines == [">abc<"]


def test_split_moves_remainder_to_new_line():
    doc = Document(["abc", "next"])
    doc.split(0, 1)
    assert doc.lines == ["a", "bc", "next"]


def test_split_at_end_creates_empty_line():
    doc = Document(["abc"])
    doc.split(0, 3)
    assert doc.lines == ["abc", ""]


def test_join_appends_to_previous_line_and_reports_column():
    doc = Document(["ab", "cd", "ef"])
    col = doc.join(1)
    assert col == 2
    assert doc.lines == ["abcd", "ef"]


def test_join_empty_line():
    doc = Document(["", ""])
    assert doc.join(1) == 0
    assert doc.lines == [""]


def test_remove_deletes_character_before_column():
    doc = Document(["abc"])
    doc.remove(0, 2)
    assert doc.lines == ["ac"]
    doc.remove(0, 2)
    assert doc.lines == ["a"]


def test_wide_characters_are_single_indexes():
    doc = Document.from_text("漢字")
    assert doc.line_length(0) == 2
    doc.remove(0, 1)
    assert doc.lines == ["字"]
