import pytest

from strangeasm.lexer import (
    check_reserved,
    check_symbol,
    check_symbol_operand,
    extern_or_entry_directive,
    is_alphanumeric,
    is_command,
    next_word,
    skip_spaces,
    store_directive,
)
from strangeasm.model import Diagnostics


def _all_words(line):
    words = []
    position = -1
    while True:
        word, position = next_word(line, position)
        if not word:
            return words
        words.append(word)


def test_skip_spaces_stops_at_text():
    line = " \t x"
    position = skip_spaces(line, 0)
    assert line[position] == "x"


def test_skip_spaces_at_end_of_line():
    assert skip_spaces("ab   ", 2) == len("ab   ")


def test_next_word_keeps_label_colon():
    line = "LABEL: mov r1, r2\n"
    word, position = next_word(line, -1)
    assert word == "LABEL:"
    assert line[position] == " "


def test_next_word_splits_words_and_operands():
    assert _all_words("LOOP: mov  r1,\tr2\n") == ["LOOP:", "mov", "r1", "r2"]


def test_next_word_splits_on_brackets():
    assert _all_words("M1[r2][r3]\n") == ["M1", "r2", "r3"]


def test_next_word_keeps_directive_dot():
    assert _all_words("  .data 5, -3") == [".data", "5", "-3"]


def test_next_word_empty_line():
    assert next_word("\n", -1) == ("", 0)


@pytest.mark.parametrize(
    "text, expected",
    [("abc123", True), ("ab_c", False), ("", True), ("r1:", False)],
)
def test_is_alphanumeric(text, expected):
    assert is_alphanumeric(text) is expected


@pytest.mark.parametrize(
    "word, expected",
    [(".data", True), (".MAT", True), (".string", True), (".entry", True),
     (".extern", True), ("data", False), (".foo", False)],
)
def test_is_command(word, expected):
    assert is_command(word) is expected


def test_check_reserved_reports_error():
    diagnostics = Diagnostics()
    assert check_reserved("MOV", 4, diagnostics, True) is True
    assert diagnostics.failed
    assert str(diagnostics.entries[0]) == (
        "Error in line 4 - the word MOV is a saved word in the language"
    )


def test_check_reserved_silent():
    diagnostics = Diagnostics()
    assert check_reserved("r7", 1, diagnostics, False) is True
    assert diagnostics.entries == []
    assert check_reserved("LOOP", 1, diagnostics, True) is False
    assert not diagnostics.failed


def test_check_symbol_label_strips_colon():
    diagnostics = Diagnostics()
    assert check_symbol("LOOP:", 1, diagnostics, True, True) == "LOOP"
    assert diagnostics.entries == []


def test_check_symbol_label_reserved():
    diagnostics = Diagnostics()
    assert check_symbol("mov:", 2, diagnostics, True, True) is None
    assert diagnostics.failed


def test_check_symbol_label_missing_colon():
    diagnostics = Diagnostics()
    assert check_symbol("LOOP", 3, diagnostics, True, True) is None
    assert diagnostics.failed
    assert diagnostics.entries[0].message == "the symbol is missing ':'"


def test_check_symbol_directive_at_start_is_not_symbol():
    diagnostics = Diagnostics()
    assert check_symbol(".data", 1, diagnostics, True, True) is None
    assert diagnostics.entries == []


def test_check_symbol_opcode_at_start_is_not_symbol():
    diagnostics = Diagnostics()
    assert check_symbol("stop", 1, diagnostics, True, True) is None
    assert diagnostics.entries == []


def test_check_symbol_non_alphabetic_start():
    diagnostics = Diagnostics()
    assert check_symbol("1abc:", 5, diagnostics, True, True) is None
    assert diagnostics.failed
    assert diagnostics.entries[0].message == (
        "symbol cannot start with a non alphabetic character"
    )


def test_check_symbol_unknown_command():
    diagnostics = Diagnostics()
    assert check_symbol(".foo", 6, diagnostics, True, True) is None
    assert diagnostics.entries[0].message == "unknown command"
    assert diagnostics.failed


def test_check_symbol_too_long_is_not_fatal():
    diagnostics = Diagnostics()
    word = "A" * 31 + ":"
    assert check_symbol(word, 7, diagnostics, True, True) is None
    assert diagnostics.entries[0].message == "The word is too long to be a symbol"
    assert not diagnostics.failed


def test_check_symbol_operand_position():
    diagnostics = Diagnostics()
    assert check_symbol("LENGTH", 1, diagnostics, False, True) == "LENGTH"
    assert check_symbol("a-b", 1, diagnostics, False, True) is None
    assert diagnostics.entries == []


def test_check_symbol_reserved_operand_position():
    diagnostics = Diagnostics()
    assert check_symbol("r3", 1, diagnostics, False, True) is None
    assert diagnostics.failed


def test_check_symbol_operand():
    diagnostics = Diagnostics()
    assert check_symbol_operand("LENGTH", 1, diagnostics) is True
    assert check_symbol_operand("r1", 1, diagnostics) is False
    assert check_symbol_operand("M1[r2][r3]", 1, diagnostics) is False
    assert diagnostics.entries == []


def test_check_symbol_operand_non_alphabetic():
    diagnostics = Diagnostics()
    assert check_symbol_operand("#5", 9, diagnostics) is False
    assert diagnostics.failed
    assert diagnostics.entries[0].message == (
        "operand cannot start with a non alphabetic character"
    )


def test_store_directive():
    assert store_directive(".data") == "data"
    assert store_directive(".String") == "String"
    assert store_directive(".mat") == "mat"
    assert store_directive(".extern") is None
    assert store_directive("data") is None


def test_extern_or_entry_directive():
    assert extern_or_entry_directive(".extern") == "extern"
    assert extern_or_entry_directive(".ENTRY") == "ENTRY"
    assert extern_or_entry_directive(".data") is None