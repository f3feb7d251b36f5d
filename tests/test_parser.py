import pytest

from strangeasm.model import Diagnostics, Guidance, Severity
from strangeasm.parser import is_blank, parse_sentence
from strangeasm.tables import DIRECT_OPERAND_TYPE, REGISTER_OPERAND_TYPE


def _messages(diagnostics):
    return [entry.message for entry in diagnostics.entries]


@pytest.mark.parametrize("line", ["   \t\n", "\n", ""])
def test_blank_lines(line):
    assert is_blank(line)


def test_non_blank_line():
    assert not is_blank("  x\n")


def test_blank_line_gives_none():
    assert parse_sentence("  \n", 1, Diagnostics()) is None


def test_labelled_instruction():
    diagnostics = Diagnostics()
    sentence = parse_sentence("MAIN: mov r3, LENGTH\n", 1, diagnostics)
    assert sentence.has_symbol
    assert sentence.symbol == "MAIN"
    assert sentence.is_action
    assert sentence.opcode == "mov"
    assert (sentence.operand_1, sentence.operand_2) == ("r3", "LENGTH")
    assert sentence.source_type == REGISTER_OPERAND_TYPE
    assert sentence.dest_type == DIRECT_OPERAND_TYPE
    assert not diagnostics.failed


def test_uppercase_opcode():
    sentence = parse_sentence("STOP\n", 1, Diagnostics())
    assert sentence.is_action
    assert sentence.opcode == "STOP"


def test_string_directive():
    diagnostics = Diagnostics()
    sentence = parse_sentence('STR: .string "abcd"\n', 1, diagnostics)
    assert sentence.is_store is True
    assert sentence.guidance == Guidance.STRING
    assert sentence.string == "abcd"
    assert sentence.symbol == "STR"
    assert not diagnostics.failed


def test_data_directive():
    sentence = parse_sentence("LIST: .data 6, -9\n", 1, Diagnostics())
    assert sentence.guidance == Guidance.NUM
    assert sentence.data == [6, -9]


def test_uppercase_data_directive():
    sentence = parse_sentence(".DATA 5\n", 1, Diagnostics())
    assert sentence.guidance == Guidance.NUM
    assert sentence.data == [5]


def test_matrix_directive():
    sentence = parse_sentence("M1: .mat [2][2] 1,2,3,4\n", 1, Diagnostics())
    assert sentence.guidance == Guidance.MAT
    assert (sentence.matrix_rows, sentence.matrix_cols) == (2, 2)
    assert sentence.matrix == [1, 2, 3, 4]


def test_extern_directive():
    sentence = parse_sentence(".extern W\n", 1, Diagnostics())
    assert sentence.is_store is False
    assert sentence.guidance == Guidance.EXTERN
    assert sentence.symbol == "W"
    assert not sentence.is_action


def test_entry_directive():
    sentence = parse_sentence(".entry LOOP\n", 1, Diagnostics())
    assert sentence.guidance == Guidance.ENTRY
    assert sentence.symbol == "LOOP"


def test_label_on_extern_warns():
    diagnostics = Diagnostics()
    sentence = parse_sentence("X: .extern W\n", 1, diagnostics)
    assert sentence.symbol == "W"
    assert [entry.severity for entry in diagnostics.entries] == [Severity.WARNING]
    assert not diagnostics.failed


def test_extern_without_symbol():
    diagnostics = Diagnostics()
    parse_sentence(".extern\n", 1, diagnostics)
    assert "missing symbol after guidance command" in _messages(diagnostics)
    assert diagnostics.failed


def test_indented_label_fails():
    diagnostics = Diagnostics()
    sentence = parse_sentence(" MAIN: stop\n", 1, diagnostics)
    assert "symbol doesn't start in 1st column" in _messages(diagnostics)
    assert not sentence.is_action


def test_label_missing_colon():
    diagnostics = Diagnostics()
    parse_sentence("MAIN stop\n", 1, diagnostics)
    assert "the symbol is missing ':'" in _messages(diagnostics)


def test_reserved_word_label():
    diagnostics = Diagnostics()
    sentence = parse_sentence("mov: stop\n", 1, diagnostics)
    assert "the word mov is a saved word in the language" in _messages(diagnostics)
    assert not sentence.has_symbol


def test_unknown_command():
    diagnostics = Diagnostics()
    parse_sentence(".foo 1\n", 1, diagnostics)
    assert "unknown command" in _messages(diagnostics)
    assert diagnostics.failed