"""Operands of instruction sentences: reading, classifying and checking them."""

from __future__ import annotations

import re

from .conversions import to_binary
from .lexer import check_symbol, check_symbol_operand, skip_spaces
from .model import Diagnostics, Sentence
from .tables import (
    DIRECT_OPERAND_TYPE,
    IMMEDIATE_OPERAND_TYPE,
    MATRIX_OPERAND_TYPE,
    REGISTER_OPERAND_TYPE,
    find_opcode,
)

# Addressing kinds, numbered as in the opcode table.
IMMEDIATE = 0
DIRECT = 1
MATRIX = 2
REGISTER = 3

MIN_IMMEDIATE = -128
MAX_IMMEDIATE = 127

_END = "\n\0"
_OPERAND_DELIMITERS = ",\n \t\0"
_NAME_DELIMITERS = "[\0\t "
_REGISTER_DIGITS = frozenset("01234567")
_INTEGER = re.compile(r"[+-]?\d+")


def _char_at(text: str, position: int) -> str:
    """Return the character at ``position``, or NUL past either end of the text."""
    return text[position] if 0 <= position < len(text) else "\0"


def _atoi(text: str) -> int:
    """Read a leading signed integer; anything unreadable is 0."""
    match = _INTEGER.match(text)
    return int(match.group()) if match else 0


def next_operand(line: str, position: int) -> tuple[str, int]:
    """Return the operand word starting at ``position`` and where it ended.

    A comma at ``position`` is returned as the word ``","``; at the end of
    the line the word is empty.
    """
    while True:
        char = _char_at(line, position)
        if char == ",":
            return ",", position
        if char in _END:
            return "", position
        end = position
        while _char_at(line, end) not in _OPERAND_DELIMITERS:
            end += 1
        if end > position:
            return line[position:end], end
        position = end + 1


def parse_matrix_operand(
    word: str, line_number: int, diagnostics: Diagnostics
) -> tuple[str, str, str] | None:
    """Read ``NAME[rX][rY]`` and return the name and both registers, or None.

    Errors are only reported once the word has shown an opening bracket
    after a valid name.
    """
    position = 0
    while _char_at(word, position) not in _NAME_DELIMITERS:
        position += 1
    name = word[:position]
    position = skip_spaces(word, position)

    if _char_at(word, position) in _END:
        return None
    if check_symbol(name, line_number, diagnostics, False, False) is None:
        return None
    if _char_at(word, position) != "[":
        return None

    position = skip_spaces(word, position + 1)
    if _char_at(word, position).lower() != "r":
        diagnostics.error(line_number, "expecting register as first matrix range")
        return None
    position += 1
    digit = _char_at(word, position)
    if digit not in _REGISTER_DIGITS or _char_at(word, position + 1) != "]":
        diagnostics.error(line_number, "invalid reg num")
        return None
    row = "r" + digit
    position += 2

    if _char_at(word, position) != "[":
        diagnostics.error(line_number, "opening brackets expected")
        return None
    position += 1
    if _char_at(word, position) != "r":
        diagnostics.error(line_number, "expecting register as second matrix range")
        return None
    position += 1
    digit = _char_at(word, position)
    if digit not in _REGISTER_DIGITS or _char_at(word, position + 1) != "]":
        diagnostics.error(line_number, "invalid reg num")
        return None
    col = "r" + digit
    position = skip_spaces(word, position + 2)

    if _char_at(word, position) not in _END:
        diagnostics.error(line_number, "unexpected characters after matrix usage")
        return None
    return name, row, col


def detect_operand(
    slot: str, sentence: Sentence, word: str, line_number: int, diagnostics: Diagnostics
) -> int | None:
    """Classify ``word`` and store it in the source (``"a"``) or destination slot.

    Returns the addressing kind, or None when the word is not an operand.
    """
    first = slot == "a"

    if word.startswith("#"):
        text = word[1:]
        value = _atoi(text)
        if not value and text != "0":
            diagnostics.note(
                line_number, "the value after an immediate operand must be a number"
            )
            return IMMEDIATE
        if first:
            sentence.immediate_a = value
            sentence.source_type = IMMEDIATE_OPERAND_TYPE
        else:
            sentence.immediate_b = value
            sentence.dest_type = IMMEDIATE_OPERAND_TYPE
        if not MIN_IMMEDIATE <= value <= MAX_IMMEDIATE:
            diagnostics.error(
                line_number, "the value after an immediate operand must be a number"
            )
        return IMMEDIATE

    if check_symbol_operand(word, line_number, diagnostics):
        if first:
            sentence.operand_1 = word
            sentence.source_type = DIRECT_OPERAND_TYPE
        else:
            sentence.operand_2 = word
            sentence.dest_type = DIRECT_OPERAND_TYPE
        return DIRECT

    matrix = parse_matrix_operand(word, line_number, diagnostics)
    if matrix is not None:
        name, row, col = matrix
        if first:
            sentence.operand_1 = name
            sentence.matrix_row_a = row
            sentence.matrix_col_a = col
            sentence.source_type = MATRIX_OPERAND_TYPE
        else:
            sentence.operand_2 = name
            sentence.matrix_row_b = row
            sentence.matrix_col_b = col
            sentence.dest_type = MATRIX_OPERAND_TYPE
        return MATRIX

    if len(word) == 2 and word[0] == "r" and word[1] in _REGISTER_DIGITS:
        if first:
            sentence.operand_1 = word
            sentence.source_type = REGISTER_OPERAND_TYPE
        else:
            sentence.operand_2 = word
            sentence.dest_type = REGISTER_OPERAND_TYPE
        return REGISTER

    return None


def validate_operands(
    sentence: Sentence,
    source_type: int | None,
    dest_type: int | None,
    count: int,
    line_number: int,
    diagnostics: Diagnostics,
) -> bool:
    """Check the number and addressing kinds of the operands against the opcode.

    With a single operand, ``source_type`` holds the destination's kind.
    """
    opcode = find_opcode(sentence.opcode)
    if opcode is None:
        return True

    if opcode.operand_count < count:
        diagnostics.error(
            line_number, f"too many operands for the opcode {sentence.opcode}"
        )
        return False
    if opcode.operand_count > count:
        diagnostics.error(line_number, "not enough valid operands")
        return False

    if count == 1:
        if source_type not in opcode.dest_types:
            diagnostics.note(
                line_number,
                "the address type of the destination operand doesn't match "
                f"to the opcode {sentence.opcode}",
            )
            return False
        return True

    if count == 2:
        valid = True
        if source_type not in opcode.source_types:
            diagnostics.error(
                line_number,
                "the address type of the source operand doesn't match "
                f"to the opcode {sentence.opcode}",
            )
            valid = False
        if dest_type not in opcode.dest_types:
            diagnostics.error(
                line_number,
                "the address type of the destination operand doesn't match "
                f"to the opcode {sentence.opcode}",
            )
            return False
        return valid

    return True


def _move_to_destination(sentence: Sentence) -> None:
    """Move a lone operand from the source slot to the destination slot."""
    sentence.dest_type = sentence.source_type
    sentence.source_type = ""
    sentence.operand_2 = sentence.operand_1
    sentence.operand_1 = ""
    sentence.immediate_b = sentence.immediate_a
    sentence.matrix_row_b = sentence.matrix_row_a
    sentence.matrix_col_b = sentence.matrix_col_a
    sentence.matrix_row_a = ""
    sentence.matrix_col_a = ""


def parse_operands(
    sentence: Sentence, line: str, position: int, line_number: int, diagnostics: Diagnostics
) -> None:
    """Read the operands after the opcode, classify them and check them."""
    position = skip_spaces(line, position)
    word, position = next_operand(line, position)
    if word == ",":
        diagnostics.error(line_number, "unexpected comma")
        return
    if not word:
        validate_operands(sentence, None, None, 0, line_number, diagnostics)
        return

    count = 0
    source_kind = detect_operand("a", sentence, word, line_number, diagnostics)
    dest_kind: int | None = None
    if source_kind is not None:
        count += 1

    position = skip_spaces(line, position)
    if _char_at(line, position) == ",":
        word, position = next_operand(line, position + 1)
        if word == ",":
            diagnostics.error(line_number, "unexpected comma")
            return
        if not word:
            diagnostics.note(line_number, "missing operand after comma")
            return
        dest_kind = detect_operand("b", sentence, word, line_number, diagnostics)
        if dest_kind is not None:
            count += 1

    if _char_at(line, position) not in _END:
        diagnostics.note(
            line_number, "end of line expected after matching number of operands"
        )
        return

    sentence.operand_count = count

    if count == 1:
        _move_to_destination(sentence)
        if validate_operands(sentence, source_kind, None, 1, line_number, diagnostics):
            sentence.dest_type = to_binary(source_kind, 3)
    elif count == 2 and validate_operands(
        sentence, source_kind, dest_kind, 2, line_number, diagnostics
    ):
        sentence.source_type = to_binary(source_kind, 3)
        sentence.dest_type = to_binary(dest_kind, 3)