"""Parsing of the operands of the storage directives ``.data``, ``.mat`` and ``.string``."""

from __future__ import annotations

from dataclasses import dataclass

from .lexer import skip_spaces
from .model import Diagnostics, Guidance, Sentence
from .tables import MAX_COLS, MAX_DATA_ARR_SIZE, MAX_ROWS

MIN_WORD_VALUE = -512
MAX_WORD_VALUE = 511

_END = "\n\0"
_MEMBER_STOP = "\n\0\t"
_DIGITS = frozenset("0123456789")
_SIGNS = "+-"


def _char_at(line: str, position: int) -> str:
    """Return the character at ``position``, or NUL past either end of the line."""
    return line[position] if 0 <= position < len(line) else "\0"


def _to_int(member: str) -> int:
    """Read a signed decimal integer the lenient way: anything unreadable is 0."""
    sign = 1
    body = member
    if body[:1] in ("+", "-"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    digits = []
    for char in body:
        if char not in _DIGITS:
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def _checked_value(number: int, line_number: int, diagnostics: Diagnostics) -> int:
    """Return ``number`` if it fits a ten-bit word; otherwise record an error and return 0."""
    if MIN_WORD_VALUE <= number <= MAX_WORD_VALUE:
        return number
    diagnostics.error(
        line_number,
        "the range of numbers that can be translated with assembler that works with "
        f"10 bits is from {MIN_WORD_VALUE} to {MAX_WORD_VALUE}. "
        f"Number {number} cannot be stored.",
    )
    return 0


@dataclass
class _MemberReader:
    """Reads comma separated integers, remembering whether a comma may follow."""

    line: str
    line_number: int
    diagnostics: Diagnostics
    expecting_comma: bool = False

    def read(self, position: int) -> tuple[str, int]:
        """Return the next member's text and the position where reading stopped."""
        while True:
            position = skip_spaces(self.line, position)
            member: list[str] = []
            number_ended = False
            while (char := _char_at(self.line, position)) not in _MEMBER_STOP:
                if char in _SIGNS:
                    if member:
                        self.diagnostics.error(self.line_number, "valid number expected")
                    else:
                        member.append(char)
                elif char in _DIGITS:
                    if number_ended:
                        self.diagnostics.error(self.line_number, "expecting comma")
                        return "".join(member), position
                    self.expecting_comma = True
                    member.append(char)
                elif char == ",":
                    if self.expecting_comma:
                        self.expecting_comma = False
                        position += 1
                        break
                    self.diagnostics.error(self.line_number, "redundant ','.")
                elif char == " ":
                    number_ended = True
                else:
                    self.diagnostics.error(
                        self.line_number,
                        "only integers can come after .data / .mat store command",
                    )
                position += 1

            text = "".join(member)
            if text or _char_at(self.line, position) in _END:
                return text, position
            position += 1


def parse_numbers(
    sentence: Sentence, line: str, position: int, line_number: int, diagnostics: Diagnostics
) -> None:
    """Read the integers of a ``.data`` directive into ``sentence.data``."""
    reader = _MemberReader(line, line_number, diagnostics)
    position = skip_spaces(line, position)
    values: list[int] = []

    while _char_at(line, position) not in _MEMBER_STOP and len(values) < MAX_DATA_ARR_SIZE:
        member, position = reader.read(position)
        values.append(_checked_value(_to_int(member), line_number, diagnostics))

    if not reader.expecting_comma:
        diagnostics.error(line_number, "missing data parameters")

    sentence.data = values


def _check_dimension(size: int, limit: int, line_number: int, diagnostics: Diagnostics) -> None:
    if size < 0 or size > limit:
        diagnostics.error(line_number, "data can't end with a comma")


def _parse_dimensions(
    sentence: Sentence, line: str, position: int, line_number: int, diagnostics: Diagnostics
) -> int:
    """Read ``[rows][cols]`` into the sentence and return the position after it."""
    expecting_open = True
    expecting_number = False
    brackets = 0
    digits = ""
    position = skip_spaces(line, position)

    while brackets < 4:
        char = _char_at(line, position)
        if char in _END:
            if expecting_open:
                diagnostics.error(line_number, "missing '[' as expected.")
            else:
                diagnostics.error(line_number, "matrix declaration not as expected")
            break
        if expecting_open:
            if char == "[":
                expecting_open = False
                expecting_number = True
                brackets += 1
            else:
                diagnostics.error(line_number, "missing '[' as expected.")
        elif expecting_number:
            if char in _DIGITS:
                digits += char
            elif char == "]":
                brackets += 1
                if brackets == 2:
                    sentence.matrix_rows = _to_int(digits)
                    digits = ""
                    expecting_open = True
                    _check_dimension(sentence.matrix_rows, MAX_ROWS, line_number, diagnostics)
                if brackets == 4:
                    sentence.matrix_cols = _to_int(digits)
                    expecting_number = False
                    _check_dimension(sentence.matrix_cols, MAX_COLS, line_number, diagnostics)
        else:
            diagnostics.error(line_number, "matrix declaration not as expected")
        position = skip_spaces(line, position + 1)

    return position


def parse_matrix(
    sentence: Sentence, line: str, position: int, line_number: int, diagnostics: Diagnostics
) -> None:
    """Read the dimensions and values of a ``.mat`` directive into the sentence.

    Cells that are not given are zero.
    """
    position = _parse_dimensions(sentence, line, position, line_number, diagnostics)
    expected = sentence.matrix_rows * sentence.matrix_cols
    capacity = MAX_ROWS * MAX_COLS

    if expected > capacity:
        diagnostics.note(
            line_number, "the matrix exceeds the possible matrix size supported"
        )
        sentence.matrix = []
        return

    position = skip_spaces(line, position)
    values: list[int] = []

    if _char_at(line, position) not in _END:
        reader = _MemberReader(line, line_number, diagnostics)
        while _char_at(line, position) not in _MEMBER_STOP and len(values) < capacity:
            member, position = reader.read(position)
            values.append(_checked_value(_to_int(member), line_number, diagnostics))

        if not reader.expecting_comma:
            diagnostics.note(line_number, "data can't end with a comma")
        if expected < len(values):
            diagnostics.note(
                line_number, "too many numbers for the declared size of matrix"
            )

    values.extend([0] * (expected - len(values)))
    sentence.matrix = values


def parse_string(
    sentence: Sentence, line: str, position: int, line_number: int, diagnostics: Diagnostics
) -> None:
    """Read the quoted text of a ``.string`` directive into ``sentence.string``."""
    if _char_at(line, position) != " ":
        diagnostics.error(line_number, "' ' expected after '.string' cmd")
    while _char_at(line, position) == " ":
        position += 1

    if _char_at(line, position) != '"':
        diagnostics.error(line_number, "'\"' expected at the beginning of the string")
    position += 1

    end = position
    while (char := _char_at(line, end)) not in _END and char != '"':
        end += 1
    sentence.string = line[position:end] if position < len(line) else ""
    position = end

    if _char_at(line, position) != '"':
        diagnostics.error(line_number, "'\"' expected at the end of the string")
    position += 1

    while _char_at(line, position) == " ":
        position += 1

    if _char_at(line, position) not in _END:
        diagnostics.error(line_number, "unexpected characters after string ended")


def parse_directive(
    sentence: Sentence, line: str, position: int, line_number: int, diagnostics: Diagnostics
) -> None:
    """Parse the operands of a storage directive according to ``sentence.guidance``."""
    if sentence.guidance == Guidance.NUM:
        parse_numbers(sentence, line, position, line_number, diagnostics)
    elif sentence.guidance == Guidance.MAT:
        parse_matrix(sentence, line, position, line_number, diagnostics)
    elif sentence.guidance == Guidance.STRING:
        parse_string(sentence, line, position, line_number, diagnostics)