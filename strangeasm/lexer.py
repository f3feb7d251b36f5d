"""Word-level scanning of source lines: words, symbols and directive names."""

from __future__ import annotations

import string

from .model import Diagnostics
from .tables import is_reserved

MAX_SYMBOL_LENGTH = 30

_BLANKS = " \t"
_LINE_END = "\n\0"
_WORD_DELIMITERS = " ,[]\n\t\0"
_ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)
_COMMANDS = frozenset({".data", ".mat", ".string", ".entry", ".extern"})
_STORE_DIRECTIVES = frozenset({".data", ".mat", ".string"})
_LINK_DIRECTIVES = frozenset({".extern", ".entry"})


def skip_spaces(line: str, position: int) -> int:
    """Return the first position at or after ``position`` that is not a space or tab."""
    while position < len(line) and line[position] in _BLANKS:
        position += 1
    return position


def next_word(line: str, last_position: int) -> tuple[str, int]:
    """Return the next word after ``last_position`` and the position where it ended.

    Words are split on blanks, commas and brackets; a trailing ``:`` or a
    leading ``.`` stays part of the word. Pass ``-1`` to start a new line.
    At the end of the line the word is empty.
    """
    position = last_position + 1
    while True:
        if position >= len(line) or line[position] in _LINE_END:
            return "", position
        end = position
        while end < len(line) and line[end] not in _WORD_DELIMITERS:
            end += 1
        if end > position:
            return line[position:end], end
        position = end + 1


def is_alphanumeric(text: str) -> bool:
    """Tell whether ``text`` holds only ASCII letters and digits."""
    return all(char in _ALPHANUMERIC for char in text)


def is_command(word: str) -> bool:
    """Tell whether ``word`` is one of the guidance commands (case-insensitive)."""
    return word.lower() in _COMMANDS


def check_reserved(word: str, line_number: int, diagnostics: Diagnostics, report: bool) -> bool:
    """Tell whether ``word`` is reserved; with ``report``, record that as an error."""
    if not is_reserved(word):
        return False
    if report:
        diagnostics.error(line_number, f"the word {word} is a saved word in the language")
    return True


def _starts_with_letter(word: str) -> bool:
    return bool(word) and word[0] in string.ascii_letters


def check_symbol(
    word: str,
    line_number: int,
    diagnostics: Diagnostics,
    at_line_start: bool,
    report: bool,
) -> str | None:
    """Return the symbol named by ``word``, or None if it is not a symbol.

    At the start of a line a symbol is a label and must end with ``:``,
    which is removed from the returned name.
    """
    if not _starts_with_letter(word) and not is_command(word):
        if word.startswith("."):
            diagnostics.error(line_number, "unknown command")
        else:
            diagnostics.error(
                line_number, "symbol cannot start with a non alphabetic character"
            )
        return None

    if at_line_start:
        if len(word) > MAX_SYMBOL_LENGTH:
            diagnostics.note(line_number, "The word is too long to be a symbol")
            return None
        if word.endswith(":"):
            name = word[:-1]
            if check_reserved(name, line_number, diagnostics, report):
                return None
            return name
        if not check_reserved(word, line_number, diagnostics, False):
            diagnostics.error(line_number, "the symbol is missing ':'")
        return None

    if len(word) <= MAX_SYMBOL_LENGTH and is_alphanumeric(word):
        if check_reserved(word, line_number, diagnostics, report):
            return None
        return word
    return None


def check_symbol_operand(word: str, line_number: int, diagnostics: Diagnostics) -> bool:
    """Tell whether an operand word names a symbol (not a register or opcode)."""
    if not _starts_with_letter(word) and not is_command(word):
        diagnostics.error(
            line_number, "operand cannot start with a non alphabetic character"
        )
        return False
    if len(word) <= MAX_SYMBOL_LENGTH and is_alphanumeric(word):
        return not check_reserved(word, line_number, diagnostics, False)
    return False


def store_directive(word: str) -> str | None:
    """Return the name of a ``.data``/``.mat``/``.string`` directive without its dot."""
    if word.lower() in _STORE_DIRECTIVES:
        return word[1:]
    return None


def extern_or_entry_directive(word: str) -> str | None:
    """Return the name of an ``.extern``/``.entry`` directive without its dot."""
    if word.lower() in _LINK_DIRECTIVES:
        return word[1:]
    return None