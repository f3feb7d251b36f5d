"""Parsing of a whole source line into a sentence."""

from __future__ import annotations

from .directives import parse_directive
from .lexer import check_symbol, extern_or_entry_directive, next_word, skip_spaces, store_directive
from .model import Diagnostics, Guidance, Sentence
from .operands import parse_operands
from .tables import find_opcode

_STORE_GUIDANCE = {
    "data": Guidance.NUM,
    "mat": Guidance.MAT,
    "string": Guidance.STRING,
}


def is_blank(line: str) -> bool:
    """Tell whether the line holds nothing but spaces and tabs."""
    position = skip_spaces(line, 0)
    return position >= len(line) or line[position] == "\n"


def parse_sentence(line: str, line_number: int, diagnostics: Diagnostics) -> Sentence | None:
    """Parse one source line; blank lines give None."""
    if is_blank(line):
        return None

    sentence = Sentence()
    word, position = next_word(line, -1)

    symbol = check_symbol(word, line_number, diagnostics, True, True)
    if symbol is not None:
        if line[0] in " \t":
            diagnostics.error(line_number, "symbol doesn't start in 1st column")
            return sentence
        sentence.has_symbol = True
        sentence.symbol = symbol
        word, position = next_word(line, position)

    store = store_directive(word)
    if store is not None:
        sentence.is_store = True
        sentence.guidance = _STORE_GUIDANCE[store.lower()]
        parse_directive(sentence, line, position, line_number, diagnostics)
    else:
        link = extern_or_entry_directive(word)
        if link is not None:
            sentence.is_store = False
            sentence.guidance = Guidance.EXTERN if link.lower() == "extern" else Guidance.ENTRY
            word, position = next_word(line, position)
            if not word:
                diagnostics.error(line_number, "missing symbol after guidance command")
                return sentence
            name = check_symbol(word, line_number, diagnostics, False, True)
            if name is not None:
                if sentence.has_symbol:
                    diagnostics.warning(
                        line_number, "the line has both symbol and extern declaration"
                    )
                sentence.symbol = name

    if find_opcode(word) is not None:
        sentence.is_action = True
        sentence.opcode = word
        parse_operands(sentence, line, position, line_number, diagnostics)

    return sentence