"""First pass of the assembler: symbol table, data image and instruction counter."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .conversions import ascii_to_binary, to_binary
from .model import Diagnostics, Guidance, Sentence, SymbolKind
from .parser import parse_sentence
from .tables import REGISTER_OPERAND_TYPE, operand_type_words

CODE_TABLE_START_ADDRESS = 100
EXTERN_ADDRESS = -999
LINE_LENGTH = 81
COMMENT_MARK = ";"

_WORD_BITS = 11
_STRING_TERMINATOR = "0" * (_WORD_BITS - 1)


@dataclass
class MemoryWord:
    """A ten-digit binary word and the address it is stored at."""

    address: int
    bits: str


@dataclass
class SymbolEntry:
    """A label with its address and where it lives."""

    name: str
    address: int
    is_extern: bool
    kind: SymbolKind


class FirstPassError(Exception):
    """Raised when the first pass found errors in the source."""

    def __init__(self, diagnostics: Diagnostics) -> None:
        self.diagnostics = diagnostics
        super().__init__("errors found in first pass")


@dataclass
class Assembly:
    """State built up while going over the source the first time."""

    diagnostics: Diagnostics = field(default_factory=Diagnostics)
    ic: int = CODE_TABLE_START_ADDRESS
    dc: int = 0
    symbols: list[SymbolEntry] = field(default_factory=list)
    data: list[MemoryWord] = field(default_factory=list)
    code: list[MemoryWord] = field(default_factory=list)
    sentences: list[Sentence] = field(default_factory=list)
    _line_number: int = field(default=0, init=False, repr=False, compare=False)

    def has_symbol(self, name: str) -> bool:
        """Tell whether a symbol called ``name`` is already in the table."""
        return any(entry.name == name for entry in self.symbols)

    def add_symbol(
        self, name: str, address: int, is_extern: bool, kind: SymbolKind
    ) -> SymbolEntry:
        """Append a symbol to the table and return it."""
        entry = SymbolEntry(name, address, is_extern, kind)
        self.symbols.append(entry)
        return entry

    def _store(self, bits: str) -> None:
        self.data.append(MemoryWord(self.dc, bits))
        self.dc += 1

    def _store_string(self, text: str) -> None:
        for char in text:
            try:
                bits = ascii_to_binary(char)
            except ValueError:
                self.diagnostics.error(
                    self._line_number,
                    f"character {char!r} cannot be stored in a memory word",
                )
                bits = _STRING_TERMINATOR
            self._store(bits)
        self._store(_STRING_TERMINATOR)

    def add_data(self, sentence: Sentence) -> None:
        """Append the words a storage directive defines to the data image."""
        if sentence.guidance == Guidance.STRING:
            self._store_string(sentence.string)
        elif sentence.guidance == Guidance.NUM:
            for value in sentence.data:
                self._store(to_binary(value, _WORD_BITS))
        elif sentence.guidance == Guidance.MAT:
            for value in sentence.matrix:
                self._store(to_binary(value, _WORD_BITS))

    def advance_code_counter(self, sentence: Sentence) -> None:
        """Advance the instruction counter by the words an instruction takes."""
        self.ic += 1
        if sentence.source_type == sentence.dest_type == REGISTER_OPERAND_TYPE:
            # Two register operands share a single word.
            self.ic += 1
            return
        self.ic += operand_type_words(sentence.source_type)
        self.ic += operand_type_words(sentence.dest_type)

    def relocate_data_symbols(self) -> None:
        """Move data symbols past the code by adding the final instruction counter."""
        for entry in self.symbols:
            if entry.kind == SymbolKind.DATA:
                entry.address += self.ic

    @staticmethod
    def _duplicate(name: str) -> str:
        return f"symbol {name} already exists in symbols table"

    def process(self, sentence: Sentence, line_number: int) -> None:
        """Account for one parsed sentence in the tables and counters."""
        self._line_number = line_number
        if sentence.is_store is True:
            if sentence.has_symbol:
                if self.has_symbol(sentence.symbol):
                    self.diagnostics.note(line_number, self._duplicate(sentence.symbol))
                else:
                    self.add_symbol(sentence.symbol, self.dc, False, SymbolKind.DATA)
            self.add_data(sentence)
        elif sentence.guidance == Guidance.EXTERN:
            self.add_symbol(sentence.symbol, EXTERN_ADDRESS, True, SymbolKind.NONE)
        else:
            if sentence.has_symbol:
                if self.has_symbol(sentence.symbol):
                    self.diagnostics.error(line_number, self._duplicate(sentence.symbol))
                else:
                    self.add_symbol(sentence.symbol, self.ic, False, SymbolKind.CODE)
            if sentence.is_action:
                self.advance_code_counter(sentence)
        self.sentences.append(sentence)


def _source_lines(lines: Iterable[str]) -> Iterator[str]:
    """Yield the lines as read through a fixed-size line buffer."""
    limit = LINE_LENGTH - 1
    for line in lines:
        while len(line) > limit:
            yield line[:limit]
            line = line[limit:]
        if line:
            yield line


def run_first_pass(
    lines: Iterable[str], diagnostics: Diagnostics | None = None
) -> Assembly:
    """Run the first pass over source lines and return the resulting assembly.

    Raises FirstPassError if any error that stops the assembly was found.
    """
    if diagnostics is None:
        diagnostics = Diagnostics()
    assembly = Assembly(diagnostics)

    for line_number, line in enumerate(_source_lines(lines), start=1):
        if line.startswith(COMMENT_MARK):
            continue
        sentence = parse_sentence(line, line_number, diagnostics)
        if sentence is None:
            continue
        assembly.process(sentence, line_number)

    if diagnostics.failed:
        raise FirstPassError(diagnostics)

    assembly.relocate_data_symbols()
    return assembly