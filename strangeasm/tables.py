"""Fixed tables of the assembly language: opcodes, registers and reserved words."""

from __future__ import annotations

from dataclasses import dataclass

MAX_DATA_ARR_SIZE = 10
MAX_ROWS = 10
MAX_COLS = 10
MAX_STRING_SIZE = 80
MAX_SYMBOL_SIZE = 31

IMMEDIATE_OPERAND_TYPE = "00"
DIRECT_OPERAND_TYPE = "01"
MATRIX_OPERAND_TYPE = "10"
REGISTER_OPERAND_TYPE = "11"


@dataclass(frozen=True)
class Opcode:
    """An instruction with its binary code and the addressing types it accepts."""

    name: str
    code: str
    operand_count: int
    source_types: tuple[int, ...]
    dest_types: tuple[int, ...]


@dataclass(frozen=True)
class Register:
    """A register and its binary code."""

    name: str
    code: str


OPCODES: tuple[Opcode, ...] = (
    Opcode("mov", "0000", 2, (0, 1, 2, 3), (1, 2, 3)),
    Opcode("cmp", "0001", 2, (0, 1, 2, 3), (0, 1, 2, 3)),
    Opcode("add", "0010", 2, (0, 1, 2, 3), (1, 2, 3)),
    Opcode("sub", "0011", 2, (0, 1, 2, 3), (1, 2, 3)),
    Opcode("not", "0100", 1, (), (1, 2, 3)),
    Opcode("clr", "0101", 1, (), (1, 2, 3)),
    Opcode("lea", "0110", 2, (1, 2), (1, 2, 3)),
    Opcode("inc", "0111", 1, (), (1, 2, 3)),
    Opcode("dec", "1000", 1, (), (1, 2, 3)),
    Opcode("jmp", "1001", 1, (), (1, 2, 3)),
    Opcode("bne", "1010", 1, (), (1, 2, 3)),
    Opcode("red", "1011", 1, (), (1, 2, 3)),
    Opcode("prn", "1100", 1, (), (0, 1, 2, 3)),
    Opcode("jsr", "1101", 1, (), (1, 2, 3)),
    Opcode("rts", "1110", 0, (), ()),
    Opcode("stop", "1111", 0, (), ()),
)

REGISTERS: tuple[Register, ...] = tuple(
    Register(f"r{number}", format(number, "04b")) for number in range(8)
)

# How many memory words each operand addressing type occupies.
OPERAND_WORDS: dict[str, int] = {
    IMMEDIATE_OPERAND_TYPE: 1,
    DIRECT_OPERAND_TYPE: 1,
    MATRIX_OPERAND_TYPE: 2,
    REGISTER_OPERAND_TYPE: 1,
}

RESERVED_WORDS: tuple[str, ...] = (
    ".extern", ".entry", ".data", ".mat", ".string",
    *(opcode.name for opcode in OPCODES),
    *(register.name for register in REGISTERS),
)

_OPCODES_BY_NAME = {opcode.name: opcode for opcode in OPCODES}
_REGISTERS_BY_NAME = {register.name: register for register in REGISTERS}
_RESERVED = frozenset(RESERVED_WORDS)


def find_opcode(name: str) -> Opcode | None:
    """Return the opcode called ``name`` (case-insensitive), or None."""
    return _OPCODES_BY_NAME.get(name.lower())


def find_register(name: str) -> Register | None:
    """Return the register called ``name``, or None."""
    return _REGISTERS_BY_NAME.get(name)


def operand_type_words(operand_type: str) -> int:
    """Return the memory words an operand type uses; 0 for no or unknown type."""
    return OPERAND_WORDS.get(operand_type, 0)


def is_reserved(word: str) -> bool:
    """Tell whether ``word`` is a reserved word of the language (case-insensitive)."""
    return word.lower() in _RESERVED