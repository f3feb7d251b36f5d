# strangeasm

`strangeasm` reads source code for a small 10-bit teaching machine and runs
the first pass of a two-pass assembler over it. The pass parses each line,
builds the symbol table, fills the data image and counts the instruction
words. The package also has the number conversions that the machine's
output format uses. In that format each pair of bits becomes one of the
letters `a`, `b`, `c` and `d`.

## Installing

```
pip install .
```

The package needs only the standard library. To run the tests:

```
pip install .[test]
pytest
```

## The language

- Lines that begin with `;` are comments. Blank lines are skipped.
- A label stands in the first column and ends with `:`. The label and its
  colon together may take up to 30 characters.
- Directives: `.data`, `.string`, `.mat`, `.entry` and `.extern`.
- Sixteen instructions, `mov` through `stop`, with these operand forms:
  - immediate (`#5`, from -128 to 127)
  - direct (`LABEL`)
  - matrix (`M1[r1][r2]`)
  - register (`r0` to `r7`)
- Values stored with `.data` and `.mat` must lie between -512 and 511.

```
; sample
MAIN:   mov  #3, r1
        add  M1[r2][r3], LEN
        stop
LEN:    .data 6, -9, 15
M1:     .mat [2][2] 1, 2, 3, 4
STR:    .string "abcd"
        .extern OUT
```

## Using it

```python
import sys

from strangeasm.model import Diagnostics
from strangeasm.first_pass import run_first_pass, FirstPassError

with open("prog.as") as source:
    lines = source.readlines()

diagnostics = Diagnostics(stream=sys.stderr)   # stream is optional
try:
    assembly = run_first_pass(lines, diagnostics)
except FirstPassError as error:
    for entry in error.diagnostics.entries:
        print(entry)          # "Error in line 3 - ..."
else:
    for symbol in assembly.symbols:
        print(symbol.name, symbol.address, symbol.kind)
    for word in assembly.data:
        print(word.address, word.bits)
```

`run_first_pass` returns an `Assembly`. It has these attributes:

- `symbols`: a list of `SymbolEntry`, each with `name`, `address`,
  `is_extern` and `kind`, where `kind` is a `SymbolKind`.
- `data`: a list of `MemoryWord`, each with `address` and ten-digit `bits`.
- `sentences`: the parsed `Sentence` for each line.
- `ic` and `dc`: the final instruction and data counters.

Code addresses start at 100. External symbols get the address -999. When the
pass ends without errors, every data symbol's address is moved past the end
of the code by adding the final instruction counter.

`Diagnostics` collects every message as it is found. Its `failed` flag is
set by errors that stop the assembly. Some messages are recorded as errors
but do not set the flag.

### Conversions

```python
from strangeasm.conversions import to_binary, binary_to_strange, dec_to_strange

to_binary(5, 11)                    # '0000000101'
binary_to_strange("0000000101")     # 'aaaab'
dec_to_strange(100)                 # 'bcba'
```

`to_binary(number, bits)` writes `bits - 1` two's complement digits. It
raises `ValueError` when the number does not fit.

### Lower-level pieces

These can also be used on their own:

- `strangeasm.parser.parse_sentence` parses a single line into a `Sentence`.
- `strangeasm.operands.parse_operands` handles instruction operands.
- `strangeasm.directives.parse_directive` handles `.data`, `.string` and
  `.mat`.
- `strangeasm.lexer` splits a line into words and checks symbol names.
- `strangeasm.tables` holds the lookups `find_opcode`, `find_register`,
  `operand_type_words` and `is_reserved`.

## What it does not do

The package stops after the first pass. It does not encode instructions into
machine words, so `Assembly.code` stays empty. It does not resolve `.entry`
or external references, and it writes no object, entry or extern files. It
has no command-line program. You call it from Python.