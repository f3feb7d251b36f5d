"""Number conversions used by the assembler: binary words and the "strange" base 4."""

STRANGE_DIGITS = "abcd"
WORKING_BASE = 4
WORD_BITS = 10


def digit_to_strange(digit: int) -> str:
    """Return the strange base-4 letter for a digit between 0 and 3."""
    if not 0 <= digit < len(STRANGE_DIGITS):
        raise ValueError(f"digit {digit} is not in the strange base 4 table")
    return STRANGE_DIGITS[digit]


def to_base(number: int, base: int) -> int:
    """Write ``number`` in ``base`` and read the digits back as a decimal integer.

    Negative numbers keep their sign, so the result mirrors the positive case.
    """
    if number == 0 or base == 10:
        return number
    if base < 2:
        raise ValueError(f"invalid base {base}")
    if number < 0:
        return -to_base(-number, base)
    result = 0
    place = 1
    while number:
        number, remainder = divmod(number, base)
        result += remainder * place
        place *= 10
    return result


def to_binary(number: int, bits: int) -> str:
    """Return ``number`` as a two's complement string of ``bits - 1`` binary digits.

    ``bits`` counts one place for a terminator, so ``to_binary(n, 11)`` yields
    a ten-digit word.
    """
    width = bits - 1
    if width < 1:
        raise ValueError(f"cannot encode into {bits} bits")
    if abs(number) >= 1 << width:
        raise ValueError(f"{number} does not fit into {width} binary digits")
    return format(number & ((1 << width) - 1), f"0{width}b")


def ascii_to_binary(char: str) -> str:
    """Return the ten-digit binary word holding the character's code."""
    if len(char) != 1:
        raise ValueError("a single character is expected")
    return to_binary(ord(char), WORD_BITS + 1)


def base4_to_strange(number: int) -> str:
    """Convert a number whose decimal digits are base-4 digits into strange letters."""
    if number < 0:
        raise ValueError(f"negative number {number} cannot be written in strange base 4")
    return "".join(digit_to_strange(int(digit)) for digit in str(number))


def dec_to_strange(number: int) -> str:
    """Convert a decimal number into strange base 4."""
    return base4_to_strange(to_base(number, WORKING_BASE))


def binary_to_strange(bits: str) -> str:
    """Convert a ten-digit binary word into five strange base-4 letters."""
    if len(bits) != WORD_BITS or set(bits) - {"0", "1"}:
        raise ValueError(f"{bits!r} is not a {WORD_BITS}-digit binary word")
    return "".join(
        digit_to_strange(int(high + low, 2)) for high, low in zip(bits[::2], bits[1::2])
    )