"""EAN-13 symbol encoder.

Converts a number into the ordered list of binary bar patterns that
make up an EAN-13 symbol.

Encoding algorithm:
1. Validate and zero-pad the number, appending the check digit if absent
2. Look up the parity key from the first digit
3. Encode digits 2-7 with the left-hand table, choosing odd or even
   parity per position from the parity key
4. Encode digits 8-13 with the right-hand table
5. Frame both halves with the start, middle and end guards

The first digit is never drawn as bars; it is carried only by the
parity pattern of the left half.
"""

from __future__ import annotations

import structlog

from .digits import EAN13_LENGTH, PAYLOAD_LENGTH, complete
from .errors import EncodingError

logger = structlog.get_logger(__name__)

# Parity key per first digit: "0" = odd encoding, "1" = even encoding
PARITY_KEY: dict[int, str] = {
    0: "000000",
    1: "001011",
    2: "001101",
    3: "001110",
    4: "010011",
    5: "011001",
    6: "011100",
    7: "010101",
    8: "010110",
    9: "011010",
}

# Left-hand patterns indexed by parity ("0" odd, "1" even) then digit
LEFT_PARITY: dict[str, tuple[str, ...]] = {
    "0": (
        "0001101",
        "0011001",
        "0010011",
        "0111101",
        "0100011",
        "0110001",
        "0101111",
        "0111011",
        "0110111",
        "0001011",
    ),
    "1": (
        "0100111",
        "0110011",
        "0011011",
        "0100001",
        "0011101",
        "0111001",
        "0000101",
        "0010001",
        "0001001",
        "0010111",
    ),
}

RIGHT_PARITY: tuple[str, ...] = (
    "1110010",
    "1100110",
    "1101100",
    "1000010",
    "1011100",
    "1001110",
    "1010000",
    "1000100",
    "1001000",
    "1110100",
)

GUARD: dict[str, str] = {
    "start": "101",
    "middle": "01010",
    "end": "101",
}

# Total modules in a symbol: 3 + 6*7 + 5 + 6*7 + 3
SYMBOL_MODULES = 95


def parity_key(number: str) -> str:
    """Return the left-half parity key selected by the first digit."""
    return PARITY_KEY[int(number[0])]


def encode(number: str) -> list[str]:
    """Encode a number into EAN-13 bar patterns.

    Args:
        number: 12 or 13 digits. Shorter inputs are zero-padded; a
            12-digit number gets its check digit appended.

    Returns:
        15 binary strings: start guard, six left digits, middle guard,
        six right digits, end guard. "1" is a bar, "0" a space.

    Raises:
        InvalidDigits: If the number is not numeric or too long.
        EncodingError: If the completed number is not 13 digits.
    """
    digits = complete(number)
    if len(digits) != EAN13_LENGTH:
        raise EncodingError(f"Cannot encode {len(digits)} digits, expected {EAN13_LENGTH}")

    key = parity_key(digits)
    bars = [GUARD["start"]]
    for i in range(1, EAN13_LENGTH):
        digit = int(digits[i])
        if i <= PAYLOAD_LENGTH // 2:
            bars.append(LEFT_PARITY[key[i - 1]][digit])
        else:
            bars.append(RIGHT_PARITY[digit])
        if i == PAYLOAD_LENGTH // 2:
            bars.append(GUARD["middle"])
    bars.append(GUARD["end"])

    logger.debug("number_encoded", number=digits, parity_key=key, pattern_count=len(bars))
    return bars


def modules(bars: list[str]) -> str:
    """Concatenate bar patterns into a single module string."""
    return "".join(bars)


def is_guard(pattern: str) -> bool:
    """True if pattern is a start, middle or end guard."""
    return len(pattern) in (len(GUARD["start"]), len(GUARD["middle"]))
