"""Digit-string utilities for EAN-13 numbers.

Handles validation and zero-padding of raw input and computation of
the EAN-13 check digit.
"""

from __future__ import annotations

import structlog

from .errors import InvalidDigits

logger = structlog.get_logger(__name__)

# Payload length without the check digit
PAYLOAD_LENGTH = 12
# Full symbol length including the check digit
EAN13_LENGTH = 13


def _is_digits(value: str) -> bool:
    # str.isdigit() also accepts superscripts and other Unicode digits
    return value.isascii() and value.isdigit()


def checksum(digits: str) -> int:
    """Compute the EAN-13 check digit.

    Walks the digits from the last one backward, alternating between an
    "even" sum (starting at the last digit) and an "odd" sum. This is the
    same as weighting the 12 payload digits 1, 3, 1, 3, ... left to right.

    Args:
        digits: 12 or 13 decimal digits.

    Returns:
        Check digit in 0-9.

    Raises:
        InvalidDigits: If digits is not 12 or 13 decimal digits.
    """
    if len(digits) not in (PAYLOAD_LENGTH, EAN13_LENGTH) or not _is_digits(digits):
        raise InvalidDigits(f"Checksum needs 12 or 13 digits, got {digits!r}")

    even = True
    even_sum = 0
    odd_sum = 0
    for char in reversed(digits):
        if even:
            even_sum += int(char)
        else:
            odd_sum += int(char)
        even = not even

    return (10 - ((3 * even_sum + odd_sum) % 10)) % 10


def normalize(raw: str) -> str:
    """Validate a raw number and left-pad it with zeros to 12 digits.

    A 13-digit number is returned unchanged; its last digit is taken to
    be a supplied check digit.

    Note that padding changes the represented value ("42" becomes
    "000000000042"), not just its string form.

    Args:
        raw: Up to 13 decimal digits.

    Returns:
        A 12- or 13-digit string.

    Raises:
        InvalidDigits: If raw is empty, non-numeric or longer than 13 characters.
    """
    if len(raw) > EAN13_LENGTH:
        raise InvalidDigits(f"Number is longer than 13 digits: {len(raw)} characters")
    if not _is_digits(raw):
        raise InvalidDigits(f"Number contains non-digit characters: {raw!r}")

    return raw.rjust(PAYLOAD_LENGTH, "0")


def complete(raw: str, verify: bool = False) -> str:
    """Normalize a number and make sure it carries a check digit.

    Args:
        raw: Up to 13 decimal digits.
        verify: Reject a supplied 13th digit that does not match the
            computed check digit. By default it is trusted as given.

    Returns:
        The 13-digit EAN number.

    Raises:
        InvalidDigits: If raw is invalid, or verify is set and the
            supplied check digit is wrong.
    """
    number = normalize(raw)
    if len(number) == PAYLOAD_LENGTH:
        return number + str(checksum(number))

    expected = checksum(number[:PAYLOAD_LENGTH])
    if int(number[-1]) != expected:
        if verify:
            raise InvalidDigits(
                f"Check digit mismatch for {number}: expected {expected}, got {number[-1]}"
            )
        logger.debug("check_digit_mismatch", number=number, expected=expected)
    return number
