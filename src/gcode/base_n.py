from __future__ import annotations

from typing import List, Sequence

from .exceptions import InvalidEncoding

_DIGITS = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ"
_DIGIT_VALUES = {ch: value for value, ch in enumerate(_DIGITS)}


def _check_base(base: int) -> None:
    if base < 2:
        raise InvalidEncoding(f"base must be >= 2, got {base}")


def _check_numeral_base(base: int) -> None:
    if not 2 <= base <= len(_DIGITS):
        raise InvalidEncoding(
            f"numeral base must be between 2 and {len(_DIGITS)}, got {base}"
        )


def to_base_digits(value: int, base: int) -> List[int]:
    """Digits of ``value`` in ``base``, most significant first."""
    _check_base(base)
    if value < 0:
        raise InvalidEncoding(f"cannot convert negative value {value}")
    if value == 0:
        return [0]
    digits: List[int] = []
    while value > 0:
        value, remainder = divmod(value, base)
        digits.append(remainder)
    digits.reverse()
    return digits


def from_base_digits(digits: Sequence[int], base: int) -> int:
    _check_base(base)
    result = 0
    for digit in digits:
        if not 0 <= digit < base:
            raise InvalidEncoding(f"digit {digit} out of range for base {base}")
        result = result * base + digit
    return result


def encode_numeral(n: int, base: int = 32) -> str:
    _check_numeral_base(base)
    return "".join(_DIGITS[digit] for digit in to_base_digits(n, base))


def decode_numeral(text: str, base: int = 32) -> int:
    _check_numeral_base(base)
    cleaned = "".join(text.split())
    if not cleaned:
        raise InvalidEncoding("empty numeral")
    if not cleaned.isascii():
        raise InvalidEncoding(f"non-ASCII character in numeral {text!r}")
    cleaned = cleaned.upper()
    digits: List[int] = []
    for ch in cleaned:
        value = _DIGIT_VALUES.get(ch)
        if value is None or value >= base:
            raise InvalidEncoding(f"invalid base-{base} character {ch!r} in {text!r}")
        digits.append(value)
    return from_base_digits(digits, base)


def encode_base32(n: int) -> str:
    return encode_numeral(n, 32)


def decode_base32(text: str) -> int:
    return decode_numeral(text, 32)


def group_numeral(numeral: str) -> str:
    """Split a numeral into space-separated groups for reading aloud.

    Up to 5 characters stay whole, 6-8 become ``3 + rest``, 9 become three
    groups of 3, and anything longer is cut into 4s from the right.
    """
    size = len(numeral)
    if size < 6:
        return numeral
    if size < 9:
        return f"{numeral[:3]} {numeral[3:]}"
    if size == 9:
        return f"{numeral[:3]} {numeral[3:6]} {numeral[6:]}"
    groups: List[str] = []
    remaining = numeral
    while len(remaining) > 4:
        groups.append(remaining[-4:])
        remaining = remaining[:-4]
    groups.append(remaining)
    groups.reverse()
    return " ".join(groups)
