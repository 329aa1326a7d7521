import pytest

from gcode import (
    InvalidEncoding,
    decode_base32,
    encode_base32,
    from_base_digits,
    group_numeral,
    to_base_digits,
)
from gcode.base_n import decode_numeral, encode_numeral


def test_known_digits() -> None:
    assert to_base_digits(100, 32) == [3, 4]
    assert from_base_digits([3, 4], 32) == 100
    assert to_base_digits(0, 7) == [0]
    assert to_base_digits(75, 7) == [1, 3, 5]
    assert to_base_digits(2**70, 2) == [1] + [0] * 70


@pytest.mark.parametrize("base", [2, 3, 10, 32, 5630, 6000])
def test_digits_round_trip(base: int) -> None:
    for value in [0, 1, base - 1, base, base**3 + 17, 987654321]:
        assert from_base_digits(to_base_digits(value, base), base) == value


def test_invalid_digits() -> None:
    with pytest.raises(InvalidEncoding):
        to_base_digits(-1, 10)
    with pytest.raises(InvalidEncoding):
        to_base_digits(10, 1)
    with pytest.raises(InvalidEncoding):
        from_base_digits([1, 32], 32)


def test_base32_is_upper_case() -> None:
    assert encode_base32(75) == "2B"
    assert encode_base32(0) == "0"
    assert encode_base32(31) == "V"
    assert decode_base32("2B") == 75
    assert decode_base32("2b") == 75
    assert decode_base32("1234 5678 ABCD") == decode_base32("12345678ABCD")


@pytest.mark.parametrize("text", ["", "   ", "2W", "A-B", "!", "ß", "ﬁ", "1ß"])
def test_malformed_base32(text: str) -> None:
    with pytest.raises(InvalidEncoding):
        decode_base32(text)


def test_numeral_base_limits() -> None:
    assert encode_numeral(35, 36) == "Z"
    assert decode_numeral("Z", 36) == 35
    with pytest.raises(InvalidEncoding):
        encode_numeral(5, 37)
    with pytest.raises(InvalidEncoding):
        decode_numeral("1", 1)


def test_group_numeral() -> None:
    assert group_numeral("12345") == "12345"
    assert group_numeral("123456") == "123 456"
    assert group_numeral("12345678") == "123 45678"
    assert group_numeral("123456789") == "123 456 789"
    assert group_numeral("1234567890") == "12 3456 7890"
    assert group_numeral("123456781234") == "1234 5678 1234"
