import pytest
from hypothesis import given
from hypothesis import strategies as st

from cstrkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    to_lower,
    to_upper,
)

ASCII = range(128)
OUTSIDE_ASCII = st.one_of(st.integers(max_value=-1), st.integers(min_value=128))


@pytest.mark.parametrize("code", ASCII)
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == chr(code).isalpha()


@pytest.mark.parametrize("code", ASCII)
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == chr(code).isdigit()


@pytest.mark.parametrize("code", ASCII)
def test_is_alnum_is_union_of_alpha_and_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", ASCII)
def test_is_print_matches_printable_ascii(code):
    assert is_print(code) == (chr(code).isprintable())


def test_boundaries_of_printable_range():
    assert is_print(" ")
    assert is_print("~")
    assert not is_print(127)
    assert not is_print(31)


def test_is_ascii_bounds():
    assert is_ascii(0)
    assert is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


@given(OUTSIDE_ASCII)
def test_nothing_outside_ascii_is_classified(code):
    assert not any(
        f(code) for f in (is_alpha, is_digit, is_alnum, is_ascii, is_print)
    )


@given(OUTSIDE_ASCII)
def test_case_conversion_leaves_non_ascii_alone(code):
    assert to_upper(code) == code
    assert to_lower(code) == code


@pytest.mark.parametrize("code", ASCII)
def test_to_upper_matches_ascii_upper(code):
    assert to_upper(code) == ord(chr(code).upper())


@pytest.mark.parametrize("code", ASCII)
def test_to_lower_matches_ascii_lower(code):
    assert to_lower(code) == ord(chr(code).lower())


def test_case_conversion_on_characters():
    assert to_upper("a") == "A"
    assert to_lower("Z") == "z"
    assert to_upper("5") == "5"


def test_non_ascii_letter_is_not_alpha():
    assert not is_alpha("é")
    assert to_upper("é") == "é"


@pytest.mark.parametrize("code", ASCII)
def test_case_round_trip_for_letters(code):
    if is_alpha(code):
        assert to_lower(to_upper(code)) == to_lower(code)
        assert to_upper(to_lower(code)) == to_upper(code)
    else:
        assert to_upper(code) == code == to_lower(code)


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_non_integer_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)