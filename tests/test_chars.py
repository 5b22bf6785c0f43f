import string

import pytest
from hypothesis import given
from hypothesis import strategies as st

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_space,
    to_lower,
    to_upper,
)

ASCII_CODES = range(0, 256)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_alpha_matches_ascii_letters(code):
    assert is_alpha(code) == (chr(code) in string.ascii_letters)
    assert is_alpha(chr(code)) == (chr(code) in string.ascii_letters)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_digit_matches_ascii_digits(code):
    assert is_digit(code) == (chr(code) in string.digits)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_alnum_is_alpha_or_digit(code):
    assert is_alnum(code) == (is_alpha(code) or is_digit(code))


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_print_matches_range(code):
    assert is_print(code) == (32 <= code <= 126)


@pytest.mark.parametrize("code", ASCII_CODES)
def test_is_space_set(code):
    assert is_space(code) == (code in (9, 10, 11, 12, 13, 32))


def test_is_ascii_bounds():
    assert is_ascii(0) and is_ascii(127)
    assert not is_ascii(128)
    assert not is_ascii(-1)


def test_space_excludes_non_ascii_whitespace():
    assert "\u00a0".isspace()
    assert not is_space("\u00a0")


@pytest.mark.parametrize("letter", string.ascii_lowercase)
def test_to_upper_on_lowercase(letter):
    assert to_upper(letter) == letter.upper()
    assert to_upper(ord(letter)) == ord(letter.upper())


@pytest.mark.parametrize("letter", string.ascii_uppercase)
def test_to_lower_on_uppercase(letter):
    assert to_lower(letter) == letter.lower()
    assert to_lower(ord(letter)) == ord(letter.lower())


@given(st.integers(min_value=0, max_value=0x10FFFF))
def test_case_converters_leave_non_letters_unchanged(code):
    if is_alpha(code):
        assert to_lower(to_upper(code)) == to_lower(code)
    else:
        assert to_upper(code) == code
        assert to_lower(code) == code


def test_non_ascii_letters_unchanged():
    assert to_upper("\u00e9") == "\u00e9"
    assert to_lower("\u00c9") == "\u00c9"


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")


def test_empty_string_rejected():
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)