import string

import pytest

from ftkit.chars import (
    is_alnum,
    is_alpha,
    is_ascii,
    is_digit,
    is_print,
    is_whitespace,
    to_lower,
    to_upper,
)

ASCII = [chr(i) for i in range(128)]


@pytest.mark.parametrize("ch", ASCII)
def test_is_alpha_matches_ascii_letters(ch):
    assert is_alpha(ch) == (ch in string.ascii_letters)


@pytest.mark.parametrize("ch", ASCII)
def test_is_digit_matches_ascii_digits(ch):
    assert is_digit(ch) == (ch in string.digits)


@pytest.mark.parametrize("ch", ASCII)
def test_is_alnum_is_alpha_or_digit(ch):
    assert is_alnum(ch) == (is_alpha(ch) or is_digit(ch))


@pytest.mark.parametrize("ch", ASCII)
def test_is_whitespace_matches_stdlib_set(ch):
    assert is_whitespace(ch) == (ch in string.whitespace)


@pytest.mark.parametrize("ch", ASCII)
def test_is_print_matches_printable_without_control_whitespace(ch):
    expected = ch in string.printable and (ch == " " or ch not in string.whitespace)
    assert is_print(ch) == expected


def test_predicates_accept_integer_codes():
    assert is_alpha(ord("q")) is True
    assert is_digit(ord("7")) is True
    assert is_digit(ord("x")) is False


def test_is_ascii_bounds():
    assert is_ascii(0) is True
    assert is_ascii(127) is True
    assert is_ascii(128) is False
    assert is_ascii(-1) is False
    assert is_ascii("é") is False


def test_non_ascii_letters_are_not_alpha():
    assert is_alpha("é") is False
    assert is_digit("٣") is False
    assert is_whitespace("\u00a0") is False


@pytest.mark.parametrize("ch", string.ascii_lowercase)
def test_to_upper_letters(ch):
    assert to_upper(ch) == ch.upper()
    assert to_lower(to_upper(ch)) == ch


@pytest.mark.parametrize("ch", string.ascii_uppercase)
def test_to_lower_letters(ch):
    assert to_lower(ch) == ch.lower()
    assert to_upper(to_lower(ch)) == ch


@pytest.mark.parametrize("ch", string.digits + string.punctuation + " ")
def test_case_mapping_leaves_others_alone(ch):
    assert to_upper(ch) == ch
    assert to_lower(ch) == ch


def test_case_mapping_keeps_integer_kind():
    assert to_upper(ord("a")) == ord("A")
    assert to_lower(ord("Z")) == ord("z")
    assert to_upper(300) == 300


def test_multi_character_string_rejected():
    with pytest.raises(ValueError):
        is_alpha("ab")
    with pytest.raises(ValueError):
        to_upper("")


def test_wrong_type_rejected():
    with pytest.raises(TypeError):
        is_digit(1.5)
    with pytest.raises(TypeError):
        to_lower(None)