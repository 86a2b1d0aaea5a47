import pytest

from ftkit.strings import (
    strchr,
    strjoin,
    strlcat,
    strlcpy,
    strncmp,
    strndup,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


# strlcpy

def test_strlcpy_fits_whole_string():
    copied, total = strlcpy("hello", 10)
    assert copied == "hello"
    assert total == len("hello")


def test_strlcpy_truncates_to_size_minus_one():
    copied, total = strlcpy("hello", 3)
    assert copied == "he"
    assert total == len("hello")
    assert total >= 3


def test_strlcpy_zero_size_copies_nothing():
    assert strlcpy("hello", 0) == ("", len("hello"))


@pytest.mark.parametrize("size", [1, 2, 5, 6, 20])
def test_strlcpy_result_is_prefix_and_bounded(size):
    copied, _ = strlcpy("abcdef", size)
    assert "abcdef".startswith(copied)
    assert len(copied) <= size - 1


def test_strlcpy_negative_size_rejected():
    with pytest.raises(ValueError):
        strlcpy("abc", -1)


# strlcat

def test_strlcat_with_room():
    result, total = strlcat("foo", "bar", 20)
    assert result == "foobar"
    assert total == len("foo") + len("bar")


def test_strlcat_truncates_appended_part():
    result, total = strlcat("foo", "bar", 5)
    assert result.startswith("foo")
    assert len(result) == 4
    assert total == len("foo") + len("bar")


def test_strlcat_size_not_larger_than_dest_leaves_dest():
    result, total = strlcat("foobar", "xyz", 4)
    assert result == "foobar"
    assert total == len("xyz") + 4


def test_strlcat_rejects_non_string():
    with pytest.raises(TypeError):
        strlcat(b"foo", "bar", 10)


# strndup

def test_strndup_prefix():
    assert strndup("hello", 3) == "hel"


def test_strndup_longer_than_string_gives_whole():
    assert strndup("hi", 10) == "hi"


def test_strndup_negative_rejected():
    with pytest.raises(ValueError):
        strndup("hi", -2)


# strncmp

def test_strncmp_equal_strings():
    assert strncmp("abc", "abc", 3) == 0


def test_strncmp_only_first_n_compared():
    assert strncmp("abcX", "abcY", 3) == 0


def test_strncmp_sign_of_difference():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_is_antisymmetric():
    assert strncmp("apple", "apricot", 5) == -strncmp("apricot", "apple", 5)


def test_strncmp_shorter_string_sorts_first():
    assert strncmp("ab", "abc", 5) < 0
    assert strncmp("abc", "ab", 5) == ord("c")


def test_strncmp_zero_length():
    assert strncmp("a", "z", 0) == 0


# substr

def test_substr_middle():
    assert substr("hello world", 6, 5) == "world"


def test_substr_length_clamped():
    assert substr("hello", 2, 100) == "llo"


def test_substr_start_past_end_is_empty():
    assert substr("hello", 10, 3) == ""


def test_substr_rejects_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


# strjoin

def test_strjoin_concatenates():
    joined = strjoin("foo", "bar")
    assert joined.startswith("foo")
    assert joined.endswith("bar")
    assert len(joined) == len("foo") + len("bar")


def test_strjoin_with_empty():
    assert strjoin("", "x") == "x"
    assert strjoin("x", "") == "x"


# strtrim

def test_strtrim_both_ends():
    assert strtrim("  xx  ", " ") == "xx"


def test_strtrim_keeps_inner_characters():
    assert strtrim("--a-b--", "-") == "a-b"


def test_strtrim_everything_removed():
    assert strtrim("aaaa", "a") == ""


def test_strtrim_empty_set_returns_input():
    assert strtrim("  x  ", "") == "  x  "


# strchr / strrchr

def test_strchr_first_occurrence():
    s = "hello"
    index = strchr(s, "l")
    assert s[index] == "l"
    assert "l" not in s[:index]


def test_strrchr_last_occurrence():
    s = "hello"
    index = strrchr(s, "l")
    assert s[index] == "l"
    assert "l" not in s[index + 1 :]


def test_strchr_and_strrchr_missing():
    assert strchr("hello", "z") is None
    assert strrchr("hello", "z") is None


def test_nul_search_finds_end():
    assert strchr("abc", "\0") == len("abc")
    assert strrchr("abc", 0) == len("abc")


def test_strchr_accepts_integer_code():
    assert strchr("abc", ord("b")) == strchr("abc", "b")


def test_strchr_rejects_multi_character():
    with pytest.raises(ValueError):
        strchr("abc", "ab")


# strnstr

def test_strnstr_found_within_length():
    hay = "foo bar baz"
    index = strnstr(hay, "bar", len(hay))
    assert hay[index : index + len("bar")] == "bar"


def test_strnstr_needle_crossing_limit_not_found():
    assert strnstr("foo bar", "bar", 6) is None


def test_strnstr_needle_ending_at_limit_found():
    assert strnstr("foo bar", "bar", 7) == strchr("foo bar", "b")


def test_strnstr_empty_needle():
    assert strnstr("anything", "", 0) == 0


def test_strnstr_missing():
    assert strnstr("abc", "xyz", 3) is None