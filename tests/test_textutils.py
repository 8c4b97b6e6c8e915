import pytest

from raycube.textutils import (
    atoi,
    count_words,
    is_alnum_str,
    is_digit,
    is_space,
    sort_strings,
    split,
    split_many,
    strncmp,
    strnstr,
    strtrim,
    substr,
)


@pytest.mark.parametrize("value", [0, 7, 255, 12345, -1, -255, 2147483647])
def test_atoi_round_trip(value):
    assert atoi(str(value)) == value


def test_atoi_skips_whitespace_and_plus():
    assert atoi(" \t\n+255") == atoi("255")


def test_atoi_stops_at_first_non_digit():
    assert atoi("220,100,0") == atoi("220")


def test_atoi_without_digits_is_zero():
    assert atoi("abc") == 0
    assert atoi("") == 0
    assert atoi("-") == 0


def test_atoi_single_sign_only():
    assert atoi("--5") == 0


def test_split_drops_empty_words():
    assert split(",,a,,b,", ",") == ["a", "b"]


def test_split_join_round_trip():
    words = ["NO", "./path", "x"]
    assert split(" ".join(words), " ") == words


def test_split_requires_single_char():
    with pytest.raises(ValueError):
        split("a b", "  ")


def test_split_many_uses_every_char_of_charset():
    assert split_many("F 220,100, 0\n", " ,\n") == ["F", "220", "100", "0"]


def test_split_many_empty_input():
    assert split_many("", " ,") == []
    assert split_many(" , ,", " ,") == []


def test_count_words_stops_at_newline():
    assert count_words("a b c\nd e", " ") == len(["a", "b", "c"])


def test_count_words_matches_split():
    line = "  NO   ./north.xpm  "
    assert count_words(line + "\n", " ") == len(split(line, " "))


def test_strtrim_both_ends():
    assert strtrim("  \nhello \n", " \n") == "hello"


def test_strtrim_everything():
    assert strtrim("   ", " ") == ""


def test_strtrim_empty_set_keeps_text():
    assert strtrim(" a ", "") == " a "


def test_substr_basic():
    assert substr("hello", 1, 3) == "ell"


def test_substr_past_end():
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 3, 10) == "lo"


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strncmp_equal_and_limited():
    assert strncmp("NO", "NO", 2) == 0
    assert strncmp("NORTH", "NOPE", 2) == 0
    assert strncmp("abc", "xyz", 0) == 0


def test_strncmp_sign():
    assert strncmp("a", "b", 1) < 0
    assert strncmp("b", "a", 1) > 0
    assert strncmp("ab", "a", 5) > 0


def test_strncmp_antisymmetric():
    assert strncmp("cub", "cuba", 4) == -strncmp("cuba", "cub", 4)


def test_strnstr_found_and_bounded():
    assert strnstr("map.cub", ".cub", 7) == 3
    assert strnstr("map.cub", ".cub", 6) is None
    assert strnstr("map.cub", ".xpm", 7) is None


def test_strnstr_empty_needle():
    assert strnstr("abc", "", 0) == 0


def test_is_digit_includes_signs():
    assert all(is_digit(c) for c in "0123456789+-")
    assert not is_digit("a")
    assert not is_digit(" ")


def test_is_space():
    assert all(is_space(c) for c in "\t\v\n\r\f ")
    assert not is_space("x")


def test_is_alnum_str():
    assert is_alnum_str("abc123")
    assert is_alnum_str("-12")
    assert is_alnum_str("")
    assert not is_alnum_str("12 3")
    assert not is_alnum_str("a.b")


def test_sort_strings_matches_sorted_for_distinct_words():
    items = ["west", "east", "north", "south"]
    assert sort_strings(items) == sorted(items)


def test_sort_strings_does_not_mutate_input():
    items = ["b", "a"]
    result = sort_strings(items)
    assert items == ["b", "a"]
    assert result == ["a", "b"]


def test_sort_strings_keeps_all_items():
    items = ["z", "a", "m", "a"]
    assert sorted(sort_strings(items)) == sorted(items)