import pytest

from solong.strings import (
    split,
    strchr,
    strmapi,
    strncmp,
    strnstr,
    strrchr,
    strtrim,
    substr,
)


def test_split_drops_empty_parts():
    assert split("  hello   world  ", " ") == ["hello", "world"]


def test_split_without_separator_gives_whole_text():
    assert split("hello", ",") == ["hello"]


def test_split_only_separators_is_empty():
    assert split(",,,", ",") == []
    assert split("", ",") == []


def test_split_accepts_character_code():
    assert split("a,b", ord(",")) == ["a", "b"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a,b", ",,")


def test_split_parts_join_back():
    text = "11111\n10C01\n1PE01\n11111"
    parts = split(text, "\n")
    assert "\n".join(parts) == text
    assert all("\n" not in part for part in parts)


def test_strtrim_removes_both_ends():
    assert strtrim("xxhixx", "x") == "hi"


def test_strtrim_newline():
    assert strtrim("10C01\n", "\n") == "10C01"


def test_strtrim_all_in_set_is_empty():
    assert strtrim("\n\n", "\n") == ""
    assert strtrim("", "\n") == ""


def test_strtrim_keeps_inner_characters():
    assert strtrim("x-x", "x") == "-"


def test_substr_within_text():
    assert substr("hello", 1, 3) == "ell"


def test_substr_clipped_to_end():
    assert substr("hello", 3, 100) == "lo"


def test_substr_start_past_end():
    assert substr("hello", 5, 2) == ""
    assert substr("hello", 50, 2) == ""


def test_substr_negative_start():
    with pytest.raises(ValueError):
        substr("hello", -1, 2)


def test_strnstr_found_inside_window():
    haystack = "foo bar baz"
    index = strnstr(haystack, "bar", len(haystack))
    assert haystack[index:index + 3] == "bar"


def test_strnstr_needle_past_window():
    assert strnstr("foo bar", "bar", 6) is None


def test_strnstr_empty_needle():
    assert strnstr("foo", "", 0) == 0


def test_strnstr_missing():
    assert strnstr("foo", "x", 3) is None


def test_strncmp_equal_prefix():
    assert strncmp("abc", "abd", 2) == 0


def test_strncmp_order():
    assert strncmp("abc", "abd", 3) < 0
    assert strncmp("abd", "abc", 3) > 0


def test_strncmp_zero_length():
    assert strncmp("a", "b", 0) == 0


def test_strncmp_shorter_string():
    assert strncmp("a", "", 1) == ord("a")
    assert strncmp("", "a", 1) == -ord("a")


def test_strncmp_identical_beyond_end():
    assert strncmp("map.ber", "map.ber", 100) == 0


def test_strmapi_upper():
    assert strmapi("hello", lambda i, c: c.upper()) == "HELLO"


def test_strmapi_passes_indices():
    seen = []
    strmapi("abc", lambda i, c: seen.append((i, c)) or c)
    assert seen == [(0, "a"), (1, "b"), (2, "c")]


def test_strchr_first_occurrence():
    text = "hello"
    index = strchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[:index]


def test_strrchr_last_occurrence():
    text = "hello"
    index = strrchr(text, "l")
    assert text[index] == "l"
    assert "l" not in text[index + 1:]
    assert index > strchr(text, "l")


def test_strchr_nul_is_end():
    assert strchr("01CEP", "\0") == len("01CEP")
    assert strrchr("01CEP", 0) == len("01CEP")


def test_strchr_missing():
    assert strchr("01CEP", "X") is None
    assert strrchr("01CEP", "X") is None


def test_strchr_rejects_long_char():
    with pytest.raises(ValueError):
        strchr("abc", "ab")