import pytest

from pushswap.libft.transform import (
    split,
    strjoin,
    strlcat,
    strlcpy,
    striteri,
    strmapi,
    strtrim,
    substr,
)


def test_split_drops_runs_of_separators():
    text = "          hola    how   is   it            "
    assert split(text, " ") == ["hola", "how", "is", "it"]


def test_split_only_separators_is_empty():
    assert split("     ", " ") == []
    assert split("", " ") == []


def test_split_rejoin_round_trip():
    words = ["12", "-4", "+7", "0"]
    assert split(" ".join(words), " ") == words


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "  ")


def test_strtrim_both_ends():
    assert strtrim("  42  ", " ") == "42"
    assert strtrim("xyhelloyx", "xy") == "hello"


def test_strtrim_everything_trimmed():
    assert strtrim("     ", " ") == ""


def test_strtrim_keeps_inner_characters():
    assert strtrim(" 1 2 ", " ") == "1 2"


def test_substr_basic_and_clamped():
    assert substr("pushswap", 4, 4) == "swap"
    assert substr("pushswap", 4, 100) == "swap"
    assert substr("pushswap", 8, 3) == ""


def test_substr_negative_raises():
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_strjoin():
    assert strjoin("push", "swap") == "pushswap"
    assert strjoin("", "") == ""


def test_strjoin_rejects_none():
    with pytest.raises(TypeError):
        strjoin(None, "a")


def test_strlcat_full_room():
    result, needed = strlcat("push", "swap", 20)
    assert result == "pushswap"
    assert needed == len("push") + len("swap")


def test_strlcat_truncates_to_size_minus_one():
    result, needed = strlcat("push", "swap", 6)
    assert len(result) == 5
    assert result == "push" + "swap"[:1]
    assert needed == 8


def test_strlcat_size_not_larger_than_dst():
    result, needed = strlcat("push", "swap", 3)
    assert result == "push"
    assert needed == 3 + len("swap")


def test_strlcpy():
    copy, length = strlcpy("pushswap", 5)
    assert copy == "push"
    assert length == len("pushswap")
    assert strlcpy("abc", 0) == ("", 3)
    assert strlcpy("abc", 10) == ("abc", 3)


def test_striteri_replaces_and_keeps():
    result = striteri("abcd", lambda i, ch: ch.upper() if i % 2 == 0 else None)
    assert result == "AbCd"


def test_strmapi_uses_index():
    assert strmapi("aaa", lambda i, ch: str(i)) == "012"


def test_strmapi_identity_round_trip():
    text = "push swap"
    assert strmapi(text, lambda i, ch: ch) == text