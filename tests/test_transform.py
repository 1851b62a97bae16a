import pytest

from libft.transform import (
    atoi,
    fstrjoin,
    itoa,
    split,
    strjoin,
    strmapi,
    striteri,
    strtrim,
    substr,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("42", 42),
        ("   -42abc", -42),
        ("+7", 7),
        ("\t\v\r\n-666_++__", -666),
        ("--5", 0),
        ("abc", 0),
        ("", 0),
        ("2147483647", 2147483647),
        ("-2147483648", -2147483648),
    ],
)
def test_atoi_values(text, expected):
    assert atoi(text) == expected


def test_atoi_stops_at_nul():
    assert atoi("12\x0034") == 12


def test_atoi_accepts_bytes():
    assert atoi(b"  -1337") == -1337


def test_atoi_result_stays_in_int32_range():
    for text in ("99999999999", "-99999999999", "18446744073709551617"):
        value = atoi(text)
        assert -(2**31) <= value < 2**31


@pytest.mark.parametrize("n, expected", [(666, "666"), (-666, "-666"), (1337, "1337"), (0, "0")])
def test_itoa_values(n, expected):
    assert itoa(n) == expected


@pytest.mark.parametrize("n", [0, 1, -1, 2147483647, -2147483648, 123456, -98765])
def test_itoa_atoi_round_trip(n):
    assert atoi(itoa(n)) == n


def test_split_drops_empty_pieces():
    assert split("  a b  c ", " ") == ["a", "b", "c"]


def test_split_none_and_empty():
    assert split(None, " ") is None
    assert split("", " ") == []
    assert split("    ", " ") == []


def test_split_pieces_contain_no_separator():
    text = "xxhelloxworldxxagainx"
    words = split(text, "x")
    assert all("x" not in word and word for word in words)
    assert "x".join(words) == "helloxworldxagain"


def test_split_bytes_with_int_separator():
    assert split(b"a,b,,c", ord(",")) == [b"a", b"b", b"c"]


def test_split_rejects_long_separator():
    with pytest.raises(ValueError):
        split("a b", "ab")


def test_substr_source_example():
    assert substr("KKK x ALM? Brotherhood!", 11, 13) == "Brotherhood!"


def test_substr_start_past_end_gives_empty():
    assert substr("abc", 10, 2) == ""
    assert substr("abc", 3, 2) == ""


def test_substr_none_and_negative():
    assert substr(None, 0, 1) is None
    with pytest.raises(ValueError):
        substr("abc", -1, 2)


def test_substr_length_limits():
    text = "Brotherhood"
    for start in range(len(text) + 1):
        for length in range(len(text) + 2):
            piece = substr(text, start, length)
            assert len(piece) <= length
            assert text.startswith(piece, start)


def test_strjoin_source_example():
    assert strjoin("KKK ", "x ALM") == "KKK x ALM"


def test_strjoin_missing_parts():
    assert strjoin(None, None) is None
    assert strjoin("abc", None) == "abc"
    assert strjoin(None, "def") == "def"


def test_fstrjoin_requires_both():
    assert fstrjoin("ab", "cd") == "abcd"
    assert fstrjoin(None, "cd") is None
    assert fstrjoin("ab", None) is None


def test_strtrim_source_example():
    assert strtrim(" KKKALM Brotherhood!KKK", "K") == " KKKALM Brotherhood!"


def test_strtrim_cases():
    assert strtrim("xxhixx", "x") == "hi"
    assert strtrim("xxxx", "x") == ""
    assert strtrim("  hi  ", "") == "  hi  "
    assert strtrim(None, "x") is None
    assert strtrim("abc", None) is None


def test_strtrim_ends_not_in_set():
    result = strtrim("-=+abc+=-", "-=+")
    assert result == "abc"
    assert result[0] not in "-=+" and result[-1] not in "-=+"


def test_strmapi_source_example():
    def map_function(index, c):
        if c == "A":
            return chr(ord(c) + 10)
        if c == "L":
            return chr(ord(c) - 1)
        return chr(ord(c) - 2)

    assert strmapi("ALM", map_function) == "KKK"


def test_strmapi_passes_indexes():
    seen = []
    strmapi("abc", lambda i, c: seen.append(i) or c)
    assert seen == [0, 1, 2]


def test_strmapi_bytes_and_none():
    assert strmapi(b"abc", lambda i, c: c - 32) == b"ABC"
    assert strmapi(None, lambda i, c: c) is None
    assert strmapi("abc", None) is None


def test_striteri_uppercase_bytearray():
    buf = bytearray(b"kkk")
    striteri(buf, lambda i, c: c - 32)
    assert buf == bytearray(b"KKK")


def test_striteri_list_keeps_on_none():
    chars = list("abcd")
    striteri(chars, lambda i, c: c.upper() if i % 2 == 0 else None)
    assert chars == ["A", "b", "C", "d"]


def test_striteri_stops_at_nul():
    buf = bytearray(b"ab\x00cd")
    striteri(buf, lambda i, c: c - 32)
    assert buf == bytearray(b"AB\x00cd")