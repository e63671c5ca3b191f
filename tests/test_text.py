import pytest

from ocikit.text import Str, String, concat

WHITESPACE_CHARS = " \t\n  hello  \n\t "


def test_slice_covers_source_text():
    whitespace = Str.of(WHITESPACE_CHARS)
    assert str(whitespace) == WHITESPACE_CHARS
    assert len(whitespace) == 15


def test_equality():
    whitespace = Str.of(WHITESPACE_CHARS)
    assert whitespace == Str.of(" \t\n  hello  \n\t ")
    assert not (whitespace == Str.of("hello"))


def test_trim_start():
    assert Str.of(WHITESPACE_CHARS).trim_start() == Str.of("hello  \n\t ")


def test_trim_end():
    assert Str.of(WHITESPACE_CHARS).trim_end() == Str.of(" \t\n  hello")


def test_trim():
    full = Str.of(WHITESPACE_CHARS).trim()
    assert full == Str.of("hello")
    assert len(full) == 5


def test_trim_all_whitespace_gives_empty():
    assert len(Str.of(" \r\n\t").trim()) == 0


def test_split():
    left, right = Str.of("leftright").split(4)
    assert left == Str.of("left")
    assert right == Str.of("right")


def test_split_out_of_range():
    with pytest.raises(ValueError):
        Str.of("abc").split(3)


def test_slice_into_middle_of_text():
    assert Str(WHITESPACE_CHARS, 5, 5) == Str.of("hello")


def test_slice_bounds_are_checked():
    with pytest.raises(ValueError):
        Str("abc", 2, 5)
    with pytest.raises(ValueError):
        Str("abc", 4)


def test_string_round_trip_and_append():
    owned = Str.of("hello").to_string()
    assert str(owned) == "hello"
    owned.append(Str.of(", world"))
    assert str(owned) == "hello, world"
    assert len(owned) == 12
    assert owned.as_str() == Str.of("hello, world")


def test_concat():
    joined = concat(Str.of("left"), Str.of("right"))
    assert str(joined) == "leftright"
    assert isinstance(joined, String)