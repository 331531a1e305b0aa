"""
Tests for the number reader.
"""
import io

import pytest

from src.numstat.errors import AllocationError
from src.numstat.reader import parse_number, read_numbers


def read(text: str) -> list[float]:
    return read_numbers(io.StringIO(text))


def test_whitespace_and_newlines():
    assert read("1 2\n3\t4\n\n  5\n") == [1.0, 2.0, 3.0, 4.0, 5.0]


def test_preserves_insertion_order():
    assert read("3 -1 2") == [3.0, -1.0, 2.0]


@pytest.mark.parametrize("token, expected", [
    ("42", 42.0),
    ("-2.5", -2.5),
    ("+7", 7.0),
    (".5", 0.5),
    ("5.", 5.0),
    ("1e3", 1000.0),
    ("-4.2E-1", -0.42),
])
def test_parse_number_accepts_decimal_reals(token, expected):
    assert parse_number(token) == pytest.approx(expected)


@pytest.mark.parametrize("token", ["three", "0x1A", "1,5", "nan", "inf", "1_000", "12abc", "-"])
def test_parse_number_rejects_other_tokens(token):
    assert parse_number(token) is None


def test_stops_at_first_non_numeric_token():
    assert read("1 2 three 4") == [1.0, 2.0]


def test_numbers_after_garbage_on_later_lines_are_ignored():
    assert read("1\n2\nfoo\n3\n4\n") == [1.0, 2.0]


def test_empty_stream():
    assert read("") == []


def test_only_garbage():
    assert read("hello world") == []


def test_grows_past_initial_capacity():
    text = " ".join(str(i) for i in range(1000))
    values = read(text)
    assert len(values) == 1000
    assert values[-1] == 999.0


def test_memory_error_becomes_allocation_error():
    class Exploding(io.StringIO):
        def __iter__(self):
            raise MemoryError

    with pytest.raises(AllocationError):
        read_numbers(Exploding("1 2 3"))


@pytest.mark.parametrize("token", ["1e400", "-1e400"])
def test_parse_number_rejects_overflowing_literals(token):
    assert parse_number(token) is None


def test_overflowing_literal_ends_the_input():
    assert read("1 2 1e400 3") == [1.0, 2.0]
