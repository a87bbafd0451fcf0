import pytest

from pushswap.parsing import (
    INT_MAX,
    ParseError,
    parse_arguments,
    parse_number,
    sorted_values,
)


@pytest.mark.parametrize("text", ["0", "42", "123", "2147483647"])
def test_parse_number_reads_digits(text):
    assert parse_number(text) == int(text)


def test_parse_number_keeps_leading_zeros_out():
    assert parse_number("007") == 7


def test_parse_number_int_max():
    assert parse_number("2147483647") == 2147483647


def test_empty_text_stands_for_int_max():
    assert parse_number("") == INT_MAX


@pytest.mark.parametrize(
    "text",
    ["-1", "+5", "12a", " 1", "1 2", "2147483648", "123456789012", "9999999999"],
)
def test_parse_number_rejects(text):
    with pytest.raises(ParseError):
        parse_number(text)


def test_parse_error_is_a_value_error():
    with pytest.raises(ValueError):
        parse_number("x")


def test_parse_arguments_keeps_order():
    assert parse_arguments(["3", "1", "2"]) == [3, 1, 2]


def test_parse_arguments_rejects_duplicates():
    with pytest.raises(ParseError):
        parse_arguments(["4", "9", "4"])


def test_parse_arguments_rejects_equal_values_written_differently():
    with pytest.raises(ParseError):
        parse_arguments(["1", "01"])


def test_parse_arguments_rejects_bad_member():
    with pytest.raises(ParseError):
        parse_arguments(["1", "-2"])


def test_sorted_values_matches_parsed_values():
    args = ["30", "4", "17", "2147483647", "0"]
    assert sorted_values(args) == sorted(parse_arguments(args))


def test_sorted_values_is_ascending():
    result = sorted_values(["9", "3", "7", "1"])
    assert all(low <= high for low, high in zip(result, result[1:]))


def test_sorted_values_reads_like_atoi():
    assert sorted_values([" 5", "3", "-4"]) == [-4, 3, 5]


def test_sorted_values_empty_argument_is_zero():
    assert sorted_values([""]) == [0]