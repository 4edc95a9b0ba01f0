import pytest

from philosim.parse import INT_MAX, ArgumentError, is_space, parse_long, validate_args


@pytest.mark.parametrize("char", [" ", "\t", "\n", "\a"])
def test_is_space_accepts_blanks(char):
    assert is_space(char) is True


@pytest.mark.parametrize("char", ["a", "0", "-", "\x06", "!"])
def test_is_space_rejects_others(char):
    assert is_space(char) is False


def test_parse_long_plain_number():
    assert parse_long("42") == 42


def test_parse_long_skips_blanks_and_plus():
    assert parse_long(" \t +7") == 7


def test_parse_long_negative():
    assert parse_long("-5") == -5


def test_parse_long_rejects_trailing_garbage():
    assert parse_long("12a") == -1


def test_parse_long_rejects_inner_blank():
    assert parse_long("1 2") == -1


def test_parse_long_empty_is_zero():
    assert parse_long("") == 0


def test_parse_long_stops_past_int_max():
    assert parse_long("2147483648") == 2147483648
    assert parse_long("2147483648999") == 2147483648


def test_parse_long_int_max_exact():
    assert parse_long(str(INT_MAX)) == INT_MAX


def test_validate_args_returns_values():
    assert validate_args(["5", "800", "200", "200"]) == [5, 800, 200, 200]


def test_validate_args_with_meal_count():
    assert validate_args(["4", "410", "200", "200", "7"]) == [4, 410, 200, 200, 7]


@pytest.mark.parametrize("args", [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]])
def test_validate_args_wrong_count(args):
    with pytest.raises(ArgumentError, match="Wrong number of arguments"):
        validate_args(args)


@pytest.mark.parametrize("bad", ["0", "-1", "abc", "", "2147483648", "3x"])
def test_validate_args_rejects_bad_values(bad):
    with pytest.raises(ArgumentError):
        validate_args(["5", bad, "200", "200"])