import pytest

from philo.parsing import (
    ArgumentError,
    Settings,
    all_digits,
    check_limits,
    parse_arguments,
    parse_number,
)


@pytest.mark.parametrize(
    "text, expected",
    [("42", 42), ("  42", 42), ("\t\n7", 7), ("12abc", 12), ("", 0), ("abc", 0)],
)
def test_parse_number(text, expected):
    assert parse_number(text) == expected


def test_all_digits_accepts_plain_numbers():
    assert all_digits(["5", "800", "200", "200"]) is True


@pytest.mark.parametrize("bad", ["-1", "1a", "+3", " 4", "2.5"])
def test_all_digits_rejects_other_characters(bad):
    assert all_digits(["5", bad]) is False


def test_all_digits_accepts_empty_string():
    assert all_digits([""]) is True


def test_check_limits_too_many_philosophers():
    with pytest.raises(ArgumentError) as info:
        check_limits(["201", "1", "1", "1"])
    assert info.value.message == "Number of philosophers can't exceed 200"
    assert info.value.to_stdout is False


def test_check_limits_no_philosophers():
    with pytest.raises(ArgumentError) as info:
        check_limits(["0", "1", "1", "1"])
    assert info.value.message == "Add at least one philosopher"
    assert info.value.to_stdout is True


def test_check_limits_argument_too_large():
    with pytest.raises(ArgumentError) as info:
        check_limits(["5", "4294967296", "1", "1"])
    assert info.value.message == "Don't exceed the size_t max in arguments"


def test_check_limits_boundaries_pass():
    assert check_limits(["200", "4294967295", "1", "1"]) is None


@pytest.mark.parametrize("args", [[], ["1", "2", "3"], ["1", "2", "3", "4", "5", "6"]])
def test_parse_arguments_wrong_count(args):
    with pytest.raises(ArgumentError, match="correct number of arguments"):
        parse_arguments(args)


def test_parse_arguments_rejects_negative():
    with pytest.raises(ArgumentError, match="Only positive numbers"):
        parse_arguments(["-5", "800", "200", "200"])


def test_parse_arguments_four_values():
    settings = parse_arguments(["5", "800", "200", "100"])
    assert settings == Settings(5, 800, 200, 100, None)


def test_parse_arguments_with_meals():
    settings = parse_arguments(["3", "410", "200", "200", "7"])
    assert settings.meals == 7
    assert settings.philosophers == 3