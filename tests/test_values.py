import pytest

from dasel.errors import DaselError
from dasel.values import (
    ValueParseError,
    get_map_from_types_values,
    parse_value,
    should_read_from_stdin,
    should_write_to_stdout,
)


@pytest.mark.parametrize(
    "value, value_type, expected",
    [
        ("a", "string", "a"),
        ("1", "string", "1"),
        ("1", "int", 1),
        ("true", "string", "true"),
        ("false", "string", "false"),
        ("true", "bool", True),
        ("false", "bool", False),
    ],
)
def test_parse_value(value, value_type, expected):
    result = parse_value(value, value_type)
    assert result == expected
    assert type(result) is type(expected)


@pytest.mark.parametrize(
    "value, value_type, message",
    [
        ("a", "int", 'could not parse int [a]: strconv.ParseInt: parsing "a": invalid syntax'),
        ("a", "bool", "could not parse bool [a]: unhandled value"),
        ("a", "bad", "unhandled type: bad"),
    ],
)
def test_parse_value_errors(value, value_type, message):
    with pytest.raises(ValueParseError) as info:
        parse_value(value, value_type)
    assert str(info.value) == message


def test_parse_value_invalid_int_asd():
    with pytest.raises(ValueParseError) as info:
        parse_value("asd", "int")
    assert str(info.value) == 'could not parse int [asd]: strconv.ParseInt: parsing "asd": invalid syntax'


@pytest.mark.parametrize("word", ["true", "T", "yes", "Y", "1"])
def test_parse_bool_true_words(word):
    assert parse_value(word, "boolean") is True


@pytest.mark.parametrize("word", ["false", "F", "no", "N", "0"])
def test_parse_bool_false_words(word):
    assert parse_value(word, "BOOL") is False


def test_parse_int_rejects_underscores_and_spaces():
    for raw in ["1_000", " 1"]:
        with pytest.raises(ValueParseError):
            parse_value(raw, "integer")


def test_parse_int_signed():
    assert parse_value("-42", "int") == -42
    assert parse_value("+42", "int") == 42


def test_parse_int_out_of_range():
    with pytest.raises(ValueParseError) as info:
        parse_value("9223372036854775808", "int")
    assert str(info.value).endswith("value out of range")
    assert parse_value("9223372036854775807", "int") == 9223372036854775807


def test_value_parse_error_is_dasel_error():
    with pytest.raises(DaselError):
        parse_value("x", "int")


def test_should_read_from_stdin():
    assert should_read_from_stdin("asd") is False
    assert should_read_from_stdin("") is True
    assert should_read_from_stdin("stdin") is True
    assert should_read_from_stdin("-") is True


@pytest.mark.parametrize(
    "file_flag, out_flag, expected",
    [
        ("", "", True),
        ("data.json", "", False),
        ("data.json", "-", True),
        ("data.json", "stdout", True),
        ("data.json", "other.json", False),
        ("-", "other.json", False),
    ],
)
def test_should_write_to_stdout(file_flag, out_flag, expected):
    assert should_write_to_stdout(file_flag, out_flag) is expected


def test_get_map_from_types_values_valid():
    got = get_map_from_types_values(["string", "int", "bool"], ["name=Tom", "age=27", "active=true"])
    assert got == {"name": "Tom", "age": 27, "active": True}


def test_get_map_from_types_values_invalid_types():
    with pytest.raises(ValueParseError) as info:
        get_map_from_types_values([], ["name=Tom"])
    assert str(info.value) == "exactly 1 types are required, got 0"


def test_get_map_from_types_values_mismatch_two_values():
    with pytest.raises(ValueParseError) as info:
        get_map_from_types_values(["string"], ["x", "y"])
    assert str(info.value) == "exactly 2 types are required, got 1"


def test_get_map_from_types_values_invalid_value():
    with pytest.raises(ValueParseError) as info:
        get_map_from_types_values(["int"], ["x=asd"])
    assert str(info.value) == (
        'could not parse value [x]: could not parse int [asd]: strconv.ParseInt: parsing "asd": invalid syntax'
    )


def test_get_map_keeps_equals_in_value():
    got = get_map_from_types_values(["string"], ["expr=a=b"])
    assert got == {"expr": "a=b"}


def test_get_map_object_values():
    got = get_map_from_types_values(["string", "int"], ["number=five", "rank=5"])
    assert got == {"number": "five", "rank": 5}