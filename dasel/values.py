"""Parsing of values given on the command line."""

from __future__ import annotations

import re

from .errors import DaselError

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1

_TRUE_WORDS = frozenset({"true", "t", "yes", "y", "1"})
_FALSE_WORDS = frozenset({"false", "f", "no", "n", "0"})


class ValueParseError(DaselError, ValueError):
    """Raised when a command line value cannot be converted to its type."""


def _parse_int(value: str) -> int:
    if _INT_PATTERN.fullmatch(value) is None:
        raise ValueParseError(
            f'could not parse int [{value}]: strconv.ParseInt: parsing "{value}": invalid syntax'
        )
    number = int(value)
    if not _INT64_MIN <= number <= _INT64_MAX:
        raise ValueParseError(
            f'could not parse int [{value}]: strconv.ParseInt: parsing "{value}": value out of range'
        )
    return number


def _parse_bool(value: str) -> bool:
    word = value.lower()
    if word in _TRUE_WORDS:
        return True
    if word in _FALSE_WORDS:
        return False
    raise ValueParseError(f"could not parse bool [{value}]: unhandled value")


def parse_value(value: str, value_type: str) -> object:
    """Convert ``value`` to the type named by ``value_type``."""
    kind = value_type.lower()
    if kind in ("string", "str"):
        return value
    if kind in ("int", "integer"):
        return _parse_int(value)
    if kind in ("bool", "boolean"):
        return _parse_bool(value)
    raise ValueParseError(f"unhandled type: {value_type}")


def should_read_from_stdin(file_flag: str) -> bool:
    """Return True when input should come from standard input."""
    return file_flag in ("", "stdin", "-")


def should_write_to_stdout(file_flag: str, out_flag: str) -> bool:
    """Return True when output should go to standard output."""
    if out_flag in ("stdout", "-"):
        return True
    return out_flag == "" and should_read_from_stdin(file_flag)


def get_map_from_types_values(input_types: list[str], input_values: list[str]) -> dict[str, object]:
    """Build a mapping from ``name=value`` pairs and their matching types."""
    if len(input_types) != len(input_values):
        raise ValueParseError(
            f"exactly {len(input_values)} types are required, got {len(input_types)}"
        )
    result: dict[str, object] = {}
    for value_type, arg in zip(input_types, input_values):
        name, _, raw = arg.partition("=")
        try:
            result[name] = parse_value(raw, value_type)
        except ValueParseError as err:
            raise ValueParseError(f"could not parse value [{name}]: {err}") from err
    return result