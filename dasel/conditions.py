"""Conditions used by dynamic selectors."""

from __future__ import annotations

import math
import re
from abc import ABC, abstractmethod
from dataclasses import dataclass
from decimal import Decimal

from .errors import (
    DaselError,
    InvalidIndexError,
    UnexpectedPreviousNilValueError,
    UnhandledCheckTypeError,
    UnsupportedSelectorError,
    UnsupportedTypeForSelectorError,
    ValueNotFoundError,
)

_BRACKETED = re.compile(r"\[(.*)\]")


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    sign, digit_tuple, exponent = Decimal(repr(value)).as_tuple()
    digits = "".join(str(d) for d in digit_tuple).lstrip("0") or "0"
    while len(digits) > 1 and digits.endswith("0"):
        digits = digits[:-1]
        exponent += 1
    point = len(digits) - 1 + exponent
    prefix = "-" if sign else ""
    if point < -4 or point >= 6:
        mantissa = digits[0] + (f".{digits[1:]}" if len(digits) > 1 else "")
        return f"{prefix}{mantissa}e{'-' if point < 0 else '+'}{abs(point):02d}"
    if point < 0:
        return f"{prefix}0.{'0' * (-point - 1)}{digits}"
    whole = digits[: point + 1].ljust(point + 1, "0")
    fraction = digits[point + 1 :]
    return prefix + whole + (f".{fraction}" if fraction else "")


def _key_order(key: object) -> tuple:
    if isinstance(key, bool):
        return (0, int(key), "")
    if isinstance(key, (int, float)):
        return (1, key, "")
    return (2, 0, format_value(key))


def format_value(value: object) -> str:
    """Render a value the way it is compared inside conditions."""
    if value is None:
        return "<nil>"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, dict):
        items = sorted(value.items(), key=lambda item: _key_order(item[0]))
        return "map[" + " ".join(f"{format_value(k)}:{format_value(v)}" for k, v in items) + "]"
    if isinstance(value, (list, tuple)):
        return "[" + " ".join(format_value(v) for v in value) + "]"
    return str(value)


def _split_selector(selector: str) -> list[str]:
    parts: list[str] = []
    current: list[str] = []
    depth = 0
    for char in selector:
        if char in "[(":
            depth += 1
        elif char in "])":
            depth -= 1
        if char == "." and depth == 0:
            parts.append("".join(current))
            current = []
        else:
            current.append(char)
    parts.append("".join(current))
    return [part for part in parts if part]


def _step(value: object, part: str) -> object:
    if value is None:
        raise UnexpectedPreviousNilValueError(part)
    match = _BRACKETED.fullmatch(part)
    if match is None:
        if part.startswith("("):
            raise UnsupportedSelectorError(part)
        if not isinstance(value, dict):
            raise UnsupportedTypeForSelectorError("PROPERTY", part, value)
        if part not in value:
            raise ValueNotFoundError(part, value)
        return value[part]
    inner = match.group(1)
    if inner == "#":
        if isinstance(value, (dict, list, str)):
            return len(value)
        raise UnsupportedTypeForSelectorError("LENGTH", part, value)
    if not isinstance(value, list):
        raise UnsupportedTypeForSelectorError("INDEX", part, value)
    try:
        index = int(inner)
    except ValueError:
        raise InvalidIndexError(inner) from None
    if 0 <= index < len(value):
        return value[index]
    raise ValueNotFoundError(part, value)


def _query(root: object, selector: str) -> object:
    current = root
    for part in _split_selector(selector):
        current = _step(current, part)
    return current


def _is_self_key(key: str) -> bool:
    return key in ("value", ".")


class Condition(ABC):
    """A check used within dynamic selectors."""

    @abstractmethod
    def check(self, other: object) -> bool:
        """Return whether the given value satisfies the condition."""


@dataclass(frozen=True)
class EqualCondition(Condition):
    """Matches when the value at ``key`` renders exactly as ``value``."""

    key: str
    value: str
    negate: bool = False

    def _compare(self, found: object) -> bool:
        return (format_value(found) == self.value) != self.negate

    def check(self, other: object) -> bool:
        if other is None:
            raise UnhandledCheckTypeError(None)
        if _is_self_key(self.key):
            return self._compare(other)
        try:
            found = _query(other, self.key)
        except (ValueNotFoundError, UnsupportedTypeForSelectorError):
            return False
        except DaselError as err:
            raise DaselError(f"subquery failed: {err}") from err
        return self._compare(found)


@dataclass(frozen=True)
class KeyEqualCondition(Condition):
    """Matches when the key being visited equals ``value``."""

    value: str
    negate: bool = False

    def check(self, other: object) -> bool:
        if other is None:
            raise UnhandledCheckTypeError(None)
        key = other if isinstance(other, str) else format_value(other)
        return (self.value == key) != self.negate


@dataclass(frozen=True)
class SortedComparisonCondition(Condition):
    """Matches when the value at ``key`` sorts before or after ``value``."""

    key: str
    value: str
    equal: bool = False
    after: bool = False

    def check(self, other: object) -> bool:
        if other is None:
            raise UnhandledCheckTypeError(None)
        if _is_self_key(self.key):
            return format_value(other) == self.value
        try:
            found = _query(other, self.key)
        except ValueNotFoundError:
            return False
        except DaselError as err:
            raise DaselError(f"subquery failed: {err}") from err

        found_str = format_value(found)
        if found_str == self.value:
            return self.equal
        first, second = sorted([found_str, self.value])
        if not self.after:
            return second == self.value
        return first == self.value