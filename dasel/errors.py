"""Exceptions raised while querying and modifying documents."""

from __future__ import annotations

_MISSING = object()


def _go_kind_and_type(value: object) -> tuple[str, str]:
    """Return the kind and type names used when describing a value."""
    if value is None:
        return "invalid", "<nil>"
    if isinstance(value, bool):
        return "bool", "bool"
    if isinstance(value, int):
        return "int", "int"
    if isinstance(value, float):
        return "float64", "float64"
    if isinstance(value, str):
        return "string", "string"
    if isinstance(value, dict):
        return "map", "map[string]interface {}"
    if isinstance(value, (list, tuple)):
        return "slice", "[]interface {}"
    return "struct", type(value).__name__


def _describe(value: object) -> str:
    from .conditions import format_value

    return format_value(value)


class DaselError(Exception):
    """Base class for every error raised by dasel."""


class MissingPreviousNodeError(DaselError):
    """Raised when a lookup has no access to the previous node."""

    def __init__(self) -> None:
        super().__init__("missing previous node")


class UnknownComparisonOperatorError(DaselError):
    """Raised when a comparison operator is not recognised."""

    def __init__(self, operator: str) -> None:
        self.operator = operator
        super().__init__(f"unknown comparison operator: {operator}")


class InvalidIndexError(DaselError):
    """Raised when a selector targets an index that does not exist."""

    def __init__(self, index: str) -> None:
        self.index = index
        super().__init__(f"invalid index: {index}")


class UnsupportedSelectorError(DaselError):
    """Raised when a selector type is used in the wrong context."""

    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__(f"selector is not supported here: {selector}")


class UnsupportedTypeForSelectorError(DaselError):
    """Raised when a selector meets a value type it cannot handle."""

    def __init__(self, selector_type: str, selector: str, value: object) -> None:
        self.selector_type = selector_type
        self.selector = selector
        self.value = value
        kind, type_name = _go_kind_and_type(value)
        super().__init__(
            f"selector [type:{selector_type} selector:{selector}] does not support value: "
            f"[kind:{kind} type:{type_name}] {_describe(value)}"
        )


class ValueNotFoundError(DaselError):
    """Raised when a selector cannot be fully resolved."""

    def __init__(self, selector: str, previous_value: object = _MISSING) -> None:
        self.selector = selector
        self.previous_value = None if previous_value is _MISSING else previous_value
        shown = (
            "<invalid reflect.Value>"
            if previous_value is _MISSING
            else _describe(previous_value)
        )
        super().__init__(f"no value found for selector: {selector}: {shown}")


class UnexpectedPreviousNilValueError(DaselError):
    """Raised when the previous node holds a null value."""

    def __init__(self, selector: str) -> None:
        self.selector = selector
        super().__init__(f"previous value is nil: {selector}")


class UnhandledCheckTypeError(DaselError):
    """Raised when a check does not know how to deal with a value."""

    def __init__(self, value: object = None) -> None:
        self.value = value
        _, type_name = _go_kind_and_type(value)
        super().__init__(f"unhandled check type: {type_name}")