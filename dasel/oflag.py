"""Command line flag types."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class StringList:
    """A flag that collects a value each time it is given."""

    strings: list[str] = field(default_factory=list)

    def type(self) -> str:
        """Describe how the flag is used."""
        return "Pass multiple times to add multiple values."

    def set(self, value: str) -> None:
        """Add another value."""
        self.strings.append(value)

    def __str__(self) -> str:
        return "[" + " ".join(self.strings) + "]"