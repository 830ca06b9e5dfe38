"""Message headers that may occur several times."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Header:
    """A named header holding one value per appearance in a message.

    ``parsed`` marks a header read from a message; its values are written
    back exactly as read, without adding a space after the colon.
    """

    name: str = ""
    values: list[str | None] = field(default_factory=list)
    parsed: bool = False

    def set_value(self, value: str | None, overwrite: bool = False) -> None:
        """Append ``value``, or replace all values when ``overwrite`` is true."""
        if overwrite:
            self.values.clear()
        self.values.append(value)

    def get_value(self, pos: int = 0) -> str | None:
        """Return the value at ``pos``, or None when the header has no values."""
        if not self.values:
            return None
        if pos < 0 or pos >= len(self.values):
            raise IndexError(f"header {self.name!r} has no value at position {pos}")
        return self.values[pos]

    def count(self) -> int:
        """Return how many values the header holds."""
        return len(self.values)

    def __str__(self) -> str:
        parts = []
        for value in self.values:
            if value:
                if self.parsed or value.startswith(" "):
                    parts.append(f"{self.name}:{value}")
                else:
                    parts.append(f"{self.name}: {value}")
            else:
                parts.append(f"{self.name}:")
        return "".join(parts)