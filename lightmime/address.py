"""E-mail addresses with an optional display name."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class AddressType(Enum):
    """Role an address plays in a message."""

    TO = 0
    CC = 1
    BCC = 2
    FROM = 3


@dataclass
class Address:
    """An e-mail address, optionally with a display name.

    ``parsed`` is set when the address was read from a string; in that case
    the display name keeps its original trailing whitespace and is joined to
    the address without an added separator.
    """

    name: str | None = None
    email: str = ""
    type: AddressType = AddressType.TO
    parsed: bool = False

    def __str__(self) -> str:
        if self.name is None:
            return self.email
        if self.parsed:
            return f"{self.name}{self.email}"
        return f"{self.name} {self.email}"


def parse_address(s: str) -> Address:
    """Split ``s`` at its last ``<`` into display name and address."""
    address = Address(parsed=True)
    offset = s.rfind("<")
    if offset == -1:
        address.email = s
        return address
    if offset > 0:
        address.name = s[:offset]
    address.email = s[offset:]
    return address