"""Named, priced items read from comma separated records."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, TextIO

from restomenu.utils import WHITESPACE

_NUMBER_CHARS = frozenset("+-0123456789.eE")


def _read_field(stream: TextIO, delimiter: str) -> Optional[str]:
    """Read up to ``delimiter`` (consumed, not returned); None at end of input."""
    chars = []
    while True:
        ch = stream.read(1)
        if ch == "":
            return "".join(chars) if chars else None
        if ch == delimiter:
            return "".join(chars)
        chars.append(ch)


def _read_number(stream: TextIO) -> float:
    """Skip whitespace, then read a number and the one character after it."""
    ch = stream.read(1)
    while ch and ch in WHITESPACE:
        ch = stream.read(1)
    token = []
    while ch and ch in _NUMBER_CHARS:
        token.append(ch)
        ch = stream.read(1)
    text = "".join(token)
    try:
        return float(text)
    except ValueError:
        raise ValueError(f"invalid price in record: {text!r}") from None


@dataclass
class Billable:
    """A name and a base price; a missing name is stored as an empty string."""

    name: str = ""
    price: float = 0.0

    def __post_init__(self) -> None:
        if self.name is None:
            self.name = ""

    @staticmethod
    def read_record(stream: TextIO) -> Optional["Billable"]:
        """Read one ``name,price`` record from ``stream``.

        Leading spaces and trailing spaces or carriage returns are removed from
        the name. Returns None at the end of input or when the name is blank;
        raises ValueError when the price cannot be read.
        """
        field = _read_field(stream, ",")
        if field is None:
            return None
        name = field.lstrip(" ").rstrip(" \r")
        if not name:
            return None
        return Billable(name, _read_number(stream))