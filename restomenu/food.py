"""Food items, ordered as adult or child portions with special instructions."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from restomenu.billable import Billable
from restomenu.menu import Menu
from restomenu.utils import WHITESPACE

_MAX_INSTRUCTION_INPUT = 255
_MAX_INSTRUCTION_SHOWN = 30


class Food:
    """A dish with a base price; a child portion costs half."""

    def __init__(self, name: Optional[str] = "", base_price: float = 0.0) -> None:
        self._item = Billable(name, base_price)
        self._ordered = False
        self.child = False
        self.instructions: Optional[str] = None

    @property
    def name(self) -> str:
        return self._item.name

    @property
    def base_price(self) -> float:
        return self._item.price

    def _clear_order(self) -> None:
        self._ordered = False
        self.child = False
        self.instructions = None

    def ordered(self) -> bool:
        """Return True once a portion has been chosen."""
        return self._ordered

    def price(self) -> float:
        """Return the base price, halved for an ordered child portion."""
        if self._ordered and self.child:
            return self._item.price * 0.5
        return self._item.price

    def format(self, include_instructions: bool = True) -> str:
        """Return the food line, optionally followed by its instructions."""
        if self._ordered:
            portion = "Child" if self.child else "Adult"
        else:
            portion = "....."
        text = f"{self._item.name[:25]:.<28}{portion}{self.price():7.2f}"
        if include_instructions and self.instructions:
            text += " >> " + self.instructions[:_MAX_INSTRUCTION_SHOWN]
        return text

    def __str__(self) -> str:
        return self.format()

    def __repr__(self) -> str:
        return (
            f"Food({self.name!r}, {self.base_price!r}, ordered={self._ordered}, "
            f"child={self.child}, instructions={self.instructions!r})"
        )

    def print(
        self,
        stream: Optional[TextIO] = None,
        include_instructions: Optional[bool] = None,
    ) -> TextIO:
        """Write the food line to ``stream``.

        Instructions are shown by default only when writing to standard output.
        """
        stream = stream if stream is not None else sys.stdout
        if include_instructions is None:
            include_instructions = stream is sys.stdout
        stream.write(self.format(include_instructions))
        return stream

    def read(self, stream: TextIO) -> bool:
        """Load name and price from the next record; True if one was read."""
        record = Billable.read_record(stream)
        if record is None:
            return False
        self._item = record
        self._clear_order()
        return True

    def order(
        self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
    ) -> bool:
        """Ask for a portion and instructions; Back clears the order."""
        stdin = stdin if stdin is not None else sys.stdin
        stdout = stdout if stdout is not None else sys.stdout
        menu = Menu("Food Size Selection", "Back", 3) << "Adult" << "Child"
        selection = menu.select(stdin, stdout)
        self._clear_order()
        if selection == 0:
            return False
        self._ordered = True
        self.child = selection == 2
        stdout.write("Special instructions\n> ")
        line = stdin.readline().rstrip("\n")[:_MAX_INSTRUCTION_INPUT]
        text = line.strip(WHITESPACE)
        if text:
            self.instructions = text
        return True

    def __radd__(self, other: float) -> float:
        return other + self.price()