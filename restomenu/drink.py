"""Drinks, ordered in one of four sizes that scale the base price."""

from __future__ import annotations

import sys
from enum import Enum
from typing import Optional, TextIO

from restomenu.billable import Billable
from restomenu.menu import Menu


class DrinkSize(Enum):
    """Drink sizes with their printed label and price factor."""

    SMALL = ("S", "SML", 0.5)
    MEDIUM = ("M", "MID", 0.75)
    LARGE = ("L", "LRG", 1.0)
    EXTRA_LARGE = ("X", "XLR", 1.5)

    def __init__(self, code: str, label: str, factor: float) -> None:
        self.code = code
        self.label = label
        self.factor = factor


_SIZE_OPTIONS = (
    ("Small", DrinkSize.SMALL),
    ("Medium", DrinkSize.MEDIUM),
    ("Larg", DrinkSize.LARGE),
    ("Extra Large", DrinkSize.EXTRA_LARGE),
)


class Drink:
    """A drink with a base price; ordering it picks a size."""

    def __init__(self, name: Optional[str] = "", base_price: float = 0.0) -> None:
        self._item = Billable(name, base_price)
        self.size: Optional[DrinkSize] = None

    @property
    def name(self) -> str:
        return self._item.name

    @property
    def base_price(self) -> float:
        return self._item.price

    def ordered(self) -> bool:
        """Return True once a size has been chosen."""
        return self.size is not None

    def price(self) -> float:
        """Return the base price scaled by the chosen size."""
        if self.size is None:
            return self._item.price
        return self._item.price * self.size.factor

    def __str__(self) -> str:
        size = f"{self.size.label}.." if self.size is not None else "....."
        return f"{self._item.name[:25]:.<28}{size}{self.price():7.2f}"

    def __repr__(self) -> str:
        return f"Drink({self.name!r}, {self.base_price!r}, size={self.size})"

    def print(self, stream: Optional[TextIO] = None) -> TextIO:
        """Write the drink line to ``stream`` (standard output by default)."""
        stream = stream if stream is not None else sys.stdout
        stream.write(str(self))
        return stream

    def read(self, stream: TextIO) -> bool:
        """Load name and price from the next record; True if one was read."""
        record = Billable.read_record(stream)
        if record is None:
            return False
        self._item = record
        self.size = None
        return True

    def order(
        self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
    ) -> bool:
        """Ask for a size; choosing Back clears the order and returns False."""
        menu = Menu("Drink Size Selection", "Back", 3)
        for label, _ in _SIZE_OPTIONS:
            menu.add(label)
        selection = menu.select(stdin, stdout)
        if selection == 0:
            self.size = None
            return False
        self.size = _SIZE_OPTIONS[selection - 1][1]
        return True

    def __radd__(self, other: float) -> float:
        return other + self.price()