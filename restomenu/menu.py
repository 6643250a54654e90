"""Numbered console menus built from indented menu items."""

from __future__ import annotations

import sys
from typing import List, Optional, TextIO

from restomenu.utils import (
    MAXIMUM_NUMBER_OF_MENU_ITEMS,
    WHITESPACE,
    get_int_between,
    is_blank,
)

_EMPTY_DISPLAY = "??????????"
_MAX_INDENT = 4


class MenuItem:
    """One line of a menu: text with optional indentation and row number.

    An item given no text, only whitespace, an indentation above four, or a
    row number above the menu capacity is empty and displays as question marks.
    """

    __slots__ = ("_content", "_indent_count", "_indent_size", "_row")

    def __init__(
        self,
        content: Optional[str] = None,
        indent_count: int = 0,
        indent_size: int = 0,
        row: int = -1,
    ) -> None:
        self._content: Optional[str] = None
        self._indent_count = 0
        self._indent_size = 0
        self._row = -1
        if content is None:
            return
        text = content.lstrip(WHITESPACE)
        if not text:
            return
        if not (0 <= indent_count <= _MAX_INDENT and 0 <= indent_size <= _MAX_INDENT):
            return
        if row > MAXIMUM_NUMBER_OF_MENU_ITEMS:
            return
        self._content = text
        self._indent_count = indent_count
        self._indent_size = indent_size
        self._row = row

    def __bool__(self) -> bool:
        return self._content is not None and not is_blank(self._content)

    def __str__(self) -> str:
        if not self:
            return _EMPTY_DISPLAY
        indent = " " * (self._indent_count * self._indent_size)
        number = f"{self._row:>2}- " if self._row >= 0 else ""
        return f"{indent}{number}{self._content}"

    def __repr__(self) -> str:
        return f"MenuItem({str(self)!r})"

    def display(self, stream: Optional[TextIO] = None) -> TextIO:
        """Write the item to ``stream`` (standard output by default) and return it."""
        stream = stream if stream is not None else sys.stdout
        stream.write(str(self))
        return stream


class Menu:
    """A titled list of numbered options ending with a numbered-zero exit option."""

    def __init__(
        self,
        title: Optional[str],
        exit_option: Optional[str] = "Exit",
        indent_count: int = 0,
        indent_size: int = 3,
    ) -> None:
        self._indent_count = indent_count
        self._indent_size = indent_size
        self._title = MenuItem(title, indent_count, indent_size, -1)
        self._exit_option = MenuItem(exit_option, indent_count, indent_size, 0)
        self._prompt = MenuItem("> ", indent_count, indent_size, -1)
        self._items: List[MenuItem] = []

    def add(self, content: Optional[str]) -> "Menu":
        """Append an option; ignored when the menu is full or ``content`` is None."""
        if content is not None and len(self._items) < MAXIMUM_NUMBER_OF_MENU_ITEMS:
            self._items.append(
                MenuItem(
                    content,
                    self._indent_count,
                    self._indent_size,
                    len(self._items) + 1,
                )
            )
        return self

    def __lshift__(self, content: Optional[str]) -> "Menu":
        return self.add(content)

    def __len__(self) -> int:
        return len(self._items)

    def render(self) -> str:
        """Return the text shown before the selection is read, prompt included."""
        lines = []
        if self._title:
            lines.append(str(self._title))
        lines.extend(str(item) for item in self._items)
        lines.append(str(self._exit_option))
        return "".join(f"{line}\n" for line in lines) + str(self._prompt)

    def select(
        self, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
    ) -> int:
        """Show the menu and return the chosen option number (0 means exit)."""
        stdout = stdout if stdout is not None else sys.stdout
        stdout.write(self.render())
        return get_int_between(0, len(self._items), stdin, stdout)