"""Console input helpers, bill file naming and shared limits."""

from __future__ import annotations

import re
import sys
from typing import Optional, TextIO

MAXIMUM_NUMBER_OF_MENU_ITEMS = 20
TAX = 0.13
MAXIMUM_NUMBER_OF_BILL_ITEMS = 20

WHITESPACE = " \t\n\v\f\r"

_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1
_MAX_BILL_DIGITS = 11
_INTEGER = re.compile(r"([+-]?\d+)(.*)", re.DOTALL)


def is_blank(text: Optional[str]) -> bool:
    """Return True if ``text`` is empty or holds only whitespace; False for None."""
    if text is None:
        return False
    return all(ch in WHITESPACE for ch in text)


def _read_line(stdin: TextIO) -> str:
    line = stdin.readline()
    if line == "":
        raise EOFError("no more input while waiting for an integer")
    return line.rstrip("\n")


def get_int(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    """Read lines until one holds exactly one integer, prompting on bad input."""
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    while True:
        line = _read_line(stdin)
        if is_blank(line):
            stdout.write("You must enter a value: ")
            continue
        match = _INTEGER.fullmatch(line.lstrip(WHITESPACE))
        if match is None:
            stdout.write("Invalid integer: ")
            continue
        value = int(match.group(1))
        if not _INT_MIN <= value <= _INT_MAX:
            stdout.write("Invalid integer: ")
            continue
        if not is_blank(match.group(2)):
            stdout.write("Only an integer please: ")
            continue
        return value


def get_int_between(
    minimum: int,
    maximum: int,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> int:
    """Read an integer, asking again until it lies within [minimum, maximum]."""
    stdout = stdout if stdout is not None else sys.stdout
    while True:
        value = get_int(stdin, stdout)
        if minimum <= value <= maximum:
            return value
        stdout.write(
            f"Invalid value: [{minimum}<= value <={maximum}], try again: "
        )


def make_bill_file_name(bill_no: int) -> str:
    """Return the file name under which bill number ``bill_no`` is saved."""
    if bill_no < 0:
        raise ValueError("bill number cannot be negative")
    digits = str(bill_no)
    if len(digits) > _MAX_BILL_DIGITS:
        raise ValueError(f"bill number {bill_no} is too large for a file name")
    return f"bill_{digits}.txt"