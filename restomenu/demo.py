"""Interactive demonstration of menu items and nested menus."""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional, TextIO

from restomenu.menu import Menu, MenuItem

_SAMPLE_CONTENT = " \t\v\r\f\nThe Menu Item"
_RULE = "+++++++++++++++++++++++++++++++++++++++++++++++"
_STARS = "***********************************************************************"
_DEMO_END = "End Final Milestone Demo **********************************************"


def _announce(stdout: TextIO, message: str) -> None:
    stdout.write(f"{_RULE}\n{message}\n{_RULE}\n\n")


def show_menu_items(stdout: Optional[TextIO] = None) -> None:
    """Write an invalid item followed by sample items of growing indentation."""
    stdout = stdout if stdout is not None else sys.stdout
    invalid = MenuItem(None, 1, 1, 1)
    stdout.write(f"{invalid}\n")
    if not invalid:
        stdout.write("This is an invalid MenuItem\n")
    for row in range(0, 11, 5):
        for step in range(5):
            item = MenuItem(_SAMPLE_CONTENT, step, step + 1, row + step - 1)
            stdout.write(f"{item}\n")


def run_option_test(
    stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
) -> None:
    """Fill a menu past its capacity and select from it until Return is chosen."""
    menu = Menu("Test 1, Options Menu", "Return", 1)
    for offset in range(30):
        menu.add(f"Option {chr(ord('A') + offset)}")
    while menu.select(stdin, stdout):
        pass


def run_selection_test(
    stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
) -> None:
    """Select options from a menu, one of which opens an untitled submenu."""
    stdout = stdout if stdout is not None else sys.stdout
    menu = Menu("Test 2, Selection test", "Return", 1)
    menu << "Option 1" << "Option 2 with Submenu" << "Option 3"
    sub_menu = Menu(None, "Back to test 2", 2, 4)
    sub_menu << "Sub-option 1" << "Sub-option 2"
    while True:
        selection = menu.select(stdin, stdout)
        if selection == 1:
            stdout.write("Option one selected.\n")
        elif selection == 2:
            while sub_menu.select(stdin, stdout):
                stdout.write("Staying in Submenu!\n")
        elif selection == 3:
            stdout.write("Option three selected.\n")
        if selection == 0:
            break


def run_app_demo(
    stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None
) -> None:
    """Walk through the restaurant application menus without placing orders."""
    stdout = stdout if stdout is not None else sys.stdout
    app_menu = Menu("Seneca Resturant", "End Program")
    app_menu << "Order" << "Print Bill" << "Start a New Bill" << "List Foods" << "List Drinks"
    order_menu = Menu("Order Menu", "Back to main menu", 1)
    order_menu << "Food" << "Drink"
    stdout.write(f"\n{_STARS}\n")

    app_messages = {
        2: "Print the Bill for customer!!!",
        3: "Start a new bill!!!",
        4: "List all the foodsd!!!",
        5: "List all the drinks!!!",
    }
    order_messages = {
        1: "Start Food Ordering Process!!!",
        2: "Start Drink Ordering Process!!!",
    }
    while True:
        selection = app_menu.select(stdin, stdout)
        if selection == 0:
            break
        if selection == 1:
            while True:
                order_selection = order_menu.select(stdin, stdout)
                if order_selection == 0:
                    break
                _announce(stdout, order_messages[order_selection])
        else:
            _announce(stdout, app_messages[selection])
    stdout.write(f"{_DEMO_END}\n")


def _run(stdin: TextIO, stdout: TextIO) -> None:
    menu = Menu("Milestone 2")
    menu << "Run Test 1" << "Run Test 2" << "Final Milestone Application Demo"
    actions = {1: run_option_test, 2: run_selection_test, 3: run_app_demo}
    while True:
        selection = menu.select(stdin, stdout)
        if selection == 0:
            stdout.write("Have a good day!\n")
            return
        actions[selection](stdin, stdout)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the interactive menu demonstration on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="restomenu-demo", description="Interactive menu demonstration."
    )
    parser.parse_args(argv)
    try:
        _run(sys.stdin, sys.stdout)
    except EOFError:
        sys.stdout.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())