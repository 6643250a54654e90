"""Console walkthrough that reads, orders and saves drinks and foods."""

from __future__ import annotations

import argparse
import copy
import io
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List, Optional, TextIO, Union

from restomenu.drink import Drink
from restomenu.food import Food

Item = Union[Drink, Food]
PathLike = Union[str, Path]


@dataclass(frozen=True)
class _Script:
    title: str
    data_name: str
    out_name: str
    factory: Callable[[], Item]
    show: Callable[[Item], str]
    save: Callable[[Item], str]
    already_ordered: str
    order_prompt: str
    still_ordered: str
    reorder_prompt: str


_DRINK_SCRIPT = _Script(
    title="Drink Tester!",
    data_name="drinks.csv",
    out_name="drinkout.csv",
    factory=Drink,
    show=str,
    save=str,
    already_ordered="Drinks by default are not ordered!",
    order_prompt=(
        "Enter the folowing:\n1<ENTER>\n2<ENTER>\n3<ENTER>\n4<ENTER>\n0<ENTER>\n=========>"
    ),
    still_ordered="When back is selected, Drink must be set to not-ordered!",
    reorder_prompt="Enter the folowing:\n2<ENTER>\n=========>",
)

_FOOD_SCRIPT = _Script(
    title="Food Tester!",
    data_name="foods.csv",
    out_name="foodout.csv",
    factory=Food,
    show=lambda food: food.format(True),
    save=lambda food: food.format(False),
    already_ordered="Food by default is not ordered!",
    order_prompt=(
        "Enter the folowing:\n1<ENTER>\nwell done\n2<ENTER>\n<ENTER>\n0<ENTER>\n=========>"
    ),
    still_ordered="When back is selected, Frink must be set to not-ordered!",
    reorder_prompt="Enter the folowing:\n2<ENTER>\n<ENTER>\n=========>",
)


def _read(item: Item, source: io.StringIO) -> bool:
    """Read the next record; a malformed one ends the input like a failed stream."""
    try:
        return item.read(source)
    except ValueError:
        source.seek(0, io.SEEK_END)
        return False


def _read_rest(item: Item, source: io.StringIO) -> None:
    end = len(source.getvalue())
    while source.tell() < end:
        _read(item, source)


def _check_item(
    script: _Script,
    item: Item,
    source: io.StringIO,
    outfile: TextIO,
    stdin: TextIO,
    stdout: TextIO,
) -> None:
    stdout.write("\nChecking Virtuals: \n")
    _read_rest(item, source)
    stdout.write(f"{script.show(item)}\n")
    outfile.write(f"{script.save(item)}\n")
    stdout.write(f"Price: {item.price():.2f}\n")
    stdout.write("Ordered\n" if item.ordered() else "Not Ordered\n")
    stdout.write(
        "Enter the following:\n2<ENTER>\n<ENTER>(only for food)\n=========>\n"
    )
    item.order(stdin, stdout)
    stdout.write("Ordered\n" if item.ordered() else "Not Ordered\n")


def _run_script(
    script: _Script,
    directory: PathLike,
    stdin: Optional[TextIO],
    stdout: Optional[TextIO],
) -> Optional[float]:
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    stdout.write(f"{script.title}\n")
    folder = Path(directory)
    try:
        text: Optional[str] = (folder / script.data_name).read_text()
    except OSError:
        text = None
    with (folder / script.out_name).open("w") as outfile:
        if text is None:
            stdout.write(f"{script.data_name} is missing!\n")
            return None
        source = io.StringIO(text)
        first, second = script.factory(), script.factory()
        _read(first, source)
        _read(second, source)
        stdout.write(f"{script.show(first)}\n{script.show(second)}\n")
        stdout.write(f"{script.show(first)}\n{script.show(second)}\n")
        total = 0.0
        if first.ordered():
            stdout.write(f"{script.already_ordered}\n")
        else:
            stdout.write(f"{script.order_prompt}\n")
            while second.order(stdin, stdout):
                stdout.write(f"{script.show(second)}\n")
                total += second
            stdout.write(f"Total = {total:.2f}\n")
        if second.ordered():
            stdout.write(f"{script.still_ordered}\n")
        stdout.write(f"{script.reorder_prompt}\n")
        second.order(stdin, stdout)
        first = copy.deepcopy(second)
        if first.ordered() and second.ordered():
            stdout.write(f"{script.show(first)}\n")
            total = total + first
            stdout.write(f"Total = {total:.2f}\n")
        else:
            stdout.write(
                f"{script.show(first)} and {script.show(second)}"
                " should be in ordered status!\n"
            )
        _check_item(script, first, source, outfile, stdin, stdout)
        return total


def dump_file(path: PathLike, stdout: Optional[TextIO] = None) -> None:
    """Write the contents of ``path`` between markers; nothing if it is missing."""
    stdout = stdout if stdout is not None else sys.stdout
    stdout.write(f"{path}: ==============>\n")
    try:
        stdout.write(Path(path).read_text())
    except OSError:
        pass
    stdout.write("<==============\n")


def run_drink_tester(
    directory: PathLike = ".",
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> Optional[float]:
    """Exercise drinks from ``drinks.csv``; return the running total, None if missing."""
    return _run_script(_DRINK_SCRIPT, directory, stdin, stdout)


def run_food_tester(
    directory: PathLike = ".",
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> Optional[float]:
    """Exercise foods from ``foods.csv``; return the running total, None if missing."""
    return _run_script(_FOOD_SCRIPT, directory, stdin, stdout)


def main(argv: Optional[List[str]] = None) -> int:
    """Run the drink and food walkthroughs, then show the files they saved."""
    parser = argparse.ArgumentParser(
        prog="restomenu-tester",
        description="Order drinks and foods read from CSV files.",
    )
    parser.add_argument(
        "directory",
        nargs="?",
        default=".",
        help="folder holding drinks.csv and foods.csv (default: current folder)",
    )
    args = parser.parse_args(argv)
    folder = Path(args.directory)
    try:
        sys.stdout.write("Testing Drink Class=============================\n")
        run_drink_tester(folder)
        sys.stdout.write("Testing Food Class=============================\n")
        run_food_tester(folder)
    except EOFError:
        sys.stdout.write("\n")
        return 1
    dump_file(folder / "drinkout.csv")
    dump_file(folder / "foodout.csv")
    return 0


if __name__ == "__main__":
    sys.exit(main())