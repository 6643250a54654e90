# restomenu

Building blocks for a small console ordering program in a restaurant:
numbered text menus that read a validated choice from the user, food and
drink items loaded from comma-separated records, and small helpers for
totals and bill file names.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Menus (`restomenu.menu`)

`Menu(title, exit_option="Exit", indent_count=0, indent_size=3)` holds a
title, up to 20 numbered items and an exit option numbered `0`. Items past
the twentieth are ignored. `select(stdin, stdout)` writes the menu and a
`> ` prompt, then keeps asking until the user enters a whole number between
0 and the number of items, and returns it.

```python
import sys
from restomenu.menu import Menu

menu = Menu("Seneca Restaurant", "End Program", 0, 3)
menu << "Order" << "Print Bill" << "List Foods"
choice = menu.select(sys.stdin, sys.stdout)
```

Items can also be added with `menu.add("...")`; `len(menu)` gives the
number of items and `menu.render()` returns the menu text without asking
for anything. A menu whose title is `None` shows no title line.

A single `MenuItem(content, indent_count, indent_size, row)` is indented
by `indent_count * indent_size` spaces and, when `row` is 0 or more,
numbered as ` 1- `. Leading whitespace of the content is dropped. An item
with no visible text, an indent count or size above 4, or a row above 20
is false and displays as `??????????`. `str(item)` gives its text and
`item.display(stream)` writes it.

## Reading numbers (`restomenu.utils`)

`get_int(stdin, stdout)` reads lines until one holds a single integer,
writing `You must enter a value: `, `Invalid integer: ` or
`Only an integer please: ` on bad input. `get_int_between(minimum,
maximum, stdin, stdout)` also asks again while the value is out of range.
Both raise `EOFError` when the input runs out. `is_blank(text)` tells
whether text holds only whitespace. The module also holds the limits
`MAXIMUM_NUMBER_OF_MENU_ITEMS`, `MAXIMUM_NUMBER_OF_BILL_ITEMS` and the
`TAX` rate.

## Food and drink

`Billable` (`restomenu.billable`) is a name and a price.
`Billable.read_record(stream)` reads one `name,price` record, trimming
spaces around the name; it returns `None` at the end of input or for a
blank name and raises `ValueError` for a price it cannot read.

`Drink` (`restomenu.drink`) and `Food` (`restomenu.food`) each carry a
name and a base price. `read(stream)` loads the next record, clears any
order and returns whether a record was read:

```python
import io
from restomenu.drink import Drink

drink = Drink()
drink.read(io.StringIO("Coffee,2.50\n"))
```

`order(stdin, stdout)` shows a size menu and returns `False` when Back is
chosen, which also clears the order:

- a drink is Small, Medium, Large or Extra Large (`DrinkSize`), priced at
  0.5, 0.75, 1 and 1.5 times its base price;
- food is an Adult or Child portion, a child portion costing half; it
  then asks for special instructions on one line.

`ordered()` and `price()` report the current state. Both kinds add onto
numbers, so `sum(items)` or `total + item` gives a total.

`str(item)` is a fixed-width line: the name (at most 25 characters)
padded with dots to 28, the size or portion (dots when not ordered), and
the price in 7 columns with two decimals. For food, instructions follow
as ` >> ` and their first 30 characters; `food.format(include_instructions)`
chooses whether to show them, and `food.print(stream)` shows them only
when writing to standard output unless told otherwise.
`drink.print(stream)` writes the drink line.

## Bill file names

```python
from restomenu.utils import make_bill_file_name

make_bill_file_name(1)   # "bill_1.txt"
```

Negative numbers and numbers of more than 11 digits raise `ValueError`.

## Commands

`restomenu-demo` runs the interactive menu demonstration: an option menu
filled past its capacity, a selection menu with a submenu, and a walk
through the restaurant application menus that only announces each choice.
The pieces are also available as `show_menu_items`, `run_option_test`,
`run_selection_test` and `run_app_demo` in `restomenu.demo`.

`restomenu-tester [directory]` reads `drinks.csv` and `foods.csv` from
the directory (the current one by default), asks for sizes and portions,
writes `drinkout.csv` and `foodout.csv` there and prints both files at the
end. `run_drink_tester`, `run_food_tester` and `dump_file` in
`restomenu.tester` do the same steps from code.

Both commands exit with status 1 if the input ends while they are waiting
for an answer.

## What it does not do

There is no ordering session that keeps a bill: the package does not list
the foods and drinks on offer, collect ordered items into a bill, add tax,
print a bill or save one to a file. `make_bill_file_name` and `TAX` are
there for a program that does, but nothing in the package uses them.