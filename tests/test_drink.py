import copy
import io

import pytest

from restomenu.drink import Drink, DrinkSize


def _order(drink, text):
    out = io.StringIO()
    result = drink.order(io.StringIO(text), out)
    return result, out.getvalue()


def test_new_drink_is_not_ordered_and_prints_dots():
    drink = Drink("Coffee", 2.0)
    assert not drink.ordered()
    assert drink.price() == pytest.approx(2.0)
    text = str(drink)
    assert text[:28] == "Coffee".ljust(28, ".")
    assert text[28:33] == "....."
    assert text.endswith(f"{2.0:7.2f}")


@pytest.mark.parametrize(
    "choice, size, label, expected_price",
    [
        ("1", DrinkSize.SMALL, "SML..", 4.0),
        ("2", DrinkSize.MEDIUM, "MID..", 6.0),
        ("3", DrinkSize.LARGE, "LRG..", 8.0),
        ("4", DrinkSize.EXTRA_LARGE, "XLR..", 12.0),
    ],
)
def test_order_picks_size(choice, size, label, expected_price):
    drink = Drink("Tea", 8.0)
    result, _ = _order(drink, choice + "\n")
    assert result is True
    assert drink.ordered()
    assert drink.size is size
    assert str(drink)[28:33] == label
    assert drink.price() == pytest.approx(expected_price)


def test_order_shows_size_menu():
    _, output = _order(Drink("Tea", 1.0), "1\n")
    assert "Drink Size Selection" in output
    assert "1- Small" in output
    assert "3- Larg" in output
    assert "0- Back" in output


def test_back_clears_order():
    drink = Drink("Tea", 1.0)
    _order(drink, "2\n")
    result, _ = _order(drink, "0\n")
    assert result is False
    assert not drink.ordered()
    assert drink.price() == pytest.approx(1.0)


def test_long_name_is_cut_to_25_characters():
    drink = Drink("A" * 30, 1.0)
    assert str(drink)[:28] == "A" * 25 + "..."


def test_print_writes_to_stream_and_returns_it():
    drink = Drink("Cola", 3.0)
    stream = io.StringIO()
    assert drink.print(stream) is stream
    assert stream.getvalue() == str(drink)


def test_read_loads_records_and_resets_size():
    stream = io.StringIO("Cola,3.5\nWater,1.25\n")
    drink = Drink()
    assert drink.read(stream)
    assert drink.name == "Cola"
    assert drink.base_price == pytest.approx(3.5)
    _order(drink, "1\n")
    assert drink.read(stream)
    assert drink.name == "Water"
    assert not drink.ordered()
    assert drink.read(stream) is False
    assert drink.name == "Water"


def test_adding_to_a_total():
    first = Drink("Cola", 3.0)
    second = Drink("Water", 1.5)
    _order(second, "1\n")
    total = 0.0
    total += first
    total = total + second
    assert total == pytest.approx(first.price() + second.price())
    assert sum([first, second]) == pytest.approx(total)


def test_copy_is_independent():
    original = Drink("Cola", 3.0)
    _order(original, "2\n")
    duplicate = copy.deepcopy(original)
    _order(original, "0\n")
    assert duplicate.ordered()
    assert not original.ordered()