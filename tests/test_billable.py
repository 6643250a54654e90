import io

import pytest

from restomenu.billable import Billable


def test_reads_consecutive_records_then_none():
    stream = io.StringIO("Coffee,1.5\nTea,2.25\n")
    assert Billable.read_record(stream) == Billable("Coffee", 1.5)
    assert Billable.read_record(stream) == Billable("Tea", 2.25)
    assert Billable.read_record(stream) is None


def test_name_is_trimmed_of_spaces_and_carriage_returns():
    stream = io.StringIO("   Latte  \r,3\n")
    record = Billable.read_record(stream)
    assert record.name == "Latte"
    assert record.price == pytest.approx(3.0)


def test_blank_name_gives_none():
    assert Billable.read_record(io.StringIO("   ,4\n")) is None


def test_empty_stream_gives_none():
    assert Billable.read_record(io.StringIO("")) is None


def test_record_at_end_without_newline():
    record = Billable.read_record(io.StringIO("Juice,4.75"))
    assert record == Billable("Juice", 4.75)


def test_bad_price_raises():
    with pytest.raises(ValueError):
        Billable.read_record(io.StringIO("Water,abc\n"))


def test_missing_price_raises():
    with pytest.raises(ValueError):
        Billable.read_record(io.StringIO("Water,"))


def test_none_name_becomes_empty():
    assert Billable(None, 2.0).name == ""
    assert Billable().name == ""
    assert Billable().price == 0.0