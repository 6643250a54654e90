import io

import pytest

from restomenu.demo import (
    main,
    run_app_demo,
    run_option_test,
    run_selection_test,
    show_menu_items,
)
from restomenu.menu import MenuItem


def _lines(text):
    return text.split("\n")


def test_show_menu_items_starts_with_invalid_item():
    out = io.StringIO()
    show_menu_items(out)
    lines = _lines(out.getvalue())
    assert lines[0] == "??????????"
    assert lines[1] == "This is an invalid MenuItem"


def test_show_menu_items_line_count():
    out = io.StringIO()
    show_menu_items(out)
    assert out.getvalue().count("\n") == 17


def test_show_menu_items_first_sample_has_no_row_number():
    out = io.StringIO()
    show_menu_items(out)
    assert _lines(out.getvalue())[2] == "The Menu Item"


def test_show_menu_items_matches_menu_item_rendering():
    out = io.StringIO()
    show_menu_items(out)
    lines = _lines(out.getvalue())
    assert lines[3] == str(MenuItem("The Menu Item", 1, 2, 0))
    assert lines[9] == str(MenuItem("The Menu Item", 2, 3, 6))


def test_show_menu_items_oversized_indent_is_invalid():
    out = io.StringIO()
    show_menu_items(out)
    lines = _lines(out.getvalue())
    assert [lines[6], lines[11], lines[16]] == ["??????????"] * 3


def test_option_test_caps_items_at_twenty():
    out = io.StringIO()
    run_option_test(io.StringIO("0\n"), out)
    text = out.getvalue()
    assert "20- Option T" in text
    assert "Option U" not in text


def test_option_test_repeats_until_return():
    out = io.StringIO()
    run_option_test(io.StringIO("3\n7\n0\n"), out)
    assert out.getvalue().count("Test 1, Options Menu") == 3


def test_option_test_rejects_out_of_range():
    out = io.StringIO()
    run_option_test(io.StringIO("25\n0\n"), out)
    assert "Invalid value: [0<= value <=20], try again: " in out.getvalue()


def test_option_test_runs_out_of_input():
    with pytest.raises(EOFError):
        run_option_test(io.StringIO("1\n"), io.StringIO())


def test_selection_test_messages():
    out = io.StringIO()
    run_selection_test(io.StringIO("1\n2\n1\n0\n3\n0\n"), out)
    text = out.getvalue()
    assert "Option one selected.\n" in text
    assert "Option three selected.\n" in text
    assert text.count("Staying in Submenu!") == 1


def test_selection_test_submenu_has_no_title():
    out = io.StringIO()
    run_selection_test(io.StringIO("2\n0\n0\n"), out)
    text = out.getvalue()
    assert str(MenuItem("Sub-option 1", 2, 4, 1)) + "\n" in text
    assert text.count("Test 2, Selection test") == 2


def test_app_demo_main_options():
    out = io.StringIO()
    run_app_demo(io.StringIO("2\n3\n4\n5\n0\n"), out)
    text = out.getvalue()
    for message in (
        "Print the Bill for customer!!!",
        "Start a new bill!!!",
        "List all the foodsd!!!",
        "List all the drinks!!!",
    ):
        assert message in text
    assert "Start Food Ordering Process!!!" not in text


def test_main_exits_on_zero(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("0\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.endswith("Have a good day!\n")


def test_main_runs_a_test_then_exits(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("1\n0\n0\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Test 1, Options Menu" in out
    assert out.count("Milestone 2") == 2


def test_main_reports_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert main([]) == 1
    assert "Milestone 2" in capsys.readouterr().out