# tests/unit_tests/test_prompts_unit.py
from decimal import Decimal
from unittest.mock import patch

from employee_tracker.controllers.utils import is_valid_name, parse_salary
from employee_tracker.views.choices import NONE_CHOICE, Choice
from employee_tracker.views.prompts import ask_salary, ask_text, confirm, select_choice


def test_is_valid_name():
    assert is_valid_name("Engineering")
    assert is_valid_name("  Sales ")
    assert not is_valid_name("")
    assert not is_valid_name("   ")
    assert not is_valid_name(None)


def test_parse_salary():
    assert parse_salary("90000") == Decimal("90000")
    assert parse_salary(" 1500.50 ") == Decimal("1500.50")
    assert parse_salary(Decimal("10")) == Decimal("10")
    assert parse_salary(42) == Decimal("42")
    assert parse_salary("0") is None
    assert parse_salary("-100") is None
    assert parse_salary("abc") is None
    assert parse_salary("NaN") is None
    assert parse_salary("Infinity") is None
    assert parse_salary(None) is None
    assert parse_salary(True) is None


def test_parse_salary_rounds_to_cents_and_fits_the_column():
    assert parse_salary("1500.505") == Decimal("1500.51")
    assert parse_salary("0.005") == Decimal("0.01")
    assert parse_salary("99999999.99") == Decimal("99999999.99")
    assert parse_salary("0.004") is None
    assert parse_salary("1e-10") is None
    assert parse_salary(Decimal("0.001")) is None
    assert parse_salary("99999999.996") is None
    assert parse_salary("100000000") is None
    assert parse_salary("1e40") is None
    assert parse_salary("-1e40") is None


def test_is_valid_name_respects_column_length():
    assert is_valid_name("x" * 30)
    assert is_valid_name("  " + "x" * 30 + "  ")
    assert not is_valid_name("x" * 31)


def test_ask_text_reasks_until_not_blank():
    with patch("employee_tracker.views.prompts.Prompt.ask", side_effect=["", "   ", "  Sales "]) as mock_ask:
        assert ask_text("Enter a name", "Name") == "Sales"
        assert mock_ask.call_count == 3


def test_ask_text_reasks_when_too_long():
    with patch(
        "employee_tracker.views.prompts.Prompt.ask", side_effect=["x" * 31, " " + "y" * 30 + " "]
    ) as mock_ask:
        assert ask_text("Enter a name", "Name") == "y" * 30
        assert mock_ask.call_count == 2


def test_ask_salary_reasks_until_positive():
    with patch(
        "employee_tracker.views.prompts.Prompt.ask", side_effect=["abc", "-5", "0", "0.004", "1000000000", "1000.50"]
    ) as mock_ask:
        assert ask_salary("Salary") == Decimal("1000.50")
        assert mock_ask.call_count == 6


def test_select_choice_returns_value_of_selected_key():
    choices = [NONE_CHOICE, Choice("Ada Lovelace", 1), Choice("Grace Hopper", 2)]
    with patch("employee_tracker.views.prompts.Prompt.ask", return_value="3") as mock_ask:
        assert select_choice(choices, "Select the manager:") == 2
        assert mock_ask.call_args.kwargs["choices"] == ["1", "2", "3"]


def test_select_choice_none_sentinel():
    choices = [NONE_CHOICE, Choice("Ada Lovelace", 1)]
    with patch("employee_tracker.views.prompts.Prompt.ask", return_value="1"):
        assert select_choice(choices, "Select the manager:") is None


def test_confirm_defaults_to_no():
    with patch("employee_tracker.views.prompts.Confirm.ask", return_value=False) as mock_confirm:
        assert confirm("Delete?") is False
        assert mock_confirm.call_args.kwargs["default"] is False
