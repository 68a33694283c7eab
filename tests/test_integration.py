"""Integration tests for end-to-end CLI workflows."""

import json
from datetime import date, timedelta
from decimal import Decimal

import pytest

from spendtrack.cli.main import cli
from spendtrack.domain.ledger import LedgerService
from spendtrack.storage.factories import create_json_storage


def _run(cli_runner, data_path, *args):
    return cli_runner.invoke(cli, ["--data-file", str(data_path), *args])


def _ids(data_path):
    document = json.loads(data_path.read_text(encoding="utf-8"))
    return [expense["id"] for expense in document["expenses"]]


def test_help_does_not_touch_data_file(cli_runner, data_path):
    result = cli_runner.invoke(cli, ["--data-file", str(data_path), "--help"])

    assert result.exit_code == 0
    assert "add" in result.output
    assert not data_path.exists()


def test_add_and_list(cli_runner, data_path):
    result = _run(cli_runner, data_path, "add", "Lunch", "12.50", "Food", "--tag", "work")
    assert result.exit_code == 0
    assert "Added expense: Lunch - $12.50" in result.output

    result = _run(cli_runner, data_path, "list")
    assert result.exit_code == 0
    assert "Expenses (1 items)" in result.output
    assert "Lunch: $12.50 (Food) [work]" in result.output


def test_add_rejects_invalid_amount(cli_runner, data_path):
    result = _run(cli_runner, data_path, "add", "Lunch", "twelve", "Food")

    assert result.exit_code == 1
    assert "Invalid amount" in result.output


def test_list_filters(cli_runner, data_path):
    _run(cli_runner, data_path, "add", "Lunch", "12.50", "Food", "--tag", "work")
    _run(cli_runner, data_path, "add", "Taxi", "30", "Transport", "--payment-method", "credit_card")

    result = _run(cli_runner, data_path, "list", "--min-amount", "20")
    assert "Taxi" in result.output
    assert "Lunch" not in result.output

    result = _run(cli_runner, data_path, "list", "Food", "--tag", "work")
    assert "Food Expenses (1 items)" in result.output

    result = _run(cli_runner, data_path, "list", "--payment-method", "cash")
    assert "Lunch" in result.output
    assert "Taxi" not in result.output


def test_show_update_delete(cli_runner, data_path):
    _run(cli_runner, data_path, "add", "Lunch", "12.50", "Food")
    (expense_id,) = _ids(data_path)

    result = _run(cli_runner, data_path, "update", expense_id, "--amount", "14", "--category", "Dining")
    assert result.exit_code == 0
    assert f"Updated expense {expense_id}" in result.output

    result = _run(cli_runner, data_path, "show", expense_id)
    assert "Amount: $14.00" in result.output
    assert "Category: Dining" in result.output

    result = _run(cli_runner, data_path, "delete", expense_id)
    assert result.exit_code == 0
    assert "Expense deleted" in result.output

    result = _run(cli_runner, data_path, "delete", expense_id)
    assert result.exit_code == 1
    assert "not found" in result.output


def test_update_unknown_expense(cli_runner, data_path):
    result = _run(cli_runner, data_path, "update", "missing", "--amount", "1")

    assert result.exit_code == 1
    assert "Expense missing not found" in result.output


def test_summary(cli_runner, data_path):
    result = _run(cli_runner, data_path, "summary")
    assert "No expenses found" in result.output

    _run(cli_runner, data_path, "add", "Groceries", "45.50", "Food")
    _run(cli_runner, data_path, "add", "Train", "60.00", "Transportation")

    result = _run(cli_runner, data_path, "summary", "--month", "--by-payment")
    assert result.exit_code == 0
    assert "Total Expenses: $105.50" in result.output
    assert "Number of Expenses: 2" in result.output
    assert "Average Expense: $52.75" in result.output
    assert "Food: $45.50" in result.output
    assert "Monthly Trend" in result.output
    assert f"{date.today():%Y-%m}: $105.50" in result.output
    assert "cash: $105.50" in result.output


def test_budget_alert(cli_runner, data_path):
    result = _run(cli_runner, data_path, "budget", "Food", "100", "80")
    assert result.exit_code == 0
    assert "Budget set: Food - $100.00/month" in result.output

    result = _run(cli_runner, data_path, "add", "Snack", "79", "Food")
    assert "Budget Alert" not in result.output

    result = _run(cli_runner, data_path, "add", "Snack", "6", "Food")
    assert "Budget Alert: Food" in result.output
    assert "85.0%" in result.output

    result = _run(cli_runner, data_path, "budgets")
    assert "Food" in result.output
    assert "85.00" in result.output


def test_budget_rejects_bad_threshold(cli_runner, data_path):
    result = _run(cli_runner, data_path, "budget", "Food", "100", "150")

    assert result.exit_code != 0


def test_budgets_with_zero_limit(cli_runner, data_path):
    LedgerService(create_json_storage(data_path=str(data_path))).set_budget("Food", Decimal("0"))

    result = _run(cli_runner, data_path, "budgets")

    assert result.exit_code == 0
    assert "Food" in result.output
    assert "n/a" in result.output


def test_categories_and_tags(cli_runner, data_path):
    _run(cli_runner, data_path, "add", "Lunch", "12", "Food", "--tag", "work")
    _run(cli_runner, data_path, "add", "Taxi", "30", "Transport", "--tag", "travel")

    assert _run(cli_runner, data_path, "categories").output.split() == ["Food", "Transport"]
    assert _run(cli_runner, data_path, "tags").output.split() == ["travel", "work"]


def test_export_import_round_trip(cli_runner, data_path, tmp_path):
    _run(cli_runner, data_path, "add", 'Say "cheese"', "4.50", "Food", "--tag", "a", "--tag", "b")
    _run(cli_runner, data_path, "add", "Taxi", "30", "Transport", "--payment-method", "credit_card")
    csv_path = tmp_path / "export.csv"

    result = _run(cli_runner, data_path, "export", str(csv_path))
    assert result.exit_code == 0
    assert "Exported 2 expenses" in result.output

    other_data = tmp_path / "other.json"
    result = _run(cli_runner, other_data, "import", str(csv_path))
    assert result.exit_code == 0
    assert "Imported 2 expenses" in result.output

    document = json.loads(other_data.read_text(encoding="utf-8"))
    descriptions = [expense["description"] for expense in document["expenses"]]
    assert descriptions == ['Say "cheese"', "Taxi"]
    assert document["expenses"][0]["tags"] == ["a", "b"]
    assert document["expenses"][1]["paymentMethod"] == "credit_card"


def test_import_rejects_header_only(cli_runner, data_path, tmp_path):
    csv_path = tmp_path / "empty.csv"
    csv_path.write_text('"ID","Description"\n', encoding="utf-8")

    result = _run(cli_runner, data_path, "import", str(csv_path))

    assert result.exit_code == 1
    assert "at least one data row" in result.output


def test_recurring(cli_runner, data_path):
    yesterday = date.today() - timedelta(days=1)
    _run(
        cli_runner, data_path,
        "add", "Newspaper", "2", "Media", "--date", yesterday.isoformat(), "--recurring", "daily",
    )

    result = _run(cli_runner, data_path, "recurring", "--dry-run")
    assert "1 recurring expenses due" in result.output

    result = _run(cli_runner, data_path, "recurring")
    assert result.exit_code == 0
    assert "Processed 1 recurring expenses" in result.output
    assert "Newspaper (Recurring)" in result.output

    result = _run(cli_runner, data_path, "recurring")
    assert "Processed 0 recurring expenses" in result.output
    assert len(_ids(data_path)) == 2


def test_recurring_until_requires_frequency(cli_runner, data_path):
    result = _run(cli_runner, data_path, "add", "Gym", "30", "Health", "--until", "2030-01-01")

    assert result.exit_code == 1
    assert "--until requires --recurring" in result.output


@pytest.mark.parametrize("args", [["--period", "this-month", "--start-date", "2024-01-01"]])
def test_period_conflicts_with_dates(cli_runner, data_path, args):
    result = _run(cli_runner, data_path, "list", *args)

    assert result.exit_code == 1
    assert "cannot be combined" in result.output
