from __future__ import annotations

"""
Tests for the expense commands.

Each command's run() is called directly against a temporary workspace; the
assertions check the exit code, the console message and the expense file.
"""

import json
from datetime import datetime, timezone

from spendlog.cli.command import add, delete, init, list_expenses, summary, update
from spendlog.config import Settings, load_settings
from spendlog.model.expense import Expense
from spendlog.model.expense_io import save_expenses


def _seed(workspace, *specs: tuple[int, str, float, int]):
    save_expenses(
        workspace.expenses_path,
        [
            Expense(
                id=expense_id,
                description=description,
                amount=amount,
                created_at=datetime(2024, month, 15, 12, tzinfo=timezone.utc),
            )
            for expense_id, description, amount, month in specs
        ],
    )


def _records(workspace) -> list[dict]:
    return json.loads(workspace.expenses_path.read_text(encoding="utf-8"))


class DescribeInitCommand:
    def it_should_create_data_dir_and_settings(self, workspace):
        rc = init.run(workspace=workspace)

        assert rc == 0
        assert workspace.data_dir.is_dir()
        assert workspace.settings_config.exists()
        assert load_settings(workspace.settings_config) == Settings()

    def it_should_keep_existing_settings(self, workspace):
        workspace.config_dir.mkdir()
        workspace.settings_config.write_text("currency_symbol: '€'\n", encoding="utf-8")

        rc = init.run(workspace=workspace)

        assert rc == 0
        assert workspace.settings_config.read_text(encoding="utf-8") == "currency_symbol: '€'\n"


class DescribeAddCommand:
    def it_should_add_expense_and_print_its_id(self, workspace, capsys):
        rc = add.run(description="Lunch", amount=20, workspace=workspace)

        assert rc == 0
        assert "Expense added successfully (ID: 1)" in capsys.readouterr().out
        assert _records(workspace)[0]["description"] == "Lunch"

    def it_should_fail_on_negative_amount(self, workspace, capsys):
        rc = add.run(description="Lunch", amount=-5, workspace=workspace)

        assert rc == 1
        assert "Amount must be a non-negative number" in capsys.readouterr().out
        assert not workspace.expenses_path.exists()

    def it_should_fail_on_corrupt_file(self, workspace, capsys):
        workspace.data_dir.mkdir()
        workspace.expenses_path.write_text("{oops", encoding="utf-8")

        rc = add.run(description="Lunch", amount=5, workspace=workspace)

        assert rc == 1
        assert "is corrupt" in capsys.readouterr().out

    def it_should_fail_on_invalid_settings(self, workspace, capsys):
        workspace.config_dir.mkdir()
        workspace.settings_config.write_text("colour: blue\n", encoding="utf-8")

        rc = add.run(description="Lunch", amount=5, workspace=workspace)

        assert rc == 1
        assert "Settings file" in capsys.readouterr().out


class DescribeUpdateCommand:
    def it_should_update_amount(self, workspace, capsys):
        _seed(workspace, (1, "Lunch", 20, 8))

        rc = update.run(expense_id=1, amount=25, workspace=workspace)

        assert rc == 0
        assert "Expense ID 1 updated successfully!" in capsys.readouterr().out
        record = _records(workspace)[0]
        assert record["amount"] == 25
        assert record["updatedAt"] is not None

    def it_should_report_missing_expense(self, workspace, capsys):
        _seed(workspace, (1, "Lunch", 20, 8))

        rc = update.run(expense_id=3, description="Dinner", workspace=workspace)

        assert rc == 1
        assert "Expense with ID 3 not found." in capsys.readouterr().out


class DescribeDeleteCommand:
    def it_should_delete_expense(self, workspace, capsys):
        _seed(workspace, (1, "Lunch", 20, 8), (2, "Dinner", 10, 8))

        rc = delete.run(expense_id=1, workspace=workspace)

        assert rc == 0
        assert "Expense ID 1 deleted successfully!" in capsys.readouterr().out
        assert [r["id"] for r in _records(workspace)] == [2]

    def it_should_report_missing_expense(self, workspace, capsys):
        rc = delete.run(expense_id=1, workspace=workspace)

        assert rc == 1
        assert "Expense with ID 1 not found." in capsys.readouterr().out


class DescribeListCommand:
    def it_should_say_when_there_are_no_expenses(self, workspace, capsys):
        rc = list_expenses.run(workspace=workspace)

        assert rc == 0
        assert "No expense found." in capsys.readouterr().out

    def it_should_print_a_row_per_expense(self, workspace, capsys):
        _seed(workspace, (1, "Lunch", 20, 8), (2, "Coffee [large]", 4.5, 8))

        rc = list_expenses.run(workspace=workspace)

        out = capsys.readouterr().out
        assert rc == 0
        assert "2024-08-15" in out
        assert "Lunch" in out
        assert "Coffee [large]" in out
        assert "4.50" in out


class DescribeSummaryCommand:
    def it_should_print_overall_total(self, workspace, capsys):
        _seed(workspace, (1, "Lunch", 10, 1), (2, "Dinner", 5, 2))

        rc = summary.run(workspace=workspace)

        assert rc == 0
        assert "Total expenses: $15.00" in capsys.readouterr().out

    def it_should_print_month_total_with_month_name(self, workspace, capsys):
        _seed(workspace, (1, "Lunch", 10, 1), (2, "Dinner", 5, 2))

        rc = summary.run(month=1, workspace=workspace)

        assert rc == 0
        assert "Total expenses for January: $10.00" in capsys.readouterr().out

    def it_should_use_configured_currency_symbol(self, workspace, capsys):
        _seed(workspace, (1, "Lunch", 10, 1))
        workspace.config_dir.mkdir()
        workspace.settings_config.write_text("currency_symbol: 'EUR '\n", encoding="utf-8")

        summary.run(workspace=workspace)

        assert "Total expenses: EUR 10.00" in capsys.readouterr().out

    def it_should_reject_invalid_month(self, workspace, capsys):
        rc = summary.run(month=13, workspace=workspace)

        assert rc == 1
        assert "Month must be between 1 and 12" in capsys.readouterr().out
