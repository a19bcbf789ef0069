"""Tests for CLI commands."""

import pytest
from datetime import date
from decimal import Decimal

from budgetbook.cli.main import cli


def run(cli_runner, temp_db, *args, **kwargs):
    return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args], **kwargs)


def test_help_does_not_touch_database(cli_runner, tmp_path):
    """Test showing help does not create the database file."""
    db_path = tmp_path / "nowhere.db"

    result = cli_runner.invoke(cli, ["--db-path", str(db_path), "--help"])

    assert result.exit_code == 0
    assert "dashboard" in result.output
    assert not db_path.exists()


def test_db_path_from_environment(cli_runner, tmp_path, monkeypatch):
    """Test the database path is read from BUDGETBOOK_DB_PATH."""
    db_path = tmp_path / "env.db"
    monkeypatch.setenv("BUDGETBOOK_DB_PATH", str(db_path))

    result = cli_runner.invoke(cli, ["config", "show"])

    assert result.exit_code == 0
    assert str(db_path) in result.output
    assert db_path.exists()


def test_add_expense(cli_runner, temp_db, transaction_service):
    """Test adding an expense stores a negative amount."""
    result = run(cli_runner, temp_db, "add", "Supermarket", "84,90", "--category", "Groceries", "--date", "2024-03-10")

    assert result.exit_code == 0
    assert "Created transaction" in result.output
    assert "Date: 2024-03-10" in result.output
    assert "Amount: $-84.90" in result.output
    assert "Category: Groceries" in result.output

    details = transaction_service.list_month(date(2024, 3, 1))
    assert len(details) == 1
    assert details[0].transaction.amount == Decimal("-84.90")
    assert details[0].category_name == "Groceries"


def test_add_income(cli_runner, temp_db):
    """Test adding income stores a positive amount."""
    result = run(cli_runner, temp_db, "add", "Salary", "5000", "--kind", "income", "--date", "2024-03-05")

    assert result.exit_code == 0
    assert "Amount: $5,000.00" in result.output
    assert "Kind: income" in result.output


def test_add_unknown_category(cli_runner, temp_db):
    """Test an unknown category is reported but the transaction is saved."""
    result = run(cli_runner, temp_db, "add", "Bus", "4", "--category", "Teleport")

    assert result.exit_code == 0
    assert "Category 'Teleport' not found, saved without category" in result.output


@pytest.mark.parametrize("amount", ["0", "abc"])
def test_add_invalid_amount(cli_runner, temp_db, amount):
    """Test invalid amounts are rejected with an error."""
    result = run(cli_runner, temp_db, "add", "Coffee", amount)

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_add_blank_description(cli_runner, temp_db):
    """Test a blank description is rejected."""
    result = run(cli_runner, temp_db, "add", "  ", "10")

    assert result.exit_code == 1
    assert "Description is required" in result.output


def test_dashboard(cli_runner, temp_db, transaction_service, settings_service):
    """Test the dashboard shows the month overview."""
    settings_service.set_fixed_monthly_budget("1200")
    transaction_service.quick_add("Salary", "5000", kind="income", on=date(2024, 1, 5))
    transaction_service.quick_add("Rent", "1200", category_name="Rent/Condo", on=date(2024, 1, 10))
    transaction_service.quick_add("Supermarket", "300", category_name="Groceries", on=date(2024, 1, 12))

    result = run(cli_runner, temp_db, "dashboard", "--month", "2024-01-20")

    assert result.exit_code == 0
    assert "Overview 2024-01 (2024-01-01 to 2024-01-31)" in result.output
    assert "$5,000.00" in result.output
    assert "$1,500.00" in result.output
    assert "$3,800.00" in result.output
    assert "$3,500.00" in result.output
    assert "overspent" not in result.output


def test_dashboard_overspent(cli_runner, temp_db, transaction_service, settings_service):
    """Test the dashboard warns when the variable budget is overspent."""
    settings_service.set_fixed_monthly_budget("900")
    transaction_service.quick_add("Salary", "1000", kind="income", on=date(2024, 1, 5))
    transaction_service.quick_add("Trip", "500", category_name="Leisure", on=date(2024, 1, 10))

    result = run(cli_runner, temp_db, "dashboard", "--month", "2024-01-01")

    assert result.exit_code == 0
    assert "$-400.00" in result.output
    assert "Variable budget overspent!" in result.output


def test_dashboard_invalid_month(cli_runner, temp_db):
    """Test an unparseable month is reported as an error."""
    result = run(cli_runner, temp_db, "dashboard", "--month", "not a date")

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_category_list(cli_runner, temp_db):
    """Test the seeded categories are listed on first launch."""
    result = run(cli_runner, temp_db, "category", "list")

    assert result.exit_code == 0
    assert "Rent/Condo" in result.output
    assert "Salary" in result.output
    assert result.output.count("fixed: yes") == 3


def test_category_list_by_kind(cli_runner, temp_db):
    """Test filtering the category list by kind."""
    result = run(cli_runner, temp_db, "category", "list", "--kind", "income")

    assert result.exit_code == 0
    assert "Salary" in result.output
    assert "Groceries" not in result.output


def test_category_save(cli_runner, temp_db, category_service):
    """Test creating and then updating a category keeps its ID."""
    result = run(cli_runner, temp_db, "category", "save", "Gym", "--fixed")
    assert result.exit_code == 0
    assert "Created category 'Gym'" in result.output

    result = run(cli_runner, temp_db, "category", "save", "Gym", "--variable")
    assert result.exit_code == 0
    assert "Updated category 'Gym'" in result.output

    assert category_service.get_category_by_name("Gym").is_fixed is False


def test_fixed_add_list_generate(cli_runner, temp_db, transaction_service):
    """Test adding templates and generating the month's fixed expenses."""
    result = run(cli_runner, temp_db, "fixed", "add", "Rent", "1200", "5", "--category", "Rent/Condo")
    assert result.exit_code == 0
    assert "Created fixed item 'Rent'" in result.output

    result = run(cli_runner, temp_db, "fixed", "add", "Gym", "80", "31")
    assert result.exit_code == 0

    result = run(cli_runner, temp_db, "fixed", "list")
    assert result.exit_code == 0
    assert "Rent" in result.output
    assert "Rent/Condo" in result.output
    assert "No category" in result.output

    result = run(cli_runner, temp_db, "fixed", "generate", "--month", "2024-02-15")
    assert result.exit_code == 0
    assert "Generated 2 fixed transaction(s) for the month." in result.output

    dates = sorted(d.transaction.date for d in transaction_service.list_month(date(2024, 2, 1)))
    assert dates == [date(2024, 2, 5), date(2024, 2, 29)]


def test_fixed_add_income_category(cli_runner, temp_db):
    """Test a fixed item cannot use an income category."""
    result = run(cli_runner, temp_db, "fixed", "add", "Paycheck", "3000", "5", "--category", "Salary")

    assert result.exit_code == 1
    assert "not an expense category" in result.output


def test_fixed_add_invalid_day(cli_runner, temp_db):
    """Test days outside 1-31 are rejected."""
    result = run(cli_runner, temp_db, "fixed", "add", "Rent", "1200", "32")

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_fixed_generate_without_templates(cli_runner, temp_db):
    """Test generating with no templates."""
    result = run(cli_runner, temp_db, "fixed", "generate")

    assert result.exit_code == 0
    assert "No fixed items to generate." in result.output


def test_fixed_delete(cli_runner, temp_db, fixed_item_service):
    """Test deleting a template."""
    item_id = fixed_item_service.create_fixed_item("Rent", "1200", 5)

    result = run(cli_runner, temp_db, "fixed", "delete", str(item_id), "--yes")

    assert result.exit_code == 0
    assert f"Deleted fixed item {item_id}" in result.output


def test_fixed_delete_missing(cli_runner, temp_db):
    """Test deleting an unknown template fails."""
    result = run(cli_runner, temp_db, "fixed", "delete", "999", "--yes")

    assert result.exit_code == 1
    assert "Fixed item 999 not found" in result.output


def test_history_list(cli_runner, temp_db, transaction_service):
    """Test the history lists the month's transactions with categories."""
    transaction_service.quick_add("Rent", "1200", category_name="Rent/Condo", on=date(2024, 5, 5))
    transaction_service.quick_add("Coffee", "4", on=date(2024, 5, 6))

    result = run(cli_runner, temp_db, "history", "list", "--month", "2024-05-01")

    assert result.exit_code == 0
    assert "Found 2 transaction(s):" in result.output
    assert "Rent/Condo (fixed)" in result.output
    assert "No category" in result.output
    assert result.output.index("Coffee") < result.output.index("Rent ")


def test_history_list_empty(cli_runner, temp_db):
    """Test listing a month without transactions."""
    result = run(cli_runner, temp_db, "history", "list", "--month", "2024-05-01")

    assert result.exit_code == 0
    assert "No transactions found." in result.output


def test_history_update_keeps_unspecified_fields(cli_runner, temp_db, transaction_service, category_service):
    """Test editing only the amount keeps date, kind and category."""
    txn_id = transaction_service.quick_add("Supermarket", "50", category_name="Groceries", on=date(2024, 5, 5))

    result = run(cli_runner, temp_db, "history", "update", str(txn_id), "--amount", "95,00")

    assert result.exit_code == 0
    assert f"Updated transaction {txn_id}" in result.output

    details = transaction_service.list_month(date(2024, 5, 1))
    txn = details[0].transaction
    assert txn.amount == Decimal("-95.00")
    assert txn.date == date(2024, 5, 5)
    assert details[0].category_name == "Groceries"


def test_history_update_kind_resigns_amount(cli_runner, temp_db, transaction_service):
    """Test switching the kind to income flips the stored sign."""
    txn_id = transaction_service.quick_add("Refund", "20", on=date(2024, 5, 5))

    result = run(cli_runner, temp_db, "history", "update", str(txn_id), "--kind", "income")

    assert result.exit_code == 0
    details = transaction_service.list_month(date(2024, 5, 1))
    assert details[0].transaction.amount == Decimal("20")


def test_history_update_clears_category(cli_runner, temp_db, transaction_service):
    """Test an empty category clears it."""
    txn_id = transaction_service.quick_add("Supermarket", "50", category_name="Groceries", on=date(2024, 5, 5))

    result = run(cli_runner, temp_db, "history", "update", str(txn_id), "--category", "")

    assert result.exit_code == 0
    details = transaction_service.list_month(date(2024, 5, 1))
    assert details[0].category_name is None


def test_history_update_missing(cli_runner, temp_db):
    """Test editing an unknown transaction fails."""
    result = run(cli_runner, temp_db, "history", "update", "999", "--amount", "1")

    assert result.exit_code == 1
    assert "Transaction 999 not found" in result.output


def test_history_delete(cli_runner, temp_db, transaction_service):
    """Test deleting a transaction after confirmation."""
    txn_id = transaction_service.quick_add("Coffee", "4", on=date(2024, 5, 6))

    result = run(cli_runner, temp_db, "history", "delete", str(txn_id), input="y\n")

    assert result.exit_code == 0
    assert f"Deleted transaction {txn_id}" in result.output
    assert transaction_service.list_month(date(2024, 5, 1)) == []


def test_history_delete_cancelled(cli_runner, temp_db, transaction_service):
    """Test declining the confirmation keeps the transaction."""
    txn_id = transaction_service.quick_add("Coffee", "4", on=date(2024, 5, 6))

    result = run(cli_runner, temp_db, "history", "delete", str(txn_id), input="n\n")

    assert result.exit_code == 0
    assert "Deletion cancelled." in result.output
    assert len(transaction_service.list_month(date(2024, 5, 1))) == 1


def test_history_delete_missing(cli_runner, temp_db):
    """Test deleting an unknown transaction fails."""
    result = run(cli_runner, temp_db, "history", "delete", "999", "--yes")

    assert result.exit_code == 1
    assert "Error: Transaction 999 not found" in result.output


def test_config_set_budget(cli_runner, temp_db, settings_service):
    """Test setting the fixed monthly budget."""
    result = run(cli_runner, temp_db, "config", "set-budget", "1200,50")

    assert result.exit_code == 0
    assert "Fixed monthly budget set to $1,200.50" in result.output
    assert settings_service.get_fixed_monthly_budget() == Decimal("1200.50")

    result = run(cli_runner, temp_db, "config", "show")
    assert "Fixed monthly budget (Y): $1,200.50" in result.output
    assert "Default account: Default Account (Manual)" in result.output


def test_config_set_budget_invalid(cli_runner, temp_db):
    """Test a non-numeric budget is rejected."""
    result = run(cli_runner, temp_db, "config", "set-budget", "lots")

    assert result.exit_code == 1
    assert "Error:" in result.output
