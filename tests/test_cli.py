"""Tests for the command-line interface."""

import pytest

from ledgerbook.cli.main import cli


@pytest.fixture
def run(cli_runner, temp_db):
    """Invoke the CLI against the temporary database."""

    def _run(*args):
        return cli_runner.invoke(cli, ["--db-path", temp_db.database_path, *args])

    return _run


@pytest.fixture
def accounts(run):
    assert run("account", "create", "Checking").exit_code == 0
    assert run("account", "create", "SuperMart", "--type", "expense").exit_code == 0
    assert run("account", "create", "Employer", "--type", "revenue").exit_code == 0


def test_help_does_not_need_database(cli_runner):
    """Test that --help works without touching a database."""
    result = cli_runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    assert "Ledgerbook" in result.output


def test_account_list(run, accounts):
    """Test listing accounts shows their type."""
    result = run("account", "list")
    assert result.exit_code == 0
    assert "SuperMart" in result.output
    assert "Expense account" in result.output


def test_duplicate_account(run, accounts):
    """Test that a duplicate account is reported as an error."""
    result = run("account", "create", "Checking")
    assert result.exit_code == 1
    assert "already exists" in result.output


def test_journal_add_and_show_balances(run, accounts):
    """Test recording journals and showing before/after balances."""
    assert run(
        "journal", "add", "--date", "2024-01-01", "--description", "Salary",
        "--from", "Employer", "--to", "Checking", "--amount", "100.00",
    ).exit_code == 0
    result = run(
        "journal", "add", "--date", "2024-01-02", "--description", "Groceries",
        "--from", "Checking", "--to", "SuperMart", "--amount", "45.00",
    )
    assert result.exit_code == 0
    assert "Created journal 2" in result.output

    result = run("journal", "show", "2")
    assert result.exit_code == 0
    assert "100.00 ->        55.00" in result.output
    assert "0.00 ->        45.00" in result.output


def test_journal_add_unknown_account(run, accounts):
    """Test that an unknown account name fails cleanly."""
    result = run(
        "journal", "add", "--date", "2024-01-02", "--description", "Oops",
        "--from", "Nowhere", "--to", "SuperMart", "--amount", "5",
    )
    assert result.exit_code == 1
    assert "Account 'Nowhere' not found" in result.output


def test_journal_show_missing(run):
    """Test showing a missing journal."""
    result = run("journal", "show", "99")
    assert result.exit_code == 1
    assert "Journal 99 not found" in result.output


def test_journal_list_and_delete(run, accounts):
    """Test listing and deleting journals."""
    run(
        "journal", "add", "--date", "2024-01-01", "--description", "Salary",
        "--from", "Employer", "--to", "Checking", "--amount", "100.00",
    )
    result = run("journal", "list", "--account", "Checking")
    assert "Salary" in result.output

    assert run("journal", "delete", "1").exit_code == 0
    assert "No journals found." in run("journal", "list").output


def test_bill_lifecycle(run, accounts):
    """Test creating a bill, auto-matching a journal and the next expected period."""
    result = run(
        "bill", "create", "Groceries", "--match", "grocery,supermart", "--min", "10",
        "--max", "50", "--date", "2024-01-01", "--repeat", "monthly",
    )
    assert result.exit_code == 0
    assert "Created bill 'Groceries' (ID: 1)" in result.output

    result = run("bill", "next", "1", "--today", "2024-03-15")
    assert "period starting 2024-03-01" in result.output

    result = run(
        "journal", "add", "--date", "2024-03-02", "--description", "Weekly grocery run",
        "--from", "Checking", "--to", "SuperMart", "--amount", "45.00",
    )
    assert "Linked to bill 'Groceries'" in result.output

    result = run("bill", "next", "1", "--today", "2024-03-15")
    assert "period starting 2024-04-01" in result.output

    result = run("bill", "ranges", "1", "--start-date", "2024-01-15", "--end-date", "2024-03-01")
    assert result.exit_code == 0
    assert result.output.splitlines() == ["2024-01-01 - 2024-01-31", "2024-02-01 - 2024-02-29"]


def test_bill_scan(run, accounts):
    """Test scanning a journal against a bill manually."""
    run(
        "bill", "create", "Pharmacy", "--match", "pharmacy", "--min", "10",
        "--max", "50", "--date", "2024-01-01", "--no-automatch",
    )
    run(
        "journal", "add", "--date", "2024-03-02", "--description", "Weekly grocery run",
        "--from", "Checking", "--to", "SuperMart", "--amount", "45.00",
    )
    result = run("bill", "scan", "1", "1")
    assert result.exit_code == 0
    assert "does not match" in result.output


def test_bill_create_invalid_range(run):
    """Test that bill validation errors are reported."""
    result = run(
        "bill", "create", "Gym", "--match", "gym", "--min", "60",
        "--max", "50", "--date", "2024-01-01",
    )
    assert result.exit_code == 1
    assert "larger than maximum" in result.output


def test_inactive_bill_has_no_next(run):
    """Test that inactive bills never expect a payment."""
    run(
        "bill", "create", "Old gym", "--match", "gym", "--min", "10",
        "--max", "50", "--date", "2024-01-01", "--inactive",
    )
    result = run("bill", "next", "1", "--today", "2024-03-15")
    assert "No payment expected" in result.output


def test_missing_bill(run):
    """Test referencing a missing bill."""
    result = run("bill", "next", "5")
    assert result.exit_code == 1
    assert "Bill 5 not found" in result.output


def test_journal_list_type_filter_and_paging(run, accounts):
    """Test listing journals by type, by several accounts and one page at a time."""
    run(
        "journal", "add", "--date", "2024-01-01", "--description", "Salary",
        "--from", "Employer", "--to", "Checking", "--amount", "100.00",
    )
    run(
        "journal", "add", "--date", "2024-01-02", "--description", "Groceries",
        "--from", "Checking", "--to", "SuperMart", "--amount", "45.00",
    )

    result = run("journal", "list", "--type", "withdrawal")
    assert result.exit_code == 0
    assert "Groceries" in result.output
    assert "Salary" not in result.output

    result = run("journal", "list", "--account", "Employer", "--account", "SuperMart")
    assert "Salary" in result.output and "Groceries" in result.output

    result = run("journal", "list", "--page", "2", "--page-size", "1")
    assert "Salary" in result.output
    assert "Groceries" not in result.output

    result = run("journal", "list", "--page", "0", "--page-size", "1")
    assert result.exit_code == 1
    assert "Page must be 1 or greater" in result.output


def test_journal_add_rejects_fractional_cents(run, accounts):
    """Test that an amount finer than the stored scale is refused."""
    result = run(
        "journal", "add", "--date", "2024-01-02", "--description", "Dust",
        "--from", "Checking", "--to", "SuperMart", "--amount", "0.00001",
    )
    assert result.exit_code == 1
    assert "more than 4 decimal places" in result.output
