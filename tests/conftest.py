"""Shared pytest fixtures for ledgerbook tests."""

import tempfile
import os
from datetime import date
from decimal import Decimal
import pytest

from ledgerbook.database.factories import create_sqlite_database
from ledgerbook.domain.account import AccountService
from ledgerbook.domain.balance import BalanceService
from ledgerbook.domain.bill import BillService
from ledgerbook.domain.bill_matcher import BillMatcher
from ledgerbook.domain.bill_scheduler import BillScheduler
from ledgerbook.domain.entities import AccountType, Bill, RepeatFrequency
from ledgerbook.domain.journal import JournalService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def account_service(temp_db):
    """Create an AccountService with a temporary database."""
    return AccountService(temp_db)


@pytest.fixture
def journal_service(temp_db):
    """Create a JournalService with a temporary database."""
    return JournalService(temp_db)


@pytest.fixture
def bill_service(temp_db):
    """Create a BillService with a temporary database."""
    return BillService(temp_db)


@pytest.fixture
def balance_service(temp_db):
    """Create a BalanceService with a temporary database."""
    return BalanceService(temp_db)


@pytest.fixture
def bill_matcher(temp_db):
    """Create a BillMatcher with a temporary database."""
    return BillMatcher(temp_db)


@pytest.fixture
def bill_scheduler(temp_db):
    """Create a BillScheduler with a temporary database."""
    return BillScheduler(temp_db)


@pytest.fixture
def sample_accounts(account_service):
    """Create an asset, an expense and a revenue account; return their IDs by role."""
    return {
        "checking": account_service.create_account("Checking", AccountType.ASSET),
        "supermart": account_service.create_account("SuperMart", AccountType.EXPENSE),
        "employer": account_service.create_account("Employer", AccountType.REVENUE),
    }


@pytest.fixture
def make_bill():
    """Build in-memory Bill entities with sensible defaults."""

    def _make_bill(**overrides) -> Bill:
        values = {
            "id": 1,
            "name": "Groceries",
            "match": "grocery,market",
            "amount_min": Decimal("10.00"),
            "amount_max": Decimal("50.00"),
            "date": date(2020, 1, 31),
            "repeat_freq": RepeatFrequency.MONTHLY,
            "skip": 0,
            "automatch": True,
            "active": True,
        }
        values.update(overrides)
        return Bill(**values)

    return _make_bill


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
