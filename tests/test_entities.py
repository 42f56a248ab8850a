"""Tests for domain entities."""

import pytest
from datetime import date
from decimal import Decimal

from ledgerbook.domain.entities import PAYEE_ACCOUNT_TYPES, AccountType, Period, Transaction


class TestBill:
    """Tests for Bill entity."""

    def test_keywords_split_and_normalized(self, make_bill):
        """Test keyword parsing of the match field."""
        bill = make_bill(match="Grocery, Market,,MARKET ")
        assert bill.keywords == ["grocery", "market", "market"]

    def test_bill_immutability(self, make_bill):
        """Test that Bill entities are immutable."""
        bill = make_bill()
        with pytest.raises(Exception):  # dataclass frozen raises FrozenInstanceError
            bill.skip = 3


def test_transaction_equality():
    """Test Transaction entity equality."""
    t1 = Transaction(id=1, journal_id=2, account_id=3, amount=Decimal("1.50"), identifier=0)
    t2 = Transaction(id=1, journal_id=2, account_id=3, amount=Decimal("1.5"), identifier=0)
    assert t1 == t2


def test_period_is_value_object():
    """Test Period equality and hashing."""
    assert {Period(date(2024, 1, 1), date(2024, 1, 31))} == {Period(date(2024, 1, 1), date(2024, 1, 31))}


def test_payee_account_types():
    """Test which account types take part in bill keyword matching."""
    assert PAYEE_ACCOUNT_TYPES == {AccountType.EXPENSE, AccountType.BENEFICIARY}
