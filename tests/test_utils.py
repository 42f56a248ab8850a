"""Tests for date, amount and account parsing helpers."""

import pytest
from datetime import date, timedelta
from decimal import Decimal

from ledgerbook.domain.entities import AccountType
from ledgerbook.domain.errors import NotFoundError
from ledgerbook.utils.account_resolver import resolve_account
from ledgerbook.utils.amount_parser import parse_amount
from ledgerbook.utils.date_parser import parse_date


def test_parse_absolute_date():
    """Test parsing absolute dates."""
    assert parse_date("2024-01-15") == date(2024, 1, 15)
    assert parse_date("January 15, 2024") == date(2024, 1, 15)


def test_parse_relative_dates():
    """Test relative words against an explicit reference date."""
    today = date(2024, 3, 1)
    assert parse_date("today", today=today) == today
    assert parse_date("Yesterday", today=today) == date(2024, 2, 29)
    assert parse_date("tomorrow", today=today) == today + timedelta(days=1)


def test_parse_invalid_date():
    """Test that nonsense is rejected."""
    with pytest.raises(ValueError, match="Could not parse date"):
        parse_date("not a date")


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("123.45", Decimal("123.45")),
        ("$1,234.56", Decimal("1234.56")),
        ("-45.00", Decimal("-45.00")),
        ("(12.50)", Decimal("-12.50")),
        ("€ 7", Decimal("7")),
    ],
)
def test_parse_amount(raw, expected):
    """Test the supported amount notations."""
    assert parse_amount(raw) == expected


@pytest.mark.parametrize("raw", ["", "   ", "abc", "NaN"])
def test_parse_invalid_amount(raw):
    """Test that unparseable amounts raise ValueError."""
    with pytest.raises(ValueError):
        parse_amount(raw)


def test_resolve_account_by_id_and_name(account_service):
    """Test resolving accounts by ID, numeric string and name."""
    account_id = account_service.create_account("Checking", AccountType.ASSET)
    assert resolve_account(account_service, account_id) == account_id
    assert resolve_account(account_service, str(account_id)) == account_id
    assert resolve_account(account_service, "Checking") == account_id


def test_resolve_unknown_account(account_service):
    """Test that unknown accounts raise NotFoundError."""
    with pytest.raises(NotFoundError):
        resolve_account(account_service, "Nowhere")
    with pytest.raises(NotFoundError):
        resolve_account(account_service, 77)
