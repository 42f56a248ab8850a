"""Domain model entities for ledgerbook.

These are pure data classes representing business concepts, independent of
database schema. The balance and bill logic only ever sees these immutable
views; the SQLAlchemy models stay inside the database package.
"""

from dataclasses import dataclass
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional


class AccountType(str, Enum):
    """Account types, labelled the way the ledger stores them."""

    ASSET = "Asset account"
    EXPENSE = "Expense account"
    BENEFICIARY = "Beneficiary account"
    REVENUE = "Revenue account"
    CASH = "Cash account"
    DEFAULT = "Default account"


# Account types whose name is appended to the description when matching bills
PAYEE_ACCOUNT_TYPES = frozenset({AccountType.EXPENSE, AccountType.BENEFICIARY})


class JournalType(str, Enum):
    """Kind of money movement a journal records, seen from the owner's accounts."""

    WITHDRAWAL = "Withdrawal"
    DEPOSIT = "Deposit"
    TRANSFER = "Transfer"


# Account types that hold the owner's own money
OWN_ACCOUNT_TYPES = frozenset({AccountType.ASSET, AccountType.CASH, AccountType.DEFAULT})


class RepeatFrequency(str, Enum):
    """How often a bill repeats."""

    WEEKLY = "weekly"
    MONTHLY = "monthly"
    QUARTERLY = "quarterly"
    HALF_YEAR = "half-year"
    YEARLY = "yearly"


@dataclass(frozen=True)
class Account:
    """Ledger account domain entity."""

    id: int
    name: str
    account_type: AccountType
    created_at: datetime


@dataclass(frozen=True)
class Journal:
    """One recorded economic event, made of balanced transaction legs."""

    id: int
    description: str
    date: date
    order: int
    journal_type: JournalType
    completed: bool
    bill_id: Optional[int]
    created_at: datetime


@dataclass(frozen=True)
class Transaction:
    """One account-side leg of a journal."""

    id: int
    journal_id: int
    account_id: int
    amount: Decimal
    identifier: int
    description: Optional[str] = None


@dataclass(frozen=True)
class Bill:
    """Recurring bill domain entity."""

    id: int
    name: str
    match: str
    amount_min: Decimal
    amount_max: Decimal
    date: date
    repeat_freq: RepeatFrequency
    skip: int
    automatch: bool
    active: bool

    @property
    def keywords(self) -> list[str]:
        """Lowercased, non-empty keywords from the comma-separated match field."""
        words = [word.strip().lower() for word in self.match.split(",")]
        return [word for word in words if word]


@dataclass(frozen=True)
class Period:
    """One recurrence interval, inclusive on both ends."""

    start: date
    end: date


@dataclass(frozen=True)
class TransactionPair:
    """A source leg joined to its destination leg, with running balances."""

    source_id: int
    source_account_id: int
    source_account_name: str
    source_amount: Decimal
    source_before: Decimal
    source_after: Decimal
    destination_id: Optional[int]
    destination_account_id: Optional[int]
    destination_account_name: Optional[str]
    destination_amount: Optional[Decimal]
    destination_before: Optional[Decimal]
    destination_after: Optional[Decimal]
    description: Optional[str] = None
