"""Abstract database interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence
from datetime import date
from decimal import Decimal

# Import entities directly to avoid circular import through domain/__init__.py
from ledgerbook.domain.entities import (
    Account,
    AccountType,
    Bill,
    Journal,
    JournalType,
    RepeatFrequency,
    Transaction,
)
from ledgerbook.domain.ordering import OrderingKey


class Database(ABC):
    """Abstract database interface for ledgerbook.

    Besides plain CRUD, this is the read/write contract the balance and bill
    logic depend on: ``transactions_for_account`` (ledger query), ``sum_before``
    (the same ledger order evaluated as a SQL sum),
    ``has_journal_in_range`` (journal existence), ``get_account`` (account
    type lookup) and ``associate_bill_with_journal`` (the only write).
    Implementations raise StoreUnavailableError on I/O failure.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    # Account operations
    @abstractmethod
    def create_account(self, name: str, account_type: AccountType) -> int:
        """Create a new account. Returns account ID."""
        pass

    @abstractmethod
    def get_account(self, account_id: int) -> Optional[Account]:
        """Get account by ID."""
        pass

    @abstractmethod
    def list_accounts(self) -> list[Account]:
        """List all accounts."""
        pass

    # Journal operations
    @abstractmethod
    def create_journal(
        self,
        description: str,
        date: date,
        legs: list[tuple[int, Decimal, int]],
        order: int = 0,
        completed: bool = True,
        journal_type: JournalType = JournalType.WITHDRAWAL,
    ) -> int:
        """Create a journal with its legs in one unit of work. Returns journal ID.

        Args:
            legs: (account_id, amount, identifier) for each transaction leg
        """
        pass

    @abstractmethod
    def get_journal(self, journal_id: int) -> Optional[Journal]:
        """Get a non-deleted journal by ID."""
        pass

    @abstractmethod
    def list_journals(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        account_ids: Optional[Sequence[int]] = None,
        journal_types: Optional[Sequence[JournalType]] = None,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> list[Journal]:
        """List non-deleted journals, most recent first.

        Args:
            start_date: Earliest journal date, inclusive
            end_date: Latest journal date, inclusive
            account_ids: Keep journals with a live leg on any of these accounts
            journal_types: Keep journals of any of these types
            page: 1-based page number, used with page_size
            page_size: Journals per page; None returns every match
        """
        pass

    @abstractmethod
    def soft_delete_journal(self, journal_id: int) -> None:
        """Mark a journal and all its legs as deleted."""
        pass

    # Transaction operations
    @abstractmethod
    def get_transaction(self, transaction_id: int) -> Optional[Transaction]:
        """Get a non-deleted transaction by ID."""
        pass

    @abstractmethod
    def list_journal_transactions(self, journal_id: int) -> list[Transaction]:
        """List non-deleted legs of a journal, by identifier then ID."""
        pass

    @abstractmethod
    def transactions_for_account(self, account_id: int) -> list[tuple[OrderingKey, Decimal]]:
        """Return (ordering key, amount) for every live transaction on an account.

        Transactions or journals that are soft-deleted are excluded.
        """
        pass

    @abstractmethod
    def sum_before(self, account_id: int, key: OrderingKey) -> Decimal:
        """Sum the live transactions on an account whose ordering key precedes ``key``.

        Returns Decimal("0") when no transaction precedes it.
        """
        pass

    # Bill operations
    @abstractmethod
    def create_bill(
        self,
        name: str,
        match: str,
        amount_min: Decimal,
        amount_max: Decimal,
        date: date,
        repeat_freq: RepeatFrequency,
        skip: int = 0,
        automatch: bool = True,
        active: bool = True,
    ) -> int:
        """Create a bill. Returns bill ID."""
        pass

    @abstractmethod
    def get_bill(self, bill_id: int) -> Optional[Bill]:
        """Get a non-deleted bill by ID."""
        pass

    @abstractmethod
    def list_bills(self, active_only: bool = False) -> list[Bill]:
        """List non-deleted bills ordered by ID."""
        pass

    @abstractmethod
    def update_bill(self, bill_id: int, **fields) -> None:
        """Update the given bill fields."""
        pass

    @abstractmethod
    def soft_delete_bill(self, bill_id: int) -> None:
        """Mark a bill as deleted."""
        pass

    @abstractmethod
    def has_journal_in_range(self, bill_id: int, start: date, end: date) -> bool:
        """Check whether a live journal linked to the bill falls in [start, end]."""
        pass

    @abstractmethod
    def associate_bill_with_journal(self, journal_id: int, bill_id: int) -> bool:
        """Link a journal to a bill with a single-row update.

        Returns:
            True if a journal row was updated
        """
        pass
