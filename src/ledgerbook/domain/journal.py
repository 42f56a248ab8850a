"""Journal domain service."""

import logging
from typing import Mapping, Optional, Sequence
from datetime import date
from decimal import Decimal
from ledgerbook.database.base import Database
from ledgerbook.domain.amounts import check_amount
from ledgerbook.domain.bill_matcher import BillMatcher
from ledgerbook.domain.entities import (
    OWN_ACCOUNT_TYPES,
    AccountType,
    Bill,
    Journal as JournalEntity,
    JournalType,
    Transaction,
)
from ledgerbook.domain.errors import (
    NotFoundError,
    ValidationError,
    account_not_found,
    journal_not_found,
    unbalanced_journal,
)

logger = logging.getLogger(__name__)


def classify_journal(
    legs: Sequence[tuple[int, Decimal, int]], account_types: Mapping[int, AccountType]
) -> JournalType:
    """Tell withdrawals, deposits and transfers apart from the accounts involved.

    Money moving only between the owner's own accounts is a transfer. Money
    reaching any outside account is a withdrawal. Anything else brings money
    in from outside and is a deposit.
    """
    own = [account_types[account_id] in OWN_ACCOUNT_TYPES for account_id, _, _ in legs]
    if all(own):
        return JournalType.TRANSFER
    receives_outside = any(
        amount > 0 and not is_own for (_, amount, _), is_own in zip(legs, own)
    )
    return JournalType.WITHDRAWAL if receives_outside else JournalType.DEPOSIT


class JournalService:
    """Service for recording and removing journals."""

    def __init__(self, db: Database):
        """Initialize journal service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_journal(
        self,
        date: date,
        description: str,
        legs: Sequence[tuple[int, Decimal, int]],
        order: int = 0,
        completed: bool = True,
    ) -> int:
        """Record a journal with its transaction legs.

        Args:
            date: Journal date
            description: Journal description
            legs: (account_id, amount, identifier) for each leg
            order: Same-day ordering value; higher comes earlier in the day
            completed: Whether the journal is final

        Returns:
            Journal ID

        Raises:
            ValidationError: If fewer than two legs are given, an amount cannot
                be stored exactly, the legs do not sum to zero, or a leg
                identifier repeats on the same account
            NotFoundError: If a leg account doesn't exist
        """
        description = description.strip()
        if not description:
            raise ValidationError("Journal description cannot be empty")
        if len(legs) < 2:
            raise ValidationError("A journal needs at least two legs")

        legs = [(account_id, check_amount(amount), identifier) for account_id, amount, identifier in legs]
        total = sum((amount for _, amount, _ in legs), Decimal("0"))
        if total != 0:
            raise ValidationError(unbalanced_journal(total))

        seen = set()
        account_types = {}
        for account_id, _, identifier in legs:
            account = self.db.get_account(account_id)
            if account is None:
                raise NotFoundError(account_not_found(account_id))
            account_types[account_id] = account.account_type
            if (account_id, identifier) in seen:
                raise ValidationError(
                    f"Identifier {identifier} is used twice for account {account_id}"
                )
            seen.add((account_id, identifier))

        journal_type = classify_journal(legs, account_types)
        journal_id = self.db.create_journal(
            description=description,
            date=date,
            legs=legs,
            order=order,
            completed=completed,
            journal_type=journal_type,
        )
        logger.debug("Created %s journal %s with %d legs", journal_type.value, journal_id, len(legs))
        return journal_id

    def create_transfer(
        self,
        date: date,
        description: str,
        source_account_id: int,
        destination_account_id: int,
        amount: Decimal,
        order: int = 0,
        automatch: bool = True,
    ) -> tuple[int, Optional[Bill]]:
        """Record a two-leg journal moving ``amount`` from source to destination.

        Args:
            amount: Positive amount moved
            automatch: If True, link the journal to the first matching bill

        Returns:
            Tuple of (journal ID, matched bill or None)

        Raises:
            ValidationError: If amount is not positive, cannot be stored exactly,
                or both accounts are the same
        """
        amount = check_amount(amount)
        if amount <= 0:
            raise ValidationError("Amount must be positive")
        if source_account_id == destination_account_id:
            raise ValidationError("Source and destination accounts must differ")

        journal_id = self.create_journal(
            date=date,
            description=description,
            legs=[(source_account_id, -amount, 0), (destination_account_id, amount, 0)],
            order=order,
        )
        bill = BillMatcher(self.db).scan_all(journal_id) if automatch else None
        return journal_id, bill

    def get_journal(self, journal_id: int) -> Optional[JournalEntity]:
        """Get journal by ID, or None if not found."""
        return self.db.get_journal(journal_id)

    def get_legs(self, journal_id: int) -> list[Transaction]:
        """Get the transaction legs of a journal.

        Raises:
            NotFoundError: If the journal doesn't exist
        """
        if self.db.get_journal(journal_id) is None:
            raise NotFoundError(journal_not_found(journal_id))
        return self.db.list_journal_transactions(journal_id)

    def list_journals(
        self,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        account_ids: Optional[Sequence[int]] = None,
        journal_types: Optional[Sequence[JournalType | str]] = None,
        page: int = 1,
        page_size: Optional[int] = None,
    ) -> list[JournalEntity]:
        """List journals, most recent first, with optional filters.

        Args:
            start_date: Earliest journal date, inclusive
            end_date: Latest journal date, inclusive
            account_ids: Keep journals touching any of these accounts
            journal_types: Keep journals of any of these types
            page: 1-based page number
            page_size: Journals per page; None lists every match on one page

        Raises:
            ValidationError: If a type is unknown or the page settings are invalid
        """
        if page < 1:
            raise ValidationError("Page must be 1 or greater")
        if page_size is not None and page_size < 1:
            raise ValidationError("Page size must be 1 or greater")
        if page_size is None and page != 1:
            raise ValidationError("Page needs a page size")

        types = None
        if journal_types is not None:
            try:
                types = [JournalType(t) for t in journal_types]
            except ValueError as e:
                raise ValidationError(f"Unknown journal type: {e}") from e

        return self.db.list_journals(
            start_date=start_date,
            end_date=end_date,
            account_ids=account_ids,
            journal_types=types,
            page=page,
            page_size=page_size,
        )

    def delete_journal(self, journal_id: int) -> None:
        """Soft-delete a journal and its legs.

        Raises:
            NotFoundError: If the journal doesn't exist
        """
        if self.db.get_journal(journal_id) is None:
            raise NotFoundError(journal_not_found(journal_id))
        self.db.soft_delete_journal(journal_id)
