"""Canonical ledger order for transactions sharing an account.

Transactions are ordered by journal date, then by journal ``order`` with the
*higher* value first, then by journal ID, then by the leg identifier. The
4-tuple is unique per transaction, so two distinct transactions never tie.
"""

from dataclasses import dataclass
from datetime import date
from functools import total_ordering

from ledgerbook.domain.entities import Journal, Transaction


@total_ordering
@dataclass(frozen=True)
class OrderingKey:
    """Sort key of a transaction in the ledger of its account."""

    date: date
    order: int
    journal_id: int
    identifier: int

    def sort_key(self) -> tuple[date, int, int, int]:
        """Return a tuple whose natural ordering is the ledger order."""
        # Same-day journals with a larger order value come first
        return (self.date, -self.order, self.journal_id, self.identifier)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, OrderingKey):
            return NotImplemented
        return self.sort_key() < other.sort_key()


def key_for(journal: Journal, transaction: Transaction) -> OrderingKey:
    """Build the ordering key of a transaction leg from its journal."""
    return OrderingKey(
        date=journal.date,
        order=journal.order,
        journal_id=journal.id,
        identifier=transaction.identifier,
    )


def compare_keys(left: OrderingKey, right: OrderingKey) -> int:
    """Compare two keys, returning -1, 0 or 1 like a classic comparator."""
    if left < right:
        return -1
    if right < left:
        return 1
    return 0
