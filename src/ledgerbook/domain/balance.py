"""Balance reconstruction for ledger accounts.

The balance of an account before a transaction does not depend on insertion
order but on the canonical ledger order (see ``ledgerbook.domain.ordering``):
journals may be backdated, reordered within a day, or split into several legs
hitting the same account.
"""

import logging
from decimal import Decimal
from typing import Optional

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import Journal, Transaction, TransactionPair
from ledgerbook.domain.errors import (
    NotFoundError,
    account_not_found,
    journal_not_found,
    transaction_not_found,
)
from ledgerbook.domain.ordering import OrderingKey, key_for

logger = logging.getLogger(__name__)


class BalanceService:
    """Service reconstructing account balances around a transaction."""

    def __init__(self, db: Database):
        """Initialize balance service.

        Args:
            db: Database instance
        """
        self.db = db

    def balance_before(self, account_id: int, target_key: OrderingKey) -> Decimal:
        """Sum every live transaction on the account that precedes the key.

        Args:
            account_id: Account ID
            target_key: Ordering key of the transaction whose prior balance is wanted

        Returns:
            Exact signed sum; zero when nothing precedes the key
        """
        total = self.db.sum_before(account_id, target_key)
        logger.debug("Balance of account %s before %s is %s", account_id, target_key, total)
        return total

    def balance_before_transaction(self, transaction_id: int) -> Decimal:
        """Get the balance of the transaction's account just before it.

        Raises:
            NotFoundError: If the transaction or its journal does not exist
        """
        txn, journal = self._resolve(transaction_id)
        return self.balance_before(txn.account_id, key_for(journal, txn))

    def balance_after_transaction(self, transaction_id: int) -> Decimal:
        """Get the balance of the transaction's account just after it.

        Raises:
            NotFoundError: If the transaction or its journal does not exist
        """
        txn, journal = self._resolve(transaction_id)
        return self.balance_before(txn.account_id, key_for(journal, txn)) + txn.amount

    def transactions_overview(self, journal_id: int) -> list[TransactionPair]:
        """Pair every outgoing leg of a journal with its incoming leg.

        A destination leg belongs to a source leg when it shares the
        identifier and carries the opposite amount. Each pair reports the
        balances of both accounts before and after the journal hit them.

        Raises:
            NotFoundError: If the journal or one of its accounts does not exist
        """
        journal = self.db.get_journal(journal_id)
        if journal is None:
            raise NotFoundError(journal_not_found(journal_id))

        legs = self.db.list_journal_transactions(journal_id)
        destinations = [leg for leg in legs if leg.amount > 0]

        pairs = []
        for source in (leg for leg in legs if leg.amount < 0):
            destination = self._find_destination(source, destinations)
            if destination is not None:
                destinations.remove(destination)

            source_before = self.balance_before(source.account_id, key_for(journal, source))
            dest_before: Optional[Decimal] = None
            dest_after: Optional[Decimal] = None
            dest_name: Optional[str] = None
            if destination is not None:
                dest_before = self.balance_before(destination.account_id, key_for(journal, destination))
                dest_after = dest_before + destination.amount
                dest_name = self._account_name(destination.account_id)

            pairs.append(
                TransactionPair(
                    source_id=source.id,
                    source_account_id=source.account_id,
                    source_account_name=self._account_name(source.account_id),
                    source_amount=source.amount,
                    source_before=source_before,
                    source_after=source_before + source.amount,
                    destination_id=destination.id if destination else None,
                    destination_account_id=destination.account_id if destination else None,
                    destination_account_name=dest_name,
                    destination_amount=destination.amount if destination else None,
                    destination_before=dest_before,
                    destination_after=dest_after,
                    description=source.description,
                )
            )
        return pairs

    def _resolve(self, transaction_id: int) -> tuple[Transaction, Journal]:
        txn = self.db.get_transaction(transaction_id)
        if txn is None:
            raise NotFoundError(transaction_not_found(transaction_id))
        journal = self.db.get_journal(txn.journal_id)
        if journal is None:
            raise NotFoundError(journal_not_found(txn.journal_id))
        return txn, journal

    @staticmethod
    def _find_destination(source: Transaction, candidates: list[Transaction]) -> Optional[Transaction]:
        for candidate in candidates:
            if candidate.identifier == source.identifier and candidate.amount == -source.amount:
                return candidate
        return None

    def _account_name(self, account_id: int) -> str:
        account = self.db.get_account(account_id)
        if account is None:
            raise NotFoundError(account_not_found(account_id))
        return account.name
