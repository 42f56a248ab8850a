"""Matching journals to recurring bills."""

import logging
from typing import Optional, Sequence

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import PAYEE_ACCOUNT_TYPES, Bill, Journal, Transaction
from ledgerbook.domain.errors import NotFoundError, account_not_found, journal_not_found

logger = logging.getLogger(__name__)


class BillMatcher:
    """Decides whether a journal pays a bill and links the two when it does."""

    def __init__(self, db: Database):
        """Initialize bill matcher.

        Args:
            db: Database instance
        """
        self.db = db

    @staticmethod
    def word_match(bill: Bill, search_text: str) -> bool:
        """Check that every bill keyword occurs in the search text.

        Each keyword, duplicates included, must be found on its own; finding
        only some of them is not a match. A bill without keywords never
        matches.
        """
        keywords = bill.keywords
        if not keywords:
            return False
        hits = sum(1 for word in keywords if word in search_text)
        if hits == len(keywords):
            logger.debug("Word match for bill %s", bill.id)
            return True
        logger.debug("Bill %s: %d of %d keywords found", bill.id, hits, len(keywords))
        return False

    @staticmethod
    def amount_match(bill: Bill, legs: Sequence[Transaction]) -> bool:
        """Check that the journal amount falls within the bill range, inclusive.

        The amount is the larger absolute value of the first two legs, so a
        journal needs at least two legs to match.
        """
        if len(legs) < 2:
            return False
        amount = max(abs(legs[0].amount), abs(legs[1].amount))
        matched = bill.amount_min <= amount <= bill.amount_max
        if matched:
            logger.debug("Amount match for bill %s: %s", bill.id, amount)
        return matched

    def search_text(self, journal: Journal, legs: Sequence[Transaction]) -> str:
        """Build the lowercased text that bill keywords are searched in.

        Names of expense and beneficiary accounts are appended to the journal
        description for narrower matching.
        """
        text = journal.description.lower()
        for leg in legs:
            account = self.db.get_account(leg.account_id)
            if account is None:
                raise NotFoundError(account_not_found(leg.account_id))
            if account.account_type in PAYEE_ACCOUNT_TYPES:
                text += " " + account.name.lower()
        return text

    def matches(self, bill: Bill, journal: Journal, legs: Sequence[Transaction]) -> bool:
        """Decide whether the journal pays the bill, without writing anything."""
        text = self.search_text(journal, legs)
        logger.debug("Scanning '%s' for keywords %s", text, ":".join(bill.keywords))
        return self.word_match(bill, text) and self.amount_match(bill, legs)

    def scan(self, bill: Bill, journal_id: int) -> bool:
        """Match a journal against a bill and link them on success.

        Returns:
            True if the journal matched and was linked to the bill

        Raises:
            NotFoundError: If the journal or one of its accounts does not exist
        """
        journal = self.db.get_journal(journal_id)
        if journal is None:
            raise NotFoundError(journal_not_found(journal_id))
        legs = self.db.list_journal_transactions(journal_id)

        if not self.matches(bill, journal, legs):
            return False

        logger.info("Journal %s matches bill %s", journal_id, bill.id)
        return self.db.associate_bill_with_journal(journal_id, bill.id)

    def scan_all(self, journal_id: int) -> Optional[Bill]:
        """Try every active automatch bill and link the first one that matches.

        Returns:
            The matched bill, or None
        """
        for bill in self.db.list_bills(active_only=True):
            if bill.automatch and self.scan(bill, journal_id):
                return bill
        return None
