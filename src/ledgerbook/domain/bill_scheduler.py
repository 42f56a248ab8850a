"""Bill occurrence scheduling."""

import logging
from datetime import date, timedelta
from typing import Callable, Iterator, Optional

from ledgerbook.database.base import Database
from ledgerbook.domain.entities import Bill, Period
from ledgerbook.domain.errors import InvalidRuleError
from ledgerbook.domain.recurrence import add_period, end_of_period, start_of_period

logger = logging.getLogger(__name__)

# Upper bound on periods walked for a single bill, whatever the window
MAX_PERIODS = 10_000

ExistenceCheck = Callable[[date, date], bool]


class BillScheduler:
    """Enumerates bill periods and finds the next one without a journal.

    A bill repeats weekly, monthly, quarterly, every half-year or yearly.
    Periods are anchored at the start of the period containing the bill date
    and step forward ``skip + 1`` periods at a time, so a bill with skip 1 is
    due every other period.
    """

    def __init__(self, db: Optional[Database] = None):
        """Initialize bill scheduler.

        Args:
            db: Database used for the default journal existence check
        """
        self.db = db

    def occurrences_overlapping(self, bill: Bill, window_start: date, window_end: date) -> Iterator[Period]:
        """Yield the bill periods that overlap a date window.

        A period is yielded when it ends after ``window_start`` and starts
        before ``window_end``. Periods come out sorted and never overlap.

        Raises:
            InvalidRuleError: If the recurrence cannot advance or runs past MAX_PERIODS
        """
        start = start_of_period(bill.date, bill.repeat_freq)
        walked = 0
        while start < window_end:
            walked += 1
            if walked > MAX_PERIODS:
                raise InvalidRuleError(
                    f"Bill {bill.id} needs more than {MAX_PERIODS} periods to reach {window_end}"
                )
            end = end_of_period(start, bill.repeat_freq)
            if end > window_start and start < window_end:
                yield Period(start=start, end=end)
            start = add_period(start, bill.repeat_freq, bill.skip)

    def next_unmatched_occurrence(
        self,
        bill: Bill,
        now: date,
        existence_check: Optional[ExistenceCheck] = None,
    ) -> Optional[date]:
        """Find the start of the next bill period that has no journal yet.

        The scan covers due periods from the one containing ``now`` up to the
        period starting one full period after ``now``, so a bill already paid
        in its current period reports the following one.

        Args:
            bill: Bill to inspect
            now: Reference date, usually today
            existence_check: Callable (start, end) -> bool telling whether a
                matching journal exists; defaults to the database lookup

        Returns:
            Start date of the first unmatched period, or None if the bill is
            inactive or every scanned period already has a journal
        """
        if not bill.active:
            logger.debug("Bill %s is inactive, no expected match", bill.id)
            return None

        if existence_check is None:
            existence_check = self._journal_lookup(bill)

        first = start_of_period(now, bill.repeat_freq)
        # Start of the next period, so nothing is missed when the current one is paid
        last = add_period(now, bill.repeat_freq, 0)

        for period in self.occurrences_overlapping(bill, first, last + timedelta(days=1)):
            if period.start < first:
                continue
            if not existence_check(period.start, period.end):
                logger.debug("Bill %s expects a match in %s - %s", bill.id, period.start, period.end)
                return period.start
            logger.debug("Bill %s already matched in %s - %s", bill.id, period.start, period.end)
        return None

    def _journal_lookup(self, bill: Bill) -> ExistenceCheck:
        if self.db is None:
            raise ValueError("A database or an existence check is required")
        db = self.db
        return lambda start, end: db.has_journal_in_range(bill.id, start, end)
