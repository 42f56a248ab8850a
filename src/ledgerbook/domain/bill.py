"""Bill domain service."""

from typing import Optional, Union
from datetime import date
from decimal import Decimal
from ledgerbook.database.base import Database
from ledgerbook.domain.amounts import check_amount
from ledgerbook.domain.entities import Bill as BillEntity, RepeatFrequency
from ledgerbook.domain.errors import NotFoundError, ValidationError, bill_not_found
from ledgerbook.domain.recurrence import parse_frequency


class BillService:
    """Service for storing and updating recurring bills."""

    def __init__(self, db: Database):
        """Initialize bill service.

        Args:
            db: Database instance
        """
        self.db = db

    def create_bill(
        self,
        name: str,
        match: str,
        amount_min: Decimal,
        amount_max: Decimal,
        date: date,
        repeat_freq: Union[str, RepeatFrequency],
        skip: int = 0,
        automatch: bool = True,
        active: bool = True,
    ) -> int:
        """Create a bill.

        Args:
            name: Bill name
            match: Comma-separated keywords a journal must contain
            amount_min: Lowest expected amount, inclusive
            amount_max: Highest expected amount, inclusive
            date: Anchor date of the first period
            repeat_freq: weekly, monthly, quarterly, half-year or yearly
            skip: Number of periods to skip between due periods
            automatch: Whether new journals are matched automatically
            active: Whether the bill is expected at all

        Returns:
            Bill ID

        Raises:
            ValidationError: If any field is invalid
            InvalidRuleError: If the frequency is unknown
        """
        frequency = parse_frequency(repeat_freq)
        name, match = self._validate(name, match, amount_min, amount_max, skip)
        return self.db.create_bill(
            name=name,
            match=match,
            amount_min=amount_min,
            amount_max=amount_max,
            date=date,
            repeat_freq=frequency,
            skip=skip,
            automatch=automatch,
            active=active,
        )

    def update_bill(
        self,
        bill_id: int,
        name: Optional[str] = None,
        match: Optional[str] = None,
        amount_min: Optional[Decimal] = None,
        amount_max: Optional[Decimal] = None,
        date: Optional[date] = None,
        repeat_freq: Optional[Union[str, RepeatFrequency]] = None,
        skip: Optional[int] = None,
        automatch: Optional[bool] = None,
        active: Optional[bool] = None,
    ) -> BillEntity:
        """Update a bill; fields left as None keep their value.

        Returns:
            The updated bill

        Raises:
            NotFoundError: If the bill doesn't exist
            ValidationError: If the resulting bill would be invalid
        """
        bill = self.get_bill_or_raise(bill_id)

        frequency = parse_frequency(repeat_freq) if repeat_freq is not None else bill.repeat_freq
        new_name, new_match = self._validate(
            name if name is not None else bill.name,
            match if match is not None else bill.match,
            amount_min if amount_min is not None else bill.amount_min,
            amount_max if amount_max is not None else bill.amount_max,
            skip if skip is not None else bill.skip,
        )

        fields = {"name": new_name, "match": new_match, "repeat_freq": frequency}
        for key, value in (
            ("amount_min", amount_min),
            ("amount_max", amount_max),
            ("date", date),
            ("skip", skip),
            ("automatch", automatch),
            ("active", active),
        ):
            if value is not None:
                fields[key] = value

        self.db.update_bill(bill_id, **fields)
        return self.get_bill_or_raise(bill_id)

    def get_bill(self, bill_id: int) -> Optional[BillEntity]:
        """Get bill by ID, or None if not found."""
        return self.db.get_bill(bill_id)

    def get_bill_or_raise(self, bill_id: int) -> BillEntity:
        """Get bill by ID.

        Raises:
            NotFoundError: If the bill doesn't exist
        """
        bill = self.db.get_bill(bill_id)
        if bill is None:
            raise NotFoundError(bill_not_found(bill_id))
        return bill

    def list_bills(self, active_only: bool = False) -> list[BillEntity]:
        """List bills ordered by ID."""
        return self.db.list_bills(active_only=active_only)

    def delete_bill(self, bill_id: int) -> None:
        """Soft-delete a bill.

        Raises:
            NotFoundError: If the bill doesn't exist
        """
        self.get_bill_or_raise(bill_id)
        self.db.soft_delete_bill(bill_id)

    @staticmethod
    def _validate(
        name: str, match: str, amount_min: Decimal, amount_max: Decimal, skip: int
    ) -> tuple[str, str]:
        check_amount(amount_min, "Minimum amount")
        check_amount(amount_max, "Maximum amount")
        name = name.strip()
        if not name:
            raise ValidationError("Bill name cannot be empty")
        keywords = [word.strip() for word in match.split(",") if word.strip()]
        if not keywords:
            raise ValidationError("Bill match needs at least one keyword")
        if amount_min < 0:
            raise ValidationError("Minimum amount cannot be negative")
        if amount_min > amount_max:
            raise ValidationError(
                f"Minimum amount {amount_min} is larger than maximum amount {amount_max}"
            )
        if skip < 0:
            raise ValidationError("Skip must be zero or positive")
        return name, ",".join(keywords)
