"""Calendar arithmetic for bill recurrence periods.

All functions are pure: they depend only on their arguments and never read
the clock. Months, quarters and years follow the calendar (via
``dateutil.relativedelta``), so adding a month to January 31st lands on the
last day of February rather than 30 days later.
"""

from datetime import date, timedelta
from typing import Union

from dateutil.relativedelta import relativedelta

from ledgerbook.domain.entities import RepeatFrequency
from ledgerbook.domain.errors import InvalidRuleError, unknown_frequency

# Length of one period for each frequency
_PERIOD_LENGTH = {
    RepeatFrequency.WEEKLY: relativedelta(weeks=1),
    RepeatFrequency.MONTHLY: relativedelta(months=1),
    RepeatFrequency.QUARTERLY: relativedelta(months=3),
    RepeatFrequency.HALF_YEAR: relativedelta(months=6),
    RepeatFrequency.YEARLY: relativedelta(years=1),
}


def parse_frequency(value: Union[str, RepeatFrequency]) -> RepeatFrequency:
    """Parse a repeat frequency name.

    Args:
        value: Frequency name such as "monthly" or "half-year"

    Returns:
        RepeatFrequency member

    Raises:
        InvalidRuleError: If the frequency is not recognized
    """
    if isinstance(value, RepeatFrequency):
        return value
    try:
        return RepeatFrequency(str(value).strip().lower())
    except ValueError:
        raise InvalidRuleError(unknown_frequency(value)) from None


def start_of_period(day: date, frequency: Union[str, RepeatFrequency]) -> date:
    """Floor a date to the first day of its period.

    Weeks start on Monday, quarters on January, April, July and October, and
    half-years on January and July.
    """
    frequency = parse_frequency(frequency)
    if frequency is RepeatFrequency.WEEKLY:
        return day - timedelta(days=day.weekday())
    if frequency is RepeatFrequency.MONTHLY:
        return day.replace(day=1)
    if frequency is RepeatFrequency.QUARTERLY:
        return date(day.year, ((day.month - 1) // 3) * 3 + 1, 1)
    if frequency is RepeatFrequency.HALF_YEAR:
        return date(day.year, 1 if day.month <= 6 else 7, 1)
    return date(day.year, 1, 1)


def end_of_period(day: date, frequency: Union[str, RepeatFrequency]) -> date:
    """Return the last day of the period that starts at ``day``."""
    frequency = parse_frequency(frequency)
    return day + _PERIOD_LENGTH[frequency] - timedelta(days=1)


def add_period(day: date, frequency: Union[str, RepeatFrequency], skip: int = 0) -> date:
    """Move forward by ``skip + 1`` periods.

    Args:
        day: Date to move from
        frequency: Repeat frequency
        skip: Number of periods to skip; 0 moves to the next period

    Returns:
        The date ``skip + 1`` periods later

    Raises:
        InvalidRuleError: If skip is negative or the result does not move forward
    """
    frequency = parse_frequency(frequency)
    if skip < 0:
        raise InvalidRuleError(f"Skip must be zero or positive, got {skip}")

    result = day + _PERIOD_LENGTH[frequency] * (skip + 1)
    if result <= day:
        raise InvalidRuleError(
            f"Repeat frequency '{frequency.value}' with skip {skip} does not advance from {day}"
        )
    return result
