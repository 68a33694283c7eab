"""Recurring expense domain service."""

import logging
from datetime import date, timedelta
from typing import Optional

from dateutil.relativedelta import relativedelta

from spendtrack.domain.entities import Expense, ExpenseDraft, Frequency, Recurrence

logger = logging.getLogger(__name__)

RECURRING_SUFFIX = " (Recurring)"
RECURRING_TAG = "recurring"

_PERIODS = {
    Frequency.DAILY: timedelta(days=1),
    Frequency.WEEKLY: timedelta(days=7),
    # relativedelta clamps to the last day of shorter months: Jan 31 -> Feb 28.
    Frequency.MONTHLY: relativedelta(months=1),
    Frequency.YEARLY: relativedelta(years=1),
}


def advance_due_date(current: date, frequency: Frequency) -> date:
    """Return the due date one period after current."""
    return current + _PERIODS[Frequency(frequency)]


def is_due(recurrence: Recurrence, today: date) -> bool:
    """Return True if an instance should be generated on today."""
    if recurrence.next_due > today:
        return False
    return recurrence.end_date is None or today <= recurrence.end_date


class RecurrenceService:
    """Service for expanding recurring expenses into ledger entries."""

    def __init__(self, ledger):
        """Initialize recurrence service.

        Args:
            ledger: LedgerService holding the recurring expenses
        """
        self.ledger = ledger

    def list_due(self, today: Optional[date] = None) -> list[Expense]:
        """Return expenses whose recurrence template is due on today."""
        today = today or self.ledger.clock().date()
        return [
            expense
            for expense in self.ledger.list_recurring()
            if is_due(expense.recurring, today)
        ]

    def process_due(self, today: Optional[date] = None) -> list[Expense]:
        """Generate one new expense for every due recurring expense.

        Each generated expense is dated at the template's current due date and
        carries its own template advanced by one period. The originating
        expense's template is advanced as well, so calling this again on the
        same day does not regenerate the same instance.

        Args:
            today: Date to evaluate due-ness against (defaults to the ledger clock)

        Returns:
            List of newly created expenses
        """
        today = today or self.ledger.clock().date()
        created = []

        for origin in self.list_due(today):
            template = origin.recurring
            advanced = Recurrence(
                frequency=template.frequency,
                next_due=advance_due_date(template.next_due, template.frequency),
                end_date=template.end_date,
            )

            instance = self.ledger.create(
                ExpenseDraft(
                    description=f"{origin.description}{RECURRING_SUFFIX}",
                    amount=origin.amount,
                    category=origin.category,
                    date=template.next_due,
                    payment_method=origin.payment_method,
                    tags=origin.tags + (RECURRING_TAG,),
                    recurring=advanced,
                )
            )
            self.ledger.update(origin.id, recurring=advanced)
            logger.info(
                "Generated recurring expense %s from %s, next due %s",
                instance.id,
                origin.id,
                advanced.next_due,
            )
            created.append(instance)

        return created
