"""Summary aggregation domain service."""

from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from spendtrack.domain.entities import Expense, ExpenseFilter, ExpenseSummary, PaymentMethod
from spendtrack.domain.filters import filter_expenses
from spendtrack.utils.date_parser import month_bounds

ZERO = Decimal("0")


def month_key(expense: Expense) -> str:
    """Return the YYYY-MM bucket an expense falls in."""
    return f"{expense.date.year:04d}-{expense.date.month:02d}"


def summarize(expenses: Iterable[Expense]) -> ExpenseSummary:
    """Aggregate expenses in a single pass.

    Breakdown dictionaries keep keys in first-seen order; callers should not
    rely on that order for meaning.

    Args:
        expenses: Expenses to aggregate, usually already filtered

    Returns:
        ExpenseSummary with total, count, average and the category, month and
        payment method breakdowns
    """
    total = ZERO
    count = 0
    category_breakdown: dict[str, Decimal] = {}
    monthly_trend: dict[str, Decimal] = {}
    payment_method_breakdown: dict[PaymentMethod, Decimal] = {}

    for expense in expenses:
        total += expense.amount
        count += 1

        category_breakdown[expense.category] = (
            category_breakdown.get(expense.category, ZERO) + expense.amount
        )
        key = month_key(expense)
        monthly_trend[key] = monthly_trend.get(key, ZERO) + expense.amount
        payment_method_breakdown[expense.payment_method] = (
            payment_method_breakdown.get(expense.payment_method, ZERO) + expense.amount
        )

    average = total / count if count else ZERO

    return ExpenseSummary(
        total=total,
        count=count,
        average=average,
        category_breakdown=category_breakdown,
        monthly_trend=monthly_trend,
        payment_method_breakdown=payment_method_breakdown,
    )


def current_month_spending(expenses: Iterable[Expense], category: str, today: date) -> Decimal:
    """Sum a category's expenses dated within today's calendar month.

    Both the first and the last day of the month are included.
    """
    first, last = month_bounds(today)
    return sum(
        (
            expense.amount
            for expense in expenses
            if expense.category == category and first <= expense.date.date() <= last
        ),
        ZERO,
    )


class SummaryService:
    """Service for building expense summaries from the ledger."""

    def __init__(self, ledger):
        """Initialize summary service.

        Args:
            ledger: LedgerService holding the expenses
        """
        self.ledger = ledger

    def get_summary(self, filters: Optional[ExpenseFilter] = None) -> ExpenseSummary:
        """Summarize all expenses, or only those matching filters."""
        return summarize(filter_expenses(self.ledger.list_all(), filters))
