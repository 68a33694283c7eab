"""Expense filtering."""

from datetime import date, datetime
from typing import Iterable, Optional, Union

from spendtrack.domain.entities import Expense, ExpenseFilter


def _on_or_after(value: datetime, bound: Union[datetime, date]) -> bool:
    if isinstance(bound, datetime):
        return value >= bound
    return value.date() >= bound


def _on_or_before(value: datetime, bound: Union[datetime, date]) -> bool:
    if isinstance(bound, datetime):
        return value <= bound
    return value.date() <= bound


def matches(expense: Expense, filters: Optional[ExpenseFilter]) -> bool:
    """Return True if the expense satisfies every predicate set on filters.

    A predicate is active when it is not None, so zero amounts and empty
    strings still constrain the result. Tags use superset semantics: the
    expense must carry every listed tag.
    """
    if filters is None:
        return True
    if filters.date_from is not None and not _on_or_after(expense.date, filters.date_from):
        return False
    if filters.date_to is not None and not _on_or_before(expense.date, filters.date_to):
        return False
    if filters.category is not None and expense.category != filters.category:
        return False
    if filters.min_amount is not None and expense.amount < filters.min_amount:
        return False
    if filters.max_amount is not None and expense.amount > filters.max_amount:
        return False
    if filters.payment_method is not None and expense.payment_method != filters.payment_method:
        return False
    if filters.tags is not None and not set(filters.tags).issubset(expense.tags):
        return False
    return True


def filter_expenses(
    expenses: Iterable[Expense], filters: Optional[ExpenseFilter] = None
) -> list[Expense]:
    """Return the expenses matching filters, preserving input order."""
    return [expense for expense in expenses if matches(expense, filters)]
