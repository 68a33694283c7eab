"""Ledger domain service: expenses, budgets and budget alerts."""

import dataclasses
import logging
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Callable, Optional, Union
from uuid import uuid4

from spendtrack.domain.entities import Budget, BudgetAlert, Expense, ExpenseDraft, ExpenseFilter
from spendtrack.domain.errors import PersistenceError, ValidationError, unknown_expense_fields
from spendtrack.domain.filters import filter_expenses
from spendtrack.domain.summary import current_month_spending
from spendtrack.storage.base import Storage
from spendtrack.utils.date_parser import to_timestamp

logger = logging.getLogger(__name__)

AlertListener = Callable[[BudgetAlert], None]

_UPDATABLE_FIELDS = frozenset(
    f.name for f in dataclasses.fields(Expense) if f.name != "id"
)


class LedgerService:
    """Owns the in-memory expenses and budgets and persists every change.

    Expenses are indexed by ID and budgets by category; both keep insertion
    order. The whole ledger is loaded once on construction and rewritten to
    storage after every mutation.
    """

    def __init__(
        self,
        storage: Storage,
        clock: Callable[[], datetime] = datetime.now,
    ):
        """Initialize ledger service.

        Args:
            storage: Storage backend holding the persisted ledger
            clock: Returns the current wall-clock time
        """
        self.storage = storage
        self.clock = clock
        self.last_persistence_error: Optional[PersistenceError] = None
        self._expenses: dict[str, Expense] = {}
        self._budgets: dict[str, Budget] = {}
        self._alert_listeners: list[AlertListener] = []
        self.load()

    def load(self) -> None:
        """Replace in-memory state with what storage holds.

        A storage failure leaves the ledger empty instead of propagating.
        """
        try:
            snapshot = self.storage.load()
        except PersistenceError:
            logger.exception("Error loading ledger data, starting empty")
            self._expenses = {}
            self._budgets = {}
            return
        self._expenses = {expense.id: expense for expense in snapshot.expenses}
        self._budgets = {budget.category: budget for budget in snapshot.budgets}

    def _persist(self) -> None:
        # A failed save is reported but the in-memory change is kept.
        try:
            self.storage.save(list(self._expenses.values()), list(self._budgets.values()))
        except PersistenceError as exc:
            logger.exception("Error saving ledger data")
            self.last_persistence_error = exc
        else:
            self.last_persistence_error = None

    def _new_id(self) -> str:
        expense_id = uuid4().hex
        while expense_id in self._expenses:
            expense_id = uuid4().hex
        return expense_id

    # Expense operations

    def create(self, draft: ExpenseDraft) -> Expense:
        """Store a new expense.

        Assigns a fresh ID, normalizes the date, persists the ledger and then
        checks the category's budget, notifying alert listeners if the
        threshold is reached.

        Args:
            draft: Expense fields without an ID

        Returns:
            The stored expense
        """
        expense = Expense(
            id=self._new_id(),
            description=draft.description,
            amount=draft.amount,
            category=draft.category,
            date=to_timestamp(draft.date),
            payment_method=draft.payment_method,
            tags=tuple(draft.tags),
            recurring=draft.recurring,
        )
        self._expenses[expense.id] = expense
        self._persist()
        logger.debug("Created expense %s (%s %s)", expense.id, expense.category, expense.amount)

        alert = self.check_budget_alert(expense.category)
        if alert is not None:
            self._notify(alert)
        return expense

    def update(self, expense_id: str, **changes: Any) -> Optional[Expense]:
        """Merge changes over an existing expense.

        Fields not passed keep their values. ``date`` is normalized only when
        supplied.

        Args:
            expense_id: ID of the expense to update
            **changes: Expense fields to replace

        Returns:
            The updated expense, or None if no expense has that ID

        Raises:
            ValidationError: If changes names a field expenses do not have
        """
        unknown = set(changes) - _UPDATABLE_FIELDS
        if unknown:
            raise ValidationError(unknown_expense_fields(unknown))

        existing = self._expenses.get(expense_id)
        if existing is None:
            return None

        if "date" in changes:
            changes["date"] = to_timestamp(changes["date"])
        if "tags" in changes:
            changes["tags"] = tuple(changes["tags"])

        updated = dataclasses.replace(existing, **changes)
        self._expenses[expense_id] = updated
        self._persist()
        return updated

    def delete(self, expense_id: str) -> bool:
        """Delete an expense. Returns True if it existed."""
        if self._expenses.pop(expense_id, None) is None:
            return False
        self._persist()
        return True

    def get(self, expense_id: str) -> Optional[Expense]:
        """Get expense by ID, or None if not found."""
        return self._expenses.get(expense_id)

    def list_all(self) -> list[Expense]:
        """Return all expenses in insertion order."""
        return list(self._expenses.values())

    def list_expenses(self, filters: Optional[ExpenseFilter] = None) -> list[Expense]:
        """Return expenses matching filters."""
        return filter_expenses(self._expenses.values(), filters)

    def list_by_category(self, category: str) -> list[Expense]:
        return self.list_expenses(ExpenseFilter(category=category))

    def list_by_date_range(
        self, start: Union[datetime, date], end: Union[datetime, date]
    ) -> list[Expense]:
        return self.list_expenses(ExpenseFilter(date_from=start, date_to=end))

    def list_recurring(self) -> list[Expense]:
        """Return expenses that carry a recurrence template."""
        return [expense for expense in self._expenses.values() if expense.recurring is not None]

    def categories(self) -> list[str]:
        """Return the distinct expense categories, sorted."""
        return sorted({expense.category for expense in self._expenses.values()})

    def tags(self) -> list[str]:
        """Return the distinct tags across all expenses, sorted."""
        return sorted({tag for expense in self._expenses.values() for tag in expense.tags})

    # Budget operations

    def current_month_spending(self, category: str) -> Decimal:
        """Sum the category's expenses in the current calendar month."""
        return current_month_spending(
            self._expenses.values(), category, self.clock().date()
        )

    def _with_current_spend(self, budget: Budget) -> Budget:
        return dataclasses.replace(
            budget, current_spent=self.current_month_spending(budget.category)
        )

    def set_budget(
        self, category: str, monthly_limit: Decimal, alert_threshold: int = 80
    ) -> Budget:
        """Create or replace the budget for a category.

        Args:
            category: Category the budget governs
            monthly_limit: Spending ceiling for the calendar month
            alert_threshold: Percentage of the limit at which alerts fire

        Returns:
            The stored budget with current spending filled in
        """
        budget = Budget(
            category=category,
            monthly_limit=monthly_limit,
            current_spent=self.current_month_spending(category),
            alert_threshold=alert_threshold,
        )
        self._budgets[category] = budget
        self._persist()
        return budget

    def get_budget(self, category: str) -> Optional[Budget]:
        """Get the budget for a category, or None if none is set."""
        budget = self._budgets.get(category)
        if budget is None:
            return None
        return self._with_current_spend(budget)

    def list_budgets(self) -> list[Budget]:
        """Return all budgets with current spending recomputed."""
        return [self._with_current_spend(budget) for budget in self._budgets.values()]

    # Budget alerts

    def add_alert_listener(self, listener: AlertListener) -> None:
        """Register a callback invoked with each BudgetAlert raised by create()."""
        self._alert_listeners.append(listener)

    def check_budget_alert(self, category: str) -> Optional[BudgetAlert]:
        """Return an alert if the category's spend has reached its threshold.

        Returns None when the category has no budget or is below threshold.
        """
        budget = self._budgets.get(category)
        if budget is None or budget.monthly_limit <= 0:
            return None

        spent = self.current_month_spending(category)
        percentage = spent / budget.monthly_limit * 100
        if percentage < budget.alert_threshold:
            return None
        return BudgetAlert(
            category=category,
            spent=spent,
            limit=budget.monthly_limit,
            percentage=percentage,
        )

    def _notify(self, alert: BudgetAlert) -> None:
        logger.info(
            "Budget alert for %s: spent %s of %s (%.1f%%)",
            alert.category,
            alert.spent,
            alert.limit,
            alert.percentage,
        )
        for listener in self._alert_listeners:
            listener(alert)
