"""Domain model entities for spendtrack.

These are pure data classes representing ledger concepts, independent of the
storage format. The JSON document layout can change without touching the
business logic that operates on these types.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional, Union


class PaymentMethod(str, Enum):
    """How an expense was paid."""

    CASH = "cash"
    CREDIT_CARD = "credit_card"
    DEBIT_CARD = "debit_card"
    BANK_TRANSFER = "bank_transfer"
    DIGITAL_WALLET = "digital_wallet"
    OTHER = "other"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["PaymentMethod"]:
        """Return the member matching value, or None if it is not a known method."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class Frequency(str, Enum):
    """Recurrence period of a repeating expense."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


@dataclass(frozen=True)
class Recurrence:
    """Recurrence template embedded in an expense."""

    frequency: Frequency
    next_due: date
    end_date: Optional[date] = None


@dataclass(frozen=True)
class ExpenseDraft:
    """Expense fields before the ledger assigns an ID.

    ``date`` may be a datetime, a date or a date string; the ledger normalizes
    it to a datetime on creation.
    """

    description: str
    amount: Decimal
    category: str
    date: Union[datetime, date, str]
    payment_method: PaymentMethod = PaymentMethod.CASH
    tags: tuple[str, ...] = ()
    recurring: Optional[Recurrence] = None


@dataclass(frozen=True)
class Expense:
    """Stored expense entity."""

    id: str
    description: str
    amount: Decimal
    category: str
    date: datetime
    payment_method: PaymentMethod
    tags: tuple[str, ...] = ()
    recurring: Optional[Recurrence] = None


@dataclass(frozen=True)
class Budget:
    """Monthly spending limit for a category.

    ``current_spent`` is derived from the ledger each time a budget is read
    and is never trusted from storage.
    """

    category: str
    monthly_limit: Decimal
    current_spent: Decimal = Decimal("0")
    alert_threshold: int = 80


@dataclass(frozen=True)
class BudgetAlert:
    """Notification that a category reached its alert threshold."""

    category: str
    spent: Decimal
    limit: Decimal
    percentage: Decimal


@dataclass(frozen=True)
class ExpenseFilter:
    """Optional predicates for selecting expenses.

    Every predicate that is not None must hold for an expense to match.
    Date bounds given as plain dates compare against the expense's calendar day.
    """

    date_from: Optional[Union[datetime, date]] = None
    date_to: Optional[Union[datetime, date]] = None
    category: Optional[str] = None
    min_amount: Optional[Decimal] = None
    max_amount: Optional[Decimal] = None
    payment_method: Optional[PaymentMethod] = None
    tags: Optional[tuple[str, ...]] = None


@dataclass(frozen=True)
class ExpenseSummary:
    """Aggregates over a collection of expenses."""

    total: Decimal
    count: int
    average: Decimal
    category_breakdown: dict[str, Decimal] = field(default_factory=dict)
    monthly_trend: dict[str, Decimal] = field(default_factory=dict)
    payment_method_breakdown: dict[PaymentMethod, Decimal] = field(default_factory=dict)


@dataclass(frozen=True)
class RowDiagnostic:
    """A CSV row that could not be imported."""

    row_num: int
    message: str


@dataclass(frozen=True)
class ImportResult:
    """Outcome of a CSV import."""

    imported: tuple[Expense, ...] = ()
    skipped: tuple[RowDiagnostic, ...] = ()

    @property
    def imported_count(self) -> int:
        return len(self.imported)
