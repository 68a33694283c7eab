"""Shared pytest fixtures for spendtrack tests."""

from datetime import datetime
from decimal import Decimal
import pytest

from spendtrack.domain.entities import ExpenseDraft, PaymentMethod
from spendtrack.domain.ledger import LedgerService
from spendtrack.domain.recurrence import RecurrenceService
from spendtrack.domain.summary import SummaryService
from spendtrack.domain.csv_export import CSVExportService
from spendtrack.domain.csv_import import CSVImportService
from spendtrack.storage.factories import create_json_storage

FIXED_NOW = datetime(2024, 3, 15, 12, 30)


@pytest.fixture
def data_path(tmp_path):
    """Path of a not-yet-created JSON data file."""
    return tmp_path / "expenses.json"


@pytest.fixture
def storage(data_path):
    """Create a JSON storage backed by a temporary file."""
    return create_json_storage(data_path=str(data_path))


@pytest.fixture
def fixed_now():
    """Wall-clock time used by the ledger fixture."""
    return FIXED_NOW


@pytest.fixture
def ledger(storage, fixed_now):
    """Create a LedgerService whose clock is fixed at FIXED_NOW."""
    return LedgerService(storage, clock=lambda: fixed_now)


@pytest.fixture
def summary_service(ledger):
    return SummaryService(ledger)


@pytest.fixture
def recurrence_service(ledger):
    return RecurrenceService(ledger)


@pytest.fixture
def import_service(ledger):
    return CSVImportService(ledger)


@pytest.fixture
def export_service(ledger):
    return CSVExportService(ledger)


@pytest.fixture
def make_draft():
    """Build ExpenseDraft objects with sensible defaults."""

    def _make(
        description="Lunch",
        amount="12.50",
        category="Food",
        date=FIXED_NOW,
        payment_method=PaymentMethod.CASH,
        tags=(),
        recurring=None,
    ):
        return ExpenseDraft(
            description=description,
            amount=Decimal(amount),
            category=category,
            date=date,
            payment_method=payment_method,
            tags=tuple(tags),
            recurring=recurring,
        )

    return _make


@pytest.fixture
def sample_expenses(ledger, make_draft):
    """Create a handful of expenses across categories, months and methods."""
    return [
        ledger.create(make_draft("Groceries", "45.50", "Food", datetime(2024, 3, 2, 18, 0),
                                 PaymentMethod.DEBIT_CARD, ("home", "weekly"))),
        ledger.create(make_draft("Train pass", "60.00", "Transportation", datetime(2024, 3, 5, 8, 15),
                                 PaymentMethod.CREDIT_CARD, ("work",))),
        ledger.create(make_draft("Dinner", "30.00", "Food", datetime(2024, 2, 20, 20, 0),
                                 PaymentMethod.CREDIT_CARD, ("social",))),
        ledger.create(make_draft("Bus", "2.75", "Transportation", datetime(2024, 1, 31, 23, 45),
                                 PaymentMethod.CASH, ())),
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
