"""JSON file implementation of the storage interface."""

import json
import logging
from datetime import datetime
from pathlib import Path

from spendtrack.domain.entities import Budget, Expense
from spendtrack.domain.errors import PersistenceError
from spendtrack.storage.base import LedgerSnapshot, Storage
from spendtrack.storage.mappers import (
    budget_from_document,
    budget_to_document,
    expense_from_document,
    expense_to_document,
)
from spendtrack.utils.date_parser import parse_timestamp

logger = logging.getLogger(__name__)


class JSONStorage(Storage):
    """Stores the whole ledger as one JSON document.

    Layout::

        {"expenses": [...], "budgets": [...], "lastUpdated": "<ISO-8601>"}
    """

    def __init__(self, path: Path | str):
        """Initialize JSON storage.

        Args:
            path: Path to the JSON data file
        """
        self.path = Path(path)

    def exists(self) -> bool:
        return self.path.exists()

    def load(self) -> LedgerSnapshot:
        if not self.exists():
            logger.debug("No data file at %s, starting with an empty ledger", self.path)
            return LedgerSnapshot()

        try:
            with self.path.open("r", encoding="utf-8") as handle:
                payload = json.load(handle)
        except ValueError as exc:
            # JSONDecodeError and UnicodeDecodeError
            raise PersistenceError(f"Corrupted JSON data in {self.path}") from exc
        except OSError as exc:
            raise PersistenceError(f"Unable to read from {self.path}") from exc

        if not isinstance(payload, dict):
            raise PersistenceError(f"Expected an object at the top level of {self.path}")

        try:
            expenses = [expense_from_document(doc) for doc in payload.get("expenses") or []]
            budgets = [budget_from_document(doc) for doc in payload.get("budgets") or []]
            last_updated = payload.get("lastUpdated")
            snapshot = LedgerSnapshot(
                expenses=expenses,
                budgets=budgets,
                last_updated=parse_timestamp(last_updated) if last_updated else None,
            )
        except (AttributeError, KeyError, TypeError, ValueError) as exc:
            raise PersistenceError(f"Malformed record in {self.path}: {exc}") from exc

        logger.debug(
            "Loaded %d expenses and %d budgets from %s",
            len(snapshot.expenses),
            len(snapshot.budgets),
            self.path,
        )
        return snapshot

    def save(self, expenses: list[Expense], budgets: list[Budget]) -> None:
        document = {
            "expenses": [expense_to_document(expense) for expense in expenses],
            "budgets": [budget_to_document(budget) for budget in budgets],
            "lastUpdated": datetime.now().isoformat(),
        }
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with self.path.open("w", encoding="utf-8") as handle:
                json.dump(document, handle, indent=2)
        except OSError as exc:
            raise PersistenceError(f"Unable to write to {self.path}") from exc
        logger.debug("Saved %d expenses to %s", len(expenses), self.path)
