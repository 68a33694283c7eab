"""Abstract storage interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional
from datetime import datetime

# Import entities directly to avoid circular import through domain/__init__.py
from spendtrack.domain.entities import Budget, Expense


@dataclass
class LedgerSnapshot:
    """Everything persisted for one ledger."""

    expenses: list[Expense] = field(default_factory=list)
    budgets: list[Budget] = field(default_factory=list)
    last_updated: Optional[datetime] = None


class Storage(ABC):
    """Abstract whole-document storage for a ledger.

    Implementations read and write the complete ledger at once; there is no
    incremental persistence.
    """

    @abstractmethod
    def exists(self) -> bool:
        """Return True if persisted state is present."""
        pass

    @abstractmethod
    def load(self) -> LedgerSnapshot:
        """Load the ledger.

        Returns an empty snapshot when nothing has been persisted yet.

        Raises:
            PersistenceError: If the stored state cannot be read or decoded
        """
        pass

    @abstractmethod
    def save(self, expenses: list[Expense], budgets: list[Budget]) -> None:
        """Replace the persisted ledger with the given records.

        Raises:
            PersistenceError: If the state cannot be written
        """
        pass
