"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class PersistenceError(OSError):
    """Raised when the storage layer cannot read or write the ledger."""


def expense_not_found(expense_id: str) -> str:
    """Return message for missing expense."""
    return f"Expense {expense_id} not found"


def unknown_expense_fields(fields: set[str]) -> str:
    """Return message for update fields that an expense does not have."""
    return f"Unknown expense field(s): {', '.join(sorted(fields))}"


def csv_too_short() -> str:
    """Return message for a CSV document without data rows."""
    return "CSV must contain header and at least one data row"


def field_count_mismatch(row_num: int, expected: int, actual: int) -> str:
    """Return message for a CSV row with the wrong number of fields."""
    return f"Skipping row {row_num}: field count mismatch (expected {expected}, got {actual})"
