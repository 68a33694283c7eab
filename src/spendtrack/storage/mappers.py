"""Mapper functions to convert between domain entities and JSON documents.

This layer isolates the conversion logic so the on-disk document layout can
change without touching the domain. Every date-bearing field is parsed back
into a date or datetime here; the domain never sees raw date strings.
"""

from decimal import Decimal, InvalidOperation
from typing import Any

from spendtrack.domain import entities as domain
from spendtrack.utils.date_parser import parse_timestamp


def _decimal(value: Any) -> Decimal:
    # Older documents store plain JSON numbers; str() avoids float artifacts.
    try:
        return Decimal(str(value))
    except InvalidOperation:
        raise ValueError(f"Invalid decimal value {value!r}")


def _require_mapping(document: Any, kind: str) -> dict[str, Any]:
    if not isinstance(document, dict):
        raise TypeError(f"Expected a JSON object for {kind}, got {type(document).__name__}")
    return document


def recurrence_to_document(recurrence: domain.Recurrence) -> dict[str, Any]:
    """Convert a Recurrence to its JSON document form."""
    document: dict[str, Any] = {
        "frequency": recurrence.frequency.value,
        "nextDue": recurrence.next_due.isoformat(),
    }
    if recurrence.end_date is not None:
        document["endDate"] = recurrence.end_date.isoformat()
    return document


def recurrence_from_document(document: dict[str, Any]) -> domain.Recurrence:
    """Convert a JSON document to a Recurrence."""
    document = _require_mapping(document, "recurrence")
    end_date = document.get("endDate")
    return domain.Recurrence(
        frequency=domain.Frequency(document["frequency"]),
        next_due=parse_timestamp(document["nextDue"]).date(),
        end_date=parse_timestamp(end_date).date() if end_date else None,
    )


def expense_to_document(expense: domain.Expense) -> dict[str, Any]:
    """Convert an Expense to its JSON document form."""
    document: dict[str, Any] = {
        "id": expense.id,
        "description": expense.description,
        "amount": str(expense.amount),
        "category": expense.category,
        "date": expense.date.isoformat(),
        "paymentMethod": expense.payment_method.value,
        "tags": list(expense.tags),
    }
    if expense.recurring is not None:
        document["recurring"] = recurrence_to_document(expense.recurring)
    return document


def expense_from_document(document: dict[str, Any]) -> domain.Expense:
    """Convert a JSON document to an Expense."""
    document = _require_mapping(document, "expense")
    recurring = document.get("recurring")
    return domain.Expense(
        id=str(document["id"]),
        description=document.get("description", ""),
        amount=_decimal(document.get("amount", 0)),
        category=document.get("category", ""),
        date=parse_timestamp(document["date"]),
        payment_method=domain.PaymentMethod.parse(document.get("paymentMethod"))
        or domain.PaymentMethod.OTHER,
        tags=tuple(document.get("tags") or ()),
        recurring=recurrence_from_document(recurring) if recurring else None,
    )


def budget_to_document(budget: domain.Budget) -> dict[str, Any]:
    """Convert a Budget to its JSON document form."""
    return {
        "category": budget.category,
        "monthlyLimit": str(budget.monthly_limit),
        "currentSpent": str(budget.current_spent),
        "alertThreshold": budget.alert_threshold,
    }


def budget_from_document(document: dict[str, Any]) -> domain.Budget:
    """Convert a JSON document to a Budget.

    The stored ``currentSpent`` is informational only and is recomputed by the
    ledger whenever a budget is read.
    """
    document = _require_mapping(document, "budget")
    return domain.Budget(
        category=document["category"],
        monthly_limit=_decimal(document["monthlyLimit"]),
        current_spent=_decimal(document.get("currentSpent", 0)),
        alert_threshold=int(document.get("alertThreshold", 80)),
    )
