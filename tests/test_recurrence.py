"""Tests for recurring expense processing."""

from datetime import date, datetime
from decimal import Decimal

import pytest

from spendtrack.domain.entities import Frequency, Recurrence
from spendtrack.domain.recurrence import (
    RECURRING_TAG,
    advance_due_date,
    is_due,
)


@pytest.mark.parametrize(
    "frequency,current,expected",
    [
        (Frequency.DAILY, date(2024, 2, 28), date(2024, 2, 29)),
        (Frequency.DAILY, date(2024, 12, 31), date(2025, 1, 1)),
        (Frequency.WEEKLY, date(2024, 3, 28), date(2024, 4, 4)),
        (Frequency.MONTHLY, date(2024, 1, 15), date(2024, 2, 15)),
        (Frequency.MONTHLY, date(2024, 1, 31), date(2024, 2, 29)),
        (Frequency.MONTHLY, date(2023, 1, 31), date(2023, 2, 28)),
        (Frequency.MONTHLY, date(2024, 12, 10), date(2025, 1, 10)),
        (Frequency.YEARLY, date(2024, 2, 29), date(2025, 2, 28)),
        (Frequency.YEARLY, date(2024, 6, 1), date(2025, 6, 1)),
    ],
)
def test_advance_due_date(frequency, current, expected):
    assert advance_due_date(current, frequency) == expected


def test_is_due():
    template = Recurrence(Frequency.MONTHLY, date(2024, 3, 15), end_date=date(2024, 6, 30))

    assert is_due(template, date(2024, 3, 15))
    assert is_due(template, date(2024, 6, 30))
    assert not is_due(template, date(2024, 3, 14))
    assert not is_due(template, date(2024, 7, 1))
    assert is_due(Recurrence(Frequency.DAILY, date(2024, 1, 1)), date(2030, 1, 1))


def test_process_due_creates_instance(ledger, recurrence_service, make_draft):
    origin = ledger.create(
        make_draft(
            "Netflix",
            "15.99",
            "Entertainment",
            date=datetime(2024, 2, 15, 9, 0),
            tags=("subscription",),
            recurring=Recurrence(Frequency.MONTHLY, date(2024, 3, 15)),
        )
    )

    created = recurrence_service.process_due(today=date(2024, 3, 15))

    assert len(created) == 1
    instance = created[0]
    assert instance.id != origin.id
    assert instance.description == "Netflix (Recurring)"
    assert instance.amount == Decimal("15.99")
    assert instance.category == "Entertainment"
    assert instance.payment_method == origin.payment_method
    assert instance.date == datetime(2024, 3, 15)
    assert instance.tags == ("subscription", RECURRING_TAG)
    assert instance.recurring == Recurrence(Frequency.MONTHLY, date(2024, 4, 15))
    assert ledger.get(origin.id).recurring.next_due == date(2024, 4, 15)


def test_process_due_is_idempotent_within_a_day(ledger, recurrence_service, make_draft):
    ledger.create(make_draft(recurring=Recurrence(Frequency.WEEKLY, date(2024, 3, 15))))

    first = recurrence_service.process_due(today=date(2024, 3, 15))
    second = recurrence_service.process_due(today=date(2024, 3, 15))

    assert len(first) == 1
    assert second == []
    assert len(ledger.list_all()) == 2


def test_process_due_respects_end_date(ledger, recurrence_service, make_draft):
    ledger.create(
        make_draft(
            recurring=Recurrence(Frequency.DAILY, date(2024, 3, 1), end_date=date(2024, 3, 10))
        )
    )

    assert recurrence_service.process_due(today=date(2024, 3, 11)) == []
    assert len(ledger.list_all()) == 1


def test_process_due_skips_future_templates(ledger, recurrence_service, make_draft):
    ledger.create(make_draft(recurring=Recurrence(Frequency.YEARLY, date(2024, 12, 1))))

    assert recurrence_service.process_due(today=date(2024, 3, 15)) == []


def test_process_due_defaults_to_ledger_clock(ledger, recurrence_service, make_draft, fixed_now):
    ledger.create(make_draft(recurring=Recurrence(Frequency.DAILY, fixed_now.date())))

    created = recurrence_service.process_due()

    assert len(created) == 1
    assert recurrence_service.list_due() == []


def test_generated_instances_trigger_budget_alerts(ledger, recurrence_service, make_draft):
    alerts = []
    ledger.add_alert_listener(alerts.append)
    ledger.create(
        make_draft(
            "Rent",
            "900.00",
            "Housing",
            date=datetime(2024, 2, 1),
            recurring=Recurrence(Frequency.MONTHLY, date(2024, 3, 1)),
        )
    )
    ledger.set_budget("Housing", Decimal("1000"), 80)

    recurrence_service.process_due(today=date(2024, 3, 15))

    assert [alert.category for alert in alerts] == ["Housing"]


def test_recurrence_survives_reload(storage, ledger, make_draft, fixed_now):
    from spendtrack.domain.ledger import LedgerService

    origin = ledger.create(
        make_draft(recurring=Recurrence(Frequency.MONTHLY, date(2024, 4, 1), end_date=date(2024, 12, 31)))
    )

    reloaded = LedgerService(storage, clock=lambda: fixed_now)

    assert reloaded.get(origin.id).recurring == origin.recurring
