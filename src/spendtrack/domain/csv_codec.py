"""CSV line encoding and decoding for expenses.

Every field is written inside double quotes with embedded quotes doubled, and
parsing accepts the same rules, so exported text always reads back unchanged.
"""

import csv
import io
from datetime import datetime
from typing import Sequence, Union

from spendtrack.domain.entities import Expense, ExpenseDraft, PaymentMethod, RowDiagnostic
from spendtrack.domain.errors import field_count_mismatch
from spendtrack.utils.amount_parser import parse_amount_or_default
from spendtrack.utils.date_parser import parse_timestamp

CSV_HEADERS = ("ID", "Description", "Amount", "Category", "Date", "Payment Method", "Tags")
TAG_SEPARATOR = ";"
DEFAULT_DESCRIPTION = "Imported expense"
DEFAULT_CATEGORY = "Other"


def format_csv_line(fields: Sequence[str]) -> str:
    """Quote every field and join them with commas."""
    buffer = io.StringIO()
    writer = csv.writer(buffer, quoting=csv.QUOTE_ALL, lineterminator="")
    writer.writerow(fields)
    return buffer.getvalue()


def parse_csv_records(text: str) -> list[list[str]]:
    """Split CSV text into records of fields.

    Commas and line breaks inside a quoted span stay in the field, and a
    doubled quote inside a quoted span decodes to a single literal quote. A
    quote in the middle of an unquoted field is kept as a literal character.
    Records whose fields are all blank are dropped.
    """
    return [
        record
        for record in csv.reader(io.StringIO(text))
        if any(field.strip() for field in record)
    ]


def expense_to_fields(expense: Expense) -> list[str]:
    """Return the export columns for an expense."""
    return [
        expense.id,
        expense.description,
        str(expense.amount),
        expense.category,
        expense.date.date().isoformat(),
        expense.payment_method.value,
        TAG_SEPARATOR.join(expense.tags),
    ]


def _field(fields: Sequence[str], index: int) -> str:
    return fields[index] if index < len(fields) else ""


def parse_expense_row(
    fields: Sequence[str], expected_count: int, row_num: int, now: datetime
) -> Union[ExpenseDraft, RowDiagnostic]:
    """Build an expense draft from one parsed CSV row.

    Rows whose field count differs from the header yield a RowDiagnostic.
    Otherwise every missing or unreadable value falls back to a default:
    description "Imported expense", amount 0, category "Other", date ``now``
    and payment method "other". The ID column is ignored. Only the date,
    amount and payment method are trimmed; text columns are kept verbatim.

    Args:
        fields: Parsed fields of the row
        expected_count: Number of fields in the header row
        row_num: 1-based row number, used in diagnostics
        now: Timestamp used when the date is blank or invalid

    Returns:
        ExpenseDraft for a usable row, RowDiagnostic otherwise
    """
    if len(fields) != expected_count:
        return RowDiagnostic(
            row_num=row_num,
            message=field_count_mismatch(row_num, expected_count, len(fields)),
        )

    date_str = _field(fields, 4).strip()
    try:
        expense_date = parse_timestamp(date_str) if date_str else now
    except ValueError:
        expense_date = now

    tags_str = _field(fields, 6)
    tags = tuple(tags_str.split(TAG_SEPARATOR)) if tags_str else ()

    return ExpenseDraft(
        description=_field(fields, 1) or DEFAULT_DESCRIPTION,
        amount=parse_amount_or_default(_field(fields, 2).strip() or None),
        category=_field(fields, 3) or DEFAULT_CATEGORY,
        date=expense_date,
        payment_method=PaymentMethod.parse(_field(fields, 5).strip()) or PaymentMethod.OTHER,
        tags=tags,
    )
