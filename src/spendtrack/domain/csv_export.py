"""CSV export domain service."""

from pathlib import Path
from typing import Iterable, Optional

from spendtrack.domain.csv_codec import CSV_HEADERS, expense_to_fields, format_csv_line
from spendtrack.domain.entities import Expense


class CSVExportService:
    """Service for exporting expenses as CSV text."""

    def __init__(self, ledger):
        self.ledger = ledger

    def export_csv(self, expenses: Optional[Iterable[Expense]] = None) -> str:
        """Render expenses (all ledger expenses by default) as CSV text.

        Lines are joined with a newline and there is no trailing newline.
        """
        if expenses is None:
            expenses = self.ledger.list_all()
        lines = [format_csv_line(CSV_HEADERS)]
        lines.extend(format_csv_line(expense_to_fields(expense)) for expense in expenses)
        return "\n".join(lines)

    def export_file(self, csv_file_path: str, expenses: Optional[Iterable[Expense]] = None) -> int:
        """Write expenses to a CSV file. Returns the number of rows written."""
        if expenses is None:
            expenses = self.ledger.list_all()
        expenses = list(expenses)
        Path(csv_file_path).write_text(self.export_csv(expenses), encoding="utf-8", newline="")
        return len(expenses)
