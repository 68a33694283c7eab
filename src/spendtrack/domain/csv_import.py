"""CSV import domain service."""

import logging
from pathlib import Path

from spendtrack.domain.csv_codec import parse_csv_records, parse_expense_row
from spendtrack.domain.entities import ImportResult, RowDiagnostic
from spendtrack.domain.errors import ValidationError, csv_too_short

logger = logging.getLogger(__name__)


class CSVImportService:
    """Service for importing expenses from CSV text."""

    def __init__(self, ledger):
        """Initialize CSV import service.

        Args:
            ledger: LedgerService receiving the imported expenses
        """
        self.ledger = ledger

    def import_csv(self, csv_text: str) -> ImportResult:
        """Import expenses from CSV text.

        The first non-blank record is the header; only its field count is used.
        Each data row goes through the ledger's normal create path, so it gets
        a fresh ID and triggers budget alerts. Rows with the wrong field count
        are skipped and reported.

        Args:
            csv_text: CSV document text

        Returns:
            ImportResult with the created expenses and skipped-row diagnostics

        Raises:
            ValidationError: If the document has no data rows
        """
        records = parse_csv_records(csv_text)
        if len(records) < 2:
            raise ValidationError(csv_too_short())

        expected_count = len(records[0])
        now = self.ledger.clock()
        imported = []
        skipped: list[RowDiagnostic] = []

        for row_num, fields in enumerate(records[1:], start=2):  # header is row 1
            parsed = parse_expense_row(fields, expected_count, row_num, now)
            if isinstance(parsed, RowDiagnostic):
                logger.warning(parsed.message)
                skipped.append(parsed)
                continue
            imported.append(self.ledger.create(parsed))

        logger.info("Imported %d expenses, skipped %d rows", len(imported), len(skipped))
        return ImportResult(imported=tuple(imported), skipped=tuple(skipped))

    def import_file(self, csv_file_path: str) -> ImportResult:
        """Import expenses from a CSV file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValidationError: If the document has no data rows
        """
        csv_path = Path(csv_file_path)
        if not csv_path.exists():
            raise FileNotFoundError(f"CSV file not found: {csv_file_path}")
        with csv_path.open("r", encoding="utf-8-sig", newline="") as handle:
            return self.import_csv(handle.read())
