"""Domain layer for spendtrack application."""

# Services are imported lazily: storage.base imports domain.entities, and the
# ledger imports storage.base.
_SERVICES = {
    "LedgerService": "spendtrack.domain.ledger",
    "SummaryService": "spendtrack.domain.summary",
    "RecurrenceService": "spendtrack.domain.recurrence",
    "CSVImportService": "spendtrack.domain.csv_import",
    "CSVExportService": "spendtrack.domain.csv_export",
}

__all__ = list(_SERVICES)


def __getattr__(name):
    if name in _SERVICES:
        import importlib

        return getattr(importlib.import_module(_SERVICES[name]), name)
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")
