"""Storage layer for spendtrack."""

from spendtrack.storage.base import LedgerSnapshot, Storage
from spendtrack.storage.factories import create_json_storage
from spendtrack.storage.json_storage import JSONStorage

__all__ = ["LedgerSnapshot", "Storage", "JSONStorage", "create_json_storage"]
