"""Storage factory functions."""

import os
from pathlib import Path
from typing import Optional

from spendtrack.storage.json_storage import JSONStorage

DATA_PATH_ENVVAR = "SPENDTRACK_DATA_PATH"


def create_json_storage(data_path: Optional[str] = None) -> JSONStorage:
    """Create a JSON file storage instance.

    Args:
        data_path: Path to the JSON data file. If None, checks the
            SPENDTRACK_DATA_PATH environment variable, then defaults to
            ~/.spendtrack/expenses.json

    Returns:
        JSONStorage instance for the resolved path
    """
    if data_path is None:
        data_path = os.environ.get(DATA_PATH_ENVVAR)

    if data_path is None:
        data_dir = Path.home() / ".spendtrack"
        data_dir.mkdir(exist_ok=True)
        data_path = str(data_dir / "expenses.json")

    return JSONStorage(data_path)
