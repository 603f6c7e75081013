import json
import re
from datetime import datetime
from pathlib import Path
from typing import List, Sequence

import pandas as pd

from nuclide_explorer.normalization.records import FlatRow


# ==============================================
# TableStore
# ==============================================
#
# PURPOSE:
#   Keep a copy of a normalized table on disk so a chart can be
#   redrawn without fetching and normalizing the dataset again.
#
# FILES CREATED:
#   {storage_dir}/{name}.json  → {"saved_at", "row_count", "rows": [...]}
#   {storage_dir}/{name}.csv   → DataFrame export (save_frame)
#
# ==============================================

NAME_PATTERN = re.compile(r'^[A-Za-z0-9_.-]+$')


class TableStore:
    """Saves and loads normalized tables as JSON files."""

    def __init__(self, storage_dir: str = "tables/"):
        """
        Initialize the table store.

        Args:
            storage_dir: Directory to store table files
        """
        self.storage_dir = Path(storage_dir)
        self.storage_dir.mkdir(parents=True, exist_ok=True)

    def path_for(self, name: str, suffix: str = ".json") -> Path:
        if not NAME_PATTERN.match(name):
            raise ValueError(f"Invalid table name: {name!r}")
        return self.storage_dir / f"{name}{suffix}"

    def save_rows(self, rows: Sequence[FlatRow], name: str = "isotopes") -> Path:
        """
        Save normalized rows to disk.

        Args:
            rows: FlatRows in table order
            name: Table name, used as the file stem

        Returns:
            Path of the written file
        """
        table_file = self.path_for(name)
        document = {
            "saved_at": datetime.now().isoformat(),
            "row_count": len(rows),
            "rows": [row.to_dict() for row in rows],
        }

        with open(table_file, 'w') as f:
            json.dump(document, f, indent=2)

        print(f"Saved {len(rows)} rows to {table_file}")
        return table_file

    def load_rows(self, name: str = "isotopes") -> List[FlatRow]:
        """
        Load normalized rows from disk.

        Returns:
            FlatRows in their saved order
            Empty list if file doesn't exist
        """
        table_file = self.path_for(name)
        if not table_file.exists():
            print(f"No table file found at {table_file}")
            return []

        with open(table_file, 'r') as f:
            document = json.load(f)

        rows = [FlatRow.from_dict(data) for data in document.get("rows", [])]
        print(f"Loaded {len(rows)} rows from {table_file}")
        return rows

    def save_frame(self, frame: pd.DataFrame, name: str) -> Path:
        """Export a DataFrame as CSV."""
        csv_file = self.path_for(name, ".csv")
        frame.to_csv(csv_file, index=False)
        print(f"Saved {len(frame)} rows to {csv_file}")
        return csv_file
