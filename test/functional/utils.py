from typing import Any
import csv
from pathlib import Path


def write_csv_row(file: Path | None, data: dict[str, Any]) -> None:
    """Appends `data` to `file`, writing the header for a new file."""
    if file is None:
        return
    new_file = not file.exists() or file.stat().st_size == 0
    with open(file, 'a', newline='') as csvfile:
        writer = csv.DictWriter(csvfile, fieldnames=list(data))
        if new_file:
            writer.writeheader()
        writer.writerow(data)
