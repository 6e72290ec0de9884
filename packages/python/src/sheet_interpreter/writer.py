import logging
from pathlib import Path
from typing import Sequence

import pandas as pd

from sheet_interpreter.types import CellValue


def format_sheet(values: Sequence[Sequence[CellValue]]) -> str:
    """Serialize evaluated rows as comma-separated lines, each ending in a
    newline."""
    if not values:
        return "\n"
    frame = pd.DataFrame([list(row) for row in values])
    return frame.to_csv(header=False, index=False, lineterminator="\n")


def save_text(path: str | Path, contents: str) -> None:
    # newline="" keeps "\n" line endings on every platform
    with open(path, "w", newline="") as f:
        f.write(contents)
    logging.debug(f"Wrote {len(contents)} characters to {path}")


def write_sheet(path: str | Path, values: Sequence[Sequence[CellValue]]) -> None:
    """Write evaluated rows to `path`. The text is built before the file is
    opened, so a formatting failure never leaves a partial file behind."""
    save_text(path, format_sheet(values))
