import logging
from pathlib import Path

import pandas as pd

from sheet_interpreter.interpreter import as_frame

DELIMITER = ","


def split_rows(text: str) -> list[list[str]]:
    """Split delimited text into rows of raw fields. There is no quoting:
    every comma separates two fields."""
    return [line.split(DELIMITER) for line in text.splitlines()]


def read_sheet_text(text: str) -> pd.DataFrame:
    """Parse delimited text into a rectangular matrix of raw fields. Rows
    shorter than the widest one are padded with None."""
    return as_frame(split_rows(text))


def read_sheet(path: str | Path) -> pd.DataFrame:
    """Read a delimited sheet file. Raises OSError or UnicodeDecodeError if
    the file cannot be read."""
    text = Path(path).read_text()
    frame = read_sheet_text(text)
    logging.debug(f"Read {frame.shape[0]} rows from {path}")
    return frame
