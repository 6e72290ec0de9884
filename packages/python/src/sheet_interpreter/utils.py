import re

from openpyxl.utils import get_column_letter

from sheet_interpreter.types import CellReference

# Constants
# get_column_letter stops at XFD
MAX_LETTER_COLUMN = 18278
CELL_REF_REGEX = re.compile(r"([A-Za-z]+)([0-9]+)")


def column_as_int(col: str) -> int:
    """Convert a column designator to a 0-based column index.

    Letters are base-26 digits with A=1 ... Z=26, so `A` -> 0, `Z` -> 25,
    `AA` -> 26 and `BA` -> 52. Case-insensitive, with no upper bound on the
    number of letters.
    """
    if not col or not col.isascii() or not col.isalpha():
        raise ValueError(f"Invalid column designator: {col!r}")
    total = 0
    for letter in col.upper():
        total = total * 26 + (ord(letter) - ord("A") + 1)
    return total - 1


def column_as_str(col: int) -> str:
    """Convert a 0-based column index back to its letters."""
    # openpyxl works with 1-based columns
    return get_column_letter(col + 1)


def format_coordinate(row: int, col: int) -> str:
    """A1-style label for 0-based coordinates, for error messages and logs."""
    if 0 <= col < MAX_LETTER_COLUMN:
        return f"{column_as_str(col)}{row + 1}"
    # Past Excel's last column (XFD) openpyxl has no letters for us
    return f"R{row + 1}C{col + 1}"


def extract_cell_reference(ref: str) -> CellReference | None:
    """Parse a cell reference like `B3` into 0-based coordinates, returning
    None if invalid. Bounds are checked by the grid, not here."""
    match = CELL_REF_REGEX.fullmatch(ref)
    if match:
        col, row = match.groups()
        return CellReference(column=column_as_int(col), row=int(row) - 1)
    return None
