import re
from typing import NamedTuple, Sequence

# Cells only ever hold integers; Python ints never overflow so results can
# grow past the 32-bit range a C-style spreadsheet would wrap at.
CellValue = int

# A raw field is None for the padding past the end of a short input row
RawField = str | None
RawMatrix = Sequence[Sequence[RawField]]

NUMBER_REGEX = re.compile(r"[+-]?[0-9]+")


class CellReference(NamedTuple):
    # Both 0-based
    column: int
    row: int

    def coords(self) -> str:
        # Avoid circular imports
        from sheet_interpreter.utils import format_coordinate

        return format_coordinate(self.row, self.column)


def is_number(val: str) -> bool:
    return NUMBER_REGEX.fullmatch(val) is not None


def parse_number(val: str) -> CellValue:
    """Parse an integer literal. Only ASCII digits with an optional sign are
    accepted, unlike `int()` which also allows underscores and whitespace."""
    if not is_number(val):
        raise ValueError(f"Not an integer literal: {val!r}")
    return int(val)
