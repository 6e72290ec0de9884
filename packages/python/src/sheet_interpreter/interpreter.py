from contextlib import contextmanager
import logging
import sys

import pandas as pd

import sheet_interpreter.expression as expression
from sheet_interpreter.expression import Cell, EvaluationStack, Expression
from sheet_interpreter.parser import lookup_cell, parse_formula
from sheet_interpreter.types import CellReference, CellValue, RawMatrix
from sheet_interpreter.utils import extract_cell_reference

# Python frames used per link of a reference chain (Cell.value,
# Operation.compute, Reference.compute), with some headroom
FRAMES_PER_CELL = 4
BASE_RECURSION_LIMIT = 100


def as_frame(matrix: pd.DataFrame | RawMatrix) -> pd.DataFrame:
    """Rectangularize ragged rows. pandas pads short rows with None."""
    if isinstance(matrix, pd.DataFrame):
        return matrix
    return pd.DataFrame([list(row) for row in matrix], dtype=object)


@contextmanager
def recursion_limit(limit: int, *, at_least: bool = True):
    """Temporarily change Python's recursion limit. With `at_least` the
    limit is only ever raised, never lowered."""
    previous = sys.getrecursionlimit()
    sys.setrecursionlimit(max(previous, limit) if at_least else limit)
    try:
        yield
    finally:
        sys.setrecursionlimit(previous)


class SheetInterpreter:
    """Owns the grid of cells for one sheet.

    Every cell is allocated up front, then each raw field is parsed against
    the full grid, so references may point forward to cells whose contents
    are only assigned later. Nothing is computed until a value is read.
    """

    def __init__(
        self,
        matrix: pd.DataFrame | RawMatrix,
        *,
        detect_cycles: bool | None = None,
        empty_cell_value: CellValue | None = None,
        max_depth: int | None = None,
    ):
        """`max_depth` replaces the recursion limit used while evaluating.
        By default the limit is raised so that a reference chain through
        every cell of the grid fits."""
        if detect_cycles is None:
            detect_cycles = expression.detect_cycles
        if empty_cell_value is None:
            empty_cell_value = expression.empty_cell_value

        frame = as_frame(matrix)
        height, width = frame.shape
        self.max_depth = max_depth
        self.evaluation_stack = EvaluationStack() if detect_cycles else None
        self.cells: list[list[Cell]] = [
            [
                Cell(row, col, self.evaluation_stack, empty_value=empty_cell_value)
                for col in range(width)
            ]
            for row in range(height)
        ]
        logging.debug(f"Allocated a {height}x{width} grid")
        self.load_fields(frame)

    @property
    def shape(self) -> tuple[int, int]:
        height = len(self.cells)
        return (height, len(self.cells[0]) if height else 0)

    def load_fields(self, frame: pd.DataFrame) -> None:
        """Parse every present field into its cell's contents."""
        for row, fields in enumerate(frame.itertuples(index=False, name=None)):
            for col, field in enumerate(fields):
                # Padding past the end of a short row
                if pd.isna(field):
                    continue
                cell = self.cells[row][col]
                cell.contents = parse_formula(str(field), self.cells)

    def cell(self, row: int, col: int) -> Cell:
        """Return the cell at 0-based coordinates."""
        return lookup_cell(self.cells, CellReference(column=col, row=row))

    def cell_at(self, ref: CellReference | str) -> Cell:
        """Return the cell for a `CellReference` or an A1-style label."""
        if isinstance(ref, str):
            parsed = extract_cell_reference(ref)
            if parsed is None:
                raise ValueError(f"Invalid cell reference: {ref}")
            ref = parsed
        return lookup_cell(self.cells, ref)

    def evaluation_limit(self):
        """Recursion limit context for evaluating this grid."""
        if self.max_depth is not None:
            return recursion_limit(self.max_depth, at_least=False)
        height, width = self.shape
        return recursion_limit(FRAMES_PER_CELL * height * width + BASE_RECURSION_LIMIT)

    def evaluate(self, formula_or_node: str | Expression) -> CellValue:
        """Evaluate a field against the grid without storing it in any cell."""
        if isinstance(formula_or_node, str):
            node = parse_formula(formula_or_node, self.cells)
        else:
            node = formula_or_node
        with self.evaluation_limit():
            return node.compute()

    def evaluate_all(self) -> list[list[CellValue]]:
        """Force every cell, in row-major order."""
        with self.evaluation_limit():
            values = [[cell.value() for cell in row] for row in self.cells]
        height, width = self.shape
        logging.debug(f"Evaluated {height * width} cells")
        return values
