from typing import List, Sequence

from sheet_interpreter.errors import (
    InvalidReference,
    ParseError,
    ReferenceOutOfBounds,
)
from sheet_interpreter.expression import (
    Cell,
    Constant,
    Expression,
    Operation,
    Reference,
)
from sheet_interpreter.operators import Operator
from sheet_interpreter.types import CellReference, parse_number
from sheet_interpreter.utils import extract_cell_reference
from .tokenizer import CellTokenizer, Token, TokenType

CellGrid = Sequence[Sequence[Cell]]


def parse_formula(field: str, cells: CellGrid) -> Expression:
    """Helper function to parse one raw field into an expression bound to `cells`."""
    tokens = CellTokenizer(field).tokenize()
    return FormulaParser(tokens, cells).parse()


def lookup_cell(cells: CellGrid, ref: CellReference) -> Cell:
    """Return the cell at `ref`, refusing anything outside the grid.

    Negative indices are rejected explicitly since Python would otherwise
    wrap them around to the end of the row."""
    if ref.row < 0 or ref.row >= len(cells):
        raise ReferenceOutOfBounds(f"Row out of range: {ref.coords()}")
    row = cells[ref.row]
    if ref.column < 0 or ref.column >= len(row):
        raise ReferenceOutOfBounds(f"Column out of range: {ref.coords()}")
    return row[ref.column]


class FormulaParser:
    """Builds an expression from the tokens of a single cell.

    The grammar only has two shapes: a single operand, or two operands
    followed by the operator symbol (`A1 B2 +`)."""

    def __init__(self, tokens: List[Token], cells: CellGrid):
        self.tokens = tokens
        self.cells = cells

    def parse(self) -> Expression:
        match self.tokens:
            case [operand]:
                return self.parse_operand(operand)
            case [left, right, operator]:
                return Operation(
                    left=self.parse_operand(left),
                    right=self.parse_operand(right),
                    operator=Operator.from_symbol(operator.value),
                )
            case _:
                fields = " ".join(t.value for t in self.tokens)
                raise ParseError(
                    f"Expected 1 or 3 fields, got {len(self.tokens)}: {fields!r}"
                )

    def parse_operand(self, token: Token) -> Expression:
        if token.type == TokenType.NUMBER:
            return Constant(parse_number(token.value))
        if token.type == TokenType.REFERENCE:
            return self.parse_cell_reference(token)
        raise InvalidReference(
            f"Invalid cell reference: {token.value!r} at field {token.position}"
        )

    def parse_cell_reference(self, token: Token) -> Reference:
        ref = extract_cell_reference(token.value)
        if ref is None:
            raise InvalidReference(f"Invalid cell reference: {token.value!r}")
        return Reference(lookup_cell(self.cells, ref))
