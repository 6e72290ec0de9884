from enum import Enum

from sheet_interpreter.errors import UnknownOperator
from sheet_interpreter.types import CellValue


class Operator(Enum):
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"

    @classmethod
    def from_symbol(cls, symbol: str) -> "Operator":
        try:
            return cls(symbol)
        except ValueError:
            raise UnknownOperator(f"Unknown operator: {symbol}") from None


def add(left: CellValue, right: CellValue) -> CellValue:
    return left + right


def subtract(left: CellValue, right: CellValue) -> CellValue:
    return left - right


def multiply(left: CellValue, right: CellValue) -> CellValue:
    return left * right


def divide(left: CellValue, right: CellValue) -> CellValue:
    """Integer division truncating toward zero (`-7 / 2 == -3`), unlike
    Python's `//` which floors. Dividing by zero raises ZeroDivisionError."""
    quotient = abs(left) // abs(right)
    return -quotient if (left < 0) != (right < 0) else quotient


def apply_operator(
    operator: Operator, left: CellValue, right: CellValue
) -> CellValue:
    match operator:
        case Operator.ADD:
            return add(left, right)
        case Operator.SUBTRACT:
            return subtract(left, right)
        case Operator.MULTIPLY:
            return multiply(left, right)
        case Operator.DIVIDE:
            return divide(left, right)
