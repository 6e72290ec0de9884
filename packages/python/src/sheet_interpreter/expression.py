from abc import ABC, abstractmethod
import logging

from sheet_interpreter.errors import CycleError
from sheet_interpreter.operators import Operator, apply_operator
from sheet_interpreter.types import CellValue
from sheet_interpreter.utils import format_coordinate


detect_cycles = True

empty_cell_value: CellValue = 0


def enable_cycle_detection():
    global detect_cycles
    detect_cycles = True


def disable_cycle_detection():
    """Without cycle detection a circular reference recurses until Python
    raises RecursionError."""
    global detect_cycles
    detect_cycles = False


def set_empty_cell_value(value: CellValue):
    global empty_cell_value
    empty_cell_value = value


class Expression(ABC):
    @abstractmethod
    def compute(self) -> CellValue: ...

    @abstractmethod
    def __formula__(self) -> str:
        "Returns the expression in the operand-operand-operator field syntax."
        ...

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.__formula__()!r})"


class Constant(Expression):
    def __init__(self, value: CellValue):
        self.value = value

    def compute(self) -> CellValue:
        return self.value

    def __formula__(self) -> str:
        return str(self.value)


class Reference(Expression):
    """Reads another cell of the same grid. The cell is held by identity, so
    its memoized value is shared by every reference to it."""

    def __init__(self, target: "Cell"):
        self.target = target

    def compute(self) -> CellValue:
        return self.target.value()

    def __formula__(self) -> str:
        return self.target.coords()


class Operation(Expression):
    def __init__(self, left: Expression, right: Expression, operator: Operator):
        self.left = left
        self.right = right
        self.operator = operator

    def compute(self) -> CellValue:
        left = self.left.compute()
        right = self.right.compute()
        return apply_operator(self.operator, left, right)

    def __formula__(self) -> str:
        return (
            f"{self.left.__formula__()} {self.right.__formula__()} "
            f"{self.operator.value}"
        )


class EvaluationStack:
    """Tracks the cells currently being computed."""

    def __init__(self):
        self.stack: list[Cell] = []
        # Cells are compared by identity
        self.members: set[int] = set()

    def push(self, cell: "Cell") -> None:
        self.stack.append(cell)
        self.members.add(id(cell))

    def pop(self) -> None:
        cell = self.stack.pop()
        self.members.discard(id(cell))

    def contains(self, cell: "Cell") -> bool:
        return id(cell) in self.members

    def format_cycle_path(self, cell: "Cell") -> str:
        """Format the path from the first occurrence of `cell` back to it."""
        start = next(i for i, c in enumerate(self.stack) if c is cell)
        path = [c.coords() for c in self.stack[start:]]
        path.append(cell.coords())
        return " -> ".join(path)


class Cell:
    """One slot of the grid. `contents` is assigned once by the parser and
    computed at most once, on the first call to `value()`."""

    final_value: CellValue | None
    contents: Expression | None

    def __init__(
        self,
        row: int,
        column: int,
        evaluation_stack: EvaluationStack | None = None,
        empty_value: CellValue = 0,
    ):
        self.row = row
        self.column = column
        self.final_value = None
        self.contents = None
        self.evaluation_stack = evaluation_stack
        self.empty_value = empty_value

    def coords(self) -> str:
        return format_coordinate(self.row, self.column)

    @property
    def is_resolved(self) -> bool:
        return self.final_value is not None

    def value(self) -> CellValue:
        if self.final_value is not None:
            return self.final_value

        stack = self.evaluation_stack
        if stack is not None:
            if stack.contains(self):
                raise CycleError(f"Detected cycle: {stack.format_cycle_path(self)}")
            stack.push(self)

        try:
            if self.contents is None:
                value = self.empty_value
            else:
                value = self.contents.compute()
        finally:
            if stack is not None:
                stack.pop()

        logging.debug(f"{self.coords()} = {value}")
        self.final_value = value
        return value

    def __repr__(self) -> str:
        return f"Cell({self.coords()}, contents={self.contents!r}, value={self.final_value})"
