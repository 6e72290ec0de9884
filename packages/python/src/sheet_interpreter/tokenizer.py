from enum import Enum, auto
from typing import List, NamedTuple

from sheet_interpreter.errors import TokenizerError
from sheet_interpreter.types import is_number
from sheet_interpreter.utils import CELL_REF_REGEX


class TokenType(Enum):
    NUMBER = auto()
    REFERENCE = auto()
    # Anything else: operator symbols, but also garbage the parser rejects
    SYMBOL = auto()


class Token(NamedTuple):
    type: TokenType
    value: str
    # Index of the whitespace-separated field within the cell
    position: int


class CellTokenizer:
    def __init__(self, field: str):
        self.field = field

    def tokenize(self) -> List[Token]:
        """Split the field on whitespace and classify every part."""
        parts = self.field.split()
        if not parts:
            raise TokenizerError(f"Empty cell content: {self.field!r}")
        return [self._classify(part, position) for position, part in enumerate(parts)]

    def _classify(self, part: str, position: int) -> Token:
        if is_number(part):
            return Token(TokenType.NUMBER, part, position)
        if CELL_REF_REGEX.fullmatch(part):
            return Token(TokenType.REFERENCE, part, position)
        return Token(TokenType.SYMBOL, part, position)
