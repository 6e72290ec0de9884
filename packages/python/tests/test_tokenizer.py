import pytest
from sheet_interpreter.errors import TokenizerError
from sheet_interpreter.tokenizer import CellTokenizer, Token, TokenType


def tokenize(field: str) -> list[Token]:
    """Helper function to tokenize a field."""
    tokenizer = CellTokenizer(field)
    return tokenizer.tokenize()


def assert_tokens(field: str, expected: list[tuple[TokenType, str]]):
    """Helper function to assert tokens match expected types and values."""
    tokens = tokenize(field)
    assert len(tokens) == len(expected), (
        f"Expected {len(expected)} tokens, got {len(tokens)}\n"
        f"Expected: {expected}\n"
        f"Got: {[(t.type, t.value) for t in tokens]}"
    )
    for token, (exp_type, exp_value) in zip(tokens, expected):
        assert token.type == exp_type, f"Expected {exp_type}, got {token.type}"
        assert token.value == exp_value, f"Expected {exp_value}, got {token.value}"


class TestCellTokenizer:
    def test_single_number(self):
        assert_tokens("42", [(TokenType.NUMBER, "42")])

    def test_signed_numbers(self):
        assert_tokens("-7", [(TokenType.NUMBER, "-7")])
        assert_tokens("+7", [(TokenType.NUMBER, "+7")])

    def test_single_reference(self):
        assert_tokens("B3", [(TokenType.REFERENCE, "B3")])
        assert_tokens("aa10", [(TokenType.REFERENCE, "aa10")])

    def test_formula(self):
        assert_tokens(
            "A1 B2 +",
            [
                (TokenType.REFERENCE, "A1"),
                (TokenType.REFERENCE, "B2"),
                (TokenType.SYMBOL, "+"),
            ],
        )

    def test_mixed_operands(self):
        assert_tokens(
            "10 C4 /",
            [
                (TokenType.NUMBER, "10"),
                (TokenType.REFERENCE, "C4"),
                (TokenType.SYMBOL, "/"),
            ],
        )

    def test_extra_whitespace(self):
        """Any run of whitespace separates fields."""
        assert_tokens(
            "  1 \t 2   *  ",
            [
                (TokenType.NUMBER, "1"),
                (TokenType.NUMBER, "2"),
                (TokenType.SYMBOL, "*"),
            ],
        )

    def test_positions(self):
        tokens = tokenize("A1 2 -")
        assert [t.position for t in tokens] == [0, 1, 2]

    def test_symbols(self):
        """Anything that is neither a number nor a reference is a symbol."""
        for field in ["+", "%", "1A", "A", "1.5", "A1B", "$A$1", "1_000"]:
            assert_tokens(field, [(TokenType.SYMBOL, field)])

    def test_empty_field(self):
        with pytest.raises(TokenizerError):
            tokenize("")
        with pytest.raises(TokenizerError):
            tokenize("   ")
