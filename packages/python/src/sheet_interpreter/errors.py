class SheetError(Exception):
    """Base class for every error raised while building or evaluating a sheet."""


class TokenizerError(SheetError):
    pass


class ParseError(SheetError):
    pass


class InvalidReference(ParseError):
    pass


class ReferenceOutOfBounds(ParseError):
    pass


class UnknownOperator(ParseError):
    pass


class CycleError(SheetError):
    pass
