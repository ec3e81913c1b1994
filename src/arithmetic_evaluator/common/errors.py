"""Errors raised while lexing, parsing and evaluating arithmetic expressions."""
from enum import Enum


class ErrorKind(str, Enum):
    """Category of a failed evaluation."""

    LEXICAL = "lexical"
    PARSE = "parse"
    ARITHMETIC = "arithmetic"


class ExpressionError(ValueError):
    """Base class for every failure of the evaluation pipeline."""

    kind: ErrorKind


class LexicalError(ExpressionError):
    """An unrecognized character was found in the input string."""

    kind = ErrorKind.LEXICAL

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(f"Unexpected character {character!r} at position {position}")


class ParsingError(ExpressionError):
    """
    A token sequence does not alternate Number, Operator, ..., Number.

    :param str stage: Name of the reduction stage that rejected the tokens
    :param str tokens: Rendered form of the offending remaining tokens
    """

    kind = ErrorKind.PARSE

    def __init__(self, stage: str, tokens: str):
        self.stage = stage
        self.tokens = tokens
        super().__init__(f"Parsing error in {stage}: {tokens!r}")


class ArithmeticEvaluationError(ExpressionError):
    """Division by a literal zero, or a result that is not a finite number."""

    kind = ErrorKind.ARITHMETIC
