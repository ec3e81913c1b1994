"""Tokens produced by the lexer and consumed by the parser."""
from decimal import Decimal
from enum import Enum
import math
from typing import Iterable, Union

from pydantic import BaseModel, ConfigDict, Field


class Operator(str, Enum):
    """The four binary arithmetic operators, valued by their symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


# Precedence levels: higher binds tighter
PRECEDENCE: dict[Operator, int] = {
    Operator.ADD: 0,
    Operator.SUBTRACT: 0,
    Operator.MULTIPLY: 1,
    Operator.DIVIDE: 1,
}


def precedence(operator: Operator) -> int:
    """Return the precedence level of an operator."""
    return PRECEDENCE[operator]


def format_number(value: float) -> str:
    """
    Render a float the way results are shown to users.

    The shortest round-tripping digits are written in positional notation
    (never ``1e+16``), so the text can be lexed back, and a trailing ``.0`` is
    removed so that integral values read as integers. Non-finite values keep
    their ``inf``/``nan`` spelling.

    :param float value: Number to render

    :return: Human-readable number
    :rtype: str
    """
    value = float(value)
    if not math.isfinite(value):
        return repr(value)
    text: str = format(Decimal(repr(value)), "f")
    if text.endswith(".0"):
        return text[:-2]
    return text


class NumberToken(BaseModel):
    """A numeric literal."""

    model_config = ConfigDict(frozen=True)

    value: float = Field(..., description="Floating-point value of the literal")

    def __str__(self) -> str:
        return format_number(self.value)


class OperatorToken(BaseModel):
    """One of the four operator symbols."""

    model_config = ConfigDict(frozen=True)

    operator: Operator = Field(..., description="Operator kind")

    def __str__(self) -> str:
        return self.operator.value


Token = Union[NumberToken, OperatorToken]


def render_tokens(tokens: Iterable[Token]) -> str:
    """Join tokens back into a space-separated string."""
    return " ".join(str(token) for token in tokens)
