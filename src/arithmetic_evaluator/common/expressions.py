"""Expression tree, checked construction and IEEE-754 evaluation."""
from collections.abc import Callable as ABCCallable
import math
import operator
from typing import Callable, ClassVar, Type

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_evaluator.common.errors import ArithmeticEvaluationError
from arithmetic_evaluator.common.tokens import Operator, format_number, precedence


# Type alias for operator functions (taking two floats, returning a float)
OperatorFn: ABCCallable[[float, float], float] = Callable[[float, float], float]


def ieee_truediv(dividend: float, divisor: float) -> float:
    """
    Divide following IEEE-754 instead of raising ZeroDivisionError.

    :param float dividend: Left operand
    :param float divisor: Right operand

    :return: Quotient, +/-inf for a non-zero dividend over zero, NaN for 0 / 0
    :rtype: float
    """
    try:
        return dividend / divisor
    except ZeroDivisionError:
        if dividend == 0 or math.isnan(dividend):
            return math.nan
        return math.copysign(math.inf, dividend) * math.copysign(1.0, divisor)


# Mapping of operators to the float function they apply
OPERATIONS: dict[Operator, OperatorFn] = {
    Operator.ADD: operator.add,
    Operator.SUBTRACT: operator.sub,
    Operator.MULTIPLY: operator.mul,
    Operator.DIVIDE: ieee_truediv,
}


class Expression(BaseModel):
    """Node of an immutable arithmetic expression tree."""

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)


class Number(Expression):
    """Leaf holding a literal or an already evaluated value."""

    value: float = Field(..., description="Floating-point value")


class BinaryExpression(Expression):
    """Internal node applying ``symbol`` to its two children."""

    symbol: ClassVar[Operator]

    left: Expression = Field(..., description="Left operand")
    right: Expression = Field(..., description="Right operand")


class Add(BinaryExpression):
    symbol: ClassVar[Operator] = Operator.ADD


class Subtract(BinaryExpression):
    symbol: ClassVar[Operator] = Operator.SUBTRACT


class Multiply(BinaryExpression):
    symbol: ClassVar[Operator] = Operator.MULTIPLY


class Divide(BinaryExpression):
    symbol: ClassVar[Operator] = Operator.DIVIDE


NODE_TYPES: dict[Operator, Type[BinaryExpression]] = {
    node_type.symbol: node_type for node_type in (Add, Subtract, Multiply, Divide)
}

ZERO: Number = Number(value=0.0)


def combine(left: Expression, right: Expression, op: Operator) -> BinaryExpression:
    """
    Build the node applying ``op`` to two sub-expressions.

    A divisor that is the literal zero is rejected here, before anything is
    evaluated. A divisor that only evaluates to zero is not detected.

    :param Expression left: Left operand
    :param Expression right: Right operand
    :param Operator op: Operator joining them

    :return: New tree node
    :rtype: BinaryExpression
    :raises ArithmeticEvaluationError: If ``op`` is a division by the literal zero
    """
    node: BinaryExpression = NODE_TYPES[op](left=left, right=right)
    if op is Operator.DIVIDE and right == ZERO:
        raise ArithmeticEvaluationError(render(node))
    return node


def evaluate(expression: Expression) -> float:
    """
    Compute the value of an expression tree.

    Division by a zero that was not caught at construction gives inf or NaN.

    :param Expression expression: Tree to evaluate

    :return: Floating-point value
    :rtype: float
    """
    if isinstance(expression, Number):
        return expression.value
    if isinstance(expression, BinaryExpression):
        return OPERATIONS[expression.symbol](evaluate(expression.left), evaluate(expression.right))
    raise TypeError(f"Not an expression node: {expression!r}")


def render(expression: Expression) -> str:
    """
    Render an expression tree as infix text.

    Parentheses surround a child only when it binds looser than its parent,
    or as loosely on the right-hand side; trees built by the parser never need them.

    :param Expression expression: Tree to render

    :return: Infix representation
    :rtype: str
    """
    if isinstance(expression, Number):
        return format_number(expression.value)
    if not isinstance(expression, BinaryExpression):
        raise TypeError(f"Not an expression node: {expression!r}")

    level: int = precedence(expression.symbol)
    left: str = render(expression.left)
    right: str = render(expression.right)
    if isinstance(expression.left, BinaryExpression) and precedence(expression.left.symbol) < level:
        left = f"({left})"
    if isinstance(expression.right, BinaryExpression) and precedence(expression.right.symbol) <= level:
        right = f"({right})"
    return f"{left} {expression.symbol.value} {right}"
