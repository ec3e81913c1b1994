"""Format evaluation results for people reading a terminal."""
import math

from arithmetic_evaluator.common.errors import ArithmeticEvaluationError
from arithmetic_evaluator.common.operations import OperationOutcome, OperationResult
from arithmetic_evaluator.common.parser import ExpressionParser
from arithmetic_evaluator.common.tokens import format_number


DISPLAY_PREFIX: str = " >> "
UNDEFINED_VALUE: str = "Undefined value"


def check_float(value: float) -> float:
    """
    Reject results that are not finite numbers.

    Negative infinity is rejected as well as positive infinity and NaN.

    :param float value: Evaluated result

    :return: The same value
    :rtype: float
    :raises ArithmeticEvaluationError: If the value is infinite or NaN
    """
    if math.isinf(value) or math.isnan(value):
        raise ArithmeticEvaluationError(UNDEFINED_VALUE)
    return value


def format_result(value: float) -> str:
    """Return the display line for a finite result."""
    return f"{DISPLAY_PREFIX}{format_number(check_float(value))}"


def display(expr: str) -> str:
    """
    Evaluate an expression and return its display line, e.g. ``" >> 14"``.

    :param str expr: Arithmetic expression string

    :return: Display line
    :rtype: str
    :raises ExpressionError: If the expression cannot be evaluated or is undefined
    """
    return format_result(ExpressionParser.evaluate(expr))


def render_outcome(outcome: OperationOutcome) -> str:
    """
    Return the display line for an outcome, failures included.

    :param OperationOutcome outcome: Result of ExpressionParser.interpret

    :return: ``" >> <number>"`` or ``" >> Error: <message>"``
    :rtype: str
    """
    if isinstance(outcome, OperationResult):
        try:
            return format_result(outcome.result)
        except ArithmeticEvaluationError as exc:
            return f"{DISPLAY_PREFIX}Error: {exc}"
    return f"{DISPLAY_PREFIX}Error: {outcome.message}"
