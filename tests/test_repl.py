"""Test class ArithmeticRepl."""
import io

from arithmetic_evaluator.common.operations import OperationError, OperationResult
from arithmetic_evaluator.console.repl import ArithmeticRepl


def make_repl(text: str) -> tuple[ArithmeticRepl, io.StringIO]:
    output = io.StringIO()
    repl = ArithmeticRepl(prompt="> ", input_stream=io.StringIO(text), output_stream=output)
    return repl, output


def test_repl_evaluates_until_eof() -> None:
    """Each non-blank line is evaluated and printed."""
    repl, output = make_repl("2 + 3 * 4\n\n10 - 3 - 2\n")
    assert repl.run() == 2
    text = output.getvalue()
    assert " >> 14\n" in text
    assert " >> 5\n" in text
    assert text.count(" >> ") == 2


def test_repl_keeps_going_after_errors() -> None:
    """An invalid expression prints an error and the loop continues."""
    repl, output = make_repl("5 / 0\n3 & 2\n1 + 1\n")
    assert repl.run() == 3
    text = output.getvalue()
    assert " >> Error: 5 / 0" in text
    assert "Unexpected character '&'" in text
    assert " >> 2" in text


def test_repl_stops_on_exit_command() -> None:
    """'quit' ends the loop before later lines are read."""
    repl, output = make_repl("1 + 1\nquit\n2 + 2\n")
    assert repl.run() == 1
    assert " >> 4" not in output.getvalue()


def test_evaluate_line_returns_outcome() -> None:
    """evaluate_line returns the outcome it printed."""
    repl, output = make_repl("")
    assert isinstance(repl.evaluate_line("6 / 4"), OperationResult)
    assert isinstance(repl.evaluate_line("6 /"), OperationError)
    assert output.getvalue().splitlines()[0] == " >> 1.5"
