"""Interactive read-evaluate-print loop."""
import io
import sys

from pydantic import BaseModel, ConfigDict, Field

from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.operations import OperationOutcome
from arithmetic_evaluator.common.parser import ExpressionParser
from arithmetic_evaluator.console.display import render_outcome


EXIT_COMMANDS: frozenset[str] = frozenset({"quit", "exit"})


class ArithmeticRepl(BaseModel):
    """
    Read expressions line by line and print their value.

    The loop ends at end of input or on ``quit``/``exit``. An invalid expression
    prints an error line and the loop goes on.
    """

    # Make the Pydantic instance immutable (read-only)
    # Allow arbitrary types like text streams
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    prompt: str = Field(default="> ", description="Prompt written before each read")
    input_stream: io.TextIOBase = Field(default_factory=lambda: sys.stdin, description="Stream expressions are read from")
    output_stream: io.TextIOBase = Field(default_factory=lambda: sys.stdout, description="Stream results are written to")

    def evaluate_line(self, line: str) -> OperationOutcome:
        """
        Evaluate one line and print its display string.

        :param str line: Raw input line

        :return: Outcome of the evaluation
        :rtype: OperationOutcome
        """
        outcome: OperationOutcome = ExpressionParser.interpret(line)
        print(render_outcome(outcome), file=self.output_stream)
        return outcome

    def run(self) -> int:
        """
        Run the loop until the input is exhausted.

        :return: Number of expressions evaluated
        :rtype: int
        """
        logger.info("⌨️ REPL started")
        count: int = 0
        while True:
            self.output_stream.write(self.prompt)
            self.output_stream.flush()
            line: str = self.input_stream.readline()
            if not line:
                # End of input
                self.output_stream.write("\n")
                break
            line = line.strip()
            if not line:
                continue
            if line in EXIT_COMMANDS:
                break
            self.evaluate_line(line)
            count += 1
        logger.info(f"⌨️ REPL finished after {count} expressions")
        return count
