"""Evaluate a file of arithmetic expressions into a results file."""
from pathlib import Path
from typing import List

from pydantic import BaseModel, ConfigDict, Field, FilePath

from arithmetic_evaluator.batch.archives import read_operations_text
from arithmetic_evaluator.common.errors import ArithmeticEvaluationError
from arithmetic_evaluator.common.logger import logger
from arithmetic_evaluator.common.operations import OperationError, OperationOutcome, OperationResult
from arithmetic_evaluator.common.parser import ExpressionParser
from arithmetic_evaluator.common.tokens import format_number
from arithmetic_evaluator.console.display import check_float


class BatchRunner(BaseModel):
    """
    Evaluate every expression of an operations file.

    The runner:
    - reads expressions from a plain text file or an archive
    - evaluates each non-empty line on its own
    - writes one result or error line per expression, as soon as it is known
    """

    # Make the Pydantic instance immutable (read-only)
    model_config = ConfigDict(frozen=True)

    output_file: Path = Field(..., description="Path to write computation results")

    @staticmethod
    def read_expressions(input_file: FilePath) -> List[str]:
        """
        Load the non-empty, stripped lines of a text file or archive.

        :param FilePath input_file: Path to the input file or archive

        :return: Expressions in file order
        :rtype: List[str]
        :raises ValueError: If the archive format is unsupported or contains no .txt file
        """
        content: str = read_operations_text(input_file)
        return [line.strip() for line in content.splitlines() if line.strip()]

    @staticmethod
    def format_line(outcome: OperationOutcome) -> str:
        """
        Render one line of the results file.

        :param OperationOutcome outcome: Evaluation outcome

        :return: ``"<expr> = <number>"`` or ``"<expr> -> ERROR: <message>"``
        :rtype: str
        """
        if isinstance(outcome, OperationResult):
            try:
                return f"{outcome.expression} = {format_number(check_float(outcome.result))}"
            except ArithmeticEvaluationError as exc:
                return f"{outcome.expression} -> ERROR: {exc}"
        return f"{outcome.expression} -> ERROR: {outcome.message}"

    def run(self, input_file: FilePath) -> List[OperationOutcome]:
        """
        Evaluate every expression of ``input_file`` and write the results file.

        :param FilePath input_file: Path to the input file or archive

        :return: Outcomes in input order
        :rtype: List[OperationOutcome]
        :raises ValueError: If the archive format is unsupported or contains no .txt file
        """
        expressions: List[str] = self.read_expressions(input_file)
        logger.info(f"📄 Evaluating {len(expressions)} expressions from {input_file}")

        outcomes: List[OperationOutcome] = []
        with self.output_file.open("w", encoding="utf-8") as f_out:
            for line_number, expr in enumerate(expressions, start=1):
                outcome: OperationOutcome = ExpressionParser.interpret(expr)
                if isinstance(outcome, OperationError):
                    logger.error(f"🧮❌ Line {line_number}: {outcome.message} ({expr!r})")
                f_out.write(f"{self.format_line(outcome)}\n")
                # Flush so partial results survive an interruption
                f_out.flush()
                outcomes.append(outcome)

        logger.info(f"✅ Results written to {self.output_file}")
        return outcomes
