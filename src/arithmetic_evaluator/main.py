"""
Command-line entry point.

Modes:
- no argument: interactive loop reading one expression per line
- ``-e EXPR``: evaluate a single expression and print it
- ``FILE``: evaluate an operations file (or archive) into a results file
"""

import argparse
import logging
from pathlib import Path
import sys
from typing import List, Optional

from pydantic import BaseModel, FilePath, ValidationError

from arithmetic_evaluator.batch.runner import BatchRunner
from arithmetic_evaluator.common.errors import ExpressionError
from arithmetic_evaluator.common.logger import configure_logger
from arithmetic_evaluator.console.display import display
from arithmetic_evaluator.console.repl import ArithmeticRepl


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    file_path : Optional[FilePath]
        Path to the file containing arithmetic operations.
    expression : Optional[str]
        Single expression to evaluate.
    verbose : bool
        Enable debug logging.
    """

    file_path: Optional[FilePath] = None
    expression: Optional[str] = None
    verbose: bool = False


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param Optional[List[str]] argv: Arguments, defaults to ``sys.argv[1:]``

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Evaluate arithmetic expressions with +, -, * and /"
    )

    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "file_path",
        nargs="?",
        help="Path to a file (or .zip, .tar.xz, .7z archive) of arithmetic operations",
    )
    group.add_argument(
        "-e",
        "--expression",
        help="Evaluate a single expression and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(file_path=args.file_path, expression=args.expression, verbose=args.verbose)
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Construct a safe output file path based on the input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: resources/operations.txt
    output: resources/operations_txt_results.txt

    input: resources/operations.tar.xz
    output: resources/operations_tar_xz_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    stem: str = input_path.name[: len(input_path.name) - len("".join(input_path.suffixes))]
    suffix_safe = "".join(input_path.suffixes).replace(".", "_")
    return input_path.with_name(f"{stem}{suffix_safe}_results.txt")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the evaluator in the mode selected on the command line.

    :param Optional[List[str]] argv: Arguments, defaults to ``sys.argv[1:]``

    :return: Process exit status
    :rtype: int
    """
    cli_args = parse_args(argv)
    configure_logger(logging.DEBUG if cli_args.verbose else logging.WARNING)

    if cli_args.expression is not None:
        try:
            print(display(cli_args.expression))
        except ExpressionError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        return 0

    if cli_args.file_path is not None:
        input_path: Path = Path(cli_args.file_path)
        output_path: Path = build_output_path(input_path)
        try:
            BatchRunner(output_file=output_path).run(input_path)
        except ValueError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            return 1
        print(output_path)
        return 0

    ArithmeticRepl().run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
