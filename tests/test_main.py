"""Test the command-line entry point."""
import io
import logging
from pathlib import Path

import pytest

from arithmetic_evaluator.common.logger import LOGGER_NAME
from arithmetic_evaluator.main import build_output_path, main, parse_args


@pytest.fixture(autouse=True)
def reset_logger():
    """Drop handlers main() attaches to the captured stderr."""
    yield
    package_logger = logging.getLogger(LOGGER_NAME)
    package_logger.handlers.clear()
    package_logger.setLevel(logging.NOTSET)


@pytest.mark.parametrize("input_path,expected", [
    (Path("resources/operations.txt"), Path("resources/operations_txt_results.txt")),
    (Path("resources/operations.tar.xz"), Path("resources/operations_tar_xz_results.txt")),
    (Path("resources/operations.7z"), Path("resources/operations_7z_results.txt")),
])
def test_build_output_path(input_path: Path, expected: Path) -> None:
    """The results file sits next to the input, extensions folded into its name."""
    assert build_output_path(input_path) == expected


def test_parse_args_expression() -> None:
    """-e selects single expression mode."""
    args = parse_args(["-e", "1 + 1", "-v"])
    assert args.expression == "1 + 1"
    assert args.file_path is None
    assert args.verbose is True


def test_parse_args_missing_file(tmp_path: Path) -> None:
    """A file path that does not exist is rejected by validation."""
    with pytest.raises(SystemExit):
        parse_args([str(tmp_path / "missing.txt")])


def test_main_expression(capsys) -> None:
    """Single expression mode prints the display line."""
    assert main(["-e", "2 + 3 * 4"]) == 0
    assert capsys.readouterr().out == " >> 14\n"


def test_main_expression_error(capsys) -> None:
    """An invalid expression is reported on stderr with a failing status."""
    assert main(["-e", "5 / 0"]) == 1
    assert "Error: 5 / 0" in capsys.readouterr().err


def test_main_file(tmp_path: Path, capsys) -> None:
    """File mode writes the results file next to the input."""
    input_file = tmp_path / "ops.txt"
    input_file.write_text("1 + 2\n6 / 4\n")

    assert main([str(input_file)]) == 0

    output_file = tmp_path / "ops_txt_results.txt"
    assert output_file.read_text() == "1 + 2 = 3\n6 / 4 = 1.5\n"
    assert capsys.readouterr().out.strip() == str(output_file)


def test_main_repl(monkeypatch, capsys) -> None:
    """Without arguments the interactive loop reads standard input."""
    monkeypatch.setattr("sys.stdin", io.StringIO("10 - 3 - 2\n"))
    assert main([]) == 0
    assert " >> 5" in capsys.readouterr().out
