"""Test classes OperationResult and OperationError."""
from pydantic import TypeAdapter, ValidationError
import pytest

from arithmetic_evaluator.common.errors import ErrorKind
from arithmetic_evaluator.common.operations import OperationError, OperationOutcome, OperationResult


def test_operation_result_valid() -> None:
    """Test that a valid OperationResult can be created."""
    res = OperationResult(expression="2 + 2 * 3", result=8.0)
    assert res.kind == "ok"
    assert res.expression == "2 + 2 * 3"
    assert res.result == 8.0
    assert isinstance(res.result, float)

def test_operation_result_invalid_expression_type() -> None:
    """Test that invalid expression type raises a validation error."""
    with pytest.raises(ValidationError):
        OperationResult(expression=42, result=8.0)

def test_operation_result_invalid_result_type() -> None:
    """Test that invalid result type raises a validation error."""
    with pytest.raises(ValidationError):
        OperationResult(expression="2 + 2", result="not a float")

def test_operation_error_valid() -> None:
    """Test that a valid OperationError can be created from a string kind."""
    err = OperationError(expression="3 +", error_kind="parse", message="Parsing error")
    assert err.kind == "error"
    assert err.error_kind is ErrorKind.PARSE

def test_operation_error_invalid_kind() -> None:
    """Test that an unknown error kind raises a validation error."""
    with pytest.raises(ValidationError):
        OperationError(expression="3 +", error_kind="syntax", message="Parsing error")

@pytest.mark.parametrize("payload,expected_type", [
    ({"kind": "ok", "expression": "1 + 1", "result": 2.0}, OperationResult),
    ({"kind": "error", "expression": "5 / 0", "error_kind": "arithmetic", "message": "5 / 0"}, OperationError),
])
def test_operation_outcome_discriminator(payload: dict, expected_type: type) -> None:
    """Test that the kind tag selects the outcome variant."""
    outcome = TypeAdapter(OperationOutcome).validate_python(payload)
    assert isinstance(outcome, expected_type)
