"""Pydantic models for arithmetic operation outcomes."""
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from arithmetic_evaluator.common.errors import ErrorKind


class OperationResult(BaseModel):
    """Represents a successfully evaluated arithmetic operation."""

    kind: Literal["ok"] = "ok"
    expression: str = Field(..., description="Original arithmetic expression")
    result: float = Field(..., description="Evaluated numeric result of the expression")


class OperationError(BaseModel):
    """Represents an arithmetic operation that could not be evaluated."""

    kind: Literal["error"] = "error"
    expression: str = Field(..., description="Original arithmetic expression")
    error_kind: ErrorKind = Field(..., description="Stage of the pipeline that failed")
    message: str = Field(..., description="Human-readable description of the failure")


# Either variant, told apart by the ``kind`` tag
OperationOutcome = Annotated[Union[OperationResult, OperationError], Field(discriminator="kind")]
