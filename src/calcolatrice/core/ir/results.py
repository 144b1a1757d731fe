"""
Tagged evaluation outcome.

Either ``value`` is set, or ``error`` names the failure kind. Used by
callers that prefer branching on a value over catching EvaluationError.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from calcolatrice.core.errors import ErrorKind, EvaluationError


class EvaluationResult(BaseModel):
    """Result of evaluating one expression line."""

    expression: str = Field(description="Input line as given")
    value: float | None = Field(default=None, description="Result on success")
    error: ErrorKind | None = Field(default=None, description="Failure kind")
    message: str | None = Field(default=None, description="Human-readable failure")
    token: str | None = Field(default=None, description="Offending token, if any")

    model_config = ConfigDict(frozen=True, ser_json_inf_nan="strings")

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, expression: str, value: float) -> EvaluationResult:
        return cls(expression=expression, value=value)

    @classmethod
    def failure(cls, expression: str, exc: EvaluationError) -> EvaluationResult:
        return cls(expression=expression, error=exc.kind, message=exc.message, token=exc.token)

    def unwrap(self) -> float:
        """Return the value, or re-raise the failure as an EvaluationError."""
        if self.error is not None:
            raise EvaluationError(self.error, token=self.token, message=self.message)
        if self.value is None:
            raise ValueError("EvaluationResult has neither a value nor an error")
        return self.value
