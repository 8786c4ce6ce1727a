"""Operation Schemas - Pydantic models for dispatch requests and results.

Invariants:
    - OperationRequest.operation is stripped and non-empty
    - Unknown request fields are rejected (extra="forbid")
    - OperationResult.status is always "ok"; errors use StrkitError.to_response()
"""

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator


class OperationRequest(BaseModel):
    """One operation call: name plus keyword arguments."""
    model_config = ConfigDict(extra="forbid")

    operation: str = Field(min_length=1, max_length=64)
    arguments: dict[str, Any] = Field(default_factory=dict)

    @field_validator("operation")
    @classmethod
    def strip_operation(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("operation cannot be empty or whitespace")
        return v


class OperationResult(BaseModel):
    """Successful operation envelope."""
    status: Literal["ok"] = "ok"
    operation: str
    result: Any
