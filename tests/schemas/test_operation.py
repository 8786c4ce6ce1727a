"""Operation schemas - validation of dispatch requests and results.

Invariants:
    - operation is stripped and must be non-empty
    - arguments default to an empty dict
    - unknown request fields are rejected
"""

import pytest
from pydantic import ValidationError

from strkit.schemas.operation import OperationRequest, OperationResult


def test_request_strips_operation_name():
    req = OperationRequest(operation="  slugify ", arguments={"text": "x"})
    assert req.operation == "slugify"
    assert req.arguments == {"text": "x"}


def test_request_arguments_default_to_empty():
    assert OperationRequest(operation="reverse").arguments == {}


def test_request_rejects_whitespace_operation():
    with pytest.raises(ValidationError):
        OperationRequest(operation="   ")


def test_request_rejects_empty_operation():
    with pytest.raises(ValidationError):
        OperationRequest(operation="")


def test_request_rejects_extra_fields():
    with pytest.raises(ValidationError):
        OperationRequest(operation="reverse", args={"s": "x"})


def test_request_rejects_non_dict_arguments():
    with pytest.raises(ValidationError):
        OperationRequest(operation="reverse", arguments=["x"])


def test_result_dump():
    result = OperationResult(operation="between", result=None)
    assert result.model_dump() == {
        "status": "ok", "operation": "between", "result": None,
    }
