"""Unit tests for retyping failed operation results."""

from __future__ import annotations

import pytest

from opresults import (
    InvalidOperationError,
    OperationResult,
    ProblemDetails,
    to_failure,
)


class User:
    pass


def test_to_failure_preserves_status_and_problem() -> None:
    problem = ProblemDetails(title="Bad Request", status=400, detail="missing name")
    source = OperationResult[dict].failure(problem, status_code=400)

    retyped = to_failure(source, int)

    assert retyped.succeeded is False
    assert retyped.status_code == 400
    assert retyped.problem == problem
    assert retyped.value is None
    assert isinstance(retyped, OperationResult[int])


def test_to_failure_without_target_type_returns_untyped_result() -> None:
    source = OperationResult.failure(status_code=503)

    retyped = to_failure(source)

    assert type(retyped) is OperationResult
    assert retyped.status_code == 503
    assert retyped.problem is None


def test_to_failure_discards_stray_value() -> None:
    source = OperationResult(succeeded=False, status_code=500, value="partial")

    assert to_failure(source, str).value is None


@pytest.mark.parametrize(
    "source",
    [
        OperationResult.success(),
        OperationResult.success({"id": 1}, status_code=201),
        OperationResult.no_content(),
    ],
)
def test_to_failure_rejects_successful_results(source: OperationResult) -> None:
    with pytest.raises(InvalidOperationError, match="failed results"):
        to_failure(source, User)


def test_invalid_operation_error_is_runtime_error() -> None:
    assert issubclass(InvalidOperationError, RuntimeError)


def test_to_failure_accepts_plain_classes() -> None:
    source = OperationResult.from_problem("Unauthorized", 401)

    retyped = to_failure(source, User)

    assert isinstance(retyped, OperationResult[User])
    assert retyped.status_code == 401
    assert retyped.problem.title == "Unauthorized"
