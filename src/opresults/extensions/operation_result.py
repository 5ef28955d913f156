"""Translate :class:`OperationResult` values into Flask responses."""

from __future__ import annotations

from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, TypeVar

from flask import Response, current_app, jsonify
from pydantic_core import to_jsonable_python

from opresults.dtos import OperationResult, ProblemDetails
from opresults.errors import InvalidOperationError

TOut = TypeVar("TOut")

DEFAULT_PROBLEM_TITLE = "Internal Server Error"
PROBLEM_MEDIA_TYPE = "application/problem+json"
PROBLEM_MEDIA_TYPE_KEY = "OPRESULTS_PROBLEM_MEDIA_TYPE"


@dataclass(frozen=True)
class ResponseDescriptor:
    """Status code plus optional body handed to the transport layer."""

    status: int
    body: Any = None
    has_body: bool = True

    def __post_init__(self) -> None:
        if not 100 <= self.status <= 599:
            raise ValueError(
                f"Response status must be a valid HTTP status, got {self.status}"
            )

    @property
    def is_problem(self) -> bool:
        return isinstance(self.body, ProblemDetails)

    def to_response(self, problem_media_type: str | None = None) -> Response:
        """Render the descriptor as a Flask response.

        Must be called inside an application context.
        """

        if not self.has_body:
            return Response(status=self.status)

        if self.is_problem:
            response = jsonify(to_jsonable_python(self.body.as_dict()))
            response.mimetype = problem_media_type or current_app.config.get(
                PROBLEM_MEDIA_TYPE_KEY, PROBLEM_MEDIA_TYPE
            )
        else:
            response = jsonify(to_jsonable_python(self.body, by_alias=True))

        response.status_code = self.status
        return response


def _map_outcome(
    succeeded: bool,
    status_code: int,
    value: Any,
    problem: ProblemDetails | None,
) -> ResponseDescriptor:
    if succeeded:
        if status_code == HTTPStatus.NO_CONTENT:
            return ResponseDescriptor(status=HTTPStatus.NO_CONTENT.value, has_body=False)

        return ResponseDescriptor(status=status_code or HTTPStatus.OK.value, body=value)

    effective = problem
    if effective is None:
        effective = ProblemDetails(
            title=DEFAULT_PROBLEM_TITLE,
            status=status_code or HTTPStatus.INTERNAL_SERVER_ERROR.value,
        )
    # A problem without a status falls back to the outcome's code, never to 0.
    status = (
        effective.status or status_code or HTTPStatus.INTERNAL_SERVER_ERROR.value
    )
    return ResponseDescriptor(status=status, body=effective)


def to_response_descriptor(result: OperationResult[Any]) -> ResponseDescriptor:
    """Map ``result`` onto a :class:`ResponseDescriptor`.

    Successful outcomes render ``value`` with their status code (200 when
    unset), except 204 which renders without a body. Failed outcomes render
    their problem details, synthesising an "Internal Server Error" problem
    when none is attached. The mapping never raises.
    """

    return _map_outcome(
        result.succeeded, result.status_code, result.value, result.problem
    )


def to_response(
    result: OperationResult[Any],
    *,
    problem_media_type: str | None = None,
) -> Response:
    """Convert ``result`` into a Flask response within the active app context."""

    return to_response_descriptor(result).to_response(problem_media_type)


def to_failure(
    result: OperationResult[Any],
    value_type: type[TOut] | None = None,
) -> OperationResult[TOut]:
    """Retype a failed ``result`` as a failure of another payload type.

    ``status_code`` and ``problem`` are copied verbatim and the payload is
    reset to ``None``. Calling this on a successful outcome is a programming
    error and raises :class:`InvalidOperationError`.
    """

    if result.succeeded:
        raise InvalidOperationError("to_failure should only be used on failed results")

    target = OperationResult[value_type] if value_type is not None else OperationResult
    return target(
        succeeded=False,
        status_code=result.status_code,
        problem=result.problem,
        value=None,
    )


__all__ = [
    "DEFAULT_PROBLEM_TITLE",
    "PROBLEM_MEDIA_TYPE",
    "PROBLEM_MEDIA_TYPE_KEY",
    "ResponseDescriptor",
    "to_failure",
    "to_response",
    "to_response_descriptor",
]
