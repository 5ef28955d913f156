"""Success/failure outcome produced by business code."""

from __future__ import annotations

from http import HTTPStatus
from typing import Any, Generic, TypeVar

from pydantic import ConfigDict, field_validator
from typing_extensions import Self

from .base import ImmutableModel
from .problem_details import ProblemDetails

T = TypeVar("T")


class OperationResult(ImmutableModel, Generic[T]):
    """Outcome of an operation, generic over the payload type.

    ``value`` is meaningful only when ``succeeded`` is true and ``problem`` only
    when it is false. A ``status_code`` of ``0`` means "unset".
    Parameterise as ``OperationResult[User]`` for typed payloads; the bare
    ``OperationResult`` carries an untyped payload.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    succeeded: bool = False
    status_code: int = 0
    value: T | None = None
    problem: ProblemDetails | None = None

    @field_validator("status_code")
    @classmethod
    def _validate_status_code(cls, value: int) -> int:
        if value != 0 and not 100 <= value <= 599:
            raise ValueError("status_code must be 0 or a valid HTTP status (100-599)")
        return value

    @classmethod
    def success(cls, value: T | None = None, status_code: int = 0) -> Self:
        """Build a successful outcome carrying ``value``."""

        return cls(succeeded=True, status_code=status_code, value=value)

    @classmethod
    def no_content(cls) -> Self:
        """Build a successful outcome that renders without a body."""

        return cls(succeeded=True, status_code=HTTPStatus.NO_CONTENT.value)

    @classmethod
    def failure(
        cls,
        problem: ProblemDetails | None = None,
        status_code: int = 0,
    ) -> Self:
        """Build a failed outcome, optionally carrying ``problem``."""

        return cls(succeeded=False, status_code=status_code, problem=problem)

    @classmethod
    def from_problem(
        cls,
        title: str,
        status: int,
        detail: str | None = None,
        **extensions: Any,
    ) -> Self:
        """Build a failed outcome whose status mirrors a new problem payload."""

        problem = ProblemDetails(title=title, status=status, detail=detail, **extensions)
        return cls.failure(problem, status_code=status)


__all__ = ["OperationResult"]
