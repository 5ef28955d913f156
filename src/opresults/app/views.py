"""View helpers returning operation results from Flask routes."""

from __future__ import annotations

from functools import wraps
from typing import Any, Callable

from opresults.dtos import OperationResult
from opresults.extensions.operation_result import to_response


def returns_operation_result(view: Callable[..., Any]) -> Callable[..., Any]:
    """Render :class:`OperationResult` return values as Flask responses.

    Any other return value is handed back to Flask unchanged.
    """

    @wraps(view)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        rv = view(*args, **kwargs)
        if isinstance(rv, OperationResult):
            return to_response(rv)
        return rv

    return wrapper


__all__ = ["returns_operation_result"]
