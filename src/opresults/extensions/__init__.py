"""Helpers that operate on :class:`~opresults.dtos.OperationResult` values."""

from .operation_result import (
    ResponseDescriptor,
    to_failure,
    to_response,
    to_response_descriptor,
)

__all__ = [
    "ResponseDescriptor",
    "to_failure",
    "to_response",
    "to_response_descriptor",
]
