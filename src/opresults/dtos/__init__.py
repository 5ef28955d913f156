"""Data types exchanged between business code and the response layer."""

from .base import ImmutableModel
from .operation_result import OperationResult
from .problem_details import ProblemDetails

__all__ = ["ImmutableModel", "OperationResult", "ProblemDetails"]
