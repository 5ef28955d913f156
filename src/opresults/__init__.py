"""Map operation results onto Flask responses."""

from .dtos import OperationResult, ProblemDetails
from .errors import InvalidOperationError, OperationResultError
from .extensions import (
    ResponseDescriptor,
    to_failure,
    to_response,
    to_response_descriptor,
)
from .version import get_project_version

__version__ = get_project_version()

__all__ = [
    "__version__",
    "InvalidOperationError",
    "OperationResult",
    "OperationResultError",
    "ProblemDetails",
    "ResponseDescriptor",
    "to_failure",
    "to_response",
    "to_response_descriptor",
]
