"""Flask integration for operation result rendering."""

from .extension import HANDLE_MISUSE_KEY, OperationResults
from .views import returns_operation_result

__all__ = ["HANDLE_MISUSE_KEY", "OperationResults", "returns_operation_result"]
