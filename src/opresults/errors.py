"""Exception hierarchy for operation result helpers."""

from __future__ import annotations


class OperationResultError(Exception):
    """Base class for errors raised by ``opresults``."""


class InvalidOperationError(OperationResultError, RuntimeError):
    """Raised when a helper is called on an outcome it does not support."""


__all__ = ["OperationResultError", "InvalidOperationError"]
