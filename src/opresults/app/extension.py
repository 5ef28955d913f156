"""Flask extension wiring operation result rendering into an application."""

from __future__ import annotations

import logging
import os
from http import HTTPStatus
from typing import Any

from flask import Flask, Response

from opresults.dtos import ProblemDetails
from opresults.errors import InvalidOperationError
from opresults.extensions.operation_result import (
    DEFAULT_PROBLEM_TITLE,
    PROBLEM_MEDIA_TYPE,
    PROBLEM_MEDIA_TYPE_KEY,
    ResponseDescriptor,
)

logger = logging.getLogger(__name__)

HANDLE_MISUSE_KEY = "OPRESULTS_HANDLE_MISUSE"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str | None, *, env: str) -> bool | None:
    if value is None or not value.strip():
        return None
    normalised = value.strip().lower()
    if normalised in _TRUE_VALUES:
        return True
    if normalised in _FALSE_VALUES:
        return False
    logger.warning("Ignoring invalid value for %s: %s", env, value)
    return None


def _parse_media_type(value: str | None, *, env: str) -> str | None:
    if value is None or not value.strip():
        return None
    cleaned = value.strip()
    if "/" not in cleaned:
        logger.warning("Ignoring invalid value for %s: %s", env, value)
        return None
    return cleaned


def _misuse_response(error: InvalidOperationError) -> Response:
    logger.error("Operation result helper misused", exc_info=error)
    problem = ProblemDetails(
        title=DEFAULT_PROBLEM_TITLE,
        status=HTTPStatus.INTERNAL_SERVER_ERROR.value,
    )
    return ResponseDescriptor(status=problem.status, body=problem).to_response()


class OperationResults:
    """Configure problem rendering and misuse handling for a Flask app.

    Usable directly (``OperationResults(app)``) or through the application
    factory pattern (``ext = OperationResults(); ext.init_app(app)``).
    """

    def __init__(self, app: Flask | None = None) -> None:
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        """Seed configuration defaults and register error handlers on ``app``."""

        self._load_config(app.config)

        if app.config[HANDLE_MISUSE_KEY]:
            app.register_error_handler(InvalidOperationError, _misuse_response)

        app.extensions["opresults"] = self

    @staticmethod
    def _load_config(config: Any) -> None:
        if PROBLEM_MEDIA_TYPE_KEY not in config:
            media_type = _parse_media_type(
                os.getenv(PROBLEM_MEDIA_TYPE_KEY), env=PROBLEM_MEDIA_TYPE_KEY
            )
            config[PROBLEM_MEDIA_TYPE_KEY] = media_type or PROBLEM_MEDIA_TYPE

        if HANDLE_MISUSE_KEY not in config:
            handle_misuse = _parse_bool(
                os.getenv(HANDLE_MISUSE_KEY), env=HANDLE_MISUSE_KEY
            )
            config[HANDLE_MISUSE_KEY] = True if handle_misuse is None else handle_misuse


__all__ = ["HANDLE_MISUSE_KEY", "OperationResults"]
