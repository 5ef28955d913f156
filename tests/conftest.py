"""Test configuration utilities and shared fixtures."""

import sys
from pathlib import Path

# Ensure the ``src`` directory is importable when tests are executed without an
# editable install.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

import pytest  # noqa: E402
from flask import Flask  # noqa: E402
from flask.testing import FlaskClient  # noqa: E402

from opresults import OperationResult, ProblemDetails, to_failure  # noqa: E402
from opresults.app import OperationResults, returns_operation_result  # noqa: E402


def build_app(**config: object) -> Flask:
    """Return a Flask app exposing sample routes backed by operation results."""

    application = Flask(__name__)
    application.config.update(TESTING=True, **config)
    OperationResults(application)

    @application.get("/items/<int:item_id>")
    @returns_operation_result
    def get_item(item_id: int) -> OperationResult[dict]:
        if item_id == 404:
            return OperationResult.from_problem(
                "Not Found", 404, detail=f"Item {item_id} does not exist"
            )
        return OperationResult.success({"id": item_id})

    @application.post("/items")
    @returns_operation_result
    def create_item() -> OperationResult[dict]:
        return OperationResult.success({"id": 7}, status_code=201)

    @application.delete("/items/<int:item_id>")
    @returns_operation_result
    def delete_item(item_id: int) -> OperationResult:
        return OperationResult.no_content()

    @application.get("/broken")
    @returns_operation_result
    def broken() -> OperationResult:
        return OperationResult.failure(status_code=503)

    @application.get("/forwarded")
    @returns_operation_result
    def forwarded() -> OperationResult[str]:
        lookup = OperationResult[dict].failure(
            ProblemDetails(title="Bad Request", status=400), status_code=400
        )
        return to_failure(lookup, str)

    @application.get("/misuse")
    @returns_operation_result
    def misuse() -> OperationResult[str]:
        return to_failure(OperationResult.success({"id": 1}), str)

    @application.get("/plain")
    @returns_operation_result
    def plain() -> tuple[dict[str, str], int]:
        return {"status": "ok"}, 200

    return application


@pytest.fixture()
def app() -> Flask:
    """Return a configured Flask application for integration tests."""

    return build_app()


@pytest.fixture()
def client(app: Flask) -> FlaskClient:
    """Provide a test client bound to the configured Flask app."""

    return app.test_client()


@pytest.fixture()
def make_app():
    """Return a factory building apps with custom configuration."""

    return build_app
