"""Tests for logging middleware."""

import pytest
from fastapi import FastAPI, HTTPException
from fastapi.testclient import TestClient

from newsdesk.api.middleware.logging import REQUEST_ID_HEADER, LoggingMiddleware


@pytest.fixture
def app_with_logging_middleware():
    """Create FastAPI app with logging middleware."""
    app = FastAPI()
    app.add_middleware(LoggingMiddleware)

    @app.get("/test")
    async def test_endpoint():
        return {"status": "ok"}

    @app.get("/error")
    async def error_endpoint():
        raise HTTPException(status_code=500, detail="Test error")

    @app.get("/exception")
    async def exception_endpoint():
        raise ValueError("Unexpected error")

    return app


@pytest.fixture
def client(app_with_logging_middleware):
    return TestClient(app_with_logging_middleware)


@pytest.mark.unit
class TestLoggingMiddlewareRequestLogging:
    """Test request logging functionality."""

    def test_logs_request_start(self, client, caplog):
        """Should log when request starts."""
        with caplog.at_level("INFO"):
            response = client.get("/test")

        assert response.status_code == 200
        assert any("request_started" in r.message for r in caplog.records)

    def test_logs_method_path_and_query(self, client, caplog):
        """Should log method, path and query parameters."""
        with caplog.at_level("INFO"):
            client.get("/test?page=2&itemsPerPage=3")

        started = [r for r in caplog.records if "request_started" in r.message]
        assert len(started) == 1
        message = started[0].message
        assert "GET" in message
        assert "/test" in message
        assert "itemsPerPage" in message

    def test_logs_completion_with_status(self, client, caplog):
        """Should log completion with the status code."""
        with caplog.at_level("INFO"):
            client.get("/error")

        completed = [r for r in caplog.records if "request_completed" in r.message]
        assert len(completed) == 1
        assert completed[0].status_code == 500


@pytest.mark.unit
class TestLoggingMiddlewareHeaders:
    """Test headers added to responses."""

    def test_adds_process_time_header(self, client):
        response = client.get("/test")

        assert float(response.headers["X-Process-Time"]) >= 0

    def test_generates_request_id(self, client):
        response = client.get("/test")

        assert len(response.headers[REQUEST_ID_HEADER]) == 32

    def test_propagates_incoming_request_id(self, client, caplog):
        with caplog.at_level("INFO"):
            response = client.get("/test", headers={REQUEST_ID_HEADER: "abc-123"})

        assert response.headers[REQUEST_ID_HEADER] == "abc-123"
        assert all(
            r.request_id == "abc-123"
            for r in caplog.records
            if "request_" in r.message
        )


@pytest.mark.unit
class TestLoggingMiddlewareErrorLogging:
    """Test logging of unhandled exceptions."""

    def test_logs_and_reraises_exceptions(self, client, caplog):
        with caplog.at_level("INFO"):
            with pytest.raises(ValueError):
                client.get("/exception")

        failed = [r for r in caplog.records if "request_failed" in r.message]
        assert len(failed) == 1
        assert failed[0].levelname == "ERROR"
        assert failed[0].error_type == "ValueError"
