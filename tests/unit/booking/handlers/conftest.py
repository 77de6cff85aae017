import json
from unittest.mock import MagicMock

import pytest

from bookings_api.booking.handlers.middlewares import (
    BusinessMetricsMiddleware,
    TracingMiddleware,
)
from bookings_api.booking.handlers.routes import create_app


@pytest.fixture
def api_event():
    """API Gateway (REST) プロキシ統合イベントを生成する Factory fixture"""

    def _factory(
        method: str,
        path: str,
        body: dict | str | None = None,
        headers: dict | None = None,
        resource: str | None = None,
    ) -> dict:
        if isinstance(body, dict):
            body = json.dumps(body)
        return {
            "resource": resource or path,
            "path": path,
            "httpMethod": method,
            "headers": headers if headers is not None else {"requestId": "req-123"},
            "multiValueHeaders": {},
            "queryStringParameters": None,
            "multiValueQueryStringParameters": None,
            "pathParameters": None,
            "stageVariables": None,
            "requestContext": {
                "requestId": "c6af9ac6-7b61-11e6-9a41-93e8deadbeef",
                "stage": "prod",
                "httpMethod": method,
                "path": f"/prod{path}",
                "resourcePath": resource or path,
            },
            "body": body,
            "isBase64Encoded": False,
        }

    return _factory


@pytest.fixture
def mock_tracer():
    return MagicMock()


@pytest.fixture
def mock_metrics():
    return MagicMock()


@pytest.fixture
def app(service, mock_tracer, mock_metrics):
    """インメモリストアに接続したルーター"""
    return create_app(
        service=service,
        tracing=TracingMiddleware(mock_tracer),
        business_metrics=BusinessMetricsMiddleware(mock_metrics),
    )


@pytest.fixture
def invoke(app, api_event):
    """ルーターを呼び出して API Gateway のレスポンスを返す"""

    def _invoke(method: str, path: str, body: dict | str | None = None, **kwargs):
        return app.resolve(api_event(method, path, body, **kwargs), MagicMock())

    return _invoke
