from unittest.mock import call

from aws_lambda_powertools.metrics import MetricUnit

from bookings_api.booking.handlers.middlewares import ERROR_METRIC, PROCESSED_METRIC


class TestBusinessMetricsMiddleware:
    """BusinessMetricsMiddleware のテスト"""

    def test_records_processed_booking_with_request_properties(
        self, invoke, mock_metrics
    ):
        invoke("GET", "/users/u1/bookings", headers={"requestId": "req-42"})

        mock_metrics.add_metric.assert_called_once_with(
            name=PROCESSED_METRIC, unit=MetricUnit.Count, value=1
        )
        mock_metrics.add_metadata.assert_has_calls(
            [
                call(key="requestId", value="req-42"),
                call(key="method", value="GET"),
                call(key="routeKey", value="/users/u1/bookings"),
            ]
        )

    def test_records_error_when_route_fails(self, invoke, mock_metrics):
        response = invoke("GET", "/users/u1/bookings/missing")

        assert response["statusCode"] == 404
        assert mock_metrics.add_metric.call_args_list == [
            call(name=PROCESSED_METRIC, unit=MetricUnit.Count, value=1),
            call(name=ERROR_METRIC, unit=MetricUnit.Count, value=1),
        ]

    def test_missing_request_id_header(self, invoke, mock_metrics):
        invoke("GET", "/users/u1/bookings", headers={})

        mock_metrics.add_metadata.assert_any_call(key="requestId", value="")

    def test_reads_request_id_without_deprecation_warning(self, invoke, recwarn):
        """requestId ヘッダーの読み取りで非推奨警告を出さない"""
        invoke("GET", "/users/u1/bookings", headers={"requestId": "req-42"})

        assert not [
            w for w in recwarn if w.category.__name__ == "PowertoolsDeprecationWarning"
        ]


class TestTracingMiddleware:
    """TracingMiddleware のテスト"""

    def test_annotates_every_route(self, invoke, mock_tracer):
        invoke(
            "GET",
            "/users/u1/bookings",
            resource="/users/{userID}/bookings",
        )

        mock_tracer.put_annotation.assert_has_calls(
            [
                call(key="method", value="GET"),
                call(key="route", value="/users/{userID}/bookings"),
            ]
        )
        mock_tracer.put_metadata.assert_called_once_with(
            key="requestId", value="req-123"
        )

    def test_annotates_health(self, invoke, mock_tracer):
        invoke("GET", "/health")

        mock_tracer.put_annotation.assert_any_call(key="route", value="/health")
