from aws_lambda_powertools import Metrics, Tracer
from aws_lambda_powertools.event_handler import APIGatewayRestResolver, Response
from aws_lambda_powertools.event_handler.middlewares import (
    BaseMiddlewareHandler,
    NextMiddleware,
)
from aws_lambda_powertools.metrics import MetricUnit

PROCESSED_METRIC = "ProcessedBookings"
ERROR_METRIC = "BookingsErrors"


class TracingMiddleware(BaseMiddlewareHandler):
    """ルート呼び出しを X-Ray のアノテーションとして記録する"""

    def __init__(self, tracer: Tracer) -> None:
        super().__init__()
        self._tracer = tracer

    def handler(
        self, app: APIGatewayRestResolver, next_middleware: NextMiddleware
    ) -> Response:
        event = app.current_event
        self._tracer.put_annotation(key="method", value=event.http_method)
        self._tracer.put_annotation(
            key="route", value=event.get("resource") or event.path
        )
        self._tracer.put_metadata(
            key="requestId",
            value=event.headers.get("requestId", ""),
        )
        return next_middleware(app)


class BusinessMetricsMiddleware(BaseMiddlewareHandler):
    """予約ルートの処理件数とエラー件数を EMF メトリクスとして出力する

    - 処理開始時: ProcessedBookings を 1 加算
    - ルートが例外を送出した場合: BookingsErrors を 1 加算して再送出
    """

    def __init__(self, metrics: Metrics) -> None:
        super().__init__()
        self._metrics = metrics

    def handler(
        self, app: APIGatewayRestResolver, next_middleware: NextMiddleware
    ) -> Response:
        event = app.current_event
        self._metrics.add_metric(name=PROCESSED_METRIC, unit=MetricUnit.Count, value=1)
        self._metrics.add_metadata(
            key="requestId",
            value=event.headers.get("requestId", ""),
        )
        self._metrics.add_metadata(key="method", value=event.http_method)
        self._metrics.add_metadata(key="routeKey", value=event.path)

        try:
            return next_middleware(app)
        except Exception:
            self._metrics.add_metric(name=ERROR_METRIC, unit=MetricUnit.Count, value=1)
            raise
