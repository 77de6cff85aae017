from aws_lambda_powertools import Logger, Metrics, Tracer
from aws_lambda_powertools.logging import correlation_paths
from aws_lambda_powertools.utilities.typing import LambdaContext

from bookings_api.booking.applications import BookingService
from bookings_api.booking.domain.factory import BookingFactory
from bookings_api.booking.handlers.middlewares import (
    BusinessMetricsMiddleware,
    TracingMiddleware,
)
from bookings_api.booking.handlers.routes import create_app
from bookings_api.booking.infrastructure.dynamodb_booking_repository import (
    DynamoDBBookingRepository,
)

logger = Logger()
tracer = Tracer()
metrics = Metrics()

# コールドスタート時に一度だけ組み立てる
repository = DynamoDBBookingRepository()
service = BookingService(repository=repository, factory=BookingFactory())
app = create_app(
    service=service,
    tracing=TracingMiddleware(tracer),
    business_metrics=BusinessMetricsMiddleware(metrics),
)


@logger.inject_lambda_context(correlation_id_path=correlation_paths.API_GATEWAY_REST)
@tracer.capture_lambda_handler
@metrics.log_metrics
def lambda_handler(event: dict, context: LambdaContext) -> dict:
    """予約 API Lambda Handler

    API Gateway (REST) のプロキシ統合イベントをルーターに渡す。
    """
    return app.resolve(event, context)
