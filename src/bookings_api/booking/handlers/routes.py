from http import HTTPStatus

from aws_lambda_powertools import Logger
from aws_lambda_powertools.event_handler import (
    APIGatewayRestResolver,
    Response,
    content_types,
)
from aws_lambda_powertools.event_handler.exceptions import NotFoundError

from bookings_api.booking.applications import BookingService
from bookings_api.booking.handlers.middlewares import (
    BusinessMetricsMiddleware,
    TracingMiddleware,
)
from bookings_api.booking.handlers.request_models import UpsertBookingRequest
from bookings_api.booking.handlers.response_models import to_response
from bookings_api.shared.domain import DomainException, ErrorKind

logger = Logger()

GENERIC_ERROR_MESSAGE = "Something broke!"

# NOT_FOUND 以外はすべて 500
_STATUS_BY_KIND: dict[ErrorKind, HTTPStatus] = {
    ErrorKind.NOT_FOUND: HTTPStatus.NOT_FOUND,
}


def status_for(ex: Exception) -> HTTPStatus:
    """例外をHTTPステータスに変換する"""
    if isinstance(ex, DomainException):
        return _STATUS_BY_KIND.get(ex.kind, HTTPStatus.INTERNAL_SERVER_ERROR)
    return HTTPStatus.INTERNAL_SERVER_ERROR


def create_app(
    service: BookingService,
    tracing: TracingMiddleware,
    business_metrics: BusinessMetricsMiddleware,
) -> APIGatewayRestResolver:
    """予約 API のルーターを構築する

    各ルートはサービスの操作をちょうど1回呼び出し、結果をレスポンスに変換する。
    ステータスへの変換は例外ハンドラでのみ行う。
    """
    app = APIGatewayRestResolver()
    app.use(middlewares=[tracing])
    booking_middlewares = [business_metrics]

    @app.get("/health")
    def health() -> Response:
        return Response(
            status_code=HTTPStatus.OK,
            content_type=content_types.TEXT_PLAIN,
            body="Ok",
        )

    @app.get(
        "/locations/<location_id>/resources/<resource_id>/bookings",
        middlewares=booking_middlewares,
    )
    def get_bookings_by_resource(location_id: str, resource_id: str) -> list[dict]:
        logger.info(
            "Listing bookings by resource",
            extra={"location_id": location_id, "resource_id": resource_id},
        )
        bookings = service.get_bookings_by_resource(resource_id)
        return [to_response(booking) for booking in bookings]

    @app.get("/users/<user_id>/bookings", middlewares=booking_middlewares)
    def get_bookings_by_user(user_id: str) -> list[dict]:
        logger.info("Listing bookings by user", extra={"user_id": user_id})
        bookings = service.get_bookings_by_user(user_id)
        return [to_response(booking) for booking in bookings]

    @app.get("/users/<user_id>/bookings/<booking_id>", middlewares=booking_middlewares)
    def get_booking(user_id: str, booking_id: str) -> dict:
        logger.info(
            "Fetching booking", extra={"user_id": user_id, "booking_id": booking_id}
        )
        booking = service.get_booking(booking_id)
        return to_response(booking)

    @app.put("/users/<user_id>/bookings", middlewares=booking_middlewares)
    @app.put("/users/<user_id>/bookings/<booking_id>", middlewares=booking_middlewares)
    def upsert_booking(user_id: str, booking_id: str | None = None) -> tuple:
        logger.info(
            "Received upsert booking request",
            extra={"user_id": user_id, "booking_id": booking_id},
        )
        payload = app.current_event.json_body if app.current_event.body else {}
        request = UpsertBookingRequest.model_validate(payload)

        booking = service.upsert_booking(
            booking_id=booking_id,
            user_id=user_id,
            resource_id=request.resource_id,
            start_time_epoch=request.start_time_epoch,
        )
        return to_response(booking), HTTPStatus.CREATED

    @app.delete(
        "/users/<user_id>/bookings/<booking_id>", middlewares=booking_middlewares
    )
    def delete_booking(user_id: str, booking_id: str) -> Response:
        logger.info(
            "Deleting booking", extra={"user_id": user_id, "booking_id": booking_id}
        )
        service.delete_booking(booking_id)
        return Response(
            status_code=HTTPStatus.OK,
            content_type=content_types.TEXT_PLAIN,
            body="",
        )

    @app.not_found
    def handle_route_not_found(ex: NotFoundError) -> Response:
        return Response(
            status_code=HTTPStatus.NOT_FOUND,
            content_type=content_types.TEXT_PLAIN,
            body="Not found",
        )

    @app.exception_handler(Exception)
    def handle_error(ex: Exception) -> Response:
        status = status_for(ex)
        if status == HTTPStatus.NOT_FOUND:
            logger.warning("Booking not found", extra={"reason": str(ex)})
            return Response(
                status_code=status,
                content_type=content_types.TEXT_PLAIN,
                body=str(ex),
            )

        logger.exception("Failed to process booking request")
        return Response(
            status_code=status,
            content_type=content_types.TEXT_PLAIN,
            body=GENERIC_ERROR_MESSAGE,
        )

    return app
