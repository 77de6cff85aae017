from aws_cdk import aws_apigateway as apigw
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Api(Construct):
    """API Gateway Construct

    すべてのルートを同一の Lambda（Prod エイリアス）にプロキシ統合する。
    ルーティングの詳細は Lambda 内のルーターが担う。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        bookings_api: _lambda.IFunction,
    ) -> None:
        super().__init__(scope, id)

        self.rest_api = apigw.RestApi(
            self,
            "BookingsRestApi",
            rest_api_name="Bookings API",
            deploy_options=apigw.StageOptions(
                stage_name="prod",
                tracing_enabled=True,
                throttling_burst_limit=50,
                throttling_rate_limit=25,
            ),
        )

        integration = apigw.LambdaIntegration(bookings_api)

        # GET /health
        self.rest_api.root.add_resource("health").add_method("GET", integration)

        # GET /locations/{locationID}/resources/{resourceID}/bookings
        (
            self.rest_api.root.add_resource("locations")
            .add_resource("{locationID}")
            .add_resource("resources")
            .add_resource("{resourceID}")
            .add_resource("bookings")
            .add_method("GET", integration)
        )

        # GET, PUT /users/{userID}/bookings
        user_bookings = (
            self.rest_api.root.add_resource("users")
            .add_resource("{userID}")
            .add_resource("bookings")
        )
        user_bookings.add_method("GET", integration)
        user_bookings.add_method("PUT", integration)

        # GET, PUT, DELETE /users/{userID}/bookings/{bookingID}
        booking = user_bookings.add_resource("{bookingID}")
        for method in ("GET", "PUT", "DELETE"):
            booking.add_method(method, integration)
