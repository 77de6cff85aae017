import datetime

from aws_cdk import Duration
from aws_cdk import aws_dynamodb as dynamodb
from aws_cdk import aws_lambda as _lambda
from constructs import Construct


class Functions(Construct):
    """Lambda 関数を管理する Construct"""

    def __init__(
        self,
        scope: Construct,
        id: str,
        table: dynamodb.Table,
        common_layer: _lambda.LayerVersion,
        service_name: str,
        metrics_namespace: str,
    ) -> None:
        super().__init__(scope, id)

        self.bookings_api = _lambda.Function(
            self,
            "BookingsApiLambda",
            runtime=_lambda.Runtime.PYTHON_3_13,
            handler="bookings_api.booking.handlers.api.lambda_handler",
            code=_lambda.Code.from_asset("src"),
            layers=[common_layer],
            timeout=Duration.seconds(10),
            tracing=_lambda.Tracing.ACTIVE,
            environment={
                "TABLE_NAME": table.table_name,
                "POWERTOOLS_SERVICE_NAME": service_name,
                "POWERTOOLS_METRICS_NAMESPACE": metrics_namespace,
                "POWERTOOLS_LOG_LEVEL": "INFO",
                "DEPLOY_TIME": datetime.datetime.now(datetime.timezone.utc).isoformat(),
            },
        )

        table.grant_read_write_data(self.bookings_api)
