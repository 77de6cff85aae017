from aws_cdk import CfnOutput, Stack
from constructs import Construct

from infra.constructs import (
    Api,
    Database,
    Deployment,
    Functions,
    Layers,
)

SERVICE_NAME = "bookings-service"
METRICS_NAMESPACE = "BookingsApi"


class BookingsApiStack(Stack):
    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        database = Database(self, "Database")
        layers = Layers(self, "Layers")

        fns = Functions(
            self,
            "Functions",
            table=database.table,
            common_layer=layers.common_layer,
            service_name=SERVICE_NAME,
            metrics_namespace=METRICS_NAMESPACE,
        )

        deployment = Deployment(
            self,
            "Deployment",
            bookings_api=fns.bookings_api,
            service_name=SERVICE_NAME,
            metrics_namespace=METRICS_NAMESPACE,
        )

        api = Api(
            self,
            "Api",
            bookings_api=deployment.bookings_api_alias,
        )

        CfnOutput(self, "ApiUrl", value=api.rest_api.url)
        CfnOutput(self, "TableName", value=database.table.table_name)
