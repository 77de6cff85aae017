from aws_cdk import Duration
from aws_cdk import aws_cloudwatch as cloudwatch
from aws_cdk import aws_codedeploy as codedeploy
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

ERROR_METRIC_NAME = "BookingsErrors"


class Deployment(Construct):
    """カナリアデプロイを管理する Construct

    Lambda のエラー率に加えて、アプリケーションが出力する
    BookingsErrors メトリクスでもロールバックを判定する。
    """

    def __init__(
        self,
        scope: Construct,
        id: str,
        bookings_api: _lambda.Function,
        service_name: str,
        metrics_namespace: str,
    ) -> None:
        super().__init__(scope, id)

        self.bookings_api_alias = _lambda.Alias(
            self,
            "BookingsApiAlias",
            alias_name="Prod",
            version=bookings_api.current_version,
        )

        error_rate_alarm = cloudwatch.Alarm(
            self,
            "BookingsApiErrorRateAlarm",
            metric=cloudwatch.MathExpression(
                expression="(errors / invocations) * 100",
                using_metrics={
                    "errors": bookings_api.metric_errors(statistic="Sum"),
                    "invocations": bookings_api.metric_invocations(statistic="Sum"),
                },
                label="BookingsApi Error Rate %",
                period=Duration.minutes(1),
            ),
            threshold=5,
            evaluation_periods=2,
            comparison_operator=cloudwatch.ComparisonOperator.GREATER_THAN_OR_EQUAL_TO_THRESHOLD,
            treat_missing_data=cloudwatch.TreatMissingData.NOT_BREACHING,
        )

        # Powertools Metrics は service ディメンションを付与する
        business_error_alarm = cloudwatch.Alarm(
            self,
            "BookingsErrorsAlarm",
            metric=cloudwatch.Metric(
                namespace=metrics_namespace,
                metric_name=ERROR_METRIC_NAME,
                dimensions_map={"service": service_name},
                statistic="Sum",
                period=Duration.minutes(1),
            ),
            threshold=10,
            evaluation_periods=2,
            comparison_operator=cloudwatch.ComparisonOperator.GREATER_THAN_OR_EQUAL_TO_THRESHOLD,
            treat_missing_data=cloudwatch.TreatMissingData.NOT_BREACHING,
        )

        codedeploy.LambdaDeploymentGroup(
            self,
            "BookingsApiDeploymentGroup",
            alias=self.bookings_api_alias,
            deployment_config=codedeploy.LambdaDeploymentConfig.CANARY_10_PERCENT_5_MINUTES,
            alarms=[error_rate_alarm, business_error_alarm],
        )
