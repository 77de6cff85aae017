import os

# Powertools / boto3 の設定はモジュール import 前に必要
os.environ.setdefault("AWS_DEFAULT_REGION", "ap-northeast-1")
os.environ.setdefault("TABLE_NAME", "bookings-test")
os.environ.setdefault("POWERTOOLS_SERVICE_NAME", "bookings-service")
os.environ.setdefault("POWERTOOLS_METRICS_NAMESPACE", "BookingsApiTest")
os.environ.setdefault("POWERTOOLS_TRACE_DISABLED", "1")
