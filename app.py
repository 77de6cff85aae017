#!/usr/bin/env python3

import aws_cdk as cdk

from bookings_api_stack import BookingsApiStack

app = cdk.App()
BookingsApiStack(
    app,
    "BookingsApiStack",
)

app.synth()
