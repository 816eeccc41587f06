"""backend.RequestUnicorn.ride_store

DynamoDB-backed storage for ride records.

Each ride is written with a single `put_item` keyed by `RideId`. There is no
read-modify-write and no retry; botocore errors propagate to the caller.
"""

import boto3

from backend.RequestUnicorn.config import aws_region, rides_table_name


class RideStore:
    """Thin wrapper around the rides table."""

    def __init__(self, table):
        self.table = table

    @classmethod
    def from_environment(cls):
        dynamodb = boto3.resource("dynamodb", region_name=aws_region())
        return cls(dynamodb.Table(rides_table_name()))

    def put_ride(self, item):
        """Write one ride record. Raises botocore `ClientError` on failure."""
        self.table.put_item(Item=item)
