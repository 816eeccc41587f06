"""backend.RequestUnicorn.config

Environment-driven settings for the RequestUnicorn Lambda.
"""

import os

DEFAULT_TABLE = "Rides"
DEFAULT_REGION = "us-east-2"


def rides_table_name():
    return os.environ.get("RIDES_TABLE") or DEFAULT_TABLE


def aws_region():
    return os.environ.get("AWS_REGION") or os.environ.get("AWS_DEFAULT_REGION") or DEFAULT_REGION


def log_level():
    # 0 = silent, 1 = INFO, 2 = DEBUG
    return os.environ.get("LOG_LEVEL", "1")
