"""backend.RequestUnicorn.request_unicorn

Lambda that books a unicorn ride for an authenticated rider.
    Handles POST /ride

The caller is authenticated upstream by a Cognito authorizer on API Gateway;
this function only reads the resolved username from the request context. For
each authorized request it generates a ride id, picks a unicorn from the
fleet, writes one record to the rides table and returns 201 with the booking.

Exports:
- `handle(body, identity_claim, correlation_id, ...)`: the booking logic, with
  the store, random source, clock and byte source injectable for tests.
- `lambda_handler(event, context)`: API Gateway entry point.

Notes:
- A missing authorizer is reported as 500 "Authorization not configured",
  not 401. Callers already depend on that status, so it is kept as-is.
- Every failure (bad body, DynamoDB error) maps to the same 500 envelope
  `{"Error": ..., "Reference": <request id>}`. No retries.
"""

import datetime
from datetime import timezone
import json
import logging
import random
import secrets

from botocore.exceptions import ClientError

from backend.RequestUnicorn.fleet import find_unicorn, unicorn_to_dict
from backend.RequestUnicorn.log import LOGGER_NAME, setup_logging
from backend.RequestUnicorn.ride_id import generate_ride_id
from backend.RequestUnicorn.ride_store import RideStore
from backend.RequestUnicorn.schemas import parse_ride_request

logger = logging.getLogger(LOGGER_NAME)

ETA = "30 seconds"
AUTHORIZATION_NOT_CONFIGURED = "Authorization not configured"

CORS_HEADERS = {
    "Content-Type": "application/json",
    "Access-Control-Allow-Origin": "*",
}

_system_random = random.SystemRandom()


def utc_now():
    return datetime.datetime.now(timezone.utc)


def iso_timestamp(moment):
    """ISO-8601 in UTC with milliseconds and a trailing Z."""
    return moment.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def error_response(message, correlation_id):
    return {
        "statusCode": 500,
        "headers": dict(CORS_HEADERS),
        "body": json.dumps({"Error": message, "Reference": correlation_id}),
    }


def handle(body, identity_claim, correlation_id, store=None, rng=None, clock=utc_now,
           token_bytes=secrets.token_bytes):
    """Book a ride and return an API Gateway-compatible response.

    Args:
        body (str): raw JSON request body.
        identity_claim (str | None): resolved username, or None (or empty)
            when the authorizer did not run or attached no username.
        correlation_id (str): echoed in error envelopes only.
        store (RideStore): defaults to the table named by `RIDES_TABLE`.
        rng: object with a `random()` method used to pick the unicorn.
        clock: zero-argument callable returning an aware datetime.
        token_bytes: callable returning n random bytes for the ride id.

    Returns:
        dict: 201 with the booking, or 500 with the error envelope.
    """
    if not identity_claim:
        return error_response(AUTHORIZATION_NOT_CONFIGURED, correlation_id)

    try:
        ride_id = generate_ride_id(token_bytes)
        logger.info("Received event (%s): %s", ride_id, body)

        request = parse_ride_request(body)
        unicorn = find_unicorn(request.pickup_location, rng or _system_random)

        if store is None:
            store = RideStore.from_environment()

        store.put_ride({
            "RideId": ride_id,
            "User": identity_claim,
            "Unicorn": unicorn_to_dict(unicorn),
            "UnicornName": unicorn.name,
            "RequestTime": iso_timestamp(clock()),
        })
    except ClientError as e:
        # DynamoDB's own message, without botocore's "An error occurred (...)" prefix
        message = e.response.get("Error", {}).get("Message") or str(e)
        logger.error("Ride request failed (%s): %s", correlation_id, e)
        return error_response(message, correlation_id)
    except Exception as e:
        logger.error("Ride request failed (%s): %s", correlation_id, e)
        return error_response(str(e), correlation_id)

    return {
        "statusCode": 201,
        "headers": dict(CORS_HEADERS),
        "body": json.dumps({
            "RideId": ride_id,
            "Unicorn": unicorn_to_dict(unicorn),
            "Eta": ETA,
            "Rider": identity_claim,
        }),
    }


def read_event(event):
    """Return `(body, username)` from an API Gateway proxy event.

    The username is None when there is no authorizer, no claims, or no
    `cognito:username` claim.
    """
    event = event or {}
    request_context = event.get("requestContext") or {}
    authorizer = request_context.get("authorizer") or {}
    claims = authorizer.get("claims") or {}
    return event.get("body"), claims.get("cognito:username") or None


def lambda_handler(event, context):
    """API Gateway entry point.

    Reads the Cognito username from `requestContext.authorizer.claims` and the
    request id from the Lambda context, then delegates to `handle`.
    """
    setup_logging()

    correlation_id = getattr(context, "aws_request_id", None) or ""

    try:
        body, identity_claim = read_event(event)
    except Exception as e:
        logger.error("Malformed event (%s): %s", correlation_id, e)
        return error_response(str(e), correlation_id)

    return handle(body, identity_claim, correlation_id)
