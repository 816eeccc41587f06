"""backend.RequestUnicorn.ride_id

Ride identifiers: 16 random bytes rendered as URL-safe base64 without padding.
"""

import base64
import secrets

RIDE_ID_BYTES = 16


def to_url_string(raw: bytes) -> str:
    return base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")


def generate_ride_id(token_bytes=secrets.token_bytes) -> str:
    """Return a fresh ride id.

    `token_bytes` is the randomness source; tests pass a deterministic one.
    No uniqueness check is made against storage.
    """
    return to_url_string(token_bytes(RIDE_ID_BYTES))
