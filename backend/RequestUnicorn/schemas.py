"""backend.RequestUnicorn.schemas

Pydantic models validating the POST /ride body at the API boundary.
"""

from pydantic import BaseModel, ConfigDict, Field


class PickupLocation(BaseModel):
    """Where the rider wants to be picked up. Ranges are not checked."""
    model_config = ConfigDict(populate_by_name=True)

    latitude: float = Field(..., alias="Latitude")
    longitude: float = Field(..., alias="Longitude")


class RideRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    pickup_location: PickupLocation = Field(..., alias="PickupLocation")


def parse_ride_request(body) -> RideRequest:
    """Parse the raw JSON body string into a `RideRequest`.

    Raises `pydantic.ValidationError` for malformed JSON or missing fields.
    """
    return RideRequest.model_validate_json(body if body is not None else "{}")
