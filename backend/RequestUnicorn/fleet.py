"""backend.RequestUnicorn.fleet

The fixed fleet of unicorns a ride can be assigned to.

The fleet is built once at import time and never mutated, so it is safe to
share across concurrent invocations of the same Lambda container.
"""

from collections import namedtuple
import logging

from backend.RequestUnicorn.log import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)

Unicorn = namedtuple("Unicorn", ["name", "color", "gender"])

FLEET = (
    Unicorn(name="Angel", color="White", gender="Female"),
    Unicorn(name="Gil", color="White", gender="Male"),
    Unicorn(name="Rocinante", color="Yellow", gender="Female"),
)


def find_unicorn(pickup_location, rng):
    """Pick a unicorn uniformly at random from the fleet.

    The pickup location is only logged; it does not influence the choice.
    """
    logger.debug("Finding unicorn for %s, %s", pickup_location.latitude, pickup_location.longitude)
    return FLEET[int(rng.random() * len(FLEET))]


def unicorn_to_dict(unicorn):
    """Wire representation used in both the response body and the stored item."""
    return {"Name": unicorn.name, "Color": unicorn.color, "Gender": unicorn.gender}
