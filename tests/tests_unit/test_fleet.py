"""Unit tests for the unicorn fleet and selection."""

import random
from collections import Counter

import pytest

from backend.RequestUnicorn.fleet import FLEET, Unicorn, find_unicorn, unicorn_to_dict
from backend.RequestUnicorn.schemas import PickupLocation


PICKUP = PickupLocation(latitude=47.6174755835663, longitude=-122.28837066650185)


class FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def test_fleet_is_the_three_known_unicorns():
    assert set(FLEET) == {
        Unicorn("Angel", "White", "Female"),
        Unicorn("Gil", "White", "Male"),
        Unicorn("Rocinante", "Yellow", "Female"),
    }
    assert isinstance(FLEET, tuple)


@pytest.mark.parametrize("value,expected", [
    (0.0, "Angel"),
    (0.34, "Gil"),
    (0.999999, "Rocinante"),
])
def test_index_is_floor_of_random_times_size(value, expected):
    assert find_unicorn(PICKUP, FixedRandom(value)).name == expected


def test_location_does_not_affect_choice():
    far_away = PickupLocation(latitude=-91.0, longitude=500.0)
    assert find_unicorn(PICKUP, FixedRandom(0.5)) == find_unicorn(far_away, FixedRandom(0.5))


def test_selection_is_roughly_uniform():
    rng = random.Random(461)
    draws = 3000
    counts = Counter(find_unicorn(PICKUP, rng).name for _ in range(draws))

    assert set(counts) == {"Angel", "Gil", "Rocinante"}
    for name, count in counts.items():
        # expected 1000 each; 150 is ~5.8 standard deviations
        assert abs(count - draws / 3) < 150, (name, count)


def test_unicorn_to_dict():
    assert unicorn_to_dict(FLEET[1]) == {"Name": "Gil", "Color": "White", "Gender": "Male"}
