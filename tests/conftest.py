"""Shared fixtures for the roadnav test suite."""

import pytest

from roadnav.path_planner.map_model import Region


def rect_corners(x0, z0, x1, z1, y=64):
    """Four corners of an axis-aligned rectangle, in the order the region server sends them."""
    return [[x0, y, z0], [x1, y, z0], [x1, y, z1], [x0, y, z1]]


@pytest.fixture
def make_region():
    def _make(name, x0, z0, x1, z1):
        return Region.FromRaw(name, rect_corners(x0, z0, x1, z1))
    return _make


@pytest.fixture
def town_payload():
    """Two connected road strips, one isolated road and three buildings."""
    return {
        "ROADS": {
            "Main Street": rect_corners(0, 0, 20, 1),
            "Mill Lane": rect_corners(10, 1, 11, 15),
            "Island Road": rect_corners(40, 40, 45, 41),
        },
        "BUILDINGS": {
            "Town Hall": rect_corners(2, 3, 6, 7),
            "Bakery": rect_corners(12, 12, 16, 16),
            "Island Hut": rect_corners(42, 43, 44, 45),
        },
    }
