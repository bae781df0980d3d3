import pytest

from roadnav.nav_runtime.heading_tracker import HeadingTracker


def test_starts_unknown():
    tracker = HeadingTracker()

    assert tracker.facing == "Unknown"
    assert tracker.Update((0, 64, 0)) == "Unknown"


@pytest.mark.parametrize("move, facing", [
    ((3, 64, 1), "East"),
    ((-3, 64, 1), "West"),
    ((1, 64, 3), "South"),
    ((1, 64, -3), "North"),
    ((2, 64, 2), "South"),
    ((-2, 64, -2), "North"),
])
def test_dominant_axis(move, facing):
    tracker = HeadingTracker()
    tracker.Update((0, 64, 0))

    assert tracker.Update(move) == facing


def test_standing_still_keeps_facing():
    tracker = HeadingTracker()
    tracker.Update((0, 64, 0))
    tracker.Update((5, 64, 0))

    assert tracker.Update((5, 64, 0)) == "East"


def test_reset():
    tracker = HeadingTracker()
    tracker.Update((0, 64, 0))
    tracker.Update((0, 64, 5))

    tracker.Reset()

    assert tracker.facing == "Unknown"
    assert tracker.Update((0, 64, 9)) == "Unknown"
