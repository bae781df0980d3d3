import pytest

from roadnav.config.models import EngineConfig
from roadnav.nav_runtime.navigation_engine import NavigationEngine
from roadnav.path_planner.map_model import AgentPosition, GridNode, NotFoundReason, Region


@pytest.fixture
def engine(town_payload):
    engine = NavigationEngine()
    assert engine.LoadPayload(town_payload)
    return engine


def test_update_without_destination_does_nothing(engine):
    assert engine.Update((0, 64, 0)) is None
    assert engine.GetPath() == []


def test_first_update_computes_path(engine):
    assert engine.SelectDestination("Bakery")

    result = engine.Update((0, 64, 0))

    assert result.ok
    assert result.path[0] == GridNode(0, 0)
    assert result.path[-1] == GridNode(11, 14)
    assert len(result.path) == 26
    assert engine.session.is_current_
    assert engine.GetPath() == result.path


def test_small_moves_keep_path_large_moves_recompute(engine):
    engine.SelectDestination("Bakery")
    first = engine.Update((0, 64, 0))

    assert engine.Update((3, 64, 0)) is None
    assert engine.Update((5, 64, 1)) is None
    assert engine.GetPath() == first.path

    second = engine.Update((6, 64, 0))
    assert second is not None and second.ok
    assert second.path[0] == GridNode(6, 0)
    assert len(second.path) == 20
    assert engine.session.last_position_ == (6, 0)


def test_position_is_floored(engine):
    engine.SelectDestination("Town Hall")

    result = engine.Update((0.9, 64.7, 0.2))

    assert result.path[0] == GridNode(0, 0)
    assert result.path[-1] == GridNode(4, 1)
    assert engine.session.last_position_ == (0, 0)


def test_unreachable_destination_retries_every_tick(engine):
    engine.SelectDestination("Island Hut")

    first = engine.Update((0, 64, 0))
    second = engine.Update((0, 64, 0))

    assert first.reason is NotFoundReason.UNREACHABLE
    assert second is not None and second.reason is NotFoundReason.UNREACHABLE
    assert engine.GetPath() == []
    assert not engine.session.is_current_
    assert engine.GetStatus()["failure"] == "unreachable"


def test_invalid_destination(engine):
    engine.SelectDestinationRegion(Region.FromRaw("Broken", [[0, 64, 0], [1, 64, 1]]))

    result = engine.Update((0, 64, 0))

    assert result.reason is NotFoundReason.INVALID_DESTINATION
    assert engine.GetPath() == []


def test_compute_path_with_no_destination(engine):
    assert engine.ComputePath((0, 64, 0), None).reason is NotFoundReason.INVALID_DESTINATION


def test_empty_road_graph(engine, town_payload):
    engine.SetRegions({}, town_payload["BUILDINGS"])
    engine.SelectDestination("Bakery")

    result = engine.Update((0, 64, 0))

    assert result.reason is NotFoundReason.EMPTY_ROAD_GRAPH


def test_malformed_roads_only_is_empty_graph(engine, town_payload):
    engine.SetRegions({"stub": [[0, 64, 0]], "junk": 42}, town_payload["BUILDINGS"])

    result = engine.ComputePath((0, 64, 0), engine.GetBuilding("Bakery"))

    assert result.reason is NotFoundReason.EMPTY_ROAD_GRAPH


def test_compute_path_is_idempotent(engine):
    destination = engine.GetBuilding("Bakery")

    first = engine.ComputePath((0, 64, 0), destination)
    second = engine.ComputePath((0, 64, 0), destination)

    assert first.path == second.path


def test_compute_path_does_not_touch_session(engine):
    engine.ComputePath((0, 64, 0), engine.GetBuilding("Bakery"))

    assert engine.GetPath() == []
    assert not engine.session.is_current_


def test_new_destination_resets_path(engine):
    engine.SelectDestination("Bakery")
    engine.Update((0, 64, 0))

    assert engine.SelectDestination("Town Hall")

    assert engine.GetPath() == []
    assert not engine.session.is_current_
    assert engine.session.last_position_ is None
    assert engine.ShouldRecompute((0, 64, 0))


def test_clear_destination(engine):
    engine.SelectDestination("Bakery")
    engine.Update((0, 64, 0))

    engine.ClearDestination()

    assert engine.GetPath() == []
    assert engine.session.destination_name_ is None
    assert engine.Update((50, 64, 50)) is None


def test_select_none_clears_destination(engine):
    engine.SelectDestination("Bakery")
    engine.Update((0, 64, 0))

    engine.SelectDestinationRegion(None)

    assert engine.GetPath() == []
    assert engine.session.destination_name_ is None
    assert engine.session.destination_ is None
    assert engine.Update((50, 64, 50)) is None


def test_unknown_building_keeps_state(engine):
    engine.SelectDestination("Bakery")
    path = engine.Update((0, 64, 0)).path

    assert not engine.SelectDestination("Castle")

    assert engine.session.destination_name_ == "Bakery"
    assert engine.GetPath() == path


def test_region_update_keeps_path_by_default(engine, town_payload):
    engine.SelectDestination("Bakery")
    engine.Update((0, 64, 0))

    engine.LoadPayload(town_payload)

    assert engine.session.is_current_
    assert engine.GetPath()


def test_region_update_can_drop_path(town_payload):
    config = EngineConfig(regions={"invalidate_path_on_update": True})
    engine = NavigationEngine(config)
    engine.LoadPayload(town_payload)
    engine.SelectDestination("Bakery")
    engine.Update((0, 64, 0))

    engine.LoadPayload(town_payload)

    assert engine.GetPath() == []
    assert engine.session.destination_name_ == "Bakery"
    assert engine.Update((0, 64, 0)).ok


def test_expansion_cap_from_config(town_payload):
    engine = NavigationEngine(EngineConfig(path_planning={"max_expansions": 3}))
    engine.LoadPayload(town_payload)
    engine.SelectDestination("Bakery")

    assert engine.Update((0, 64, 0)).reason is NotFoundReason.SEARCH_ABORTED


def test_custom_threshold_from_config(town_payload):
    engine = NavigationEngine(EngineConfig(staleness={"recompute_threshold": 1}))
    engine.LoadPayload(town_payload)
    engine.SelectDestination("Bakery")
    engine.Update((0, 64, 0))

    assert engine.Update((2, 64, 0)) is not None


def test_engines_are_independent(town_payload):
    a, b = NavigationEngine(), NavigationEngine()
    a.LoadPayload(town_payload)

    assert b.ListBuildings() == []
    assert a.ListBuildings() == ["Bakery", "Island Hut", "Town Hall"]


def test_bad_payload_is_ignored(engine):
    assert not engine.LoadPayload("hello")
    assert not engine.LoadPayload({"ROADS": {}})
    assert engine.regions.RoadCount() == 3


def test_current_area_and_status(engine):
    engine.SelectDestination("Town Hall")
    engine.Update(AgentPosition(10, 64, 0))
    engine.Update(AgentPosition(10, 64, 3))

    assert engine.GetCurrentArea((10, 64, 5)) == "Mill Lane"
    assert engine.GetCurrentArea((30, 64, 30)) == "Unknown"

    status = engine.GetStatus((10, 64, 3))
    assert status["area"] == "Mill Lane"
    assert status["facing"] == "South"
    assert status["roads"] == 3
    assert status["buildings"] == 3
    assert status["target"] == "Town Hall"
    assert status["path_nodes"] == len(engine.GetPath())
    assert status["failure"] is None
