# roadnav/path_planner/path_planner_core.py
from typing import Iterable, Optional, Tuple

from loguru import logger

from roadnav.path_planner.astar_planner import AStarPlanner
from roadnav.path_planner.grid_rasterizer import rasterize_roads
from roadnav.path_planner.map_model import NotFoundReason, PlanResult, Region, RoadGraph
from roadnav.path_planner.nearest_node import find_nearest_node


class PathPlanningCore:
    """Pure planner: road regions + agent position + destination -> PlanResult."""

    def __init__(self, max_expansions: Optional[int] = None, cache_road_graph: bool = False) -> None:
        self._planner = AStarPlanner(max_expansions=max_expansions)
        self._cache_road_graph = cache_road_graph
        self._cached_graph: Optional[RoadGraph] = None
        self._cached_key: Optional[int] = None

        # statistics
        self._plan_count: int = 0
        self._found_count: int = 0
        self._failure_counts = {reason: 0 for reason in NotFoundReason}
        self._total_nodes_explored: int = 0

    def BuildRoadGraph(self, roads: Iterable[Region], cache_key: Optional[int] = None) -> RoadGraph:
        """Rasterize roads, reusing the previous graph when caching is on and cache_key matches."""
        if self._cache_road_graph and cache_key is not None:
            if self._cached_graph is not None and self._cached_key == cache_key:
                return self._cached_graph
            self._cached_graph = rasterize_roads(roads)
            self._cached_key = cache_key
            return self._cached_graph
        return rasterize_roads(roads)

    def InvalidateCache(self) -> None:
        self._cached_graph = None
        self._cached_key = None

    def ComputePath(
        self,
        position: Tuple[float, ...],
        destination: Optional[Region],
        roads: Iterable[Region],
        cache_key: Optional[int] = None,
    ) -> PlanResult:
        """
        Plan from the agent position to the road node nearest the destination centroid.

        Args:
            position: agent (x, y, z); only x and z are used
            destination: building region to reach
            roads: current road regions
            cache_key: road snapshot revision, used only when graph caching is on

        Returns:
            PlanResult
        """
        result = self._computePath(position, destination, roads, cache_key)

        self._plan_count += 1
        self._total_nodes_explored += result.nodes_explored
        if result.ok:
            self._found_count += 1
        else:
            self._failure_counts[result.reason] += 1
        if self._plan_count % 10 == 0:
            logger.info(
                f"Planner stats (last {self._plan_count} requests): "
                f"found={self._found_count}, "
                + ", ".join(f"{r.value}={c}" for r, c in self._failure_counts.items() if c)
            )
        return result

    def _computePath(self, position, destination, roads, cache_key) -> PlanResult:
        centroid = destination.Centroid() if isinstance(destination, Region) else None
        if centroid is None:
            logger.warning("Invalid building data")
            return PlanResult.NotFound(NotFoundReason.INVALID_DESTINATION)

        logger.debug("Computing path...")
        graph = self.BuildRoadGraph(roads, cache_key)
        if graph.IsEmpty():
            logger.warning("No road nodes!")
            return PlanResult.NotFound(NotFoundReason.EMPTY_ROAD_GRAPH)

        x, z = position[0], position[-1]  # (x, y, z) or (x, z)
        start = find_nearest_node(x, z, graph)
        if start is None:
            logger.warning("No start node!")
            return PlanResult.NotFound(NotFoundReason.NO_START_NODE)

        goal = find_nearest_node(centroid[0], centroid[1], graph)
        if goal is None:
            logger.warning("No goal node!")
            return PlanResult.NotFound(NotFoundReason.NO_GOAL_NODE, start=start)

        logger.debug(f"Start: {start.x},{start.z} Goal: {goal.x},{goal.z}")

        result = self._planner.Search(graph, start, goal)
        if result.ok:
            logger.info(f"Path found! Length: {len(result.path)}")
        else:
            logger.warning(f"No path found! ({result.reason.value})")
        return result

    def GetStats(self) -> dict:
        return {
            "plan_count": self._plan_count,
            "found_count": self._found_count,
            "failures": {r.value: c for r, c in self._failure_counts.items()},
            "total_nodes_explored": self._total_nodes_explored,
        }


if __name__ == "__main__":
    # Quick self-check: two road strips joined by a connector
    roads = [
        Region("Main", ((0, 64, 0), (9, 64, 0), (9, 64, 1), (0, 64, 1))),
        Region("Side", ((4, 64, 1), (5, 64, 1), (5, 64, 9), (4, 64, 9))),
    ]
    target = Region("Hall", ((6, 64, 8), (9, 64, 8), (9, 64, 10), (6, 64, 10)))

    core = PathPlanningCore()
    plan_result = core.ComputePath((0, 64, 0), target, roads)

    print(f"ok: {plan_result.ok}")
    print(f"reason: {plan_result.reason}")
    print(f"path: {plan_result.path}")
