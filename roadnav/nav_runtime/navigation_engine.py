#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
NavigationEngine - owns the region snapshot and the path state.

Key design:
- One engine instance per agent; no module-level state, so independent
  engines can coexist (e.g. in tests)
- Single-threaded: the caller's event loop drives `Update` once per
  position sample and reads `session` / `GetStatus` for rendering
- Expected failures come back as PlanResult values, never as exceptions
"""

from typing import Any, Dict, List, Optional, Tuple

from loguru import logger

from roadnav.config.models import EngineConfig
from roadnav.nav_runtime.heading_tracker import HeadingTracker
from roadnav.nav_runtime.navigation_session import NavigationSession
from roadnav.nav_runtime.staleness import should_recompute
from roadnav.path_planner.map_model import AgentPosition, PlanResult, Region
from roadnav.path_planner.path_planner_core import PathPlanningCore
from roadnav.path_planner.region_store import RegionSource, RegionStore


def _as_position(position) -> AgentPosition:
    if isinstance(position, AgentPosition):
        return position
    if len(position) == 2:
        return AgentPosition(float(position[0]), 0.0, float(position[1]))
    return AgentPosition(float(position[0]), float(position[1]), float(position[2]))


class NavigationEngine:
    """Pathfinding engine with per-axis staleness policy.

    Lifecycle:
        SetRegions/LoadPayload -> SelectDestination -> Update(pos) per tick
        ClearDestination / SelectDestination reset the path immediately
    """

    def __init__(self, config: Optional[EngineConfig] = None):
        self.cfg_ = config if config is not None else EngineConfig()

        self.regions_ = RegionStore()
        self.session_ = NavigationSession()
        self.heading_ = HeadingTracker()
        self.core_ = PathPlanningCore(
            max_expansions=self.cfg_.path_planning.max_expansions,
            cache_road_graph=self.cfg_.path_planning.cache_road_graph,
        )

        self.threshold_ = self.cfg_.staleness.recompute_threshold
        self.invalidate_on_update_ = self.cfg_.regions.invalidate_path_on_update

    @property
    def config(self) -> EngineConfig:
        return self.cfg_

    @property
    def session(self) -> NavigationSession:
        return self.session_

    @property
    def regions(self) -> RegionStore:
        return self.regions_

    # =========================================================================
    # Region data
    # =========================================================================

    def SetRegions(self, roads: RegionSource, buildings: RegionSource) -> None:
        """Replace the region snapshot wholesale."""
        self.regions_.SetRegions(roads, buildings)
        self._onRegionsChanged()

    def LoadPayload(self, message: Any) -> bool:
        """Apply a region server message; returns False if it was ignored."""
        if not self.regions_.LoadPayload(message):
            return False
        self._onRegionsChanged()
        return True

    def _onRegionsChanged(self) -> None:
        self.core_.InvalidateCache()
        if self.invalidate_on_update_ and self.session_.is_current_:
            logger.info("Region data changed, dropping current path")
            self.session_.reset()

    def GetBuilding(self, name: str) -> Optional[Region]:
        return self.regions_.GetBuilding(name)

    def ListBuildings(self) -> List[str]:
        return self.regions_.BuildingNames()

    def GetCurrentArea(self, position) -> str:
        pos = _as_position(position)
        area = self.regions_.GetCurrentArea(pos.x, pos.z)
        return area if area is not None else self.cfg_.regions.unknown_area_label

    # =========================================================================
    # Destination
    # =========================================================================

    def SelectDestination(self, name: str) -> bool:
        """
        Select a building by name as the destination.

        Returns:
            True if the building exists; an unknown name leaves the state untouched.
        """
        region = self.regions_.GetBuilding(name)
        if region is None:
            logger.warning(f"Unknown building: {name}")
            return False
        self.SelectDestinationRegion(region)
        return True

    def SelectDestinationRegion(self, region: Optional[Region]) -> None:
        if region is None:
            self.ClearDestination()
            return
        name = region.name if isinstance(region, Region) else None
        self.session_.selectDestination(name, region)
        logger.info(f"Building selected: {name}")

    def ClearDestination(self) -> None:
        self.session_.resetFull()
        logger.info("Path cleared!")

    # =========================================================================
    # Planning
    # =========================================================================

    def ComputePath(self, position, destination: Optional[Region]) -> PlanResult:
        """Plan from position to destination on the current roads; does not touch the session."""
        pos = _as_position(position)
        return self.core_.ComputePath(
            pos,
            destination,
            self.regions_.Roads(),
            cache_key=self.regions_.revision,
        )

    def ShouldRecompute(self, position, session: Optional[NavigationSession] = None) -> bool:
        pos = _as_position(position)
        return should_recompute(pos, session if session is not None else self.session_, self.threshold_)

    def Update(self, position) -> Optional[PlanResult]:
        """
        One movement tick.

        Args:
            position: agent (x, y, z)

        Returns:
            PlanResult if a computation ran this tick, else None
        """
        pos = _as_position(position)
        if self.cfg_.runtime.floor_coordinates:
            pos = pos.Floored()

        self.heading_.Update(pos)

        if not self.ShouldRecompute(pos):
            return None

        result = self.ComputePath(pos, self.session_.destination_)
        self.session_.applyResult(result, (pos.x, pos.z))
        return result

    # =========================================================================
    # Status
    # =========================================================================

    def GetStatus(self, position=None) -> Dict[str, Any]:
        """Status panel data for the UI layer."""
        session = self.session_
        last = session.last_result_
        status: Dict[str, Any] = {
            "facing": self.heading_.facing,
            "roads": self.regions_.RoadCount(),
            "buildings": self.regions_.BuildingCount(),
            "target": session.destination_name_,
            "path_nodes": len(session.path_) if session.is_current_ else 0,
            "is_current": session.is_current_,
            "failure": last.reason.value if last is not None and not last.ok else None,
            "planner": self.core_.GetStats(),
        }
        if position is not None:
            pos = _as_position(position)
            status["position"] = (pos.x, pos.y, pos.z)
            status["area"] = self.GetCurrentArea(pos)
        return status

    def GetPath(self) -> List[Tuple[int, int]]:
        return list(self.session_.path_) if self.session_.is_current_ else []
