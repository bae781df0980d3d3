#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
roadnav: shortest routes over rectangular road regions
"""

__version__ = "0.1.0"

from roadnav.path_planner import (
    AgentPosition,
    GridNode,
    NotFoundReason,
    PlanResult,
    Region,
    RoadGraph,
    RegionStore,
    AStarPlanner,
    PathPlanningCore,
    rasterize_roads,
    find_nearest_node,
)
from roadnav.nav_runtime import NavigationEngine, NavigationSession, should_recompute

__all__ = [
    'AgentPosition',
    'GridNode',
    'NotFoundReason',
    'PlanResult',
    'Region',
    'RoadGraph',
    'RegionStore',
    'AStarPlanner',
    'PathPlanningCore',
    'rasterize_roads',
    'find_nearest_node',
    'NavigationEngine',
    'NavigationSession',
    'should_recompute',
]
