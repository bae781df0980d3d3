#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Road graph construction and path search.
"""

from roadnav.path_planner.map_model import (
    AgentPosition,
    GridNode,
    NotFoundReason,
    PlanResult,
    Region,
    RoadGraph,
)
from roadnav.path_planner.region_store import RegionStore
from roadnav.path_planner.grid_rasterizer import rasterize_roads
from roadnav.path_planner.nearest_node import find_nearest_node
from roadnav.path_planner.astar_planner import AStarPlanner
from roadnav.path_planner.path_planner_core import PathPlanningCore

__all__ = [
    'AgentPosition',
    'GridNode',
    'NotFoundReason',
    'PlanResult',
    'Region',
    'RoadGraph',
    'RegionStore',
    'rasterize_roads',
    'find_nearest_node',
    'AStarPlanner',
    'PathPlanningCore',
]
