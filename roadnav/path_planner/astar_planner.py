#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Path search module: A* over the 4-connected road graph
"""

# Standard library
from typing import Dict, List, Optional, Tuple
import heapq
import itertools

# Third party
from loguru import logger

from roadnav.path_planner.map_model import GridNode, NotFoundReason, PlanResult, RoadGraph


class AStarPlanner():
    """
    A* planner on a road graph

    Every edge costs 1 and the heuristic is Manhattan distance, so the
    returned path has the minimum number of steps.

    The open set is a binary heap keyed by (f_score, insertion order):
    among equal f scores the entry pushed first is expanded first. This
    tie-break is deterministic but carries no meaning; equally short paths
    may differ between implementations.

    Example:
        ```python
        planner = AStarPlanner(max_expansions=50_000)
        result = planner.Search(graph, start=GridNode(0, 0), goal=GridNode(3, 4))
        ```
    """

    def __init__(self, max_expansions: Optional[int] = None):
        """
        Initialize the planner

        Args:
            max_expansions: abort the search after expanding this many nodes,
                None for no limit

        Raises:
            ValueError: invalid argument
        """
        if max_expansions is not None and (
            isinstance(max_expansions, bool) or not isinstance(max_expansions, int) or max_expansions <= 0
        ):
            raise ValueError("max_expansions must be a positive integer or None")

        self.max_expansions_ = max_expansions

    def Search(self, graph: RoadGraph, start: GridNode, goal: GridNode) -> PlanResult:
        """
        Shortest path from start to goal

        Args:
            graph: road graph
            start: start node (must be in graph)
            goal: goal node (must be in graph)

        Returns:
            PlanResult.Found with the node sequence start..goal, or
            PlanResult.NotFound with UNREACHABLE / SEARCH_ABORTED
        """
        start = GridNode(*start)
        goal = GridNode(*goal)

        logger.debug(f"[A*] search start={start}, goal={goal}, graph_size={len(graph)}")

        if start not in graph or goal not in graph:
            logger.warning(f"[A*] start or goal is not a road node: start={start}, goal={goal}")
            return PlanResult.NotFound(NotFoundReason.UNREACHABLE, start=start, goal=goal)

        if start == goal:
            logger.debug("[A*] start equals goal, single node path")
            return PlanResult.Found([start], nodes_explored=1)

        counter = itertools.count()
        g_score: Dict[GridNode, int] = {start: 0}
        f_score: Dict[GridNode, int] = {start: self.Heuristic(start, goal)}
        came_from: Dict[GridNode, GridNode] = {}

        # (f_score, insertion order, node); open_index holds the g of the live entry
        open_heap: List[Tuple[int, int, GridNode]] = [(f_score[start], next(counter), start)]
        open_index: Dict[GridNode, int] = {start: 0}
        nodes_explored = 0

        while open_heap:
            f, _, current = heapq.heappop(open_heap)

            # Superseded entry
            if open_index.get(current) != g_score[current] or f != f_score[current]:
                continue
            del open_index[current]
            nodes_explored += 1

            if current == goal:
                path = self.ReconstructPath(came_from, current)
                logger.debug(f"[A*] path found: length={len(path)}, explored={nodes_explored}")
                return PlanResult.Found(path, nodes_explored=nodes_explored)

            if self.max_expansions_ is not None and nodes_explored >= self.max_expansions_:
                logger.warning(f"[A*] search aborted after {nodes_explored} expansions: start={start}, goal={goal}")
                return PlanResult.NotFound(
                    NotFoundReason.SEARCH_ABORTED, start=start, goal=goal, nodes_explored=nodes_explored
                )

            tentative_g = g_score[current] + 1
            for neighbor in graph.Neighbors(current):
                if tentative_g < g_score.get(neighbor, float("inf")):
                    came_from[neighbor] = current
                    g_score[neighbor] = tentative_g
                    f_score[neighbor] = tentative_g + self.Heuristic(neighbor, goal)
                    open_index[neighbor] = tentative_g
                    heapq.heappush(open_heap, (f_score[neighbor], next(counter), neighbor))

        logger.debug(f"[A*] open set exhausted: start={start}, goal={goal}, explored={nodes_explored}")
        return PlanResult.NotFound(NotFoundReason.UNREACHABLE, start=start, goal=goal, nodes_explored=nodes_explored)

    @staticmethod
    def ReconstructPath(came_from: Dict[GridNode, GridNode], current: GridNode) -> List[GridNode]:
        path = [current]
        while current in came_from:
            current = came_from[current]
            path.append(current)
        path.reverse()
        return path

    @staticmethod
    def Heuristic(a: Tuple[int, int], b: Tuple[int, int]) -> int:
        """
        Heuristic (Manhattan distance)

        Args:
            a: point A
            b: point B

        Returns:
            |ax - bx| + |az - bz|
        """
        return abs(a[0] - b[0]) + abs(a[1] - b[1])
