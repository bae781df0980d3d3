#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Data model shared by the rasterizer, locator and planner.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple

import numpy as np
from loguru import logger


Corner = Tuple[float, float, float]  # (x, y, z)
BoundingBox = Tuple[float, float, float, float]  # (min_x, max_x, min_z, max_z)


class GridNode(NamedTuple):
    """Integer road cell (x, z)"""
    x: int
    z: int


class AgentPosition(NamedTuple):
    """Agent position in world coordinates"""
    x: float
    y: float
    z: float

    def Floored(self) -> "AgentPosition":
        return AgentPosition(math.floor(self.x), math.floor(self.y), math.floor(self.z))


def _parse_corner(raw: Any) -> Optional[Corner]:
    if not isinstance(raw, (list, tuple)) or len(raw) < 3:
        return None
    try:
        corner = (float(raw[0]), float(raw[1]), float(raw[2]))
    except (TypeError, ValueError):
        return None
    if not all(math.isfinite(v) for v in corner):
        return None
    return corner


@dataclass(frozen=True)
class Region:
    """
    Named axis-aligned rectangle given by its corners.

    Only the first four corners are read and only X and Z matter; the
    corners may come in any order. A region with fewer than four valid
    corners is malformed: it has no bounds and contains nothing.
    """
    name: str
    corners: Tuple[Optional[Corner], ...]

    @classmethod
    def FromRaw(cls, name: str, raw: Any) -> Optional["Region"]:
        """
        Build a region from a payload entry (a list of [x, y, z] corners)

        Args:
            name: region name
            raw: payload value

        Returns:
            Region, or None if the entry is not a corner list
        """
        if isinstance(raw, Region):
            return raw
        if not isinstance(raw, (list, tuple)):
            logger.debug(f"Skipping region {name!r}: entry is {type(raw).__name__}, not a corner list")
            return None
        return cls(name=str(name), corners=tuple(_parse_corner(c) for c in raw))

    def Bounds(self) -> Optional[BoundingBox]:
        """(min_x, max_x, min_z, max_z) of the first four corners, None if malformed"""
        if len(self.corners) < 4:
            return None
        first_four = self.corners[:4]
        if any(c is None for c in first_four):
            return None
        pts = np.asarray(first_four, dtype=np.float64)
        min_x, min_z = pts[:, 0].min(), pts[:, 2].min()
        max_x, max_z = pts[:, 0].max(), pts[:, 2].max()
        return (float(min_x), float(max_x), float(min_z), float(max_z))

    def Contains(self, x: float, z: float) -> bool:
        bounds = self.Bounds()
        if bounds is None:
            return False
        min_x, max_x, min_z, max_z = bounds
        return min_x <= x <= max_x and min_z <= z <= max_z

    def Centroid(self) -> Optional[Tuple[float, float]]:
        """Midpoint of the bounding box on each axis"""
        bounds = self.Bounds()
        if bounds is None:
            return None
        min_x, max_x, min_z, max_z = bounds
        return ((min_x + max_x) / 2, (min_z + max_z) / 2)


class RoadGraph:
    """
    Set of road cells with implicit 4-connectivity.

    Nodes keep the order in which they were first added; adding a node
    that already exists is a no-op.
    """

    # +x, -x, +z, -z
    OFFSETS = ((1, 0), (-1, 0), (0, 1), (0, -1))

    def __init__(self, nodes: Iterable[Tuple[int, int]] = (), raw_count: Optional[int] = None):
        self._nodes: Dict[GridNode, None] = {}
        self._array: Optional[np.ndarray] = None
        added = 0
        for x, z in nodes:
            self._nodes[GridNode(int(x), int(z))] = None
            added += 1
        self.raw_count = added if raw_count is None else raw_count

    def Update(self, xs: Sequence[int], zs: Sequence[int]) -> None:
        for x, z in zip(xs, zs):
            self._nodes[GridNode(int(x), int(z))] = None
        self._array = None

    def Neighbors(self, node: Tuple[int, int]) -> Iterator[GridNode]:
        x, z = node
        for dx, dz in self.OFFSETS:
            neighbor = GridNode(x + dx, z + dz)
            if neighbor in self._nodes:
                yield neighbor

    def IsEmpty(self) -> bool:
        return not self._nodes

    def AsArray(self) -> np.ndarray:
        """(N, 2) int array of node coordinates in insertion order"""
        if self._array is None:
            if self._nodes:
                self._array = np.array(list(self._nodes), dtype=np.int64)
            else:
                self._array = np.empty((0, 2), dtype=np.int64)
        return self._array

    def __contains__(self, node: object) -> bool:
        return node in self._nodes

    def __iter__(self) -> Iterator[GridNode]:
        return iter(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"RoadGraph(nodes={len(self._nodes)}, raw_count={self.raw_count})"


class NotFoundReason(str, Enum):
    INVALID_DESTINATION = "invalid-destination"
    EMPTY_ROAD_GRAPH = "empty-road-graph"
    NO_START_NODE = "no-start-node"
    NO_GOAL_NODE = "no-goal-node"
    UNREACHABLE = "unreachable"
    SEARCH_ABORTED = "search-aborted"


@dataclass
class PlanResult:
    ok: bool
    path: List[GridNode] = field(default_factory=list)
    reason: Optional[NotFoundReason] = None
    start: Optional[GridNode] = None
    goal: Optional[GridNode] = None
    nodes_explored: int = 0

    @classmethod
    def Found(cls, path: List[GridNode], nodes_explored: int = 0) -> "PlanResult":
        return cls(
            ok=True,
            path=list(path),
            start=path[0] if path else None,
            goal=path[-1] if path else None,
            nodes_explored=nodes_explored,
        )

    @classmethod
    def NotFound(
        cls,
        reason: NotFoundReason,
        start: Optional[GridNode] = None,
        goal: Optional[GridNode] = None,
        nodes_explored: int = 0,
    ) -> "PlanResult":
        return cls(ok=False, path=[], reason=reason, start=start, goal=goal, nodes_explored=nodes_explored)
