#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Nearest road node lookup by Manhattan distance.
"""

from typing import Optional

import numpy as np

from roadnav.path_planner.map_model import GridNode, RoadGraph


def find_nearest_node(x: float, z: float, graph: RoadGraph) -> Optional[GridNode]:
    """
    Road node closest to (x, z) by |dx| + |dz|

    Ties go to the node added to the graph first. Callers should not rely on
    which of several equidistant nodes is returned.

    Args:
        x: query X (real or integer)
        z: query Z (real or integer)
        graph: rasterized road graph

    Returns:
        nearest node, or None if the graph is empty
    """
    if graph.IsEmpty():
        return None
    coords = graph.AsArray()
    dist = np.abs(coords[:, 0] - x) + np.abs(coords[:, 1] - z)
    idx = int(np.argmin(dist))
    return GridNode(int(coords[idx, 0]), int(coords[idx, 1]))
