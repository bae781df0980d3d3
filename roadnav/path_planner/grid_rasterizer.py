#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Grid rasterizer: road regions -> set of integer road cells.

Pure function of the region snapshot. Overlapping regions collapse to one
node per coordinate; malformed regions are skipped.
"""

import math
from typing import Iterable, Optional, Tuple

import numpy as np
from loguru import logger

from roadnav.path_planner.map_model import Region, RoadGraph


def region_cell_range(region: Region) -> Optional[Tuple[int, int, int, int]]:
    """
    Integer cell range covered by a region's bounding box

    Returns:
        (x0, x1, z0, z1) inclusive, or None if the region is malformed or
        its box contains no integer cell
    """
    bounds = region.Bounds()
    if bounds is None:
        return None
    min_x, max_x, min_z, max_z = bounds
    x0, x1 = math.ceil(min_x), math.floor(max_x)
    z0, z1 = math.ceil(min_z), math.floor(max_z)
    if x0 > x1 or z0 > z1:
        return None
    return (x0, x1, z0, z1)


def rasterize_roads(regions: Iterable[Region]) -> RoadGraph:
    """
    Rasterize road regions into a road graph

    Args:
        regions: road regions (non-Region entries are ignored)

    Returns:
        RoadGraph with one node per covered integer cell; raw_count holds the
        number of cells emitted before duplicates collapsed
    """
    graph = RoadGraph()
    total = 0

    for region in regions:
        if not isinstance(region, Region):
            continue
        cell_range = region_cell_range(region)
        if cell_range is None:
            continue
        x0, x1, z0, z1 = cell_range
        xs, zs = np.meshgrid(
            np.arange(x0, x1 + 1, dtype=np.int64),
            np.arange(z0, z1 + 1, dtype=np.int64),
            indexing="ij",
        )
        graph.Update(xs.ravel().tolist(), zs.ravel().tolist())
        total += xs.size

    graph.raw_count = total
    logger.debug(f"Road nodes: {total} (unique {len(graph)})")
    return graph
