#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Region store: current snapshot of named road and building regions.

Both collections are replaced wholesale on every update, never patched.
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from loguru import logger

from roadnav.path_planner.map_model import Region


RegionSource = Union[Mapping[str, Any], Iterable[Region], None]

PAYLOAD_ROADS_KEY = "ROADS"
PAYLOAD_BUILDINGS_KEY = "BUILDINGS"


def _collect(source: RegionSource, kind: str) -> Dict[str, Region]:
    regions: Dict[str, Region] = {}
    if source is None:
        return regions
    if isinstance(source, Mapping):
        items = source.items()
    else:
        items = ((getattr(r, "name", str(i)), r) for i, r in enumerate(source))

    skipped = 0
    for name, raw in items:
        region = Region.FromRaw(str(name), raw)
        if region is None:
            skipped += 1
            continue
        regions[region.name] = region
    if skipped:
        logger.debug(f"Skipped {skipped} non-region {kind} entries")
    return regions


class RegionStore:
    """Holds the road and building regions received from the region server"""

    def __init__(self):
        self.roads_: Dict[str, Region] = {}
        self.buildings_: Dict[str, Region] = {}
        self.revision_: int = 0

    @property
    def revision(self) -> int:
        """Incremented on every update; used to key cached road graphs"""
        return self.revision_

    def SetRegions(self, roads: RegionSource, buildings: RegionSource) -> None:
        """
        Replace both collections

        Args:
            roads: mapping name -> Region or raw corner list, or iterable of Region
            buildings: same shape as roads
        """
        self.roads_ = _collect(roads, "road")
        self.buildings_ = _collect(buildings, "building")
        self.revision_ += 1
        logger.info(f"Region data updated: roads={len(self.roads_)}, buildings={len(self.buildings_)}")

    def LoadPayload(self, message: Any) -> bool:
        """
        Apply a region server message of the form {"ROADS": {...}, "BUILDINGS": {...}}

        Returns:
            True if the message was applied, False if it was ignored
        """
        if not isinstance(message, Mapping):
            logger.debug(f"Ignoring region message of type {type(message).__name__}")
            return False
        roads = message.get(PAYLOAD_ROADS_KEY)
        buildings = message.get(PAYLOAD_BUILDINGS_KEY)
        if roads is None or buildings is None:
            logger.debug("Ignoring region message without ROADS and BUILDINGS")
            return False
        self.SetRegions(roads, buildings)
        return True

    def Roads(self) -> List[Region]:
        return list(self.roads_.values())

    def Buildings(self) -> List[Region]:
        return list(self.buildings_.values())

    def RoadCount(self) -> int:
        return len(self.roads_)

    def BuildingCount(self) -> int:
        return len(self.buildings_)

    def GetBuilding(self, name: str) -> Optional[Region]:
        return self.buildings_.get(name)

    def BuildingNames(self) -> List[str]:
        return sorted(self.buildings_)

    def GetCurrentArea(self, x: float, z: float) -> Optional[str]:
        """Name of the first road region containing (x, z)"""
        for name, region in self.roads_.items():
            if region.Contains(x, z):
                return name
        return None

    def GetBuildingAt(self, x: float, z: float) -> Optional[str]:
        for name, region in self.buildings_.items():
            if region.Contains(x, z):
                return name
        return None
