#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Heading tracker: cardinal facing derived from consecutive positions.

+X is East, +Z is South. The dominant axis of the last non-zero move wins;
an exact diagonal counts as North/South.
"""

from typing import Optional, Tuple


UNKNOWN_FACING = "Unknown"


class HeadingTracker:
    """Cardinal facing tracker"""

    def __init__(self):
        self.facing_: str = UNKNOWN_FACING
        self.last_: Optional[Tuple[float, float]] = None

    def Update(self, position: Tuple[float, ...]) -> str:
        """
        Update with a new position

        Args:
            position: agent (x, y, z) or (x, z)

        Returns:
            current facing: East/West/North/South, or Unknown before the first move
        """
        x, z = position[0], position[-1]
        if self.last_ is not None:
            dx = x - self.last_[0]
            dz = z - self.last_[1]
            if dx != 0 or dz != 0:
                if abs(dx) > abs(dz):
                    self.facing_ = "East" if dx > 0 else "West"
                else:
                    self.facing_ = "South" if dz > 0 else "North"
        self.last_ = (x, z)
        return self.facing_

    @property
    def facing(self) -> str:
        return self.facing_

    def Reset(self) -> None:
        self.facing_ = UNKNOWN_FACING
        self.last_ = None
