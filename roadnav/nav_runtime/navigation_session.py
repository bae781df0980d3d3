#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
NavigationSession: path state for the selected destination.

Holds the destination, the computed path and the bookkeeping the
staleness policy needs. Reset whenever the destination changes.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from roadnav.path_planner.map_model import GridNode, PlanResult, Region


@dataclass
class NavigationSession:
    """Per-destination path state.

    `is_current_` is True only after a successful computation; a failed
    search leaves the path empty and not current so the next tick retries.
    """

    destination_name_: Optional[str] = None
    destination_: Optional[Region] = None

    path_: List[GridNode] = field(default_factory=list)
    is_current_: bool = False
    # (x, z) of the agent at the last successful computation
    last_position_: Optional[Tuple[float, float]] = None
    last_result_: Optional[PlanResult] = None

    def reset(self) -> None:
        """Drop the path and position reference, keep the destination."""
        self.path_ = []
        self.is_current_ = False
        self.last_position_ = None
        self.last_result_ = None

    def resetFull(self) -> None:
        """Reset everything including the destination."""
        self.reset()
        self.destination_name_ = None
        self.destination_ = None

    def selectDestination(self, name: Optional[str], region: Optional[Region]) -> None:
        self.reset()
        self.destination_name_ = name
        self.destination_ = region

    def applyResult(self, result: PlanResult, position: Tuple[float, float]) -> None:
        """Store the outcome of a computation made at position (x, z)."""
        self.last_result_ = result
        if result.ok:
            self.path_ = list(result.path)
            self.is_current_ = True
            self.last_position_ = position
        else:
            self.path_ = []
            self.is_current_ = False

    def hasDestination(self) -> bool:
        return self.destination_ is not None

    def hasPath(self) -> bool:
        return self.is_current_ and bool(self.path_)
