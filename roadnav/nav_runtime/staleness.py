#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Staleness policy: decide from agent movement whether the path must be recomputed.

- No destination: never recompute
- Destination without a current path: compute now
- Current path: recompute once the agent moved more than `threshold` on
  X or on Z since the last computation (axes checked independently)
"""

from typing import Tuple

from roadnav.nav_runtime.navigation_session import NavigationSession


DEFAULT_RECOMPUTE_THRESHOLD = 5.0


def should_recompute(
    position: Tuple[float, ...],
    session: NavigationSession,
    threshold: float = DEFAULT_RECOMPUTE_THRESHOLD,
) -> bool:
    """
    Args:
        position: agent (x, y, z) or (x, z)
        session: current path state
        threshold: per-axis displacement that triggers a recompute

    Returns:
        True if the path should be (re)computed now
    """
    if not session.hasDestination():
        return False
    if not session.is_current_ or session.last_position_ is None:
        return True

    x, z = position[0], position[-1]
    last_x, last_z = session.last_position_
    return abs(x - last_x) > threshold or abs(z - last_z) > threshold
