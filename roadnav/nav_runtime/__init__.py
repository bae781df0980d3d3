#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Path state, staleness policy and the engine driving them.
"""

from roadnav.nav_runtime.navigation_session import NavigationSession
from roadnav.nav_runtime.staleness import should_recompute
from roadnav.nav_runtime.heading_tracker import HeadingTracker
from roadnav.nav_runtime.navigation_engine import NavigationEngine

__all__ = ['NavigationSession', 'should_recompute', 'HeadingTracker', 'NavigationEngine']
