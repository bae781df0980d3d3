#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Exception hierarchy for the navigation engine.

Pathfinding failures are reported as PlanResult values, not exceptions.
These classes cover configuration and input-file faults only.
"""


class NavigationError(Exception):
    """Base class for navigation engine errors"""
    pass


class ConfigurationError(NavigationError):
    """Configuration file is missing, malformed or fails validation"""
    pass


class RegionPayloadError(NavigationError):
    """Region payload file cannot be read or lacks the ROADS/BUILDINGS tables"""
    pass
