#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Engine configuration

Type-safe configuration models and loaders.
"""

from roadnav.config.models import (
    EngineConfig,
    PathPlanningConfig,
    StalenessConfig,
    RegionConfig,
    RuntimeConfig,
    LogConfig,
)
from roadnav.config.loader import load_config, load_region_payload

__all__ = [
    'EngineConfig',
    'PathPlanningConfig',
    'StalenessConfig',
    'RegionConfig',
    'RuntimeConfig',
    'LogConfig',
    'load_config',
    'load_region_payload',
]
