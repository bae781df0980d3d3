#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Engine configuration models

Pydantic models with validation; every section has defaults so an empty
config file yields the reference behaviour.
"""

from typing import Optional
from pydantic import BaseModel, Field, field_validator


class PathPlanningConfig(BaseModel):
    """Path search configuration"""
    max_expansions: Optional[int] = Field(
        None,
        description="Abort a search after this many node expansions (None = unlimited)"
    )
    cache_road_graph: bool = Field(
        False,
        description="Reuse the rasterized road graph until regions change"
    )

    @field_validator('max_expansions')
    @classmethod
    def validate_max_expansions(cls, v: Optional[int]) -> Optional[int]:
        """Validate expansion cap"""
        if v is not None and v <= 0:
            raise ValueError(f"max_expansions must be greater than 0: {v}")
        return v


class StalenessConfig(BaseModel):
    """Recompute policy configuration"""
    recompute_threshold: float = Field(
        5.0,
        description="Recompute when the agent moved more than this on either axis"
    )

    @field_validator('recompute_threshold')
    @classmethod
    def validate_threshold(cls, v: float) -> float:
        """Validate threshold"""
        if v < 0:
            raise ValueError(f"recompute_threshold cannot be negative: {v}")
        return v


class RegionConfig(BaseModel):
    """Region store configuration"""
    invalidate_path_on_update: bool = Field(
        False,
        description="Drop the current path when new region data arrives"
    )
    unknown_area_label: str = Field("Unknown", description="Area name shown outside every road")


class RuntimeConfig(BaseModel):
    """Movement tick configuration"""
    floor_coordinates: bool = Field(True, description="Floor agent coordinates before use")
    refresh_rate_s: float = Field(0.1, description="Interval between position updates (seconds)")

    @field_validator('refresh_rate_s')
    @classmethod
    def validate_refresh_rate(cls, v: float) -> float:
        """Validate refresh rate"""
        if v <= 0:
            raise ValueError(f"refresh_rate_s must be greater than 0: {v}")
        return v


class LogConfig(BaseModel):
    """Logging configuration"""
    level: str = Field("INFO", description="Log level")
    log_dir: Optional[str] = Field(None, description="Directory for log files (None = console only)")
    retention: str = Field("7 days", description="Log file retention")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level"""
        level = v.upper()
        if level not in ['TRACE', 'DEBUG', 'INFO', 'SUCCESS', 'WARNING', 'ERROR', 'CRITICAL']:
            raise ValueError(f"Unknown log level: {v}")
        return level


class EngineConfig(BaseModel):
    """Navigation engine configuration"""
    path_planning: PathPlanningConfig = Field(default_factory=PathPlanningConfig, description="Path search")
    staleness: StalenessConfig = Field(default_factory=StalenessConfig, description="Recompute policy")
    regions: RegionConfig = Field(default_factory=RegionConfig, description="Region store")
    runtime: RuntimeConfig = Field(default_factory=RuntimeConfig, description="Movement tick")
    logging: LogConfig = Field(default_factory=LogConfig, description="Logging")
