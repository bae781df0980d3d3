#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Configuration and region payload loaders

Reads YAML files and validates configuration with Pydantic.
"""

import yaml
from pathlib import Path
from typing import Any, Dict, Optional
from loguru import logger
from pydantic import ValidationError

from roadnav.common.exceptions import ConfigurationError, RegionPayloadError
from roadnav.config.models import EngineConfig
from roadnav.path_planner.region_store import PAYLOAD_BUILDINGS_KEY, PAYLOAD_ROADS_KEY


def _read_yaml(path: Path, error_cls) -> Any:
    if not path.exists():
        error_msg = f"File not found: {path}"
        logger.error(error_msg)
        raise error_cls(error_msg)

    try:
        with open(path, 'r', encoding='utf-8') as f:
            return yaml.safe_load(f)
    except yaml.YAMLError as e:
        error_msg = f"YAML format error in {path}: {e}"
        logger.error(error_msg)
        raise error_cls(error_msg) from e
    except OSError as e:
        error_msg = f"Failed to read {path}: {e}"
        logger.error(error_msg)
        raise error_cls(error_msg) from e


def load_config(config_path: Path, base_dir: Optional[Path] = None) -> EngineConfig:
    """
    Load configuration from a YAML file

    Args:
        config_path: configuration file path
        base_dir: directory for resolving relative paths (defaults to the
            directory above a `config/` folder, else the file's directory)

    Returns:
        Validated EngineConfig

    Raises:
        ConfigurationError: missing file, YAML error or validation failure
    """
    config_path = Path(config_path)
    if base_dir is None:
        default_base = config_path.resolve().parent
        if default_base.name.lower() == "config":
            default_base = default_base.parent
        base_dir = default_base
    else:
        base_dir = Path(base_dir).resolve()

    raw_config = _read_yaml(config_path, ConfigurationError)

    # An empty file means "all defaults"
    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        error_msg = f"Configuration root must be a mapping: {config_path}"
        logger.error(error_msg)
        raise ConfigurationError(error_msg)

    _apply_relative_paths(raw_config, base_dir)

    try:
        config = EngineConfig(**raw_config)
    except ValidationError as e:
        logger.error(f"Configuration validation failed: {config_path}")
        for error in e.errors():
            field_path = " -> ".join(str(loc) for loc in error['loc'])
            logger.error(f"  {field_path}: {error['msg']}")
        raise ConfigurationError(f"Configuration validation failed:\n{e}") from e

    logger.info(f"Configuration loaded: {config_path}")
    return config


def load_region_payload(payload_path: Path) -> Dict[str, Any]:
    """
    Load a region payload file ({"ROADS": {...}, "BUILDINGS": {...}})

    JSON files are accepted as well, YAML being a superset.

    Raises:
        RegionPayloadError: unreadable file or missing tables
    """
    payload_path = Path(payload_path)
    payload = _read_yaml(payload_path, RegionPayloadError)

    if not isinstance(payload, dict) or PAYLOAD_ROADS_KEY not in payload or PAYLOAD_BUILDINGS_KEY not in payload:
        error_msg = f"Region payload must contain {PAYLOAD_ROADS_KEY} and {PAYLOAD_BUILDINGS_KEY}: {payload_path}"
        logger.error(error_msg)
        raise RegionPayloadError(error_msg)

    logger.info(
        f"Region payload loaded: {payload_path} "
        f"(roads={len(payload[PAYLOAD_ROADS_KEY] or {})}, buildings={len(payload[PAYLOAD_BUILDINGS_KEY] or {})})"
    )
    return payload


def _resolve_path(value: Optional[str], base_dir: Path) -> Optional[str]:
    """Resolve a relative path against base_dir"""
    if value is None:
        return None
    path = Path(value)
    if not path.is_absolute():
        path = base_dir / path
    return str(path.resolve())


def _apply_relative_paths(raw_config: Dict[str, Any], base_dir: Path) -> None:
    """Turn relative path fields into absolute paths"""
    log_cfg = raw_config.get('logging')
    if isinstance(log_cfg, dict) and log_cfg.get('log_dir'):
        log_cfg['log_dir'] = _resolve_path(log_cfg['log_dir'], base_dir)
