#!/usr/bin/env python3
"""
Configuration management for the Volunteer Match web application.

Matching weights and thresholds are policy constants in core.scorer.policy
and are intentionally not configurable here.
"""

import os
import yaml
from pathlib import Path
from functools import lru_cache
from typing import Optional, Dict, Any
from pydantic import BaseModel, Field

from database.database import DEFAULT_DATABASE_URL


class DatabaseConfig(BaseModel):
    """Database configuration."""
    url: str = Field(default=DEFAULT_DATABASE_URL)
    create_tables: bool = Field(default=True)


class WebConfig(BaseModel):
    """Web server configuration."""
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=8080)


class LoggingConfig(BaseModel):
    """Logging configuration."""
    level: str = Field(default="INFO")
    format: str = Field(default='%(asctime)s - %(name)s - %(levelname)s - %(message)s')


class AppConfig(BaseModel):
    """Main application configuration."""
    database: DatabaseConfig = Field(default_factory=DatabaseConfig)
    web: WebConfig = Field(default_factory=WebConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def _config_path() -> Path:
    return Path(os.environ.get('CONFIG_PATH', get_project_root() / 'config.yaml'))


def _load_yaml_config(config_path: Optional[Path] = None) -> Dict[str, Any]:
    """Load configuration from YAML file."""
    config_path = config_path or _config_path()

    if config_path.exists():
        with open(config_path, 'r') as f:
            return yaml.safe_load(f) or {}
    return {}


def _apply_env_overrides(config_dict: Dict[str, Any]) -> Dict[str, Any]:
    """Apply environment variable overrides to configuration."""
    # Database overrides
    if 'DATABASE_URL' in os.environ:
        if 'database' not in config_dict:
            config_dict['database'] = {}
        config_dict['database']['url'] = os.environ['DATABASE_URL']

    # Web server overrides
    if 'WEB_HOST' in os.environ:
        if 'web' not in config_dict:
            config_dict['web'] = {}
        config_dict['web']['host'] = os.environ['WEB_HOST']

    if 'WEB_PORT' in os.environ:
        if 'web' not in config_dict:
            config_dict['web'] = {}
        config_dict['web']['port'] = int(os.environ['WEB_PORT'])

    # Logging overrides
    if 'LOG_LEVEL' in os.environ:
        if 'logging' not in config_dict:
            config_dict['logging'] = {}
        config_dict['logging']['level'] = os.environ['LOG_LEVEL']

    return config_dict


def load_config(config_path: Optional[Path] = None) -> AppConfig:
    """
    Load configuration from YAML and apply environment overrides.

    Args:
        config_path: YAML file; defaults to $CONFIG_PATH or ./config.yaml

    Returns:
        AppConfig: The application configuration.
    """
    raw_config = _load_yaml_config(config_path)
    raw_config = _apply_env_overrides(raw_config)

    return AppConfig(**raw_config)


@lru_cache()
def get_config() -> AppConfig:
    """
    Get application configuration with caching.

    Result is cached for the life of the process; call
    get_config.cache_clear() after changing the environment.
    """
    return load_config()


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent.parent
