"""
Summary Guard Configuration Module

Provides centralized configuration loading for the validation pipeline
and the generation client.
"""

import os
from pathlib import Path
from typing import Dict, Any, Optional

import yaml


_config_cache: Optional[Dict[str, Any]] = None
CONFIG_DIR = Path(__file__).parent
DEFAULT_CONFIG_PATH = CONFIG_DIR / "summary_guard_config.yaml"


def get_guard_config() -> Dict[str, Any]:
    """
    Load Summary Guard configuration (cached).

    The SUMMARY_GUARD_CONFIG environment variable, when set, points at an
    alternative YAML file.

    Returns:
        Dict containing all Summary Guard configuration settings.
    """
    global _config_cache
    if _config_cache is not None:
        return _config_cache

    config_path = Path(os.getenv("SUMMARY_GUARD_CONFIG", DEFAULT_CONFIG_PATH))
    _config_cache = load_config_file(config_path)

    return _config_cache


def load_config_file(config_path: Path) -> Dict[str, Any]:
    """Read one YAML config file without touching the cache."""
    with open(config_path, 'r') as f:
        return yaml.safe_load(f) or {}


def clear_config_cache() -> None:
    """Clear the config cache (useful for testing)."""
    global _config_cache
    _config_cache = None
