"""
Configuration Loader - YAML Files and Profiles.

A run is configured from up to two YAML layers, validated together by
BreachQueryConfig:

    1. an optional base file (--config), relative to base_path
    2. an optional named profile, base_path/config/profiles/<name>.yaml,
       deep-merged on top

With neither, the model defaults apply (Firefox Monitor endpoint).
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from breach_query.config.models import BreachQueryConfig

logger = logging.getLogger(__name__)

PROFILE_DIR = Path("config") / "profiles"


def _read_yaml(path: Path) -> Dict[str, Any]:
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return data


def _deep_merge(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in overlay.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


class ConfigLoader:
    """Resolves config files and profiles under one base path."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        self._base_path = Path(base_path) if base_path is not None else Path(".")

    def profile_path(self, profile: str) -> Path:
        return self._base_path / PROFILE_DIR / f"{profile}.yaml"

    def load(
        self,
        config_path: Optional[Union[str, Path]] = None,
        profile: Optional[str] = None,
    ) -> BreachQueryConfig:
        """
        Read, merge and validate the configuration layers.

        Args:
            config_path: Base YAML file; relative paths resolve against base_path
            profile: Profile name merged over the base file

        Returns:
            Validated BreachQueryConfig

        Raises:
            FileNotFoundError: If the file or profile doesn't exist
            ValueError: If a file is not a mapping
            pydantic.ValidationError: If the merged values are invalid
        """
        settings: Dict[str, Any] = {}
        if config_path is not None:
            settings = _read_yaml(self._base_path / config_path)

        if profile:
            path = self.profile_path(profile)
            if not path.exists():
                raise FileNotFoundError(f"Profile not found: {profile} ({path})")
            settings = _deep_merge(settings, _read_yaml(path))

        logger.debug(f"Config loaded (path={config_path}, profile={profile})")
        return BreachQueryConfig.model_validate(settings)


def load_config(
    config_path: Optional[Union[str, Path]] = None,
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> BreachQueryConfig:
    """Shortcut for ConfigLoader(base_path).load(config_path, profile)."""
    return ConfigLoader(base_path=base_path).load(config_path, profile)
