"""
Configuration Loader - YAML Loading with Validation.

Loads configuration from YAML files, applies environment overrides and
validates using Pydantic models.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Tuple, Union

import yaml

from directory_pager.config.models import ServiceConfig

# Environment variable -> (section, key)
ENV_OVERRIDES: Dict[str, Tuple[str, str]] = {
    "COGNITO_USER_POOL_ID": ("directory", "user_pool_id"),
    "AWS_REGION": ("directory", "region"),
    "DIRECTORY_PAGER_LOG_LEVEL": ("logging", "level"),
}


class ConfigLoader:
    """Loads and validates configuration from YAML files."""

    def __init__(
        self,
        base_path: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
    ) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Base path for relative config paths
            environ: Environment used for overrides (defaults to os.environ)
        """
        self._base_path = base_path or Path(".")
        self._environ = os.environ if environ is None else environ

    def load(
        self,
        config_path: Union[str, Path],
        profile: Optional[str] = None,
    ) -> ServiceConfig:
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to YAML config file
            profile: Optional profile name to merge

        Returns:
            Validated ServiceConfig object

        Raises:
            FileNotFoundError: If config file or profile doesn't exist
            ValidationError: If config is invalid
        """
        path = self._resolve_path(config_path)
        config_dict = self._load_yaml(path)

        if profile:
            profile_dict = self._load_profile(profile)
            config_dict = self._merge_configs(config_dict, profile_dict)

        return self.load_from_dict(config_dict)

    def load_from_dict(self, config_dict: Dict[str, Any]) -> ServiceConfig:
        """
        Load configuration from dictionary, applying environment overrides.

        Args:
            config_dict: Configuration as dictionary

        Returns:
            Validated ServiceConfig object
        """
        merged = self._merge_configs(config_dict, self._env_overrides())
        return ServiceConfig.model_validate(merged)

    def _env_overrides(self) -> Dict[str, Any]:
        """Collect overrides from the environment."""
        overrides: Dict[str, Any] = {}
        for variable, (section, key) in ENV_OVERRIDES.items():
            value = self._environ.get(variable)
            if value:
                overrides.setdefault(section, {})[key] = value
        return overrides

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        """Resolve config path relative to base path."""
        p = Path(path)
        if p.is_absolute():
            return p
        return self._base_path / p

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load YAML file."""
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _load_profile(self, profile: str) -> Dict[str, Any]:
        """Load profile configuration."""
        profile_path = self._base_path / "config" / "profiles" / f"{profile}.yaml"
        if not profile_path.exists():
            raise FileNotFoundError(f"Profile not found: {profile}")
        return self._load_yaml(profile_path)

    def _merge_configs(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Deep merge overlay into base config."""
        result = dict(base)
        for key, value in overlay.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        return result


def load_config(
    config_path: Union[str, Path],
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> ServiceConfig:
    """
    Convenience function to load configuration.

    Args:
        config_path: Path to YAML config file
        profile: Optional profile name
        base_path: Base path for resolving relative paths

    Returns:
        Validated ServiceConfig object
    """
    loader = ConfigLoader(base_path=base_path)
    return loader.load(config_path, profile)
