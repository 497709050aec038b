"""
Configuration management for the dashapi CLI.

Settings come from a project file (.dashapi/config.yaml in the working
directory), then the global file (~/.config/dashapi/config.yaml), then
defaults. DASHAPI_* environment variables override the dashboard settings.
"""
# Copyright (c) 2026 Crashwise
#
# Licensed under the MIT License. See the LICENSE file for details.


from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, Field, ValidationError

from dashapi import Dashboard

from .constants import (
    CONFIG_FILE_NAME,
    DEFAULT_API_TIMEOUT,
    DEFAULT_DASHBOARD_ADDRESS,
    ENV_ADDRESS,
    ENV_CLIENT,
    ENV_KEY,
    ENV_TIMEOUT,
    GLOBAL_CONFIG_DIR,
    PROJECT_CONFIG_DIR,
    REDACTED,
)
from .exceptions import ConfigurationError


logger = logging.getLogger(__name__)


class DashboardSettings(BaseModel):
    """Connection identity for the dashboard."""

    client: str = ""
    address: str = DEFAULT_DASHBOARD_ADDRESS
    key: str = ""
    timeout: float = DEFAULT_API_TIMEOUT


class PreferencesConfig(BaseModel):
    """User preferences."""

    table_style: str = "rich"
    color_output: bool = True


class DashapiConfig(BaseModel):
    """Complete dashapi CLI configuration."""

    dashboard: DashboardSettings = Field(default_factory=DashboardSettings)
    preferences: PreferencesConfig = Field(default_factory=PreferencesConfig)

    @classmethod
    def from_file(cls, config_path: Path) -> "DashapiConfig":
        """Load configuration from YAML file."""
        if not config_path.exists():
            return cls()

        try:
            with open(config_path, "r", encoding="utf-8") as fh:
                data = yaml.safe_load(fh) or {}
            return cls(**data)
        except (OSError, yaml.YAMLError, ValidationError, TypeError) as exc:
            logger.warning(f"Failed to load config from {config_path}: {exc}")
            return cls()

    def save_to_file(self, config_path: Path) -> None:
        """Save configuration to YAML file."""
        config_path.parent.mkdir(parents=True, exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as fh:
            yaml.dump(
                self.model_dump(),
                fh,
                default_flow_style=False,
                sort_keys=False,
            )

    # ------------------------------------------------------------------
    # Environment-aware accessors
    # ------------------------------------------------------------------
    def get_client_name(self) -> str:
        """Get client name with environment variable override."""
        return os.getenv(ENV_CLIENT, self.dashboard.client)

    def get_address(self) -> str:
        """Get dashboard address with environment variable override."""
        return os.getenv(ENV_ADDRESS, self.dashboard.address)

    def get_key(self) -> str:
        """Get shared key with environment variable override."""
        return os.getenv(ENV_KEY, self.dashboard.key)

    def get_timeout(self) -> float:
        """Get timeout with environment variable override."""
        env_timeout = os.getenv(ENV_TIMEOUT)
        if env_timeout:
            try:
                return float(env_timeout)
            except ValueError:
                logger.warning(f"Ignoring non-numeric {ENV_TIMEOUT}={env_timeout!r}")
        return self.dashboard.timeout

    def redacted(self) -> Dict[str, Any]:
        """Effective settings with the shared key masked, for display."""
        data = self.model_dump()
        data["dashboard"].update(
            client=self.get_client_name(),
            address=self.get_address(),
            key=REDACTED if self.get_key() else "",
            timeout=self.get_timeout(),
        )
        return data


# ----------------------------------------------------------------------
# Locations
# ----------------------------------------------------------------------

def get_project_config_path(project_dir: Optional[Path] = None) -> Path:
    project_dir = Path(project_dir or Path.cwd())
    return project_dir / PROJECT_CONFIG_DIR / CONFIG_FILE_NAME


def get_global_config_path() -> Path:
    return Path.home() / GLOBAL_CONFIG_DIR / CONFIG_FILE_NAME


def get_project_config(project_dir: Optional[Path] = None) -> Optional[DashapiConfig]:
    """Get configuration for the current project, if there is one."""
    config_path = get_project_config_path(project_dir)
    if not config_path.exists():
        return None
    return DashapiConfig.from_file(config_path)


def get_global_config() -> DashapiConfig:
    """Get global user configuration."""
    return DashapiConfig.from_file(get_global_config_path())


def save_global_config(config: DashapiConfig) -> None:
    """Save global user configuration."""
    config.save_to_file(get_global_config_path())


def load_config(project_dir: Optional[Path] = None) -> DashapiConfig:
    """Project configuration, falling back to the global one."""
    config = get_project_config(project_dir)
    if config is not None:
        return config
    return get_global_config()


def create_dashboard(config: DashapiConfig) -> Dashboard:
    """
    Build a dashboard client from the effective configuration.

    Raises:
        ConfigurationError: If the client name, address or key is missing
    """
    client = config.get_client_name()
    address = config.get_address()
    key = config.get_key()

    missing = [
        name for name, value in (("client", client), ("address", address), ("key", key))
        if not value
    ]
    if missing:
        raise ConfigurationError(missing)

    return Dashboard(client, address, key, timeout=config.get_timeout())
