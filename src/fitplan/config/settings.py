"""Application settings and configuration management."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

CONFIG_ENV_VAR = "FITPLAN_CONFIG"


def _default_config_dir() -> Path:
    """Return the default configuration directory."""
    return Path.home() / ".fitplan"


def default_config_path() -> Path:
    """Return the config path, honoring the FITPLAN_CONFIG override."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        return Path(override).expanduser()
    return _default_config_dir() / "config.yaml"


@dataclass
class CatalogConfig:
    """Template catalog configuration."""

    path: Optional[Path] = None  # YAML catalog replacing the built-in one


@dataclass
class WorkoutConfig:
    """Workout section split and accepted duration range."""

    section_fraction: float = 0.15
    section_cap_minutes: int = 10
    min_duration: int = 15
    max_duration: int = 180


@dataclass
class DefaultsConfig:
    """Default values for various operations."""

    output_format: str = "table"  # "table" or "json"
    seed: Optional[int] = None


@dataclass
class LoggingConfig:
    """Logging configuration for the CLI."""

    level: str = "WARNING"


@dataclass
class Settings:
    """Main application settings."""

    catalog: CatalogConfig = field(default_factory=CatalogConfig)
    workout: WorkoutConfig = field(default_factory=WorkoutConfig)
    defaults: DefaultsConfig = field(default_factory=DefaultsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @classmethod
    def load(cls, config_path: Optional[Path] = None) -> "Settings":
        """Load settings from YAML file or return defaults.

        Args:
            config_path: Path to config.yaml. If None, uses $FITPLAN_CONFIG
                or ~/.fitplan/config.yaml

        Returns:
            Settings instance
        """
        if config_path is None:
            config_path = default_config_path()

        if not config_path.exists():
            return cls()

        with open(config_path) as f:
            data = yaml.safe_load(f) or {}

        settings = cls()

        # Parse catalog config
        if "catalog" in data:
            cat_data = data["catalog"] or {}
            if cat_data.get("path"):
                settings.catalog.path = Path(cat_data["path"]).expanduser()

        # Parse workout config
        if "workout" in data:
            wk_data = data["workout"] or {}
            if "section_fraction" in wk_data:
                settings.workout.section_fraction = float(wk_data["section_fraction"])
            if "section_cap_minutes" in wk_data:
                settings.workout.section_cap_minutes = int(wk_data["section_cap_minutes"])
            if "min_duration" in wk_data:
                settings.workout.min_duration = int(wk_data["min_duration"])
            if "max_duration" in wk_data:
                settings.workout.max_duration = int(wk_data["max_duration"])

        # Parse defaults
        if "defaults" in data:
            def_data = data["defaults"] or {}
            if "output_format" in def_data:
                settings.defaults.output_format = def_data["output_format"]
            if def_data.get("seed") is not None:
                settings.defaults.seed = int(def_data["seed"])

        if "logging" in data:
            log_data = data["logging"] or {}
            if "level" in log_data:
                settings.logging.level = str(log_data["level"]).upper()

        return settings

    def save(self, config_path: Optional[Path] = None) -> None:
        """Save current settings to YAML file.

        Args:
            config_path: Path to save config.yaml. If None, uses the default path
        """
        if config_path is None:
            config_path = default_config_path()

        config_path.parent.mkdir(parents=True, exist_ok=True)

        with open(config_path, "w") as f:
            yaml.dump(self.to_dict(), f, default_flow_style=False, sort_keys=False)

    def to_dict(self) -> dict:
        """Convert to the YAML document layout."""
        return {
            "catalog": {
                "path": str(self.catalog.path) if self.catalog.path else None,
            },
            "workout": {
                "section_fraction": self.workout.section_fraction,
                "section_cap_minutes": self.workout.section_cap_minutes,
                "min_duration": self.workout.min_duration,
                "max_duration": self.workout.max_duration,
            },
            "defaults": {
                "output_format": self.defaults.output_format,
                "seed": self.defaults.seed,
            },
            "logging": {
                "level": self.logging.level,
            },
        }


# Global settings instance (lazy loaded)
_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Get the global settings instance, loading from disk if needed."""
    global _settings
    if _settings is None:
        _settings = Settings.load()
    return _settings


def reload_settings(config_path: Optional[Path] = None) -> Settings:
    """Force reload settings from disk."""
    global _settings
    _settings = Settings.load(config_path)
    return _settings
