from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from importlib import resources
from pathlib import Path
from typing import Optional

import yaml

from .errors import SettingsError

logger = logging.getLogger(__name__)


@dataclass
class ShellSettings:
    prompt: str = "> "
    banner: str = "Welcome to the MUD game! Type 'help' for a list of commands."


@dataclass
class WorldSettings:
    # None selects the world bundled with the package
    path: Optional[str] = None


@dataclass
class Settings:
    shell: ShellSettings = field(default_factory=ShellSettings)
    world: WorldSettings = field(default_factory=WorldSettings)

    @staticmethod
    def _load_yaml(path: Path) -> dict:
        try:
            with path.open("r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise SettingsError(f"Invalid YAML in settings file {path}: {exc}") from exc
        except (OSError, UnicodeDecodeError) as exc:
            raise SettingsError(f"Cannot read settings file {path}: {exc}") from exc
        if not isinstance(data, dict):
            raise SettingsError(f"Settings file {path} must contain a mapping")
        return data

    @classmethod
    def _deep_merge(cls, base: dict, overlay: dict) -> dict:
        merged = dict(base)
        for k, v in (overlay or {}).items():
            if isinstance(v, dict) and isinstance(base.get(k), dict):
                merged[k] = cls._deep_merge(base[k], v)
            else:
                merged[k] = v
        return merged

    @classmethod
    def _from_dict(cls, data: dict) -> "Settings":
        try:
            shell = ShellSettings(**(data.get("shell") or {}))
            world = WorldSettings(**(data.get("world") or {}))
        except TypeError as exc:
            raise SettingsError(f"Unknown or malformed settings: {exc}") from exc
        for key in ("prompt", "banner"):
            if not isinstance(getattr(shell, key), str):
                raise SettingsError(f"shell.{key} must be a string")
        if world.path is not None and not isinstance(world.path, str):
            raise SettingsError("world.path must be a string or null")
        return Settings(shell=shell, world=world)

    @classmethod
    def load(cls, user_path: Optional[Path] = None) -> "Settings":
        """Load settings from built-in defaults and optional user override file.

        If user_path is provided and exists, overlay values onto defaults.
        """
        try:
            with resources.files("mudgame.config").joinpath("default_settings.yaml").open("r", encoding="utf-8") as f:
                default_data = yaml.safe_load(f) or {}
        except FileNotFoundError:
            logger.warning("Default settings not found; falling back to dataclass defaults.")
            default_data = dataclasses.asdict(Settings())

        user_data = {}
        if user_path is not None:
            if user_path.exists():
                user_data = cls._load_yaml(user_path)
                logger.info("Loaded user settings from %s", user_path)
            else:
                logger.warning("User settings file not found: %s", user_path)

        merged = cls._deep_merge(default_data, user_data)
        settings = cls._from_dict(merged)
        logger.debug("Settings merged: %s", settings)
        return settings

    def save(self, path: Path) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as f:
            yaml.safe_dump(dataclasses.asdict(self), f, sort_keys=False)
        logger.info("Saved settings to %s", path)


__all__ = ["Settings", "ShellSettings", "WorldSettings"]
