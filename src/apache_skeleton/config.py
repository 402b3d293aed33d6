"""Configuration management for apache-skeleton defaults."""

import logging
import os
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Settings:
    """Defaults applied to every generated project."""

    base_dir: str = "/var/www"
    bootstrap_version: str = "5.3.3"
    fpm_package: str = "php-fpm"

    @property
    def bootstrap_css(self) -> str:
        return f"https://cdn.jsdelivr.net/npm/bootstrap@{self.bootstrap_version}/dist/css/bootstrap.min.css"

    @property
    def bootstrap_js(self) -> str:
        return f"https://cdn.jsdelivr.net/npm/bootstrap@{self.bootstrap_version}/dist/js/bootstrap.bundle.min.js"


class ConfigManager:
    """Loads and saves Settings as YAML.

    The directory comes from the constructor, the APACHE_SKELETON_CONFIG
    environment variable, or ~/.apache-skeleton, in that order. Nothing is
    written until save() is called.
    """

    ENV_VAR = "APACHE_SKELETON_CONFIG"

    def __init__(self, config_dir: Path | None = None) -> None:
        if config_dir is None:
            env_config = os.getenv(self.ENV_VAR)
            if env_config:
                config_dir = Path(env_config).expanduser().resolve()
            else:
                config_dir = Path.home() / ".apache-skeleton"

        self.config_dir = config_dir
        self.config_file = config_dir / "config.yaml"

    def _load_raw(self) -> dict[str, Any]:
        """Load the YAML mapping, or an empty dict if unreadable."""
        if not self.config_file.exists():
            return {}

        try:
            with open(self.config_file, "r") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            logger.warning("Ignoring unreadable config %s: %s", self.config_file, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring config %s: expected a mapping", self.config_file)
            return {}
        return data

    def load(self) -> Settings:
        """Return Settings with file values over the defaults."""
        data = self._load_raw()
        known = {f.name for f in fields(Settings)}
        # Blank values count as unset
        values = {k: str(v) for k, v in data.items() if k in known and v is not None and str(v).strip()}
        return Settings(**values)

    def save(self, settings: Settings) -> None:
        self.config_dir.mkdir(parents=True, exist_ok=True)
        with open(self.config_file, "w") as f:
            yaml.safe_dump(asdict(settings), f, sort_keys=False)

    def set_value(self, key: str, value: str) -> Settings:
        """Update one setting and persist it.

        Raises:
            KeyError: If key is not a known setting.
        """
        known = {f.name for f in fields(Settings)}
        if key not in known:
            raise KeyError(f"Unknown setting '{key}'. Known: {', '.join(sorted(known))}")
        settings = self.load()
        updated = Settings(**{**asdict(settings), key: value})
        self.save(updated)
        return updated
