"""Finder configuration and user config file."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path

from finder.search.identifiers import IdResolver, ResourceTable
from finder.wait import Wait

logger = logging.getLogger("element-finder.config")

CONFIG_DIR = Path.home() / ".element-finder"
USER_CONFIG_FILE = CONFIG_DIR / "config.json"


@dataclass
class FinderConfig:
    """Search timing and resource settings."""

    timeout: float = 10.0
    poll_interval: float = 0.5
    resources_file: str | None = None
    http_timeout: float = 10.0

    @classmethod
    def from_user_config(cls, **overrides) -> FinderConfig:
        """Build from ~/.element-finder/config.json, then apply non-None overrides."""
        known = {f.name for f in fields(cls)}
        values = {k: v for k, v in read_user_config().items() if k in known}
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)

    def make_wait(self) -> Wait:
        return Wait(timeout=self.timeout, poll_interval=self.poll_interval)

    def make_resolver(self) -> IdResolver:
        if not self.resources_file:
            return IdResolver()
        table = ResourceTable.from_json(Path(self.resources_file).expanduser())
        logger.info("Loaded %d resource ids from %s", len(table), self.resources_file)
        return IdResolver(table)


def read_user_config() -> dict:
    """Read user config from ~/.element-finder/config.json. Returns {} if missing or invalid."""
    if not USER_CONFIG_FILE.exists():
        return {}
    try:
        data = json.loads(USER_CONFIG_FILE.read_text())
    except Exception as e:
        logger.warning("Failed to read config file %s: %s", USER_CONFIG_FILE, e)
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s is not a JSON object, ignoring", USER_CONFIG_FILE)
        return {}
    return data
