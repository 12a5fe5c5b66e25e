"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from tago.errors import ConfigError

DEFAULT_CONFIG: dict[str, Any] = {
    "description": {
        "extension": ".tago",
        "root_marker": "tago",
    },
    "presenter": {
        "format": "text",
        "indent": 4,
    },
    "logging": {
        "level": "WARNING",
    },
}


def merge_config(base: dict[str, Any], update: Any, source: str) -> dict[str, Any]:
    """Overlay ``update`` on ``base`` one section at a time.

    Every section in ``update`` must already exist in ``base`` and must be a
    mapping of known keys. Values inside a section replace the defaults.
    """
    if not isinstance(update, dict):
        msg = f"{source}: expected a mapping of sections, got {type(update).__name__}"
        raise ConfigError(msg)

    result = copy.deepcopy(base)
    for section, values in update.items():
        if section not in result:
            msg = f"{source}: unknown section '{section}'"
            raise ConfigError(msg)
        if not isinstance(values, dict):
            msg = f"{source}: section '{section}' must be a mapping"
            raise ConfigError(msg)
        unknown = sorted(set(values) - set(result[section]))
        if unknown:
            msg = f"{source}: unknown keys in '{section}': {', '.join(unknown)}"
            raise ConfigError(msg)
        result[section].update(values)
    return result


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults.

    Raises ConfigError when the file is not valid YAML or names sections and
    keys that do not exist.
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            try:
                user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            except yaml.YAMLError as e:
                msg = f"{path}: invalid YAML: {e}"
                raise ConfigError(msg) from e
            config = merge_config(config, user_config, path)
    return config
