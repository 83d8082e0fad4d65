"""YAML config loader with runtime get/set."""

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from weatherboard.config.defaults import DEFAULT_CITIES
from weatherboard.config.schema import BoardConfig

logger = logging.getLogger(__name__)


def load_config(path: str | Path | None) -> BoardConfig:
    """Load and validate config from a YAML file.

    A missing file yields the defaults. If no cities are specified in the
    YAML, injects DEFAULT_CITIES.
    """
    raw: dict = {}
    if path is not None:
        path = Path(path)
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}
        else:
            logger.info("Config %s not found, using defaults", path)

    if "cities" not in raw or not raw["cities"]:
        raw["cities"] = [c.model_dump() for c in DEFAULT_CITIES]

    return BoardConfig(**raw)


def get_config_value(config: BoardConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'api.retry_attempts'."""
    parts = dotted_key.split(".")
    obj: Any = config
    for part in parts:
        if isinstance(obj, list):
            obj = obj[int(part)]
        elif hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def set_config_value(config: BoardConfig, dotted_key: str, value: Any) -> BoardConfig:
    """Set a config value by dotted key path and re-validate.

    Returns a new BoardConfig instance.
    """
    data = json.loads(config.model_dump_json())
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target[int(part)] if isinstance(target, list) else target[part]
    old_value = target.get(parts[-1])
    if isinstance(old_value, bool) and isinstance(value, str):
        value = value.lower() in ("1", "true", "yes", "on")
    elif isinstance(old_value, int) and isinstance(value, str):
        value = int(value)
    elif isinstance(old_value, float) and isinstance(value, str):
        value = float(value)
    target[parts[-1]] = value
    return BoardConfig(**data)


def save_config(config: BoardConfig, path: str | Path) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w") as f:
        yaml.dump(
            json.loads(config.model_dump_json()),
            f,
            default_flow_style=False,
            sort_keys=False,
            allow_unicode=True,
        )
