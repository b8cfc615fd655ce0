"""Runtime configuration for ccdb - centralized configuration management."""

import copy
import json
import os
from pathlib import Path
from typing import Any

from ccdb.utils.logging import logger

CONFIG_DIR = ".ccdb"
CONFIG_FILE = "config.json"

DEFAULTS = {
    "paths": {
        "database_file": "compile_commands.json",
    },
    "discovery": {
        "search_parents": True,
    },
    "report": {
        "max_candidates": 10,
    },
}

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _coerce(value: str, default_value: Any) -> Any:
    # bool first: bool is a subclass of int
    if isinstance(default_value, bool):
        lowered = value.strip().lower()
        if lowered in _TRUE_VALUES:
            return True
        if lowered in _FALSE_VALUES:
            return False
        raise ValueError(f"expected one of {sorted(_TRUE_VALUES | _FALSE_VALUES)}")
    if isinstance(default_value, int):
        return int(value)
    return value


def load_runtime_config(root: str | Path = ".") -> dict[str, Any]:
    """
    Load runtime configuration from .ccdb/config.json and environment variables.

    Config priority (highest to lowest):
    1. Environment variables (CCDB_<SECTION>_<KEY>, e.g. CCDB_REPORT_MAX_CANDIDATES)
    2. <root>/.ccdb/config.json
    3. Built-in defaults

    Unknown sections or keys and values of the wrong type in the config file
    are ignored with a warning.

    Args:
        root: Root directory to look for the config file

    Returns:
        Configuration dictionary with merged values
    """
    cfg = copy.deepcopy(DEFAULTS)

    path = Path(root) / CONFIG_DIR / CONFIG_FILE
    try:
        if path.exists():
            with open(path, encoding="utf-8") as f:
                user = json.load(f)

            if isinstance(user, dict):
                for section, values in user.items():
                    if section not in cfg or not isinstance(values, dict):
                        logger.warning("Ignoring unknown config section {section} in {path}", section=section, path=str(path))
                        continue
                    for key, value in values.items():
                        if key in cfg[section] and type(value) is type(cfg[section][key]):
                            cfg[section][key] = value
                        else:
                            logger.warning(
                                "Ignoring config value {section}.{key}={value!r} in {path}",
                                section=section,
                                key=key,
                                value=value,
                                path=str(path),
                            )
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Could not load config file from {path}: {error}", path=str(path), error=str(e))
        logger.info("Continuing with default configuration")

    for section in cfg:
        for key in cfg[section]:
            env_var = f"CCDB_{section.upper()}_{key.upper()}"
            if env_var in os.environ:
                value = os.environ[env_var]
                try:
                    cfg[section][key] = _coerce(value, cfg[section][key])
                except ValueError as e:
                    logger.warning(
                        "Invalid value for environment variable {env_var}: {value!r} - {error}",
                        env_var=env_var,
                        value=value,
                        error=str(e),
                    )
                    logger.info("Using value: {current}", current=cfg[section][key])

    return cfg
