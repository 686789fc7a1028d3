import logging
import os
import pathlib
from dataclasses import dataclass
from typing import Optional

import yaml
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# The documented file name is config.env, but its contents are YAML.
CONFIG_FILENAMES = ("config.env", "config.yaml", "config.yml", "config")

NULL_VALUES = ("", "~", "null", "Null", "NULL")

ENV_KEYS = {
    "endpoint": "SERVER_ENDPOINT",
    "username": "SERVER_USERNAME",
    "password": "SERVER_PASSWORD",
    "arangodump_path": "ARANGODUMP_PATH",
    "arangorestore_path": "ARANGORESTORE_PATH",
}


@dataclass(frozen=True)
class ServerConfig:
    """Connection details for the ArangoDB server being backed up or restored."""

    endpoint: str = ""
    username: str = ""
    password: str = ""
    arangodump_path: str = "arangodump"
    arangorestore_path: str = "arangorestore"


def find_config_file(search_dir: str = ".") -> Optional[pathlib.Path]:
    base = pathlib.Path(search_dir)
    for name in CONFIG_FILENAMES:
        candidate = base / name
        if candidate.is_file():
            return candidate
    return None


def _read_yaml(path: pathlib.Path) -> dict:
    try:
        with open(path, "r", encoding="utf-8") as f:
            # BaseLoader: every scalar stays the string that was written
            data = yaml.load(f, Loader=yaml.BaseLoader)
    except (OSError, yaml.YAMLError) as e:
        logger.debug("Ignoring unreadable config %s: %s", path, e)
        return {}
    if not isinstance(data, dict):
        logger.debug("Ignoring config %s: top level is not a mapping", path)
        return {}
    return data


def load_config(search_dir: str = ".", use_environment: bool = True) -> ServerConfig:
    """Load server settings from the YAML config file in ``search_dir``.

    A missing or malformed file is not an error: every field falls back to
    its default and the external tool reports the resulting connection
    failure itself. When ``use_environment`` is set, a ``.env`` file in
    ``search_dir`` is loaded and matching environment variables take
    precedence over the file.
    """
    values = {}
    path = find_config_file(search_dir)
    if path is not None:
        logger.debug("Reading config from %s", path)
        values = _read_yaml(path)
    else:
        logger.debug("No config file found in %s", os.path.abspath(search_dir))

    if use_environment:
        load_dotenv(dotenv_path=pathlib.Path(search_dir) / ".env")

    fields = {}
    for field_name, key in ENV_KEYS.items():
        value = values.get(key)
        if not isinstance(value, str) or value in NULL_VALUES:
            value = None
        if use_environment and os.getenv(key) is not None:
            value = os.getenv(key)
        if value is None:
            continue
        fields[field_name] = value

    # Empty binary paths fall back to the bare tool names.
    for field_name in ("arangodump_path", "arangorestore_path"):
        if field_name in fields and not fields[field_name].strip():
            del fields[field_name]

    return ServerConfig(**fields)
