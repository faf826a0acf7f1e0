"""Reading the server and database settings from a JSON file."""

import json
import logging
from dataclasses import dataclass, fields
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass
class ServerConfig:
    """Address the HTTP server listens on."""

    host: str = ""
    port: str = ""


@dataclass
class DBConfig:
    """Settings for the database connection."""

    driver: str = ""
    name: str = ""
    username: str = ""
    password: str = ""
    protocol: str = ""
    host: str = ""
    port: str = ""


@dataclass
class Config:
    """Whole configuration: database and server sections."""

    db: DBConfig | None = None
    server: ServerConfig | None = None


def _json_kind(value):
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _match(names, key):
    folded = key.casefold()
    return next((name for name in names if name.casefold() == folded), None)


def _section(cls, data, section):
    if data is None:
        return None
    if not isinstance(data, dict):
        raise TypeError(f"cannot read {_json_kind(data)} as the {section} section")
    names = [item.name for item in fields(cls)]
    values = {}
    for key, value in data.items():
        name = _match(names, key)
        if name is None or value is None:
            continue
        if not isinstance(value, str):
            raise TypeError(
                f"cannot read {_json_kind(value)} as the string {section}.{name}"
            )
        values[name] = value
    return cls(**values)


def _parse(data):
    if data is None:
        return Config()
    if not isinstance(data, dict):
        raise TypeError(f"cannot read {_json_kind(data)} as a configuration")
    sections = {"db": (DBConfig, "db"), "server": (ServerConfig, "server")}
    config = Config()
    for key, value in data.items():
        name = _match(sections, key)
        if name is None:
            continue
        cls, section = sections[name]
        setattr(config, name, _section(cls, value, section))
    return config


def read_configuration(filepath):
    """Load the configuration from a JSON file.

    Keys are matched without regard to case; unknown keys are ignored.
    """
    path = Path(filepath)
    try:
        raw = path.read_bytes()
    except OSError as exc:
        logger.info("Cannot find the configuration file filepath=%s info=%s", filepath, exc)
        raise
    try:
        return _parse(json.loads(raw))
    except (ValueError, TypeError) as exc:
        logger.info("Configuration parsing failed buffer=%r info=%s", raw, exc)
        raise