"""Config loader: YAML file, then config.env / process environment overrides."""

import logging
import os
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from dotenv import dotenv_values

from weatherproxy.config.defaults import ENV_OVERRIDES
from weatherproxy.config.schema import ProxyConfig

logger = logging.getLogger(__name__)

DEFAULT_ENV_FILE = "config.env"


def load_config(
    path: str | Path | None = None,
    env_file: str | Path | None = DEFAULT_ENV_FILE,
    environ: Mapping[str, str] | None = None,
) -> ProxyConfig:
    """Build the process-wide config.

    Precedence, lowest first: schema defaults, YAML file at ``path``,
    values from ``env_file``, then ``environ`` (defaults to ``os.environ``).
    A missing YAML or env file is not an error.
    """
    raw: dict[str, Any] = {}
    if path is not None:
        path = Path(path)
        if path.exists():
            with open(path) as f:
                raw = yaml.safe_load(f) or {}
        else:
            logger.warning("Config file %s not found, using defaults", path)

    env: dict[str, str] = {}
    if env_file is not None and Path(env_file).exists():
        env.update({k: v for k, v in dotenv_values(env_file).items() if v is not None})
    env.update(os.environ if environ is None else environ)

    for var, dotted_key in ENV_OVERRIDES.items():
        value = env.get(var)
        if value:
            _set_dotted(raw, dotted_key, value)

    return ProxyConfig(**raw)


def _set_dotted(data: dict[str, Any], dotted_key: str, value: Any) -> None:
    parts = dotted_key.split(".")
    target = data
    for part in parts[:-1]:
        target = target.setdefault(part, {})
    target[parts[-1]] = value


def get_config_value(config: ProxyConfig, dotted_key: str) -> Any:
    """Get a config value by dotted key path. E.g. 'server.port'."""
    obj: Any = config
    for part in dotted_key.split("."):
        if hasattr(obj, part):
            obj = getattr(obj, part)
        elif isinstance(obj, dict):
            obj = obj[part]
        else:
            raise KeyError(f"Config key not found: {dotted_key}")
    return obj


def redacted(config: ProxyConfig) -> dict[str, Any]:
    """Config as a plain dict with the API key masked, for display."""
    data = config.model_dump()
    if data["upstream"]["api_key"]:
        data["upstream"]["api_key"] = "***"
    return data
