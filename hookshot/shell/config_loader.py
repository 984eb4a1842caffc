"""Configuration Loader - Imperative Shell.

This module handles loading dispatcher configuration from YAML files and
environment variables. All I/O is contained here.

The model (DispatcherConfig) is defined in hookshot/core/config.py.
"""

import logging
import os
from pathlib import Path
from typing import Any

import yaml

from hookshot.core.config import DEFAULT_TIMEOUT, DispatcherConfig
from hookshot.shell.dispatcher import Dispatcher


logger = logging.getLogger(__name__)


DEFAULT_CONFIG_PATH = "config/hookshot.yaml"


def _resolve_value(value: Any) -> Any:
    """Resolve a value that may be a ${VAR} environment placeholder.

    Args:
        value: Value to resolve

    Returns:
        The environment value if the placeholder is set, else the input
    """
    if not isinstance(value, str):
        return value

    if value.startswith("${") and value.endswith("}"):
        var_name = value[2:-1]
        env_value = os.environ.get(var_name)
        if env_value:
            return env_value
        logger.warning("Environment variable %s not set", var_name)

    return value


def load_config_from_dict(data: dict[str, Any]) -> DispatcherConfig:
    """Load configuration from a dictionary.

    This is a pure-ish function (only env var expansion has side effects).

    Args:
        data: Configuration dictionary

    Returns:
        Parsed DispatcherConfig
    """
    return DispatcherConfig(
        webhook_url=_resolve_value(data.get("webhook_url", "")),
        timeout_seconds=float(data.get("timeout_seconds", DEFAULT_TIMEOUT)),
        username=_resolve_value(data.get("username", "")),
        avatar_url=_resolve_value(data.get("avatar_url", "")),
    )


def load_config(config_path: str | Path | None = None) -> DispatcherConfig:
    """Load configuration from a YAML file.

    This method performs file I/O.

    Args:
        config_path: Path to YAML config file.
                    If None, uses HOOKSHOT_CONFIG env var or default.

    Returns:
        Parsed DispatcherConfig

    Raises:
        yaml.YAMLError: If config file is invalid YAML
    """
    if config_path is None:
        config_path = os.environ.get("HOOKSHOT_CONFIG", DEFAULT_CONFIG_PATH)

    path = Path(config_path)

    logger.info("Loading configuration from %s", path)

    if not path.exists():
        logger.warning("Config file not found: %s, using defaults", path)
        return DispatcherConfig()

    with open(path, "r") as f:
        data = yaml.safe_load(f)

    if data is None:
        logger.warning("Config file is empty, using defaults")
        return DispatcherConfig()

    return load_config_from_dict(data)


def load_config_from_env() -> DispatcherConfig:
    """Load configuration from environment variables.

    Environment variables:
        WEBHOOK_URL: Target webhook URL
        WEBHOOK_TIMEOUT: Request timeout in seconds
        WEBHOOK_USERNAME: Default display name
        WEBHOOK_AVATAR_URL: Default avatar URL

    Returns:
        DispatcherConfig from environment
    """
    webhook_url = os.environ.get("WEBHOOK_URL", "")
    if not webhook_url:
        logger.warning("WEBHOOK_URL not set")

    return DispatcherConfig(
        webhook_url=webhook_url,
        timeout_seconds=float(os.environ.get("WEBHOOK_TIMEOUT", str(DEFAULT_TIMEOUT))),
        username=os.environ.get("WEBHOOK_USERNAME", ""),
        avatar_url=os.environ.get("WEBHOOK_AVATAR_URL", ""),
    )


def create_dispatcher(config: DispatcherConfig) -> Dispatcher:
    """Create a dispatcher from configuration."""
    return Dispatcher(config.webhook_url, timeout=config.timeout_seconds)
