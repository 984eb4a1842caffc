"""Imperative Shell - I/O and side effects.

This module contains all code that interacts with external systems:
- Webhook dispatcher (HTTP)
- Configuration loading (environment/files)

Keep this layer thin and simple. All message logic should be in core.
"""

from hookshot.shell.dispatcher import Dispatcher, DispatchResult, create
from hookshot.shell.config_loader import create_dispatcher, load_config, load_config_from_env

__all__ = [
    "Dispatcher",
    "DispatchResult",
    "create",
    "create_dispatcher",
    "load_config",
    "load_config_from_env",
]
