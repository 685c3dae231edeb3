"""Configuration module using Pydantic Settings.

Usage:
    from histostore.config import configure, get_settings

    capacity = get_settings().array_capacity
    configure(array_capacity=4096)
"""

from histostore.config.settings import StorageSettings, configure, get_settings, reset_settings

__all__ = [
    "StorageSettings",
    "get_settings",
    "configure",
    "reset_settings",
]
