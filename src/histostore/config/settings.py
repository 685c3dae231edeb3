"""Configuration settings using Pydantic Settings.

Provides typed storage configuration with environment variable support.

Usage:
    from histostore.config import StorageSettings, get_settings

    # Load from environment variables (HISTOSTORE_*)
    settings = get_settings()

    # Or override with explicit values
    configure(array_capacity=64, check_indices=False)
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorageSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for storage adaptors.

    Attributes:
        array_capacity: Capacity of array-backed storages created without an
            explicit container or capacity.
        check_indices: Validate indices on reads, writes and accumulation.
            Disable only for hot loops whose indices are already known to be valid.
            Unchecked out-of-range writes corrupt sparse storages: they store
            entries at indices >= size(). Read once when a storage is created.

    Environment Variables:
        HISTOSTORE_ARRAY_CAPACITY
        HISTOSTORE_CHECK_INDICES
    """

    model_config = SettingsConfigDict(
        env_prefix="HISTOSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    array_capacity: int = Field(default=1024, ge=0)
    check_indices: bool = True


# Module-level settings instance, created lazily
_settings: StorageSettings | None = None


def get_settings() -> StorageSettings:
    """Access the process-wide storage settings.

    Returns:
        The current StorageSettings, loaded from the environment on first use.
    """
    global _settings
    if _settings is None:
        _settings = StorageSettings()
    return _settings


def configure(**overrides: object) -> StorageSettings:
    """Replace the process-wide settings.

    Args:
        **overrides: Field values taking precedence over the environment.

    Returns:
        The new StorageSettings instance.
    """
    global _settings
    _settings = StorageSettings(**overrides)  # type: ignore[arg-type]
    return _settings


def reset_settings() -> None:
    """Drop the current settings so the next access reloads the environment."""
    global _settings
    _settings = None
