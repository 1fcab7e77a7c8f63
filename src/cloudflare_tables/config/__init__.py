"""Configuration module."""

from .constants import (
    CUSTOM_HOSTNAME_TABLE,
    FIRST_PAGE,
    NOT_FOUND_MARKERS,
)
from .settings import Settings, clear_settings_cache, get_settings
from .sops_loader import decrypt_sops_file

__all__ = [
    # Table configuration
    "CUSTOM_HOSTNAME_TABLE",
    "FIRST_PAGE",
    "NOT_FOUND_MARKERS",
    # Settings
    "Settings",
    "get_settings",
    "clear_settings_cache",
    # Config loading
    "decrypt_sops_file",
]
