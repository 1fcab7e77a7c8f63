"""
Application settings and configuration management.

Supports loading from:
1. SOPS-encrypted YAML files (config.enc.yaml)
2. Environment variables (fallback)
"""

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Optional

logger = logging.getLogger(__name__)

DEFAULT_REQUEST_TIMEOUT_SECONDS = 60.0


@dataclass
class Settings:
    """Credentials and client options for the Cloudflare API."""

    # Token auth (preferred)
    cloudflare_api_token: str = ""

    # Legacy global key auth
    cloudflare_email: str = ""
    cloudflare_api_key: str = ""

    # Client options
    cloudflare_base_url: str = ""
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    @property
    def uses_api_token(self) -> bool:
        """True when token auth is configured."""
        return bool(self.cloudflare_api_token)

    def validate(self) -> list[str]:
        """Validate required settings are present. Returns list of errors."""
        errors = []

        if not self.cloudflare_api_token:
            if not (self.cloudflare_email and self.cloudflare_api_key):
                errors.append(
                    "cloudflare.api_token or cloudflare.email + cloudflare.api_key "
                    "is required"
                )
        elif self.cloudflare_api_key:
            errors.append(
                "cloudflare.api_token and cloudflare.api_key are mutually exclusive"
            )

        if self.request_timeout <= 0:
            errors.append(
                f"request_timeout must be > 0, got {self.request_timeout}"
            )

        return errors

    @classmethod
    def from_dict(cls, config: dict[str, Any]) -> "Settings":
        """Create Settings from configuration dictionary (e.g., from SOPS)."""
        cf = config.get("cloudflare", {}) or {}

        return cls(
            cloudflare_api_token=cf.get("api_token", ""),
            cloudflare_email=cf.get("email", ""),
            cloudflare_api_key=cf.get("api_key", ""),
            cloudflare_base_url=cf.get("base_url", ""),
            request_timeout=float(
                cf.get("request_timeout", DEFAULT_REQUEST_TIMEOUT_SECONDS)
            ),
        )

    @classmethod
    def from_env(cls) -> "Settings":
        """Create Settings from environment variables."""

        def safe_float(key: str, default: float) -> float:
            """Safely parse float from env var."""
            try:
                return float(os.environ.get(key, str(default)))
            except ValueError:
                return default

        return cls(
            cloudflare_api_token=os.environ.get("CLOUDFLARE_API_TOKEN", ""),
            cloudflare_email=os.environ.get("CLOUDFLARE_EMAIL", ""),
            cloudflare_api_key=os.environ.get("CLOUDFLARE_API_KEY", ""),
            cloudflare_base_url=os.environ.get("CLOUDFLARE_BASE_URL", ""),
            request_timeout=safe_float(
                "CLOUDFLARE_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT_SECONDS
            ),
        )


# Default config file path
DEFAULT_CONFIG_PATH = Path("config.enc.yaml")


@lru_cache
def get_settings(config_path: Optional[str] = None) -> Settings:
    """
    Get cached settings instance.

    Loads from SOPS-encrypted config file if available, otherwise from env vars.

    Args:
        config_path: Optional path to SOPS-encrypted config file

    Returns:
        Settings instance
    """
    path = Path(config_path) if config_path else DEFAULT_CONFIG_PATH

    if path.exists():
        try:
            from .sops_loader import decrypt_sops_file

            config = decrypt_sops_file(path)
            return Settings.from_dict(config)
        except RuntimeError as e:
            logger.warning(
                f"Failed to load SOPS config from {path}: {e}. "
                f"Falling back to environment variables"
            )

    return Settings.from_env()


def clear_settings_cache() -> None:
    """Clear the cached settings (useful for testing)."""
    get_settings.cache_clear()
