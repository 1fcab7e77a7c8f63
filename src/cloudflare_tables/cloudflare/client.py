"""
Cloudflare API client construction.

Each table invocation gets a fresh client built from the configured
credentials; nothing is shared between invocations.
"""

import logging
from typing import Any, Optional

import httpx
from cloudflare import Cloudflare

from ..config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


class CloudflareConfigError(ValueError):
    """Raised when settings cannot produce an authenticated client."""


def get_cloudflare_client(settings: Optional[Settings] = None) -> Cloudflare:
    """
    Create authenticated Cloudflare client.

    Token auth is used when an API token is configured; otherwise the
    email + global API key pair is used.

    Args:
        settings: Application settings (uses default if None)

    Returns:
        Authenticated Cloudflare client

    Raises:
        CloudflareConfigError: If the settings fail validation
    """
    if settings is None:
        settings = get_settings()

    errors = settings.validate()
    if errors:
        raise CloudflareConfigError("; ".join(errors))

    kwargs: dict[str, Any] = {
        "timeout": httpx.Timeout(settings.request_timeout),
        # Failures surface to the caller on the first attempt
        "max_retries": 0,
    }
    if settings.cloudflare_base_url:
        kwargs["base_url"] = settings.cloudflare_base_url

    if settings.uses_api_token:
        logger.debug("Connecting to Cloudflare with API token")
        return Cloudflare(api_token=settings.cloudflare_api_token, **kwargs)

    logger.debug("Connecting to Cloudflare with email + API key")
    return Cloudflare(
        api_email=settings.cloudflare_email,
        api_key=settings.cloudflare_api_key,
        **kwargs,
    )
