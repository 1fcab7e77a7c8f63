"""Cloudflare API client module."""

from .client import CloudflareConfigError, get_cloudflare_client

__all__ = [
    "CloudflareConfigError",
    "get_cloudflare_client",
]
