"""Utility functions for Cloudflare tables."""

from .http_utils import get_error_status_code, is_not_found_error

__all__ = [
    # HTTP utilities
    "get_error_status_code",
    "is_not_found_error",
]
