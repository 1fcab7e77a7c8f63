"""
HTTP utility functions.

Helpers for classifying errors raised by the Cloudflare client.
"""

from typing import Iterable, Optional

import httpx

from ..config.constants import NOT_FOUND_MARKERS, NOT_FOUND_STATUS_CODE


def get_error_status_code(error: BaseException) -> Optional[int]:
    """
    Extract the HTTP status code carried by an exception, if any.

    Supports:
        - cloudflare.APIStatusError (``status_code`` attribute)
        - httpx.HTTPStatusError (``response.status_code``)
        - any exception exposing an integer ``status_code``

    Args:
        error: Exception raised by an API call

    Returns:
        Status code, or None if the exception carries none

    Examples:
        >>> get_error_status_code(ValueError("boom"))
        None
    """
    if isinstance(error, httpx.HTTPStatusError):
        return error.response.status_code

    status_code = getattr(error, "status_code", None)
    if isinstance(status_code, int):
        return status_code

    response = getattr(error, "response", None)
    status_code = getattr(response, "status_code", None)
    if isinstance(status_code, int):
        return status_code

    return None


def is_not_found_error(
    error: BaseException,
    markers: Optional[Iterable[str]] = None,
) -> bool:
    """
    Check if an exception represents a 404 from the API.

    Args:
        error: Exception raised by an API call
        markers: Message substrings that also count as not found
                 (uses NOT_FOUND_MARKERS if None)

    Returns:
        True if the status code is 404 or the message contains a marker
    """
    if get_error_status_code(error) == NOT_FOUND_STATUS_CODE:
        return True

    if markers is None:
        markers = NOT_FOUND_MARKERS

    message = str(error)
    return any(marker in message for marker in markers)
