"""
Constants for the Cloudflare table adapters.

Includes:
- Table names exposed to the host query engine
- Pagination defaults for Cloudflare v4 listing endpoints
- Error markers used to classify "not found" responses
"""

# =============================================================================
# Table Names
# =============================================================================

CUSTOM_HOSTNAME_TABLE = "cloudflare_custom_hostname"

# =============================================================================
# Pagination
# =============================================================================

# Cloudflare v4 listing endpoints are 1-indexed
FIRST_PAGE = 1

# =============================================================================
# Error Classification
# =============================================================================

NOT_FOUND_STATUS_CODE = 404

# Substrings that mark an error message as a 404 from the API
NOT_FOUND_MARKERS = [
    "HTTP status 404",
]

# =============================================================================
# Filters
# =============================================================================

# Query parameter names sent to the custom hostname listing endpoint
HOSTNAME_FILTER_PARAMS = {
    "name": "hostname",
    "status": "status",
}
