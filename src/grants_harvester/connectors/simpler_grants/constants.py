"""Simpler.Grants.gov endpoint paths and search constants."""

# Endpoints (relative to base URL)
SEARCH_PATH = "/v1/opportunities/search"
DETAIL_PATH_TEMPLATE = "/v1/opportunities/{opportunity_id}"

# Auth
API_KEY_HEADER = "X-API-Key"

# Search filters
OPPORTUNITY_STATUSES = ["posted"]
FUNDING_INSTRUMENTS = ["grant"]

# Sort
SORT_FIELD = "opportunity_id"
SORT_DIRECTION = "ascending"

# Attachment defaults
UNKNOWN_MIME_TYPE = "unknown"
