"""Constants for coordinator module."""

from datetime import timedelta

from tankerkoenig_dashboard.const import PAGE_REFRESH_SECONDS

# Fetch cadence, equal to the page's own meta refresh
UPDATE_INTERVAL = timedelta(seconds=PAGE_REFRESH_SECONDS)

# Upper bound for one fetch (matches the API client's total timeout).
# A reading returned by the store is never older than
# UPDATE_INTERVAL + FETCH_TIMEOUT while fetches succeed.
FETCH_TIMEOUT = timedelta(seconds=10)

# Length of the station id prefix shown in log lines
LOG_PREFIX_LENGTH = 8
