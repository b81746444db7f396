"""Application-wide constants.

This module centralizes magic numbers used by the analytics endpoint.
For environment-specific configuration, see config.py.
"""

# =============================================================================
# Analytics Window
# =============================================================================

# Trailing window used when the client sends no period (days)
DEFAULT_ANALYTICS_PERIOD_DAYS: int = 30

# Largest window a client may request (days)
MAX_ANALYTICS_PERIOD_DAYS: int = 365

# Growth rates are reported with this many decimal places
GROWTH_RATE_PRECISION: int = 2

# =============================================================================
# Distributions
# =============================================================================

# Number of countries in the universities-by-country breakdown
TOP_COUNTRIES_LIMIT: int = 10

# =============================================================================
# Activity Feed
# =============================================================================

# Maximum number of items returned in the merged feed
ACTIVITY_FEED_LIMIT: int = 10

# Per-source limits before merging
RECENT_APPLICATIONS_LIMIT: int = 5
RECENT_REGISTRATIONS_LIMIT: int = 3
RECENT_UNIVERSITIES_LIMIT: int = 2

# =============================================================================
# Roles
# =============================================================================

# Roles allowed to read the admin dashboard (compared case-insensitively)
ADMIN_ROLES: frozenset[str] = frozenset({"admin", "super_admin"})

# Roles whose registrations appear in the activity feed
FEED_REGISTRATION_ROLES: tuple[str, ...] = ("STUDENT", "COUNSELOR")
