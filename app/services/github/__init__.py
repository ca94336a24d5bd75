"""
GitHub service package.

Re-exports all public types and classes.
Usage: `from app.services.github import GitHubActivityReader, RawActivity`

Module structure:
- read_operations.py: Concurrent fetch of the three activity sources
- http_client.py: Shared pooled HTTP client
- helpers.py: Rate limit handling, error and number utilities
- types.py: Raw payload types
- exceptions.py: Custom exceptions
- constants.py: Language colors and validation constants
"""

from app.services.github.constants import (
    DEFAULT_LANGUAGE_COLOR,
    GITHUB_LANGUAGE_COLORS,
    language_color,
)
from app.services.github.exceptions import ActivityFetchError, GitHubAPIError
from app.services.github.helpers import RateLimitInfo, handle_error_response
from app.services.github.http_client import close_http_client
from app.services.github.read_operations import GitHubActivityReader
from app.services.github.types import (
    RawActivity,
    RawContributionCalendar,
    RawContributionDay,
    RawProfile,
    RawRepository,
)

__all__ = [
    # Reader (main entry point)
    "GitHubActivityReader",
    # HTTP client lifecycle
    "close_http_client",
    # Utilities
    "handle_error_response",
    "language_color",
    "RateLimitInfo",
    # Exceptions
    "ActivityFetchError",
    "GitHubAPIError",
    # Types
    "RawActivity",
    "RawContributionCalendar",
    "RawContributionDay",
    "RawProfile",
    "RawRepository",
    # Constants
    "DEFAULT_LANGUAGE_COLOR",
    "GITHUB_LANGUAGE_COLORS",
]
