"""Constants for GitHub service."""

import re

# Colors for the language distribution chart.
# Lookup is exact and case-sensitive; anything else gets DEFAULT_LANGUAGE_COLOR.
GITHUB_LANGUAGE_COLORS: dict[str, str] = {
    "JavaScript": "#f7df1e",
    "TypeScript": "#3178c6",
    "HTML": "#e34c26",
    "CSS": "#264de4",
    "Java": "#b07219",
    "Python": "#3776AB",
}

DEFAULT_LANGUAGE_COLOR = "#8e8e8e"

# GitHub logins: alphanumerics and hyphens, max length 39
USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9-]{1,39}$")

# Source names used in logs and ActivityFetchError
SOURCE_PROFILE = "profile"
SOURCE_REPOSITORIES = "repositories"
SOURCE_CONTRIBUTIONS = "contributions"


def language_color(name: str) -> str:
    """Return the chart color for a language name, or the fallback color."""
    return GITHUB_LANGUAGE_COLORS.get(name, DEFAULT_LANGUAGE_COLOR)


def is_valid_username(identity: str) -> bool:
    """Check that an identity looks like a GitHub login."""
    return bool(USERNAME_PATTERN.match(identity))
