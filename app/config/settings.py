from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Application
    debug: bool = False
    cors_origins: list[str] = ["http://localhost:3000"]

    # GitHub - the account whose activity the portfolio shows
    github_username: str = "GojurJeevan"
    # Optional token for higher rate limits. Empty string = anonymous requests.
    # Only sent to the GitHub API, never to the contributions provider.
    github_token: str = ""
    github_api_url: str = "https://api.github.com"
    github_api_version: str = "2022-11-28"

    # Outbound HTTP (shared by the GitHub API and the contributions provider)
    # No retries: a timeout fails the refresh cycle
    http_timeout_seconds: float = Field(default=30.0, gt=0)
    http_connect_timeout_seconds: float = Field(default=5.0, gt=0)
    http_max_connections: int = Field(default=20, ge=1)
    http_max_keepalive_connections: int = Field(default=10, ge=0)
    http_user_agent: str = "portfolio-activity-api"

    # Contribution calendar provider (flat list of days + rolling totals)
    contributions_api_url: str = "https://github-contributions-api.jogruber.de/v4"

    # Single bounded page of repositories (GitHub itself caps per_page at 100)
    repos_per_page: int = Field(default=100, ge=1, le=200)

    # Activity state
    # Max number of identities whose last summary is kept in memory
    activity_cache_size: int = Field(default=128, ge=1)
    # Kick off a refresh of github_username when the app starts
    refresh_on_startup: bool = True

    @property
    def github_auth_enabled(self) -> bool:
        """Check if a GitHub token is configured."""
        return bool(self.github_token)


settings = Settings()
