"""Configuration management for GitHub Paginate."""

import os
from dataclasses import dataclass

from dotenv import load_dotenv

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str, default: bool = False) -> bool:
    """Read a boolean flag from the environment."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUTHY


@dataclass
class Config:
    """Application configuration."""

    github_token: str | None
    github_api_url: str = "https://api.github.com"

    # Link header parsing
    keep_original_link: bool = False
    strict_relations: bool = False

    # Pagination
    default_per_page: int = 100

    # Timeouts
    request_timeout: float = 30.0

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        # override=False ensures environment variables take precedence over .env
        load_dotenv(override=False)

        # Support both GITHUB_PAGINATE_TOKEN (preferred) and GITHUB_TOKEN (fallback)
        token = os.getenv("GITHUB_PAGINATE_TOKEN") or os.getenv("GITHUB_TOKEN")

        return cls(
            github_token=token,
            github_api_url=os.getenv("GITHUB_API_URL", "https://api.github.com"),
            keep_original_link=_env_flag("GITHUB_PAGINATE_KEEP_ORIGINAL_LINK"),
            strict_relations=_env_flag("GITHUB_PAGINATE_STRICT_RELATIONS"),
        )

    @property
    def is_authenticated(self) -> bool:
        """Check if a GitHub token is configured."""
        return bool(self.github_token)

    def link_options(self) -> dict[str, bool]:
        """Link header parser options derived from this configuration."""
        return {
            "keep_original_link": self.keep_original_link,
            "strict_relations": self.strict_relations,
        }


# Global config instance
_config: Config | None = None


def get_config() -> Config:
    """Get or create the global configuration instance."""
    global _config
    if _config is None:
        _config = Config.from_env()
    return _config


def set_config(config: Config | None) -> None:
    """Set the global configuration instance (useful for testing)."""
    global _config
    _config = config
