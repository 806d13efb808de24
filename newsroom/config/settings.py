"""Configuration settings for the Newsroom reader."""

from dataclasses import dataclass
from pathlib import Path
import os

from dotenv import load_dotenv


DEFAULT_MAX_PAGE = 10
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30.0
DEFAULT_USER_AGENT = "Newsroom/1.0 (News Reader)"


class ConfigurationError(Exception):
    """Raised when configuration validation fails."""

    pass


@dataclass
class Settings:
    """Configuration settings for the Newsroom reader.

    Attributes:
        max_page: Default number of items to show per source
        request_timeout_seconds: Timeout for each HTTP request
        user_agent: User-Agent header sent to every source
        max_workers: Upper bound on concurrent fetches; 0 means one
            worker per requested source
    """

    max_page: int = DEFAULT_MAX_PAGE
    request_timeout_seconds: float = DEFAULT_REQUEST_TIMEOUT_SECONDS
    user_agent: str = DEFAULT_USER_AGENT
    max_workers: int = 0

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ConfigurationError: If any configuration value is invalid.
        """
        errors: list[str] = []

        if self.max_page < 1:
            errors.append("max_page must be at least 1")

        if self.request_timeout_seconds <= 0.0:
            errors.append("request_timeout_seconds must be positive")

        if not self.user_agent.strip():
            errors.append("user_agent must not be empty")

        if self.max_workers < 0:
            errors.append("max_workers must be non-negative")

        if errors:
            raise ConfigurationError("; ".join(errors))


def _parse_float(value: str | None, default: float) -> float:
    """Parse a string to float, returning default if None or invalid."""
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _parse_int(value: str | None, default: int) -> int:
    """Parse a string to int, returning default if None or invalid."""
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def load_settings(env_path: str | Path | None = None, validate: bool = True) -> Settings:
    """Load settings from environment variables and .env file.

    Args:
        env_path: Optional path to .env file. If None, searches for .env
                  in current directory and parent directories.
        validate: If True, validate settings after loading.

    Returns:
        Settings instance with loaded configuration.

    Raises:
        ConfigurationError: If validate=True and configuration is invalid.
    """
    if env_path:
        load_dotenv(env_path)
    else:
        load_dotenv()

    settings = Settings(
        max_page=_parse_int(os.getenv("MAX_PAGE"), DEFAULT_MAX_PAGE),
        request_timeout_seconds=_parse_float(
            os.getenv("REQUEST_TIMEOUT_SECONDS"), DEFAULT_REQUEST_TIMEOUT_SECONDS
        ),
        user_agent=os.getenv("USER_AGENT", DEFAULT_USER_AGENT),
        max_workers=_parse_int(os.getenv("MAX_WORKERS"), 0),
    )

    if validate:
        settings.validate()

    return settings
