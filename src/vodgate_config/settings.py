"""Application settings loaded from environment variables.

Configuration file discovery (in priority order):
1. OS environment variables (always highest priority)
2. VODGATE_ENV_FILE environment variable (absolute path to .env file)
3. config/.env.dev - local development
4. config/.env - production/Docker

Variable names match the deployment environment of the gateway
(SITES_JSON, REMOTE_DB_URL, TMDB_API_KEY, TMDB_PROXY_URL, ACCESS_PASSWORD).

Uses pydantic-settings for automatic type coercion and validation.
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


def _find_project_root() -> Path:
    """Find the project root directory."""
    current = Path(__file__).resolve().parent

    for parent in [current, *current.parents]:
        if (parent / "config").is_dir():
            return parent
        if (parent / ".git").is_dir():
            return parent
        if parent == Path("/app"):
            return parent

    return Path(__file__).resolve().parents[2]


def get_config_dir() -> Path:
    """Get the config directory path."""
    return _find_project_root() / "config"


def _resolve_env_file_path() -> Path | None:
    """Resolve the .env file path.

    Priority:
    1. VODGATE_ENV_FILE env var (full path)
    2. config/.env.dev (local development)
    3. config/.env (production)
    """
    env_file_path = os.environ.get("VODGATE_ENV_FILE")
    if env_file_path:
        path = Path(env_file_path)
        if not path.is_absolute():
            path = _find_project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()

    dev_env = config_dir / ".env.dev"
    if dev_env.exists():
        return dev_env

    prod_env = config_dir / ".env"
    if prod_env.exists():
        return prod_env

    return None


class Settings(BaseSettings):
    """Gateway configuration loaded from environment variables.

    Values are loaded from:
    1. OS environment variables (highest priority)
    2. .env file (config/.env.dev or config/.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_file=_resolve_env_file_path(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "vodgate"
    debug: bool = False

    # API (API_ prefix)
    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False

    # Source registry tiers (first success wins)
    sites_json: str | None = None  # Inline JSON or Base64-encoded JSON
    remote_db_url: str | None = None  # Fetched live on every resolution

    # Fan-out search
    search_timeout_seconds: float = 8.0

    # Upstream HTTP
    upstream_timeout_seconds: float = 30.0
    proxy_user_agent: str = "Mozilla/5.0"

    # TMDB metadata API (TMDB_ prefix)
    tmdb_api_key: SecretStr | None = None
    tmdb_proxy_url: str = ""
    tmdb_api_base: str = "https://api.themoviedb.org/3"
    tmdb_image_base: str = "https://image.tmdb.org/t/p"
    tmdb_language: str = "zh-CN"

    # Access gating: comma-separated list of accepted passwords
    access_password: SecretStr | None = None

    # Logging (LOG_ prefix)
    log_level: str = "INFO"

    # Derived properties
    @property
    def accepted_passwords(self) -> list[str]:
        """Parse accepted passwords from the comma-separated secret."""
        if self.access_password is None:
            return []
        raw = self.access_password.get_secret_value()
        return [p.strip() for p in raw.split(",") if p.strip()]

    @property
    def require_password(self) -> bool:
        return len(self.accepted_passwords) > 0

    @property
    def multi_user_mode(self) -> bool:
        return len(self.accepted_passwords) > 1

    @property
    def tmdb_enabled(self) -> bool:
        return bool(self.tmdb_api_key and self.tmdb_api_key.get_secret_value())


@lru_cache()
def get_settings() -> Settings:
    """Return cached application settings."""
    return Settings()


def clear_settings_cache() -> None:
    """Clear the settings cache (useful for tests)."""
    get_settings.cache_clear()
