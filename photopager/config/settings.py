"""Application settings loaded from environment variables via pydantic-settings.

Values come from (highest priority first) environment variables, then a
``.env`` file in the working directory, then the defaults below.  Field
``feed_page_size`` maps to env var ``FEED_PAGE_SIZE`` and so on.

The API consumer key itself is NOT a setting: it lives in a single-line
secret file (``feed_api_key_file``) and is read once at startup by
:func:`photopager.config.credentials.load_consumer_key`.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """photopager settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # === Feed API ===
    feed_base_url: str = "https://api.500px.com/v1"
    feed_api_key_file: str = "config/API.key"
    feed_default_feature: str = "popular"
    feed_page_size: int = Field(default=20, ge=1, le=100)
    # Hard upper bound on one request; a timeout is abandoned like any other failure.
    feed_timeout_seconds: float = Field(default=30.0, gt=0)

    # === App Config ===
    app_env: str = "development"
    log_level: str = "INFO"
