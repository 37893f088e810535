"""Application settings with environment variable support."""

from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from pathlib import Path


# Repository root; the default database lives under data/
_BASE_DIR = Path(__file__).parent.parent.parent.resolve()


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="AFE_",  # AFE_DATABASE_URL, AFE_ENABLE_FEED_LOOKUP, etc.
    )

    # Database
    database_url: str = f"sqlite:///{_BASE_DIR / 'data' / 'feeds.db'}"

    # Filtering
    enable_feed_lookup: bool = True  # False trusts the record flag, defaulting to true

    # Plugins loaded by the CLI host
    plugins: List[str] = ["af_filter_enclosures"]


settings = Settings()
