"""Factory functions to create storage instances.

The database URL is taken from DATABASE_URL, then AFE_DATABASE_URL, then the
settings default (a local SQLite file). SQLAlchemy selects the driver from the
URL scheme, so SQLite and PostgreSQL share one storage implementation.
"""

import os
from functools import lru_cache

import structlog

logger = structlog.get_logger()


def get_database_url() -> str:
    """Get database URL from environment, with fallback to SQLite."""
    # Check for DATABASE_URL first (standard for cloud platforms)
    url = os.environ.get('DATABASE_URL')
    if url:
        return url

    url = os.environ.get('AFE_DATABASE_URL')
    if url:
        return url

    from ..config.settings import settings
    return settings.database_url


def is_postgres() -> bool:
    """Check if we're using PostgreSQL."""
    url = get_database_url()
    return url.startswith('postgresql://') or url.startswith('postgres://')


@lru_cache(maxsize=1)
def get_feed_storage():
    """Get the shared feed storage instance."""
    from .database import FeedStorage

    url = get_database_url()
    if url.startswith('postgres://'):
        # SQLAlchemy only accepts the postgresql:// scheme
        url = 'postgresql://' + url[len('postgres://'):]

    logger.info("using_feed_storage", backend="postgres" if is_postgres() else "sqlite", url=url[:40] + "...")
    return FeedStorage(url)


def clear_cache():
    """Clear cached instances (useful for testing)."""
    get_feed_storage.cache_clear()
