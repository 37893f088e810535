"""Database operations for feed settings."""

from typing import Optional, List, Any
from pathlib import Path

from sqlalchemy.orm import sessionmaker
from sqlalchemy.exc import IntegrityError, OperationalError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential
import structlog

from .models import FeedModel, init_db
from ..config.settings import settings

logger = structlog.get_logger()

_TRUE_STRINGS = {"t", "true", "1", "yes", "y", "on"}


def sql_bool_to_bool(value: Any) -> bool:
    """Convert a database boolean (True, 1, 't', 'true', ...) to a bool."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUE_STRINGS
    return bool(value)


class FeedStorage:
    """SQLite-based storage for feeds and their display settings."""

    def __init__(self, database_url: str = None):
        if database_url is None:
            database_url = settings.database_url

        # Ensure data directory exists
        if database_url.startswith("sqlite:///"):
            db_path = database_url.replace("sqlite:///", "")
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

        self.engine = init_db(database_url)
        self.Session = sessionmaker(bind=self.engine)

    @retry(
        retry=retry_if_exception_type(OperationalError),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=0.1, min=0.1, max=1),
        reraise=True,
    )
    def get_feed_setting(self, feed_id: Any) -> Optional[bool]:
        """Get a feed's always_display_enclosures value, or None if not found."""
        session = self.Session()
        try:
            row = session.query(FeedModel.always_display_enclosures)\
                .filter(FeedModel.id == feed_id)\
                .first()
            if row is None:
                return None
            return sql_bool_to_bool(row[0])
        finally:
            session.close()

    def save_feed(
        self,
        title: str,
        feed_url: str,
        always_display_enclosures: bool = False
    ) -> Optional[int]:
        """Save feed, return ID or None if the URL is already subscribed."""
        session = self.Session()
        try:
            model = FeedModel(
                title=title,
                feed_url=feed_url,
                always_display_enclosures=always_display_enclosures,
            )
            session.add(model)
            session.commit()
            feed_id = model.id
            logger.info("feed_saved", id=feed_id, url=feed_url[:50])
            return feed_id
        except IntegrityError:
            session.rollback()
            logger.debug("feed_duplicate", url=feed_url[:50])
            return None
        finally:
            session.close()

    def set_always_display(self, feed_id: int, value: bool) -> bool:
        """Update a feed's always_display_enclosures setting."""
        session = self.Session()
        try:
            model = session.get(FeedModel, feed_id)
            if not model:
                return False
            model.always_display_enclosures = value
            session.commit()
            logger.info("feed_setting_updated", id=feed_id, always_display_enclosures=value)
            return True
        finally:
            session.close()

    def get_feed(self, feed_id: int) -> Optional[dict]:
        """Get a specific feed by ID."""
        session = self.Session()
        try:
            model = session.get(FeedModel, feed_id)
            return self._model_to_dict(model) if model else None
        finally:
            session.close()

    def list_feeds(self) -> List[dict]:
        """List all feeds ordered by ID."""
        session = self.Session()
        try:
            models = session.query(FeedModel).order_by(FeedModel.id).all()
            return [self._model_to_dict(m) for m in models]
        finally:
            session.close()

    def _model_to_dict(self, model: FeedModel) -> dict:
        return {
            "id": model.id,
            "title": model.title,
            "feed_url": model.feed_url,
            "always_display_enclosures": sql_bool_to_bool(model.always_display_enclosures),
            "created_at": model.created_at,
        }
