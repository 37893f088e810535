"""SQLAlchemy models for the feed database."""

from datetime import datetime

from sqlalchemy import create_engine, Column, Integer, String, Text, Boolean, DateTime
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class FeedModel(Base):
    """Database model for subscribed feeds."""
    __tablename__ = "feeds"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(Text, nullable=False, default="")
    feed_url = Column(String(2048), unique=True, nullable=False)

    # Web UI shows enclosures only when set; API responses honour it too
    always_display_enclosures = Column(Boolean, nullable=False, default=False)

    created_at = Column(DateTime, default=datetime.utcnow)


def init_db(database_url: str):
    """Initialize database and create all tables."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return engine
