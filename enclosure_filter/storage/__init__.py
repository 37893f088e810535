"""Database storage and models."""

from .database import FeedStorage, sql_bool_to_bool
from .models import FeedModel, init_db

__all__ = ["FeedStorage", "FeedModel", "init_db", "sql_bool_to_bool"]
