"""Pytest configuration and shared fixtures."""

import pytest
import tempfile
import os
from pathlib import Path

# Add project root to path
import sys
sys.path.insert(0, str(Path(__file__).parent.parent))


@pytest.fixture
def temp_db():
    """Provide a temporary database file."""
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = f.name
    yield f"sqlite:///{db_path}"
    # Cleanup
    try:
        os.unlink(db_path)
    except FileNotFoundError:
        pass


@pytest.fixture
def feed_storage(temp_db):
    """Provide a FeedStorage backed by a temporary database."""
    from enclosure_filter.storage.database import FeedStorage
    return FeedStorage(temp_db)


@pytest.fixture
def sample_attachments():
    """Provide attachments as the API renders them."""
    return [
        {
            "id": 7,
            "content_url": "https://lemmy.example/pictrs/image/cat.jpg",
            "content_type": "image/jpeg",
            "title": "",
            "duration": "",
            "width": 0,
            "height": 0,
            "post_id": 1201,
        }
    ]


@pytest.fixture
def sample_headline(sample_attachments):
    """Provide a getHeadlines record (carries the display flag)."""
    return {
        "id": 1201,
        "title": "Look at this cat",
        "feed_id": 3,
        "always_display_attachments": False,
        "attachments": sample_attachments,
        "content": '<p><img src="https://lemmy.example/pictrs/image/cat.jpg"></p>',
    }


@pytest.fixture
def sample_article(sample_attachments):
    """Provide a getArticle record (no display flag)."""
    return {
        "id": 1201,
        "title": "Look at this cat",
        "feed_id": 3,
        "attachments": sample_attachments,
        "content": '<p><img src="https://lemmy.example/pictrs/image/cat.jpg"></p>',
    }
