"""
Pytest configuration and shared fixtures for feedsmith tests
"""
import sys
import pytest
from pathlib import Path

# Add src to Python path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

from feedsmith import Feed  # noqa: E402
from feedsmith.core import settings as settings_module  # noqa: E402


# ========================================
# Settings Fixtures
# ========================================

@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Isolate tests from cached settings and FEEDSMITH_* variables"""
    for key in ("FEEDSMITH_INDENT", "FEEDSMITH_XML_DECLARATION", "FEEDSMITH_LOG_LEVEL", "FEEDSMITH_LOG_FORMAT",
                "FEEDSMITH_LOG_DIR"):
        monkeypatch.delenv(key, raising=False)
    settings_module._settings_cache = None
    yield
    settings_module._settings_cache = None


# ========================================
# Feed Fixtures
# ========================================

@pytest.fixture
def blog_headers():
    """Channel headers of a small blog"""
    return {
        "title": "My Awesome Blog",
        "link": "http://example.com/path/to/this/blog",
        "description": "The best blog in the world!",
    }


@pytest.fixture
def blog_feed(blog_headers):
    """Feed with headers and no items"""
    return Feed(blog_headers)


@pytest.fixture
def podcast_feed():
    """Podcast feed with one episode"""
    feed = Feed({
        "title": "My Awesome Podcast",
        "link": "http://example.com/path/to/this/blog",
        "description": "The best blog and podcast in the world!",
        "itunes": {
            "summary": "The best podcast you've ever heard of",
            "author": "My Name",
            "explicit": False,
            "image": "http://example.com/path/to/podcast/logo.png",
            "owner": {
                "name": "My Name",
                "email": "my.email@example.com",
            },
            "category": "Music",
        },
    })
    feed.add_item({
        "title": "My first show",
        "link": "http://example.com/path/to/this/blog/post/1",
        "pubDate": "2000-11-10 12:32:12 +0000",
        "description": "This is just an awesome podcast episode",
        "enclosure": "http://example.com/path/to/this/blog/assets/1.mp3",
        "itunes": {
            "author": "My Name",
            "duration": "34:12",
        },
    })
    return feed
