"""
Unit tests for the feed document builder

Tests item storage, date sorting, lastBuildDate defaulting, namespace
declarations and rendering of complete feeds.
"""

import pytest
import xml.etree.ElementTree as ET
from datetime import datetime, timezone

from feedsmith import Feed, create_feed
from feedsmith.core.exceptions import InvalidDateError, InvalidFieldShapeError
from feedsmith.core.models import Node
from feedsmith.core.namespaces import NAMESPACES
from feedsmith.core.registry import DEFAULT_REGISTRY


ITUNES = {"itunes": NAMESPACES["itunes"]}


def _channel(feed):
    return feed.build().children[0]


def _item_dates(channel):
    return [item.find("pubDate").text for item in channel.findall("item")]


# ========================================
# Item Tests
# ========================================

class TestAddItem:
    """Test adding items"""

    def test_items_are_stored_in_order(self):
        feed = create_feed()
        feed.add_item({"title": "test1"})
        feed.add_item({"title": "test2"})
        assert len(feed) == 2
        assert [entry.nodes for entry in feed.entries] == [
            [Node.leaf("title", "test1")],
            [Node.leaf("title", "test2")],
        ]

    def test_fields_keep_insertion_order(self):
        feed = Feed()
        entry = feed.add_item({"title": "t", "link": "l", "description": "d"})
        assert [node.name for node in entry.nodes] == ["title", "link", "description"]

    def test_pub_date_becomes_sort_key(self):
        feed = Feed()
        entry = feed.add_item({"pubDate": "2007-01-01"})
        assert entry.sort_key == datetime(2007, 1, 1, tzinfo=timezone.utc)
        assert entry.fields["pubDate"] is entry.sort_key

    def test_item_without_date_has_no_sort_key(self):
        entry = Feed().add_item({"title": "undated"})
        assert entry.sort_key is None
        assert not entry.has_sort_key

    def test_sort_key_is_not_rendered(self):
        feed = Feed()
        feed.add_item({"title": "t", "pubDate": datetime(2010, 1, 1)})
        item = _channel(feed).find("item")
        assert [node.name for node in item.children] == ["title", "pubDate"]

    def test_caller_mapping_is_not_mutated(self):
        fields = {"pubDate": "2007-01-01", "enclosure": {"url": "http://example.com/1.mp3"}}
        Feed().add_item(fields)
        assert fields == {"pubDate": "2007-01-01", "enclosure": {"url": "http://example.com/1.mp3"}}

    def test_add_entry_alias(self):
        feed = Feed()
        feed.add_entry({"title": "t"})
        assert len(feed.entries) == 1

    def test_invalid_shape_is_reported_when_added(self):
        feed = Feed()
        with pytest.raises(InvalidFieldShapeError) as exc_info:
            feed.add_item({"title": "t", "source": "http://example.com/other.rss"})
        assert exc_info.value.field == "source"
        assert len(feed) == 0

    def test_invalid_date_is_reported_when_added(self):
        feed = Feed()
        with pytest.raises(InvalidDateError):
            feed.add_item({"pubDate": "garbage"})
        assert len(feed) == 0

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_pub_date_is_omitted(self, value):
        feed = Feed()
        entry = feed.add_item({"title": "undated", "pubDate": value})
        assert not entry.has_sort_key
        assert entry.nodes == [Node.leaf("title", "undated")]

        channel = _channel(feed)
        item = channel.find("item")
        assert item.find("pubDate") is None
        assert channel.find("lastBuildDate") is None


# ========================================
# Header Tests
# ========================================

class TestHeaders:
    """Test channel header handling"""

    def test_headers_are_copied(self, blog_headers):
        feed = Feed(blog_headers)
        feed.add_item({"pubDate": "2008-01-01"})
        feed.build()
        assert "lastBuildDate" not in blog_headers
        assert "lastBuildDate" in feed.headers

    def test_invalid_header_shape(self):
        with pytest.raises(InvalidFieldShapeError):
            Feed({"cloud": "example.com"})

    def test_set_header_validates(self, blog_feed):
        with pytest.raises(InvalidFieldShapeError):
            blog_feed.set_header("itunes", ["not", "a", "mapping"])
        assert "itunes" not in blog_feed.headers

    def test_header_dates_are_canonical(self):
        feed = Feed({"pubDate": "2014-10-31 18:12:21 +0000"})
        assert isinstance(feed.headers["pubDate"], datetime)
        assert _channel(feed).children == [Node.leaf("pubDate", "Fri, 31 Oct 2014 18:12:21 +0000")]

    def test_header_order_is_kept(self, blog_feed):
        assert [node.name for node in _channel(blog_feed).children] == ["title", "link", "description"]

    @pytest.mark.parametrize("value", [None, ""])
    def test_empty_header_pub_date_is_omitted(self, value):
        feed = Feed({"title": "t", "pubDate": value})
        assert _channel(feed).children == [Node.leaf("title", "t")]

    def test_empty_pub_date_set_after_construction(self):
        feed = Feed({"title": "t"})
        feed.set_header("pubDate", "")
        feed.add_item({"title": "x", "pubDate": "2008-01-01"})
        channel = _channel(feed)
        assert channel.find("pubDate") is None
        assert channel.find("lastBuildDate").text == "Tue, 01 Jan 2008 00:00:00 +0000"


# ========================================
# Build Tests
# ========================================

class TestBuild:
    """Test document tree assembly"""

    def test_generates_tree(self):
        feed = Feed({"title": "test"})
        feed.add_item({"title": "test"})

        assert feed.build() == Node(name="rss", attrs={"version": "2.0"}, children=[
            Node(name="channel", children=[
                Node.leaf("title", "test"),
                Node(name="item", children=[Node.leaf("title", "test")]),
            ]),
        ])

    def test_adds_namespaces(self):
        feed = Feed()
        feed.add_item({"creator": "test"})
        root = feed.build()

        assert root.attrs == {"xmlns:dc": "http://purl.org/dc/elements/1.1/", "version": "2.0"}
        assert list(root.attrs) == ["xmlns:dc", "version"]
        assert root.children[0].children == [Node(name="item", children=[Node.leaf("dc:creator", "test")])]

    def test_namespace_order_follows_document_order(self):
        feed = Feed({"itunes": {"author": "a"}})
        feed.add_item({"pubDate": "2001-01-01", "media": "http://example.com/1.jpg"})
        feed.add_item({"pubDate": "2002-01-01", "creator": "x", "itunes": {"duration": "1:00"}})
        root = feed.build()
        assert list(root.attrs) == ["xmlns:itunes", "xmlns:dc", "xmlns:media", "version"]

    def test_namespaces_are_recomputed_each_build(self):
        feed = Feed()
        feed.add_item({"creator": "x"})
        feed.build()
        feed.build()
        assert feed.namespaces == ["dc"]

    def test_sorts_items_by_date(self):
        feed = Feed()
        feed.add_item({"pubDate": "2007-01-01"})
        feed.add_item({"pubDate": "2006-01-01"})
        feed.add_item({"pubDate": "2008-01-01"})

        channel = _channel(feed)

        assert channel.children[0].name == "lastBuildDate"
        assert " 2008 " in channel.children[0].text
        assert [" 2008 " in date for date in _item_dates(channel)] == [True, False, False]
        assert " 2007 " in _item_dates(channel)[1]
        assert " 2006 " in _item_dates(channel)[2]
        assert feed.headers["lastBuildDate"] == datetime(2008, 1, 1, tzinfo=timezone.utc)

    def test_undated_items_sort_last_in_insertion_order(self):
        feed = Feed()
        feed.add_item({"title": "a"})
        feed.add_item({"title": "b", "pubDate": "2006-01-01"})
        feed.add_item({"title": "c"})
        feed.add_item({"title": "d", "pubDate": "2008-01-01"})
        feed.add_item({"title": "e"})

        titles = [item.find("title").text for item in _channel(feed).findall("item")]
        assert titles == ["d", "b", "a", "c", "e"]

    def test_equal_dates_keep_insertion_order(self):
        feed = Feed()
        for title in ["first", "second", "third"]:
            feed.add_item({"title": title, "pubDate": "2010-05-05 10:00:00 +0000"})
        feed.add_item({"title": "newer", "pubDate": "2011-01-01"})

        titles = [item.find("title").text for item in _channel(feed).findall("item")]
        assert titles == ["newer", "first", "second", "third"]

    def test_no_last_build_date_without_dated_items(self):
        feed = Feed()
        feed.add_item({"title": "undated"})
        feed.build()
        assert "lastBuildDate" not in feed.headers

    def test_explicit_last_build_date_is_kept(self):
        feed = Feed({"lastBuildDate": "2001-01-01"})
        feed.add_item({"pubDate": "2008-01-01"})
        feed.build()
        assert feed.headers["lastBuildDate"] == datetime(2001, 1, 1, tzinfo=timezone.utc)

    def test_build_is_idempotent(self, podcast_feed):
        podcast_feed.add_item({"title": "undated"})
        podcast_feed.add_item({"title": "older", "pubDate": "1999-01-01", "creator": "x"})
        assert podcast_feed.build() == podcast_feed.build()

    def test_channel_image_defaults(self, blog_headers):
        feed = Feed(dict(blog_headers, image="http://example.com/logo.png"))
        image = _channel(feed).find("image")
        assert image.find("title").text == "My Awesome Blog"
        assert image.find("link").text == "http://example.com/path/to/this/blog"

    def test_custom_registry(self):
        registry = DEFAULT_REGISTRY.copy()
        registry.register_namespace("podcast", "https://podcastindex.org/namespace/1.0")
        registry.register_extension(
            "locked", "podcast",
            lambda feed, node, value: node.append(Node.leaf("podcast:locked", "yes" if value else "no")),
        )

        feed = Feed({"locked": True}, registry=registry)
        root = feed.build()
        assert root.attrs["xmlns:podcast"] == "https://podcastindex.org/namespace/1.0"
        assert root.children[0].children == [Node.leaf("podcast:locked", "yes")]


# ========================================
# Render Tests
# ========================================

class TestRender:
    """Test rendering complete feeds"""

    def test_empty_feed_compact(self):
        feed = Feed()
        assert feed.render(indent=False) == (
            '<?xml version="1.0" encoding="UTF-8"?><rss version="2.0"><channel></channel></rss>'
        )

    def test_default_indentation(self):
        assert Feed().render() == (
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            '<rss version="2.0">\n'
            '  <channel></channel>\n'
            '</rss>'
        )

    def test_configured_indentation(self, monkeypatch):
        monkeypatch.setenv("FEEDSMITH_INDENT", "false")
        assert Feed().render().startswith('<?xml version="1.0" encoding="UTF-8"?><rss')

    def test_podcast_feed(self, podcast_feed):
        xml_content = podcast_feed.render()
        root = ET.fromstring(xml_content)

        assert root.tag == "rss"
        assert root.get("version") == "2.0"

        channel = root.find("channel")
        assert channel.find("title").text == "My Awesome Podcast"
        assert channel.find("itunes:explicit", ITUNES).text == "No"
        assert channel.find("itunes:owner/itunes:email", ITUNES).text == "my.email@example.com"
        assert channel.find("itunes:image", ITUNES).get("href") == "http://example.com/path/to/podcast/logo.png"
        assert channel.find("itunes:category", ITUNES).get("text") == "Music"
        assert channel.find("lastBuildDate").text == "Fri, 10 Nov 2000 12:32:12 +0000"

        item = channel.find("item")
        assert item.find("pubDate").text == "Fri, 10 Nov 2000 12:32:12 +0000"
        assert item.find("enclosure").get("type") == "audio/mpeg"
        assert item.find("enclosure").get("length") == "0"
        assert item.find("itunes:duration", ITUNES).text == "34:12"

    def test_namespace_declarations_in_output(self, podcast_feed):
        xml_content = podcast_feed.render(indent=False)
        assert '<rss xmlns:itunes="http://www.itunes.com/dtds/podcast-1.0.dtd" version="2.0">' in xml_content
