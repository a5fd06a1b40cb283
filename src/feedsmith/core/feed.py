"""
RSS feed document builder

Collects channel headers and items, encodes every field through the
encoder registry and assembles the ``rss`` node tree. Every build
recomputes the whole document from the current headers and items.
"""

from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from .. import encoders  # noqa: F401  registers the default encoders
from ..rendering import render_tree
from .formatting import to_timestamp
from .logger import get_logger
from .models import FeedEntry, Node
from .namespaces import NamespaceTracker
from .registry import DEFAULT_REGISTRY, EncoderRegistry
from .settings import get_settings

logger = get_logger('feedsmith.feed')

RSS_VERSION = "2.0"
ENTRY_DATE_FIELD = "pubDate"
LAST_UPDATED_FIELD = "lastBuildDate"
HEADER_DATE_FIELDS = (LAST_UPDATED_FIELD, "pubDate")


class Feed:
    """
    RSS 2.0 feed

    Headers are key-value pairs for the ``<channel>`` element; items are
    added with :meth:`add_item`. Keys with a registered encoder (``image``,
    ``itunes``, ``media``, ...) are expanded by that encoder, anything else
    becomes a plain element.
    """

    def __init__(self,
                 headers: Optional[Mapping[str, Any]] = None,
                 registry: Optional[EncoderRegistry] = None):
        """
        Initialize feed

        Args:
            headers: Key-value pairs for the ``<channel>`` element
            registry: Encoder registry (defaults to the built-in encoders)

        Raises:
            InvalidFieldShapeError: if a header value has an unusable shape
            InvalidDateError: if a header date cannot be parsed
        """
        self.registry = registry if registry is not None else DEFAULT_REGISTRY
        self.headers: Dict[str, Any] = {}
        self._entries: List[FeedEntry] = []
        # namespaces used by the current build
        self._namespaces = NamespaceTracker()

        for key, value in (headers or {}).items():
            self.set_header(key, value)

    @property
    def entries(self) -> Tuple[FeedEntry, ...]:
        return tuple(self._entries)

    @property
    def namespaces(self) -> List[str]:
        """Namespace prefixes declared by the last build"""
        return list(self._namespaces)

    def __len__(self) -> int:
        return len(self._entries)

    def set_header(self, key: str, value: Any) -> None:
        """Set a channel header, checking its shape first"""
        self.registry.validate(key, value)
        if key in HEADER_DATE_FIELDS and value:
            value = to_timestamp(value, field=key)
        self.headers[key] = value

    def add_item(self, item: Mapping[str, Any]) -> FeedEntry:
        """
        Add an ``<item>`` element to the feed

        Args:
            item: Key-value pairs for the item

        Returns:
            The stored entry

        Raises:
            InvalidFieldShapeError: if a field value has an unusable shape
            InvalidDateError: if ``pubDate`` cannot be parsed
        """
        fields = dict(item or {})

        for key, value in fields.items():
            self.registry.validate(key, value)

        sort_key = None
        if fields.get(ENTRY_DATE_FIELD):
            sort_key = to_timestamp(fields[ENTRY_DATE_FIELD], field=ENTRY_DATE_FIELD)
            fields[ENTRY_DATE_FIELD] = sort_key

        entry = FeedEntry(fields=fields, sort_key=sort_key)
        tracker = NamespaceTracker()
        for key, value in fields.items():
            self.registry.encode(self, entry.nodes, key, value, tracker)
        entry.namespaces = list(tracker)

        self._entries.append(entry)
        logger.debug(
            "Added item with %d fields", len(fields),
            extra={'entries': len(self._entries), 'namespaces': entry.namespaces}
        )
        return entry

    add_entry = add_item

    def _sort_entries(self) -> None:
        """Newest first; undated entries last, insertion order kept on ties"""
        dated = [entry for entry in self._entries if entry.has_sort_key]
        undated = [entry for entry in self._entries if not entry.has_sort_key]
        dated.sort(key=lambda entry: entry.sort_key, reverse=True)
        self._entries = dated + undated

    def _canonicalize_header_dates(self) -> None:
        for key in HEADER_DATE_FIELDS:
            if self.headers.get(key):
                self.headers[key] = to_timestamp(self.headers[key], field=key)

    def build(self) -> Node:
        """
        Compose the document tree

        Returns:
            ``rss`` root node with namespace declarations and the version
            attribute, containing the ``channel`` element
        """
        self._namespaces.reset()
        self._sort_entries()

        # lastBuildDate defaults to the date of the newest item
        if not self.headers.get(LAST_UPDATED_FIELD) and self._entries and self._entries[0].has_sort_key:
            self.headers[LAST_UPDATED_FIELD] = self._entries[0].sort_key

        self._canonicalize_header_dates()

        channel: List[Node] = []
        for key, value in self.headers.items():
            self.registry.encode(self, channel, key, value, self._namespaces)

        for entry in self._entries:
            self._namespaces.update(entry.namespaces)
            channel.append(entry.to_node())

        attrs = self._namespaces.declarations(self.registry.namespaces)
        attrs["version"] = RSS_VERSION

        logger.debug(
            "Built feed with %d items", len(self._entries),
            extra={'entries': len(self._entries), 'channel_fields': len(self.headers),
                   'namespaces': list(self._namespaces)}
        )
        return Node(name="rss", attrs=attrs, children=[Node(name="channel", children=channel)])

    def render(self, indent: Union[str, bool, None] = None) -> str:
        """
        Generate the RSS document

        Args:
            indent: String used per nesting level, a falsy value for compact
                output, ``None`` for the configured default

        Returns:
            XML text including the declaration
        """
        settings = get_settings()
        if indent is None:
            indent = settings.indent
        return render_tree(self.build(), indent=indent, declaration=settings.xml_declaration)


def create_feed(headers: Optional[Mapping[str, Any]] = None,
                registry: Optional[EncoderRegistry] = None) -> Feed:
    """Create a Feed for the given channel headers"""
    return Feed(headers, registry=registry)
