"""
feedsmith - RSS 2.0 feed builder

Builds a channel with items from plain key-value mappings and renders it
as XML, including Dublin Core, Syndication, Atom, Content, Slash, WFW,
Geo, iTunes and Media RSS extension elements.
"""

__version__ = "0.1.0"

from .core.exceptions import (
    FeedError,
    ConfigurationError,
    InvalidFieldShapeError,
    InvalidDateError,
    UnknownNamespaceError
)
from .core.feed import Feed, create_feed
from .core.logger import configure_logging, setup_logging
from .core.formatting import format_value, to_timestamp, detect_mime_type
from .core.models import Node, FeedEntry
from .core.namespaces import NAMESPACES, NamespaceTracker
from .core.registry import DEFAULT_REGISTRY, EncoderRegistry, FieldEncoder, core_field, extension_field
from .core.settings import FeedSettings, get_settings, reload_settings
from .rendering import render_tree

__all__ = [
    'Feed',
    'create_feed',
    'Node',
    'FeedEntry',
    'EncoderRegistry',
    'FieldEncoder',
    'DEFAULT_REGISTRY',
    'core_field',
    'extension_field',
    'NAMESPACES',
    'NamespaceTracker',
    'format_value',
    'to_timestamp',
    'detect_mime_type',
    'render_tree',
    'FeedSettings',
    'get_settings',
    'reload_settings',
    'configure_logging',
    'setup_logging',
    'FeedError',
    'ConfigurationError',
    'InvalidFieldShapeError',
    'InvalidDateError',
    'UnknownNamespaceError',
]
