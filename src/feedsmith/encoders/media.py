"""
Media RSS encoder

http://www.rssboard.org/media-rss#media-content

Each media object becomes a ``media:content`` element. Attributes and sub
elements are mixed as keys of the same mapping: known attribute names
(``url``, ``medium``, ...) become attributes, anything else becomes a
``media:<key>`` sub element::

    media = [{
        "url": "http://example.com/assets/1.jpg",
        "medium": "image",
        "title": "Attached image",
        "restriction": {"type": "sharing", "relationship": "deny"},
    }]

Elements with nested sub elements (e.g. ``media:community``) are not supported.
"""

from typing import Any, List

from ..core.formatting import DEFAULT_MIME_TYPE, detect_mime_type, format_value
from ..core.models import Node
from ..core.registry import extension_field
from .shapes import as_list, format_bool, is_mapping, require_list_of_url_or_mapping

ATTRIBUTE_KEYS = frozenset((
    "url",
    "fileSize",
    "type",
    "medium",
    "isDefault",
    "expression",
    "bitrate",
    "samplingrate",
    "channels",
    "duration",
    "height",
    "width",
    "lang",
))


def _sub_element(name: str, value: Any) -> Node:
    if not is_mapping(value):
        return Node.leaf(name, format_value(value))

    attrs = {key: item for key, item in value.items() if key != "value"}
    if value.get("value"):
        return Node.element(name, attrs=attrs, text=value["value"])
    return Node.element(name, attrs=attrs)


def _content(media: Any) -> Node:
    if isinstance(media, str):
        media = {"url": media}
    else:
        media = dict(media or {})

    if not media.get("type"):
        mime_type = detect_mime_type(media.get("url"))
        if mime_type != DEFAULT_MIME_TYPE:
            media["type"] = mime_type

    attrs = {}
    children = []
    for key, value in media.items():
        if key in ATTRIBUTE_KEYS:
            if key == "isDefault" and isinstance(value, bool):
                value = format_bool(value)
            attrs[key] = value
        else:
            children.append(_sub_element(f"media:{key}", value))

    return Node.element("media:content", attrs=attrs, children=children)


@extension_field("media", "media", validator=require_list_of_url_or_mapping)
def media(feed, node: List[Node], items: Any) -> None:
    for item in as_list(items):
        node.append(_content(item))
