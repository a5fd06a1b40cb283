"""
Encoders for core RSS 2.0 elements

Each encoder receives the feed, the node list to append to and the raw
field value. Values without an encoder here are emitted as plain elements
by the registry fallback.

http://www.rssboard.org/rss-profile
"""

from typing import Any, List

from ..core.exceptions import InvalidFieldShapeError
from ..core.formatting import detect_mime_type, format_date
from ..core.models import Node
from ..core.registry import core_field
from .shapes import (
    as_list, format_bool, is_mapping,
    require_list_of_url_or_mapping, require_mapping, require_url_or_mapping,
)


@core_field("pubDate")
def pub_date(feed, node: List[Node], value: Any) -> None:
    """Any date or date formatted string, e.g. ``'2012-01-01 12:34:12 +0000'``"""
    if not value:
        return
    node.append(Node.leaf("pubDate", format_date(value, field="pubDate")))


def _person(value: Any) -> Any:
    """Compose ``email (name)`` from a ``{name, email}`` mapping"""
    if not is_mapping(value):
        return value

    parts = []
    if value.get("email"):
        parts.append(value["email"])
    if value.get("name"):
        parts.append(f"({value['name']})")
    return " ".join(parts)


@core_field("managingEditor")
def managing_editor(feed, node: List[Node], value: Any) -> None:
    node.append(Node.leaf("managingEditor", _person(value)))


@core_field("webMaster")
def web_master(feed, node: List[Node], value: Any) -> None:
    node.append(Node.leaf("webMaster", _person(value)))


@core_field("author")
def author(feed, node: List[Node], value: Any) -> None:
    node.append(Node.leaf("author", _person(value)))


@core_field("category", validator=require_list_of_url_or_mapping)
def category(feed, node: List[Node], categories: Any) -> None:
    """
    A category or a list of categories

    Elements are strings or ``{value, domain}`` mappings; empty elements are
    skipped. Only categories with a domain carry an attribute.
    """
    for entry in as_list(categories):
        if not entry:
            continue

        if is_mapping(entry):
            if entry.get("domain"):
                node.append(Node.element(
                    "category",
                    attrs={"domain": entry["domain"]},
                    text=entry.get("value"),
                ))
                continue
            node.append(Node.leaf("category", entry.get("value") or entry))
            continue

        node.append(Node.leaf("category", entry))


@core_field("cloud", validator=require_mapping)
def cloud(feed, node: List[Node], values: Any) -> None:
    """Every key of the mapping becomes an attribute (domain, path, port, ...)"""
    node.append(Node.element("cloud", attrs=dict(values or {})))


@core_field("image", validator=require_url_or_mapping)
def image(feed, node: List[Node], values: Any) -> None:
    """
    Channel image given as a URL or a mapping of child elements

    Missing ``title`` and ``link`` fall back to the channel's own title and
    link.
    """
    if isinstance(values, str):
        values = {"url": values}
    else:
        values = dict(values or {})

    if not values.get("title") and feed.headers.get("title"):
        values["title"] = feed.headers["title"]

    if not values.get("link") and feed.headers.get("link"):
        values["link"] = feed.headers["link"]

    node.append(Node.element(
        "image",
        children=[Node.leaf(key, value) for key, value in values.items()],
    ))


@core_field("textInput", validator=require_mapping)
def text_input(feed, node: List[Node], values: Any) -> None:
    """Key-value pairs used as sub elements (description, link, name, title)"""
    node.append(Node.element(
        "textInput",
        children=[Node.leaf(key, value) for key, value in (values or {}).items()],
    ))


@core_field("guid")
def guid(feed, node: List[Node], value: Any) -> None:
    """A string or a ``{value, isPermaLink}`` mapping"""
    if is_mapping(value):
        if isinstance(value.get("isPermaLink"), bool):
            node.append(Node.element(
                "guid",
                attrs={"isPermaLink": format_bool(value["isPermaLink"])},
                text=value.get("value"),
            ))
            return
        node.append(Node.leaf("guid", value.get("value") or value))
        return

    node.append(Node.leaf("guid", value))


def _require_source(name: str, value: Any) -> None:
    if not is_mapping(value) or not value.get("url"):
        raise InvalidFieldShapeError(name, value, reason="expected a mapping with a url")


@core_field("source", validator=_require_source)
def source(feed, node: List[Node], value: Any) -> None:
    """``{url, title}``: the feed the item came from"""
    node.append(Node.element("source", attrs={"url": value["url"]}, text=value.get("title")))


@core_field("enclosure", validator=require_url_or_mapping)
def enclosure(feed, node: List[Node], values: Any) -> None:
    """
    A URL or a ``{url, type, length}`` mapping

    ``length`` defaults to ``"0"`` and ``type`` is guessed from the URL.
    """
    if isinstance(values, str):
        values = {"url": values}
    else:
        values = dict(values or {})

    if not values.get("length"):
        values["length"] = "0"

    if not values.get("type") and values.get("url"):
        values["type"] = detect_mime_type(values["url"])

    node.append(Node.element("enclosure", attrs=values))
