"""
Encoders for small RSS extension modules

Dublin Core, Syndication, Atom, Content, Slash, WFW CommentAPI and Basic Geo.
Only the elements listed here are supported; each one registers its
namespace on the root element when used.
"""

from typing import Any, List

from ..core.formatting import format_value
from ..core.models import Node
from ..core.registry import extension_field
from .shapes import as_list, require_list_of_url_or_mapping

RSS_MEDIA_TYPE = "application/rss+xml"


# Dublin Core
# http://dublincore.org/documents/2012/06/14/dcmi-terms/?v=elements#

@extension_field("creator", "dc")
def creator(feed, node: List[Node], value: Any) -> None:
    node.append(Node.leaf("dc:creator", format_value(value)))


# Syndication
# http://web.resource.org/rss/1.0/modules/syndication/
# sy:updateBase is not supported

@extension_field("updatePeriod", "sy")
def update_period(feed, node: List[Node], period: Any) -> None:
    node.append(Node.leaf("sy:updatePeriod", format_value(period)))


@extension_field("updateFrequency", "sy")
def update_frequency(feed, node: List[Node], frequency: Any) -> None:
    node.append(Node.leaf("sy:updateFrequency", frequency))


# Atom
# http://tools.ietf.org/html/rfc4287

@extension_field("atomLink", "atom", validator=require_list_of_url_or_mapping)
def atom_link(feed, node: List[Node], links: Any) -> None:
    """
    One or more ``atom:link`` elements

    Links are ``href`` strings or attribute mappings. Self links without a
    type are declared as RSS.
    """
    for link in as_list(links):
        if isinstance(link, str):
            link = {"href": link}
        else:
            link = dict(link or {})

        if link.get("rel") == "self" and not link.get("type"):
            link["type"] = RSS_MEDIA_TYPE

        node.append(Node.element("atom:link", attrs=link))


@extension_field("hub", "atom")
def hub(feed, node: List[Node], url: Any) -> None:
    """Shorthand for a PubSubHubbub ``atom:link``"""
    node.append(Node.element("atom:link", attrs={"rel": "hub", "href": url}))


# Content
# http://web.resource.org/rss/1.0/modules/content/

@extension_field("content", "content")
def content(feed, node: List[Node], body: Any) -> None:
    # escaping happens in the renderer
    node.append(Node.leaf("content:encoded", body))


# Slash
# http://web.resource.org/rss/1.0/modules/slash/

@extension_field("commentCount", "slash")
def comment_count(feed, node: List[Node], count: Any) -> None:
    node.append(Node.leaf("slash:comments", count))


# WFW CommentAPI
# http://bitworking.org/news/2012/08/wfw.html

@extension_field("commentRss", "wfw")
def comment_rss(feed, node: List[Node], url: Any) -> None:
    node.append(Node.leaf("wfw:commentRss", url))


# Basic Geo
# http://www.w3.org/2003/01/geo/

@extension_field("lat", "geo")
def latitude(feed, node: List[Node], value: Any) -> None:
    node.append(Node.leaf("geo:lat", value))


@extension_field("long", "geo")
def longitude(feed, node: List[Node], value: Any) -> None:
    node.append(Node.leaf("geo:long", value))
