"""
iTunes podcast metadata encoder

https://www.apple.com/itunes/podcasts/specs.html

All keys go into an ``itunes`` mapping, for example::

    itunes = {
        "explicit": False,
        "image": "http://www.example.com/image.png",
        "owner": {"name": "My Name", "email": "my.email@example.com"},
        "category": [{"value": "Business", "sub": ["Careers"]}, "Technology"],
    }

Boolean flags are rendered as ``Yes``/``No`` unless they are already strings.
Keys without special handling become ``itunes:<key>`` elements as is.
"""

from typing import Any, List

from ..core.exceptions import InvalidFieldShapeError
from ..core.models import Node
from ..core.registry import extension_field
from .shapes import as_list, format_bool, is_mapping

FLAG_KEYS = ("explicit", "isClosedCaptioned", "complete", "block")


def _category_text(category: Any) -> Any:
    if is_mapping(category):
        return category.get("value") or category.get("name")
    return category


def _categories(categories: Any) -> List[Node]:
    nodes = []
    for category in as_list(categories):
        if not is_mapping(category):
            category = {"value": category}

        subs = [
            Node.element("itunes:category", attrs={"text": _category_text(sub)})
            for sub in as_list(category.get("sub"))
        ]
        nodes.append(Node.element(
            "itunes:category",
            attrs={"text": _category_text(category)},
            children=subs,
        ))
    return nodes


def _owner(owner: Any) -> Node:
    children = []
    if owner.get("name"):
        children.append(Node.leaf("itunes:name", owner["name"]))
    if owner.get("email"):
        children.append(Node.leaf("itunes:email", owner["email"]))
    return Node.element("itunes:owner", children=children)


def validate_itunes(name: str, value: Any) -> None:
    if value is None:
        return
    if not is_mapping(value):
        raise InvalidFieldShapeError(name, value, reason="expected a mapping of podcast keys")

    owner = value.get("owner")
    if owner is not None and not is_mapping(owner):
        raise InvalidFieldShapeError(name, owner, reason="owner must be a mapping with name and email")

    for category in as_list(value.get("category")):
        if is_mapping(category):
            subs = as_list(category.get("sub"))
        else:
            subs = []
        for entry in [category] + subs:
            if isinstance(entry, (list, tuple)):
                raise InvalidFieldShapeError(name, entry, reason="categories must be strings or mappings")


@extension_field("itunes", "itunes", validator=validate_itunes)
def itunes(feed, node: List[Node], values: Any) -> None:
    for key, value in (values or {}).items():
        if key == "category":
            node.extend(_categories(value))

        elif key in FLAG_KEYS:
            if isinstance(value, bool):
                value = format_bool(value, "Yes", "No")
            node.append(Node.leaf(f"itunes:{key}", value))

        elif key == "owner":
            node.append(_owner(value or {}))

        elif key == "image":
            node.append(Node.element("itunes:image", attrs={"href": value}))

        else:
            node.append(Node.leaf(f"itunes:{key}", value))
