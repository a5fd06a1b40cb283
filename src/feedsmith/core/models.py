"""Data models for the feed document tree."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional


@dataclass
class Node:
    """
    A named element of the intermediate document tree

    A node is a leaf (``text`` only), an attribute node (``attrs`` only),
    an attribute node carrying text, or a sequence of child nodes that may
    itself carry attributes. The renderer turns the tree into XML.
    """
    name: str
    text: Any = None
    attrs: Optional[Dict[str, Any]] = None
    children: Optional[List["Node"]] = None

    @classmethod
    def leaf(cls, name: str, value: Any) -> "Node":
        """Create a text-only node"""
        return cls(name=name, text=value)

    @classmethod
    def element(cls,
                name: str,
                attrs: Optional[Dict[str, Any]] = None,
                text: Any = None,
                children: Optional[List["Node"]] = None) -> "Node":
        """Create a node with attributes and/or children

        An empty ``children`` list collapses to a bare attribute node.
        """
        return cls(
            name=name,
            text=text,
            attrs=dict(attrs) if attrs is not None else None,
            children=list(children) if children else None,
        )

    def find(self, name: str) -> Optional["Node"]:
        """Return the first direct child with the given name"""
        for child in self.children or []:
            if child.name == name:
                return child
        return None

    def findall(self, name: str) -> List["Node"]:
        """Return all direct children with the given name"""
        return [child for child in self.children or [] if child.name == name]


@dataclass
class FeedEntry:
    """One item of a feed

    ``sort_key`` is derived from the entry's ``pubDate`` when it is added and
    only participates in ordering; it is never rendered on its own.
    """
    fields: Dict[str, Any]
    sort_key: Optional[datetime] = None
    nodes: List[Node] = field(default_factory=list)
    namespaces: List[str] = field(default_factory=list)

    @property
    def has_sort_key(self) -> bool:
        return self.sort_key is not None

    def to_node(self) -> Node:
        """Wrap the encoded fields into an ``item`` element"""
        return Node(name="item", children=list(self.nodes))
