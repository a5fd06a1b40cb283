"""
XML rendering for feed node trees

Converts the intermediate ``Node`` tree into ElementTree elements and
serializes them with an XML declaration.
"""

import xml.etree.ElementTree as ET
from typing import Any, List, Optional, Tuple, Union

from .core.formatting import format_value
from .core.logger import get_logger
from .core.models import Node

logger = get_logger('feedsmith.rendering')

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'
DEFAULT_INDENT = "  "


def _to_text(value: Any) -> Optional[str]:
    """Convert an attribute or text value into a string"""
    if value is None:
        return None
    if isinstance(value, bool):
        return "true" if value else "false"
    value = format_value(value)
    return value if isinstance(value, str) else str(value)


def _split_text(text: Any) -> Tuple[Any, List[Node]]:
    """Separate prebuilt subtrees passed as leaf values from plain text"""
    if isinstance(text, Node):
        return None, [text]
    if isinstance(text, (list, tuple)) and text and all(isinstance(item, Node) for item in text):
        return None, list(text)
    return text, []


def _to_element(node: Node, parent: Optional[ET.Element] = None) -> ET.Element:
    if parent is None:
        element = ET.Element(node.name)
    else:
        element = ET.SubElement(parent, node.name)

    for key, value in (node.attrs or {}).items():
        text = _to_text(value)
        if text is not None:
            element.set(key, text)

    text, subtrees = _split_text(node.text)
    element.text = _to_text(text)

    for child in subtrees + list(node.children or []):
        _to_element(child, element)

    return element


def render_tree(node: Node, indent: Union[str, bool, None] = DEFAULT_INDENT, declaration: bool = True) -> str:
    """
    Serialize a node tree to XML text

    Args:
        node: Root node
        indent: String used per nesting level; a falsy value renders compact output
        declaration: Prefix the output with an UTF-8 XML declaration

    Returns:
        XML document as a string
    """
    if indent is True:
        indent = DEFAULT_INDENT

    root = _to_element(node)
    if indent:
        ET.indent(root, space=indent)

    body = ET.tostring(root, encoding="unicode", short_empty_elements=False)
    logger.debug("Rendered <%s> document", node.name, extra={'size': len(body)})

    if not declaration:
        return body

    separator = "\n" if indent else ""
    return XML_DECLARATION + separator + body
