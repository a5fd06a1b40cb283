"""Shared value-shape helpers for field encoders."""

from collections.abc import Mapping
from typing import Any, List

from ..core.exceptions import InvalidFieldShapeError


def as_list(value: Any) -> List[Any]:
    """Normalize a single value or a sequence of values into a list"""
    if value is None:
        return []
    if isinstance(value, (list, tuple)):
        return list(value)
    return [value]


def is_mapping(value: Any) -> bool:
    return isinstance(value, Mapping)


def format_bool(value: bool, true: str = "true", false: str = "false") -> str:
    return true if value else false


def require_mapping(name: str, value: Any) -> None:
    """Value must be a mapping (or absent)"""
    if value is not None and not is_mapping(value):
        raise InvalidFieldShapeError(name, value, reason="expected a mapping")


def require_url_or_mapping(name: str, value: Any) -> None:
    """Value must be a URL string or a mapping (or absent)"""
    if value is not None and not isinstance(value, str) and not is_mapping(value):
        raise InvalidFieldShapeError(name, value, reason="expected a URL string or a mapping")


def require_list_of_url_or_mapping(name: str, value: Any) -> None:
    """Every element must be a string or a mapping; empty elements are ignored"""
    for element in as_list(value):
        if element and not isinstance(element, str) and not is_mapping(element):
            raise InvalidFieldShapeError(name, element, reason="expected strings or mappings")
