"""
Core components for feedsmith
"""

from .exceptions import (
    FeedError,
    ConfigurationError,
    InvalidFieldShapeError,
    InvalidDateError,
    UnknownNamespaceError
)
from .models import Node, FeedEntry
from .logger import setup_logging, configure_logging, get_logger

__all__ = [
    'FeedError',
    'ConfigurationError',
    'InvalidFieldShapeError',
    'InvalidDateError',
    'UnknownNamespaceError',
    'Node',
    'FeedEntry',
    'setup_logging',
    'configure_logging',
    'get_logger',
]
