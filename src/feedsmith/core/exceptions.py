"""
Base exception classes for feedsmith

This module defines the exception hierarchy raised while assembling feeds.
Encoding itself is permissive; only field values whose shape an encoder
cannot work with are reported, at the point the header or entry is added.
"""

from typing import Optional, Dict, Any


class FeedError(Exception):
    """Base exception for all feed-related errors"""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} (Context: {context_str})"
        return self.message


class ConfigurationError(FeedError):
    """Raised when there are configuration-related issues"""

    def __init__(self, message: str, config_key: Optional[str] = None, **kwargs):
        context = kwargs.get('context', {})
        if config_key:
            context['config_key'] = config_key
        super().__init__(message, context)
        self.config_key = config_key


class InvalidFieldShapeError(FeedError):
    """Raised when a field value has a shape its encoder cannot handle"""

    def __init__(self, field: str, value: Optional[Any] = None, reason: Optional[str] = None, **kwargs):
        context = kwargs.get('context', {})
        if reason:
            context['reason'] = reason
        if value is not None:
            context['value'] = repr(value)
        super().__init__(f"invalid field shape for `{field}`", context)
        self.field = field
        self.value = value
        self.reason = reason


class InvalidDateError(FeedError):
    """Raised when a date field cannot be turned into a timestamp"""

    def __init__(self, value: Any, field: Optional[str] = None, **kwargs):
        context = kwargs.get('context', {})
        if field:
            context['field'] = field
        context['value'] = repr(value)
        super().__init__("unparseable date value", context)
        self.field = field
        self.value = value


class UnknownNamespaceError(FeedError):
    """Raised when an extension encoder refers to an unregistered namespace"""

    def __init__(self, namespace: str, **kwargs):
        context = kwargs.get('context', {})
        context['namespace'] = namespace
        super().__init__(f"no URI registered for namespace prefix '{namespace}'", context)
        self.namespace = namespace
