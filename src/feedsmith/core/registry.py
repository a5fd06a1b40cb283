"""
Field encoder registry

Holds the name-keyed encoder tables used to turn feed fields into nodes.
Extension encoders belong to an XML namespace and are resolved before
core RSS encoders; fields without an encoder fall back to a single leaf
node carrying the formatted value.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from .exceptions import UnknownNamespaceError
from .formatting import format_value
from .logger import get_logger
from .models import Node
from .namespaces import NAMESPACES, NamespaceTracker

logger = get_logger('feedsmith.registry')

# handler(feed, target, value) appends zero or more nodes to target
Handler = Callable[[Any, List[Node], Any], None]
# validator(name, value) raises InvalidFieldShapeError for unusable shapes
Validator = Callable[[str, Any], None]


@dataclass(frozen=True)
class FieldEncoder:
    """A named encoder, optionally tied to an extension namespace"""
    name: str
    handler: Handler
    namespace: Optional[str] = None
    validator: Optional[Validator] = None

    @property
    def is_extension(self) -> bool:
        return self.namespace is not None

    def validate(self, value: Any) -> None:
        if self.validator is not None:
            self.validator(self.name, value)


class EncoderRegistry:
    """Registry of core and extension field encoders"""

    def __init__(self, namespaces: Optional[Dict[str, str]] = None):
        self._core: Dict[str, FieldEncoder] = {}
        self._extensions: Dict[str, FieldEncoder] = {}
        self._namespaces: Dict[str, str] = dict(NAMESPACES if namespaces is None else namespaces)

    # Registration

    def register_namespace(self, prefix: str, uri: str) -> None:
        self._namespaces[prefix] = uri

    def register_core(self, name: str, handler: Handler, validator: Optional[Validator] = None) -> FieldEncoder:
        encoder = FieldEncoder(name=name, handler=handler, validator=validator)
        self._core[name] = encoder
        return encoder

    def register_extension(self,
                           name: str,
                           namespace: str,
                           handler: Handler,
                           validator: Optional[Validator] = None) -> FieldEncoder:
        if namespace not in self._namespaces:
            raise UnknownNamespaceError(namespace, context={'field': name})
        encoder = FieldEncoder(name=name, handler=handler, namespace=namespace, validator=validator)
        self._extensions[name] = encoder
        return encoder

    def copy(self) -> "EncoderRegistry":
        """Return an independent registry with the same encoders"""
        clone = EncoderRegistry(self._namespaces)
        clone._core = dict(self._core)
        clone._extensions = dict(self._extensions)
        return clone

    # Lookup

    def resolve(self, name: str) -> Optional[FieldEncoder]:
        """Find the encoder for a field, extensions first"""
        return self._extensions.get(name) or self._core.get(name)

    def namespace_uri(self, prefix: str) -> str:
        try:
            return self._namespaces[prefix]
        except KeyError:
            raise UnknownNamespaceError(prefix) from None

    @property
    def namespaces(self) -> Dict[str, str]:
        return dict(self._namespaces)

    @property
    def core_fields(self) -> List[str]:
        return list(self._core)

    @property
    def extension_fields(self) -> List[str]:
        return list(self._extensions)

    def __contains__(self, name: object) -> bool:
        return name in self._extensions or name in self._core

    # Dispatch

    def validate(self, name: str, value: Any) -> None:
        """Check that a value has a shape its encoder can work with"""
        encoder = self.resolve(name)
        if encoder is not None:
            encoder.validate(value)

    def encode(self, feed: Any, target: List[Node], name: str, value: Any, tracker: NamespaceTracker) -> None:
        """
        Encode one field into ``target``

        Args:
            feed: Feed the field belongs to (passed through to handlers)
            target: Node list to append to
            name: Field name
            value: Field value
            tracker: Records namespaces of the extension encoders invoked
        """
        encoder = self._extensions.get(name)
        if encoder is not None:
            tracker.add(encoder.namespace)
            encoder.handler(feed, target, value)
            return

        encoder = self._core.get(name)
        if encoder is not None:
            encoder.handler(feed, target, value)
            return

        logger.debug("No encoder registered for %s, emitting plain element", name, extra={'field': name})
        target.append(Node.leaf(name, format_value(value)))


DEFAULT_REGISTRY = EncoderRegistry()


def core_field(name: str, validator: Optional[Validator] = None, registry: Optional[EncoderRegistry] = None):
    """Decorator registering a core RSS field encoder"""
    def decorator(handler: Handler) -> Handler:
        (registry if registry is not None else DEFAULT_REGISTRY).register_core(name, handler, validator)
        return handler
    return decorator


def extension_field(name: str,
                    namespace: str,
                    validator: Optional[Validator] = None,
                    registry: Optional[EncoderRegistry] = None):
    """Decorator registering a namespaced extension field encoder"""
    def decorator(handler: Handler) -> Handler:
        (registry if registry is not None else DEFAULT_REGISTRY).register_extension(name, namespace, handler, validator)
        return handler
    return decorator
