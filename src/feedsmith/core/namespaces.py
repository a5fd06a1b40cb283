"""XML namespaces for RSS extension modules and per-build usage tracking."""

from typing import Dict, Iterable, Iterator, List, Mapping


# Supported extensions
NAMESPACES: Dict[str, str] = {
    "dc": "http://purl.org/dc/elements/1.1/",
    "sy": "http://purl.org/rss/1.0/modules/syndication/",
    "atom": "http://www.w3.org/2005/Atom",
    "slash": "http://purl.org/rss/1.0/modules/slash/",
    "itunes": "http://www.itunes.com/dtds/podcast-1.0.dtd",
    "content": "http://purl.org/rss/1.0/modules/content/",
    "wfw": "http://wellformedweb.org/CommentAPI/",
    "media": "http://search.yahoo.com/mrss/",
    "geo": "http://www.w3.org/2003/01/geo/wgs84_pos#",
}


class NamespaceTracker:
    """Ordered set of namespace prefixes used while encoding fields"""

    def __init__(self, prefixes: Iterable[str] = ()):
        self._prefixes: List[str] = []
        self.update(prefixes)

    def add(self, prefix: str) -> None:
        if prefix not in self._prefixes:
            self._prefixes.append(prefix)

    def update(self, prefixes: Iterable[str]) -> None:
        for prefix in prefixes:
            self.add(prefix)

    def reset(self) -> None:
        self._prefixes.clear()

    def declarations(self, uris: Mapping[str, str]) -> Dict[str, str]:
        """Return ``xmlns:<prefix>`` attributes in first-use order"""
        return {f"xmlns:{prefix}": uris[prefix] for prefix in self._prefixes}

    def __contains__(self, prefix: object) -> bool:
        return prefix in self._prefixes

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._prefixes))

    def __len__(self) -> int:
        return len(self._prefixes)

    def __repr__(self) -> str:
        return f"NamespaceTracker({self._prefixes!r})"
