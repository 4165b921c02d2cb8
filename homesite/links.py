"""
Short-link resolution.
"""

from .errors import NotFound, StoreError
from .models import Link


class LinkRedirector:
    """Map a request path to the target URL of the first matching link."""

    def __init__(self, store, prefix=""):
        self.store = store
        self.prefix = prefix

    def strip_prefix(self, path):
        if not self.prefix:
            return path
        if not path.startswith(self.prefix):
            raise NotFound(f"path {path!r} lacks link prefix {self.prefix!r}")
        return path[len(self.prefix):]

    def resolve(self, path):
        key = self.strip_prefix(path)
        try:
            matches = self.store.query_equal(Link, "path", key, limit=1)
        except StoreError as e:
            raise StoreError(f"finding link {key!r}", e) from e
        if not matches:
            raise NotFound(f"finding link {key!r}: no match")
        return matches[0].url
