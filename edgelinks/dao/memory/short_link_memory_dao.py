"""In-memory implementation of ShortLinkBaseDAO.

Keeps mappings in a process-local dict. Useful for local runs and tests;
state does not survive the process and is not shared between Lambda
instances.
"""

import threading

from beartype import beartype

from edgelinks.models import ShortLinkModel
from edgelinks.dao.base import ShortLinkBaseDAO
from edgelinks.dao.exceptions import ShortLinkAlreadyExistsError, ShortLinkNotFoundError


class ShortLinkMemoryDAO(ShortLinkBaseDAO):
    """Dict-backed DAO. `insert` holds a lock so the check-and-write is atomic."""

    def __init__(self, links: dict[str, str] | None = None):
        self.links: dict[str, str] = dict(links or {})
        self._lock = threading.Lock()

    @beartype
    def get(self, identifier: str, **kwargs) -> ShortLinkModel:
        target = self.links.get(identifier)
        if target is None:
            raise ShortLinkNotFoundError(f"Short link with identifier '{identifier}' not found.")
        return ShortLinkModel(identifier=identifier, target=target)

    @beartype
    def put(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkMemoryDAO':
        with self._lock:
            self.links[short_link.identifier] = short_link.target
        return self

    @beartype
    def insert(self, short_link: ShortLinkModel, **kwargs) -> 'ShortLinkMemoryDAO':
        with self._lock:
            if short_link.identifier in self.links:
                raise ShortLinkAlreadyExistsError(f"Short link with identifier '{short_link.identifier}' already exists.")
            self.links[short_link.identifier] = short_link.target
        return self
