"""
Lazily loaded repository descriptor cache.
"""

from __future__ import annotations

import threading
from typing import Callable

from lantana.exceptions import RepositoryError
from lantana.models.descriptors import DescriptorValue
from lantana.utils.logger import get_logger

logger = get_logger(__name__)


class DescriptorCache:
    """
    Holds the repository descriptors once they have been fetched.

    The loader runs at most once successfully. Concurrent first callers block
    on a lock while one of them loads; the others then see its result. A
    failed load leaves the cache empty so the next access tries again.

    Example:
        >>> cache = DescriptorCache(transport.get_repository_descriptors)
        >>> cache.keys()
        ['jcr.repository.name', ...]
    """

    def __init__(self, loader: Callable[[], dict[str, DescriptorValue]]):
        """
        Initialize the cache.

        Args:
            loader: Callable returning the full descriptor mapping
        """
        self._loader = loader
        self._descriptors: dict[str, DescriptorValue] | None = None
        self._lock = threading.Lock()

    @property
    def is_loaded(self) -> bool:
        """Whether the descriptors have been fetched."""
        return self._descriptors is not None

    def load(self) -> dict[str, DescriptorValue]:
        """
        Fetch descriptors unless they are already cached.

        Returns:
            The cached descriptor mapping

        Raises:
            RepositoryError: If the loader fails
        """
        descriptors = self._descriptors
        if descriptors is not None:
            return descriptors

        with self._lock:
            if self._descriptors is None:
                logger.debug("loading repository descriptors")
                try:
                    loaded = self._loader()
                except RepositoryError:
                    raise
                except Exception as e:
                    raise RepositoryError(f"failed to load repository descriptors: {e}") from e
                self._descriptors = {
                    key: list(value) if isinstance(value, list) else value
                    for key, value in loaded.items()
                }
                logger.debug("loaded %d repository descriptors", len(self._descriptors))
            return self._descriptors

    def keys(self) -> list[str]:
        """Get all descriptor keys in the order the transport reported them."""
        return list(self.load().keys())

    def get(self, key: str) -> DescriptorValue | None:
        """Get a descriptor value, or None for an unknown key. Lists are copies."""
        value = self.load().get(key)
        if isinstance(value, list):
            return list(value)
        return value
