"""VisualizationCache: LRU-backed memo of finished visualization payloads.

The pipeline is a pure function of (JSON text, layout configuration), and
every payload is immutable, so a finished VisualizationData can be handed
out again for the same text without copying.  LRU eviction occurs silently
when ``max_size`` is exceeded; no error is raised.

Each ``VisualizationCache`` instance maintains its own ``LRUCache``; there
is no class-level shared state, so two separate instances never interfere
with each other.  The cache is keyed by text only; a cache belongs to one
JsonVisualizer and therefore to one layout configuration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cachetools import LRUCache

if TYPE_CHECKING:
    from json_radial_viz.result import VisualizationData

__all__ = ["VisualizationCache"]


class VisualizationCache:
    """LRU cache of VisualizationData keyed by JSON text.

    Args:
        max_size: Maximum number of payloads to hold in memory. Defaults to
            128. When exceeded, the least-recently-used entry is silently
            evicted.
    """

    def __init__(self, max_size: int = 128) -> None:
        if max_size < 1:
            msg = f"max_size must be >= 1, got {max_size}"
            raise ValueError(msg)
        self._cache: LRUCache[str, VisualizationData] = LRUCache(maxsize=max_size)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def max_size(self) -> int:
        """The maximum number of entries this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of entries stored in the cache."""
        return int(self._cache.currsize)

    # ------------------------------------------------------------------
    # Mapping surface
    # ------------------------------------------------------------------

    def __contains__(self, text: object) -> bool:
        return text in self._cache

    def get(self, text: str) -> VisualizationData | None:
        """Return the cached payload for ``text`` (marking it recently used), or None."""
        return self._cache.get(text)

    def put(self, text: str, data: VisualizationData) -> None:
        self._cache[text] = data

    def clear(self) -> None:
        self._cache.clear()
