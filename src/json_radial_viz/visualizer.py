"""JsonVisualizer: orchestrator that wires TreeBuilder + LayoutEngine + flattener.

This is the central wiring layer between the individual stages and the
public API.  It turns a JSON text into a VisualizationResult holding either
the full render payload or an error message, plus timing data.

Architecture:
- visualize() starts a wall-clock timer, consults the per-instance cache,
  parses the text, lays the tree out, flattens it, and caches the payload.
- Parse errors come back from parse_json() as values and are passed through.
- A RecursionError raised during layout (possible only from an injected
  LayoutEngine; the built-in stages walk with explicit stacks) is reported
  as an error result; no partial payload is ever returned.
- Only successful payloads are cached.  Payloads are immutable, so a cache
  hit returns the same object to every caller.
"""

from __future__ import annotations

import logging
import time
from typing import TYPE_CHECKING

from json_radial_viz.cache import VisualizationCache
from json_radial_viz.graph import extract_edges, flatten_nodes
from json_radial_viz.layout.config import LayoutConfig
from json_radial_viz.layout.radial import RadialLayout
from json_radial_viz.result import VisualizationData, VisualizationResult
from json_radial_viz.transport import decode_json_from_url
from json_radial_viz.tree.builder import TreeBuilder, parse_json

if TYPE_CHECKING:
    from json_radial_viz.protocols import LayoutEngine

__all__ = ["JsonVisualizer"]

logger = logging.getLogger(__name__)

DECODE_ERROR = "Failed to decode JSON from URL"
LAYOUT_ERROR = "JSON is nested too deeply to lay out"


class JsonVisualizer:
    """Orchestrator for JSON text -> render payload.

    Example::

        from json_radial_viz.visualizer import JsonVisualizer

        viz = JsonVisualizer()
        result = viz.visualize('{"a": 1}')
        print(result.ok)                                # True
        print([n.id for n in result.data.nodes])        # ['root', 'root.a']
        print([e.id for e in result.data.edges])        # ['root->root.a']
    """

    def __init__(
        self,
        config: LayoutConfig | None = None,
        layout: LayoutEngine | None = None,
        max_cache_size: int = 128,
    ) -> None:
        """Initialise the visualizer.

        Args:
            config: Spacing parameters for the default ``RadialLayout``.
                Ignored when ``layout`` is given.
            layout: A LayoutEngine-conformant object. Defaults to
                ``RadialLayout(config)``.
            max_cache_size: Maximum number of payloads held in the
                per-instance LRU cache.  This is an infrastructure parameter;
                it is NOT part of ``LayoutConfig``.
        """
        self._layout: LayoutEngine = layout if layout is not None else RadialLayout(config)
        self._builder = TreeBuilder()
        self._cache = VisualizationCache(max_size=max_cache_size)

    @property
    def cache(self) -> VisualizationCache:
        return self._cache

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def visualize(self, text: str) -> VisualizationResult:
        """Parse, lay out and flatten a JSON text.

        Args:
            text: The JSON document, already size-checked and decoded.

        Returns:
            A ``VisualizationResult``; check ``ok`` before using ``data``.
        """
        t0 = time.perf_counter()

        cached = self._cache.get(text) if isinstance(text, str) else None
        if cached is not None:
            logger.debug("Cache hit for %d-character document", len(text))
            return VisualizationResult(data=cached, computation_time_ms=_elapsed_ms(t0))

        parsed = parse_json(text, self._builder)
        if parsed.node is None:
            return VisualizationResult(
                data=VisualizationData.EMPTY,
                error=parsed.error or "Invalid JSON",
                computation_time_ms=_elapsed_ms(t0),
            )

        try:
            positioned = self._layout.compute(parsed.node)
            data = VisualizationData(
                nodes=tuple(flatten_nodes(positioned)),
                edges=tuple(extract_edges(positioned)),
                root_node=positioned,
            )
        except RecursionError:
            logger.warning("Layout failed: recursion limit exhausted")
            return VisualizationResult(
                data=VisualizationData.EMPTY,
                error=LAYOUT_ERROR,
                computation_time_ms=_elapsed_ms(t0),
            )

        self._cache.put(text, data)
        elapsed = _elapsed_ms(t0)
        logger.debug(
            "Visualized %d nodes, %d edges in %.2f ms",
            len(data.nodes),
            len(data.edges),
            elapsed,
        )
        return VisualizationResult(data=data, computation_time_ms=elapsed)

    def visualize_encoded(self, encoded: str) -> VisualizationResult:
        """Decode a URL payload (see ``transport``) and visualize it."""
        t0 = time.perf_counter()
        text = decode_json_from_url(encoded)
        if text is None:
            return VisualizationResult(
                data=VisualizationData.EMPTY,
                error=DECODE_ERROR,
                computation_time_ms=_elapsed_ms(t0),
            )
        return self.visualize(text)


def _elapsed_ms(t0: float) -> float:
    return (time.perf_counter() - t0) * 1000.0
