"""Public API functions for json-radial-viz.

This module provides the user-facing functions. ``visualize`` and
``visualize_encoded`` create a fresh JsonVisualizer per call to guarantee
zero global state between calls; use a JsonVisualizer directly to keep its
payload cache across calls.
"""

from __future__ import annotations

from json_radial_viz.graph import extract_edges, flatten_nodes
from json_radial_viz.layout.config import LayoutConfig
from json_radial_viz.layout.radial import calculate_positions
from json_radial_viz.result import VisualizationResult
from json_radial_viz.tree.builder import parse_json
from json_radial_viz.visualizer import JsonVisualizer

__all__ = [
    "calculate_positions",
    "extract_edges",
    "flatten_nodes",
    "parse_json",
    "visualize",
    "visualize_encoded",
]


def visualize(text: str, config: LayoutConfig | None = None) -> VisualizationResult:
    """Turn a JSON text into a render payload.

    Args:
        text:   The JSON document.
        config: Layout spacing parameters. Defaults to ``LayoutConfig()``.

    Returns:
        A ``VisualizationResult``: ``data`` holds nodes, edges and the
        positioned root when ``ok``; otherwise ``error`` says what went wrong.
    """
    return JsonVisualizer(config=config).visualize(text)


def visualize_encoded(
    encoded: str,
    config: LayoutConfig | None = None,
) -> VisualizationResult:
    """Like ``visualize`` but for a payload produced by ``encode_json_for_url``."""
    return JsonVisualizer(config=config).visualize_encoded(encoded)
