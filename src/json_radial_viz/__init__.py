"""JSON radial viz - radial 3D layout of JSON documents for rendering."""

from __future__ import annotations

import logging

from json_radial_viz.api import (
    calculate_positions,
    extract_edges,
    flatten_nodes,
    parse_json,
    visualize,
    visualize_encoded,
)
from json_radial_viz.layout.config import LayoutConfig
from json_radial_viz.layout.radial import RadialLayout
from json_radial_viz.result import ParseResult, VisualizationData, VisualizationResult
from json_radial_viz.transport import (
    decode_json_from_url,
    encode_json_for_url,
    validate_json_size,
)
from json_radial_viz.tree.builder import TreeBuilder
from json_radial_viz.tree.nodes import Edge, JsonNode, NodeType, Position
from json_radial_viz.visualizer import JsonVisualizer

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__: str = "0.1.0"
__all__: list[str] = [
    "Edge",
    "JsonNode",
    "JsonVisualizer",
    "LayoutConfig",
    "NodeType",
    "ParseResult",
    "Position",
    "RadialLayout",
    "TreeBuilder",
    "VisualizationData",
    "VisualizationResult",
    "calculate_positions",
    "decode_json_from_url",
    "encode_json_for_url",
    "extract_edges",
    "flatten_nodes",
    "parse_json",
    "validate_json_size",
    "visualize",
    "visualize_encoded",
]
