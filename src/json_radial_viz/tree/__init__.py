"""Tree subpackage for JSON-to-tree conversion primitives.

Re-exports the public API for the tree module:
- JsonNode: frozen dataclass representing one JSON value in the tree
- NodeType: StrEnum of the six JSON kinds
- Position: frozen 3D coordinate
- Edge: parent -> child link with snapshotted positions
- TreeBuilder: converts any valid JSON value into a typed JsonNode tree
- parse_json: JSON text -> ParseResult, never raises
"""

from json_radial_viz.tree.builder import TreeBuilder, parse_json
from json_radial_viz.tree.nodes import Edge, JsonNode, NodeType, Position, display_value

__all__ = [
    "Edge",
    "JsonNode",
    "NodeType",
    "Position",
    "TreeBuilder",
    "display_value",
    "parse_json",
]
