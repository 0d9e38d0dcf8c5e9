"""Result types returned across the public boundary.

Errors never escape as exceptions: ParseResult and VisualizationResult carry
either a value or a human-readable error message.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

if TYPE_CHECKING:
    from json_radial_viz.tree.nodes import Edge, JsonNode

__all__ = ["ParseResult", "VisualizationData", "VisualizationResult"]


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Outcome of parse_json().

    Attributes:
        node:  The unpositioned tree, or None when parsing failed.
        error: Human-readable message when parsing failed, otherwise None.
    """

    node: JsonNode | None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.node is not None


@dataclass(frozen=True, slots=True)
class VisualizationData:
    """The payload handed to a renderer.

    Attributes:
        nodes:     Every node once, depth-first pre-order from the root.
        edges:     One edge per parent -> child link, same order.
        root_node: The positioned root; None only when no tree was built.
    """

    EMPTY: ClassVar[VisualizationData]

    nodes: tuple[JsonNode, ...] = field(default_factory=tuple)
    edges: tuple[Edge, ...] = field(default_factory=tuple)
    root_node: JsonNode | None = None

    def to_dict(self) -> dict[str, Any]:
        """Serialize for a renderer. Node entries are emitted without children;
        the hierarchy lives in ``rootNode`` and ``edges``."""
        return {
            "nodes": [_flat_node_dict(node) for node in self.nodes],
            "edges": [edge.to_dict() for edge in self.edges],
            "rootNode": self.root_node.to_dict() if self.root_node is not None else None,
        }


VisualizationData.EMPTY = VisualizationData()


def _flat_node_dict(node: JsonNode) -> dict[str, Any]:
    return {
        "id": node.id,
        "key": node.key,
        "type": str(node.node_type),
        "value": node.value,
        "children": [child.id for child in node.children],
        "position": node.position.to_dict(),
        "depth": node.depth,
        "parentId": node.parent_id,
    }


@dataclass(frozen=True, slots=True)
class VisualizationResult:
    """Outcome of a full parse -> layout -> flatten pass.

    Attributes:
        data:                The payload; ``VisualizationData.EMPTY`` on error.
        error:               Human-readable message on failure, otherwise None.
        computation_time_ms: Wall-clock duration of the call in milliseconds.
    """

    data: VisualizationData
    error: str | None = None
    computation_time_ms: float = 0.0

    @property
    def ok(self) -> bool:
        return self.error is None
