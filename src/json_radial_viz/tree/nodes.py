"""JsonNode, Edge, Position and NodeType: the data model shared by every stage.

Provides the immutable value types produced by TreeBuilder, positioned by
RadialLayout and flattened into render lists by the graph module.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from enum import StrEnum, auto
from typing import Any

__all__ = ["Edge", "JsonNode", "NodeType", "Position", "ScalarValue", "display_value"]

# Payload carried by scalar nodes; None for null and for containers.
ScalarValue = str | int | float | bool | None

_DISPLAY_MAX_LENGTH = 20


class NodeType(StrEnum):
    """Enumeration of the six JSON value kinds.

    StrEnum values are the lowercased member names (Python 3.11+):
    - OBJECT  -> "object"  : JSON object {}
    - ARRAY   -> "array"   : JSON array []
    - STRING  -> "string"  : JSON string
    - NUMBER  -> "number"  : JSON number (int or float)
    - BOOLEAN -> "boolean" : true / false
    - NULL    -> "null"    : null
    """

    OBJECT = auto()
    ARRAY = auto()
    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()

    @property
    def is_container(self) -> bool:
        return self in (NodeType.OBJECT, NodeType.ARRAY)


@dataclass(frozen=True, slots=True)
class Position:
    """A point in scene space. Y is up; the radial rings lie in the XZ plane."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def to_dict(self) -> dict[str, float]:
        return {"x": self.x, "y": self.y, "z": self.z}


ORIGIN = Position()


@dataclass(frozen=True, slots=True)
class JsonNode:
    """One JSON value with identity, type, payload, children and a position.

    Attributes:
        id:         Path-derived identifier, "root", "root.a", "root.a.[0]", ...
        key:        Property name, "[i]" for array elements, "root" for the root.
        node_type:  Which JSON kind this value is (see NodeType).
        value:      Scalar payload for STRING/NUMBER/BOOLEAN nodes; None for
                    NULL and for containers.
        children:   Child nodes in key insertion order (objects) or index
                    order (arrays). Empty for scalars.
        position:   Scene coordinate. The origin until RadialLayout runs.
        depth:      0 for the root, parent depth + 1 otherwise.
        parent_id:  Id of the parent node; None for the root.
    """

    id: str
    key: str
    node_type: NodeType
    value: ScalarValue = None
    children: tuple[JsonNode, ...] = field(default_factory=tuple)
    position: Position = ORIGIN
    depth: int = 0
    parent_id: str | None = None

    @property
    def is_container(self) -> bool:
        return self.node_type.is_container

    @property
    def is_leaf(self) -> bool:
        """True when the node has no children (scalars and empty containers)."""
        return not self.children

    def to_dict(self) -> dict[str, Any]:
        """Serialize the subtree using the renderer's camelCase field names."""
        root = self._shallow_dict()
        stack: list[tuple[JsonNode, list[dict[str, Any]]]] = [
            (child, root["children"]) for child in reversed(self.children)
        ]
        while stack:
            node, siblings = stack.pop()
            data = node._shallow_dict()
            siblings.append(data)
            stack.extend((child, data["children"]) for child in reversed(node.children))
        return root

    def _shallow_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "key": self.key,
            "type": str(self.node_type),
            "value": self.value,
            "children": [],
            "position": self.position.to_dict(),
            "depth": self.depth,
            "parentId": self.parent_id,
        }


@dataclass(frozen=True, slots=True)
class Edge:
    """A parent -> child link with snapshotted endpoint positions.

    Attributes:
        id:             "{from_id}->{to_id}".
        from_id:        Id of the parent node.
        to_id:          Id of the child node.
        from_position:  Parent position at extraction time.
        to_position:    Child position at extraction time.
    """

    id: str
    from_id: str
    to_id: str
    from_position: Position
    to_position: Position

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "fromId": self.from_id,
            "toId": self.to_id,
            "fromPosition": self.from_position.to_dict(),
            "toPosition": self.to_position.to_dict(),
        }


def display_value(node: JsonNode, max_length: int = _DISPLAY_MAX_LENGTH) -> str:
    """Return the label a renderer shows for a scalar node.

    JSON null renders as "null" and booleans as "true"/"false". Numbers are
    spelled the way a JavaScript renderer spells them ("1", not "1.0").
    Values longer than ``max_length`` characters are cut and suffixed with
    "...".
    Containers render as their key.
    """
    if node.is_container:
        return node.key
    if node.node_type == NodeType.NULL:
        return "null"
    if node.node_type == NodeType.BOOLEAN:
        text = "true" if node.value else "false"
    elif node.node_type == NodeType.NUMBER and isinstance(node.value, (int, float)):
        text = _format_number(node.value)
    else:
        text = str(node.value)
    if len(text) > max_length:
        return text[:max_length] + "..."
    return text


def _format_number(value: int | float) -> str:
    """Format a number like JavaScript's ``String(number)``."""
    if isinstance(value, int):
        return str(value)
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    # Python switches to exponent form below 1e-4, JavaScript below 1e-6.
    if 1e-6 <= abs(value) < 1e21:
        return f"{Decimal(text):f}"
    mantissa, exponent = text.split("e")
    return f"{mantissa}e{int(exponent):+d}"
