"""TreeBuilder: converts any valid JSON value into a typed JsonNode tree.

Converts JSON dicts, lists, and scalar values into a tree of JsonNode
objects. Object children are keyed by property name, array children by
"[index]". Scalar values keep their original Python type in the
JsonNode.value field.

Node ids are built during traversal:
- Root id is its key ("root" by default)
- Each level appends ".{key}" to the parent id

The walk uses an explicit work stack, so nesting depth is bounded only by
what ``json.loads`` accepts, not by Python frames spent here.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from json_radial_viz.result import ParseResult
from json_radial_viz.tree.nodes import JsonNode, NodeType

__all__ = ["JsonValue", "TreeBuilder", "parse_json"]

logger = logging.getLogger(__name__)

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None

ROOT_KEY = "root"
ID_SEPARATOR = "."


def _reject_constant(name: str) -> float:
    # json.loads accepts NaN/Infinity by default; strict JSON does not.
    raise ValueError(f"Unexpected token {name} in JSON")


def _classify(value: Any) -> NodeType:
    """Map a Python JSON value to its NodeType.

    Raises:
        TypeError: If value is not a valid JSON type.
    """
    # bool MUST be checked before int: bool subclasses int in Python
    if isinstance(value, bool):
        return NodeType.BOOLEAN
    if value is None:
        return NodeType.NULL
    if isinstance(value, list):
        return NodeType.ARRAY
    if isinstance(value, dict):
        return NodeType.OBJECT
    if isinstance(value, str):
        return NodeType.STRING
    if isinstance(value, (int, float)):
        return NodeType.NUMBER
    raise TypeError(f"Unsupported JSON value type: {type(value)!r}")


@dataclass(slots=True)
class _Pending:
    """A classified value waiting for its children to be built."""

    key: str
    node_id: str
    node_type: NodeType
    value: Any
    depth: int
    parent_id: str | None
    parent: int


@dataclass
class TreeBuilder:
    """Converts any valid JSON value into a typed JsonNode tree.

    Ids are deterministic functions of the path from the root, so building
    the same value twice yields equal trees.

    Example::
        builder = TreeBuilder()
        tree = builder.build({"a": [1, 2]})
        # tree: OBJECT "root" -> ARRAY "root.a" -> NUMBER "root.a.[0]", "root.a.[1]"
    """

    root_key: str = ROOT_KEY

    def build(
        self,
        value: JsonValue,
        key: str | None = None,
        parent_id: str | None = None,
        depth: int = 0,
    ) -> JsonNode:
        """Convert a JSON value to a JsonNode tree.

        Args:
            value:     Any valid JSON value (dict, list, str, int, float, bool, None).
            key:       Label of this node. Defaults to ``root_key``.
            parent_id: Id of the parent node; None for the root.
            depth:     Depth of this node; 0 for the root.

        Returns:
            A JsonNode tree rooted at the appropriate node type.

        Raises:
            TypeError: If value (or anything nested in it) is not a valid JSON type.
        """
        if key is None:
            key = self.root_key

        # Pass 1: pre-order walk. Every entry records its parent's index, and
        # all descendants of entry i sit at indices greater than i.
        pending: list[_Pending] = []
        stack: list[tuple[Any, str, int]] = [(value, key, -1)]
        while stack:
            item, item_key, parent = stack.pop()
            if parent < 0:
                item_parent_id, item_depth = parent_id, depth
            else:
                owner = pending[parent]
                item_parent_id, item_depth = owner.node_id, owner.depth + 1
            node_id = (
                item_key
                if item_parent_id is None
                else f"{item_parent_id}{ID_SEPARATOR}{item_key}"
            )
            node_type = _classify(item)
            index = len(pending)
            pending.append(
                _Pending(
                    key=item_key,
                    node_id=node_id,
                    node_type=node_type,
                    value=item,
                    depth=item_depth,
                    parent_id=item_parent_id,
                    parent=parent,
                )
            )
            if node_type == NodeType.OBJECT:
                entries = [(child, str(child_key)) for child_key, child in item.items()]
            elif node_type == NodeType.ARRAY:
                entries = [(child, f"[{i}]") for i, child in enumerate(item)]
            else:
                continue
            for child, child_key in reversed(entries):
                stack.append((child, child_key, index))

        # Pass 2: assemble bottom-up; children are finished before their parent.
        children: list[list[JsonNode]] = [[] for _ in pending]
        root: JsonNode | None = None
        for index in range(len(pending) - 1, -1, -1):
            entry = pending[index]
            kids = children[index]
            kids.reverse()
            node = JsonNode(
                id=entry.node_id,
                key=entry.key,
                node_type=entry.node_type,
                value=None if entry.node_type.is_container else entry.value,
                children=tuple(kids),
                depth=entry.depth,
                parent_id=entry.parent_id,
            )
            if entry.parent < 0:
                root = node
            else:
                children[entry.parent].append(node)
        assert root is not None
        return root


def parse_json(text: str, builder: TreeBuilder | None = None) -> ParseResult:
    """Parse a JSON text into a node tree, reporting failures as a value.

    Never raises. Syntax errors, non-standard constants (NaN, Infinity),
    non-string input and nesting deep enough to exhaust the interpreter's
    recursion limit all produce ``ParseResult(node=None, error=message)``.

    Args:
        text:    The JSON document.
        builder: TreeBuilder to use. Defaults to a fresh ``TreeBuilder()``.

    Returns:
        A ParseResult holding either the tree or a non-empty error message.
    """
    builder = builder if builder is not None else TreeBuilder()
    try:
        parsed = json.loads(text, parse_constant=_reject_constant)
        node = builder.build(parsed)
    except json.JSONDecodeError as exc:
        logger.warning("Invalid JSON: %s", exc)
        return ParseResult(node=None, error=str(exc))
    except RecursionError:
        logger.warning("JSON nesting exceeds the recursion limit")
        return ParseResult(node=None, error="JSON is nested too deeply to visualize")
    except (TypeError, ValueError) as exc:
        logger.warning("Invalid JSON: %s", exc)
        return ParseResult(node=None, error=str(exc) or "Invalid JSON")
    return ParseResult(node=node, error=None)
