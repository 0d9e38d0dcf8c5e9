"""Descendant weights for angular sector sizing.

A leaf (any node without children, including empty containers) weighs 1.
An internal node weighs the sum of its children's weights, so a node's own
presence adds nothing: a single-child chain of any length weighs the same as
its single leaf.

Weights are computed in one bottom-up pass so sibling lookups during layout
are O(1) instead of re-walking each subtree.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from json_radial_viz.tree.nodes import JsonNode

__all__ = ["descendant_weight", "descendant_weights", "weights_by_identity"]


def _preorder(root: JsonNode) -> list[JsonNode]:
    order: list[JsonNode] = []
    stack = [root]
    while stack:
        node = stack.pop()
        order.append(node)
        stack.extend(node.children)
    return order


def weights_by_identity(root: JsonNode) -> dict[int, int]:
    """Return ``{id(node): weight}`` for every node under ``root``.

    Keys are object identities, which stay unique even when two nodes share
    a path-derived id. Valid only while ``root`` is alive.
    """
    out: dict[int, int] = {}
    # Descendants follow their ancestor in pre-order, so walking it backwards
    # visits every child before its parent.
    for node in reversed(_preorder(root)):
        if node.children:
            out[id(node)] = sum(out[id(child)] for child in node.children)
        else:
            out[id(node)] = 1
    return out


def descendant_weight(node: JsonNode) -> int:
    """Return the weight of a single node."""
    return weights_by_identity(node)[id(node)]


def descendant_weights(root: JsonNode) -> dict[str, int]:
    """Return ``{node.id: weight}`` for every node under ``root``."""
    by_identity = weights_by_identity(root)
    out: dict[str, int] = {}
    stack = [root]
    while stack:
        node = stack.pop()
        out[node.id] = by_identity[id(node)]
        stack.extend(node.children)
    return out
