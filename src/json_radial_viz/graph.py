"""Tree flattening and edge extraction for renderers.

Both walks are depth-first pre-order from the root, so ``nodes[0]`` is the
root and edges appear in the order their child nodes are first reached.
An explicit stack is used instead of recursion; children are pushed in
reverse so they pop in their original order.
"""

from __future__ import annotations

from json_radial_viz.tree.nodes import Edge, JsonNode

__all__ = ["edge_id", "extract_edges", "flatten_nodes"]


def edge_id(from_id: str, to_id: str) -> str:
    return f"{from_id}->{to_id}"


def flatten_nodes(root: JsonNode) -> list[JsonNode]:
    """Return every node of the tree exactly once, in DFS pre-order."""
    nodes: list[JsonNode] = []
    stack = [root]
    while stack:
        node = stack.pop()
        nodes.append(node)
        stack.extend(reversed(node.children))
    return nodes


def extract_edges(root: JsonNode) -> list[Edge]:
    """Return one Edge per parent -> child link, in DFS pre-order.

    The edge into a node is emitted when that node is reached, so
    ``edges[i]`` always ends at ``flatten_nodes(root)[i + 1]``.  Positions
    are copied from the nodes as they are now; Position is immutable, so an
    edge never drifts from the snapshot.
    """
    edges: list[Edge] = []
    stack = [(root, child) for child in reversed(root.children)]
    while stack:
        parent, node = stack.pop()
        edges.append(
            Edge(
                id=edge_id(parent.id, node.id),
                from_id=parent.id,
                to_id=node.id,
                from_position=parent.position,
                to_position=node.position,
            )
        )
        stack.extend((node, child) for child in reversed(node.children))
    return edges
