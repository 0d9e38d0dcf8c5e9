"""RadialLayout: angular subtree-weighted radial layout in 3D.

Places the root at the origin and every depth level on a concentric ring in
the XZ plane, dropping uniformly along Y per level.

Architecture:
- Each node owns an angular sector ``[start, end)``; the root owns
  ``[0, 2*pi)``.
- A node's sector is split among its children in proportion to their
  descendant weights, consumed left-to-right in child order.
- A child sits at the midpoint angle of its own sector, on the ring of
  radius ``radius_multiplier * (parent.depth + 1) * horizontal_spacing``,
  and ``vertical_spacing`` below its parent.

The critical invariant: ``compute`` never mutates its input.  JsonNode is
frozen, so the positioned tree is rebuilt bottom-up from fresh nodes; the
caller keeps an untouched unpositioned tree.
"""

from __future__ import annotations

import dataclasses
import math

import numpy as np

from json_radial_viz.layout.config import LayoutConfig
from json_radial_viz.layout.weights import weights_by_identity
from json_radial_viz.tree.nodes import ORIGIN, JsonNode, Position

__all__ = ["FULL_CIRCLE", "RadialLayout", "calculate_positions"]

FULL_CIRCLE = 2.0 * math.pi


class RadialLayout:
    """Deterministic radial layout engine.

    Layout is a pure function of (tree structure, configuration): no
    randomness, and identical input yields bit-identical positions.

    Example::

        from json_radial_viz.layout import RadialLayout
        from json_radial_viz.tree import TreeBuilder

        tree = TreeBuilder().build([1, 2, 3])
        positioned = RadialLayout().compute(tree)
        # three children on the radius-4.5 ring, y == -4.0, 120 degrees apart
    """

    def __init__(self, config: LayoutConfig | None = None) -> None:
        """Initialise the engine.

        Args:
            config: Spacing parameters. Defaults to ``LayoutConfig()``
                (horizontal 3, vertical 4, radius multiplier 1.5).
        """
        self._config = config if config is not None else LayoutConfig()

    @property
    def config(self) -> LayoutConfig:
        return self._config

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def compute(self, root: JsonNode) -> JsonNode:
        """Return a positioned copy of ``root``.

        Args:
            root: Unpositioned (or previously positioned) tree.

        Returns:
            A new tree, structurally equal to ``root`` apart from positions.
        """
        weights = weights_by_identity(root)
        return self._place(root, ORIGIN, 0.0, FULL_CIRCLE, weights)

    def compute_sectors(self, root: JsonNode) -> dict[str, tuple[float, float]]:
        """Return the ``(start, end)`` sector allotted to every node, by id.

        The root's sector is ``(0, 2*pi)``. Sectors are the same ones
        ``compute`` uses, exposed for inspection.
        """
        weights = weights_by_identity(root)
        sectors: dict[str, tuple[float, float]] = {root.id: (0.0, FULL_CIRCLE)}
        stack: list[tuple[JsonNode, float, float]] = [(root, 0.0, FULL_CIRCLE)]
        while stack:
            node, start, end = stack.pop()
            if not node.children:
                continue
            bounds, _ = self._split_sector(node, start, end, weights)
            for i, child in enumerate(node.children):
                c_start, c_end = float(bounds[i]), float(bounds[i + 1])
                sectors[child.id] = (c_start, c_end)
                stack.append((child, c_start, c_end))
        return sectors

    def ring_radius(self, depth: int) -> float:
        """Radius of the ring holding the children of a node at ``depth``."""
        cfg = self._config
        return cfg.radius_multiplier * (depth + 1) * cfg.horizontal_spacing

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------

    def _place(
        self,
        root: JsonNode,
        position: Position,
        angle_start: float,
        angle_end: float,
        weights: dict[int, int],
    ) -> JsonNode:
        """Rebuild ``root`` at ``position`` with its subtree placed in its sector.

        Positions are assigned top-down in pre-order, then the tree is
        reassembled bottom-up, using explicit stacks throughout.
        """
        # (node, position, index of parent in ``placed``)
        placed: list[tuple[JsonNode, Position, int]] = []
        stack: list[tuple[JsonNode, Position, float, float, int]] = [
            (root, position, angle_start, angle_end, -1)
        ]
        while stack:
            node, pos, start, end, parent = stack.pop()
            index = len(placed)
            placed.append((node, pos, parent))
            if not node.children:
                continue

            bounds, shares = self._split_sector(node, start, end, weights)
            angles = bounds[:-1] + shares / 2.0

            radius = self.ring_radius(node.depth)
            xs = np.cos(angles) * radius
            zs = np.sin(angles) * radius
            child_y = pos.y - self._config.vertical_spacing

            for i in range(len(node.children) - 1, -1, -1):
                stack.append(
                    (
                        node.children[i],
                        Position(x=float(xs[i]), y=child_y, z=float(zs[i])),
                        float(bounds[i]),
                        float(bounds[i + 1]),
                        index,
                    )
                )

        rebuilt: list[list[JsonNode]] = [[] for _ in placed]
        result = root
        for index in range(len(placed) - 1, -1, -1):
            node, pos, parent = placed[index]
            kids = rebuilt[index]
            kids.reverse()
            positioned = dataclasses.replace(node, position=pos, children=tuple(kids))
            if parent < 0:
                result = positioned
            else:
                rebuilt[parent].append(positioned)
        return result

    @staticmethod
    def _split_sector(
        node: JsonNode,
        angle_start: float,
        angle_end: float,
        weights: dict[int, int],
    ) -> tuple[np.ndarray, np.ndarray]:
        """Split ``[angle_start, angle_end)`` among ``node``'s children.

        Returns:
            ``(bounds, shares)``: ``len(children) + 1`` boundaries, child ``i``
            owning ``[bounds[i], bounds[i + 1])``, and the per-child angular
            widths. Boundaries are accumulated left-to-right from
            ``angle_start``.
        """
        child_weights = np.array(
            [weights[id(child)] for child in node.children], dtype=np.float64
        )
        shares = (angle_end - angle_start) * (child_weights / child_weights.sum())
        bounds = np.cumsum(np.concatenate(([angle_start], shares)))
        return bounds, shares


def calculate_positions(root: JsonNode, config: LayoutConfig | None = None) -> JsonNode:
    """Return a positioned copy of ``root`` using ``RadialLayout(config)``."""
    return RadialLayout(config).compute(root)
