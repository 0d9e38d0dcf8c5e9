"""LayoutEngine Protocol for json-radial-viz's layout extension point.

Defines the structural interface JsonVisualizer needs from a layout engine.
Users can plug in custom engines without inheriting from any base class:
any class with a conformant ``compute`` method passes ``isinstance`` checks.

Example::

    from dataclasses import replace
    from json_radial_viz.protocols import LayoutEngine
    from json_radial_viz.tree import JsonNode

    class FlatLayout:
        def compute(self, root: JsonNode) -> JsonNode:
            # Leave every node at the origin
            return replace(root)

    assert isinstance(FlatLayout(), LayoutEngine)  # True, structural conformance
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_radial_viz.tree.nodes import JsonNode


@runtime_checkable
class LayoutEngine(Protocol):
    """Structural protocol for layout engines.

    The ``compute`` method must:
    - Accept an unpositioned JsonNode tree.
    - Return a tree with the same ids, types, values and ordering, with
      positions assigned.
    - Leave the input tree unmodified.
    """

    def compute(self, root: JsonNode) -> JsonNode: ...
