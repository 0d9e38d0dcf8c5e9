"""layout subpackage: public API for the radial layout engine.

Provides the layout configuration, the descendant-weight pass, and the
engine itself.  Import from this module (not from sub-modules directly) to
stay on the stable public interface.

Example::

    from json_radial_viz.layout import LayoutConfig, RadialLayout
    from json_radial_viz.tree import TreeBuilder

    engine = RadialLayout(LayoutConfig(horizontal_spacing=5.0))
    positioned = engine.compute(TreeBuilder().build({"a": 1, "b": [2, 3]}))
"""

from __future__ import annotations

from json_radial_viz.layout.config import LayoutConfig
from json_radial_viz.layout.radial import FULL_CIRCLE, RadialLayout, calculate_positions
from json_radial_viz.layout.weights import descendant_weight, descendant_weights

__all__ = [
    "FULL_CIRCLE",
    "LayoutConfig",
    "RadialLayout",
    "calculate_positions",
    "descendant_weight",
    "descendant_weights",
]
