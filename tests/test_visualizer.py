"""Tests for JsonVisualizer.

Covers:
- Full pipeline output for the reference scenarios
- Parse errors, decode errors and layout failures returned as values
- Payload caching (hits return the same object; errors are not cached)
- Custom LayoutEngine injection
- Timing data
"""

from __future__ import annotations

import dataclasses
import math

import pytest

from json_radial_viz.layout.config import LayoutConfig
from json_radial_viz.result import VisualizationData
from json_radial_viz.transport import encode_json_for_url
from json_radial_viz.tree.nodes import JsonNode, Position
from json_radial_viz.visualizer import DECODE_ERROR, LAYOUT_ERROR, JsonVisualizer

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


class _ShiftLayout:
    """Places every node at (1, 2, 3)."""

    def __init__(self) -> None:
        self.calls = 0

    def compute(self, root: JsonNode) -> JsonNode:
        self.calls += 1
        return self._shift(root)

    def _shift(self, node: JsonNode) -> JsonNode:
        return dataclasses.replace(
            node,
            position=Position(1.0, 2.0, 3.0),
            children=tuple(self._shift(c) for c in node.children),
        )


class _ExplodingLayout:
    def compute(self, root: JsonNode) -> JsonNode:
        raise RecursionError("maximum recursion depth exceeded")


@pytest.fixture
def viz() -> JsonVisualizer:
    return JsonVisualizer()


# ---------------------------------------------------------------------------
# Scenarios
# ---------------------------------------------------------------------------


class TestScenarios:
    def test_single_key_object(self, viz: JsonVisualizer) -> None:
        result = viz.visualize('{"a":1}')
        assert result.ok
        assert [n.id for n in result.data.nodes] == ["root", "root.a"]
        assert [e.id for e in result.data.edges] == ["root->root.a"]
        child = result.data.nodes[1]
        assert child.value == 1
        assert child.depth == 1

    def test_array_of_three(self, viz: JsonVisualizer) -> None:
        result = viz.visualize("[1,2,3]")
        children = result.data.nodes[1:]
        assert [c.key for c in children] == ["[0]", "[1]", "[2]"]
        radii = [math.hypot(c.position.x, c.position.z) for c in children]
        assert radii == pytest.approx([4.5, 4.5, 4.5])
        angles = {round(math.atan2(c.position.z, c.position.x), 9) for c in children}
        assert len(angles) == 3

    def test_malformed(self, viz: JsonVisualizer) -> None:
        result = viz.visualize('"not json')
        assert not result.ok
        assert result.error
        assert result.data is VisualizationData.EMPTY
        assert result.data.root_node is None

    def test_empty_object(self, viz: JsonVisualizer) -> None:
        result = viz.visualize("{}")
        assert len(result.data.nodes) == 1
        assert result.data.edges == ()
        assert result.data.root_node is not None
        assert result.data.root_node.position == Position(0.0, 0.0, 0.0)

    def test_single_child_chain(self, viz: JsonVisualizer) -> None:
        result = viz.visualize('{"a":{"b":{"c":1}}}')
        chain = result.data.nodes[1:]
        angles = [math.atan2(n.position.z, n.position.x) for n in chain]
        assert angles == pytest.approx([angles[0]] * 3)
        assert [n.position.y for n in chain] == pytest.approx([-4.0, -8.0, -12.0])

    def test_root_node_is_first_node(self, viz: JsonVisualizer) -> None:
        result = viz.visualize('{"a": [1, 2]}')
        assert result.data.root_node is result.data.nodes[0]

    def test_deeply_nested_valid_json(self, viz: JsonVisualizer) -> None:
        depth = 600
        result = viz.visualize("[" * depth + "1" + "]" * depth)
        assert result.ok, result.error
        assert len(result.data.nodes) == depth + 1
        assert len(result.data.edges) == depth
        assert result.data.nodes[-1].depth == depth
        payload = result.data.to_dict()
        innermost = payload["rootNode"]
        for _ in range(depth):
            innermost = innermost["children"][0]
        assert innermost["value"] == 1


# ---------------------------------------------------------------------------
# Error paths
# ---------------------------------------------------------------------------


class TestErrors:
    def test_layout_failure_is_error_value(self) -> None:
        result = JsonVisualizer(layout=_ExplodingLayout()).visualize('{"a": 1}')
        assert not result.ok
        assert result.error == LAYOUT_ERROR
        assert result.data is VisualizationData.EMPTY

    def test_bad_encoded_payload(self, viz: JsonVisualizer) -> None:
        result = viz.visualize_encoded("not base64!")
        assert result.error == DECODE_ERROR
        assert result.data.root_node is None

    def test_encoded_payload_with_invalid_json(self, viz: JsonVisualizer) -> None:
        result = viz.visualize_encoded(encode_json_for_url("{oops"))
        assert not result.ok
        assert result.error

    def test_errors_not_cached(self, viz: JsonVisualizer) -> None:
        viz.visualize("{oops")
        assert viz.cache.curr_size == 0


# ---------------------------------------------------------------------------
# Caching, injection, config
# ---------------------------------------------------------------------------


class TestCaching:
    def test_second_call_served_from_cache(self) -> None:
        layout = _ShiftLayout()
        viz = JsonVisualizer(layout=layout)
        first = viz.visualize('{"a": 1}')
        second = viz.visualize('{"a": 1}')
        assert layout.calls == 1
        assert second.data is first.data

    def test_cache_size_parameter(self) -> None:
        assert JsonVisualizer(max_cache_size=3).cache.max_size == 3

    def test_instances_do_not_share_cache(self) -> None:
        a = JsonVisualizer()
        b = JsonVisualizer()
        a.visualize("[1]")
        assert b.cache.curr_size == 0


class TestConfiguration:
    def test_custom_layout_engine_used(self) -> None:
        result = JsonVisualizer(layout=_ShiftLayout()).visualize("[true]")
        assert all(n.position == Position(1.0, 2.0, 3.0) for n in result.data.nodes)
        assert result.data.edges[0].to_position == Position(1.0, 2.0, 3.0)

    def test_config_applied(self) -> None:
        config = LayoutConfig(horizontal_spacing=1.0, vertical_spacing=10.0, radius_multiplier=2.0)
        result = JsonVisualizer(config=config).visualize('{"a": 1}')
        child = result.data.nodes[1]
        assert child.position.x == pytest.approx(-2.0)
        assert child.position.y == pytest.approx(-10.0)

    def test_encoded_round_trip(self, viz: JsonVisualizer) -> None:
        text = '{"name": "日本", "n": [1, 2]}'
        direct = viz.visualize(text)
        encoded = JsonVisualizer().visualize_encoded(encode_json_for_url(text))
        assert encoded.data == direct.data


class TestTiming:
    def test_timing_is_non_negative(self, viz: JsonVisualizer) -> None:
        assert viz.visualize("[1, 2]").computation_time_ms >= 0.0
        assert viz.visualize("[").computation_time_ms >= 0.0
