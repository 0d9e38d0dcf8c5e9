"""Tests for the public API functions and top-level exports."""

from __future__ import annotations

import json_radial_viz
from json_radial_viz import (
    LayoutConfig,
    calculate_positions,
    encode_json_for_url,
    extract_edges,
    flatten_nodes,
    parse_json,
    visualize,
    visualize_encoded,
)


class TestExports:
    def test_all_names_importable(self) -> None:
        for name in json_radial_viz.__all__:
            assert hasattr(json_radial_viz, name), name

    def test_version(self) -> None:
        assert json_radial_viz.__version__ == "0.1.0"


class TestVisualize:
    def test_success(self) -> None:
        result = visualize('{"a": [1, 2]}')
        assert result.ok
        assert len(result.data.nodes) == 4
        assert len(result.data.edges) == 3

    def test_error(self) -> None:
        result = visualize("{")
        assert not result.ok
        assert result.data.root_node is None

    def test_config_forwarded(self) -> None:
        result = visualize('{"a": 1}', LayoutConfig(vertical_spacing=2.0))
        assert result.data.nodes[1].position.y == -2.0

    def test_encoded(self) -> None:
        result = visualize_encoded(encode_json_for_url("[null]"))
        assert result.ok
        assert result.data.nodes[1].id == "root.[0]"

    def test_fresh_state_per_call(self) -> None:
        first = visualize("[1]")
        second = visualize("[1]")
        assert first.data == second.data
        assert first.data is not second.data


class TestStageFunctions:
    def test_stages_compose_like_visualize(self) -> None:
        text = '{"a": {"b": [true, null]}, "c": "d"}'
        parsed = parse_json(text)
        assert parsed.node is not None
        positioned = calculate_positions(parsed.node)
        result = visualize(text)
        assert tuple(flatten_nodes(positioned)) == result.data.nodes
        assert tuple(extract_edges(positioned)) == result.data.edges
