"""Deterministic document generators for performance benchmarks.

All generators produce fixed, reproducible documents. No random values.
Three tiers: ~100-node flat, ~1,000-node nested, ~5,000-node deeply nested,
plus a right-skewed tree (each level: one leaf plus one nested subtree) that
would be quadratic if weights were recomputed per sibling.
"""

from __future__ import annotations

import json
from typing import Any

import pytest


def generate_flat_document(num_keys: int) -> dict[str, Any]:
    """Generate a flat object with deterministic string values."""
    return {f"key_{i}": f"value_{i}" for i in range(num_keys)}


def generate_nested_document(sections: int, groups: int, leaves: int) -> dict[str, Any]:
    """Generate sections x groups x leaves, each group also holding an array."""
    doc: dict[str, Any] = {}
    for i in range(sections):
        section: dict[str, Any] = {}
        for j in range(groups):
            group: dict[str, Any] = {f"field_{k}": k for k in range(leaves)}
            group["items"] = [{"id": k, "ok": k % 2 == 0} for k in range(3)]
            section[f"group_{j}"] = group
        doc[f"section_{i}"] = section
    return doc


def generate_skewed_document(depth: int) -> dict[str, Any]:
    """Generate {"leaf": 0, "next": {"leaf": 1, "next": {...}}} ``depth`` levels deep."""
    doc: dict[str, Any] = {"leaf": depth}
    for level in range(depth - 1, -1, -1):
        doc = {"leaf": level, "next": doc}
    return doc


@pytest.fixture
def doc_100_flat() -> str:
    return json.dumps(generate_flat_document(100))


@pytest.fixture
def doc_1000_nested() -> str:
    return json.dumps(generate_nested_document(10, 8, 6))


@pytest.fixture
def doc_5000_nested() -> str:
    return json.dumps(generate_nested_document(25, 16, 6))


@pytest.fixture
def doc_skewed() -> str:
    return json.dumps(generate_skewed_document(200))
