"""LayoutConfig for the radial layout engine.

LayoutConfig is a frozen (immutable) dataclass holding the three spacing
parameters. Renderer-side names (camelCase and hyphenated forms) are
accepted through ``LayoutConfig.from_mapping``.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, fields
from typing import Any

__all__ = ["LayoutConfig"]

_ALIASES: dict[str, str] = {
    "horizontalSpacing": "horizontal_spacing",
    "spacing-horizontal": "horizontal_spacing",
    "verticalSpacing": "vertical_spacing",
    "spacing-vertical": "vertical_spacing",
    "radiusMultiplier": "radius_multiplier",
    "radius-multiplier": "radius_multiplier",
}


@dataclass(frozen=True, slots=True)
class LayoutConfig:
    """Immutable configuration for RadialLayout.

    Attributes:
        horizontal_spacing: Radial distance unit per depth level (> 0).
        vertical_spacing:   Downward Y drop per depth level (> 0).
        radius_multiplier:  Scales ring radius growth with depth (> 0).
    """

    horizontal_spacing: float = 3.0
    vertical_spacing: float = 4.0
    radius_multiplier: float = 1.5

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                msg = f"{f.name} must be a real number, got {value!r}"
                raise ValueError(msg)
            if not math.isfinite(value) or value <= 0.0:
                msg = f"{f.name} must be a finite number > 0, got {value}"
                raise ValueError(msg)

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any]) -> LayoutConfig:
        """Build a config from user-supplied options.

        Keys may be the field names or their renderer aliases
        (``horizontalSpacing``, ``spacing-horizontal``, ...). ``None`` values
        fall back to the defaults.

        Raises:
            ValueError: On unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for raw_key, value in options.items():
            name = _ALIASES.get(raw_key, raw_key)
            if name not in known:
                msg = f"Unknown layout option: {raw_key!r}"
                raise ValueError(msg)
            if value is not None:
                kwargs[name] = value
        return cls(**kwargs)
