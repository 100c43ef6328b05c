"""
Zone descriptions and bounds resolution.

A zone is either rectangle-like (Rectangle, Rect, Square, Box) or treated as a
circle. Rectangle-like zones resolve to concrete bounds; anything that cannot
resolve to a positive-area rectangle falls back to the circle path.
"""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

# Shape tags that sample as rectangles (compared case-insensitively)
RECTANGLE_SHAPES = ("rectangle", "rect", "square", "box")

# Bounds with every component below this magnitude count as "unset"
BOUNDS_TOLERANCE = 0.001

# Smallest half-width / radius used for radius-derived geometry
MIN_RADIUS = 1.0


@dataclass(frozen=True)
class ZoneDescription:
    """
    Immutable zone boundary description.

    Attributes:
        shape: Shape tag ("Circle", "Rectangle", "Rect", "Square", "Box")
        center_x: Zone center X (world units)
        center_z: Zone center Z (world units)
        radius: Circle radius, or half-width when a rectangle has no bounds
        min_x, max_x, min_z, max_z: Optional explicit rectangle bounds
    """

    shape: Optional[str] = "Circle"
    center_x: float = 0.0
    center_z: float = 0.0
    radius: float = 0.0
    min_x: float = 0.0
    max_x: float = 0.0
    min_z: float = 0.0
    max_z: float = 0.0

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ZoneDescription":
        """
        Build a zone from a JSON-style mapping.

        Accepts snake_case keys (center_x, min_x, ...) as well as the
        camelCase spellings used by zone definition files (centerX, minX, ...).

        Raises:
            ValueError: If a numeric field cannot be converted to float
        """
        def _number(snake: str, camel: str) -> float:
            value = data.get(snake, data.get(camel, 0.0))
            if value is None:
                return 0.0
            try:
                return float(value)
            except (TypeError, ValueError) as e:
                raise ValueError(f"Zone field '{snake}' must be numeric, got {value!r}") from e

        return cls(
            shape=data.get("shape", data.get("Shape", "Circle")),
            center_x=_number("center_x", "centerX"),
            center_z=_number("center_z", "centerZ"),
            radius=_number("radius", "Radius"),
            min_x=_number("min_x", "minX"),
            max_x=_number("max_x", "maxX"),
            min_z=_number("min_z", "minZ"),
            max_z=_number("max_z", "maxZ"),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "shape": self.shape,
            "center_x": self.center_x,
            "center_z": self.center_z,
            "radius": self.radius,
            "min_x": self.min_x,
            "max_x": self.max_x,
            "min_z": self.min_z,
            "max_z": self.max_z,
        }


@dataclass(frozen=True)
class RectangleBounds:
    """Axis-aligned rectangle on the XZ plane."""

    min_x: float
    max_x: float
    min_z: float
    max_z: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def depth(self) -> float:
        return self.max_z - self.min_z


def is_rectangle_like(shape: Optional[str]) -> bool:
    """Return True if the shape tag samples as a rectangle."""
    return (shape or "").strip().lower() in RECTANGLE_SHAPES


def has_explicit_bounds(zone: ZoneDescription) -> bool:
    """Return True unless all four bound fields are (near) zero."""
    return not all(
        abs(value) < BOUNDS_TOLERANCE
        for value in (zone.min_x, zone.max_x, zone.min_z, zone.max_z)
    )


def resolve_rectangle_bounds(zone: ZoneDescription) -> Optional[RectangleBounds]:
    """
    Resolve concrete rectangle bounds for a zone.

    Explicit bounds are normalized so min <= max. Rectangle-like zones without
    bounds become a square of half-width max(1, radius) around the center.

    Args:
        zone: Zone description

    Returns:
        RectangleBounds, or None when the zone should be sampled as a circle
        (not rectangle-like, or resolved width/depth not positive)
    """
    if not is_rectangle_like(zone.shape):
        return None

    if has_explicit_bounds(zone):
        bounds = RectangleBounds(
            min_x=min(zone.min_x, zone.max_x),
            max_x=max(zone.min_x, zone.max_x),
            min_z=min(zone.min_z, zone.max_z),
            max_z=max(zone.min_z, zone.max_z),
        )
    else:
        half = max(MIN_RADIUS, zone.radius)
        bounds = RectangleBounds(
            min_x=zone.center_x - half,
            max_x=zone.center_x + half,
            min_z=zone.center_z - half,
            max_z=zone.center_z + half,
        )

    if bounds.width <= 0 or bounds.depth <= 0:
        return None
    return bounds
