"""
Zone border node generation.

Composes bounds resolution, perimeter sampling, grid adjacency and corner
classification into an ordered, closed loop of annotated border nodes that a
tile placement system can instantiate directly.
"""

import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

import shapely.geometry as sg

from . import corners
from . import grid
from . import sampling
from . import zones
from .corners import CornerType

logger = logging.getLogger(__name__)

# Spacing floor; smaller values are clamped up before sampling
MIN_SPACING = 0.5


@dataclass(frozen=True)
class BorderNode:
    """One sampled border point with its placement metadata."""

    position: Tuple[float, float]
    grid_key: Tuple[int, int]
    previous_direction: Tuple[float, float]
    next_direction: Tuple[float, float]
    neighbor_mask: int
    signed_turn: float
    corner_type: CornerType
    rotation_degrees: int

    @property
    def cardinal_neighbor_count(self) -> int:
        return grid.cardinal_neighbor_count(self.neighbor_mask)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "position": list(self.position),
            "grid_key": list(self.grid_key),
            "previous_direction": list(self.previous_direction),
            "next_direction": list(self.next_direction),
            "neighbor_mask": self.neighbor_mask,
            "signed_turn": self.signed_turn,
            "corner_type": self.corner_type.name.lower(),
            "rotation_degrees": self.rotation_degrees,
        }


def build_border_nodes(points: Sequence[Tuple[float, float]]) -> List[BorderNode]:
    """
    Annotate an ordered, implicitly closed point loop.

    Args:
        points: Border points in traversal order, first point not repeated

    Returns:
        One BorderNode per point, in the same order
    """
    count = len(points)
    if count == 0:
        return []

    cells = [grid.quantize(p) for p in points]
    cell_index = grid.build_cell_index(cells)

    nodes = []
    for i in range(count):
        prev = points[(i - 1) % count]
        current = points[i]
        nxt = points[(i + 1) % count]

        prev_dir = corners.normalize_safe((current[0] - prev[0], current[1] - prev[1]))
        next_dir = corners.normalize_safe((nxt[0] - current[0], nxt[1] - current[1]))
        signed_turn = corners.cross(prev_dir, next_dir)
        mask = grid.build_neighbor_mask(cells[i], cell_index)
        corner_type = corners.classify_corner(mask, signed_turn, prev_dir, next_dir)
        rotation = corners.canonical_rotation_degrees(prev_dir, next_dir, corner_type)

        nodes.append(
            BorderNode(
                position=current,
                grid_key=cells[i],
                previous_direction=prev_dir,
                next_direction=next_dir,
                neighbor_mask=mask,
                signed_turn=signed_turn,
                corner_type=corner_type,
                rotation_degrees=rotation,
            )
        )

    return nodes


def get_zone_border_nodes(
    zone: Optional[zones.ZoneDescription], spacing: float
) -> List[BorderNode]:
    """
    Generate classified border nodes for a zone.

    Rectangle-like zones with positive resolved bounds are sampled along their
    edges; everything else is sampled as a circle.

    Args:
        zone: Zone description (None yields no nodes)
        spacing: Target distance between nodes; clamped to MIN_SPACING

    Returns:
        Ordered, implicitly closed list of BorderNode; empty for a missing
        zone, non-positive or non-finite spacing, or non-finite geometry
    """
    if zone is None or not math.isfinite(spacing) or spacing <= 0:
        return []

    if spacing < MIN_SPACING:
        logger.debug("Clamping border spacing %s to %s", spacing, MIN_SPACING)
        spacing = MIN_SPACING

    bounds = zones.resolve_rectangle_bounds(zone)
    if bounds is not None:
        points = sampling.rectangle_border_points(bounds, spacing)
        path = "rectangle"
    else:
        points = sampling.circle_border_points(zone, spacing)
        path = "circle"

    logger.debug(
        "Sampled %d border points for %s zone via %s path (spacing=%s)",
        len(points),
        zone.shape,
        path,
        spacing,
    )
    return build_border_nodes(points)


def get_zone_border_points(
    zone: Optional[zones.ZoneDescription], spacing: float
) -> List[Tuple[float, float]]:
    """Positions of get_zone_border_nodes, in order."""
    return [node.position for node in get_zone_border_nodes(zone, spacing)]


def border_polygon(
    zone: Optional[zones.ZoneDescription], spacing: float
) -> Optional[sg.Polygon]:
    """
    Build the sampled border outline as a Shapely polygon.

    Returns:
        Polygon through the border points, or None with fewer than 3 points
    """
    points = get_zone_border_points(zone, spacing)
    if len(points) < 3:
        return None
    return sg.Polygon(points)


def border_geojson(
    zone: Optional[zones.ZoneDescription], spacing: float
) -> Optional[Dict[str, Any]]:
    """
    Sampled border outline as a GeoJSON Polygon.

    The ring is closed by repeating the first point, as GeoJSON requires.
    """
    polygon = border_polygon(zone, spacing)
    if polygon is None:
        return None
    return sg.mapping(polygon)


def summarize_nodes(nodes: Sequence[BorderNode]) -> Dict[str, int]:
    """Count nodes per corner type (every type present, zero if unused)."""
    counts = {corner_type.name.lower(): 0 for corner_type in CornerType}
    for node in nodes:
        counts[node.corner_type.name.lower()] += 1
    return counts
