"""
Border point sampling.

Walks a resolved zone boundary and emits evenly spaced points in
counter-clockwise order. The loop is closed by wraparound, never by repeating
the first point.
"""

import math
from typing import List, Tuple

from .zones import MIN_RADIUS, RectangleBounds, ZoneDescription

Point2 = Tuple[float, float]
Point3 = Tuple[float, float, float]

# Minimum number of samples on a circular border
MIN_CIRCLE_STEPS = 8


def _all_finite(*values: float) -> bool:
    return all(math.isfinite(value) for value in values)


def rectangle_border_points(bounds: RectangleBounds, spacing: float) -> List[Point2]:
    """
    Sample the perimeter of a rectangle.

    Corners are visited bottom-left -> bottom-right -> top-right -> top-left.
    Each edge contributes max(1, floor(length / spacing)) points and omits its
    end point, so every corner appears exactly once.

    Args:
        bounds: Resolved rectangle bounds
        spacing: Target distance between points (already clamped)

    Returns:
        Ordered list of (x, z) points
    """
    if not _all_finite(bounds.min_x, bounds.max_x, bounds.min_z, bounds.max_z):
        return []

    width = bounds.width
    depth = bounds.depth
    if width <= 0 or depth <= 0:
        return []

    bottom_left = (bounds.min_x, bounds.min_z)
    bottom_right = (bounds.max_x, bounds.min_z)
    top_right = (bounds.max_x, bounds.max_z)
    top_left = (bounds.min_x, bounds.max_z)

    edges = [
        (bottom_left, (1.0, 0.0), width),
        (bottom_right, (0.0, 1.0), depth),
        (top_right, (-1.0, 0.0), width),
        (top_left, (0.0, -1.0), depth),
    ]

    points = []
    for start, direction, length in edges:
        steps = max(1, int(length / spacing))
        for i in range(steps):
            offset = length * i / steps
            points.append((start[0] + direction[0] * offset, start[1] + direction[1] * offset))
    return points


def circle_border_points(zone: ZoneDescription, spacing: float) -> List[Point2]:
    """
    Sample a circular zone border starting at angle 0.

    Args:
        zone: Zone description (radius clamped to at least 1)
        spacing: Target arc distance between points (already clamped)

    Returns:
        Ordered list of (x, z) points, at least MIN_CIRCLE_STEPS long; empty
        when the center or radius is not finite
    """
    if not _all_finite(zone.center_x, zone.center_z, zone.radius):
        return []

    radius = max(MIN_RADIUS, zone.radius)
    circumference = 2.0 * math.pi * radius
    step_count = max(MIN_CIRCLE_STEPS, int(circumference / spacing))
    step_angle = 2.0 * math.pi / step_count

    points = []
    for i in range(step_count):
        angle = i * step_angle
        points.append(
            (zone.center_x + radius * math.cos(angle), zone.center_z + radius * math.sin(angle))
        )
    return points


def generate_ring_points(
    center_x: float,
    center_y: float,
    center_z: float,
    radius: float,
    spacing: float,
    start_angle_degrees: float = 0.0,
) -> List[Point3]:
    """
    Generate a free-floating ring of 3D points.

    Legacy helper for callers that want raw ring positions rather than
    classified border nodes. Points lie at height center_y.

    Args:
        center_x: Ring center X
        center_y: Ring height
        center_z: Ring center Z
        radius: Ring radius
        spacing: Target arc distance between points
        start_angle_degrees: Angle of the first point

    Returns:
        List of (x, y, z) points; empty when radius or spacing is not positive,
        or when any input is not finite
    """
    if not _all_finite(center_x, center_y, center_z, radius, spacing, start_angle_degrees):
        return []
    if radius <= 0 or spacing <= 0:
        return []

    circumference = 2.0 * math.pi * radius
    step_count = max(1, int(circumference / spacing))
    start_angle = math.radians(start_angle_degrees)
    step_angle = 2.0 * math.pi / step_count

    return [
        (
            center_x + radius * math.cos(start_angle + i * step_angle),
            center_y,
            center_z + radius * math.sin(start_angle + i * step_angle),
        )
        for i in range(step_count)
    ]
