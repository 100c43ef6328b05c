"""
Corner classification and canonical tile rotation.

The tile set only has straight, corner and end-cap variants at four discrete
rotations, so near-straight and non-orthogonal turns are treated as straight
and every orientation snaps to the nearest multiple of 90 degrees.
"""

import math
from enum import Enum
from typing import Tuple

from .grid import cardinal_neighbor_count

Vector2 = Tuple[float, float]

ZERO_VECTOR: Vector2 = (0.0, 0.0)

# Classification thresholds
STRAIGHT_TURN_THRESHOLD = 0.05  # |signed turn| below this is straight
OPPOSING_LENGTH_SQ = 0.01  # |prev + next|^2 below this means the directions cancel
ORTHOGONAL_DOT_THRESHOLD = 0.25  # |dot| must be below this to count as a right angle

# Basis vectors shorter than this (squared) fall back to +X
DEGENERATE_BASIS_SQ = 0.001

# Squared lengths at or below this normalize to the zero vector
NORMALIZE_EPSILON_SQ = 0.000001


class CornerType(Enum):
    STRAIGHT = 0
    OUTSIDE_CORNER = 1
    INSIDE_CORNER = 2
    END_CAP = 3


def length_sq(v: Vector2) -> float:
    return v[0] * v[0] + v[1] * v[1]


def dot(a: Vector2, b: Vector2) -> float:
    return a[0] * b[0] + a[1] * b[1]


def cross(a: Vector2, b: Vector2) -> float:
    """Z component of the 2D cross product a × b."""
    return a[0] * b[1] - a[1] * b[0]


def normalize_safe(v: Vector2) -> Vector2:
    """Return v scaled to unit length, or the zero vector if v is (near) zero."""
    lsq = length_sq(v)
    if lsq <= NORMALIZE_EPSILON_SQ:
        return ZERO_VECTOR
    length = math.sqrt(lsq)
    return (v[0] / length, v[1] / length)


def classify_corner(
    neighbor_mask: int,
    signed_turn: float,
    previous_direction: Vector2,
    next_direction: Vector2,
) -> CornerType:
    """
    Classify a border node from its adjacency and local turn.

    Args:
        neighbor_mask: 8-bit neighbor occupancy mask
        signed_turn: Cross product of previous and next direction
        previous_direction: Unit direction arriving at the node
        next_direction: Unit direction leaving the node

    Returns:
        END_CAP with one or no cardinal neighbors; STRAIGHT for shallow,
        reversing or non-orthogonal turns; otherwise INSIDE_CORNER for a
        positive (left) turn and OUTSIDE_CORNER for a negative one
    """
    if cardinal_neighbor_count(neighbor_mask) <= 1:
        return CornerType.END_CAP

    summed = (previous_direction[0] + next_direction[0], previous_direction[1] + next_direction[1])
    if abs(signed_turn) < STRAIGHT_TURN_THRESHOLD or length_sq(summed) < OPPOSING_LENGTH_SQ:
        return CornerType.STRAIGHT

    if abs(dot(previous_direction, next_direction)) >= ORTHOGONAL_DOT_THRESHOLD:
        return CornerType.STRAIGHT

    if signed_turn > 0:
        return CornerType.INSIDE_CORNER
    return CornerType.OUTSIDE_CORNER


def quantize_angle_90(angle_degrees: float) -> int:
    """Snap an angle to the nearest of 0, 90, 180, 270."""
    normalized = angle_degrees % 360.0
    return int(round(normalized / 90.0) * 90) % 360


def canonical_rotation_degrees(
    previous_direction: Vector2,
    next_direction: Vector2,
    corner_type: CornerType,
) -> int:
    """
    Derive the tile rotation for a node.

    Straight pieces and end caps face along the averaged travel direction;
    corners face along the outgoing direction.

    Returns:
        One of 0, 90, 180, 270
    """
    if corner_type in (CornerType.STRAIGHT, CornerType.END_CAP):
        basis = normalize_safe(
            (previous_direction[0] + next_direction[0], previous_direction[1] + next_direction[1])
        )
    else:
        basis = normalize_safe(next_direction)

    if length_sq(basis) < DEGENERATE_BASIS_SQ:
        basis = (1.0, 0.0)

    raw = math.degrees(math.atan2(basis[1], basis[0]))
    return quantize_angle_90(raw)
