"""
Grid quantization and neighbor adjacency for border points.
Maps continuous XZ positions onto 1 × 1 world-unit cells and answers
8-connected occupancy queries in O(1).
"""

import math
from typing import Dict, List, Sequence, Tuple

# Constants
BLOCK_SIZE = 1.0  # 1 × 1 world-unit cells, independent of sampling spacing

Cell = Tuple[int, int]

# Neighbor offsets; bit k of a neighbor mask corresponds to NEIGHBOR_OFFSETS[k]
NEIGHBOR_OFFSETS: List[Cell] = [
    (1, 0),  # E   bit 0
    (1, 1),  # NE  bit 1
    (0, 1),  # N   bit 2
    (-1, 1),  # NW  bit 3
    (-1, 0),  # W   bit 4
    (-1, -1),  # SW  bit 5
    (0, -1),  # S   bit 6
    (1, -1),  # SE  bit 7
]

# E, N, W, S
CARDINAL_BITS = (0, 2, 4, 6)


def quantize(point: Tuple[float, float]) -> Cell:
    """
    Map a continuous (x, z) point to its grid cell.

    Args:
        point: (x, z) position

    Returns:
        (cell_x, cell_z) integer cell coordinates
    """
    return (
        int(math.floor(point[0] / BLOCK_SIZE)),
        int(math.floor(point[1] / BLOCK_SIZE)),
    )


def encode_key(cell: Cell) -> int:
    """
    Pack a cell into a single 64-bit key.

    X occupies the high 32 bits; Z is taken as unsigned 32-bit so negative
    values do not sign-extend into X.
    """
    return (cell[0] << 32) ^ (cell[1] & 0xFFFFFFFF)


def build_cell_index(cells: Sequence[Cell]) -> Dict[int, int]:
    """
    Build an encoded-cell -> point-index lookup.

    When several points quantize to the same cell, the last one wins.

    Args:
        cells: Quantized cell of every sampled point, in border order

    Returns:
        Dictionary mapping encode_key(cell) to the index of the occupying point
    """
    index = {}
    for i, cell in enumerate(cells):
        index[encode_key(cell)] = i
    return index


def build_neighbor_mask(cell: Cell, cell_index: Dict[int, int]) -> int:
    """
    Compute the 8-bit occupancy mask around a cell.

    Args:
        cell: Center cell
        cell_index: Lookup built by build_cell_index

    Returns:
        Mask with bit k set when cell + NEIGHBOR_OFFSETS[k] is occupied
    """
    mask = 0
    for bit, (dx, dz) in enumerate(NEIGHBOR_OFFSETS):
        if encode_key((cell[0] + dx, cell[1] + dz)) in cell_index:
            mask |= 1 << bit
    return mask


def cardinal_neighbor_count(mask: int) -> int:
    """Count occupied E/N/W/S neighbors in a mask."""
    return sum(1 for bit in CARDINAL_BITS if mask & (1 << bit))
