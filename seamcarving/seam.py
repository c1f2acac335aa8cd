"""
Seam computation and removal.

Seams are found as shortest paths through the implicit SeamGraph: every
node of the top row is a source with distance 0, each node costs its own
energy to enter, and the cheapest node of the bottom row ends the seam.
Only vertical seams are computed here; horizontal seams come from running
the same search on the transposed image.
"""

import logging
import math
from typing import List, Sequence

import torch

from .errors import DegenerateGridError, InvalidSeamError, OutOfRangeError
from .graph import SeamGraph

logger = logging.getLogger(__name__)


def shortest_vertical_seam(weights: torch.Tensor, order: str = 'topological') -> torch.Tensor:
    """
    Compute the minimum-energy vertical seam.

    Relaxation uses a strict comparison, so on ties the first predecessor
    visited wins. Among equally cheap bottom-row pixels the leftmost wins.

    Args:
        weights: Energy map (H, W)
        order: 'topological' (reverse DFS post-order) or 'rows' (row sweep)

    Returns:
        Seam indices (H,) with the column to remove in each row
    """
    H, W = weights.shape
    if H == 0 or W == 0:
        raise DegenerateGridError(f"Cannot find a seam in a {W} x {H} picture")

    graph = SeamGraph(W, H)
    if order == 'topological':
        nodes = graph.topological_order()
    elif order == 'rows':
        nodes = graph.row_order()
    else:
        raise ValueError(f"Invalid order: {order}")

    # Row-major flattening matches node = row * W + col
    weight = weights.flatten().tolist()
    dist_to = [0.0] * W + [math.inf] * (graph.size - W)
    edge_to = [-1] * graph.size

    for u in nodes:
        for v in graph.adjacency(u):
            if dist_to[u] + weight[v] < dist_to[v]:
                dist_to[v] = dist_to[u] + weight[v]
                edge_to[v] = u

    bottom = graph.node(0, H - 1)
    best = bottom
    for v in range(bottom, graph.size):
        if dist_to[v] < dist_to[best]:
            best = v

    seam = torch.zeros(H, dtype=torch.long)
    v = best
    while v >= 0:
        seam[graph.row(v)] = graph.col(v)
        v = edge_to[v]

    logger.debug("Vertical seam in %d x %d grid, cost %.1f", W, H, dist_to[best])
    return seam


def validate_seam(seam: Sequence[int], length: int, bound: int) -> List[int]:
    """
    Check a seam against the grid it will be removed from.

    Args:
        seam: Seam indices (list, array or tensor of ints)
        length: Required number of entries
        bound: Every entry must lie in [0, bound)

    Entries are checked in order. For each entry the range is checked
    before the step from the previous entry, so in [0, 2, 99] with bound 4
    the jump at entry 1 is reported, not the range error at entry 2.

    Returns:
        The seam as a list of Python ints
    """
    indices = []
    for pos, i in enumerate(seam):
        index = int(i)
        if index != i:
            raise InvalidSeamError(f"Seam entry {pos} is {i}, not an integer")
        indices.append(index)

    if len(indices) != length:
        raise InvalidSeamError(f"Seam has {len(indices)} entries, expected {length}")

    for pos, index in enumerate(indices):
        if not 0 <= index < bound:
            raise OutOfRangeError(f"Seam entry {pos} is {index}, outside [0, {bound})")
        if pos > 0 and abs(index - indices[pos - 1]) > 1:
            raise InvalidSeamError(
                f"Non-valid seam: entries {pos - 1} and {pos} jump from {indices[pos - 1]} to {index}")

    return indices


def remove_seam(pixels: torch.Tensor, seam: Sequence[int],
                direction: str = 'vertical') -> torch.Tensor:
    """
    Remove a seam from an image.

    The seam is validated before anything is copied, so a bad seam leaves
    no partial result behind.

    Args:
        pixels: Image tensor (C, H, W)
        seam: For vertical: (H,) column per row
              for horizontal: (W,) row per column
        direction: 'vertical' or 'horizontal'

    Returns:
        New image with one column (vertical) or row (horizontal) removed
    """
    C, H, W = pixels.shape

    if direction == 'vertical':
        if W == 0:
            raise DegenerateGridError("Cannot remove vertical seam from zero-width picture")
        cols = validate_seam(seam, H, W)

        carved = torch.empty(C, H, W - 1, dtype=pixels.dtype)
        for i, col in enumerate(cols):
            carved[:, i, :col] = pixels[:, i, :col]
            carved[:, i, col:] = pixels[:, i, col + 1:]

    elif direction == 'horizontal':
        if H == 0:
            raise DegenerateGridError("Cannot remove horizontal seam from zero-height picture")
        rows = validate_seam(seam, W, H)

        carved = torch.empty(C, H - 1, W, dtype=pixels.dtype)
        for j, row in enumerate(rows):
            carved[:, :row, j] = pixels[:, :row, j]
            carved[:, row:, j] = pixels[:, row + 1:, j]

    else:
        raise ValueError(f"Invalid direction: {direction}")

    return carved
