"""Recursive branch generation driven by a depth-indexed transform table.

At every node a trunk is drawn, then each branch descriptor of the DNA places
a child subtree at the trunk's tip. The transform and label used at depth
`n` come from `table[depth_index(n, len(table))]`: depths beyond the end of
the table reuse its last entry, so an entry added to the table also governs
every deeper level.
"""

import logging
import numbers
from typing import Dict, Optional, Sequence

import jax

from .core import BranchDescriptor, DepthEntry, DepthTransform, TreeModel
from .render import Renderer
from .transforms import compose, identity, rotate, translate

Array = jax.Array

logger = logging.getLogger(__name__)

TRUNK = "cylinder"
LEAF = "sphere"
TRUNK_RADIUS_RATIO = 0.1
LEAF_RADIUS_RATIO = 0.25


def branch_transform(size, angle_x, angle_z) -> Array:
    """Move to the tip of a trunk of length `size`, tilt by `angle_x` and
    spin about the trunk axis by `angle_z`."""
    return compose(translate(0.0, 0.0, size), rotate(angle_x, 0.0, angle_z))


def leaf_transform(size, angle_x, angle_z) -> Array:
    """Like `branch_transform` but splayed twice as wide."""
    return compose(translate(0.0, 0.0, size), rotate(2.0 * angle_x, 0.0, angle_z))


DEPTH_TRANSFORMS: Dict[str, DepthTransform] = {
    "branch": branch_transform,
    "leaf": leaf_transform,
}


def depth_index(n: int, table_length: int) -> int:
    """Clamp a depth into [0, table_length - 1]."""
    return min(max(n, 0), table_length - 1)


def select_entry(table: Sequence[DepthEntry], n: int) -> DepthEntry:
    """Depth table entry used for the branches emitted at depth `n`."""
    return table[depth_index(n, len(table))]


def grow(
    renderer: Renderer,
    size: float,
    dna: Sequence[BranchDescriptor],
    n: int,
    table: Sequence[DepthEntry],
    frame: Optional[Array] = None,
) -> int:
    """Grow a branching structure of depth `n`.

    Emission is pre-order: a node's trunk comes before its branches, and each
    branch is fully grown before its next sibling. Every primitive is emitted
    once with the product of all transforms above it.

    Args:
        renderer: collaborator receiving the trunk and leaf primitives
        size: trunk length at this node
        dna: branch descriptors repeated at every node
        n: remaining recursion depth (>= 0)
        table: non-empty depth table
        frame: matrix placing this node (identity by default)

    Returns:
        Number of primitives emitted

    Raises:
        ValueError: if `n` is not a non-negative integer or `table` is empty
    """
    if isinstance(n, bool) or not isinstance(n, numbers.Integral):
        raise ValueError(f"depth must be an integer, got {n!r}")
    if n < 0:
        raise ValueError(f"depth must be non-negative, got {n}")
    if len(table) == 0:
        raise ValueError("depth table must contain at least one entry")

    logger.debug("growing tree: size=%s depth=%d branches=%d table=%d", size, n, len(dna), len(table))
    return _grow(renderer, size, tuple(dna), int(n), tuple(table), identity() if frame is None else frame)


def _grow(renderer, size, dna, n, table, frame) -> int:
    trunk_label = select_entry(table, n + 1).label
    renderer.render_primitive(TRUNK, {"h": size, "r": size * TRUNK_RADIUS_RATIO}, frame, trunk_label)
    emitted = 1

    entry = select_entry(table, n)
    for branch in dna:
        placed = compose(frame, entry.transform(size, branch.angle_x, branch.angle_z))
        if n > 0:
            emitted += _grow(renderer, branch.scale * size, dna, n - 1, table, placed)
        else:
            renderer.render_primitive(LEAF, {"r": branch.scale * size * LEAF_RADIUS_RATIO}, placed, entry.label)
            emitted += 1
    return emitted


def grow_tree(renderer: Renderer, tree: TreeModel, frame: Optional[Array] = None) -> int:
    """Grow a TreeModel, see `grow`."""
    return grow(renderer, tree.size, tree.dna, tree.depth, tree.table, frame)
