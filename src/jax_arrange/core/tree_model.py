"""Immutable records describing a recursively generated branching structure.

A tree is grown from a compact description: the trunk size, the recursion
depth, a DNA (the branch descriptors repeated at every node) and a depth
table that decides which transform and which label apply at each depth.
"""

from typing import Callable, Tuple

import jax
from flax import struct

Array = jax.Array

# (size, angle_x, angle_z) -> (4, 4) affine matrix
DepthTransform = Callable[..., Array]


@struct.dataclass
class BranchDescriptor:
    """One child branch at a tree node.

    Attributes:
        angle_x: inclination of the branch away from its parent, in degrees.
        angle_z: rotation of the branch about the parent's axis, in degrees.
        scale: size of the branch relative to its parent.
    """
    angle_x: float
    angle_z: float
    scale: float


@struct.dataclass
class DepthEntry:
    """Transform and label used at one recursion depth.

    Both fields are static: the transform is a plain callable and the label
    is a display attribute (usually a colour name) handed to the renderer.
    """
    transform: DepthTransform = struct.field(pytree_node=False)
    label: str = struct.field(pytree_node=False)


@struct.dataclass
class TreeModel:
    """Everything needed to grow one tree.

    Attributes:
        size: trunk length at the root.
        depth: number of recursion levels below the root (>= 0).
        dna: branch descriptors applied identically at every node.
        table: depth table, index 0 is used at the leaves.
    """
    size: float
    depth: int = struct.field(pytree_node=False)
    dna: Tuple[BranchDescriptor, ...]
    table: Tuple[DepthEntry, ...] = struct.field(pytree_node=False)
