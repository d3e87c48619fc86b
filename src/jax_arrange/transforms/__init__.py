"""
JAX-based affine matrix builders.

This module provides pure implementations of:
- identity, scale, translation and skew matrices (affine module)
- single-axis and combined rotations (rotation module)
- placement on the sides of a regular polygon (polygon module)

Every builder returns a 4x4 homogeneous matrix with bottom row [0, 0, 0, 1].
Angles are in degrees.
"""

from . import affine
from . import rotation
from . import polygon

from .affine import identity, scale, translate, skew, compose, apply, is_affine
from .rotation import rotate_x, rotate_y, rotate_z, rotate
from .polygon import (
    side_length,
    total_interior_degrees,
    place_on_polygon_side,
    place_on_polygon_side_with_z_offset,
)

__all__ = [
    "affine",
    "rotation",
    "polygon",
    "identity",
    "scale",
    "translate",
    "skew",
    "compose",
    "apply",
    "is_affine",
    "rotate_x",
    "rotate_y",
    "rotate_z",
    "rotate",
    "side_length",
    "total_interior_degrees",
    "place_on_polygon_side",
    "place_on_polygon_side_with_z_offset",
]
