"""Placement of objects on the sides of a regular polygon prism.

A regular `sides`-gon of circumradius `radius` is centred on the Z axis with
its first vertex on +X. Side `k` runs from vertex `k` to vertex `k + 1`
counter-clockwise.
"""

import math

import jax
import jax.numpy as jnp

from .affine import compose, translate
from .rotation import rotate_z

Array = jax.Array


def _check_sides(sides) -> None:
    if sides < 1:
        raise ValueError(f"a polygon needs at least one side, got sides={sides}")


def side_length(height, sides) -> float:
    """Length of one side of a regular polygon with circumradius `height`."""
    _check_sides(sides)
    return 2.0 * height * math.sin(math.radians(180.0 / sides))


def total_interior_degrees(sides) -> float:
    """Sum of the interior angles of a polygon, in degrees."""
    _check_sides(sides)
    return 180.0 * (sides - 2)


def place_on_polygon_side(side_number, sides, radius) -> Array:
    """
    Matrix that centres an object on one side of a regular polygon prism.

    The object is moved to vertex `side_number`, turned to face along the
    side and shifted half a side length so it sits at the side's midpoint.
    The result is periodic in `side_number` with period `sides`.

    Args:
        side_number: index of the side, any integer
        sides: number of polygon sides (>= 1)
        radius: circumradius of the polygon

    Returns:
        (4, 4) affine matrix

    Raises:
        ValueError: if sides < 1
    """
    _check_sides(sides)
    k = side_number % sides
    vertex_angle = jnp.deg2rad(360.0 / sides * k)
    x = radius * jnp.cos(vertex_angle)
    y = radius * jnp.sin(vertex_angle)
    theta = 360.0 * (0.25 + (k + 0.5) / sides)
    return compose(
        translate(x, y, 0.0),
        rotate_z(theta),
        translate(side_length(radius, sides) / 2.0, 0.0, 0.0),
    )


def place_on_polygon_side_with_z_offset(side_number, sides, radius, z_offset=0.0) -> Array:
    """
    Move an object to vertex `side_number` at height `z_offset` and turn it
    by the vertex angle, without re-centring on the side.

    Raises:
        ValueError: if sides < 1
    """
    _check_sides(sides)
    vertex_angle = jnp.deg2rad(360.0 / sides * (side_number % sides))
    x = radius * jnp.cos(vertex_angle)
    y = radius * jnp.sin(vertex_angle)
    return compose(
        translate(x, y, z_offset),
        rotate_z(side_number * 360.0 / sides),
    )
