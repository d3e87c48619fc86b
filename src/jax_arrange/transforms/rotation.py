"""Axis rotations as 4x4 affine matrices in JAX."""

import jax
import jax.numpy as jnp

from .affine import _rows, compose

Array = jax.Array


def _cos_sin(angle):
    theta = jnp.deg2rad(jnp.asarray(angle, dtype=float))
    return jnp.cos(theta), jnp.sin(theta)


def rotate_x(angle=0.0) -> Array:
    """
    Right-handed rotation about the X axis.

    Args:
        angle: rotation angle in degrees

    Returns:
        (..., 4, 4) rotation matrix
    """
    c, s = _cos_sin(angle)
    one, zero = jnp.ones_like(c), jnp.zeros_like(c)
    return _rows([
        [one, zero, zero, zero],
        [zero, c, -s, zero],
        [zero, s, c, zero],
        [zero, zero, zero, one],
    ])


def rotate_y(angle=0.0) -> Array:
    """Right-handed rotation about the Y axis, angle in degrees."""
    c, s = _cos_sin(angle)
    one, zero = jnp.ones_like(c), jnp.zeros_like(c)
    return _rows([
        [c, zero, s, zero],
        [zero, one, zero, zero],
        [-s, zero, c, zero],
        [zero, zero, zero, one],
    ])


def rotate_z(angle=0.0) -> Array:
    """Right-handed rotation about the Z axis, angle in degrees."""
    c, s = _cos_sin(angle)
    one, zero = jnp.ones_like(c), jnp.zeros_like(c)
    return _rows([
        [c, -s, zero, zero],
        [s, c, zero, zero],
        [zero, zero, one, zero],
        [zero, zero, zero, one],
    ])


def rotate(angle_x=0.0, angle_y=0.0, angle_z=0.0) -> Array:
    """
    Combined rotation: rotate about X, then Y, then Z.

    The product is rotate_z(angle_z) @ rotate_y(angle_y) @ rotate_x(angle_x),
    evaluated in exactly that order so the result is bit-identical to
    multiplying the three single-axis matrices by hand.

    Args:
        angle_x, angle_y, angle_z: angles in degrees

    Returns:
        (..., 4, 4) rotation matrix
    """
    return compose(rotate_z(angle_z), rotate_y(angle_y), rotate_x(angle_x))
