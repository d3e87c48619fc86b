"""Affine 4x4 matrix builders in JAX.

This module implements the non-rotational builders (identity, scale,
translation, skew) together with composition and point application. All
functions are pure and return homogeneous matrices whose bottom row is
[0, 0, 0, 1]. Angles are in degrees.
"""

from functools import reduce

import jax
import jax.numpy as jnp
import numpy as np

Array = jax.Array


def _rows(rows) -> Array:
    """Stack a nested list of scalars into a (..., 4, 4) matrix."""
    return jnp.stack(
        [jnp.stack(jnp.broadcast_arrays(*row), axis=-1) for row in rows],
        axis=-2,
    )


def identity() -> Array:
    """4x4 identity, the neutral element of `compose`."""
    return jnp.eye(4)


def scale(sx=1.0, sy=1.0, sz=1.0) -> Array:
    """
    Diagonal scale matrix.

    Args:
        sx, sy, sz: scale factors along each axis (default 1)

    Returns:
        (..., 4, 4) scale matrix
    """
    sx, sy, sz = (jnp.asarray(v, dtype=float) for v in (sx, sy, sz))
    one, zero = jnp.ones_like(sx), jnp.zeros_like(sx)
    return _rows([
        [sx, zero, zero, zero],
        [zero, sy, zero, zero],
        [zero, zero, sz, zero],
        [zero, zero, zero, one],
    ])


def translate(dx=0.0, dy=0.0, dz=0.0) -> Array:
    """
    Identity with the translation column set to (dx, dy, dz, 1).

    Args:
        dx, dy, dz: translation along each axis

    Returns:
        (..., 4, 4) translation matrix
    """
    p = jnp.stack(jnp.broadcast_arrays(*(jnp.asarray(v, dtype=float) for v in (dx, dy, dz))), axis=-1)
    T = jnp.broadcast_to(jnp.eye(4, dtype=p.dtype), p.shape[:-1] + (4, 4))
    return T.at[..., :3, 3].set(p)


def _check_skew_angle(name: str, angle) -> None:
    # tan() has a pole at 90 degrees (mod 180); traced angles are left unchecked
    try:
        a = np.asarray(angle, dtype=float)
    except jax.errors.TracerArrayConversionError:
        return
    r = np.remainder(a - 90.0, 180.0)
    if np.any(np.minimum(r, 180.0 - r) < 1e-12):
        raise ValueError(f"skew angle {name}={angle} is undefined (tan of 90 degrees)")


def skew(xy=0.0, xz=0.0, yx=0.0, yz=0.0, zx=0.0, zy=0.0) -> Array:
    """
    Shear matrix built from the tangents of six angles in degrees.

    The first letter of each argument names the axis being displaced and
    the second the axis it is displaced along, e.g. `xy` shears x as a
    function of y. All angles default to 0, which yields the identity.

    Raises:
        ValueError: if any angle (or any element of a batched angle) is
            90 degrees modulo 180. Angles traced under `jax.jit` are not
            checked.
    """
    angles = dict(xy=xy, xz=xz, yx=yx, yz=yz, zx=zx, zy=zy)
    for name, angle in angles.items():
        _check_skew_angle(name, angle)

    t = {name: jnp.tan(jnp.deg2rad(jnp.asarray(angle, dtype=float))) for name, angle in angles.items()}
    one, zero = jnp.ones_like(t["xy"]), jnp.zeros_like(t["xy"])
    return _rows([
        [one, t["xy"], t["xz"], zero],
        [t["yx"], one, t["yz"], zero],
        [t["zx"], t["zy"], one, zero],
        [zero, zero, zero, one],
    ])


def compose(*matrices: Array) -> Array:
    """
    Multiply matrices left to right: compose(A, B, C) == A @ B @ C.

    To apply A first and then B, use compose(B, A). With no arguments the
    identity is returned.
    """
    if not matrices:
        return identity()
    return reduce(jnp.matmul, matrices)


def apply(M: Array, points: Array) -> Array:
    """
    Apply an affine matrix to points.

    Args:
        M: (..., 4, 4) affine matrix
        points: (..., 3) or (..., N, 3) points to transform

    Returns:
        (..., 3) or (..., N, 3) transformed points
    """
    points = jnp.asarray(points, dtype=float)
    ones = jnp.ones_like(points[..., 0:1])
    points_h = jnp.concatenate([points, ones], axis=-1)
    transformed_h = jnp.einsum("...ij,...j->...i", M, points_h)
    return transformed_h[..., :3]


def is_affine(M: Array) -> bool:
    """True when the bottom row of M is exactly [0, 0, 0, 1]."""
    bottom = jnp.asarray(M)[..., 3, :]
    return bool(jnp.all(bottom == jnp.array([0.0, 0.0, 0.0, 1.0])))
