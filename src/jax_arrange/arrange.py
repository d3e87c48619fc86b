"""Indexed application of transforms to the children of a renderer.

Two patterns are provided:

* per-index application: child `i` gets a matrix computed from its position,
  either `transform_fn((i + 1) * dist)` or `extra @ base_step(dist * (i + 1))`;
* cyclic application: a palette of transform functions is cycled over
  `num_children` copies of a single template child, every full pass through
  the palette being pushed `dist` further out.

Each child receives exactly one composed matrix.
"""

import logging
from typing import Callable, List, Sequence

import jax

from .render import Renderer
from .transforms import compose, rotate_z, translate

Array = jax.Array
TransformFunction = Callable[..., Array]

logger = logging.getLogger(__name__)


def apply_to_children(renderer: Renderer, transform_fn: TransformFunction, dist: float = 1.0) -> int:
    """Render every child with `transform_fn((i + 1) * dist)`.

    Args:
        renderer: collaborator owning the children
        transform_fn: maps a distance to a (4, 4) affine matrix
        dist: spacing between consecutive children

    Returns:
        Number of children rendered
    """
    n = renderer.child_count()
    logger.debug("applying %s to %d children (dist=%s)", getattr(transform_fn, "__name__", transform_fn), n, dist)
    for i in range(n):
        renderer.render_child_at(i, transform_fn((i + 1) * dist))
    return n


def apply_to_children_with(
    renderer: Renderer,
    base_step: TransformFunction,
    extra: Array,
    dist: float = 1.0,
) -> int:
    """Render every child with `extra @ base_step(dist * (i + 1))`.

    The per-index step is applied first and the fixed `extra` matrix after it.

    Returns:
        Number of children rendered
    """
    n = renderer.child_count()
    logger.debug("applying fixed transform after %d indexed steps (dist=%s)", n, dist)
    for i in range(n):
        renderer.render_child_at(i, compose(extra, base_step(dist * (i + 1))))
    return n


def apply_cyclic(
    renderer: Renderer,
    transforms: Sequence[TransformFunction],
    num_children: int,
    dist: float = 1.0,
    child: int = 0,
) -> int:
    """Render `num_children` copies of one template child, cycling through
    `transforms`.

    Copy `i` uses `transforms[i % L]` evaluated at `(i // L) * dist`, where L
    is the palette length. The first L copies therefore all use distance 0.

    Args:
        renderer: collaborator owning the template child
        transforms: non-empty palette of transform functions
        num_children: number of copies to render (>= 0)
        dist: distance added on every full pass through the palette
        child: index of the template child

    Returns:
        Number of copies rendered

    Raises:
        ValueError: if `transforms` is empty or `num_children` is negative
    """
    period = len(transforms)
    if period == 0:
        raise ValueError("transform array must contain at least one function")
    if num_children < 0:
        raise ValueError(f"num_children must be non-negative, got {num_children}")

    logger.debug("cycling %d transforms over %d copies of child %d", period, num_children, child)
    for i in range(num_children):
        cycle, func_index = divmod(i, period)
        renderer.render_child_at(child, transforms[func_index](cycle * dist))
    return num_children


# Base steps and palettes
def linear_step(distance) -> Array:
    """Move along +X by `distance`."""
    return translate(distance, 0.0, 0.0)


def step_and_turn(distance, angle=0.0) -> Array:
    """Move along +X by `distance`, then turn about Z by `angle` degrees."""
    return compose(rotate_z(angle), translate(distance, 0.0, 0.0))


def axis_translations() -> List[TransformFunction]:
    """Six axis-aligned translations (+x, -x, +y, -y, +z, -z).

    Cycled with `apply_cyclic` they grow a three-dimensional cross.
    """
    return [
        lambda d: translate(d, 0.0, 0.0),
        lambda d: translate(-d, 0.0, 0.0),
        lambda d: translate(0.0, d, 0.0),
        lambda d: translate(0.0, -d, 0.0),
        lambda d: translate(0.0, 0.0, d),
        lambda d: translate(0.0, 0.0, -d),
    ]


def radial_steps(count: int, pitch: float = 0.0) -> List[TransformFunction]:
    """`count` spokes evenly spaced about Z, spoke k lifted by `k * pitch`.

    Cycled with `apply_cyclic` they grow concentric rings, or a stepped
    helix when `pitch` is non-zero.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")

    def spoke(k):
        return lambda d: compose(translate(0.0, 0.0, k * pitch), rotate_z(360.0 * k / count), translate(d, 0.0, 0.0))

    return [spoke(k) for k in range(count)]


def spiral_steps(count: int, pitch: float = 0.0, growth: float = 1.0) -> List[TransformFunction]:
    """`count` spokes evenly spaced about Z whose radius grows along the turn.

    Spoke k sits at radius `d + k * growth` and height `k * pitch`. Cycled
    with `apply_cyclic(..., dist=count * growth)` consecutive copies step
    outward by `growth`, tracing an Archimedean spiral.
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")

    def spoke(k):
        return lambda d: compose(
            translate(0.0, 0.0, k * pitch), rotate_z(360.0 * k / count), translate(d + k * growth, 0.0, 0.0)
        )

    return [spoke(k) for k in range(count)]
