"""Tests for indexed and cyclic application of transforms to children."""

import jax.numpy as jnp
import numpy as np
import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from jax_arrange import transforms as T
from jax_arrange.arrange import (
    apply_cyclic,
    apply_to_children,
    apply_to_children_with,
    axis_translations,
    linear_step,
    radial_steps,
    spiral_steps,
    step_and_turn,
)
from jax_arrange.render import RecordingRenderer


def positions(events):
    return [np.asarray(T.apply(e.matrix, jnp.zeros(3))) for e in events]


# Function mode
def test_apply_to_children_visits_each_child_once():
    """Test N=4 children get exactly one render call each, in order."""
    renderer = RecordingRenderer(num_children=4)
    count = apply_to_children(renderer, lambda d: T.translate(d, 0.0, 0.0), dist=5.0)

    assert count == 4
    assert [e.index for e in renderer.children()] == [0, 1, 2, 3]
    assert renderer.count_queries == 1


def test_apply_to_children_distances():
    """Test child i receives transform_fn((i + 1) * dist)."""
    renderer = RecordingRenderer(num_children=3)
    apply_to_children(renderer, lambda d: T.translate(0.0, 0.0, d), dist=2.5)

    for i, p in enumerate(positions(renderer.children())):
        np.testing.assert_allclose(p, [0.0, 0.0, (i + 1) * 2.5], atol=1e-12)


def test_apply_to_children_no_children():
    """Test an empty scope renders nothing."""
    renderer = RecordingRenderer(num_children=0)
    assert apply_to_children(renderer, linear_step) == 0
    assert renderer.events == []


@given(st.integers(min_value=0, max_value=20), st.floats(min_value=-10.0, max_value=10.0, allow_nan=False))
@settings(deadline=None, max_examples=20)
def test_apply_to_children_coverage(n, dist):
    """Property test: every child index appears exactly once, ascending."""
    renderer = RecordingRenderer(num_children=n)
    apply_to_children(renderer, linear_step, dist=dist)
    assert [e.index for e in renderer.children()] == list(range(n))


# Fixed-transform mode
def test_apply_to_children_with_applies_extra_last():
    """Test extra @ base_step: the step moves along X, then extra turns it onto Y."""
    renderer = RecordingRenderer(num_children=3)
    apply_to_children_with(renderer, linear_step, T.rotate_z(90), dist=2.0)

    assert [e.index for e in renderer.children()] == [0, 1, 2]
    for i, p in enumerate(positions(renderer.children())):
        np.testing.assert_allclose(p, [0.0, 2.0 * (i + 1), 0.0], atol=1e-12)


def test_apply_to_children_with_matches_explicit_product():
    """Test the rendered matrix is exactly extra @ base_step(dist * (i + 1))."""
    extra = T.compose(T.translate(0.0, 0.0, 4.0), T.scale(2.0, 2.0, 2.0))
    renderer = RecordingRenderer(num_children=2)
    apply_to_children_with(renderer, lambda d: step_and_turn(d, 30.0), extra, dist=3.0)

    for i, e in enumerate(renderer.children()):
        np.testing.assert_array_equal(e.matrix, extra @ step_and_turn(3.0 * (i + 1), 30.0))


# Cyclic mode
def test_apply_cyclic_cycle_boundaries():
    """Test L=3, dist=10: indices 0-2 use 0, 3-5 use 10, index 7 is transforms[1] at 20."""
    palette = [
        lambda d: T.translate(d, 0.0, 0.0),
        lambda d: T.translate(0.0, d, 0.0),
        lambda d: T.translate(0.0, 0.0, d),
    ]
    renderer = RecordingRenderer(num_children=1)
    apply_cyclic(renderer, palette, num_children=8, dist=10.0)

    p = positions(renderer.children())
    for i in range(3):
        np.testing.assert_allclose(p[i], [0.0, 0.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(p[3], [10.0, 0.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(p[4], [0.0, 10.0, 0.0], atol=1e-12)
    np.testing.assert_allclose(p[5], [0.0, 0.0, 10.0], atol=1e-12)
    np.testing.assert_allclose(p[7], [0.0, 20.0, 0.0], atol=1e-12)


def test_apply_cyclic_records_function_and_multiplier():
    """Test the function index and distance passed for each copy."""
    calls = []

    def tracer(k):
        def fn(d):
            calls.append((k, d))
            return T.identity()
        return fn

    renderer = RecordingRenderer(num_children=1)
    apply_cyclic(renderer, [tracer(0), tracer(1), tracer(2)], num_children=8, dist=10.0)

    assert calls == [(0, 0.0), (1, 0.0), (2, 0.0), (0, 10.0), (1, 10.0), (2, 10.0), (0, 20.0), (1, 20.0)]


def test_apply_cyclic_repeats_template_child():
    """Test every copy re-renders the same template child."""
    renderer = RecordingRenderer(num_children=3)
    apply_cyclic(renderer, axis_translations(), num_children=9, dist=1.0, child=2)

    assert len(renderer.children()) == 9
    assert {e.index for e in renderer.children()} == {2}


def test_apply_cyclic_rejects_empty_palette():
    """Test an empty transform array fails before rendering anything."""
    renderer = RecordingRenderer(num_children=1)
    with pytest.raises(ValueError, match="at least one function"):
        apply_cyclic(renderer, [], num_children=4)
    assert renderer.events == []


def test_apply_cyclic_rejects_negative_count():
    """Test a negative copy count is an invalid argument."""
    with pytest.raises(ValueError, match="non-negative"):
        apply_cyclic(RecordingRenderer(num_children=1), axis_translations(), num_children=-1)


def test_axis_translations_cross():
    """Test two passes of the axis palette give the origin six times, then the six arm tips."""
    renderer = RecordingRenderer(num_children=1)
    apply_cyclic(renderer, axis_translations(), num_children=12, dist=10.0)

    p = positions(renderer.children())
    for q in p[:6]:
        np.testing.assert_allclose(q, [0.0, 0.0, 0.0], atol=1e-12)
    expected = [[10, 0, 0], [-10, 0, 0], [0, 10, 0], [0, -10, 0], [0, 0, 10], [0, 0, -10]]
    np.testing.assert_allclose(np.stack(p[6:]), np.array(expected, dtype=float), atol=1e-12)


def test_radial_steps_rings():
    """Test four spokes place the second ring on the axes at radius dist."""
    renderer = RecordingRenderer(num_children=1)
    apply_cyclic(renderer, radial_steps(4, pitch=1.0), num_children=8, dist=5.0)

    p = positions(renderer.children())
    expected = [[5, 0, 0], [0, 5, 1], [-5, 0, 2], [0, -5, 3]]
    np.testing.assert_allclose(np.stack(p[4:]), np.array(expected, dtype=float), atol=1e-12)


def test_radial_steps_rejects_zero_count():
    with pytest.raises(ValueError):
        radial_steps(0)


def test_spiral_steps_radius_grows_per_copy():
    """Test copy i of a four-spoke spiral sits at radius i, turned 90° per copy."""
    renderer = RecordingRenderer(num_children=1)
    apply_cyclic(renderer, spiral_steps(4, pitch=0.5, growth=1.0), num_children=8, dist=4.0)

    p = np.stack(positions(renderer.children()))
    np.testing.assert_allclose(np.linalg.norm(p[:, :2], axis=1), np.arange(8.0), atol=1e-12)
    np.testing.assert_allclose(p[:, 2], [0.5 * (i % 4) for i in range(8)], atol=1e-12)
    np.testing.assert_allclose(p[5], [0.0, 5.0, 0.5], atol=1e-12)


def test_spiral_steps_rejects_zero_count():
    with pytest.raises(ValueError):
        spiral_steps(0)
