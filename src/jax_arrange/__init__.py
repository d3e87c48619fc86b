"""
JAX Arrange: combinators for composing 3D affine transforms and applying
them, index by index, to the children of a renderer.

This library provides pure JAX builders for 4x4 homogeneous matrices and
three application patterns: per-index, cyclic over a transform palette,
and recursive depth-indexed growth of branching structures.
"""

import jax
jax.config.update("jax_enable_x64", True)

# Import core modules
from . import transforms
from . import core
from . import render
from . import arrange
from . import branching
from . import io

__version__ = "0.1.0"
__all__ = ["transforms", "core", "render", "arrange", "branching", "io"]
