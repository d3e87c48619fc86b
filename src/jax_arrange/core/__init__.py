"""Core data structures for jax_arrange.

This module provides the immutable records used by the branch generator.
"""

from .tree_model import BranchDescriptor, DepthEntry, DepthTransform, TreeModel

__all__ = ["BranchDescriptor", "DepthEntry", "DepthTransform", "TreeModel"]
