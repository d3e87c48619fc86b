"""I/O utilities for loading tree descriptions.

This module provides functions for parsing XML tree files into the
immutable records used by the branch generator.
"""

from .tree_loader import load_tree, load_tree_string

__all__ = ["load_tree", "load_tree_string"]
