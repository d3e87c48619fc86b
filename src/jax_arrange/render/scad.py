"""Renderer that writes OpenSCAD source.

Each rendered entity becomes a single `multmatrix` statement, so the output
can be pasted into a module body where `children(i)` refers to the module's
own children.
"""

from typing import Any, List, Mapping, Optional

import jax
import numpy as np

Array = jax.Array


def _fmt(value: float) -> str:
    value = float(value)
    if value == 0.0:  # drop the sign of -0.0
        value = 0.0
    return np.format_float_positional(value, precision=6, trim="-")


def format_matrix(matrix: Array) -> str:
    """Render a 4x4 matrix as an OpenSCAD nested vector literal."""
    rows = np.asarray(matrix, dtype=float).reshape(4, 4)
    return "[" + ", ".join("[" + ", ".join(_fmt(v) for v in row) + "]" for row in rows) + "]"


def _format_params(params: Mapping[str, Any]) -> str:
    parts = []
    for name, value in params.items():
        if isinstance(value, str):
            parts.append(f'{name}="{value}"')
        elif isinstance(value, bool):
            parts.append(f"{name}={'true' if value else 'false'}")
        else:
            parts.append(f"{name}={_fmt(value)}")
    return ", ".join(parts)


class ScadRenderer:
    """Collects OpenSCAD statements for the entities it is asked to render."""

    def __init__(self, num_children: int = 0, indent: str = "    "):
        self.num_children = num_children
        self.indent = indent
        self._lines: List[str] = []

    def child_count(self) -> int:
        return self.num_children

    def render_child_at(self, index: int, matrix: Array) -> None:
        if not 0 <= index < self.num_children:
            raise IndexError(f"child index {index} out of range for {self.num_children} children")
        self._lines.append(f"multmatrix({format_matrix(matrix)}) children({index});")

    def render_primitive(self, kind: str, params: Mapping[str, Any], matrix: Array, label: str) -> None:
        self._lines.append(
            f'color("{label}") multmatrix({format_matrix(matrix)}) {kind}({_format_params(params)});'
        )

    def lines(self) -> List[str]:
        return list(self._lines)

    def source(self, module_name: Optional[str] = None) -> str:
        """Accumulated statements, optionally wrapped in a module definition."""
        if module_name is None:
            return "\n".join(self._lines) + ("\n" if self._lines else "")
        body = "".join(f"{self.indent}{line}\n" for line in self._lines)
        return f"module {module_name}() {{\n{body}}}\n"
